"""Runtime settings for locale handling.

Settings are read from the environment on first use and cached for the
lifetime of the process.

Environment Variables:
    INTERNATIONALIZE_AVAILABLE_LOCALES: Comma-separated locales (default: "en")
    INTERNATIONALIZE_DEFAULT_LOCALE: Locale used when none is given (default: "en")
    INTERNATIONALIZE_FALLBACK: Fall back to the default locale on reads (default: true)
    INTERNATIONALIZE_TRACE_QUERIES: Force query tracing on or off (default: unset)

Example:
    >>> from internationalize.config import configure, get_settings
    >>> configure(available_locales=["en", "de"], default_locale="en")
    >>> get_settings().available_locales
    ['en', 'de']
"""

import logging
import os
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"

# Settings field -> environment variable
ENV_VARS: Dict[str, str] = {
    "available_locales": "INTERNATIONALIZE_AVAILABLE_LOCALES",
    "default_locale": "INTERNATIONALIZE_DEFAULT_LOCALE",
    "fallback": "INTERNATIONALIZE_FALLBACK",
    "trace_queries": "INTERNATIONALIZE_TRACE_QUERIES",
}


class InternationalizeSettings(BaseModel):
    """Locale configuration shared by queries, helpers and validations."""

    model_config = ConfigDict(extra="forbid")

    available_locales: List[str] = Field(
        default_factory=lambda: [DEFAULT_LOCALE],
        description="Locales that get accessor keys and presence checks",
    )
    default_locale: str = Field(DEFAULT_LOCALE, description="Locale used when none is given")
    fallback: bool = Field(True, description="Read the default locale when a value is missing")
    trace_queries: Optional[bool] = Field(
        None, description="Trace executed queries; unset follows the OTLP exporter configuration"
    )

    @field_validator("available_locales", mode="before")
    @classmethod
    def _normalize_locales(cls, value: Any) -> List[str]:
        if isinstance(value, str):
            value = value.split(",")
        seen: List[str] = []
        for locale in value or []:
            locale = str(getattr(locale, "value", locale)).strip()
            if locale and locale not in seen:
                seen.append(locale)
        return seen

    @field_validator("default_locale", mode="before")
    @classmethod
    def _normalize_default(cls, value: Any) -> str:
        locale = str(getattr(value, "value", value)).strip()
        if not locale:
            raise ValueError("default_locale must not be empty")
        return locale

    @model_validator(mode="after")
    def _include_default_locale(self) -> "InternationalizeSettings":
        if self.default_locale not in self.available_locales:
            self.available_locales.insert(0, self.default_locale)
        return self

    @classmethod
    def from_env(cls) -> "InternationalizeSettings":
        """Build settings from environment variables (and a .env file if present)."""
        load_dotenv()
        values = {
            field: os.environ[var].strip()
            for field, var in ENV_VARS.items()
            if os.environ.get(var, "").strip()
        }
        return cls(**values)


_settings: Optional[InternationalizeSettings] = None


def get_settings() -> InternationalizeSettings:
    """Get or create the process-wide settings instance."""
    global _settings
    if _settings is None:
        _settings = InternationalizeSettings.from_env()
        logger.debug(
            "Loaded locale settings: default=%s available=%s",
            _settings.default_locale,
            _settings.available_locales,
        )
    return _settings


def configure(**overrides: Any) -> InternationalizeSettings:
    """Replace the current settings, keeping values that are not overridden."""
    global _settings
    base = get_settings().model_dump()
    base.update(overrides)
    _settings = InternationalizeSettings(**base)
    return _settings


def reset_settings() -> None:
    """Drop cached settings so the next access re-reads the environment."""
    global _settings
    _settings = None


def resolve_locale(locale: Optional[Any] = None) -> str:
    """Return the given locale as a string, or the configured default."""
    if locale is None:
        return get_settings().default_locale
    return str(getattr(locale, "value", locale))
