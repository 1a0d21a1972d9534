"""Configuration helpers."""

from .settings import (
    InternationalizeSettings,
    configure,
    get_settings,
    reset_settings,
    resolve_locale,
)

__all__ = [
    "InternationalizeSettings",
    "configure",
    "get_settings",
    "reset_settings",
    "resolve_locale",
]
