"""Helpers for reading and writing translation dictionaries.

A translations value is the decoded JSON column: a mapping of locale code
to text. Helpers never mutate their input.
"""

from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional, Union

from internationalize.attributes import TranslatedAttributes, translations_column
from internationalize.config import get_settings, resolve_locale


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def translation_for(translations: Optional[Mapping[str, Any]], locale: Any) -> Optional[Any]:
    """Return the stored value for a locale, without fallback."""
    if not translations:
        return None
    return translations.get(resolve_locale(locale))


def read_translation(
    translations: Optional[Mapping[str, Any]],
    locale: Optional[Any] = None,
    fallback: Optional[bool] = None,
) -> Optional[Any]:
    """Return the value for a locale, falling back to the default locale.

    Fallback only applies when the requested value is missing (None); an
    empty string is returned as stored.
    """
    settings = get_settings()
    if fallback is None:
        fallback = settings.fallback

    locale_str = resolve_locale(locale)
    value = translation_for(translations, locale_str)
    if value is not None or not fallback or locale_str == settings.default_locale:
        return value
    return translation_for(translations, settings.default_locale)


def set_translation(
    translations: Optional[Mapping[str, Any]], locale: Any, value: Any
) -> Dict[str, Any]:
    """Return a copy of ``translations`` with ``locale`` set to ``value``."""
    updated = dict(translations or {})
    updated[resolve_locale(locale)] = value
    return updated


def is_translated(translations: Optional[Mapping[str, Any]], locale: Any) -> bool:
    """Return True when the locale holds a non-blank value."""
    return not _is_blank(translation_for(translations, locale))


def translated_locales(translations: Optional[Mapping[str, Any]]) -> List[str]:
    """Return the locales holding a non-blank value, in stored order."""
    return [str(k) for k, v in (translations or {}).items() if not _is_blank(v)]


def normalize_translations(value: Optional[Mapping[Any, Any]]) -> Dict[str, Any]:
    """Stringify locale keys (enum members included); None becomes {}."""
    return {resolve_locale(k): v for k, v in (value or {}).items()}


def convert_international_attributes(
    attributes: Mapping[str, Any],
    international: Union[TranslatedAttributes, Iterable[str]],
    locale: Optional[Any] = None,
) -> Dict[str, Any]:
    """Convert ``{"title": {"en": ...}}`` into ``{"title_translations": {"en": ...}}``.

    A plain (non-mapping) value for a translated attribute is stored under
    ``locale`` (default: configured default locale). Other keys pass through.
    """
    names = set(international)
    result: Dict[str, Any] = {}
    for key, value in attributes.items():
        if key not in names:
            result[key] = value
            continue
        if isinstance(value, Mapping):
            result[translations_column(key)] = normalize_translations(value)
        else:
            result[translations_column(key)] = {resolve_locale(locale): value}
    return result
