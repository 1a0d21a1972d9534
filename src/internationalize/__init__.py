"""Translations stored in per-row JSON columns, queried per database engine."""

from internationalize.adapters import (
    BaseAdapter,
    MySQLAdapter,
    PatternKind,
    PostgreSQLAdapter,
    SQLiteAdapter,
    resolve,
    resolve_for,
)
from internationalize.attributes import LocaleKey, TranslatedAttributes, translations_column
from internationalize.config import configure, get_settings, reset_settings
from internationalize.errors import InternationalizeError, UnsupportedAdapter
from internationalize.query import MatchMode, TranslationQuery
from internationalize.translations import (
    convert_international_attributes,
    is_translated,
    read_translation,
    set_translation,
    translated_locales,
    translation_for,
)

__version__ = "0.1.0"

__all__ = [
    "BaseAdapter",
    "InternationalizeError",
    "LocaleKey",
    "MatchMode",
    "MySQLAdapter",
    "PatternKind",
    "PostgreSQLAdapter",
    "SQLiteAdapter",
    "TranslatedAttributes",
    "TranslationQuery",
    "UnsupportedAdapter",
    "configure",
    "convert_international_attributes",
    "get_settings",
    "is_translated",
    "read_translation",
    "reset_settings",
    "resolve",
    "resolve_for",
    "set_translation",
    "translated_locales",
    "translation_for",
    "translations_column",
]
