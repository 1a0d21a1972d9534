from enum import Enum

import pytest

from internationalize import configure
from internationalize.attributes import TranslatedAttributes
from internationalize.translations import (
    convert_international_attributes,
    is_translated,
    normalize_translations,
    read_translation,
    set_translation,
    translated_locales,
    translation_for,
)


class Language(str, Enum):
    EN = "en"
    DE = "de"


TITLE = {"en": "Hello", "de": "Hallo", "fr": ""}


def test_translation_for_has_no_fallback():
    assert translation_for(TITLE, "de") == "Hallo"
    assert translation_for(TITLE, "es") is None
    assert translation_for(None, "en") is None


def test_translation_for_accepts_enum_locale():
    assert translation_for(TITLE, Language.DE) == "Hallo"


class TestReadTranslation:
    def test_defaults_to_configured_locale(self):
        configure(default_locale="de", available_locales=["en", "de"])
        assert read_translation(TITLE) == "Hallo"

    def test_falls_back_to_default_locale_when_missing(self):
        assert read_translation(TITLE, "es") == "Hello"

    def test_empty_string_is_not_missing(self):
        assert read_translation(TITLE, "fr") == ""

    def test_fallback_can_be_disabled_per_call(self):
        assert read_translation(TITLE, "es", fallback=False) is None

    def test_fallback_can_be_disabled_in_settings(self):
        configure(fallback=False)
        assert read_translation(TITLE, "es") is None

    def test_missing_everywhere(self):
        assert read_translation({}, "es") is None


def test_set_translation_returns_a_copy():
    original = {"en": "Hello"}
    updated = set_translation(original, Language.DE, "Hallo")

    assert updated == {"en": "Hello", "de": "Hallo"}
    assert original == {"en": "Hello"}


def test_set_translation_on_none():
    assert set_translation(None, "en", "Hi") == {"en": "Hi"}


@pytest.mark.parametrize(
    "locale,expected", [("en", True), ("fr", False), ("es", False)]
)
def test_is_translated(locale, expected):
    assert is_translated(TITLE, locale) is expected


def test_is_translated_treats_whitespace_as_blank():
    assert is_translated({"en": "   "}, "en") is False


def test_translated_locales_skip_blank_values():
    assert translated_locales({"en": "Hello", "de": None, "fr": "", "it": "Ciao"}) == [
        "en",
        "it",
    ]
    assert translated_locales(None) == []


def test_normalize_translations_stringifies_keys():
    assert normalize_translations({Language.EN: "Hi", "de": "Hallo"}) == {
        "en": "Hi",
        "de": "Hallo",
    }
    assert normalize_translations(None) == {}


class TestConvertInternationalAttributes:
    def test_nested_mapping_becomes_translations_column(self):
        attrs = TranslatedAttributes("articles", ["title"])
        result = convert_international_attributes(
            {"title": {Language.EN: "Hello", "de": "Hallo"}, "status": "published"}, attrs
        )
        assert result == {
            "title_translations": {"en": "Hello", "de": "Hallo"},
            "status": "published",
        }

    def test_scalar_uses_default_locale(self):
        configure(default_locale="de", available_locales=["de"])
        result = convert_international_attributes({"title": "Achtung!"}, ["title"])
        assert result == {"title_translations": {"de": "Achtung!"}}

    def test_scalar_with_explicit_locale(self):
        result = convert_international_attributes({"title": "Salut"}, ["title"], locale="fr")
        assert result == {"title_translations": {"fr": "Salut"}}
