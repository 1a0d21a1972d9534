import pytest

from internationalize.adapters import MySQLAdapter, PatternKind


def test_json_extract():
    """Extract a locale with ->> and a $.<locale> path."""
    assert (
        MySQLAdapter().json_extract("title_translations", "en") == "title_translations->>'$.en'"
    )


def test_like_insensitive_relies_on_collation():
    """Case-insensitive search is a plain LIKE."""
    sql, kind = MySQLAdapter().like_insensitive("title_translations", "en")
    assert sql == "title_translations->>'$.en' LIKE ?"
    assert kind is PatternKind.LIKE


def test_like_sensitive_uses_like_binary():
    """Case-sensitive search uses LIKE BINARY."""
    sql, kind = MySQLAdapter().like_sensitive("title_translations", "en")
    assert sql == "title_translations->>'$.en' LIKE BINARY ?"
    assert kind is PatternKind.LIKE


@pytest.mark.parametrize("term", ["hello", "100%", "a_b", "test*"])
def test_glob_pattern_matches_like_pattern(term):
    """MySQL has no GLOB; glob_pattern aliases like_pattern."""
    adapter = MySQLAdapter()
    assert adapter.glob_pattern(term) == adapter.like_pattern(term)


def test_json_extract_sanitizes_locale():
    """Dangerous characters are stripped before interpolation."""
    sql = MySQLAdapter().json_extract("title_translations", "en'; DROP TABLE")
    assert sql == "title_translations->>'$.enDROPTABLE'"
