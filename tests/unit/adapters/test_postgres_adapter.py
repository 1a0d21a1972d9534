import pytest

from internationalize.adapters import PatternKind, PostgreSQLAdapter


def test_json_extract():
    """Extract a locale with the ->> operator."""
    assert (
        PostgreSQLAdapter().json_extract("title_translations", "en")
        == "title_translations->>'en'"
    )


def test_like_insensitive_uses_ilike():
    """Case-insensitive search uses ILIKE."""
    sql, kind = PostgreSQLAdapter().like_insensitive("title_translations", "en")
    assert sql == "title_translations->>'en' ILIKE ?"
    assert kind is PatternKind.LIKE


def test_like_sensitive_uses_like():
    """Case-sensitive search uses plain LIKE with a like-style pattern."""
    sql, kind = PostgreSQLAdapter().like_sensitive("title_translations", "en")
    assert sql == "title_translations->>'en' LIKE ?"
    assert kind is PatternKind.LIKE


def test_like_pattern():
    """LIKE patterns are wrapped in % and escaped."""
    adapter = PostgreSQLAdapter()
    assert adapter.like_pattern("hello") == "%hello%"
    assert adapter.like_pattern("100%") == "%100\\%%"


@pytest.mark.parametrize("term", ["hello", "100%", "a_b", "test*", "x?y", "[z]", ""])
def test_glob_pattern_matches_like_pattern(term):
    """PostgreSQL has no GLOB; glob_pattern aliases like_pattern."""
    adapter = PostgreSQLAdapter()
    assert adapter.glob_pattern(term) == adapter.like_pattern(term)


def test_json_extract_sanitizes_locale():
    """Dangerous characters are stripped before interpolation."""
    sql = PostgreSQLAdapter().json_extract("title_translations", "en'; DROP TABLE")
    assert sql == "title_translations->>'enDROPTABLE'"
