"""Base adapter defining the SQL fragment interface shared by all engines."""

import logging
import re
from enum import Enum
from typing import Any, Tuple

logger = logging.getLogger(__name__)

# Anything outside this set is stripped before a locale reaches SQL text
UNSAFE_LOCALE_CHARS = re.compile(r"[^a-zA-Z0-9_\-]")
LIKE_SPECIAL_CHARS = re.compile(r"([\\%_])")


class PatternKind(str, Enum):
    """Wildcard syntax expected by a generated match condition."""

    LIKE = "like"
    GLOB = "glob"


def locale_text(locale: Any) -> str:
    """Render a locale-like value (str, enum member, ...) as plain text."""
    if isinstance(locale, Enum):
        locale = locale.value
    return str(locale)


class BaseAdapter:
    """Engine-agnostic contract for JSON translation column SQL.

    Concrete adapters implement extraction and the two match operations.
    Pattern builders default to LIKE-style escaping.
    """

    name: str = "base"

    def sanitize_locale(self, locale: Any) -> str:
        """Strip every character that is not alphanumeric, underscore or hyphen.

        Never fails: an unusable locale ends up as a (possibly empty) key that
        matches no stored translation.
        """
        raw = locale_text(locale)
        sanitized = UNSAFE_LOCALE_CHARS.sub("", raw)
        if sanitized != raw:
            logger.debug("Stripped unsafe characters from locale %r -> %r", raw, sanitized)
        return sanitized

    def json_extract(self, column: str, locale: Any) -> str:
        """Return SQL extracting the locale's text value from a JSON column."""
        raise NotImplementedError(f"{type(self).__name__} must implement json_extract")

    def like_insensitive(self, column: str, locale: Any) -> Tuple[str, PatternKind]:
        """Return a case-insensitive substring condition and its pattern kind."""
        raise NotImplementedError(f"{type(self).__name__} must implement like_insensitive")

    def like_sensitive(self, column: str, locale: Any) -> Tuple[str, PatternKind]:
        """Return a case-sensitive substring condition and its pattern kind."""
        raise NotImplementedError(f"{type(self).__name__} must implement like_sensitive")

    def like_pattern(self, term: Any) -> str:
        """Wrap a term in % wildcards, escaping backslash, % and _."""
        escaped = LIKE_SPECIAL_CHARS.sub(r"\\\1", str(term))
        return f"%{escaped}%"

    def glob_pattern(self, term: Any) -> str:
        """Build the pattern for case-sensitive search; LIKE-style unless overridden."""
        return self.like_pattern(term)

    def pattern_for(self, kind: PatternKind, term: Any) -> str:
        """Build the bound search parameter for the given pattern kind."""
        if PatternKind(kind) is PatternKind.GLOB:
            return self.glob_pattern(term)
        return self.like_pattern(term)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))
