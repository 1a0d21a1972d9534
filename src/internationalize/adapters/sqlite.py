import re
from typing import Any, Tuple

from internationalize.adapters.base import BaseAdapter, PatternKind

GLOB_SPECIAL_CHARS = re.compile(r"([*?\[\]])")


class SQLiteAdapter(BaseAdapter):
    """SQLite JSON1 fragments.

    json_extract() for values, LIKE (ASCII case-insensitive) with an explicit
    backslash escape, GLOB for case-sensitive matching.
    """

    name = "sqlite"

    def json_extract(self, column: str, locale: Any) -> str:
        return f"json_extract({column}, '$.{self.sanitize_locale(locale)}')"

    def like_insensitive(self, column: str, locale: Any) -> Tuple[str, PatternKind]:
        return f"{self.json_extract(column, locale)} LIKE ? ESCAPE '\\'", PatternKind.LIKE

    def like_sensitive(self, column: str, locale: Any) -> Tuple[str, PatternKind]:
        return f"{self.json_extract(column, locale)} GLOB ?", PatternKind.GLOB

    def glob_pattern(self, term: Any) -> str:
        """Wrap a term in * wildcards; GLOB metacharacters become bracket classes."""
        escaped = GLOB_SPECIAL_CHARS.sub(r"[\1]", str(term))
        return f"*{escaped}*"
