from typing import Any, Tuple

from internationalize.adapters.base import BaseAdapter, PatternKind


class MySQLAdapter(BaseAdapter):
    """MySQL 8+ JSON fragments.

    LIKE is case-insensitive under the usual utf8mb4 collations; LIKE BINARY
    forces a case-sensitive comparison.
    """

    name = "mysql"

    def json_extract(self, column: str, locale: Any) -> str:
        return f"{column}->>'$.{self.sanitize_locale(locale)}'"

    def like_insensitive(self, column: str, locale: Any) -> Tuple[str, PatternKind]:
        return f"{self.json_extract(column, locale)} LIKE ?", PatternKind.LIKE

    def like_sensitive(self, column: str, locale: Any) -> Tuple[str, PatternKind]:
        return f"{self.json_extract(column, locale)} LIKE BINARY ?", PatternKind.LIKE
