from typing import Any, Tuple

from internationalize.adapters.base import BaseAdapter, PatternKind


class PostgreSQLAdapter(BaseAdapter):
    """PostgreSQL JSON/JSONB fragments using ->>, ILIKE and LIKE."""

    name = "postgresql"

    def json_extract(self, column: str, locale: Any) -> str:
        return f"{column}->>'{self.sanitize_locale(locale)}'"

    def like_insensitive(self, column: str, locale: Any) -> Tuple[str, PatternKind]:
        return f"{self.json_extract(column, locale)} ILIKE ?", PatternKind.LIKE

    def like_sensitive(self, column: str, locale: Any) -> Tuple[str, PatternKind]:
        return f"{self.json_extract(column, locale)} LIKE ?", PatternKind.LIKE
