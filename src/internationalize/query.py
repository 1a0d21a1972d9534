"""SQLAlchemy query helpers for translated attributes.

Every helper returns a clause element with its values bound, ready to pass
to ``select(...).where(...)`` or ``order_by(...)``:

    >>> attrs = TranslatedAttributes(articles, ["title"])
    >>> q = TranslationQuery(SQLiteAdapter(), attrs)
    >>> stmt = select(articles).where(q.international(title="Hello", match="partial"))
    >>> stmt = select(articles).order_by(q.international_order("title", "desc"))
"""

import logging
from enum import Enum
from typing import Any, List, Optional

from sqlalchemy import and_, literal_column, text, true
from sqlalchemy.sql.elements import ColumnElement, TextClause

from internationalize.adapters import BaseAdapter, resolve_for
from internationalize.attributes import TranslatedAttributes
from internationalize.config import resolve_locale
from internationalize.param_translation import bind_name, translate_qmark_params

logger = logging.getLogger(__name__)

VALID_DIRECTIONS = ("ASC", "DESC")


class MatchMode(str, Enum):
    """How a translated value is compared to the search value."""

    EXACT = "exact"
    PARTIAL = "partial"


def _parse_match(match: Any) -> MatchMode:
    try:
        return MatchMode(getattr(match, "value", match))
    except ValueError:
        allowed = ", ".join(m.value for m in MatchMode)
        raise ValueError(f"Invalid match mode '{match}'. Allowed values: {allowed}")


def _combine(clauses: List[ColumnElement]) -> ColumnElement:
    if not clauses:
        return true()
    if len(clauses) == 1:
        return clauses[0]
    return and_(*clauses)


class TranslationQuery:
    """Query builder bound to one adapter and one table's translated attributes."""

    def __init__(self, adapter: BaseAdapter, attributes: TranslatedAttributes) -> None:
        self.adapter = adapter
        self.attributes = attributes

    @classmethod
    def for_bind(cls, bind: Any, attributes: TranslatedAttributes) -> "TranslationQuery":
        """Build a query helper for the engine behind a SQLAlchemy bind."""
        return cls(resolve_for(bind), attributes)

    def extract(self, attr: str, locale: Optional[Any] = None) -> str:
        """Return the SQL fragment extracting ``attr`` in ``locale``."""
        return self.adapter.json_extract(self.attributes.column_for(attr), resolve_locale(locale))

    def _condition(self, sql: str, value: Any, attr: str, locale: str) -> TextClause:
        name = bind_name(attr, self.adapter.sanitize_locale(locale))
        return translate_qmark_params(f"({sql})", [value], name)

    def international(
        self,
        locale: Optional[Any] = None,
        match: Any = MatchMode.EXACT,
        case_sensitive: bool = False,
        **conditions: Any,
    ) -> ColumnElement:
        """Match translated attributes against values.

        Args:
            locale: Locale to compare in (default: configured default locale).
            match: "exact" for equality, "partial" for substring matching.
            case_sensitive: Only used for partial matching.
            **conditions: attribute=value pairs, AND-ed together.

        Raises:
            ValueError: For a non-translated attribute or an unknown match mode.
        """
        mode = _parse_match(match)
        locale = resolve_locale(locale)
        clauses: List[ColumnElement] = []

        for attr, value in conditions.items():
            column = self.attributes.column_for(attr)
            if mode is MatchMode.PARTIAL:
                if case_sensitive:
                    sql, kind = self.adapter.like_sensitive(column, locale)
                    pattern = self.adapter.pattern_for(kind, value)
                else:
                    sql, _ = self.adapter.like_insensitive(column, locale)
                    pattern = self.adapter.like_pattern(value)
                clauses.append(self._condition(sql, pattern, attr, locale))
            else:
                sql = f"{self.adapter.json_extract(column, locale)} = ?"
                clauses.append(self._condition(sql, value, attr, locale))

        return _combine(clauses)

    def international_not(self, locale: Optional[Any] = None, **conditions: Any) -> ColumnElement:
        """Exclude rows whose translation equals the value; missing values are kept."""
        locale = resolve_locale(locale)
        clauses: List[ColumnElement] = []

        for attr, value in conditions.items():
            extract = self.adapter.json_extract(self.attributes.column_for(attr), locale)
            sql = f"{extract} != ? OR {extract} IS NULL"
            clauses.append(self._condition(sql, value, attr, locale))

        return _combine(clauses)

    def international_order(
        self, attr: str, direction: str = "asc", locale: Optional[Any] = None
    ) -> ColumnElement:
        """Order by a translated attribute; unknown directions fall back to ASC."""
        extract = self.extract(attr, locale)
        normalized = str(getattr(direction, "value", direction)).upper()
        if normalized not in VALID_DIRECTIONS:
            logger.debug("Unknown order direction %r, using ASC", direction)
            normalized = "ASC"
        return literal_column(f"{extract} {normalized}")

    def translated(self, *attrs: str, locale: Optional[Any] = None) -> ColumnElement:
        """Rows having a non-empty translation for every given attribute."""
        return self._presence(attrs, locale, "{x} IS NOT NULL AND {x} != ''")

    def untranslated(self, *attrs: str, locale: Optional[Any] = None) -> ColumnElement:
        """Rows missing a translation for every given attribute."""
        return self._presence(attrs, locale, "{x} IS NULL OR {x} = ''")

    def _presence(self, attrs: tuple, locale: Optional[Any], template: str) -> ColumnElement:
        locale = resolve_locale(locale)
        clauses: List[ColumnElement] = []
        for attr in attrs:
            if attr not in self.attributes:
                continue
            extract = self.adapter.json_extract(self.attributes.column_for(attr), locale)
            clauses.append(text(f"({template.format(x=extract)})"))
        return _combine(clauses)
