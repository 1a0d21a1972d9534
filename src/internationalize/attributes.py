"""Explicit mapping from translated attributes to their JSON columns.

Each translated attribute ``title`` is stored in a JSON column named
``title_translations``. Per-locale access goes through lookup keys rather
than generated accessors:

    >>> attrs = TranslatedAttributes("articles", ["title"])
    >>> attrs.column_for("title")
    'title_translations'
    >>> attrs.locale_accessors(["en", "de"])["title_de"]
    LocaleKey(column='title_translations', locale='de')
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple

from sqlalchemy import Table

from internationalize.config import get_settings

logger = logging.getLogger(__name__)

TRANSLATIONS_SUFFIX = "_translations"


@dataclass(frozen=True)
class LocaleKey:
    """Where a single attribute/locale value lives."""

    column: str
    locale: str


def translations_column(attribute: str) -> str:
    """Return the JSON column name backing a translated attribute."""
    return f"{attribute}{TRANSLATIONS_SUFFIX}"


def _table_from(source: Any) -> Optional[Table]:
    if isinstance(source, Table):
        return source
    table = getattr(source, "__table__", None)
    if isinstance(table, Table):
        return table
    return None


class TranslatedAttributes:
    """The translated attributes declared for one table."""

    def __init__(self, table: Any, attributes: Iterable[str], fallback: bool = True) -> None:
        """Declare translated attributes for a table.

        Args:
            table: A SQLAlchemy Table, a declarative model class or a table name.
            attributes: Attribute names, each backed by ``<name>_translations``.
            fallback: Whether reads fall back to the default locale.

        Raises:
            ValueError: If no attributes are given, or table metadata is
                available and a translations column is missing.
        """
        names: Tuple[str, ...] = tuple(dict.fromkeys(str(a) for a in attributes))
        if not names:
            raise ValueError("At least one translated attribute is required.")

        self.table = _table_from(table)
        self.table_name = self.table.name if self.table is not None else str(table)
        self.attributes = names
        self.fallback = fallback

        if self.table is not None:
            for attr in names:
                self._check_column(attr)

    def _check_column(self, attr: str) -> None:
        column_name = translations_column(attr)
        if column_name not in self.table.c:
            raise ValueError(
                f"Table '{self.table_name}' has no column '{column_name}' "
                f"for translated attribute '{attr}'."
            )
        column = self.table.c[column_name]
        if column.default is None and column.server_default is None:
            logger.warning(
                "Column %s.%s is missing a default of {}. Rows created without "
                "translations will hold NULL instead of an empty object.",
                self.table_name,
                column_name,
            )

    def __contains__(self, attr: object) -> bool:
        return str(attr) in self.attributes

    def __iter__(self):
        return iter(self.attributes)

    def __repr__(self) -> str:
        return f"TranslatedAttributes({self.table_name!r}, {list(self.attributes)!r})"

    def column_for(self, attr: str) -> str:
        """Return the translations column for an attribute.

        Raises:
            ValueError: If ``attr`` is not a translated attribute.
        """
        if attr not in self:
            raise ValueError(
                f"{attr} is not an international attribute. "
                "Use standard SQLAlchemy column expressions for non-translated attributes."
            )
        return translations_column(attr)

    def locale_accessors(self, locales: Optional[Iterable[Any]] = None) -> Dict[str, LocaleKey]:
        """Map ``<attr>_<locale>`` names to their lookup keys.

        Defaults to the configured available locales.
        """
        if locales is None:
            locales = get_settings().available_locales
        locale_list = [str(getattr(loc, "value", loc)) for loc in locales]
        return {
            f"{attr}_{locale}": LocaleKey(translations_column(attr), locale)
            for attr in self.attributes
            for locale in locale_list
        }
