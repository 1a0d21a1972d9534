"""Presence and uniqueness checks for translated attributes.

Single-locale rules (length, format, presence in the current locale) are
plain value checks and belong to the caller's own validation layer. This
module covers what needs the translations column itself: presence across
several locales and per-locale uniqueness, which needs a query.
"""

import logging
from collections.abc import Mapping
from typing import Any, Iterable, List, Literal, Optional

from pydantic import BaseModel, Field
from sqlalchemy import column, literal, select, table

from internationalize.attributes import translations_column
from internationalize.config import resolve_locale
from internationalize.query import TranslationQuery
from internationalize.tracing import trace_query_operation
from internationalize.translations import is_translated, translation_for

logger = logging.getLogger(__name__)


class ValidationIssue(BaseModel):
    """One failed check."""

    attribute: str
    error: Literal["blank", "taken"]
    locale: Optional[str] = None


class ValidationResult(BaseModel):
    """Outcome of validating one record."""

    errors: List[ValidationIssue] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add(self, attribute: str, error: str, locale: Optional[str] = None) -> None:
        self.errors.append(ValidationIssue(attribute=attribute, error=error, locale=locale))

    def for_attribute(self, attribute: str) -> List[ValidationIssue]:
        return [e for e in self.errors if e.attribute == attribute]


def _translations(record: Mapping[str, Any], attr: str) -> Optional[Mapping[str, Any]]:
    return record.get(translations_column(attr))


def validate_presence(
    record: Mapping[str, Any], attr: str, locales: Optional[Iterable[Any]]
) -> List[str]:
    """Return the locales in which ``attr`` is blank.

    Args:
        record: Row-like mapping holding ``<attr>_translations``.
        attr: Translated attribute name.
        locales: Locales that must be filled in.

    Raises:
        ValueError: If no locales are given.
    """
    locale_list = [resolve_locale(loc) for loc in (locales or [])]
    if not locale_list:
        raise ValueError(
            "Presence validation of translated attributes requires locales. "
            f"For the current locale, validate the '{attr}' value directly."
        )
    translations = _translations(record, attr)
    return [loc for loc in locale_list if not is_translated(translations, loc)]


def validate_uniqueness(
    connection: Any,
    query: TranslationQuery,
    attr: str,
    value: Any,
    locale: Optional[Any] = None,
    exclude_id: Optional[Any] = None,
    id_column: str = "id",
) -> bool:
    """Return True when no other row holds ``value`` for ``attr`` in ``locale``.

    Blank values are always considered unique.

    Args:
        connection: SQLAlchemy Connection or Session.
        query: Query helper for the table being validated.
        attr: Translated attribute name.
        value: Value to look for.
        locale: Locale to compare in (default: configured default locale).
        exclude_id: Primary key of the record itself, when already persisted.
        id_column: Primary key column name.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return True

    attrs = query.attributes
    source = attrs.table if attrs.table is not None else table(attrs.table_name)
    stmt = (
        select(literal(1))
        .select_from(source)
        .where(query.international(locale=locale, **{attr: value}))
        .limit(1)
    )
    if exclude_id is not None:
        id_col = source.c[id_column] if id_column in source.c else column(id_column)
        stmt = stmt.where(id_col != exclude_id)

    row = trace_query_operation(
        "internationalize.validate_uniqueness",
        provider=query.adapter.name,
        sql=str(stmt),
        operation=lambda: connection.execute(stmt).first(),
    )
    if row is not None:
        logger.debug("Value for %s.%s is taken", attrs.table_name, attr)
    return row is None


def validate_international(
    record: Mapping[str, Any],
    attrs: Iterable[str],
    presence_locales: Optional[Iterable[Any]] = None,
    uniqueness: bool = False,
    connection: Any = None,
    query: Optional[TranslationQuery] = None,
    locale: Optional[Any] = None,
    exclude_id: Optional[Any] = None,
) -> ValidationResult:
    """Run presence and/or uniqueness checks for several attributes.

    Raises:
        ValueError: If uniqueness is requested without a connection and query.
    """
    if uniqueness and (connection is None or query is None):
        raise ValueError("Uniqueness validation requires a connection and a query helper.")

    result = ValidationResult()
    locale_str = resolve_locale(locale)
    presence = list(presence_locales) if presence_locales is not None else None

    for attr in attrs:
        if presence is not None:
            for missing in validate_presence(record, attr, presence):
                result.add(attr, "blank", missing)
        if uniqueness:
            value = translation_for(_translations(record, attr), locale_str)
            if not validate_uniqueness(
                connection, query, attr, value, locale=locale_str, exclude_id=exclude_id
            ):
                result.add(attr, "taken", locale_str)

    return result
