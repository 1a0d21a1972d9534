"""Translate adapter ``?`` templates into SQLAlchemy text clauses."""

import re
from typing import Any, List, Sequence

from sqlalchemy import bindparam, text
from sqlalchemy.sql.elements import TextClause

QMARK_PATTERN = re.compile(r"\?")
BIND_NAME_UNSAFE = re.compile(r"[^a-zA-Z0-9_]")


def bind_name(*parts: str) -> str:
    """Build a bind parameter name from free-form parts (e.g. attribute, locale)."""
    joined = "_".join(p for p in parts if p)
    return BIND_NAME_UNSAFE.sub("_", joined) or "param"


def translate_qmark_params(sql: str, params: Sequence[Any], name: str) -> TextClause:
    """Translate ``?`` placeholders to unique named binds on a text clause.

    Adapter templates never quote a question mark, so every ``?`` is a
    placeholder.

    Args:
        sql: SQL text with ``?`` placeholders.
        params: One value per placeholder, in order.
        name: Base name for the generated bind parameters.

    Returns:
        A TextClause with the values bound.

    Raises:
        ValueError: If the number of params does not match the placeholders.
    """
    qmark_count = len(QMARK_PATTERN.findall(sql))
    if len(params) < qmark_count:
        raise ValueError(
            "Not enough parameters for ? placeholders: "
            f"expected {qmark_count}, got {len(params)}."
        )
    if len(params) > qmark_count:
        raise ValueError(
            "Too many parameters for ? placeholders: "
            f"expected {qmark_count}, got {len(params)}."
        )

    keys: List[str] = []
    counter = iter(range(1, qmark_count + 1))

    def _replace(_match: re.Match) -> str:
        key = f"{name}_{next(counter)}"
        keys.append(key)
        return f":{key}"

    named_sql = QMARK_PATTERN.sub(_replace, sql)
    clause = text(named_sql)
    if keys:
        clause = clause.bindparams(
            *[bindparam(key, value, unique=True) for key, value in zip(keys, params)]
        )
    return clause
