"""Adapter resolution from database driver or dialect names.

Matching is a case-insensitive substring test against the reported name:

- "sqlite" -> SQLiteAdapter (e.g. "sqlite", "sqlite3", "pysqlite")
- "postgres" -> PostgreSQLAdapter (e.g. "postgresql", "PostGIS+postgres")
- "mysql" or "trilogy" -> MySQLAdapter (e.g. "mysql2", "trilogy")

Example:
    >>> resolve("sqlite3")
    SQLiteAdapter()
    >>> resolve("oracle")
    Traceback (most recent call last):
    ...
    internationalize.errors.UnsupportedAdapter: Database adapter 'oracle' is not supported. ...
"""

import logging
from typing import Any, Tuple

from internationalize.adapters.base import BaseAdapter
from internationalize.adapters.mysql import MySQLAdapter
from internationalize.adapters.postgres import PostgreSQLAdapter
from internationalize.adapters.sqlite import SQLiteAdapter
from internationalize.errors import UnsupportedAdapter

logger = logging.getLogger(__name__)

# Checked in order; first matching substring wins
ADAPTER_PATTERNS: Tuple[Tuple[Tuple[str, ...], type[BaseAdapter]], ...] = (
    (("sqlite",), SQLiteAdapter),
    (("postgres",), PostgreSQLAdapter),
    (("mysql", "trilogy"), MySQLAdapter),
)


def resolve(driver_name: str) -> BaseAdapter:
    """Return the adapter for a reported database driver name.

    Args:
        driver_name: Free-text driver or dialect name (e.g. "sqlite3", "mysql2").

    Returns:
        A fresh, stateless adapter instance.

    Raises:
        UnsupportedAdapter: If the name matches none of the known engines.
    """
    lowered = str(driver_name).lower()
    for needles, adapter_cls in ADAPTER_PATTERNS:
        if any(needle in lowered for needle in needles):
            logger.debug("Resolved driver %r to %s", driver_name, adapter_cls.__name__)
            return adapter_cls()
    raise UnsupportedAdapter(driver_name)


def dialect_name_for(bind: Any) -> str:
    """Read the dialect name from a SQLAlchemy engine, connection or session.

    MariaDB binds resolve to "mysql".
    """
    dialect = getattr(bind, "dialect", None)
    if dialect is None and hasattr(bind, "get_bind"):
        dialect = getattr(bind.get_bind(), "dialect", None)
    if dialect is None:
        raise TypeError(f"Cannot determine database dialect from {type(bind).__name__}")
    # MariaDB binds report their own dialect name but speak the MySQL JSON syntax
    if getattr(dialect, "is_mariadb", False):
        return "mysql"
    return dialect.name


def resolve_for(bind: Any) -> BaseAdapter:
    """Resolve the adapter for a SQLAlchemy Engine, Connection or Session."""
    return resolve(dialect_name_for(bind))
