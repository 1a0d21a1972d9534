"""Engine-specific SQL fragments for JSON translation columns."""

from internationalize.errors import UnsupportedAdapter

from .base import BaseAdapter, PatternKind
from .factory import resolve, resolve_for
from .mysql import MySQLAdapter
from .postgres import PostgreSQLAdapter
from .sqlite import SQLiteAdapter

__all__ = [
    "BaseAdapter",
    "MySQLAdapter",
    "PatternKind",
    "PostgreSQLAdapter",
    "SQLiteAdapter",
    "UnsupportedAdapter",
    "resolve",
    "resolve_for",
]
