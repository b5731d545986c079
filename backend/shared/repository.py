"""
Base repository class for Supabase tables.

A repository owns one table: it holds the Supabase client and the table
name, and subclasses map rows to and from pydantic models.
"""

from typing import TypeVar, Generic
from supabase import Client


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for Supabase-backed repositories.

    Subclasses build queries with self._query() and keep row mapping
    private, so callers only ever see models of type T.
    """

    def __init__(self, db: Client, table: str) -> None:
        """
        Args:
            db: Supabase client instance for database operations.
            table: Name of the table this repository reads and writes.
        """
        self._db = db
        self._table = table

    def _query(self):
        """Start a PostgREST query on this repository's table."""
        return self._db.table(self._table)
