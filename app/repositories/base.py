"""Base repository class."""

from collections.abc import Callable
from typing import Any

import duckdb
from loguru import logger

from app.repositories.common.cache import LookupCache
from app.repositories.db import close_db, get_db


class BaseRepository:
    """Base repository with common functionality."""

    database: str = ""

    def __init__(self, conn: duckdb.DuckDBPyConnection | None = None, cache: LookupCache | None = None):
        self._shared = conn is None
        self._db = get_db(self.database) if self._shared else conn
        self._cache = cache if cache is not None else LookupCache()
        logger.debug("{} initialized", self.__class__.__name__)

    def _cached(self, key: str, fn: Callable[[], Any]) -> Any:
        """Get from cache or compute."""
        return self._cache.get_or_build(key, fn)

    def execute(self, query: str, params: list | None = None) -> Any:
        """Execute SQL query."""
        if params:
            return self._db.execute(query, params)
        return self._db.execute(query)

    def fetchall(self, query: str, params: list | None = None) -> list:
        """Execute and fetch all rows."""
        return self.execute(query, params).fetchall()

    def fetchone(self, query: str, params: list | None = None) -> Any:
        """Execute and fetch one row."""
        return self.execute(query, params).fetchone()

    def query(self, query: str, params: list | None = None) -> list:
        """Run an ad-hoc read query for callers outside the repository."""
        return self.fetchall(query, params)

    def close(self) -> None:
        """Close the connection; shared ones are dropped from the thread-local pool."""
        if self._shared:
            close_db(self.database)
        else:
            self._db.close()
