"""Repositories package - read-only data access to WordPress and grapher."""

from app.repositories.base import BaseRepository
from app.repositories.charts import GrapherRepository
from app.repositories.common import LookupCache
from app.repositories.content import WordpressRepository
from app.repositories.db import (
    close_db,
    connect,
    get_db,
)

__all__ = [
    # DB
    "connect",
    "get_db",
    "close_db",
    # Base
    "BaseRepository",
    "LookupCache",
    # Content
    "WordpressRepository",
    # Charts
    "GrapherRepository",
]
