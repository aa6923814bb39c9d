"""Shared repository helpers."""

from app.repositories.common.cache import LookupCache

__all__ = ["LookupCache"]
