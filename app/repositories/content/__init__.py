"""Content repositories."""

from app.repositories.content.wordpress import WordpressRepository

__all__ = ["WordpressRepository"]
