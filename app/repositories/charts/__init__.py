"""Chart repositories."""

from app.repositories.charts.grapher import GrapherRepository

__all__ = ["GrapherRepository"]
