"""Dependency Injection container - initialized at app startup."""

from app.repositories.charts.grapher import GrapherRepository
from app.repositories.content.wordpress import WordpressRepository
from app.services.charts.baker import ChartBaker
from settings import EXPORTS_DIR, GRAPHER_DIR, RENDER_COMMAND


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        # Repositories (singletons, each owning its lookup cache)
        self.wordpress = WordpressRepository()
        self.grapher = GrapherRepository()

        # Services (with injected repos)
        self.chart_baker = ChartBaker(
            repo=self.grapher,
            exports_dir=EXPORTS_DIR,
            grapher_dir=GRAPHER_DIR,
            render_command=RENDER_COMMAND,
        )

        self._initialized = True


# Global container instance
container = Container()
