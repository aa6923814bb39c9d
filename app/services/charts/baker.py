"""Chart baker - re-render chart exports that are missing or out of date."""

import subprocess
import threading
from pathlib import Path

from loguru import logger

from app.errors import RenderError
from app.repositories.charts.grapher import GrapherRepository
from app.services.charts.exports import get_grapher_exports_by_url, url_slug

_render_locks: dict[Path, threading.Lock] = {}
_render_locks_guard = threading.Lock()


def _render_lock(output_dir: Path) -> threading.Lock:
    """One lock per output directory; render batches into it run one at a time."""
    with _render_locks_guard:
        return _render_locks.setdefault(output_dir, threading.Lock())


class ChartBaker:
    """Reconcile chart urls against rendered exports and bake the stale ones."""

    def __init__(
        self,
        repo: GrapherRepository,
        exports_dir: Path,
        grapher_dir: Path,
        render_command: list[str],
    ):
        self._repo = repo
        self._exports_dir = Path(exports_dir).resolve()
        self._grapher_dir = Path(grapher_dir)
        self._render_command = list(render_command)

    def find_stale(self, urls: list[str]) -> list[str]:
        """Urls with no export, or whose export is older than the chart config.

        Urls that can't be tied to a chart are logged and left out.
        """
        exports = get_grapher_exports_by_url(self._exports_dir)
        slug_to_id = self._repo.map_slugs_to_ids()
        stale = []

        for url in urls:
            current = exports.get(url)
            if current is None:
                stale.append(url)
                continue

            slug = url_slug(url)
            if not slug:
                logger.error("Invalid chart url {}", url)
                continue

            chart_id = slug_to_id.get(slug)
            if chart_id is None:
                logger.error("No chart found for slug {} ({})", slug, url)
                continue

            version = self._repo.get_chart_version(chart_id)
            if version is None:
                logger.error("Mysteriously missing chart by id {}", chart_id)
                continue

            if version > current.version:
                stale.append(url)

        logger.info("{} of {} chart urls need baking", len(stale), len(urls))
        return stale

    def bake_grapher_urls(self, urls: list[str], silent: bool = False) -> list[str]:
        """Bake every stale url in one renderer run; returns the urls baked."""
        stale = self.find_stale(urls)
        if stale:
            self._render(stale, silent)
        return stale

    def _render(self, urls: list[str], silent: bool) -> None:
        args = [*self._render_command, *urls, str(self._exports_dir)]
        with _render_lock(self._exports_dir):
            logger.info("Rendering {} charts into {}", len(urls), self._exports_dir)
            render_log = logger.bind(source="render")
            try:
                with subprocess.Popen(args, cwd=self._grapher_dir, stdout=subprocess.PIPE, text=True) as proc:
                    for line in proc.stdout:
                        if not silent:
                            render_log.info(line.rstrip())
                    returncode = proc.wait()
            except OSError as e:
                logger.error("Could not start chart renderer {}: {}", args[0], e)
                raise RenderError(-1, urls) from e

        if returncode != 0:
            raise RenderError(returncode, urls)
        logger.info("Rendered {} charts", len(urls))
