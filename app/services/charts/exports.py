"""Rendered chart exports - filename keys and the on-disk export index."""

import hashlib
import re
from pathlib import Path
from urllib.parse import urlsplit

from loguru import logger

from app.models.charts import ChartExportMeta

EXPORT_FILENAME_RE = re.compile(r"^(?P<key>.+)_v(?P<version>\d+)_(?P<width>\d+)x(?P<height>\d+)\.svg$")


def url_slug(grapher_url: str) -> str:
    """Last path segment of a chart url ("" when the path ends in a slash)."""
    return urlsplit(grapher_url).path.split("/")[-1]


def grapher_url_to_filekey(grapher_url: str) -> str:
    """Key that names the export files of a chart url.

    The slug, plus an md5 of the raw query string (leading ``?`` included, as
    the renderer hashes it) when there is one. Parameter order matters:
    ``?a=1&b=2`` and ``?b=2&a=1`` give different keys.
    """
    slug = url_slug(grapher_url)
    query = urlsplit(grapher_url).query
    if not query:
        return slug
    digest = hashlib.md5(f"?{query}".encode()).hexdigest()
    return f"{slug}-{digest}"


def parse_export_filename(filename: str) -> ChartExportMeta | None:
    """Parse ``{key}_v{version}_{width}x{height}.svg``; None if it doesn't match."""
    match = EXPORT_FILENAME_RE.match(filename)
    if not match:
        return None
    return ChartExportMeta(
        key=match["key"],
        svg_url=f"/exports/{filename}",
        version=int(match["version"]),
        width=int(match["width"]),
        height=int(match["height"]),
    )


class GrapherExports:
    """Latest export per key, looked up by chart url."""

    def __init__(self, exports_by_key: dict[str, ChartExportMeta]):
        self._by_key = exports_by_key

    def __len__(self) -> int:
        return len(self._by_key)

    def __contains__(self, grapher_url: str) -> bool:
        return self.get(grapher_url) is not None

    def get(self, grapher_url: str) -> ChartExportMeta | None:
        return self._by_key.get(grapher_url_to_filekey(grapher_url))


def get_grapher_exports_by_url(exports_dir: Path) -> GrapherExports:
    """Index the svg exports in ``exports_dir``, keeping the newest version of each key."""
    exports_by_key: dict[str, ChartExportMeta] = {}
    for path in sorted(Path(exports_dir).glob("*.svg")):
        meta = parse_export_filename(path.name)
        if meta is None:
            logger.warning("Skipping malformed export filename: {}", path.name)
            continue
        current = exports_by_key.get(meta.key)
        if current is None or current.version < meta.version:
            exports_by_key[meta.key] = meta

    logger.debug("Export index: {} keys in {}", len(exports_by_key), exports_dir)
    return GrapherExports(exports_by_key)
