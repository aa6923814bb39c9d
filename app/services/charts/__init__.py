"""Chart export services."""

from app.services.charts.baker import ChartBaker
from app.services.charts.exports import (
    GrapherExports,
    get_grapher_exports_by_url,
    grapher_url_to_filekey,
    parse_export_filename,
)

__all__ = [
    "ChartBaker",
    "GrapherExports",
    "get_grapher_exports_by_url",
    "grapher_url_to_filekey",
    "parse_export_filename",
]
