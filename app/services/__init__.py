"""Services package - service class exports."""

from app.services.charts import ChartBaker, GrapherExports, get_grapher_exports_by_url

__all__ = [
    "ChartBaker",
    "GrapherExports",
    "get_grapher_exports_by_url",
]
