"""Chart domain models - grapher rows, exports and listings."""

from app.models.charts.entities import (
    PUBLIC_PARENT_TAG_IDS,
    ChartExportMeta,
    ChartItemWithTags,
    ChartTag,
)
from app.models.charts.rows import ChartRow, ChartTagRow, SlugRow

__all__ = [
    # Rows
    "SlugRow",
    "ChartRow",
    "ChartTagRow",
    # Entities
    "PUBLIC_PARENT_TAG_IDS",
    "ChartExportMeta",
    "ChartTag",
    "ChartItemWithTags",
]
