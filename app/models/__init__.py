"""Models package - query rows and entities for all domains."""

from app.models.charts import (
    PUBLIC_PARENT_TAG_IDS,
    ChartExportMeta,
    ChartItemWithTags,
    ChartTag,
)
from app.models.common import BaseEntity
from app.models.content import (
    CATEGORY_ORDER,
    CategoryEntry,
    CategoryWithEntries,
    FullPost,
    Permalinks,
    PostInfo,
    PostRow,
    TablepressTable,
)

__all__ = [
    # Common
    "BaseEntity",
    # Content
    "CATEGORY_ORDER",
    "PostRow",
    "FullPost",
    "PostInfo",
    "CategoryEntry",
    "CategoryWithEntries",
    "TablepressTable",
    "Permalinks",
    # Charts
    "PUBLIC_PARENT_TAG_IDS",
    "ChartExportMeta",
    "ChartTag",
    "ChartItemWithTags",
]
