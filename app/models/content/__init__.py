"""Content domain models - WordPress rows and post projections."""

from app.models.content.entities import (
    CATEGORY_ORDER,
    CategoryEntry,
    CategoryWithEntries,
    FullPost,
    Permalinks,
    PostInfo,
    TablepressTable,
)
from app.models.content.rows import (
    POST_COLUMNS,
    AuthorRow,
    CategoryRow,
    FeaturedImageRow,
    PageRow,
    PermalinkRow,
    PostRow,
    TableContentRow,
)
from app.models.content.schemas import TablepressIndexSchema

__all__ = [
    # Rows
    "AuthorRow",
    "PermalinkRow",
    "FeaturedImageRow",
    "CategoryRow",
    "PageRow",
    "PostRow",
    "POST_COLUMNS",
    "TableContentRow",
    # Entities
    "CATEGORY_ORDER",
    "FullPost",
    "PostInfo",
    "CategoryEntry",
    "CategoryWithEntries",
    "TablepressTable",
    "Permalinks",
    # Schemas
    "TablepressIndexSchema",
]
