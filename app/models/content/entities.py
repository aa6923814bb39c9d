"""Content domain entities - denormalized post projections."""

from dataclasses import dataclass, field
from datetime import datetime

from app.models.common import BaseEntity

# Display order of the topic categories on the entries page
CATEGORY_ORDER = [
    "Population",
    "Health",
    "Food",
    "Energy",
    "Environment",
    "Technology",
    "Growth &amp; Inequality",
    "Work &amp; Life",
    "Public Sector",
    "Global Connections",
    "War &amp; Peace",
    "Politics",
    "Violence &amp; Rights",
    "Education",
    "Media",
    "Culture",
]


@dataclass
class FullPost(BaseEntity):
    """Post with content, ready for rendering a single page."""

    id: int
    slug: str
    title: str
    date: datetime
    modified_date: datetime
    authors: list[str]
    content: str
    excerpt: str | None = None
    image_url: str | None = None


@dataclass
class PostInfo(BaseEntity):
    """Post summary for the blog index."""

    id: int
    slug: str
    title: str
    date: datetime
    authors: list[str] = field(default_factory=list)
    image_url: str | None = None


@dataclass
class CategoryEntry(BaseEntity):
    slug: str
    title: str
    starred: bool


@dataclass
class CategoryWithEntries(BaseEntity):
    name: str
    entries: list[CategoryEntry]


@dataclass
class TablepressTable(BaseEntity):
    table_id: str
    data: list[list[str]]


class Permalinks:
    """Custom permalink overrides keyed by post id."""

    def __init__(self, overrides: dict[int, str]):
        self._overrides = overrides

    def __len__(self) -> int:
        return len(self._overrides)

    def get(self, post_id: int, fallback: str) -> str:
        """Override for the post minus one trailing slash, else ``fallback``."""
        permalink = self._overrides.get(post_id)
        if not permalink:
            return fallback
        if permalink.endswith("/"):
            permalink = permalink[:-1]
        return permalink or fallback

    def find(self, slug: str) -> int | None:
        """Post id whose override resolves to ``slug``."""
        for post_id in self._overrides:
            if self.get(post_id, "") == slug:
                return post_id
        return None
