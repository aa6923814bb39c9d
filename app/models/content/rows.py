"""Raw WordPress query rows.

One record per query; fields follow the SELECT column order so a duckdb row
tuple maps with ``Row._make(row)``.
"""

from datetime import datetime
from typing import NamedTuple


class AuthorRow(NamedTuple):
    post_id: int
    description: str


class PermalinkRow(NamedTuple):
    post_id: int
    permalink: str | None


class FeaturedImageRow(NamedTuple):
    post_id: int
    guid: str


class CategoryRow(NamedTuple):
    post_id: int
    name: str


class PageRow(NamedTuple):
    id: int
    title: str
    slug: str
    starred: str | None


class PostRow(NamedTuple):
    """A ``wp_posts`` row as consumed by post assembly."""

    id: int
    slug: str
    title: str
    date: datetime | str
    date_gmt: datetime | str
    modified_gmt: datetime | str
    content: str
    excerpt: str
    type: str


POST_COLUMNS = (
    "ID, post_name, post_title, post_date, post_date_gmt, post_modified_gmt, post_content, post_excerpt, post_type"
)


class TableContentRow(NamedTuple):
    post_id: int
    content: str
