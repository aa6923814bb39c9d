"""Raw grapher query rows."""

from typing import NamedTuple


class SlugRow(NamedTuple):
    chart_id: int
    slug: str | None


class ChartRow(NamedTuple):
    id: int
    slug: str | None
    title: str | None


class ChartTagRow(NamedTuple):
    chart_id: int
    tag_id: int
    tag_name: str
    tag_parent_id: int | None
