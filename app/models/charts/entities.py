"""Chart domain entities - export metadata and public listings."""

from dataclasses import dataclass, field

from app.models.common import BaseEntity

# Root tags of the public topic taxonomy; other tags are internal
PUBLIC_PARENT_TAG_IDS = frozenset(
    [1515, 1507, 1513, 1504, 1502, 1509, 1506, 1501, 1514, 1511, 1500, 1503, 1505, 1508, 1512, 1510]
)


@dataclass
class ChartExportMeta(BaseEntity):
    """A rendered SVG export, parsed from ``{key}_v{version}_{width}x{height}.svg``."""

    key: str
    svg_url: str
    version: int
    width: int
    height: int


@dataclass
class ChartTag(BaseEntity):
    id: int
    name: str


@dataclass
class ChartItemWithTags(BaseEntity):
    id: int
    slug: str | None
    title: str | None
    tags: list[ChartTag] = field(default_factory=list)
