"""Grapher repository - chart slugs, versions and public listings."""

from loguru import logger

from app.models.charts import (
    PUBLIC_PARENT_TAG_IDS,
    ChartItemWithTags,
    ChartRow,
    ChartTag,
    ChartTagRow,
    SlugRow,
)
from app.repositories.base import BaseRepository
from settings import GRAPHER_DB_NAME


class GrapherRepository(BaseRepository):
    """Read-only access to the grapher charts database."""

    database = GRAPHER_DB_NAME

    def map_slugs_to_ids(self) -> dict[str, int]:
        """Get {slug: chart_id} for current and retired slugs.

        Redirects go in first so a slug that is live on a chart always
        resolves to that chart.
        """
        redirects = self.fetchall("SELECT chart_id, slug FROM chart_slug_redirects")
        current = self.fetchall("SELECT id, json_extract_string(config, '$.slug') FROM charts")

        slug_to_id = {}
        for row in map(SlugRow._make, redirects):
            slug_to_id[row.slug] = row.chart_id
        for row in map(SlugRow._make, current):
            if row.slug is not None:
                slug_to_id[row.slug] = row.chart_id
        logger.debug("map_slugs_to_ids: {} slugs ({} redirects)", len(slug_to_id), len(redirects))
        return slug_to_id

    def get_chart_version(self, chart_id: int) -> int | None:
        """Get the config version of a chart, None if the chart is gone."""
        row = self.fetchone(
            "SELECT CAST(json_extract_string(config, '$.version') AS INTEGER) FROM charts WHERE id = ?",
            [chart_id],
        )
        if row is None:
            return None
        return row[0] or 0

    def get_indexable_charts(self) -> list[ChartItemWithTags]:
        """Get published charts with their public topic tags."""
        charts = [
            ChartRow._make(r)
            for r in self.fetchall(
                """
                SELECT id, json_extract_string(config, '$.slug'), json_extract_string(config, '$.title')
                FROM charts
                WHERE publishedAt IS NOT NULL
                ORDER BY id
                """
            )
        ]
        chart_tags = self.fetchall(
            """
            SELECT ct.chartId, ct.tagId, t.name, t.parentId
            FROM chart_tags ct
            JOIN charts c ON c.id = ct.chartId
            JOIN tags t ON t.id = ct.tagId
            ORDER BY ct.chartId, ct.tagId
            """
        )

        items = {c.id: ChartItemWithTags(id=c.id, slug=c.slug, title=c.title) for c in charts}
        for ct in map(ChartTagRow._make, chart_tags):
            if ct.tag_parent_id not in PUBLIC_PARENT_TAG_IDS:
                continue
            item = items.get(ct.chart_id)
            if item is not None:
                item.tags.append(ChartTag(id=ct.tag_id, name=ct.tag_name))

        logger.debug("get_indexable_charts: {} charts", len(items))
        return list(items.values())

