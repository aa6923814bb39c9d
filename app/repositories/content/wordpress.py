"""WordPress repository - authorship, permalinks, categories, posts and tables."""

import html
import json
from collections import defaultdict
from datetime import datetime, timezone

from loguru import logger

from app.models.content import (
    CATEGORY_ORDER,
    POST_COLUMNS,
    AuthorRow,
    CategoryEntry,
    CategoryRow,
    CategoryWithEntries,
    FeaturedImageRow,
    FullPost,
    PageRow,
    PermalinkRow,
    Permalinks,
    PostInfo,
    PostRow,
    TablepressIndexSchema,
    TablepressTable,
    TableContentRow,
)
from app.repositories.base import BaseRepository
from settings import WORDPRESS_DB_NAME


def _to_datetime(value: datetime | str, utc: bool) -> datetime:
    """Parse a WordPress timestamp; GMT columns come back timezone-aware."""
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    if utc:
        return value.replace(tzinfo=timezone.utc)
    return value


class WordpressRepository(BaseRepository):
    """Read-only access to the WordPress content database."""

    database = WORDPRESS_DB_NAME

    def get_authorship(self) -> dict[int, list[str]]:
        """Get post authors: {post_id: [display name, ...]}."""

        def fetch():
            rows = self.fetchall(
                """
                SELECT rels.object_id, terms.description
                FROM wp_term_relationships AS rels
                LEFT JOIN wp_term_taxonomy AS terms ON terms.term_taxonomy_id = rels.term_taxonomy_id
                WHERE terms.taxonomy = ?
                ORDER BY rels.object_id, rels.term_order
                """,
                ["author"],
            )
            authorship = defaultdict(list)
            for row in map(AuthorRow._make, rows):
                # Co-authors description is "First Last username id email"
                authorship[row.post_id].append(" ".join((row.description or "").split(" ")[:2]))
            logger.debug("get_authorship: {} posts", len(authorship))
            return dict(authorship)

        return self._cached("authorship", fetch)

    def get_custom_permalinks(self) -> Permalinks:
        """Get custom permalink overrides."""

        def fetch():
            rows = self.fetchall(
                "SELECT post_id, meta_value FROM wp_postmeta WHERE meta_key = ?",
                ["custom_permalink"],
            )
            permalinks = Permalinks({row.post_id: row.permalink for row in map(PermalinkRow._make, rows)})
            logger.debug("get_custom_permalinks: {} overrides", len(permalinks))
            return permalinks

        return self._cached("permalinks", fetch)

    def get_featured_images(self) -> dict[int, str]:
        """Get featured image urls: {post_id: url}."""

        def fetch():
            rows = self.fetchall(
                """
                SELECT meta.post_id, posts.guid
                FROM wp_postmeta AS meta
                INNER JOIN wp_posts AS posts ON posts.ID = TRY_CAST(meta.meta_value AS BIGINT)
                WHERE meta.meta_key = ?
                """,
                ["_thumbnail_id"],
            )
            images = {row.post_id: row.guid for row in map(FeaturedImageRow._make, rows)}
            logger.debug("get_featured_images: {} images", len(images))
            return images

        return self._cached("featured_images", fetch)

    def get_entries_by_category(self) -> list[CategoryWithEntries]:
        """Get the topic categories, in display order, with their pages."""

        def fetch():
            rows = self.fetchall(
                """
                SELECT rels.object_id, terms.name
                FROM wp_term_relationships AS rels
                JOIN wp_term_taxonomy AS tax ON tax.term_taxonomy_id = rels.term_taxonomy_id
                JOIN wp_terms AS terms ON terms.term_id = tax.term_id
                WHERE tax.taxonomy = ?
                """,
                ["category"],
            )
            categories_by_page = defaultdict(set)
            for row in map(CategoryRow._make, rows):
                categories_by_page[row.post_id].add(row.name)

            page_rows = self.fetchall(
                """
                SELECT posts.ID, posts.post_title, posts.post_name, star.meta_value
                FROM wp_posts AS posts
                LEFT JOIN wp_postmeta AS star ON star.post_id = posts.ID AND star.meta_key = ?
                WHERE posts.post_type = ? AND posts.post_status = ? AND posts.post_parent = 0
                ORDER BY posts.menu_order ASC, posts.ID
                """,
                ["_ino_star", "page", "publish"],
            )
            # Several _ino_star rows repeat a page; keep one, starred if any says so
            pages_by_id = {}
            for page in map(PageRow._make, page_rows):
                if page.id not in pages_by_id or page.starred == "1":
                    pages_by_id[page.id] = page
            pages = list(pages_by_id.values())
            permalinks = self.get_custom_permalinks()

            result = []
            for category in CATEGORY_ORDER:
                entries = [
                    CategoryEntry(
                        slug=permalinks.get(page.id, page.slug),
                        title=page.title,
                        starred=page.starred == "1",
                    )
                    for page in pages
                    if category in categories_by_page.get(page.id, ())
                ]
                result.append(CategoryWithEntries(name=html.unescape(category), entries=entries))

            logger.debug("get_entries_by_category: {} pages in {} categories", len(pages), len(result))
            return result

        return self._cached("entries_by_category", fetch)

    def get_full_post(self, row: PostRow) -> FullPost:
        """Assemble a full post from a ``wp_posts`` row."""
        authorship = self.get_authorship()
        featured_images = self.get_featured_images()
        permalinks = self.get_custom_permalinks()

        return FullPost(
            id=row.id,
            slug=permalinks.get(row.id, row.slug),
            title=row.title,
            date=_to_datetime(row.date_gmt, utc=True),
            modified_date=_to_datetime(row.modified_gmt, utc=True),
            authors=authorship.get(row.id, []),
            content=row.content,
            excerpt=row.excerpt,
            image_url=featured_images.get(row.id),
        )

    def get_post_info(self, row: PostRow) -> PostInfo:
        """Assemble a blog index summary from a ``wp_posts`` row.

        Uses the site-local ``post_date``, unlike ``get_full_post`` which reads
        the GMT columns; index pages show the date as the author entered it.
        """
        authorship = self.get_authorship()
        featured_images = self.get_featured_images()
        permalinks = self.get_custom_permalinks()

        return PostInfo(
            id=row.id,
            slug=permalinks.get(row.id, row.slug),
            title=row.title,
            date=_to_datetime(row.date, utc=False),
            authors=authorship.get(row.id, []),
            image_url=featured_images.get(row.id),
        )

    def get_blog_index(self) -> list[PostInfo]:
        """Get published blog posts, newest first."""

        def fetch():
            rows = self.fetchall(
                f"""
                SELECT {POST_COLUMNS} FROM wp_posts
                WHERE post_type = ? AND post_status = ?
                ORDER BY post_date DESC
                """,
                ["post", "publish"],
            )
            posts = [self.get_post_info(PostRow._make(r)) for r in rows]
            logger.debug("get_blog_index: {} posts", len(posts))
            return posts

        return self._cached("blog_index", fetch)

    def get_post_by_slug(self, slug: str, post_type: str = "post") -> FullPost | None:
        """Find a published post by its public slug (custom permalink first)."""
        row = None
        post_id = self.get_custom_permalinks().find(slug)
        if post_id is not None:
            row = self.fetchone(
                f"SELECT {POST_COLUMNS} FROM wp_posts WHERE ID = ? AND post_type = ? AND post_status = ?",
                [post_id, post_type, "publish"],
            )
        if row is None:
            row = self.fetchone(
                f"SELECT {POST_COLUMNS} FROM wp_posts WHERE post_name = ? AND post_type = ? AND post_status = ?",
                [slug, post_type, "publish"],
            )
        if row is None:
            return None
        return self.get_full_post(PostRow._make(row))

    def get_tables(self) -> dict[str, TablepressTable]:
        """Get tablepress tables: {table_id: table}."""

        def fetch():
            option = self.fetchone(
                "SELECT option_value FROM wp_options WHERE option_name = ?",
                ["tablepress_tables"],
            )
            if option is None:
                logger.warning("No tablepress_tables option found")
                return {}
            index = TablepressIndexSchema.model_validate_json(option[0])

            rows = self.fetchall(
                "SELECT ID, post_content FROM wp_posts WHERE post_type = ?",
                ["tablepress_table"],
            )
            contents = {row.post_id: row.content for row in map(TableContentRow._make, rows)}

            tables = {}
            for table_id, post_id in index.table_post.items():
                content = contents.get(post_id)
                if content is None:
                    logger.warning("Table {} points at missing post {}", table_id, post_id)
                    data = []
                else:
                    try:
                        data = json.loads(content)
                    except json.JSONDecodeError:
                        logger.error("Table {} has malformed content in post {}", table_id, post_id)
                        data = []
                tables[table_id] = TablepressTable(table_id=table_id, data=data)
            logger.debug("get_tables: {} tables", len(tables))
            return tables

        return self._cached("tables", fetch)
