"""Shared fixtures - in-memory duckdb databases shaped like WordPress and grapher."""

import json
from datetime import datetime

import duckdb
import pytest

from app.repositories.charts.grapher import GrapherRepository
from app.repositories.content.wordpress import WordpressRepository

WORDPRESS_DDL = [
    """
    CREATE TABLE wp_posts (
        ID INTEGER PRIMARY KEY,
        post_name VARCHAR,
        post_title VARCHAR,
        post_date TIMESTAMP,
        post_date_gmt TIMESTAMP,
        post_modified_gmt TIMESTAMP,
        post_content VARCHAR,
        post_excerpt VARCHAR,
        post_type VARCHAR,
        post_status VARCHAR,
        post_parent INTEGER,
        menu_order INTEGER,
        guid VARCHAR
    )
    """,
    "CREATE TABLE wp_postmeta (meta_id INTEGER, post_id INTEGER, meta_key VARCHAR, meta_value VARCHAR)",
    "CREATE TABLE wp_terms (term_id INTEGER, name VARCHAR, slug VARCHAR)",
    """
    CREATE TABLE wp_term_taxonomy (
        term_taxonomy_id INTEGER, term_id INTEGER, taxonomy VARCHAR, description VARCHAR
    )
    """,
    "CREATE TABLE wp_term_relationships (object_id INTEGER, term_taxonomy_id INTEGER, term_order INTEGER)",
    "CREATE TABLE wp_options (option_id INTEGER, option_name VARCHAR, option_value VARCHAR)",
]

GRAPHER_DDL = [
    "CREATE TABLE charts (id INTEGER PRIMARY KEY, config VARCHAR, publishedAt TIMESTAMP)",
    "CREATE TABLE chart_slug_redirects (id INTEGER, chart_id INTEGER, slug VARCHAR)",
    "CREATE TABLE tags (id INTEGER, name VARCHAR, parentId INTEGER)",
    "CREATE TABLE chart_tags (chartId INTEGER, tagId INTEGER)",
]


def _post(id, slug, title, post_type, status="publish", date=None, parent=0, menu_order=0, content="", guid=""):
    date = date or datetime(2018, 1, 1, 12, 0)
    return (id, slug, title, date, date, date, content, "", post_type, status, parent, menu_order, guid)


WP_POSTS = [
    _post(1, "population-growth", "Population Growth", "page", menu_order=2),
    _post(2, "world-health", "World Health", "page", menu_order=1),
    _post(3, "draft-page", "Draft Page", "page", status="draft"),
    _post(4, "child-page", "Child Page", "page", parent=1),
    (
        10,
        "first-post",
        "First post",
        datetime(2018, 3, 1, 10, 0),
        datetime(2018, 3, 1, 9, 0),
        datetime(2018, 3, 2, 9, 0),
        "<p>Hello</p>",
        "A short excerpt",
        "post",
        "publish",
        0,
        0,
        "",
    ),
    _post(11, "second-post", "Second post", "post", date=datetime(2018, 4, 1, 12, 0)),
    _post(12, "unpublished-post", "Unpublished", "post", status="draft", date=datetime(2019, 1, 1)),
    _post(20, "chart-png", "chart.png", "attachment", guid="https://example.org/uploads/chart.png"),
    _post(30, "table-3", "Table 3", "tablepress_table", content=json.dumps([["a", "b"], ["1", "2"]])),
]

WP_POSTMETA = [
    (1, 10, "custom_permalink", "first/"),
    (2, 2, "custom_permalink", "health"),
    (3, 1, "_ino_star", "1"),
    (4, 2, "_ino_star", "0"),
    (5, 10, "_thumbnail_id", "20"),
    (6, 11, "_thumbnail_id", "not-an-id"),
]

WP_TERMS = [
    (1, "Population", "population"),
    (2, "Health", "health"),
    (3, "Growth &amp; Inequality", "growth-inequality"),
    (4, "cap-hannah", "cap-hannah"),
    (5, "cap-max", "cap-max"),
]

WP_TERM_TAXONOMY = [
    (101, 1, "category", ""),
    (102, 2, "category", ""),
    (103, 3, "category", ""),
    (104, 4, "author", "Hannah Ritchie hannah 4 hannah@example.org"),
    (105, 5, "author", "Max Roser max 5 max@example.org"),
]

WP_TERM_RELATIONSHIPS = [
    (1, 101, 0),
    (1, 102, 0),
    (1, 103, 0),
    (2, 102, 0),
    (3, 102, 0),
    (4, 102, 0),
    (10, 104, 0),
    (10, 105, 1),
    (11, 105, 0),
]

WP_OPTIONS = [
    (1, "tablepress_tables", json.dumps({"last_id": 4, "table_post": {"3": 30, "4": 99}})),
]


def _chart(id, slug, version, published=True):
    config = json.dumps({"slug": slug, "title": slug.replace("-", " ").title(), "version": version})
    return (id, config, datetime(2018, 1, 1) if published else None)


CHARTS = [
    _chart(1, "life-expectancy", 5),
    _chart(2, "population", 6),
    _chart(3, "draft-chart", 1, published=False),
    _chart(20, "shared-slug", 2),
]

CHART_SLUG_REDIRECTS = [
    (1, 10, "shared-slug"),
    (2, 1, "old-life-expectancy"),
    (3, 999, "ghost-chart"),
]

TAGS = [
    (1500, "Health", None),
    (2001, "Life Expectancy", 1500),
    (2002, "Internal", None),
    (2003, "Needs review", 2002),
]

CHART_TAGS = [
    (1, 2001),
    (1, 2003),
    (2, 2003),
    (3, 2001),
]


def _seed(conn: duckdb.DuckDBPyConnection, table: str, rows: list[tuple]) -> None:
    placeholders = ", ".join("?" for _ in rows[0])
    conn.executemany(f"INSERT INTO {table} VALUES ({placeholders})", rows)


@pytest.fixture
def wp_db():
    conn = duckdb.connect(":memory:")
    for ddl in WORDPRESS_DDL:
        conn.execute(ddl)
    _seed(conn, "wp_posts", WP_POSTS)
    _seed(conn, "wp_postmeta", WP_POSTMETA)
    _seed(conn, "wp_terms", WP_TERMS)
    _seed(conn, "wp_term_taxonomy", WP_TERM_TAXONOMY)
    _seed(conn, "wp_term_relationships", WP_TERM_RELATIONSHIPS)
    _seed(conn, "wp_options", WP_OPTIONS)
    yield conn
    conn.close()


@pytest.fixture
def grapher_db():
    conn = duckdb.connect(":memory:")
    for ddl in GRAPHER_DDL:
        conn.execute(ddl)
    _seed(conn, "charts", CHARTS)
    _seed(conn, "chart_slug_redirects", CHART_SLUG_REDIRECTS)
    _seed(conn, "tags", TAGS)
    _seed(conn, "chart_tags", CHART_TAGS)
    yield conn
    conn.close()


@pytest.fixture
def wordpress(wp_db):
    return WordpressRepository(conn=wp_db)


@pytest.fixture
def grapher(grapher_db):
    return GrapherRepository(conn=grapher_db)
