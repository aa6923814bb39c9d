"""DuckDB connection management.

WordPress and grapher live in MySQL; each is attached read-only into its own
in-memory duckdb connection through the ``mysql`` extension, so repositories
query the plain table names (``wp_posts``, ``charts``...) with duckdb SQL.
"""

import threading

import duckdb
from loguru import logger

from settings import DB_HOST, DB_PASS, DB_PORT, DB_USER

_local = threading.local()


def _dsn(database: str) -> str:
    """libmysql-style connection string understood by duckdb's mysql extension."""
    parts = [f"host={DB_HOST}", f"port={DB_PORT}", f"user={DB_USER}", f"database={database}"]
    if DB_PASS:
        parts.append(f"password={DB_PASS}")
    return " ".join(parts)


def _attach_sql(database: str) -> str:
    """ATTACH statement for the database; quotes in the DSN are doubled."""
    dsn = _dsn(database).replace("'", "''")
    return f"ATTACH '{dsn}' AS src (TYPE mysql, READ_ONLY)"


def _connections() -> dict[str, duckdb.DuckDBPyConnection]:
    if not hasattr(_local, "conns"):
        _local.conns = {}
    return _local.conns


def connect(database: str) -> duckdb.DuckDBPyConnection:
    """Open a new connection with ``database`` attached read-only and selected."""
    conn = duckdb.connect(":memory:")
    conn.execute("INSTALL mysql")
    conn.execute("LOAD mysql")
    conn.execute(_attach_sql(database))
    conn.execute("USE src")
    logger.debug("DB attached: {}@{}:{}", database, DB_HOST, DB_PORT)
    return conn


def get_db(database: str) -> duckdb.DuckDBPyConnection:
    """Get thread-local connection for a database."""
    conns = _connections()
    if conns.get(database) is None:
        conns[database] = connect(database)
    return conns[database]


def close_db(database: str | None = None) -> None:
    """Close thread-local connection(s); all of them when no name is given."""
    conns = _connections()
    names = [database] if database else list(conns)
    for name in names:
        conn = conns.pop(name, None)
        if conn is not None:
            conn.close()
            logger.debug("DB connection closed: {}", name)
