"""Schemas for JSON blobs stored inside WordPress."""

from pydantic import BaseModel, Field


class TablepressIndexSchema(BaseModel):
    """``tablepress_tables`` option: which post hosts each table."""

    last_id: int = 0
    table_post: dict[str, int] = Field(default_factory=dict)
