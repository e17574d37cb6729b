"""Anchor data models"""

from __future__ import annotations

from pydantic import BaseModel, Field


class Anchor(BaseModel):
    """A comment's reference into a diff, with the excerpt frozen at creation time.

    `id` and `comment_id` belong to the persistence layer and are passed
    through untouched so that callers can match updated anchors back to rows.
    """

    id: str | None = None
    comment_id: str | None = Field(None, alias="commentId")
    file_path: str = Field(..., alias="filePath")
    hunk_index: int = Field(..., alias="hunkIndex")
    start_line: int = Field(..., alias="startLine")
    end_line: int = Field(..., alias="endLine")
    excerpt: str
    stale: bool = False

    model_config = {"populate_by_name": True}


class StalenessReport(BaseModel):
    """Result of a batch staleness check"""

    updated: list[Anchor] = []  # only anchors whose stale flag flipped
    stale_count: int = Field(0, alias="staleCount")  # stale anchors after the check
    checked: int = 0

    model_config = {"populate_by_name": True}


class ParseRequest(BaseModel):
    """Request to parse raw diff text"""

    diff_text: str = Field(..., alias="diffText")

    model_config = {"populate_by_name": True}


class ExcerptRequest(BaseModel):
    """Request to extract an excerpt for a selection"""

    diff_text: str = Field(..., alias="diffText")
    file_path: str = Field(..., alias="filePath")
    hunk_index: int = Field(..., alias="hunkIndex")
    start_line: int = Field(..., alias="startLine")
    end_line: int = Field(..., alias="endLine")

    model_config = {"populate_by_name": True}


class ExcerptResponse(BaseModel):
    """Excerpt text; empty with resolved=False when the selection is unresolvable"""

    excerpt: str
    resolved: bool


class StaleCheckRequest(BaseModel):
    """Request to check a single anchor"""

    diff_text: str = Field(..., alias="diffText")
    anchor: Anchor

    model_config = {"populate_by_name": True}


class StaleCheckResponse(BaseModel):
    stale: bool


class BatchCheckRequest(BaseModel):
    """Request to re-check every anchor of a task against a refreshed diff"""

    diff_text: str = Field(..., alias="diffText")
    anchors: list[Anchor] = []

    model_config = {"populate_by_name": True}
