"""Diff-related data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, computed_field


class DiffLineKind(str, Enum):
    """Kind of a single line inside a hunk"""

    CONTEXT = "context"
    ADD = "add"
    DEL = "del"
    HEADER = "header"
    HUNK = "hunk"
    INFO = "info"


class DiffLine(BaseModel):
    """A single line of a hunk, with running old/new line numbers"""

    kind: DiffLineKind
    content: str
    old_line_number: int | None = Field(None, alias="oldLineNumber")  # context, del
    new_line_number: int | None = Field(None, alias="newLineNumber")  # context, add

    model_config = {"populate_by_name": True}


class DiffHunk(BaseModel):
    """An @@ block of a file diff. lines[0] is always the @@ marker itself."""

    header: str
    start_old: int = Field(0, alias="startOld")
    count_old: int = Field(0, alias="countOld")
    start_new: int = Field(0, alias="startNew")
    count_new: int = Field(0, alias="countNew")
    lines: list[DiffLine] = []

    model_config = {"populate_by_name": True}


class DiffFile(BaseModel):
    """One file block of a diff"""

    old_path: str = Field(..., alias="oldPath")
    new_path: str = Field(..., alias="newPath")
    hunks: list[DiffHunk] = []
    is_new: bool = Field(False, alias="isNew")
    is_deleted: bool = Field(False, alias="isDeleted")
    is_binary: bool = Field(False, alias="isBinary")

    model_config = {"populate_by_name": True}


class DiffSection(BaseModel):
    """Named group of files (staged, unstaged, untracked...)"""

    title: str
    files: list[DiffFile] = []


class ParsedDiff(BaseModel):
    """Complete parse result. `files` is derived from `sections`."""

    sections: list[DiffSection] = []

    @computed_field
    @property
    def files(self) -> list[DiffFile]:
        return [f for section in self.sections for f in section.files]
