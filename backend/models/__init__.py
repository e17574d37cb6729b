"""Models module - Pydantic data models"""

from .diff import DiffFile, DiffHunk, DiffLine, DiffLineKind, DiffSection, ParsedDiff
from .anchor import (
    Anchor,
    BatchCheckRequest,
    ExcerptRequest,
    ExcerptResponse,
    ParseRequest,
    StaleCheckRequest,
    StaleCheckResponse,
    StalenessReport,
)

__all__ = [
    # Diff models
    "DiffLineKind",
    "DiffLine",
    "DiffHunk",
    "DiffFile",
    "DiffSection",
    "ParsedDiff",
    # Anchor models
    "Anchor",
    "StalenessReport",
    "ParseRequest",
    "ExcerptRequest",
    "ExcerptResponse",
    "StaleCheckRequest",
    "StaleCheckResponse",
    "BatchCheckRequest",
]
