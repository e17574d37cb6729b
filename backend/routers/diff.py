"""Diff API endpoints"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from models.anchor import ExcerptRequest, ExcerptResponse, ParseRequest
from models.diff import ParsedDiff
from services.config_manager import ConfigManager
from services.diff_parser import DiffParser
from services.excerpt import ExcerptExtractor, find_file

router = APIRouter()
diff_parser = DiffParser()
excerpt_extractor = ExcerptExtractor()


def ensure_diff_size(diff_text: str):
    """Reject diff text larger than the configured limit"""
    limit = ConfigManager.get_instance().max_diff_bytes()
    size = len(diff_text.encode("utf-8"))
    if size > limit:
        raise HTTPException(
            status_code=413,
            detail=f"Diff text is {size} bytes, limit is {limit} bytes",
        )


@router.post("/parse", response_model=ParsedDiff)
async def parse(request: ParseRequest) -> ParsedDiff:
    """Parse raw diff text into sections, files, hunks and lines"""
    ensure_diff_size(request.diff_text)
    return diff_parser.parse(request.diff_text)


@router.post("/excerpt", response_model=ExcerptResponse)
async def excerpt(request: ExcerptRequest) -> ExcerptResponse:
    """Extract the excerpt to store with a new anchor"""
    ensure_diff_size(request.diff_text)
    parsed = diff_parser.parse(request.diff_text)

    file = find_file(parsed, request.file_path)
    if file is None:
        return ExcerptResponse(excerpt="", resolved=False)

    text = excerpt_extractor.extract_excerpt(
        file, request.hunk_index, request.start_line, request.end_line
    )
    return ExcerptResponse(excerpt=text, resolved=bool(text))
