"""Anchor staleness API endpoints"""

from __future__ import annotations

from fastapi import APIRouter

from models.anchor import BatchCheckRequest, StaleCheckRequest, StaleCheckResponse, StalenessReport
from routers.diff import ensure_diff_size
from services.staleness import StalenessChecker

router = APIRouter()
staleness_checker = StalenessChecker()


@router.post("/stale", response_model=StaleCheckResponse)
async def check_anchor(request: StaleCheckRequest) -> StaleCheckResponse:
    """Check whether a single anchor's excerpt is still in the diff"""
    ensure_diff_size(request.diff_text)
    return StaleCheckResponse(stale=staleness_checker.is_stale(request.anchor, request.diff_text))


@router.post("/check", response_model=StalenessReport)
async def check_anchors(request: BatchCheckRequest) -> StalenessReport:
    """Re-check all anchors against a refreshed diff; only flipped anchors are returned"""
    ensure_diff_size(request.diff_text)
    report = staleness_checker.check_all(request.anchors, request.diff_text)

    if report.stale_count > 0:
        print(f"[anchors] {report.stale_count} of {report.checked} anchor(s) stale, {len(report.updated)} changed")

    return report
