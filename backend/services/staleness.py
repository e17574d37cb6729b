"""
Staleness Service - Decide whether stored anchors still match a refreshed diff

The check is a whole-diff containment test on normalized text. Anchor
coordinates (hunk index, line offsets) are only a rendering hint and are
never consulted, so hunks shifting between refreshes do not mark anchors
stale. Identical text in another file counts as a match.
"""

from __future__ import annotations

from models.anchor import Anchor, StalenessReport
from services.diff_patterns import MIN_EXCERPT_LENGTH, normalize_text


def excerpt_exists_in_diff(excerpt: str, normalized_diff: str) -> bool:
    """True when the excerpt is long enough to trust and occurs in the normalized diff"""
    normalized_excerpt = normalize_text(excerpt)
    if len(normalized_excerpt) < MIN_EXCERPT_LENGTH:
        return False
    return normalized_excerpt in normalized_diff


class StalenessChecker:
    """Re-check anchor excerpts against the current diff text"""

    def is_stale(self, anchor: Anchor, diff_text: str) -> bool:
        return not excerpt_exists_in_diff(anchor.excerpt, normalize_text(diff_text))

    def check_all(self, anchors: list[Anchor], diff_text: str) -> StalenessReport:
        """Check every anchor; report only those whose stale flag changes.

        Input anchors are left untouched, changed ones come back as copies.
        """
        normalized_diff = normalize_text(diff_text)
        updated: list[Anchor] = []
        stale_count = 0

        for anchor in anchors:
            stale = not excerpt_exists_in_diff(anchor.excerpt, normalized_diff)
            if stale != anchor.stale:
                updated.append(anchor.model_copy(update={"stale": stale}))
            if stale:
                stale_count += 1

        return StalenessReport(updated=updated, stale_count=stale_count, checked=len(anchors))


def is_stale(anchor: Anchor, diff_text: str) -> bool:
    return StalenessChecker().is_stale(anchor, diff_text)


def check_all(anchors: list[Anchor], diff_text: str) -> StalenessReport:
    return StalenessChecker().check_all(anchors, diff_text)
