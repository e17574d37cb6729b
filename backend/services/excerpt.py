"""
Excerpt Service - Canonical excerpt text for a selection inside a hunk
"""

from __future__ import annotations

from models.diff import DiffFile, ParsedDiff
from services.diff_patterns import excerpt_prefix


class ExcerptExtractor:
    """Turn (file, hunk index, line range) selections into excerpt text"""

    def extract_excerpt(
        self,
        file: DiffFile,
        hunk_index: int,
        start_line: int,
        end_line: int,
    ) -> str:
        """Excerpt for lines start_line..end_line (inclusive) of one hunk.

        Offsets index hunk.lines, where offset 0 is the @@ line. Offsets
        outside the hunk are skipped; an unknown hunk yields "".
        """
        if not 0 <= hunk_index < len(file.hunks):
            return ""

        hunk_lines = file.hunks[hunk_index].lines
        first = max(start_line, 0)
        last = min(end_line, len(hunk_lines) - 1)

        return "\n".join(
            excerpt_prefix(line.kind) + line.content for line in hunk_lines[first : last + 1]
        )

    def global_line_index(self, file: DiffFile, hunk_index: int, line_index: int) -> int:
        """Position of a hunk line when all hunks of the file are laid out one after another"""
        offset = sum(len(hunk.lines) for hunk in file.hunks[: max(hunk_index, 0)])
        return offset + line_index


def find_file(parsed: ParsedDiff, path: str) -> DiffFile | None:
    """First file whose new path, or failing that old path, equals `path`"""
    files = parsed.files
    for file in files:
        if file.new_path == path:
            return file
    for file in files:
        if file.old_path == path:
            return file
    return None


def extract_excerpt(file: DiffFile, hunk_index: int, start_line: int, end_line: int) -> str:
    return ExcerptExtractor().extract_excerpt(file, hunk_index, start_line, end_line)
