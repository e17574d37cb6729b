"""
Diff Parser Service - Parse section-annotated unified diff text into
sections, files, hunks and lines
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from models.diff import DiffFile, DiffHunk, DiffLine, DiffLineKind, DiffSection, ParsedDiff
from services.diff_patterns import (
    BINARY_PREFIX,
    DEFAULT_SECTION_TITLE,
    DEV_NULL,
    FILE_HEADER_RE,
    HUNK_HEADER_RE,
    NEW_FILE_RE,
    NO_NEWLINE_PREFIX,
    OLD_FILE_RE,
    SECTION_HEADER_RE,
    UNTRACKED_HUNK_HEADER,
    UNTRACKED_PREFIX,
)


@dataclass(frozen=True)
class ScanState:
    """Everything the scan knows between two lines"""

    section: DiffSection
    sections: tuple[DiffSection, ...] = ()
    file: DiffFile | None = None
    hunk: DiffHunk | None = None
    old_line: int = 0
    new_line: int = 0


def initial_state() -> ScanState:
    return ScanState(section=DiffSection(title=DEFAULT_SECTION_TITLE))


def close_hunk(state: ScanState) -> ScanState:
    """Append the open hunk, if any, to the open file"""
    if state.hunk is None:
        return state
    if state.file is None:
        return replace(state, hunk=None)
    file = state.file.model_copy(update={"hunks": [*state.file.hunks, state.hunk]})
    return replace(state, file=file, hunk=None)


def close_file(state: ScanState) -> ScanState:
    """Close the open hunk and append the open file, if any, to the current section"""
    state = close_hunk(state)
    if state.file is None:
        return state
    return replace(state, section=_append_file(state.section, state.file), file=None)


def close_section(state: ScanState, title: str) -> ScanState:
    """Close the open file, keep the current section and start a new one"""
    state = close_file(state)
    return replace(
        state,
        sections=(*state.sections, state.section),
        section=DiffSection(title=title),
    )


def finish(state: ScanState) -> ParsedDiff:
    """Close everything still open and drop empty sections.

    A diff with no files at all still yields the single default section.
    """
    state = close_file(state)
    sections = [s for s in (*state.sections, state.section) if s.files]
    if not sections:
        sections = [DiffSection(title=DEFAULT_SECTION_TITLE)]
    return ParsedDiff(sections=sections)


def _append_file(section: DiffSection, file: DiffFile) -> DiffSection:
    return section.model_copy(update={"files": [*section.files, file]})


def untracked_file(path: str) -> DiffFile:
    """Placeholder file for a path git does not track yet"""
    return DiffFile(
        old_path=path,
        new_path=path,
        hunks=[
            DiffHunk(
                header=UNTRACKED_HUNK_HEADER,
                lines=[DiffLine(kind=DiffLineKind.INFO, content=f"Untracked: {path}")],
            )
        ],
        is_new=True,
    )


def body_line(state: ScanState, line: str) -> tuple[ScanState, DiffLine | None]:
    """Classify a line inside an open hunk and advance the line counters.

    Returns None for lines without a recognized prefix.
    """
    if line.startswith("+"):
        diff_line = DiffLine(kind=DiffLineKind.ADD, content=line[1:], new_line_number=state.new_line)
        return replace(state, new_line=state.new_line + 1), diff_line
    if line.startswith("-"):
        diff_line = DiffLine(kind=DiffLineKind.DEL, content=line[1:], old_line_number=state.old_line)
        return replace(state, old_line=state.old_line + 1), diff_line
    if line.startswith(" "):
        diff_line = DiffLine(
            kind=DiffLineKind.CONTEXT,
            content=line[1:],
            old_line_number=state.old_line,
            new_line_number=state.new_line,
        )
        return replace(state, old_line=state.old_line + 1, new_line=state.new_line + 1), diff_line
    if line.startswith(NO_NEWLINE_PREFIX):
        return state, DiffLine(kind=DiffLineKind.INFO, content=line)
    return state, None


class DiffParser:
    """Parse diff text made of `# <title>` sections, git file blocks and `? <path>` lines"""

    def parse(self, diff_text: str) -> ParsedDiff:
        """Parse diff text. Never raises: unknown lines are skipped."""
        state = initial_state()
        for raw_line in diff_text.split("\n"):
            state = self.step(state, raw_line.rstrip("\r"))
        return finish(state)

    def step(self, state: ScanState, line: str) -> ScanState:
        """Apply one line to the scan state, in marker priority order"""
        section_match = SECTION_HEADER_RE.match(line)
        if section_match:
            return close_section(state, section_match.group(1))

        if line.startswith(UNTRACKED_PREFIX):
            state = close_file(state)
            path = line[len(UNTRACKED_PREFIX):]
            return replace(state, section=_append_file(state.section, untracked_file(path)))

        file_match = FILE_HEADER_RE.match(line)
        if file_match:
            state = close_file(state)
            return replace(
                state,
                file=DiffFile(old_path=file_match.group(1), new_path=file_match.group(2)),
            )

        if state.file is None:
            return state

        # File markers win over body lines even inside an open hunk, so a
        # deleted line whose content starts with "-- " is consumed as a marker
        old_match = OLD_FILE_RE.match(line)
        if old_match:
            if old_match.group(1) == DEV_NULL:
                return replace(state, file=state.file.model_copy(update={"is_new": True}))
            return state

        new_match = NEW_FILE_RE.match(line)
        if new_match:
            if new_match.group(1) == DEV_NULL:
                return replace(state, file=state.file.model_copy(update={"is_deleted": True}))
            return state

        if line.startswith(BINARY_PREFIX):
            return replace(state, file=state.file.model_copy(update={"is_binary": True}))

        hunk_match = HUNK_HEADER_RE.match(line)
        if hunk_match:
            state = close_hunk(state)
            old_start, old_count, new_start, new_count, _ = hunk_match.groups()
            hunk = DiffHunk(
                header=line,
                start_old=int(old_start),
                count_old=int(old_count or 1),
                start_new=int(new_start),
                count_new=int(new_count or 1),
                lines=[DiffLine(kind=DiffLineKind.HUNK, content=line)],
            )
            return replace(state, hunk=hunk, old_line=int(old_start), new_line=int(new_start))

        if state.hunk is None:
            return state

        state, diff_line = body_line(state, line)
        if diff_line is None:
            return state
        hunk = state.hunk.model_copy(update={"lines": [*state.hunk.lines, diff_line]})
        return replace(state, hunk=hunk)


def parse_diff(diff_text: str) -> ParsedDiff:
    """Parse diff text with a default DiffParser"""
    return DiffParser().parse(diff_text)
