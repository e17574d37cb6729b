"""
Diff Patterns - Line recognition patterns and text rules shared by the
parser, the excerpt extractor and the staleness checker
"""

from __future__ import annotations

import re

from models.diff import DiffLineKind

# Compiled once at import, read-only afterwards
FILE_HEADER_RE = re.compile(r"^diff --git a/(.+) b/(.+)$")
OLD_FILE_RE = re.compile(r"^--- (?:a/)?(.+)$")
NEW_FILE_RE = re.compile(r"^\+\+\+ (?:b/)?(.+)$")
HUNK_HEADER_RE = re.compile(r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@(.*)$")
SECTION_HEADER_RE = re.compile(r"^# (.+)$")

UNTRACKED_PREFIX = "? "
BINARY_PREFIX = "Binary files"
NO_NEWLINE_PREFIX = "\\"
DEV_NULL = "/dev/null"

DEFAULT_SECTION_TITLE = "Changes"
UNTRACKED_HUNK_HEADER = "Untracked file"

# Excerpt prefix per line kind; anything else gets a single space
EXCERPT_PREFIXES = {
    DiffLineKind.ADD: "+",
    DiffLineKind.DEL: "-",
}

# Shorter normalized excerpts match by coincidence too easily
MIN_EXCERPT_LENGTH = 20


def excerpt_prefix(kind: DiffLineKind) -> str:
    """Prefix written in front of a line of this kind in an excerpt"""
    return EXCERPT_PREFIXES.get(kind, " ")


# str.strip() keeps the byte order mark, which counts as whitespace here
_EDGE_WHITESPACE_RE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


def normalize_text(text: str) -> str:
    """Trim every line, drop blank ones and rejoin with newlines.

    Applied identically to stored excerpts and to full diff text so that
    re-indentation and trailing-whitespace churn do not affect comparison.
    """
    lines = (_EDGE_WHITESPACE_RE.sub("", line) for line in text.split("\n"))
    return "\n".join(line for line in lines if line)
