"""Services module - Business logic layer"""

from .config_manager import ConfigManager
from .diff_parser import DiffParser, parse_diff
from .excerpt import ExcerptExtractor, extract_excerpt, find_file
from .staleness import StalenessChecker, check_all, is_stale

__all__ = [
    "ConfigManager",
    "DiffParser",
    "parse_diff",
    "ExcerptExtractor",
    "extract_excerpt",
    "find_file",
    "StalenessChecker",
    "check_all",
    "is_stale",
]
