"""Public interface for the markers module."""

from .processor import (
    BLOCK_MARKER,
    MARKERS,
    SINGLE_LINE_MARKER,
    Kind,
    MarkerDefinition,
    PatternCompileError,
    Range,
    TaggedRange,
    compile_marker,
    find_markers,
    match_marker,
)

__all__ = [
    "BLOCK_MARKER",
    "MARKERS",
    "SINGLE_LINE_MARKER",
    "Kind",
    "MarkerDefinition",
    "PatternCompileError",
    "Range",
    "TaggedRange",
    "compile_marker",
    "find_markers",
    "match_marker",
]
