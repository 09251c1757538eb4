"""Public interface for the segments module."""

from .processor import (
    Segment,
    SegmentsConfig,
    SegmentsDocument,
    assemble_segments,
    is_trivial_code,
    parse_config,
    segment_document,
    segment_source,
    write_segments,
)

__all__ = [
    "Segment",
    "SegmentsConfig",
    "SegmentsDocument",
    "assemble_segments",
    "is_trivial_code",
    "parse_config",
    "segment_document",
    "segment_source",
    "write_segments",
]
