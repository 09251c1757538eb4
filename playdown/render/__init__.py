"""Public interface for the render module."""

from .processor import (
    FENCE,
    SEPARATORS,
    RenderConfig,
    fence_code,
    load_segments,
    parse_config,
    render_markdown,
    render_segment,
    render_source,
    render_step,
    separator,
    strip_block_markers,
    strip_single_line_markers,
    write_markdown,
)

__all__ = [
    "FENCE",
    "SEPARATORS",
    "RenderConfig",
    "fence_code",
    "load_segments",
    "parse_config",
    "render_markdown",
    "render_segment",
    "render_source",
    "render_step",
    "separator",
    "strip_block_markers",
    "strip_single_line_markers",
    "write_markdown",
]
