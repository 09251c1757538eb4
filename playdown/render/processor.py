from __future__ import annotations

import argparse
import configparser
import logging
import re
import sys
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from playdown.config import get_str, read_config
from playdown.markers import Kind
from playdown.segments import Segment, SegmentsDocument

FENCE = "```"

_SINGLE_LINE_PREFIX = re.compile(r"^//: ?", re.MULTILINE)
_BLOCK_OPEN = re.compile(r"\A/\*:")
_BLOCK_CLOSE = re.compile(r"\*/\Z")

SEPARATORS: dict[tuple[Kind | None, Kind], str] = {
    (None, Kind.CODE): "",
    (None, Kind.SINGLE_LINE_DOC): "",
    (None, Kind.BLOCK_DOC): "",
    (Kind.CODE, Kind.CODE): "\n",
    (Kind.CODE, Kind.SINGLE_LINE_DOC): "\n",
    (Kind.CODE, Kind.BLOCK_DOC): "\n",
    (Kind.SINGLE_LINE_DOC, Kind.CODE): "\n\n",
    (Kind.SINGLE_LINE_DOC, Kind.SINGLE_LINE_DOC): "\n",
    (Kind.SINGLE_LINE_DOC, Kind.BLOCK_DOC): "\n\n",
    (Kind.BLOCK_DOC, Kind.CODE): "\n",
    (Kind.BLOCK_DOC, Kind.SINGLE_LINE_DOC): "\n\n",
    (Kind.BLOCK_DOC, Kind.BLOCK_DOC): "\n",
}


@dataclass(frozen=True)
class RenderConfig:
    """Configuration for Markdown rendering.

    ``code_language`` is appended to every opening fence; empty means a bare fence.
    """

    code_language: str = ""


class _SegmentModel(BaseModel):
    """Pydantic schema for a segment."""

    start: int = Field(..., ge=0, description="Start offset in characters.")
    length: int = Field(..., ge=0, description="Length in characters.")
    kind: Kind = Field(..., description="Region kind.")


class _SegmentsModel(BaseModel):
    """Pydantic schema for the segments document."""

    source: str = Field(..., description="Source filename.")
    segments: list[_SegmentModel] = Field(default_factory=list)


def separator(previous: Kind | None, current: Kind) -> str:
    """Return the text inserted between a ``previous`` and a ``current`` segment."""
    return SEPARATORS[(previous, current)]


def strip_single_line_markers(text: str) -> str:
    """Remove ``//:`` and at most one following space at each line start."""
    return _SINGLE_LINE_PREFIX.sub("", text)


def strip_block_markers(text: str) -> str:
    """Remove the opening ``/*:`` at the very start and ``*/`` at the very end."""
    return _BLOCK_CLOSE.sub("", _BLOCK_OPEN.sub("", text, count=1), count=1)


def fence_code(text: str, language: str = "") -> str:
    """Wrap code in a fence after trimming outer line terminators."""
    content = text.strip("\r\n")
    return f"{FENCE}{language}\n{content}\n{FENCE}"


def render_segment(text: str, segment: Segment, config: RenderConfig) -> str:
    """Render a single segment of ``text`` without any leading separator."""
    content = segment.resolve(text)
    if not segment.kind.is_doc:
        return fence_code(content, config.code_language)
    if segment.kind is Kind.SINGLE_LINE_DOC:
        return strip_single_line_markers(content)
    return strip_block_markers(content)


def render_step(
    state: Kind | None,
    text: str,
    segment: Segment,
    config: RenderConfig,
) -> tuple[Kind, str]:
    """Consume one segment.

    Returns:
        The new render state (the segment's kind) and the emitted chunk,
        separator included.
    """
    chunk = separator(state, segment.kind) + render_segment(text, segment, config)
    return segment.kind, chunk


def render_markdown(text: str, segments: list[Segment], config: RenderConfig) -> str:
    """Render ordered segments of ``text`` to Markdown.

    Args:
        text: The full source document.
        segments: Segments in document order.
        config: Configuration for rendering.

    Returns:
        The Markdown document; empty when there are no segments.
    """
    state: Kind | None = None
    chunks: list[str] = []
    for segment in segments:
        state, chunk = render_step(state, text, segment, config)
        chunks.append(chunk)
    return "".join(chunks)


def load_segments(path: Path) -> SegmentsDocument:
    """Load a segments JSON document from disk.

    Raises:
        FileNotFoundError: If the JSON file does not exist.
        ValueError: If the JSON does not match the segments schema.
    """
    if not path.exists():
        raise FileNotFoundError(path)
    try:
        model = _SegmentsModel.model_validate_json(path.read_text(encoding="utf-8"))
    except ValidationError as exc:
        raise ValueError(f"Invalid segments JSON format: {path}") from exc
    segments = [
        Segment(start=segment.start, length=segment.length, kind=segment.kind)
        for segment in model.segments
    ]
    return SegmentsDocument(source=model.source, segments=segments)


def render_source(source_path: Path, segments_json_path: Path, config: RenderConfig) -> str:
    """Render a source file using a previously written segments document.

    Args:
        source_path: Path to the annotated source file.
        segments_json_path: Path to the segments stage JSON output.
        config: Configuration for rendering.

    Returns:
        The Markdown document.

    Raises:
        FileNotFoundError: If either input file does not exist.
        ValueError: If a segment lies outside the source document.
    """
    if not source_path.exists():
        raise FileNotFoundError(source_path)
    segments_doc = load_segments(segments_json_path)
    text = source_path.read_text(encoding="utf-8-sig")
    for segment in segments_doc.segments:
        if segment.end > len(text):
            raise ValueError(
                f"Segment {segment.start}+{segment.length} exceeds {source_path.name} ({len(text)} characters)"
            )
    return render_markdown(text, segments_doc.segments, config)


def _parse_args() -> argparse.Namespace:
    """Parse CLI arguments for the render command.

    Used by the CLI entry point for command-line execution.
    """
    parser = argparse.ArgumentParser(
        description="Render an annotated source file to Markdown from its segments JSON.",
    )
    parser.add_argument("source", type=Path, help="Annotated source file")
    parser.add_argument("segments_json", type=Path, help="Segments JSON file")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Write Markdown to this file instead of stdout.",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to the INI config file.",
    )
    return parser.parse_args()


def parse_config(config: configparser.ConfigParser) -> RenderConfig:
    """Build a RenderConfig from a loaded configparser instance."""
    defaults = RenderConfig()
    section = config["render"] if config.has_section("render") else {}
    return RenderConfig(
        code_language=get_str(section, "code_language", defaults.code_language),
    )


def write_markdown(markdown: str, output_path: Path | None) -> None:
    """Write Markdown to a file or stdout, ending non-empty output with a newline."""
    if markdown and not markdown.endswith("\n"):
        markdown += "\n"
    if output_path is None:
        sys.stdout.write(markdown)
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(markdown, encoding="utf-8")
    logging.info("Wrote Markdown to %s", output_path)


def main(config_path: Path | None = None) -> None:
    """Run rendering from the command line.

    This is the CLI entry point used by ``python -m playdown.render.processor``.

    Args:
        config_path: Optional path to the INI config file.
    """
    args = _parse_args()
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    config = parse_config(read_config(args.config or config_path))
    markdown = render_source(args.source, args.segments_json, config)
    write_markdown(markdown, args.output)


if __name__ == "__main__":
    main()
