from __future__ import annotations

import argparse
import configparser
import dataclasses
import json
import logging
from dataclasses import dataclass
from pathlib import Path

from playdown.config import get_int, read_config
from playdown.intervals import complement, minimize
from playdown.markers import Kind, Range, TaggedRange, find_markers


@dataclass(frozen=True)
class SegmentsConfig:
    """Configuration for segment assembly.

    Code ranges made only of line terminators, holding at most
    ``trivial_line_breaks`` line breaks, are dropped so a lone line break
    between two annotations never becomes an empty fence.
    """

    trivial_line_breaks: int = 1


@dataclass(frozen=True)
class Segment:
    """A typed span of the source document consumed by the renderer."""

    start: int
    length: int
    kind: Kind

    @property
    def range(self) -> Range:
        return Range(self.start, self.length)

    @property
    def end(self) -> int:
        return self.range.end

    def resolve(self, text: str) -> str:
        return self.range.resolve(text)


@dataclass(frozen=True)
class SegmentsDocument:
    """Segments stage output document schema.

    Attributes:
        source: Input source filename.
        segments: Ordered segments of the source.
    """

    source: str
    segments: list[Segment]


def is_trivial_code(text: str, code_range: TaggedRange, config: SegmentsConfig) -> bool:
    """Return True for a code range holding nothing but a few line breaks."""
    content = code_range.range.resolve(text)
    if content.strip("\r\n"):
        return False
    return len(content.splitlines()) <= config.trivial_line_breaks


def assemble_segments(
    text: str,
    code_ranges: list[TaggedRange],
    annotations: list[TaggedRange],
    config: SegmentsConfig,
) -> list[Segment]:
    """Merge code and annotation ranges into ordered segments.

    Args:
        text: The full source document.
        code_ranges: Gaps produced by ``playdown.intervals.complement``.
        annotations: Minimized annotation ranges.
        config: Configuration for segment assembly.

    Returns:
        Segments sorted by start offset. The sort is stable and code ranges
        come first, so code precedes an annotation on equal starts.
    """
    kept_code = [item for item in code_ranges if not is_trivial_code(text, item, config)]
    merged = sorted(kept_code + list(annotations), key=lambda item: item.start)
    return [Segment(start=item.start, length=item.length, kind=item.kind) for item in merged]


def segment_document(text: str, config: SegmentsConfig) -> list[Segment]:
    """Split a whole source document into ordered segments."""
    annotations = minimize(find_markers(text))
    code_ranges = complement(Range(0, len(text)), annotations)
    segments = assemble_segments(text, code_ranges, annotations, config)
    logging.debug(
        "Segmented %d characters into %d annotations and %d code ranges",
        len(text),
        len(annotations),
        len(segments) - len(annotations),
    )
    return segments


def segment_source(source_path: Path, output_dir: Path, config: SegmentsConfig) -> SegmentsDocument:
    """Segment a source file and write the segments JSON output.

    Args:
        source_path: Path to the annotated source file.
        output_dir: Output folder for the generated JSON file.
        config: Configuration for segment assembly.

    Output:
        Writes ``<stem>_segments.json`` into the output directory. The JSON
        document follows ``SegmentsDocument``.

    Returns:
        The segments document.

    Raises:
        FileNotFoundError: If the source file does not exist.
    """
    if not source_path.exists():
        raise FileNotFoundError(source_path)

    text = source_path.read_text(encoding="utf-8-sig")
    output_doc = SegmentsDocument(source=source_path.name, segments=segment_document(text, config))
    write_segments(output_doc, output_dir)
    return output_doc


def write_segments(output_doc: SegmentsDocument, output_dir: Path) -> Path:
    """Write a segments document as ``<stem>_segments.json``."""
    output_dir.mkdir(parents=True, exist_ok=True)
    json_path = output_dir / f"{Path(output_doc.source).stem}_segments.json"
    with json_path.open("w", encoding="utf-8") as handle:
        json.dump(dataclasses.asdict(output_doc), handle, indent=2, ensure_ascii=False)
    logging.info("Wrote %d segments to %s", len(output_doc.segments), json_path)
    return json_path


def _parse_args() -> argparse.Namespace:
    """Parse CLI arguments for the segments command.

    Used by the CLI entry point for command-line execution.
    """
    parser = argparse.ArgumentParser(
        description="Split an annotated source file into documentation and code segments.",
    )
    parser.add_argument("source", type=Path, help="Annotated source file")
    parser.add_argument("output_dir", type=Path, help="Output folder")
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to the INI config file.",
    )
    return parser.parse_args()


def parse_config(config: configparser.ConfigParser) -> SegmentsConfig:
    """Build a SegmentsConfig from a loaded configparser instance."""
    defaults = SegmentsConfig()
    section = config["segments"] if config.has_section("segments") else {}
    return SegmentsConfig(
        trivial_line_breaks=get_int(section, "trivial_line_breaks", defaults.trivial_line_breaks),
    )


def main(config_path: Path | None = None) -> None:
    """Run segmentation from the command line.

    This is the CLI entry point used by ``python -m playdown.segments.processor``.

    Args:
        config_path: Optional path to the INI config file.
    """
    args = _parse_args()
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    config = parse_config(read_config(args.config or config_path))
    segment_source(args.source, args.output_dir, config)


if __name__ == "__main__":
    main()
