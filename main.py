from __future__ import annotations

import argparse
import dataclasses
import logging
from pathlib import Path

from playdown import render as render_module
from playdown import segments as segments_module
from playdown.config import read_config


def convert(
    text: str,
    segments_config: segments_module.SegmentsConfig | None = None,
    render_config: render_module.RenderConfig | None = None,
) -> str:
    """Convert annotated source text to Markdown."""
    segments = segments_module.segment_document(text, segments_config or segments_module.SegmentsConfig())
    return render_module.render_markdown(text, segments, render_config or render_module.RenderConfig())


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for the conversion runner."""
    parser = argparse.ArgumentParser(
        description="Convert an annotated source file (//: and /*: */ comments) to Markdown.",
    )
    parser.add_argument("source", type=Path, help="Annotated source file")
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to the INI config file.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Write Markdown to this file instead of stdout.",
    )
    parser.add_argument(
        "-l",
        "--language",
        help="Language tag for code fences, overriding the config file.",
    )
    parser.add_argument(
        "--segments-json",
        dest="segments_dir",
        type=Path,
        help="Also write <stem>_segments.json into this folder.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Run the conversion pipeline."""
    args = _parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    config_path = args.config or Path(__file__).parent / "config.ini"
    parser = read_config(config_path)
    segments_config = segments_module.parse_config(parser)
    render_config = render_module.parse_config(parser)
    if args.language is not None:
        render_config = dataclasses.replace(render_config, code_language=args.language.strip())

    source_path: Path = args.source
    try:
        text = source_path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        logging.error("Cannot read %s: %s", source_path, exc)
        raise SystemExit(1) from exc

    logging.info("Converting %s", source_path.name)
    segments = segments_module.segment_document(text, segments_config)
    if args.segments_dir is not None:
        segments_module.write_segments(
            segments_module.SegmentsDocument(source=source_path.name, segments=segments),
            args.segments_dir,
        )
    markdown = render_module.render_markdown(text, segments, render_config)
    render_module.write_markdown(markdown, args.output)


if __name__ == "__main__":
    main()
