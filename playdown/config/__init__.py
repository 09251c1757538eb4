"""Shared configuration helpers for pipeline stages."""

from __future__ import annotations

import configparser
from pathlib import Path


def get_int(section: configparser.SectionProxy | dict, key: str, default: int) -> int:
    """Read an int from the config file for stage settings."""
    try:
        return int(section.get(key, default))
    except ValueError:
        return default


def get_str(section: configparser.SectionProxy | dict, key: str, default: str) -> str:
    """Read a string from the config file, stripping surrounding whitespace."""
    return str(section.get(key, default)).strip()


def read_config(path: Path | None) -> configparser.ConfigParser:
    """Load an INI file if it exists; a missing file yields an empty parser."""
    parser = configparser.ConfigParser()
    if path is not None and path.exists():
        parser.read(path, encoding="utf-8")
    return parser


__all__ = ["get_int", "get_str", "read_config"]
