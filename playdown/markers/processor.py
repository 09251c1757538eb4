from __future__ import annotations

import enum
import re
from dataclasses import dataclass


class Kind(str, enum.Enum):
    """Kind of a document region."""

    SINGLE_LINE_DOC = "single_line_doc"
    BLOCK_DOC = "block_doc"
    CODE = "code"

    @property
    def is_doc(self) -> bool:
        return self is not Kind.CODE


@dataclass(frozen=True)
class Range:
    """Half-open span ``[start, start + length)`` within a source document."""

    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length

    def resolve(self, text: str) -> str:
        """Return the substring of ``text`` covered by this range."""
        return text[self.start : self.end]


@dataclass(frozen=True)
class TaggedRange:
    """A range together with the kind of region it covers."""

    range: Range
    kind: Kind

    @property
    def start(self) -> int:
        return self.range.start

    @property
    def length(self) -> int:
        return self.range.length

    @property
    def end(self) -> int:
        return self.range.end


@dataclass(frozen=True)
class MarkerDefinition:
    """Regular expression describing one documentation marker."""

    kind: Kind
    pattern: str
    flags: int = 0


class PatternCompileError(RuntimeError):
    """Raised when a marker pattern cannot be compiled."""


SINGLE_LINE_MARKER = MarkerDefinition(
    kind=Kind.SINGLE_LINE_DOC,
    pattern=r"^//:[^\r\n]*",
    flags=re.MULTILINE,
)

BLOCK_MARKER = MarkerDefinition(
    kind=Kind.BLOCK_DOC,
    pattern=r"/\*:.*?\*/",
    flags=re.DOTALL,
)

MARKERS: tuple[MarkerDefinition, ...] = (SINGLE_LINE_MARKER, BLOCK_MARKER)


def compile_marker(definition: MarkerDefinition) -> re.Pattern[str]:
    """Compile a marker definition.

    Raises:
        PatternCompileError: If the pattern is not a valid regular expression.
    """
    try:
        return re.compile(definition.pattern, definition.flags)
    except re.error as exc:
        raise PatternCompileError(
            f"Invalid {definition.kind.value} marker pattern {definition.pattern!r}"
        ) from exc


def match_marker(text: str, definition: MarkerDefinition) -> list[TaggedRange]:
    """Return every non-overlapping match of ``definition`` in ``text``.

    Args:
        text: The full source document.
        definition: Marker to search for.

    Returns:
        Tagged ranges in document order. Match objects never leave this
        function, only their spans.
    """
    regex = compile_marker(definition)
    return [
        TaggedRange(range=Range(match.start(), match.end() - match.start()), kind=definition.kind)
        for match in regex.finditer(text)
    ]


def find_markers(
    text: str,
    definitions: tuple[MarkerDefinition, ...] = MARKERS,
) -> list[TaggedRange]:
    """Collect the matches of all marker definitions.

    The result is grouped by definition, not sorted; overlaps between
    definitions are resolved later by ``playdown.intervals.minimize``.
    """
    found: list[TaggedRange] = []
    for definition in definitions:
        found.extend(match_marker(text, definition))
    return found
