"""Tests for playdown.markers: locating //: lines and /*: */ blocks."""

import pytest

from playdown.markers import (
    BLOCK_MARKER,
    SINGLE_LINE_MARKER,
    Kind,
    MarkerDefinition,
    PatternCompileError,
    Range,
    TaggedRange,
    find_markers,
    match_marker,
)


class TestSingleLineMarker:
    def test_matches_each_line_without_terminator(self):
        text = "//: a\ncode\n//: b"
        assert match_marker(text, SINGLE_LINE_MARKER) == [
            TaggedRange(Range(0, 5), Kind.SINGLE_LINE_DOC),
            TaggedRange(Range(11, 5), Kind.SINGLE_LINE_DOC),
        ]

    def test_crlf_terminator_is_excluded(self):
        text = "//: a\r\nb"
        assert match_marker(text, SINGLE_LINE_MARKER) == [TaggedRange(Range(0, 5), Kind.SINGLE_LINE_DOC)]

    def test_marker_must_start_the_line(self):
        assert match_marker("let x = 1 //: trailing", SINGLE_LINE_MARKER) == []
        assert match_marker("  //: indented", SINGLE_LINE_MARKER) == []

    def test_plain_comment_is_not_a_marker(self):
        assert match_marker("// just a comment\n/* block */", SINGLE_LINE_MARKER) == []


class TestBlockMarker:
    def test_spans_lines_and_includes_delimiters(self):
        text = "a /*: x\ny */ b"
        (found,) = match_marker(text, BLOCK_MARKER)
        assert found.kind is Kind.BLOCK_DOC
        assert found.range.resolve(text) == "/*: x\ny */"

    def test_non_greedy(self):
        text = "/*: a */ b /*: c */"
        assert match_marker(text, BLOCK_MARKER) == [
            TaggedRange(Range(0, 8), Kind.BLOCK_DOC),
            TaggedRange(Range(11, 8), Kind.BLOCK_DOC),
        ]

    def test_unterminated_block_is_ignored(self):
        assert match_marker("/*: never closed\ncode", BLOCK_MARKER) == []


class TestFindMarkers:
    def test_collects_both_kinds(self):
        text = "//: title\n/*: body */\n"
        kinds = [item.kind for item in find_markers(text)]
        assert kinds == [Kind.SINGLE_LINE_DOC, Kind.BLOCK_DOC]

    def test_empty_text(self):
        assert find_markers("") == []

    def test_invalid_pattern_raises(self):
        broken = MarkerDefinition(kind=Kind.BLOCK_DOC, pattern="(")
        with pytest.raises(PatternCompileError):
            find_markers("anything", (broken,))


class TestRange:
    def test_end_and_resolve(self):
        span = Range(2, 3)
        assert span.end == 5
        assert span.resolve("abcdefg") == "cde"

    def test_tagged_range_delegates(self):
        item = TaggedRange(Range(4, 6), Kind.CODE)
        assert (item.start, item.length, item.end) == (4, 6, 10)
        assert not item.kind.is_doc
        assert Kind.BLOCK_DOC.is_doc
