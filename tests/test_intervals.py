"""Tests for playdown.intervals: minimize and complement."""

from playdown.intervals import complement, minimize
from playdown.markers import Kind, Range, TaggedRange


def _doc(start, length, kind=Kind.SINGLE_LINE_DOC):
    return TaggedRange(Range(start, length), kind)


def _spans(items):
    return [(item.start, item.length) for item in items]


class TestMinimize:
    def test_drops_contained_range(self):
        block = _doc(0, 20, Kind.BLOCK_DOC)
        inner = _doc(5, 3)
        assert minimize([inner, block]) == [block]

    def test_longer_range_wins_on_equal_start(self):
        assert _spans(minimize([_doc(0, 5), _doc(0, 10)])) == [(0, 10)]

    def test_keeps_adjacent_ranges(self):
        assert _spans(minimize([_doc(5, 3), _doc(0, 5)])) == [(0, 5), (5, 3)]

    def test_drops_partial_overlap(self):
        assert _spans(minimize([_doc(0, 6), _doc(4, 6), _doc(10, 2)])) == [(0, 6), (10, 2)]

    def test_order_independent(self):
        ranges = [_doc(30, 4), _doc(0, 10), _doc(12, 3), _doc(2, 2), _doc(12, 8)]
        expected = _spans(minimize(ranges))
        assert _spans(minimize(list(reversed(ranges)))) == expected
        assert expected == [(0, 10), (12, 8), (30, 4)]

    def test_empty(self):
        assert minimize([]) == []


class TestComplement:
    def test_gaps_before_between_and_after(self):
        gaps = complement(Range(0, 30), [_doc(2, 3), _doc(10, 5)])
        assert _spans(gaps) == [(0, 2), (5, 5), (15, 15)]
        assert all(gap.kind is Kind.CODE for gap in gaps)

    def test_zero_length_gaps_are_skipped(self):
        gaps = complement(Range(0, 20), [_doc(0, 5), _doc(5, 5), _doc(15, 5)])
        assert _spans(gaps) == [(10, 5)]

    def test_no_ranges_yields_whole_document(self):
        assert _spans(complement(Range(0, 7), [])) == [(0, 7)]

    def test_empty_document(self):
        assert complement(Range(0, 0), []) == []

    def test_partition(self):
        annotations = minimize([_doc(3, 4), _doc(9, 1), _doc(12, 6)])
        covered = sorted(_spans(annotations) + _spans(complement(Range(0, 20), annotations)))
        cursor = 0
        for start, length in covered:
            assert start == cursor
            cursor += length
        assert cursor == 20
