"""Tests for extremal interval selection.

Two policies:
- select_extremal: first entry wins a tie, None when empty
- select_extremal_set: all tying entries, empty lists when empty
"""

from razzies.intervals.select import ExtremalMode, select_extremal, select_extremal_set
from razzies.models.domain import IntervalEntry, IntervalsSummary

ENTRIES = [
    IntervalEntry("John Doe", 15, 1980, 1995),
    IntervalEntry("John Doe", 25, 1995, 2020),
    IntervalEntry("Jane Smith", 4, 2001, 2005),
]


class TestSelectExtremal:
    """Tests for single-result selection."""

    def test_max(self):
        assert select_extremal(ENTRIES, ExtremalMode.MAX) == IntervalEntry(
            "John Doe", 25, 1995, 2020
        )

    def test_min(self):
        assert select_extremal(ENTRIES, ExtremalMode.MIN) == IntervalEntry(
            "Jane Smith", 4, 2001, 2005
        )

    def test_bounds_hold_for_every_entry(self):
        shortest = select_extremal(ENTRIES, ExtremalMode.MIN)
        longest = select_extremal(ENTRIES, ExtremalMode.MAX)
        for entry in ENTRIES:
            assert shortest.interval <= entry.interval <= longest.interval

    def test_tie_keeps_first_entry(self):
        entries = [
            IntervalEntry("A", 3, 1990, 1993),
            IntervalEntry("B", 3, 2000, 2003),
            IntervalEntry("C", 9, 2000, 2009),
            IntervalEntry("D", 9, 2001, 2010),
        ]
        assert select_extremal(entries, ExtremalMode.MIN).producer == "A"
        assert select_extremal(entries, ExtremalMode.MAX).producer == "C"

    def test_zero_interval_is_selectable_for_max(self):
        entries = [IntervalEntry("A", 0, 1986, 1986)]
        assert select_extremal(entries, ExtremalMode.MAX) == entries[0]

    def test_empty_returns_none(self):
        assert select_extremal([], ExtremalMode.MIN) is None
        assert select_extremal([], ExtremalMode.MAX) is None


class TestSelectExtremalSet:
    """Tests for tie-inclusive selection."""

    def test_single_min_and_max(self):
        summary = select_extremal_set(ENTRIES)
        assert summary.min == [IntervalEntry("Jane Smith", 4, 2001, 2005)]
        assert summary.max == [IntervalEntry("John Doe", 25, 1995, 2020)]

    def test_all_ties_included(self):
        entries = [
            IntervalEntry("A", 1, 1990, 1991),
            IntervalEntry("B", 13, 2002, 2015),
            IntervalEntry("C", 1, 2000, 2001),
            IntervalEntry("B", 5, 2015, 2020),
            IntervalEntry("D", 13, 1980, 1993),
        ]
        summary = select_extremal_set(entries)
        assert summary.min == [entries[0], entries[2]]
        assert summary.max == [entries[1], entries[4]]

    def test_same_producer_tying_itself(self):
        entries = [
            IntervalEntry("A", 2, 1990, 1992),
            IntervalEntry("A", 2, 1992, 1994),
        ]
        summary = select_extremal_set(entries)
        assert summary.min == entries
        assert summary.max == entries

    def test_empty_returns_empty_lists(self):
        assert select_extremal_set([]) == IntervalsSummary(min=[], max=[])
