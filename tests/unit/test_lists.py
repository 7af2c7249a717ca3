#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_lists.py
"""Unit tests for the list context tracker."""

import pytest

from md2term.exceptions import RenderingError
from md2term.lists import ListTracker


@pytest.mark.unit
class TestListTracker:
    """Tests for ListTracker markers and nesting."""

    def test_bullet_marker_at_top_level(self) -> None:
        tracker = ListTracker()
        tracker.push("bullet")
        assert tracker.item_marker() == "- "
        assert tracker.item_marker("*") == "* "

    def test_ordered_markers_count_from_start(self) -> None:
        tracker = ListTracker()
        tracker.push("ordered", start=5)
        assert [tracker.item_marker() for _ in range(3)] == ["5. ", "6. ", "7. "]

    def test_paren_delimiter(self) -> None:
        tracker = ListTracker()
        tracker.push("ordered", delimiter="paren")
        assert tracker.item_marker() == "1) "

    def test_nested_lists_indent_per_level(self) -> None:
        tracker = ListTracker()
        tracker.push("bullet")
        tracker.push("ordered", start=3)
        tracker.push("bullet")
        assert tracker.item_marker() == "    - "
        tracker.pop()
        assert tracker.item_marker() == "  3. "

    def test_counters_are_independent_per_level(self) -> None:
        """Closing an inner list resumes the outer numbering."""
        tracker = ListTracker()
        tracker.push("ordered")
        assert tracker.item_marker() == "1. "
        tracker.push("ordered")
        assert tracker.item_marker() == "  1. "
        assert tracker.item_marker() == "  2. "
        tracker.pop()
        assert tracker.item_marker() == "2. "

    def test_depth(self) -> None:
        tracker = ListTracker()
        assert tracker.depth == 0
        assert tracker.current is None
        tracker.push("bullet")
        tracker.push("bullet")
        assert tracker.depth == 2
        assert tracker.pop().depth == 2
        assert tracker.depth == 1

    def test_custom_indent_and_bullet(self) -> None:
        tracker = ListTracker(indent_unit="\t", default_bullet="•")
        tracker.push("bullet")
        tracker.push("bullet")
        assert tracker.item_marker() == "\t• "

    def test_item_outside_list_is_plain_bullet(self) -> None:
        assert ListTracker().item_marker() == "- "

    def test_unknown_kind_raises(self) -> None:
        with pytest.raises(RenderingError):
            ListTracker().push("numbered")

    def test_unknown_delimiter_raises(self) -> None:
        with pytest.raises(RenderingError):
            ListTracker().push("ordered", delimiter="colon")
