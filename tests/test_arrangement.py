"""Tests for pi.table.arrangement -- borders, max widths and spare width."""

from __future__ import annotations

from pi.table.arrangement import (
    absolute_value_from_width,
    available_width,
    column_max_widths,
    count_border_columns,
    max_width,
)
from pi.table.types import Column, ColumnConstraint, ColumnDisplayInfo, Table

FULL_BORDERS = {
    "left_border": "|",
    "right_border": "|",
    "vertical_lines": "|",
    "top_left_corner": "+",
}


# ---------------------------------------------------------------------------
# count_border_columns
# ---------------------------------------------------------------------------


class TestCountBorderColumns:
    """Border glyphs that take horizontal space."""

    def test_no_style_has_no_borders(self) -> None:
        assert count_border_columns(Table(), 4) == 0

    def test_full_borders(self) -> None:
        table = Table(style=dict(FULL_BORDERS))
        assert count_border_columns(table, 4) == 5

    def test_header_intersection_implies_vertical_lines(self) -> None:
        table = Table(style={"middle_header_intersections": " "})
        assert count_border_columns(table, 4) == 3

    def test_corner_implies_outer_border(self) -> None:
        table = Table(style={"bottom_right_corner": "+"})
        assert count_border_columns(table, 4) == 1

    def test_single_column_has_no_dividers(self) -> None:
        table = Table(style={"vertical_lines": "|"})
        assert count_border_columns(table, 1) == 0
        assert count_border_columns(table, 0) == 0


# ---------------------------------------------------------------------------
# max_width
# ---------------------------------------------------------------------------


class TestMaxWidth:
    """Upper bounds derived from column constraints."""

    def test_unconstrained_has_no_max(self) -> None:
        assert max_width(Table(width=80), None, 3) is None
        assert max_width(Table(width=80), ColumnConstraint.content_width(), 3) is None

    def test_lower_boundary_has_no_max(self) -> None:
        assert max_width(Table(width=80), ColumnConstraint.lower_boundary(10), 3) is None

    def test_hidden_has_no_max(self) -> None:
        assert max_width(Table(width=80), ColumnConstraint.hidden(), 3) is None

    def test_fixed_upper_bounds(self) -> None:
        table = Table(width=80)
        assert max_width(table, ColumnConstraint.upper_boundary(12), 3) == 12
        assert max_width(table, ColumnConstraint.absolute(7), 3) == 7
        assert max_width(table, ColumnConstraint.boundaries(2, 9), 3) == 9

    def test_percentage_of_content_width(self) -> None:
        # 3 columns with dividers: 102 - 2 = 100 cells of content
        table = Table(width=102, style={"vertical_lines": " "})
        assert max_width(table, ColumnConstraint.upper_boundary("25%"), 3) == 25

    def test_percentage_rounds_down(self) -> None:
        table = Table(width=120, style={"middle_header_intersections": " "})
        assert max_width(table, ColumnConstraint.upper_boundary("90%"), 6) == 103

    def test_percentage_is_capped_at_100(self) -> None:
        table = Table(width=50)
        assert absolute_value_from_width(table, "250%", 2) == 50

    def test_percentage_without_table_width(self) -> None:
        assert absolute_value_from_width(Table(), "50%", 2) is None
        assert absolute_value_from_width(Table(), 10, 2) == 10


class TestColumnMaxWidths:
    """Max widths indexed by visible column."""

    def test_hidden_columns_are_skipped(self) -> None:
        table = Table(
            width=80,
            columns=[
                Column(constraint=ColumnConstraint.upper_boundary(5)),
                Column(constraint=ColumnConstraint.hidden()),
                Column(),
                Column(constraint=ColumnConstraint.absolute(9)),
            ],
        )
        infos = [
            ColumnDisplayInfo(content_width=5),
            ColumnDisplayInfo(content_width=3, is_hidden=True),
            ColumnDisplayInfo(content_width=4),
            ColumnDisplayInfo(content_width=9),
        ]
        assert column_max_widths(table, infos, 3) == [5, None, 9]


# ---------------------------------------------------------------------------
# available_width
# ---------------------------------------------------------------------------


class TestAvailableWidth:
    """Spare cells left in the table width."""

    def test_no_table_width(self) -> None:
        assert available_width(Table(), [ColumnDisplayInfo(content_width=3)]) == 0

    def test_subtracts_borders_and_columns(self) -> None:
        table = Table(width=40, style=dict(FULL_BORDERS))
        infos = [
            ColumnDisplayInfo(content_width=10, padding=(1, 1)),
            ColumnDisplayInfo(content_width=5, padding=(1, 1)),
        ]
        # 40 - 3 borders - 12 - 7
        assert available_width(table, infos) == 18

    def test_saturates_at_zero(self) -> None:
        table = Table(width=10, style=dict(FULL_BORDERS))
        infos = [ColumnDisplayInfo(content_width=20)]
        assert available_width(table, infos) == 0
