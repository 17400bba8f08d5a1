"""Width bookkeeping shared by the layout passes.

Border counting, constraint-to-width resolution and the spare horizontal
budget left once every visible column has its width.
"""

from __future__ import annotations

import math

from pi.table.types import ColumnConstraint, ColumnDisplayInfo, Table, Width

# ---------------------------------------------------------------------------
# Borders
# ---------------------------------------------------------------------------

_LEFT_BORDER_COMPONENTS = (
    "top_left_corner",
    "left_border",
    "left_border_intersections",
    "left_header_intersection",
    "bottom_left_corner",
)

_RIGHT_BORDER_COMPONENTS = (
    "top_right_corner",
    "right_border",
    "right_border_intersections",
    "right_header_intersection",
    "bottom_right_corner",
)

_VERTICAL_LINE_COMPONENTS = (
    "top_border_intersections",
    "middle_header_intersections",
    "vertical_lines",
    "middle_intersections",
    "bottom_border_intersections",
)


def should_draw_left_border(table: Table) -> bool:
    return any(table.style_exists(c) for c in _LEFT_BORDER_COMPONENTS)


def should_draw_right_border(table: Table) -> bool:
    return any(table.style_exists(c) for c in _RIGHT_BORDER_COMPONENTS)


def should_draw_vertical_lines(table: Table) -> bool:
    return any(table.style_exists(c) for c in _VERTICAL_LINE_COMPONENTS)


def count_border_columns(table: Table, visible_columns: int) -> int:
    """Return how many cells of the table width are taken by borders."""
    lines = 0
    if should_draw_left_border(table):
        lines += 1
    if should_draw_right_border(table):
        lines += 1
    if should_draw_vertical_lines(table):
        lines += max(visible_columns - 1, 0)
    return lines


# ---------------------------------------------------------------------------
# Constraints
# ---------------------------------------------------------------------------


def absolute_value_from_width(
    table: Table, width: Width, visible_columns: int
) -> int | None:
    """Resolve a ``Width`` to a number of cells.

    * ``int``   -> returned as-is
    * ``"50%"`` -> ``floor(content_width * 50 / 100)`` where the content
      width is the table width minus its borders; capped at 100%.

    Percentages cannot be resolved without a table width and yield ``None``.
    """
    if isinstance(width, int):
        return width
    if table.width is None:
        return None
    percent = min(int(width.rstrip("%")), 100)
    content_width = max(table.width - count_border_columns(table, visible_columns), 0)
    return math.floor(content_width * percent / 100)


def max_width(
    table: Table, constraint: ColumnConstraint | None, visible_columns: int
) -> int | None:
    """Return the upper bound on a column's total width, if it has one."""
    if constraint is None:
        return None
    if constraint.kind in ("upper_boundary", "absolute", "boundaries"):
        if constraint.upper is None:
            return None
        return absolute_value_from_width(table, constraint.upper, visible_columns)
    return None


def column_max_widths(
    table: Table, all_infos: list[ColumnDisplayInfo], visible_columns: int
) -> list[int | None]:
    """Resolve the maximum width of every visible column, in visible order."""
    max_widths: list[int | None] = []
    for column, info in zip(table.columns, all_infos):
        if info.is_hidden:
            continue
        max_widths.append(max_width(table, column.constraint, visible_columns))
    return max_widths


# ---------------------------------------------------------------------------
# Budget
# ---------------------------------------------------------------------------


def available_width(table: Table, infos: list[ColumnDisplayInfo]) -> int:
    """Return the spare cells left in the table width.

    *infos* holds only the visible columns. A table without a width has no
    spare cells.
    """
    if table.width is None:
        return 0
    width = table.width - count_border_columns(table, len(infos))
    for info in infos:
        width -= info.width
    return max(width, 0)
