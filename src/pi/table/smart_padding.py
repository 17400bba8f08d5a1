"""Smart padding for borderless dynamic tables.

With a single blank vertical divider, two adjacent cells such as
``"4 vty 7"`` and ``"admin"`` render as ``"4 vty 7 admin"`` and the column
boundary disappears. This pass walks the column boundaries left to right and,
where a data row runs text right up to the divider on both sides, widens one
of the two columns by a single space. The spare table width bounds how many
boundaries can be widened.

Display infos and the content matrix are mutated in place.
"""

from __future__ import annotations

import logging
from typing import Literal

from pi.table.arrangement import available_width, column_max_widths
from pi.table.types import CellAlignment, ColumnDisplayInfo, Table
from pi.table.utils import (
    first_visible_grapheme,
    is_whitespace_char,
    last_visible_grapheme,
)

logger = logging.getLogger(__name__)

# "left"  -> pad the right side of the left column
# "right" -> pad the left side of the right column
DynamicPadding = Literal["none", "left", "right"]

# rows -> sub-rows -> visible columns
Content = list[list[list[str]]]


def _is_non_whitespace(char: str | None) -> bool:
    return char is not None and not is_whitespace_char(char)


def can_pad_column(
    info: ColumnDisplayInfo,
    max_width: int | None,
    exclude_alignment: CellAlignment,
) -> bool:
    """Return whether *info* may take one more cell of padding.

    A column aligned to *exclude_alignment* never qualifies. Otherwise it
    qualifies while its total width stays below *max_width*.
    """
    if info.alignment == exclude_alignment:
        return False
    if max_width is None:
        return True
    return info.padding[0] + info.padding[1] + info.content_width < max_width


def compare_adjacent_cells(
    cell_left: str,
    cell_right: str,
    display_infos: list[ColumnDisplayInfo],
    max_widths: list[int | None],
    column_index: int,
) -> DynamicPadding:
    """Decide whether the boundary after *column_index* needs a space in this row.

    Which side gets the space:

    left column              right column          padded column
    left/center aligned      *                     left
    right aligned            right/center aligned  right
    right aligned            left aligned          none

    Only column alignment is consulted; per-cell alignment overrides are not.
    """
    if not (
        _is_non_whitespace(last_visible_grapheme(cell_left))
        and _is_non_whitespace(first_visible_grapheme(cell_right))
    ):
        return "none"

    logger.debug(
        "smartpad: detected column %d left %r right %r",
        column_index,
        cell_left,
        cell_right,
    )
    if can_pad_column(display_infos[column_index], max_widths[column_index], "right"):
        return "left"
    if can_pad_column(
        display_infos[column_index + 1], max_widths[column_index + 1], "left"
    ):
        return "right"
    return "none"


def compare_adjacent_columns(
    table: Table,
    content: Content,
    display_infos: list[ColumnDisplayInfo],
    max_widths: list[int | None],
    column_index: int,
) -> DynamicPadding:
    """Return the first padding decision any data row makes for this boundary."""
    if not (
        can_pad_column(display_infos[column_index], max_widths[column_index], "right")
        or can_pad_column(
            display_infos[column_index + 1], max_widths[column_index + 1], "left"
        )
    ):
        return "none"

    for row_index, row in enumerate(content):
        if row_index == 0 and table.has_header:
            continue
        for sub_row in row:
            decision = compare_adjacent_cells(
                sub_row[column_index],
                sub_row[column_index + 1],
                display_infos,
                max_widths,
                column_index,
            )
            if decision != "none":
                return decision
    return "none"


def update_column_padding(
    content: Content,
    display_infos: list[ColumnDisplayInfo],
    column_index: int,
    pad_left: bool,
) -> None:
    """Widen one column by a space on one side, header row included."""
    logger.debug(
        "smartpad: update column %d padding %s",
        column_index,
        "left" if pad_left else "right",
    )
    display_infos[column_index].content_width += 1
    for row in content:
        for sub_row in row:
            if pad_left:
                sub_row[column_index] = " " + sub_row[column_index]
            else:
                sub_row[column_index] += " "


def smart_pad_content(
    table: Table,
    content: Content,
    all_infos: list[ColumnDisplayInfo],
) -> None:
    """Insert single spaces at column boundaries that would otherwise merge.

    *all_infos* has one entry per table column, hidden ones included, while
    *content* only holds visible columns. Does nothing unless the table is
    laid out dynamically with a blank vertical divider and has spare width.
    """
    if not table.smart_padding:
        return
    if table.arrangement != "dynamic":
        return
    # A visible divider already separates the columns
    if table.style_or_default("vertical_lines") != " ":
        return
    if not content or not content[0]:
        return

    visible_columns = len(content[0][0])
    max_widths = column_max_widths(table, all_infos, visible_columns)

    # Index into the same column positions as the content matrix
    display_infos = [info for info in all_infos if not info.is_hidden]
    if visible_columns != len(display_infos):
        raise RuntimeError(
            f"Content has {visible_columns} columns but "
            f"{len(display_infos)} display infos are visible"
        )

    remaining_width = available_width(table, display_infos)
    if remaining_width == 0:
        return

    logger.debug(
        "smartpad: available width %d visible columns %d",
        remaining_width,
        len(display_infos),
    )

    for column_index in range(len(display_infos) - 1):
        if (
            display_infos[column_index].padding[1] > 0
            or display_infos[column_index + 1].padding[0] > 0
        ):
            continue

        decision = compare_adjacent_columns(
            table, content, display_infos, max_widths, column_index
        )
        if decision == "left":
            update_column_padding(content, display_infos, column_index, pad_left=False)
            remaining_width -= 1
        elif decision == "right":
            update_column_padding(
                content, display_infos, column_index + 1, pad_left=True
            )
            remaining_width -= 1

        if remaining_width == 0:
            break
