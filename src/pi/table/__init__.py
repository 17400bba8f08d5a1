"""pi-table: smart padding for borderless text tables."""

# Width bookkeeping
from pi.table.arrangement import (
    available_width,
    column_max_widths,
    count_border_columns,
    max_width,
)

# Smart padding pass
from pi.table.smart_padding import (
    DynamicPadding,
    can_pad_column,
    compare_adjacent_cells,
    compare_adjacent_columns,
    smart_pad_content,
    update_column_padding,
)

# Render state types
from pi.table.types import (
    CellAlignment,
    Column,
    ColumnConstraint,
    ColumnDisplayInfo,
    ContentArrangement,
    Table,
    TableComponent,
    Width,
    display_infos_for,
    table_from_dict,
    table_to_dict,
)

# Utilities
from pi.table.utils import strip_ansi

__all__ = [
    # Width bookkeeping
    "available_width",
    "column_max_widths",
    "count_border_columns",
    "max_width",
    # Smart padding pass
    "DynamicPadding",
    "can_pad_column",
    "compare_adjacent_cells",
    "compare_adjacent_columns",
    "smart_pad_content",
    "update_column_padding",
    # Render state types
    "CellAlignment",
    "Column",
    "ColumnConstraint",
    "ColumnDisplayInfo",
    "ContentArrangement",
    "Table",
    "TableComponent",
    "Width",
    "display_infos_for",
    "table_from_dict",
    "table_to_dict",
    # Utilities
    "strip_ansi",
]
