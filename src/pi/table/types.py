"""Core type definitions for pi-table render state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Union, get_args

CellAlignment = Literal["left", "center", "right"]

ContentArrangement = Literal["disabled", "dynamic", "dynamic_full_width"]

TableComponent = Literal[
    "left_border",
    "right_border",
    "top_border",
    "bottom_border",
    "left_header_intersection",
    "header_lines",
    "middle_header_intersections",
    "right_header_intersection",
    "vertical_lines",
    "horizontal_lines",
    "middle_intersections",
    "left_border_intersections",
    "right_border_intersections",
    "top_border_intersections",
    "bottom_border_intersections",
    "top_left_corner",
    "top_right_corner",
    "bottom_left_corner",
    "bottom_right_corner",
]

ConstraintKind = Literal[
    "content_width",
    "lower_boundary",
    "upper_boundary",
    "boundaries",
    "absolute",
    "hidden",
]

# int  ->  exact number of cells
# str  ->  percentage string like "50%"
Width = Union[int, str]

DEFAULT_ALIGNMENT: CellAlignment = "left"


@dataclass(frozen=True)
class ColumnConstraint:
    kind: ConstraintKind
    lower: Width | None = None
    upper: Width | None = None

    @classmethod
    def content_width(cls) -> ColumnConstraint:
        return cls("content_width")

    @classmethod
    def lower_boundary(cls, width: Width) -> ColumnConstraint:
        return cls("lower_boundary", lower=width)

    @classmethod
    def upper_boundary(cls, width: Width) -> ColumnConstraint:
        return cls("upper_boundary", upper=width)

    @classmethod
    def boundaries(cls, lower: Width, upper: Width) -> ColumnConstraint:
        return cls("boundaries", lower=lower, upper=upper)

    @classmethod
    def absolute(cls, width: Width) -> ColumnConstraint:
        return cls("absolute", lower=width, upper=width)

    @classmethod
    def hidden(cls) -> ColumnConstraint:
        return cls("hidden")


@dataclass
class Column:
    constraint: ColumnConstraint | None = None
    cell_alignment: CellAlignment | None = None


@dataclass
class ColumnDisplayInfo:
    """Layout of one column as decided by the width solver.

    ``content_width`` excludes the column's own padding; ``width`` is the
    full rendered width between two borders.
    """

    content_width: int
    padding: tuple[int, int] = (0, 0)
    cell_alignment: CellAlignment | None = None
    is_hidden: bool = False

    @property
    def width(self) -> int:
        return self.padding[0] + self.content_width + self.padding[1]

    @property
    def alignment(self) -> CellAlignment:
        return self.cell_alignment or DEFAULT_ALIGNMENT


@dataclass
class Table:
    """Read-only render context handed over by the table pipeline."""

    width: int | None = None
    arrangement: ContentArrangement = "disabled"
    style: dict[str, str] = field(default_factory=dict)
    columns: list[Column] = field(default_factory=list)
    has_header: bool = False
    smart_padding: bool = True

    def style_exists(self, component: TableComponent) -> bool:
        return component in self.style

    def style_or_default(self, component: TableComponent) -> str:
        """Return the glyph for *component*, or a single space when unset."""
        return self.style.get(component, " ")


# ---------------------------------------------------------------------------
# Display info construction
# ---------------------------------------------------------------------------


def display_infos_for(
    table: Table,
    content_widths: list[int],
    padding: tuple[int, int] = (0, 0),
) -> list[ColumnDisplayInfo]:
    """Build one display info per table column (hidden ones included)."""
    if len(content_widths) != len(table.columns):
        raise ValueError(
            f"Expected {len(table.columns)} content widths, got {len(content_widths)}"
        )
    infos: list[ColumnDisplayInfo] = []
    for column, content_width in zip(table.columns, content_widths):
        hidden = column.constraint is not None and column.constraint.kind == "hidden"
        infos.append(
            ColumnDisplayInfo(
                content_width=content_width,
                padding=padding,
                cell_alignment=column.cell_alignment,
                is_hidden=hidden,
            )
        )
    return infos


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------


def _check_choice(value: str, choices: Any, what: str) -> str:
    allowed = get_args(choices)
    if value not in allowed:
        raise ValueError(f"Unknown {what}: {value!r} (expected one of {', '.join(allowed)})")
    return value


def _width_from_value(value: object) -> Width | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"Invalid width: {value!r}")
    if isinstance(value, int):
        if value < 0:
            raise ValueError(f"Invalid width: {value!r}")
        return value
    if isinstance(value, str) and value.endswith("%"):
        try:
            percent = int(value[:-1])
        except ValueError:
            raise ValueError(f"Invalid width: {value!r}") from None
        if percent < 0:
            raise ValueError(f"Invalid width: {value!r}")
        return value
    raise ValueError(f"Invalid width: {value!r}")


def _table_width(value: object) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"Invalid table width: {value!r}")
    return value


def constraint_from_dict(data: dict | None) -> ColumnConstraint | None:
    """Deserialize a ColumnConstraint from a JSON-compatible dict."""
    if data is None:
        return None
    kind = _check_choice(data.get("kind", ""), ConstraintKind, "constraint kind")
    return ColumnConstraint(
        kind=kind,  # type: ignore[arg-type]
        lower=_width_from_value(data.get("lower")),
        upper=_width_from_value(data.get("upper")),
    )


def constraint_to_dict(constraint: ColumnConstraint | None) -> dict | None:
    """Serialize a ColumnConstraint to a JSON-compatible dict."""
    if constraint is None:
        return None
    return {"kind": constraint.kind, "lower": constraint.lower, "upper": constraint.upper}


def column_from_dict(data: dict) -> Column:
    """Deserialize a Column from a JSON-compatible dict."""
    alignment = data.get("cellAlignment")
    if alignment is not None:
        _check_choice(alignment, CellAlignment, "cell alignment")
    return Column(
        constraint=constraint_from_dict(data.get("constraint")),
        cell_alignment=alignment,
    )


def table_from_dict(data: dict) -> Table:
    """Deserialize a Table render context from a JSON-compatible dict."""
    arrangement = _check_choice(
        data.get("arrangement", "disabled"), ContentArrangement, "content arrangement"
    )
    style: dict[str, str] = {}
    for component, glyph in data.get("style", {}).items():
        _check_choice(component, TableComponent, "table component")
        style[component] = glyph
    return Table(
        width=_table_width(data.get("width")),
        arrangement=arrangement,  # type: ignore[arg-type]
        style=style,
        columns=[column_from_dict(c) for c in data.get("columns", [])],
        has_header=data.get("header", False),
        smart_padding=data.get("smartPadding", True),
    )


def table_to_dict(table: Table) -> dict:
    """Serialize a Table render context to a JSON-compatible dict."""
    return {
        "width": table.width,
        "arrangement": table.arrangement,
        "style": dict(table.style),
        "columns": [
            {
                "constraint": constraint_to_dict(c.constraint),
                "cellAlignment": c.cell_alignment,
            }
            for c in table.columns
        ],
        "header": table.has_header,
        "smartPadding": table.smart_padding,
    }
