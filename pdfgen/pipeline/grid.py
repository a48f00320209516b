from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from ..errors import GridTooLarge
from ..models import GridSpec, Line, Point, Rectangle, validate_page_size


# Cornell template rules, in cells from the grid edges
CORNELL_TITLE_CELLS = 3
CORNELL_SUMMARY_CELLS = 5
CORNELL_NOTES_CELLS = 8

# tolerance for float round-off when checking the grid against the page
_FIT_EPSILON = 1e-6


@dataclass(frozen=True)
class GridLayout:
    rect: Rectangle
    lines: Tuple[Line, ...]
    cornell_lines: Tuple[Line, ...]

    @property
    def vertical_lines(self) -> List[Line]:
        return [line for line in self.lines if line.start.x == line.end.x]

    @property
    def horizontal_lines(self) -> List[Line]:
        return [line for line in self.lines if line.start.y == line.end.y]


def anchored_start(page_size: Tuple[float, float], columns: int, cell_side: float, bottom: float) -> Point:
    """Start point for a grid centered horizontally at a fixed bottom offset."""
    page_w, _ = page_size
    margin = (page_w - columns * cell_side) / 2
    if margin < -_FIT_EPSILON:
        raise GridTooLarge(f"{columns} columns of {cell_side:.2f}pt do not fit a {page_w:.2f}pt wide page")
    return Point(margin, bottom)


def centered_start(page_size: Tuple[float, float], columns: int, rows: int, cell_side: float) -> Point:
    page_w, page_h = page_size
    x_margin = (page_w - columns * cell_side) / 2
    y_margin = (page_h - rows * cell_side) / 2
    if x_margin < -_FIT_EPSILON or y_margin < -_FIT_EPSILON:
        raise GridTooLarge(
            f"{columns}x{rows} grid of {cell_side:.2f}pt cells does not fit a {page_w:.2f}x{page_h:.2f}pt page"
        )
    return Point(x_margin, y_margin)


def check_fits(page_size: Tuple[float, float], rect: Rectangle) -> None:
    page_w, page_h = page_size
    if (
        rect.left < -_FIT_EPSILON
        or rect.bottom < -_FIT_EPSILON
        or rect.right > page_w + _FIT_EPSILON
        or rect.top > page_h + _FIT_EPSILON
    ):
        raise GridTooLarge(
            f"Grid {rect.width:.2f}x{rect.height:.2f}pt at ({rect.x:.2f}, {rect.y:.2f}) "
            f"leaves the {page_w:.2f}x{page_h:.2f}pt page"
        )


def cornell_lines(rect: Rectangle, cell_side: float) -> Tuple[Line, ...]:
    title_y = rect.top - CORNELL_TITLE_CELLS * cell_side
    summary_y = rect.bottom + CORNELL_SUMMARY_CELLS * cell_side
    notes_x = rect.left + CORNELL_NOTES_CELLS * cell_side
    return (
        Line(Point(rect.left, title_y), Point(rect.right, title_y), style="cornell"),
        Line(Point(rect.left, summary_y), Point(rect.right, summary_y), style="cornell"),
        Line(Point(notes_x, rect.top), Point(notes_x, summary_y), style="cornell"),
    )


def compute_grid(
    page_size: Tuple[float, float],
    start_point: Point,
    columns: int,
    rows: int,
    cell_side: float,
    draw_cornell: bool,
) -> GridLayout:
    """
    Lay out a columns x rows grid of square cells starting at start_point.

    Both line ranges include their end boundaries, so the grid is closed on
    all four sides: columns + 1 vertical and rows + 1 horizontal lines.
    """
    validate_page_size(page_size)
    GridSpec(cell_side=cell_side, columns=columns, rows=rows, draw_cornell=draw_cornell).validate()

    rect = Rectangle(start_point.x, start_point.y, columns * cell_side, rows * cell_side)
    check_fits(page_size, rect)

    lines: List[Line] = []
    for i in range(columns + 1):
        x = rect.left + i * cell_side
        lines.append(Line(Point(x, rect.top), Point(x, rect.bottom)))
    for i in range(rows + 1):
        y = rect.bottom + i * cell_side
        lines.append(Line(Point(rect.left, y), Point(rect.right, y)))

    extra = cornell_lines(rect, cell_side) if draw_cornell else ()
    return GridLayout(rect=rect, lines=tuple(lines), cornell_lines=extra)
