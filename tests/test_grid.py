from __future__ import annotations

import pytest

from pdfgen.errors import GridTooLarge, InvalidDimension
from pdfgen.models import Point
from pdfgen.pipeline.grid import (
    CORNELL_NOTES_CELLS,
    CORNELL_SUMMARY_CELLS,
    CORNELL_TITLE_CELLS,
    anchored_start,
    centered_start,
    compute_grid,
)


@pytest.mark.parametrize(
    "page_size, cell_side, columns, rows",
    [
        ((612.0, 792.0), 14.17, 40, 55),
        ((595.28, 841.89), 10.0, 7, 3),
        ((300.0, 300.0), 25.0, 1, 1),
        ((300.0, 300.0), 30.0, 10, 10),
    ],
)
def test_line_counts_include_both_boundaries(page_size, cell_side, columns, rows) -> None:
    start = centered_start(page_size, columns, rows, cell_side)
    grid = compute_grid(page_size, start, columns, rows, cell_side, draw_cornell=False)
    assert len(grid.vertical_lines) == columns + 1
    assert len(grid.horizontal_lines) == rows + 1
    assert grid.rect.width == pytest.approx(columns * cell_side)
    assert grid.rect.height == pytest.approx(rows * cell_side)
    assert grid.cornell_lines == ()


def test_boundary_lines_close_the_grid() -> None:
    grid = compute_grid((200.0, 200.0), Point(10.0, 20.0), 4, 3, 10.0, draw_cornell=False)
    xs = [line.start.x for line in grid.vertical_lines]
    ys = [line.start.y for line in grid.horizontal_lines]
    assert xs[0] == pytest.approx(grid.rect.left)
    assert xs[-1] == pytest.approx(grid.rect.right)
    assert ys[0] == pytest.approx(grid.rect.bottom)
    assert ys[-1] == pytest.approx(grid.rect.top)
    first = grid.vertical_lines[0]
    assert (first.start.y, first.end.y) == (grid.rect.top, grid.rect.bottom)


def test_centered_margins_are_symmetric() -> None:
    page_w, page_h = 612.0, 792.0
    start = centered_start((page_w, page_h), 40, 55, 14.17)
    grid = compute_grid((page_w, page_h), start, 40, 55, 14.17, draw_cornell=True)
    assert grid.rect.left == pytest.approx((page_w - grid.rect.width) / 2, abs=1e-6)
    assert page_w - grid.rect.right == pytest.approx(grid.rect.left, abs=1e-6)
    assert page_h - grid.rect.top == pytest.approx(grid.rect.bottom, abs=1e-6)


def test_letter_page_cornell_scenario() -> None:
    page = (612.0, 792.0)
    start = centered_start(page, 40, 55, 14.17)
    grid = compute_grid(page, start, 40, 55, 14.17, draw_cornell=True)
    assert grid.rect.width == pytest.approx(566.9, abs=0.2)
    assert grid.rect.height == pytest.approx(779.4, abs=0.2)
    assert len(grid.vertical_lines) == 41
    assert len(grid.horizontal_lines) == 56
    assert len(grid.cornell_lines) == 3


def test_cornell_rule_positions() -> None:
    s = 10.0
    grid = compute_grid((500.0, 500.0), Point(50.0, 40.0), 20, 30, s, draw_cornell=True)
    title, summary, notes = grid.cornell_lines
    rect = grid.rect
    assert title.start.y == title.end.y == pytest.approx(rect.top - CORNELL_TITLE_CELLS * s)
    assert (title.start.x, title.end.x) == (rect.left, rect.right)
    assert summary.start.y == pytest.approx(rect.bottom + CORNELL_SUMMARY_CELLS * s)
    assert notes.start.x == notes.end.x == pytest.approx(rect.left + CORNELL_NOTES_CELLS * s)
    assert notes.start.y == pytest.approx(rect.top)
    assert notes.end.y == pytest.approx(rect.bottom + CORNELL_SUMMARY_CELLS * s)
    assert all(line.style == "cornell" for line in grid.cornell_lines)


def test_anchored_start_centers_horizontally() -> None:
    start = anchored_start((600.0, 800.0), 40, 10.0, 30.0)
    assert start == Point(100.0, 30.0)


@pytest.mark.parametrize("columns, rows", [(44, 10), (10, 60)])
def test_grid_too_large_in_centered_mode(columns, rows) -> None:
    with pytest.raises(GridTooLarge):
        centered_start((612.0, 792.0), columns, rows, 14.17)


def test_grid_too_large_when_anchored_grid_leaves_page() -> None:
    start = anchored_start((612.0, 792.0), 40, 14.17, 30.0)
    with pytest.raises(GridTooLarge):
        compute_grid((612.0, 792.0), start, 40, 55, 14.17, draw_cornell=True)


@pytest.mark.parametrize("cell_side, columns, rows", [(0.0, 10, 10), (-1.0, 10, 10), (5.0, 0, 10), (5.0, 10, -2)])
def test_invalid_dimensions(cell_side, columns, rows) -> None:
    with pytest.raises(InvalidDimension):
        compute_grid((612.0, 792.0), Point(0.0, 0.0), columns, rows, cell_side, draw_cornell=False)
