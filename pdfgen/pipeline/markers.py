from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from ..models import DrawInstruction, FilledRects, Rectangle, StrokedRects


# markers sit on an area this much taller than the grid
MARKER_MARGIN = 3.0

# metadata row template
META_ROW_OFFSET = 0.4
META_CELL_GAP = 2.0
META_GROUPS = (3, 1)


def marker_area(grid_rect: Rectangle) -> Rectangle:
    return Rectangle(grid_rect.x, grid_rect.y, grid_rect.width, grid_rect.height + MARKER_MARGIN)


def compute_markers(target: Rectangle, marker_side: float) -> FilledRects:
    """
    Registration squares at the four corners of target.

    The bottom pair sits inside the area, the top pair starts on its top edge.
    All four are returned as one batch so they are painted in a single pass.
    """
    m = marker_side
    return FilledRects(
        rects=(
            Rectangle(target.left, target.bottom, m, m),
            Rectangle(target.right - m, target.bottom, m, m),
            Rectangle(target.left, target.top, m, m),
            Rectangle(target.right - m, target.top, m, m),
        ),
        style="marker",
    )


@dataclass(frozen=True)
class MetadataRow:
    lead_marker: Rectangle
    group1_cells: Tuple[Rectangle, ...]
    mid_marker: Rectangle
    group2_cells: Tuple[Rectangle, ...]
    end_marker: Rectangle


def compute_metadata_row(target: Rectangle, cell_side: float) -> MetadataRow:
    y = target.top
    pitch = cell_side + META_CELL_GAP
    current_x = target.x + target.width * META_ROW_OFFSET

    markers: List[Rectangle] = [Rectangle(current_x, y, cell_side, cell_side)]
    groups: List[Tuple[Rectangle, ...]] = []
    for count in META_GROUPS:
        current_x += pitch
        cells: List[Rectangle] = []
        for _ in range(count):
            cells.append(Rectangle(current_x, y, cell_side, cell_side))
            current_x += pitch
        groups.append(tuple(cells))
        markers.append(Rectangle(current_x, y, cell_side, cell_side))

    return MetadataRow(
        lead_marker=markers[0],
        group1_cells=groups[0],
        mid_marker=markers[1],
        group2_cells=groups[1],
        end_marker=markers[2],
    )


def metadata_row_instructions(row: MetadataRow) -> List[DrawInstruction]:
    return [
        FilledRects(rects=(row.lead_marker,), style="marker"),
        StrokedRects(rects=row.group1_cells, style="meta_cell"),
        FilledRects(rects=(row.mid_marker,), style="marker"),
        StrokedRects(rects=row.group2_cells, style="meta_cell"),
        FilledRects(rects=(row.end_marker,), style="marker"),
    ]
