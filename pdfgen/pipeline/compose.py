from __future__ import annotations

import logging
from typing import List, Tuple

from ..errors import InvalidDimension
from ..models import Document, DrawInstruction, GridSpec, Page, PageMetadata, Rectangle, validate_page_size
from .grid import GridLayout, anchored_start, centered_start, compute_grid
from .labels import Measure, compute_labels, compute_title_page_labels
from .markers import compute_markers, compute_metadata_row, marker_area, metadata_row_instructions
from .variants import ANCHORED, LayoutVariant

logger = logging.getLogger(__name__)


def _place_grid(page_size: Tuple[float, float], grid_spec: GridSpec, variant: LayoutVariant) -> GridLayout:
    if variant.placement == ANCHORED:
        start = anchored_start(page_size, grid_spec.columns, grid_spec.cell_side, variant.bottom_offset)
    else:
        start = centered_start(page_size, grid_spec.columns, grid_spec.rows, grid_spec.cell_side)
    return compute_grid(
        page_size,
        start,
        grid_spec.columns,
        grid_spec.rows,
        grid_spec.cell_side,
        grid_spec.draw_cornell,
    )


def labels_area(grid_rect: Rectangle, variant: LayoutVariant) -> Rectangle:
    return Rectangle(
        grid_rect.x,
        grid_rect.y - variant.label_bottom_offset,
        grid_rect.width,
        grid_rect.height + variant.label_bottom_offset + variant.label_top_offset,
    )


def layout_grid_page(
    page_size: Tuple[float, float],
    grid_spec: GridSpec,
    variant: LayoutVariant,
    metadata: PageMetadata,
    measure: Measure,
) -> Page:
    grid = _place_grid(page_size, grid_spec, variant)
    cell_side = grid_spec.cell_side

    instructions: List[DrawInstruction] = list(grid.lines)
    instructions.extend(grid.cornell_lines)

    if variant.markers or variant.metadata_row:
        area = marker_area(grid.rect)
        if variant.markers:
            instructions.append(compute_markers(area, cell_side))
        if variant.metadata_row:
            instructions.extend(metadata_row_instructions(compute_metadata_row(area, cell_side)))

    labels = compute_labels(
        labels_area(grid.rect, variant),
        variant.reserve_marker_space,
        metadata,
        measure,
        cell_side,
        variant.brand_variant,
    )
    instructions.extend(labels.as_tuple())
    return Page(kind="grid", instructions=tuple(instructions))


def layout_title_page(
    page_size: Tuple[float, float],
    metadata: PageMetadata,
    measure: Measure,
) -> Page:
    return Page(kind="title", instructions=compute_title_page_labels(page_size, metadata, measure))


def layout_document(
    title: str,
    page_size: Tuple[float, float],
    grid_spec: GridSpec,
    variant: LayoutVariant,
    metadata: PageMetadata,
    measure: Measure,
    pages_count: int,
    generate_title: bool = True,
) -> Document:
    """
    Lay out a whole notebook.

    Configuration is validated and the grid page computed before anything is
    assembled, so a failure never leaves a partial document behind. Grid
    pages share geometry, so one page layout is reused for all of them.
    """
    validate_page_size(page_size)
    grid_spec.validate()
    if pages_count < 0:
        raise InvalidDimension(f"Page count must be non-negative, got {pages_count}")

    grid_page = layout_grid_page(page_size, grid_spec, variant, metadata, measure)

    pages: List[Page] = []
    if generate_title:
        pages.append(layout_title_page(page_size, metadata, measure))
    pages.extend([grid_page] * pages_count)

    logger.debug(
        "Laid out %s: %d pages (%s variant, %d instructions per grid page)",
        title,
        len(pages),
        variant.key,
        len(grid_page.instructions),
    )
    return Document(title=title, page_size=page_size, pages=tuple(pages))
