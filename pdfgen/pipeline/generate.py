from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import BinaryIO, Optional, Tuple, Union
from zoneinfo import ZoneInfo

from .. import config
from ..models import Document, GridSpec, PageMetadata
from .academic import academic_year, current_academic_year
from .compose import layout_document
from .fonts import open_font
from .render_pdf import render_document
from .variants import DEFAULT_VARIANT, get_variant

logger = logging.getLogger(__name__)


def build_metadata(
    author_name: str,
    subject_name: str,
    course_name: str,
    copyright_string: str,
    contacts_string: str,
    now: Optional[datetime] = None,
) -> PageMetadata:
    if now is None:
        year = current_academic_year()
    else:
        year = academic_year(now, ZoneInfo(config.TIMEZONE))
    return PageMetadata(
        author_name=author_name,
        subject_name=subject_name,
        course_name=course_name,
        copyright_string=copyright_string,
        contacts_string=contacts_string,
        academic_year=year,
    )


def generate(
    output: Union[Path, str, BinaryIO],
    filename: str,
    pages_count: int,
    author_name: str,
    subject_name: str,
    course_name: str,
    copyright_string: str,
    contacts_string: str,
    draw_cornell: bool = True,
    generate_title: bool = True,
    *,
    variant: str = DEFAULT_VARIANT,
    page_size: Tuple[float, float] = config.DEFAULT_PAGE_SIZE,
    now: Optional[datetime] = None,
    font_path: Optional[Path] = None,
) -> Document:
    """
    Lay out and render a notebook PDF into output.

    The font is held for the whole document and released afterwards, also
    when layout or rendering fails. Nothing is written if layout fails.
    """
    layout = get_variant(variant)
    metadata = build_metadata(author_name, subject_name, course_name, copyright_string, contacts_string, now=now)
    grid_spec = GridSpec(
        cell_side=config.CELL_SIDE,
        columns=layout.columns,
        rows=layout.rows,
        draw_cornell=draw_cornell,
    )

    with open_font(font_path) as font:
        document = layout_document(
            filename,
            page_size,
            grid_spec,
            layout,
            metadata,
            font.width,
            pages_count,
            generate_title=generate_title,
        )
        render_document(document, output, font)

    logger.info(
        "Generated %s: %d pages, variant=%s, academic year %s",
        filename,
        document.page_count,
        layout.key,
        metadata.academic_year,
    )
    return document
