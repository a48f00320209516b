from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

from ..errors import UnknownVariant


ANCHORED = "anchored"
CENTERED = "centered"

BRAND_BY_SUBJECT = "by_subject"
BRAND_DIGITAL = "digital"


@dataclass(frozen=True)
class LayoutVariant:
    key: str
    placement: str               # anchored | centered
    bottom_offset: float         # grid bottom for anchored placement
    columns: int
    rows: int
    markers: bool                # corner registration squares
    metadata_row: bool           # scannable cell row above the grid
    reserve_marker_space: bool   # shift top labels clear of the markers
    label_bottom_offset: float   # bottom label row sits this far below the grid
    label_top_offset: float      # top label row sits this far above the grid
    brand_variant: str           # by_subject | digital
    description: str = ""


VARIANTS: Dict[str, LayoutVariant] = {
    "paper": LayoutVariant(
        key="paper",
        placement=ANCHORED,
        bottom_offset=30.0,
        columns=40,
        rows=55,
        markers=True,
        metadata_row=True,
        reserve_marker_space=True,
        label_bottom_offset=9.0,
        label_top_offset=6.0,
        brand_variant=BRAND_BY_SUBJECT,
        description="40x55 grid 30pt above the page bottom, corner markers and metadata cells",
    ),
    "digital": LayoutVariant(
        key="digital",
        placement=CENTERED,
        bottom_offset=0.0,
        columns=40,
        rows=56,
        markers=False,
        metadata_row=False,
        reserve_marker_space=False,
        label_bottom_offset=9.0,
        label_top_offset=6.0,
        brand_variant=BRAND_DIGITAL,
        description="40x56 grid centered on the page, no markers",
    ),
    "compact": LayoutVariant(
        key="compact",
        placement=CENTERED,
        bottom_offset=0.0,
        columns=40,
        rows=55,
        markers=False,
        metadata_row=False,
        reserve_marker_space=False,
        # US Letter leaves about 6pt above and below a 55-row grid
        label_bottom_offset=6.0,
        label_top_offset=2.0,
        brand_variant=BRAND_DIGITAL,
        description="40x55 grid centered on the page, fits US Letter",
    ),
}

DEFAULT_VARIANT = "paper"

# preset used when a page size is requested without an explicit variant
PAGE_SIZE_VARIANTS: Dict[str, str] = {
    "a4": "paper",
    "letter": "compact",
}


def get_variant(key: str) -> LayoutVariant:
    try:
        return VARIANTS[key]
    except KeyError:
        raise UnknownVariant(f"Unknown layout variant: {key} (expected one of {', '.join(VARIANTS)})") from None


def variant_names() -> List[str]:
    return list(VARIANTS.keys())


def variant_for_page_size(page_size_name: str) -> str:
    return PAGE_SIZE_VARIANTS.get(page_size_name, DEFAULT_VARIANT)
