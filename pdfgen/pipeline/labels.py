from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Tuple

from ..models import PageMetadata, Point, Rectangle, Text
from .variants import BRAND_DIGITAL


Measure = Callable[[str, float], float]

TOP_FONT_SIZE = 11.0
BOTTOM_FONT_SIZE = 8.0
# gap between a corner marker and the top label next to it
MARKER_LABEL_GAP = 3.0

# the title page always carries the digital brand, whatever the subject
TITLE_BRAND_TEXT = "Edustor Digital"

# title page: (font size, offset). Offsets count down from the page top or
# up from the page bottom.
TITLE_BRAND = (18.0, 50.0)
TITLE_COURSE = (20.0, 365.0)
TITLE_SUBJECT = (30.0, 400.0)
TITLE_AUTHOR = (18.0, 100.0)
TITLE_CONTACTS = (10.0, 80.0)
TITLE_COPYRIGHT = (10.0, 20.0)


def brand_name(subject_name: str, brand_variant: str) -> str:
    if brand_variant == BRAND_DIGITAL or subject_name != "":
        return "Edustor Digital"
    return "Edustor Paper"


def copyright_line(metadata: PageMetadata) -> str:
    return f"© {metadata.copyright_string} {metadata.academic_year}"


def centered_x(page_width: float, text: str, font_size: float, measure: Measure) -> float:
    return (page_width - measure(text, font_size)) / 2.0


@dataclass(frozen=True)
class RegularLabels:
    top_left: Text
    top_right: Text
    bottom_left: Text
    bottom_right: Text

    def as_tuple(self) -> Tuple[Text, ...]:
        return (self.top_left, self.top_right, self.bottom_left, self.bottom_right)


def compute_labels(
    target: Rectangle,
    reserve_marker_space: bool,
    metadata: PageMetadata,
    measure: Measure,
    marker_side: float,
    brand_variant: str,
) -> RegularLabels:
    """
    Anchor the four corner labels of a grid page.

    The top row sits on target.top, the bottom row on target.bottom. Right
    hand labels are right-aligned by subtracting their rendered width.
    """
    reserve = marker_side + MARKER_LABEL_GAP if reserve_marker_space else 0.0

    brand = brand_name(metadata.subject_name, brand_variant)
    title_row = f"{brand}: {metadata.author_name}" if metadata.author_name != "" else brand
    top_left = Text(Point(target.left + reserve, target.top), title_row, TOP_FONT_SIZE)

    if metadata.subject_name != "":
        top_right_str = f"{metadata.subject_name}, {metadata.course_name}"
    else:
        top_right_str = metadata.course_name
    right_x = target.right - reserve - measure(top_right_str, TOP_FONT_SIZE)
    top_right = Text(Point(right_x, target.top), top_right_str, TOP_FONT_SIZE)

    bottom_left = Text(Point(target.left, target.bottom), copyright_line(metadata), BOTTOM_FONT_SIZE)

    contacts = metadata.contacts_string
    contacts_x = target.right - measure(contacts, BOTTOM_FONT_SIZE)
    bottom_right = Text(Point(contacts_x, target.bottom), contacts, BOTTOM_FONT_SIZE)

    return RegularLabels(top_left, top_right, bottom_left, bottom_right)


def compute_title_page_labels(
    page_size: Tuple[float, float],
    metadata: PageMetadata,
    measure: Measure,
) -> Tuple[Text, ...]:
    page_w, page_h = page_size
    top, bottom = page_h, 0.0

    rows = [
        (TITLE_BRAND_TEXT, TITLE_BRAND, top - TITLE_BRAND[1]),
        (metadata.course_name, TITLE_COURSE, top - TITLE_COURSE[1]),
        (metadata.subject_name, TITLE_SUBJECT, top - TITLE_SUBJECT[1]),
        (metadata.author_name, TITLE_AUTHOR, bottom + TITLE_AUTHOR[1]),
        (metadata.contacts_string, TITLE_CONTACTS, bottom + TITLE_CONTACTS[1]),
        (copyright_line(metadata), TITLE_COPYRIGHT, bottom + TITLE_COPYRIGHT[1]),
    ]
    return tuple(
        Text(Point(centered_x(page_w, text, size, measure), y), text, size, style="title")
        for text, (size, _), y in rows
    )
