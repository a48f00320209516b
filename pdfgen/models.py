from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from .errors import InvalidDimension


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle in page points, origin at the bottom-left."""

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise InvalidDimension(f"Rectangle size must be non-negative, got {self.width}x{self.height}")

    @property
    def left(self) -> float:
        return self.x

    @property
    def bottom(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.height / 2)


@dataclass(frozen=True)
class GridSpec:
    cell_side: float
    columns: int
    rows: int
    draw_cornell: bool = True

    def validate(self) -> None:
        if self.cell_side <= 0:
            raise InvalidDimension(f"Cell side must be positive, got {self.cell_side}")
        if self.columns <= 0:
            raise InvalidDimension(f"Column count must be positive, got {self.columns}")
        if self.rows <= 0:
            raise InvalidDimension(f"Row count must be positive, got {self.rows}")


def validate_page_size(page_size: Tuple[float, float]) -> None:
    width, height = page_size
    if width <= 0 or height <= 0:
        raise InvalidDimension(f"Page size must be positive, got {width}x{height}")


@dataclass(frozen=True)
class PageMetadata:
    author_name: str
    subject_name: str
    course_name: str
    copyright_string: str
    contacts_string: str
    academic_year: str


@dataclass(frozen=True)
class Line:
    start: Point
    end: Point
    style: str = "grid"


@dataclass(frozen=True)
class FilledRects:
    # painted together in a single fill+stroke operation
    rects: Tuple[Rectangle, ...]
    style: str = "marker"


@dataclass(frozen=True)
class StrokedRects:
    rects: Tuple[Rectangle, ...]
    style: str = "meta_cell"


@dataclass(frozen=True)
class Text:
    anchor: Point
    text: str
    font_size: float
    style: str = "label"


DrawInstruction = Union[Line, FilledRects, StrokedRects, Text]


@dataclass(frozen=True)
class Page:
    kind: str  # "title" | "grid"
    instructions: Tuple[DrawInstruction, ...]


@dataclass(frozen=True)
class Document:
    title: str
    page_size: Tuple[float, float]
    pages: Tuple[Page, ...]

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def has_title_page(self) -> bool:
        return bool(self.pages) and self.pages[0].kind == "title"
