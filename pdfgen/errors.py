from __future__ import annotations


class LayoutError(Exception):
    """Base class for every failure raised while laying out a notebook."""


class GridTooLarge(LayoutError):
    """The requested grid does not fit on the page with non-negative margins."""


class InvalidDimension(LayoutError, ValueError):
    """A cell side, column, row, page or page-count value is out of range."""


class FontResourceUnavailable(LayoutError):
    """The font backing width queries and glyph rendering cannot be used."""


class UnknownVariant(LayoutError, KeyError):
    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "unknown layout variant"
