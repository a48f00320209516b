from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFError, TTFont

from .. import config
from ..errors import FontResourceUnavailable

logger = logging.getLogger(__name__)


class FontHandle:
    """A registered font face answering width queries for one document."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.closed = False

    def width(self, text: str, font_size: float) -> float:
        if self.closed:
            raise FontResourceUnavailable(f"Font {self.name} was released")
        return pdfmetrics.stringWidth(text, self.name, font_size)

    def close(self) -> None:
        self.closed = True


def _register_ttf(path: Path) -> str:
    if not path.exists():
        raise FontResourceUnavailable(f"Font not found: {path}")
    name = path.stem.replace(" ", "")
    if name in pdfmetrics.getRegisteredFontNames():
        return name
    try:
        pdfmetrics.registerFont(TTFont(name, str(path)))
    except (TTFError, OSError) as exc:
        raise FontResourceUnavailable(f"Cannot load font {path}: {exc}") from exc
    logger.debug("Registered font %s from %s", name, path)
    return name


@contextmanager
def open_font(path: Optional[Path] = None) -> Iterator[FontHandle]:
    """
    Acquire the document font, released when the block exits.

    Falls back to config.FONT_PATH and then to the built-in face.
    """
    font_path = path or config.FONT_PATH
    name = _register_ttf(Path(font_path)) if font_path else config.DEFAULT_FONT_NAME
    handle = FontHandle(name)
    try:
        yield handle
    finally:
        handle.close()
