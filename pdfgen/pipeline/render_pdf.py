from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Dict, Iterable, Union

from reportlab.lib import colors
from reportlab.pdfgen import canvas

from ..config import load_style_preset
from ..models import Document, DrawInstruction, FilledRects, Line, Rectangle, StrokedRects, Text
from .fonts import FontHandle

MITER_JOIN = 0


def _hex(value: str, default=colors.black) -> colors.Color:
    if not value:
        return default
    try:
        return colors.HexColor("#" + str(value).lstrip("#"))
    except ValueError:
        return default


def _apply_style(canv: canvas.Canvas, style: dict) -> None:
    canv.setLineJoin(MITER_JOIN)
    if "line_width" in style:
        canv.setLineWidth(float(style["line_width"]))
    if "stroke_color" in style:
        canv.setStrokeColor(_hex(style["stroke_color"]))
    if "fill_color" in style:
        canv.setFillColor(_hex(style["fill_color"]))


def _rects_path(canv: canvas.Canvas, rects: Iterable[Rectangle]):
    path = canv.beginPath()
    for rect in rects:
        path.rect(rect.x, rect.y, rect.width, rect.height)
    return path


def _draw(canv: canvas.Canvas, item: DrawInstruction, styles: Dict[str, dict], font: FontHandle) -> None:
    canv.saveState()
    _apply_style(canv, styles.get(item.style, {}))

    if isinstance(item, Line):
        canv.line(item.start.x, item.start.y, item.end.x, item.end.y)
    elif isinstance(item, FilledRects):
        # one path, one paint operation for the whole batch
        canv.drawPath(_rects_path(canv, item.rects), stroke=1, fill=1)
    elif isinstance(item, StrokedRects):
        canv.drawPath(_rects_path(canv, item.rects), stroke=1, fill=0)
    elif isinstance(item, Text):
        canv.setFont(font.name, item.font_size)
        canv.drawString(item.anchor.x, item.anchor.y, item.text)
    else:
        raise TypeError(f"Unsupported draw instruction: {type(item).__name__}")

    canv.restoreState()


def render_document(document: Document, output: Union[Path, str, BinaryIO], font: FontHandle) -> None:
    styles = load_style_preset()

    target = str(output) if isinstance(output, (Path, str)) else output
    canv = canvas.Canvas(target, pagesize=document.page_size)
    canv.setTitle(document.title)

    for page in document.pages:
        for item in page.instructions:
            _draw(canv, item, styles, font)
        canv.showPage()

    canv.save()
