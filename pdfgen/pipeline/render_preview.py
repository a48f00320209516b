from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

import fitz  # PyMuPDF

from ..models import Document
from ..storage import preview_path

PREVIEW_DPI = 150


def pick_preview_pages(document: Document) -> List[Tuple[int, str]]:
    """First page of each kind, in document order: the title page and one grid page."""
    picked: List[Tuple[int, str]] = []
    seen = set()
    for index, page in enumerate(document.pages):
        if page.kind not in seen:
            seen.add(page.kind)
            picked.append((index, page.kind))
    return picked


def render_previews(pdf_path: Path, document: Document, base_dir: Path | None = None) -> List[Path]:
    previews: List[Path] = []
    with fitz.open(pdf_path) as doc:
        for index, kind in pick_preview_pages(document):
            if index >= doc.page_count:
                break
            out_path = preview_path(pdf_path, kind, base_dir=base_dir)
            out_path.parent.mkdir(parents=True, exist_ok=True)
            doc.load_page(index).get_pixmap(dpi=PREVIEW_DPI, alpha=False).save(str(out_path))
            previews.append(out_path)
    return previews
