from __future__ import annotations

from pathlib import Path

from slugify import slugify

from . import config

MAX_SLUG_LENGTH = 60
DEFAULT_SLUG = "notebook"


def slug_from_title(title: str) -> str:
    # slugify only emits [a-z0-9-], so the result is always a plain file name
    return slugify(title, max_length=MAX_SLUG_LENGTH, word_boundary=True) or DEFAULT_SLUG


def output_dir(base_dir: Path | None = None) -> Path:
    root = base_dir or config.OUT_DIR
    root.mkdir(parents=True, exist_ok=True)
    return root


def output_path(title: str, base_dir: Path | None = None) -> Path:
    return output_dir(base_dir) / f"{slug_from_title(title)}.pdf"


def preview_path(pdf_path: Path, page_kind: str, base_dir: Path | None = None) -> Path:
    root = base_dir or pdf_path.parent
    return root / f"{pdf_path.stem}_{page_kind}.png"
