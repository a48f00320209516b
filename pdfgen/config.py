from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Tuple
import json

from reportlab.lib.pagesizes import A4, LETTER
from reportlab.lib.units import mm


BASE_DIR = Path(__file__).resolve().parent
OUT_DIR = Path.cwd() / "out"
STYLE_PRESET_PATH = BASE_DIR / "assets" / "template_styles.json"

# 5mm grid square
CELL_SIDE = 5 * mm

PAGE_SIZES: Dict[str, Tuple[float, float]] = {
    "a4": A4,
    "letter": LETTER,
}
DEFAULT_PAGE_SIZE = A4

TIMEZONE = "Europe/Moscow"

# None means the built-in Helvetica face is used for text
FONT_PATH: Optional[Path] = None
DEFAULT_FONT_NAME = "Helvetica"


def load_style_preset() -> dict:
    with STYLE_PRESET_PATH.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def set_out_dir(path: Path) -> None:
    global OUT_DIR
    OUT_DIR = path
