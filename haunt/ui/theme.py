# haunt/ui/theme.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

RGB = Tuple[int, int, int]
RGBA = Tuple[int, int, int, int]


@dataclass(frozen=True)
class ClueUITheme:
    """
    Centralized UI constants for the clue screen and story panel.

    - Render constants only.
    - No pygame imports required.
    - Safe to import from anywhere.
    """

    # ---------- Panels ----------
    panel_fill: RGBA = (12, 14, 20, 225)
    panel_border: RGB = (110, 120, 150)

    # ---------- Text ----------
    text_primary: RGB = (235, 235, 240)
    text_dim: RGB = (190, 190, 205)
    text_hint: RGB = (150, 150, 170)

    # ---------- Geometry ----------
    border_radius: int = 6
    border_width: int = 2

    # List window
    list_pad_x: int = 10
    list_pad_y: int = 12
    list_cursor_w: int = 24
    list_row_h: int = 36
    list_title_w: int = 600
    max_page_rows: int = 10

    # Detail / story text (wrap budget is width - wrap_margin)
    text_top: int = 20
    text_line_h: int = 30
    wrap_margin: int = 10


THEME = ClueUITheme()
