# haunt/ui/clue_detail.py
from __future__ import annotations

import pygame
from typing import Any, List

from haunt.clues.catalog import Clue
from haunt.ui.text_wrap import TextRow, font_measure, layout_text
from haunt.ui.theme import THEME


class ClueDetailView:
    """Full body text of one clue (bottom half of the clue screen)."""

    def __init__(self, font: Any, rect: pygame.Rect) -> None:
        self.font = font
        self.rect = pygame.Rect(rect)
        self.clue: Clue | None = None
        self.rows: List[TextRow] = []

    def set_clue(self, clue: Clue | None) -> bool:
        """Show `clue`; returns False (and skips the re-layout) if it is already shown."""
        if _same_clue(self.clue, clue):
            return False
        self.clue = clue
        self.refresh()
        return True

    def clear(self) -> None:
        self.clue = None
        self.rows = []

    def refresh(self) -> None:
        if self.clue is None:
            self.rows = []
            return
        self.rows = layout_text(
            self.clue.text,
            self.rect.width,
            font_measure(self.font),
            margin=THEME.wrap_margin,
            top=THEME.text_top,
            line_height=THEME.text_line_h,
        )

    def draw(self, surface: pygame.Surface) -> None:
        rect = self.rect
        panel = pygame.Surface(rect.size, pygame.SRCALPHA)
        pygame.draw.rect(panel, THEME.panel_fill, panel.get_rect(), border_radius=THEME.border_radius)
        surface.blit(panel, rect.topleft)
        pygame.draw.rect(
            surface, THEME.panel_border, rect,
            width=THEME.border_width, border_radius=THEME.border_radius,
        )

        for line, y in self.rows:
            text = self.font.render(line, True, THEME.text_primary)
            surface.blit(text, (rect.x, rect.y + y))


def _same_clue(a: Clue | None, b: Clue | None) -> bool:
    if a is b:
        return True
    if a is None or b is None:
        return False
    return a.id == b.id
