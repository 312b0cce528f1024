# haunt/ui/story_panel.py
from __future__ import annotations

import pygame
from typing import Any, List

from haunt.ui.text_wrap import TextRow, font_measure, layout_text
from haunt.ui.theme import THEME


class StoryPanel:
    """
    "Story so far" prose on the character page of the main menu.

    The text must stop before the character bust, so `wrap_at` is the x of
    the picture column rather than the panel width. Same wrap rule as the
    clue details window.
    """

    def __init__(self, font: Any, rect: pygame.Rect, wrap_at: int, *, top: int = 200) -> None:
        self.font = font
        self.rect = pygame.Rect(rect)
        self.wrap_at = wrap_at
        self.top = top
        self.text = ""
        self.rows: List[TextRow] = []

    def set_text(self, text: str | None) -> None:
        self.text = text or ""
        self.rows = layout_text(
            self.text,
            self.wrap_at,
            font_measure(self.font),
            margin=THEME.wrap_margin,
            top=self.top,
            line_height=THEME.text_line_h,
        )

    def draw(self, surface: pygame.Surface) -> None:
        for line, y in self.rows:
            text = self.font.render(line, True, THEME.text_primary)
            surface.blit(text, (self.rect.x, self.rect.y + y))
