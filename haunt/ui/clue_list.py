# haunt/ui/clue_list.py
from __future__ import annotations

import pygame
from typing import Any, Tuple

from haunt.clues.catalog import Clue
from haunt.clues.registry import ClueRegistry
from haunt.ui.theme import THEME


class ClueListView:
    """
    Selectable list of the party's known clues (top half of the clue screen).

    Rows map 1:1 onto registry.known(); the index never leaves this view.
    """

    def __init__(self, registry: ClueRegistry, font: Any, rect: pygame.Rect) -> None:
        self.registry = registry
        self.font = font
        self.rect = pygame.Rect(rect)

        self.items: Tuple[Clue, ...] = ()
        self.index: int = -1
        self.active: bool = False
        self._opened_before = False

    # ------------------------------------------------------------------ #
    #  Lifecycle
    # ------------------------------------------------------------------ #
    def open(self) -> None:
        """Repopulate from the registry and settle the selection."""
        self.items = self.registry.known()

        if not self.items:
            self.index = -1
        elif not self._opened_before or self.index < 0:
            self.index = 0
        else:
            # reopened: keep the old row, clamped to what still exists
            self.index = min(self.index, len(self.items) - 1)

        self._opened_before = True
        self.active = True

    def refresh(self) -> None:
        self.items = self.registry.known()
        if self.index >= len(self.items):
            self.index = len(self.items) - 1
        elif self.index < 0 and self.items:
            self.index = 0

    # ------------------------------------------------------------------ #
    #  Selection
    # ------------------------------------------------------------------ #
    def select(self, index: int) -> None:
        if not self.items:
            self.index = -1
            return
        self.index = max(0, min(index, len(self.items) - 1))

    def move(self, delta: int) -> None:
        if not self.items:
            return
        self.select(self.index + delta)

    def select_last(self) -> None:
        last = self.registry.last()
        index = -1
        if last is not None:
            for i, clue in enumerate(self.items):
                if clue.id == last.id:
                    index = i
                    break
        self.select(index if index >= 0 else 0)

    def current(self) -> Clue | None:
        if 0 <= self.index < len(self.items):
            return self.items[self.index]
        return None

    def confirm(self) -> Clue | None:
        """Selected clue for the detail view; the list keeps input focus."""
        self.active = True
        return self.current()

    # ------------------------------------------------------------------ #
    #  Paging
    # ------------------------------------------------------------------ #
    def page_start(self) -> int:
        max_visible = THEME.max_page_rows
        total = len(self.items)
        if total <= max_visible:
            return 0
        half = max_visible // 2
        start = max(0, self.index - half)
        if start + max_visible > total:
            start = total - max_visible
        return start

    # ------------------------------------------------------------------ #
    #  Rendering
    # ------------------------------------------------------------------ #
    def draw(self, surface: pygame.Surface) -> None:
        rect = self.rect
        panel = pygame.Surface(rect.size, pygame.SRCALPHA)
        pygame.draw.rect(panel, THEME.panel_fill, panel.get_rect(), border_radius=THEME.border_radius)
        surface.blit(panel, rect.topleft)
        pygame.draw.rect(
            surface, THEME.panel_border, rect,
            width=THEME.border_width, border_radius=THEME.border_radius,
        )

        x = rect.x + THEME.list_pad_x
        list_y = rect.y + THEME.list_pad_y
        line_h = THEME.list_row_h

        if not self.items:
            text = self.font.render("No clues discovered yet.", True, THEME.text_hint)
            surface.blit(text, (x + THEME.list_cursor_w, list_y))
            return

        start = self.page_start()
        max_visible = THEME.max_page_rows
        visible = self.items[start:start + max_visible]

        if start > 0:
            arrow_up = self.font.render("▲", True, THEME.text_dim)
            surface.blit(arrow_up, (rect.right - 24, list_y - line_h // 2))
        if start + max_visible < len(self.items):
            arrow_down = self.font.render("▼", True, THEME.text_dim)
            surface.blit(arrow_down, (rect.right - 24, list_y + max_visible * line_h - line_h // 2))

        for i, clue in enumerate(visible):
            if not clue.title:
                continue
            is_selected = (start + i == self.index)
            color = THEME.text_primary if is_selected else THEME.text_dim
            ty = list_y + i * line_h

            text = self.font.render(clue.title, True, color)
            clip = pygame.Rect(0, 0, min(text.get_width(), THEME.list_title_w), text.get_height())
            surface.blit(text, (x + THEME.list_cursor_w, ty), clip)

            if is_selected and self.active:
                cursor = self.font.render("▶", True, color)
                surface.blit(cursor, (x, ty))
