# haunt/scene/clue_scene.py
from __future__ import annotations

import pygame
from typing import Any, Callable, Optional

from haunt.clues.registry import ClueRegistry
from haunt.debug.debug_logger import log
from haunt.ui.clue_detail import ClueDetailView
from haunt.ui.clue_list import ClueListView

UP_KEYS = (pygame.K_UP, pygame.K_w)
DOWN_KEYS = (pygame.K_DOWN, pygame.K_s)
CONFIRM_KEYS = (pygame.K_RETURN, pygame.K_z, pygame.K_SPACE)
CANCEL_KEYS = (pygame.K_ESCAPE, pygame.K_x, pygame.K_BACKSPACE)


class ClueScene:
    """
    Clues screen opened from the main menu.

      - top half: ClueListView (always holds input focus)
      - bottom half: ClueDetailView for the last confirmed clue
      - cancel hands control back via on_close()
    """

    def __init__(
        self,
        registry: ClueRegistry,
        font: Any,
        screen_size: tuple[int, int],
        *,
        on_close: Optional[Callable[[], None]] = None,
    ) -> None:
        w, h = screen_size
        half = h // 2
        self.registry = registry
        self.list_view = ClueListView(registry, font, pygame.Rect(0, 0, w, half))
        self.detail_view = ClueDetailView(font, pygame.Rect(0, half - 1, w, half))
        self.on_close = on_close
        self.is_open = False

    # ------------------------------------------------------------------ #
    #  Lifecycle hooks
    # ------------------------------------------------------------------ #
    def open(self) -> None:
        self.detail_view.clear()
        self.list_view.open()
        self.is_open = True
        log("ui", f"Clue screen opened ({len(self.list_view.items)} known)")

    def select(self, index: int) -> None:
        self.list_view.select(index)

    def confirm(self) -> None:
        clue = self.list_view.confirm()
        if clue is not None:
            self.detail_view.set_clue(clue)

    def cancel(self) -> None:
        self.list_view.active = False
        self.is_open = False
        log("ui", "Clue screen closed")
        if self.on_close is not None:
            self.on_close()

    # ------------------------------------------------------------------ #
    #  Frame hooks
    # ------------------------------------------------------------------ #
    def handle_event(self, event: pygame.event.Event) -> None:
        if not self.is_open or event.type != pygame.KEYDOWN:
            return

        if event.key in UP_KEYS:
            self.list_view.move(-1)
        elif event.key in DOWN_KEYS:
            self.list_view.move(1)
        elif event.key in CONFIRM_KEYS:
            self.confirm()
        elif event.key in CANCEL_KEYS:
            self.cancel()

    def update(self, dt: float) -> None:
        # Nothing animates on this screen yet.
        pass

    def draw(self, surface: pygame.Surface) -> None:
        if not self.is_open:
            return
        self.list_view.draw(surface)
        self.detail_view.draw(surface)
