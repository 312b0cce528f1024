import pygame
import pytest

from haunt.clues.catalog import ClueCatalog


class StubFont:
    """Monospace stand-in for pygame.font.Font: every character is 10px."""

    char_w = 10
    height = 20

    def size(self, text):
        return (len(text) * self.char_w, self.height)

    def render(self, text, antialias, color):
        return pygame.Surface((max(1, len(text) * self.char_w), self.height))

    def get_height(self):
        return self.height


@pytest.fixture
def font():
    return StubFont()


@pytest.fixture
def catalog():
    return ClueCatalog.from_records(
        [
            None,
            {"id": 1, "title": "Find the key", "text": "A rusted key behind the lighthouse door."},
            {"id": 2, "title": "Locked door", "text": "The cellar door is locked from the inside."},
            {"id": 3, "title": "Torn letter", "text": "Half a letter, signed only with an H."},
        ]
    )
