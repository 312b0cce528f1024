# haunt/ui/text_wrap.py
"""
Greedy word-wrap shared by every window that shows long prose
(clue details, story-so-far panel).

Render-only helpers; no pygame import. Width is measured through a
caller-supplied `measure(text) -> pixels`, usually `font_measure(font)`.
"""

from __future__ import annotations

from typing import Any, Callable, List, Tuple

Measure = Callable[[str], int]

# (text, y offset) pairs handed to the drawing code
TextRow = Tuple[str, int]


def font_measure(font: Any) -> Measure:
    """Adapt a pygame Font (anything with .size(text)) to a Measure."""
    def measure(text: str) -> int:
        return font.size(text)[0]
    return measure


def prepare_text_for_wrapping(text: str) -> str:
    """Author line breaks become plain spaces so wrapping is purely by width."""
    if "\n" in text:
        return " ".join(text.split("\n"))
    return text


def wrap_text(text: str, max_width: int, measure: Measure) -> List[str]:
    """
    Pack whole words onto lines while `measure(line + word + " ") < max_width`.

    When a word does not fit, the current line is closed as-is (even when it
    is still empty) and the word opens the next line. Words are never split,
    so a word wider than the budget sits alone on its own line. Every line
    keeps its trailing space.
    """
    lines: List[str] = []
    line = ""

    for word in text.split(" "):
        if measure(line + word + " ") < max_width:
            line += word + " "
        else:
            lines.append(line)
            line = word + " "

    lines.append(line)
    return lines


def layout_text(
    text: str,
    width: int,
    measure: Measure,
    *,
    margin: int = 10,
    top: int = 20,
    line_height: int = 30,
) -> List[TextRow]:
    """
    Window rule used by the clue details and story panels.

    Text wider than `width` is flattened and wrapped at `width - margin`;
    text that already fits is drawn unwrapped, its own line breaks kept.
    """
    if not text:
        return []

    if measure(text) > width:
        lines = wrap_text(prepare_text_for_wrapping(text), width - margin, measure)
    else:
        lines = text.split("\n")

    return [(line, top + i * line_height) for i, line in enumerate(lines)]
