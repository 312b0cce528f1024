# haunt/debug/debug_logger.py

from __future__ import annotations
from typing import Iterable, Any

# ----------------------------------------------------------------------
# Core debug toggles
# ----------------------------------------------------------------------

DEBUG_ENABLED: bool = True

ENABLED_CATEGORIES: set[str] = {
    "clues",     # catalog loading / discovery
    "save",      # save payload encode / decode
    "commands",  # plugin command dispatch
    "ui",        # clue screen + story panel
}

def enable_categories(*cats: str) -> None:
    ENABLED_CATEGORIES.update(cats)

def disable_categories(*cats: str) -> None:
    for c in cats:
        ENABLED_CATEGORIES.discard(c)

def set_categories(cats: Iterable[str]) -> None:
    global ENABLED_CATEGORIES
    ENABLED_CATEGORIES = set(cats)

def log(category: str, message: str) -> None:
    if not DEBUG_ENABLED:
        return
    if category not in ENABLED_CATEGORIES:
        return
    print(f"[HAUNT {category.upper()}] {message}")


# ----------------------------------------------------------------------
# High-level Clue Debug Helper
# ----------------------------------------------------------------------

class ClueDebug:
    """
    Formats structured debug dumps for the clue codex.

    Anything that wants to print catalog / registry state should go through
    here instead of hand-rolling strings.
    """

    def catalog_snapshot(self, catalog: Any) -> None:
        rows = []
        for clue in catalog.all():
            rows.append(f"  [{clue.id}] {clue.title!r} ({len(clue.text)} chars)")
        body = "\n".join(rows) if rows else "  (empty)"
        log("clues", "[CATALOG]\n" + body)

    def registry_snapshot(self, registry: Any) -> None:
        known = registry.known()
        rows = []
        for i, clue in enumerate(known):
            rows.append(f"  #{i} [{clue.id}] {clue.title!r}")
        last = registry.last()
        rows.append(f"  last: {getattr(last, 'id', None)!r}")
        log("clues", "[KNOWN]\n" + "\n".join(rows))
