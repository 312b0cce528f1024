# haunt/clues/registry.py

from __future__ import annotations

from typing import Iterable, List, Tuple

from haunt.clues.catalog import Clue, ClueCatalog
from haunt.debug.debug_logger import log


class ClueRegistry:
    """
    The clues the party has discovered in this playthrough.

    - Order is discovery order.
    - An id appears at most once.
    - The catalog is referenced, never copied.
    """

    def __init__(self, catalog: ClueCatalog) -> None:
        self.catalog = catalog
        self._known: List[Clue] = []

    @classmethod
    def from_clues(cls, catalog: ClueCatalog, clues: Iterable[Clue]) -> "ClueRegistry":
        """Restore a known-list verbatim (no catalog validation)."""
        registry = cls(catalog)
        registry._known = list(clues)
        return registry

    # -----------------------------
    # Discovery
    # -----------------------------
    def discover(self, clue_id: int) -> bool:
        clue = self.catalog.lookup(clue_id)
        if clue is None:
            log("clues", f"discover({clue_id!r}): no such clue, ignoring")
            return False
        if self.is_known(clue.id):
            return False
        self._known.append(clue)
        log("clues", f"Discovered clue {clue.id}: {clue.title!r}")
        return True

    def discover_all(self) -> int:
        added = 0
        for clue in self.catalog.all():
            if self.discover(clue.id):
                added += 1
        return added

    # -----------------------------
    # Queries
    # -----------------------------
    def known(self) -> Tuple[Clue, ...]:
        return tuple(self._known)

    def last(self) -> Clue | None:
        if not self._known:
            return None
        return self._known[-1]

    def is_known(self, clue_id: int) -> bool:
        return any(c.id == clue_id for c in self._known)

    def __len__(self) -> int:
        return len(self._known)
