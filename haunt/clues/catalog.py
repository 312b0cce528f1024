# haunt/clues/catalog.py
"""
Static table of every clue defined for the game (data/Clues.json).

Built once when game data loads and never mutated afterwards. Purely
logical: no pygame in here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from haunt.debug.debug_logger import log

# id 0 never names a real clue
NO_CLUE_ID = 0


@dataclass(frozen=True)
class Clue:
    id: int
    title: str
    text: str

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "title": self.title, "text": self.text}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Clue":
        # Old saves stored the raw game object fields
        if "_clueId" in data:
            return cls(
                id=int(data.get("_clueId", NO_CLUE_ID)),
                title=str(data.get("_clueTitle", "") or ""),
                text=str(data.get("_clueText", "") or ""),
            )
        return cls(
            id=int(data.get("id", NO_CLUE_ID)),
            title=str(data.get("title", "") or ""),
            text=str(data.get("text", "") or ""),
        )


def _parse_id(raw: Any) -> Optional[int]:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        try:
            return int(raw.strip())
        except ValueError:
            return None
    return None


class ClueCatalog:
    """All clues that exist in the game, indexed by id, in load order."""

    def __init__(self) -> None:
        self._by_id: Dict[int, Clue] = {}
        self._ordered: list[Clue] = []

    @classmethod
    def from_records(cls, raw_entries: Iterable[Any]) -> "ClueCatalog":
        catalog = cls()
        catalog.load(raw_entries)
        return catalog

    def load(self, raw_entries: Iterable[Any]) -> None:
        """
        Append every well-formed {id, title, text} record.

        RPG Maker data arrays begin with a null hole, so None entries are
        skipped quietly. Anything else that is malformed is dropped with a
        diagnostic; one bad row never aborts the rest of the load.
        """
        for pos, entry in enumerate(raw_entries):
            if entry is None:
                continue
            if not isinstance(entry, Mapping):
                log("clues", f"Dropping clue row {pos}: not a record ({type(entry).__name__})")
                continue

            clue_id = _parse_id(entry.get("id"))
            if clue_id is None or clue_id <= NO_CLUE_ID:
                log("clues", f"Dropping clue row {pos}: invalid id {entry.get('id')!r}")
                continue
            if clue_id in self._by_id:
                log("clues", f"Dropping clue row {pos}: duplicate id {clue_id}")
                continue

            clue = Clue(
                id=clue_id,
                title=str(entry.get("title", "") or ""),
                text=str(entry.get("text", "") or ""),
            )
            self._by_id[clue_id] = clue
            self._ordered.append(clue)

    def lookup(self, clue_id: int) -> Clue | None:
        # bool is an int subclass; True must not resolve to clue 1
        if isinstance(clue_id, bool) or not isinstance(clue_id, int):
            return None
        if clue_id <= NO_CLUE_ID:
            return None
        return self._by_id.get(clue_id)

    def all(self) -> Tuple[Clue, ...]:
        return tuple(self._ordered)

    def __len__(self) -> int:
        return len(self._ordered)

    def __contains__(self, clue_id: object) -> bool:
        return clue_id in self._by_id
