# haunt/save/clue_payload.py
"""
Clue registry <-> save payload.

Two shapes exist in the wild:

  - structured (current):  {"version": 1, "known": [{id, title, text}, ...]}
  - legacy:                [{...}, {...}]  (bare list of clue records), or the
                           old game object dump {"_data": [...]}

Whatever is read, the result is always a ClueRegistry.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, List

from haunt.clues.catalog import Clue, ClueCatalog
from haunt.clues.registry import ClueRegistry
from haunt.debug.debug_logger import log

PAYLOAD_VERSION = 1


class SaveFormatError(ValueError):
    """Raised when a clue payload matches neither known shape."""


def serialize(registry: ClueRegistry) -> Dict[str, Any]:
    return {
        "version": PAYLOAD_VERSION,
        "known": [clue.to_dict() for clue in registry.known()],
    }


def _coerce_clue(record: Any) -> Clue:
    if isinstance(record, Clue):
        return record
    if isinstance(record, Mapping):
        try:
            return Clue.from_dict(record)
        except (TypeError, ValueError) as e:
            raise SaveFormatError(f"Unreadable clue record: {record!r}") from e
    raise SaveFormatError(f"Clue record has unexpected type {type(record).__name__}")


def _coerce_clues(records: Any) -> List[Clue]:
    return [_coerce_clue(r) for r in records]


def decode(payload: Any, catalog: ClueCatalog) -> ClueRegistry:
    """
    Strict decoder: structured shape first, then the legacy shapes.

    Raises SaveFormatError for anything else.
    """
    # Shape A: already a registry, or the structured dict
    if isinstance(payload, ClueRegistry):
        return payload
    if isinstance(payload, Mapping) and isinstance(payload.get("known"), list):
        return ClueRegistry.from_clues(catalog, _coerce_clues(payload["known"]))

    # Shape B: legacy list, copied verbatim (no re-validation)
    if isinstance(payload, (list, tuple)):
        records = [r for r in payload if r is not None]
        log("save", f"Migrating legacy clue list ({len(records)} entries)")
        return ClueRegistry.from_clues(catalog, _coerce_clues(records))
    if isinstance(payload, Mapping) and isinstance(payload.get("_data"), list):
        records = [r for r in payload["_data"] if r is not None]
        log("save", f"Migrating legacy clue object ({len(records)} entries)")
        return ClueRegistry.from_clues(catalog, _coerce_clues(records))

    raise SaveFormatError(f"Unrecognized clue payload: {type(payload).__name__}")


def deserialize(payload: Any, catalog: ClueCatalog) -> ClueRegistry:
    """Like decode(), but a corrupt payload degrades to an empty registry."""
    try:
        return decode(payload, catalog)
    except SaveFormatError as e:
        log("save", f"Could not restore clues, starting empty: {e}")
        return ClueRegistry(catalog)
