# haunt/save/save_state.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Any, Mapping
import json
import os

from haunt.clues.catalog import ClueCatalog
from haunt.clues.registry import ClueRegistry
from haunt.save.clue_payload import SaveFormatError, deserialize, serialize
from haunt.settings import SAVE_DIR


@dataclass
class SaveContents:
    """
    One save slot as far as this plugin is concerned.

      - clues: the party's discovered clues
      - extra: whatever else the host put in the envelope, passed through
    """
    clues: ClueRegistry
    extra: Dict[str, Any] = field(default_factory=dict)

    # -----------------------------
    # Serialization helpers
    # -----------------------------
    def to_dict(self) -> Dict[str, Any]:
        data = dict(self.extra)
        data["clues"] = serialize(self.clues)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any], catalog: ClueCatalog) -> "SaveContents":
        if not isinstance(data, Mapping):
            raise SaveFormatError(
                f"Save envelope must be an object, got {type(data).__name__}"
            )
        extra = {k: v for k, v in data.items() if k != "clues"}
        return cls(
            clues=deserialize(data.get("clues"), catalog),
            extra=extra,
        )

    @classmethod
    def new_game(cls, catalog: ClueCatalog) -> "SaveContents":
        return cls(clues=ClueRegistry(catalog))


# -----------------------------
# Disk I/O helpers
# -----------------------------

def slot_path(slot: int, save_dir: str = SAVE_DIR) -> str:
    return os.path.join(save_dir, f"file{int(slot)}.json")


def save_to_file(save: SaveContents, filepath: str) -> None:
    directory = os.path.dirname(filepath)
    if directory:
        os.makedirs(directory, exist_ok=True)
    data = save.to_dict()
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def load_from_file(filepath: str, catalog: ClueCatalog) -> SaveContents:
    with open(filepath, "r", encoding="utf-8") as f:
        data = json.load(f)
    return SaveContents.from_dict(data, catalog)
