# haunt/data/loader.py
from __future__ import annotations

import json
from pathlib import Path

from haunt.clues.catalog import ClueCatalog
from haunt.debug.debug_logger import log
from haunt.settings import CLUES_PATH


def load_clue_catalog(path: str | Path = CLUES_PATH) -> ClueCatalog:
    """
    Read Clues.json into a catalog.

    A missing or unreadable file gives an empty catalog; the game still boots,
    there just aren't any clues to find.
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError:
        log("clues", f"No clue data at {path}, catalog is empty")
        return ClueCatalog()
    except (OSError, json.JSONDecodeError) as e:
        log("clues", f"Could not read {path}: {e}")
        return ClueCatalog()

    if not isinstance(raw, list):
        log("clues", f"{path} should hold a list of clues, got {type(raw).__name__}")
        return ClueCatalog()

    catalog = ClueCatalog.from_records(raw)
    log("clues", f"Loaded {len(catalog)} clue(s) from {path}")
    return catalog
