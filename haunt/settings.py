# haunt/settings.py

from __future__ import annotations

import os

# -------- Screen (design space for the menu screens) --------
SCREEN_W = 1280
SCREEN_H = 815

# -------- Data files --------
DATA_DIR = os.path.join("data")
CLUES_FILE = "Clues.json"
CLUES_PATH = os.path.join(DATA_DIR, CLUES_FILE)

# -------- Saves --------
SAVE_DIR = os.path.join("saves")

# -------- Fonts --------
# None -> pygame's bundled default font
FONT_NAME = None
FONT_SIZE = 26
