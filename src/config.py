#!/usr/bin/env python3

"""
PKlogview Configuration
All paths, constants, and configuration settings

NOTE: All paths are absolute and should be constructed using os.path.join for cross-platform compatibility.
"""

import os
import sys

# ===== Display Settings =====
# The emulator's game screen, with the tracker panel drawn in the gap to its right
SCREEN_WIDTH = 240
SCREEN_HEIGHT = 160
RIGHT_GAP = 150
SCREEN_MARGIN = 5
LINESPACING = 10
WINDOW_WIDTH = SCREEN_WIDTH + RIGHT_GAP
WINDOW_HEIGHT = SCREEN_HEIGHT
WINDOW_SCALE = 3
FPS = 60


# ===== Directory Paths =====

# Core directories (internal, read-only)
BASE_DIR = getattr(sys, "_MEIPASS", os.path.dirname(os.path.abspath(__file__)))

# External (user-accessible) directories and files
if os.environ.get("PKLOGVIEW_BASE_DIR"):
    EXT_DIR = os.environ["PKLOGVIEW_BASE_DIR"]
elif getattr(sys, "frozen", False) and hasattr(sys, "_MEIPASS"):
    EXT_DIR = os.path.dirname(sys.executable)
else:
    EXT_DIR = os.path.abspath(os.path.join(BASE_DIR, "../dist"))

DATA_DIR = os.path.join(EXT_DIR, "data")
IMAGES_DIR = os.path.join(DATA_DIR, "images")
LANGUAGES_DIR = os.path.join(DATA_DIR, "languages")
THEMES_DIR = os.path.join(DATA_DIR, "themes")
FONTS_DIR = os.path.join(DATA_DIR, "fonts")
SAVES_DIR = os.path.join(EXT_DIR, "saves")
QUICKLOAD_DIR = os.path.join(EXT_DIR, "quickload")

SETTINGS_FILE = os.path.join(SAVES_DIR, "pklogview_settings.json")

# Font Paths
FONT_PATH = os.path.join(FONTS_DIR, "Pokemon_GB.ttf")
FONT_SIZE = 8


# ===== Image folders (relative to IMAGES_DIR) =====
class Folders:
    TRAINERS = "trainers"
    PLAYER = "player"
    ICONS = "icons"
    POKEMON_ICONS = "pokemonIcons"


# ===== File naming =====
class Extensions:
    TRACKED_DATA = ".tdat"
    RANDOMIZER_LOGFILE = ".log"
    GBA_ROM = ".gba"
    TRAINER = ".png"
    POKEMON_ICON = ".png"
    QUICKLOAD_SETTINGS = ".rnqs"


class PostFixes:
    AUTORANDOMIZED = "AutoRandomized"
    PREVIOUSATTEMPT = "PreviousAttempt"


# Filter strings handed to the host's open-file dialog
LOG_FILE_FILTER = "Randomizer Log (*.log)|*.log|All files (*.*)|*.*"
TRACKED_DATA_FILTER = "Tracker Data (*.TDAT)|*.TDAT|All files (*.*)|*.*"


# ===== Game data =====
TOTAL_POKEMON = 411  # Gen 3 internal species count, including the unown gap

# Game numbers as reported by the session
GAME_RUBY_SAPPHIRE = 1
GAME_EMERALD = 2
GAME_FIRERED_LEAFGREEN = 3


def print_paths():
    """Print all configured paths for debugging."""
    print("=" * 50)
    print("PKlogview Path Configuration")
    print("=" * 50)
    print(f"BASE_DIR:     {BASE_DIR}")
    print(f"EXT_DIR:      {EXT_DIR}")
    print(f"DATA_DIR:     {DATA_DIR}")
    print(f"IMAGES_DIR:   {IMAGES_DIR}")
    print(f"FONT_PATH:    {FONT_PATH}")
    print(f"SAVES_DIR:    {SAVES_DIR}")
    print(f"SETTINGS:     {SETTINGS_FILE}")
    print("=" * 50)


if __name__ == "__main__":
    print_paths()
