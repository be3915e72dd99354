#!/usr/bin/env python3

"""
Tracker
In-memory tracked game data plus save/load of .tdat files
"""

import json
import os
from datetime import datetime

from config import Extensions

TDAT_VERSION = 1


def _empty_data():
    return {
        "version": TDAT_VERSION,
        "romHash": None,
        "whichRival": None,
        "party": [],
        "notes": {},
    }


class Tracker:
    """
    Tracked game data for the current run.

    Storage format (.tdat, JSON):
    {
        "version": 1,
        "savedAt": "ISO timestamp",
        "romHash": "...",
        "whichRival": 1,
        "party": [{"pokemonID": 4, "level": 7}, ...],
        "notes": {"4": "Has Blaze"}
    }
    """

    def __init__(self):
        self.data = _empty_data()
        self.last_saved_path = None

    def reset_data(self):
        self.data = _empty_data()

    def get_pokemon(self, slot=1, is_own=True):
        """Return the tracked party member in a 1-based slot, or None."""
        if not is_own:
            return None
        party = self.data.get("party") or []
        if 1 <= slot <= len(party):
            return party[slot - 1]
        return None

    def set_party(self, party):
        self.data["party"] = list(party)

    def save_data(self, filepath):
        """Write tracked data to filepath. Returns True on success."""
        if not filepath:
            return False
        if not filepath.lower().endswith(Extensions.TRACKED_DATA):
            filepath += Extensions.TRACKED_DATA
        try:
            directory = os.path.dirname(filepath)
            if directory:
                os.makedirs(directory, exist_ok=True)
            payload = dict(self.data)
            payload["savedAt"] = datetime.now().isoformat()
            with open(filepath, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2)
            self.last_saved_path = filepath
            print(f"[Tracker] Saved tracked data to: {filepath}")
            return True
        except Exception as e:
            print(f"[Tracker] Failed to save tracked data to {filepath}: {e}")
            return False

    def load_data(self, filepath):
        """Replace tracked data with the contents of filepath. Returns True on success."""
        if not filepath or not os.path.isfile(filepath):
            print(f"[Tracker] Tracked data file not found: {filepath}")
            return False
        try:
            with open(filepath, "r", encoding="utf-8") as f:
                loaded = json.load(f)
            if not isinstance(loaded, dict):
                print(f"[Tracker] Ignoring malformed tracked data: {filepath}")
                return False
            data = _empty_data()
            data.update(loaded)
            data.pop("savedAt", None)
            self.data = data
            print(f"[Tracker] Loaded tracked data from: {filepath}")
            return True
        except Exception as e:
            print(f"[Tracker] Failed to load tracked data from {filepath}: {e}")
            return False
