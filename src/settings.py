#!/usr/bin/env python3

"""
PKlogview Settings
Tracker options, persisted as JSON in the saves folder
"""

import json
import os

from config import SETTINGS_FILE

DEFAULT_OPTIONS = {
    "Open Book Play Mode": False,
    "Use premade ROMs": False,
    "Generate ROM each time": False,
    "Auto save tracked game data": True,
    "Show Pre Evolutions": False,
    "Pokemon icon set": "1",
    "Language": "English",
    "Theme": "Default",
}

DEFAULT_FILES = {
    "ROMs Folder": None,
    "Settings File": None,
}

# Pokemon icon sets: folder under the images directory and the file extension of each icon
ICON_SET_MAP = {
    "1": {"name": "Original", "folder": "pokemonIcons", "extension": ".png"},
    "2": {"name": "Stadium", "folder": "pokemonStadium", "extension": ".png"},
    "3": {"name": "Gen 7+", "folder": "pokemonGen7", "extension": ".png"},
    "4": {"name": "Animated", "folder": "pokemonAnimated", "extension": ".gif"},
}


def load_tracker_settings(path=SETTINGS_FILE):
    """Load settings from pklogview_settings.json"""
    if os.path.exists(path):
        try:
            with open(path, "r", encoding="utf-8") as f:
                settings = json.load(f)
            print(f"[Settings] Loaded from: {path}")
            return settings
        except Exception as e:
            print(f"[Settings] Failed to load settings from {path}: {e}")
    else:
        print(f"[Settings] File not found: {path}")
    return {}


def save_tracker_settings(data, path=SETTINGS_FILE):
    """Save settings to pklogview_settings.json"""
    try:
        settings_dir = os.path.dirname(path)
        os.makedirs(settings_dir, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

        print(f"[Settings] Saved to: {path}")
        return True
    except Exception as e:
        print(f"[Settings] Failed to save settings to {path}: {e}")
        return False


class Options:
    """
    Tracker options with defaults filled in for anything the settings file lacks.
    Read with options["Key"]; file paths live under options.files.
    """

    IconSetMap = ICON_SET_MAP

    def __init__(self, data=None, path=SETTINGS_FILE):
        self.path = path
        data = data or {}
        self.values = dict(DEFAULT_OPTIONS)
        self.values.update(
            {k: v for k, v in data.items() if k in DEFAULT_OPTIONS}
        )
        self.files = dict(DEFAULT_FILES)
        self.files.update(data.get("FILES", {}))

    def __getitem__(self, key):
        return self.values.get(key)

    def get(self, key, default=None):
        return self.values.get(key, default)

    def update_setting(self, key, value):
        """Change an option in memory; call save() to persist it."""
        if key not in self.values:
            print(f"[Settings] Ignoring unknown option: {key}")
            return
        self.values[key] = value

    def icon_set(self):
        return ICON_SET_MAP.get(self.values["Pokemon icon set"], ICON_SET_MAP["1"])

    def to_dict(self):
        data = dict(self.values)
        data["FILES"] = dict(self.files)
        return data

    def save(self):
        return save_tracker_settings(self.to_dict(), self.path)

    @classmethod
    def load(cls, path=SETTINGS_FILE):
        return cls(load_tracker_settings(path), path=path)


_options = None


def get_options():
    """Get the global Options instance, loading it from disk on first use."""
    global _options
    if _options is None:
        _options = Options.load()
    return _options
