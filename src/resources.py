#!/usr/bin/env python3

"""
resources.py — Display strings for every supported language.

English is built in. Other languages are read from data/languages/<Language>.json,
which has the same section/key layout; missing keys fall back to English.
Screens that cache rendered text register a listener to rebuild when the
language changes.
"""

import json
import os

from config import LANGUAGES_DIR

DEFAULT_LANGUAGE = "English"

ENGLISH = {
    "AllScreens": {
        "Page": "Page",
        "Back": "Back",
        "Cancel": "Cancel",
    },
    "LogOverlay": {
        "TabPokemon": "Pokémon",
        "TabTrainers": "Trainers",
        "TabRoutes": "Routes",
        "TabTMs": "TMs",
        "TabMisc": "Misc",
        "FilterAll": "All",
        "FilterRival": "Rival",
        "FilterGym": "Gym",
        "FilterElite4": "Elite 4",
        "FilterBoss": "Boss",
        "FilterOther": "Other",
        "FilterTMNumber": "TM #",
        "FilterGymTMs": "Gym TMs",
        "LabelAbilities": "Abilities",
        "LabelLevelupMoves": "Level-up Moves",
        "LabelEvolutions": "Evolves",
        "LabelNoEvolutions": "Does not evolve",
        "LabelLevel": "Lv.",
        "LabelEncounters": "Encounters",
        "LabelNoData": "No data",
        "LabelLogFile": "Log file",
        "LabelVersion": "Randomizer",
        "LabelGame": "Game",
        "LabelSettings": "Settings",
        "OptionPreEvolutions": "Show pre-evolutions",
        "LabelGymLeader": "Leader",
    },
    "LogSearchScreen": {
        "Title": "Search the log",
        "Prompt": "Enter a name to search for:",
        "FilterLabel": "Search by:",
        "ButtonSearch": "Search",
        "FilterPokemonName": "Pokémon Name",
        "FilterAbility": "Ability",
        "FilterLevelupMove": "Levelup Move",
    },
    "TrackedDataScreen": {
        "Title": "Manage Tracked Data",
        "DescAutosave": "All of the data that is tracked while you play is auto-saved after each battle, stored as a .TDAT file",
        "DescManualsave": "Old auto-saved data will be lost if you start a new game on the same Pokémon version. Use Save/Load if you want to keep it",
        "OptionAutosave": "Auto save tracked game data",
        "ButtonSave": "Save Data",
        "ButtonLoad": "Load Data",
        "SavePromptTitle": "Save Tracker Data",
        "SavePromptLabel": "Enter a filename to save Tracker data to:",
    },
}

_tables = {DEFAULT_LANGUAGE: ENGLISH}
_current_language = DEFAULT_LANGUAGE
_listeners = []


def _load_language_file(language):
    path = os.path.join(LANGUAGES_DIR, f"{language}.json")
    if not os.path.exists(path):
        print(f"[Resources] Language file not found: {path}")
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        print(f"[Resources] Loaded language: {language}")
        return data
    except Exception as e:
        print(f"[Resources] Error loading {path}: {e}")
        return None


def get_language():
    return _current_language


def add_language_listener(callback):
    """Register a callable run after every successful language change."""
    if callback not in _listeners:
        _listeners.append(callback)


def remove_language_listener(callback):
    if callback in _listeners:
        _listeners.remove(callback)


def set_language(language, table=None):
    """
    Switch the active language. A table may be passed directly; otherwise it is
    loaded from the languages folder. Returns False (and keeps the current
    language) if no table could be found.
    """
    global _current_language

    if table is None and language not in _tables:
        table = _load_language_file(language)
        if table is None:
            return False
    if table is not None:
        _tables[language] = table

    _current_language = language
    for callback in list(_listeners):
        callback()
    return True


def text(section, key):
    """Get a display string for the current language, falling back to English."""
    table = _tables.get(_current_language, ENGLISH)
    value = table.get(section, {}).get(key)
    if value is None:
        value = ENGLISH.get(section, {}).get(key, key)
    return value
