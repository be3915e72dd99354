#!/usr/bin/env python3

"""
PKlogview Theme
Named theme colors, shadow calculation, theme file loading and the font cache
"""

import json
import os

import pygame

from config import FONT_PATH, FONT_SIZE, THEMES_DIR

# Default theme values, keyed by the names screens refer to
DEFAULT_THEME = {
    "Default text": (255, 255, 255),
    "Lower box text": (255, 255, 255),
    "Positive text": (0, 255, 0),
    "Negative text": (255, 0, 0),
    "Intermediate text": (255, 255, 0),
    "Header text": (255, 255, 255),
    "Upper box border": (170, 170, 170),
    "Upper box background": (34, 34, 34),
    "Lower box border": (170, 170, 170),
    "Lower box background": (34, 34, 34),
    "Main background": (0, 0, 0),
}

# Color key used to highlight the selected header item
HEADER_HIGHLIGHT_KEY = "Intermediate text"

COLORS = dict(DEFAULT_THEME)

_current_theme_name = "Default"

# Font cache to avoid recreating fonts constantly
_font_cache = {}


def color(key):
    """Look up a theme color by key, falling back to the default text color."""
    return COLORS.get(key, COLORS["Default text"])


def calc_shadow_color(rgb, scale=0.92):
    """
    Darken a background color to get the drop-shadow color for text drawn on it.
    Fully black backgrounds get a slightly lighter grey instead so the shadow remains visible.
    """
    r, g, b = rgb[:3]
    if (r, g, b) == (0, 0, 0):
        return (40, 40, 40)
    return (int(r * scale), int(g * scale), int(b * scale))


def load_theme(theme_name):
    """
    Load a theme from file.

    Args:
        theme_name: Name of the theme (e.g., "Fire Red")

    Returns:
        dict: Theme color values, or None if not found
    """
    if theme_name.lower() == "default":
        return dict(DEFAULT_THEME)

    base_name = theme_name.lower().replace(" ", "_")
    possible_files = [
        os.path.join(THEMES_DIR, f"{base_name}_theme.json"),
        os.path.join(THEMES_DIR, f"{base_name}.json"),
        os.path.join(THEMES_DIR, f"{theme_name}.json"),
    ]

    for filepath in possible_files:
        if os.path.exists(filepath):
            try:
                with open(filepath, "r", encoding="utf-8") as f:
                    theme_data = json.load(f)
                print(f"[Theme] Loaded theme from: {filepath}")
                return {
                    key: tuple(value)
                    for key, value in theme_data.items()
                    if key in DEFAULT_THEME and isinstance(value, (list, tuple))
                }
            except Exception as e:
                print(f"[Theme] Error loading {filepath}: {e}")

    print(f"[Theme] Theme not found: {theme_name}")
    return None


def apply_theme(theme_name):
    """
    Apply a theme by updating the COLORS table in place.

    Returns:
        bool: True if successful
    """
    global _current_theme_name

    theme_data = load_theme(theme_name)
    if theme_data is None:
        return False

    COLORS.clear()
    COLORS.update(DEFAULT_THEME)
    COLORS.update(theme_data)
    _current_theme_name = theme_name
    print(f"[Theme] Applied theme: {theme_name}")
    return True


def get_current_theme():
    """Get the name of the currently applied theme."""
    return _current_theme_name


def get_font(size=FONT_SIZE):
    """
    Get a pygame font with the theme's font path.
    Caches fonts by (path, size) to avoid recreation.
    """
    cache_key = (FONT_PATH, size)

    if cache_key not in _font_cache:
        if not pygame.font.get_init():
            pygame.font.init()
        try:
            _font_cache[cache_key] = pygame.font.Font(FONT_PATH, size)
        except Exception as e:
            print(f"[Theme] Font fallback, failed to load {FONT_PATH}: {e}")
            _font_cache[cache_key] = pygame.font.SysFont(None, size + 4)

    return _font_cache[cache_key]


def clear_font_cache():
    """Clear the font cache (call when the font changes)"""
    global _font_cache
    _font_cache = {}
