#!/usr/bin/env python3

"""
Shared constants: button kinds, pixel-art icons and common words
"""

from enum import Enum


class ButtonTypes(Enum):
    FULL_BORDER = "full_border"
    NO_BORDER = "no_border"
    CHECKBOX = "checkbox"
    IMAGE = "image"
    PIXELIMAGE = "pixelimage"
    POKEMON_ICON = "pokemon_icon"


class Words:
    POKEMON = "Pokémon"
    POKE = "Poké"


# Small 1-bit icons, drawn one pixel per cell in the button's text color
class PixelImages:
    LEFT_ARROW = (
        (0, 0, 0, 0, 1, 0, 0, 0, 0, 0),
        (0, 0, 0, 1, 1, 0, 0, 0, 0, 0),
        (0, 0, 1, 1, 1, 1, 1, 1, 1, 0),
        (0, 1, 1, 1, 1, 1, 1, 1, 1, 0),
        (0, 0, 1, 1, 1, 1, 1, 1, 1, 0),
        (0, 0, 0, 1, 1, 0, 0, 0, 0, 0),
        (0, 0, 0, 0, 1, 0, 0, 0, 0, 0),
    )
    RIGHT_ARROW = tuple(tuple(reversed(row)) for row in LEFT_ARROW)
    CLOSE = (
        (1, 1, 0, 0, 0, 0, 0, 1, 1),
        (0, 1, 1, 0, 0, 0, 1, 1, 0),
        (0, 0, 1, 1, 0, 1, 1, 0, 0),
        (0, 0, 0, 1, 1, 1, 0, 0, 0),
        (0, 0, 1, 1, 0, 1, 1, 0, 0),
        (0, 1, 1, 0, 0, 0, 1, 1, 0),
        (1, 1, 0, 0, 0, 0, 0, 1, 1),
    )
    CHECKMARK = (
        (0, 0, 0, 0, 0, 0, 1),
        (0, 0, 0, 0, 0, 1, 1),
        (1, 0, 0, 0, 1, 1, 0),
        (1, 1, 0, 1, 1, 0, 0),
        (0, 1, 1, 1, 0, 0, 0),
        (0, 0, 1, 0, 0, 0, 0),
    )
    MAGNIFYING_GLASS = (
        (0, 1, 1, 1, 0, 0, 0),
        (1, 0, 0, 0, 1, 0, 0),
        (1, 0, 0, 0, 1, 0, 0),
        (1, 0, 0, 0, 1, 0, 0),
        (0, 1, 1, 1, 1, 0, 0),
        (0, 0, 0, 0, 1, 1, 0),
        (0, 0, 0, 0, 0, 1, 1),
    )


class Screens(Enum):
    STARTUP = "startup"
    TRACKER = "tracker"
    GAME_OVER = "game_over"
    NAVIGATION = "navigation"
    TRACKED_DATA = "tracked_data"
