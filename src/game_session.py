#!/usr/bin/env python3

"""
Current game session: which ROM is loaded and where the player is
"""

from config import GAME_EMERALD, GAME_FIRERED_LEAFGREEN, GAME_RUBY_SAPPHIRE

GAME_NAMES = {
    GAME_RUBY_SAPPHIRE: "Ruby / Sapphire",
    GAME_EMERALD: "Emerald",
    GAME_FIRERED_LEAFGREEN: "FireRed / LeafGreen",
}


class GameSession:
    """
    Identity of the running game, as reported by the emulator.

    map_id is 0 until the player has a valid location on the overworld
    (i.e. the title screen or new-game intro is still showing).
    """

    def __init__(self, rom_name=None, game=GAME_FIRERED_LEAFGREEN, current_seed=1, map_id=0):
        self.rom_name = rom_name
        self.game = game
        self.current_seed = current_seed
        self.map_id = map_id
        self.is_game_over = False

    def get_rom_name(self):
        return self.rom_name

    def get_game_name(self):
        return GAME_NAMES.get(self.game, "Unknown")

    def is_valid_map_location(self):
        return (self.map_id or 0) > 0
