#!/usr/bin/env python3

"""
program.py — Owns the tracker's state and routes each frame's input and drawing.

The log overlay covers the game screen while it is displayed; the side
screen (tracker gap on the right) shows whichever Screens value is current.
"""

import drawing
import resources
import theme
from config import RIGHT_GAP, SCREEN_HEIGHT, SCREEN_MARGIN, SCREEN_WIDTH
from constants import Screens
from external_ui import FormBridge
from game_session import GameSession
from input_handler import Input
from log_overlay import LogOverlay
from randomizer_log import RandomizerLog
from settings import get_options
from tracked_data_screen import TrackedDataScreen
from tracker import Tracker


class PlaceholderScreen:
    """Side screen for views that live outside the log viewer; shows a title and the info Pokémon."""

    def __init__(self, program, title):
        self.program = program
        self.title = title

    def check_input(self, xmouse, ymouse):
        return None

    def draw_screen(self, surf):
        fill = theme.color("Upper box background")
        shadowcolor = theme.calc_shadow_color(fill)
        x = SCREEN_WIDTH + SCREEN_MARGIN
        y = SCREEN_MARGIN

        drawing.draw_background_and_margins(surf, SCREEN_WIDTH, 0, RIGHT_GAP, SCREEN_HEIGHT)
        drawing.draw_rectangle(
            surf, x, y, RIGHT_GAP - SCREEN_MARGIN * 2, SCREEN_HEIGHT - SCREEN_MARGIN * 2,
            theme.color("Upper box border"), fill,
        )
        drawing.draw_text(surf, x + 2, y + 2, self.title, theme.color("Intermediate text"), shadowcolor)

        pokemon = self.program.log.data.pokemon.get(self.program.info_pokemon_id)
        if pokemon is not None:
            text_color = theme.color("Default text")
            drawing.draw_text(surf, x + 2, y + 16, pokemon.name, text_color, shadowcolor)
            drawing.draw_text(surf, x + 2, y + 27, " / ".join(pokemon.types), text_color, shadowcolor)
            drawing.draw_text(surf, x + 2, y + 38, f"BST: {pokemon.bst}", text_color, shadowcolor)


class Program:
    """
    Args:
        host: an EmulatorHost for popup forms, or None
        session/options/tracker/log: collaborators; defaults are created when omitted
    """

    def __init__(self, host=None, session=None, options=None, tracker=None, log=None):
        self.session = session or GameSession()
        self.options = options or get_options()
        self.tracker = tracker or Tracker()
        self.log = log or RandomizerLog()
        self.input = Input()
        self.forms = FormBridge(host, self.input)

        self.current_screen = Screens.STARTUP
        self.needs_redraw = True
        self.info_pokemon_id = None

        self.overlay = LogOverlay(self)
        self.screens = {
            Screens.STARTUP: PlaceholderScreen(self, "PKlogview"),
            Screens.TRACKER: PlaceholderScreen(self, "Tracker"),
            Screens.GAME_OVER: PlaceholderScreen(self, "Game Over"),
            Screens.NAVIGATION: PlaceholderScreen(self, "Navigation"),
            Screens.TRACKED_DATA: TrackedDataScreen(self),
        }

        resources.add_language_listener(self.overlay.rebuild_screen)
        self.overlay.initialize()

    def change_screen_view(self, screen):
        if screen not in self.screens:
            print(f"[Program] Unknown screen: {screen}")
            return
        self.current_screen = screen
        self.redraw(True)

    def redraw(self, forced=False):
        if forced:
            self.needs_redraw = True

    def is_valid_map_location(self):
        return self.session.is_valid_map_location()

    def change_info_view(self, pokemon_id):
        """Show a Pokémon's summary on the side screen."""
        self.info_pokemon_id = pokemon_id
        self.redraw(True)

    # ===== Input =====
    def check_input(self, xmouse, ymouse):
        if self.overlay.is_displayed and xmouse < SCREEN_WIDTH:
            self.overlay.check_input(xmouse, ymouse)
            return
        screen = self.screens.get(self.current_screen)
        if screen is not None:
            screen.check_input(xmouse, ymouse)

    def update(self, xmouse, ymouse, pressed):
        """Per-frame mouse polling; clicks are dispatched on the press edge."""
        return self.input.update(xmouse, ymouse, pressed, self.check_input)

    # ===== Drawing =====
    def draw(self, surf):
        """Redraw everything if something changed. Returns True when it drew."""
        if not self.needs_redraw:
            return False
        self.needs_redraw = False

        drawing.draw_background_and_margins(surf, 0, 0, SCREEN_WIDTH, SCREEN_HEIGHT)
        self.overlay.draw_screen(surf)

        screen = self.screens.get(self.current_screen)
        if screen is not None:
            screen.draw_screen(surf)
        return True
