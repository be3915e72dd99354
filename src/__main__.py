#!/usr/bin/env python3

"""
__main__.py — Standalone entry point for PKlogview. Opens a pygame window with the
log overlay and tracker side screen, using tkinter for popup forms.
"""

import argparse
import os
import sys

_src_dir = os.path.dirname(os.path.abspath(__file__))
if _src_dir not in sys.path:
    sys.path.insert(0, _src_dir)

from tracker_logging import init_redirectors as _init_redirectors
_init_redirectors()

import pygame

import resources
import theme
from config import FPS, SCREEN_HEIGHT, WINDOW_SCALE, WINDOW_WIDTH, PostFixes
from constants import Screens
from game_session import GameSession
from program import Program
from scaler import Scaler
from settings import get_options
from tk_host import TkFormsHost


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="pklogview", description="Randomizer log viewer overlay")
    parser.add_argument("log", nargs="?", help="randomizer log to open")
    parser.add_argument("--rom", default=None, help="name of the ROM being played (without .gba)")
    parser.add_argument("--game", type=int, default=3, choices=(1, 2, 3),
                        help="1 = Ruby/Sapphire, 2 = Emerald, 3 = FireRed/LeafGreen")
    parser.add_argument("--scale", type=int, default=WINDOW_SCALE, help="window scale factor")
    parser.add_argument("--fullscreen", action="store_true")
    return parser.parse_args(argv)


def run(argv=None):
    args = parse_args(argv)
    pygame.init()

    options = get_options()
    if options["Theme"] and options["Theme"] != "Default":
        theme.apply_theme(options["Theme"])
    if options["Language"] and options["Language"] != resources.get_language():
        resources.set_language(options["Language"])

    scaler = Scaler((WINDOW_WIDTH, SCREEN_HEIGHT), scale=args.scale, fullscreen=args.fullscreen)
    clock = pygame.time.Clock()

    host = TkFormsHost()
    session = GameSession(rom_name=args.rom, game=args.game)
    program = Program(host=host, session=session, options=options)

    if args.log:
        program.overlay.parse_and_display(args.log)

    running = True
    while running:
        clock.tick(FPS)
        host.pump()

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                break
            elif event.type == pygame.VIDEORESIZE:
                scaler.handle_resize(event.w, event.h)
                program.redraw(True)
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_F11:
                    scaler.toggle_fullscreen()
                    program.redraw(True)
                elif event.key == pygame.K_F1:
                    program.change_screen_view(Screens.TRACKED_DATA)
                elif event.key == pygame.K_l:
                    program.overlay.view_log_file(PostFixes.AUTORANDOMIZED)
                elif event.key == pygame.K_SLASH:
                    program.overlay.search.open_search_prompt()

        if not running:
            break

        xmouse, ymouse = scaler.to_virtual(pygame.mouse.get_pos())
        program.update(xmouse, ymouse, pygame.mouse.get_pressed()[0])

        if program.draw(scaler.surface):
            scaler.present()

    options.save()
    pygame.quit()


if __name__ == "__main__":
    run()
