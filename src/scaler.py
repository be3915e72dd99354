#!/usr/bin/env python3
"""
Scaler Module for PKlogview
Draws the virtual screen (game screen plus tracker gap) scaled up into the window.
"""

import pygame


def fit_scale(window_size, virtual_size):
    """
    Largest scale that fits the virtual screen in the window, whole numbers only
    once it is at least 1x. Returns (scale, (offset_x, offset_y)) to centre it.
    """
    window_w, window_h = window_size
    virtual_w, virtual_h = virtual_size
    scale = min(window_w / virtual_w, window_h / virtual_h)
    if scale >= 1:
        scale = int(scale)
    offset = ((window_w - int(virtual_w * scale)) // 2, (window_h - int(virtual_h * scale)) // 2)
    return scale, offset


class Scaler:
    """Owns the pygame window and the fixed-size surface everything is drawn onto."""

    def __init__(self, virtual_size, scale=3, fullscreen=False, caption="PKlogview"):
        self.virtual_size = virtual_size
        self.window_scale = max(1, scale)
        self.fullscreen = fullscreen
        self.caption = caption
        self.surface = pygame.Surface(virtual_size)
        self.scale, self.offset = 1, (0, 0)
        self._open_window()

    def _open_window(self):
        if self.fullscreen:
            self.window = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            width, height = self.virtual_size
            self.window = pygame.display.set_mode(
                (width * self.window_scale, height * self.window_scale), pygame.RESIZABLE
            )
        pygame.display.set_caption(self.caption)
        self.scale, self.offset = fit_scale(self.window.get_size(), self.virtual_size)
        print(f"[Scaler] {self.window.get_width()}x{self.window.get_height()} at {self.scale}x")

    def handle_resize(self, width, height):
        if self.fullscreen:
            return
        self.window = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        self.scale, self.offset = fit_scale((width, height), self.virtual_size)

    def toggle_fullscreen(self):
        self.fullscreen = not self.fullscreen
        self._open_window()
        return self.fullscreen

    def to_virtual(self, pos):
        """Window mouse position to virtual surface coordinates."""
        x, y = pos
        return int((x - self.offset[0]) / self.scale), int((y - self.offset[1]) / self.scale)

    def present(self):
        width, height = self.virtual_size
        scaled = pygame.transform.scale(
            self.surface, (int(width * self.scale), int(height * self.scale))
        )
        self.window.fill((0, 0, 0))
        self.window.blit(scaled, self.offset)
        pygame.display.flip()
