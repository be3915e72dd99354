#!/usr/bin/env python3

"""
PKlogview buttons
Clickable regions drawn on the emulator screen, and the click hit-test
"""

import pygame

from constants import ButtonTypes


class OverlayButton:
    """
    A clickable box on the overlay.

    Behaviour can be supplied as callbacks or by overriding the matching method
    in a subclass:
        is_visible()        -> bool, default True
        update_self()       refresh text/colors from current state
        on_click()          handle a click
        include_in_grid(k)  -> bool, whether the button belongs in a grid filtered by key k
        draw(surf, shadow)  extra drawing on top of the standard button look
    """

    def __init__(
        self,
        box,
        button_type=ButtonTypes.FULL_BORDER,
        text="",
        get_text=None,
        text_color="Default text",
        box_colors=None,
        image=None,
        on_click=None,
        is_visible=None,
        update_self=None,
        clickable_area=None,
        toggle_state=False,
        toggle_color="Positive text",
        shadowcolor=None,
        tab=None,
    ):
        self.box = list(box)
        self.type = button_type
        self.text = text
        self._get_text = get_text
        self.text_color = text_color
        self.box_colors = list(box_colors) if box_colors else ["Upper box border", "Upper box background"]
        self.image = image
        self._on_click = on_click
        self._is_visible = is_visible
        self._update_self = update_self
        self.clickable_area = list(clickable_area) if clickable_area else None
        self.toggle_state = toggle_state
        self.toggle_color = toggle_color
        self.shadowcolor = shadowcolor
        self.tab = tab
        self.page_visible = 1

    @property
    def rect(self):
        x, y, w, h = (self.clickable_area or self.box)[:4]
        return pygame.Rect(x, y, w, h)

    def contains(self, x, y):
        return self.rect.collidepoint(x, y)

    @property
    def clickable(self):
        return self._on_click is not None or type(self).on_click is not OverlayButton.on_click

    def get_text(self):
        if self._get_text is not None:
            return self._get_text()
        return self.text

    def is_visible(self):
        if self._is_visible is not None:
            return bool(self._is_visible())
        return True

    def update_self(self):
        if self._update_self is not None:
            self._update_self(self)

    def on_click(self):
        if self._on_click is not None:
            self._on_click(self)

    def include_in_grid(self, filter_key):
        return True

    def draw(self, surf, shadowcolor):
        pass


def check_buttons_clicked(xmouse, ymouse, buttons):
    """
    Click the button under the cursor. When visible buttons overlap, the one
    registered last is on top and is the only one clicked.

    Args:
        buttons: a list of buttons or a dict whose values are buttons

    Returns:
        The clicked button, or None
    """
    if isinstance(buttons, dict):
        buttons = buttons.values()

    topmost = None
    for button in buttons:
        if button.clickable and button.is_visible() and button.contains(xmouse, ymouse):
            topmost = button

    if topmost is not None:
        topmost.on_click()
    return topmost
