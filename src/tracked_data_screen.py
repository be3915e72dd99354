#!/usr/bin/env python3

"""
tracked_data_screen.py — Side screen for saving and loading tracked game data (.tdat files).
"""

import os

import drawing
import resources
import theme
from buttons import OverlayButton, check_buttons_clicked
from config import (
    LINESPACING,
    RIGHT_GAP,
    SAVES_DIR,
    SCREEN_HEIGHT,
    SCREEN_MARGIN,
    SCREEN_WIDTH,
    TRACKED_DATA_FILTER,
    Extensions,
)
from constants import ButtonTypes, Screens


class TrackedDataScreen:
    TEXT_COLOR = "Default text"
    BORDER_COLOR = "Lower box border"
    BOX_FILL_COLOR = "Lower box background"

    OPTION_KEYS = ["Auto save tracked game data"]

    def __init__(self, program):
        self.program = program
        self.buttons = {}
        self.initialize()

    def initialize(self):
        left = SCREEN_WIDTH + SCREEN_MARGIN
        self.buttons = {
            "SaveData": OverlayButton(
                [left + 19, SCREEN_MARGIN + 118, 44, 11],
                get_text=lambda: resources.text("TrackedDataScreen", "ButtonSave"),
                on_click=lambda _button: self.open_save_data_prompt(),
            ),
            "LoadData": OverlayButton(
                [left + 75, SCREEN_MARGIN + 118, 44, 11],
                get_text=lambda: resources.text("TrackedDataScreen", "ButtonLoad"),
                on_click=lambda _button: self.open_load_data_prompt(),
            ),
            "Back": OverlayButton(
                [left + 112, SCREEN_MARGIN + 135, 24, 11],
                get_text=lambda: resources.text("AllScreens", "Back"),
                on_click=lambda _button: self.go_back(),
            ),
        }

        start_x = left + 8
        start_y = SCREEN_MARGIN + 52
        for option_key in self.OPTION_KEYS:
            self.buttons[option_key] = OverlayButton(
                [start_x, start_y, 8, 8],
                button_type=ButtonTypes.CHECKBOX,
                text=option_key,
                clickable_area=[start_x, start_y, RIGHT_GAP - 12, 8],
                toggle_state=bool(self.program.options[option_key]),
                toggle_color="Positive text",
                on_click=self._toggle_option,
            )
            start_y += LINESPACING

        for button in self.buttons.values():
            button.text_color = self.TEXT_COLOR
            button.box_colors = [self.BORDER_COLOR, self.BOX_FILL_COLOR]

    def _toggle_option(self, button):
        # Stored in memory; written to the settings file on Back
        button.toggle_state = not button.toggle_state
        self.program.options.update_setting(button.text, button.toggle_state)
        self.program.redraw(True)

    def go_back(self):
        self.program.options.save()
        self.program.change_screen_view(Screens.NAVIGATION)

    @staticmethod
    def tracked_data_filename(name):
        """Append the tracked data extension unless the name already ends with it."""
        if name[-5:].lower() != Extensions.TRACKED_DATA:
            name += Extensions.TRACKED_DATA
        return name

    def save_tracked_data(self, name):
        if not name:
            return False
        filepath = os.path.join(SAVES_DIR, self.tracked_data_filename(name))
        return self.program.tracker.save_data(filepath)

    def open_save_data_prompt(self):
        forms = self.program.forms
        suggested = self.program.session.get_rom_name() or ""

        form = forms.create_form(
            resources.text("TrackedDataScreen", "SavePromptTitle"), 290, 130, 100, 50,
            block_input=True,
        )
        if form.control_id == 0:
            return form

        form.create_label(resources.text("TrackedDataScreen", "SavePromptLabel"), 18, 10, 300, 20)
        textbox = form.create_textbox(suggested, 20, 30, 200, 30)
        form.create_label(Extensions.TRACKED_DATA.upper(), 219, 32, 45, 20)

        def on_save():
            self.save_tracked_data(forms.get_text(textbox))
            form.destroy()

        form.create_button(resources.text("TrackedDataScreen", "ButtonSave"), 55, 60, on_save)
        form.create_button(resources.text("AllScreens", "Cancel"), 140, 60, form.destroy)
        return form

    def open_load_data_prompt(self):
        """Ask for a .tdat file and load it. Cancelling leaves the tracked data untouched."""
        suggested = (self.program.session.get_rom_name() or "") + Extensions.TRACKED_DATA
        filepath, success = self.program.forms.open_file_prompt(suggested, SAVES_DIR, TRACKED_DATA_FILTER)
        if not success:
            return False
        loaded = self.program.tracker.load_data(filepath)
        if loaded:
            self.program.redraw(True)
        return loaded

    # ===== Input =====
    def check_input(self, xmouse, ymouse):
        return check_buttons_clicked(xmouse, ymouse, self.buttons)

    # ===== Drawing =====
    def draw_screen(self, surf):
        fill = theme.color(self.BOX_FILL_COLOR)
        text_color = theme.color(self.TEXT_COLOR)
        shadowcolor = theme.calc_shadow_color(fill)

        topbox_x = SCREEN_WIDTH + SCREEN_MARGIN
        topbox_y = SCREEN_MARGIN
        topbox_width = RIGHT_GAP - SCREEN_MARGIN * 2
        topbox_height = SCREEN_HEIGHT - SCREEN_MARGIN * 2

        drawing.draw_background_and_margins(surf, SCREEN_WIDTH, 0, RIGHT_GAP, SCREEN_HEIGHT)
        drawing.draw_rectangle(surf, topbox_x, topbox_y, topbox_width, topbox_height, theme.color(self.BORDER_COLOR), fill)

        header = resources.text("TrackedDataScreen", "Title").upper()
        drawing.draw_text(surf, topbox_x + 20, topbox_y + 2, header, theme.color("Intermediate text"), shadowcolor)

        offset_x = topbox_x + 2
        offset_y = topbox_y + 15
        for line in drawing.get_word_wrap_lines(resources.text("TrackedDataScreen", "DescAutosave"), 35):
            drawing.draw_text(surf, offset_x, offset_y, line, text_color, shadowcolor)
            offset_y += 11

        for button in self.buttons.values():
            drawing.draw_button(surf, button, shadowcolor)

        offset_y += 22
        for line in drawing.get_word_wrap_lines(resources.text("TrackedDataScreen", "DescManualsave"), 34):
            drawing.draw_text(surf, offset_x, offset_y, line, text_color, shadowcolor)
            offset_y += 11
