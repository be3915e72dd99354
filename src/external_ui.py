#!/usr/bin/env python3

"""
external_ui.py — Popup forms created through the emulator's form API.

Only one popup may be open at a time: FormBridge owns the id of the active
form and destroys it before creating the next one. Every call degrades to a
safe default when no host is attached (or a control id is 0), so screens can
call these unconditionally.
"""

from enum import IntEnum


class ControlTypes(IntEnum):
    BUTTON = 1
    CHECKBOX = 2
    DROPDOWN = 3
    LABEL = 4
    TEXTBOX = 5


class Properties:
    AUTO_SIZE = "AutoSize"
    BLOCK_INPUT = "BlocksInputWhenFocused"
    AUTO_COMPLETE_SOURCE = "AutoCompleteSource"
    AUTO_COMPLETE_MODE = "AutoCompleteMode"
    MAX_LENGTH = "MaxLength"
    FORE_COLOR = "ForeColor"


class PopupForm:
    """
    A popup window. Created by FormBridge.create_form(); control_id stays 0 when
    no host is available, and every create_* method then returns 0.
    """

    def __init__(self, bridge, title="Tracker Form", width=600, height=600, x=100, y=50,
                 on_close=None, block_input=True):
        self.bridge = bridge
        self.control_id = 0
        self.title = title
        self.width = width
        self.height = height
        self.x = x if x is not None else 100
        self.y = y if y is not None else 50
        self.on_close = on_close
        self.block_input = block_input
        # control id -> ControlTypes
        self.created_controls = {}

    @property
    def host(self):
        return self.bridge.host

    def destroy(self):
        self.bridge.destroy_form(self)

    def _try_auto_size(self, control_id, width=None, height=None):
        if self.bridge.AUTO_SIZE_CONTROLS and width is None and height is None:
            self.host.setproperty(control_id, Properties.AUTO_SIZE, True)

    def _add_click(self, control_id, on_click):
        if callable(on_click):
            self.host.addclick(control_id, on_click)

    def create_button(self, text, x, y, on_click, width=None, height=None):
        if not self.bridge.is_available():
            return 0
        control_id = self.host.button(self.control_id, text, on_click, x, y, width, height)
        self._try_auto_size(control_id, width, height)
        self.created_controls[control_id] = ControlTypes.BUTTON
        return control_id

    def create_checkbox(self, text, x, y, on_click=None):
        if not self.bridge.is_available():
            return 0
        control_id = self.host.checkbox(self.control_id, text, x, y)
        self._try_auto_size(control_id)
        self._add_click(control_id, on_click)
        self.created_controls[control_id] = ControlTypes.CHECKBOX
        return control_id

    def create_dropdown(self, items, x, y, width=None, height=None, start_item=None,
                        sort_alphabetically=True, on_click=None):
        if not self.bridge.is_available():
            return 0
        control_id = self.host.dropdown(self.control_id, ["..."], x, y, width, height)
        self.host.setdropdownitems(control_id, list(items), sort_alphabetically)
        self.host.setproperty(control_id, Properties.AUTO_COMPLETE_SOURCE, "ListItems")
        self.host.setproperty(control_id, Properties.AUTO_COMPLETE_MODE, "Append")
        if start_item:
            self.host.settext(control_id, start_item)
        self._try_auto_size(control_id, width, height)
        self._add_click(control_id, on_click)
        self.created_controls[control_id] = ControlTypes.DROPDOWN
        return control_id

    def create_label(self, text, x, y, width=None, height=None, monospaced=False, on_click=None):
        if not self.bridge.is_available():
            return 0
        control_id = self.host.label(self.control_id, text, x, y, width, height, monospaced is True)
        self._try_auto_size(control_id, width, height)
        self._add_click(control_id, on_click)
        self.created_controls[control_id] = ControlTypes.LABEL
        return control_id

    def create_textbox(self, text, x, y, width=None, height=None, boxtype=None, multiline=False,
                       monospaced=False, scrollbars=None, on_click=None):
        if not self.bridge.is_available():
            return 0
        control_id = self.host.textbox(
            self.control_id, text, width, height, boxtype, x, y,
            multiline is True, monospaced is True, scrollbars,
        )
        self._try_auto_size(control_id, width, height)
        self._add_click(control_id, on_click)
        self.created_controls[control_id] = ControlTypes.TEXTBOX
        return control_id


class FormBridge:
    """
    Creates and tracks popup forms for one host.

    Args:
        host: an EmulatorHost, or None when running without one
        input_state: the Input whose mouse handling is paused while a form is open
    """

    AUTO_SIZE_CONTROLS = True

    def __init__(self, host=None, input_state=None):
        self.host = host
        self.input_state = input_state
        self.active_form_id = 0
        self._sound_was_on = None

    def is_available(self):
        return self.host is not None

    def _resume_mouse(self):
        if self.input_state is not None:
            self.input_state.resume_mouse = True

    def _block_mouse(self):
        if self.input_state is not None:
            self.input_state.allow_mouse = False
            self.input_state.resume_mouse = False

    def create_form(self, title, width, height, x=None, y=None, on_close=None, block_input=True):
        """
        Create a popup form, closing the active one first.
        Returns a PopupForm; its control_id is 0 if no host is attached.
        """
        self.destroy_form()

        form = PopupForm(
            self, title=title, width=width, height=height, x=x, y=y,
            on_close=on_close, block_input=(block_input is not False),
        )

        if not self.is_available():
            return form

        def safely_close_form():
            self._resume_mouse()
            self.host.unpause()
            if callable(form.on_close):
                form.on_close(form)
            if self.active_form_id == form.control_id:
                self.active_form_id = 0
            form.destroy()

        # Emulator window ignores the mouse until the form is closed
        self._block_mouse()

        form.control_id = self.host.newform(form.width, form.height, form.title, safely_close_form)

        self.active_form_id = form.control_id
        self.host.setlocation(form.control_id, form.x, form.y)

        if self.host.needs_block_input_fix():
            current = self.host.getproperty(form.control_id, Properties.BLOCK_INPUT)
            if current:
                self.host.setproperty(form.control_id, Properties.BLOCK_INPUT, form.block_input)

        print(f"[ExternalUI] Opened form '{form.title}' ({form.control_id})")
        return form

    def destroy_form(self, form_or_id=None):
        """Destroy a form (PopupForm or control id), or the active form if none is given."""
        if not self.is_available():
            return

        if isinstance(form_or_id, PopupForm):
            control_id = form_or_id.control_id
        elif isinstance(form_or_id, int):
            control_id = form_or_id
        else:
            control_id = None
        if control_id and control_id != self.active_form_id:
            # A form that was already replaced; the active one keeps its state
            self.host.destroy(control_id)
            return
        control_id = control_id or self.active_form_id

        self._resume_mouse()
        self.host.unpause()
        if (control_id or 0) != 0:
            self.host.destroy(control_id)
        self.active_form_id = 0

    def _temp_disable_sound(self):
        self._sound_was_on = self.host.get_sound_on()
        if self._sound_was_on:
            self.host.set_sound_on(False)

    def _temp_enable_sound(self):
        if self._sound_was_on:
            self.host.set_sound_on(True)
        self._sound_was_on = None

    def open_file_prompt(self, filename, directory, filter_options):
        """
        Open the host's file-open dialog. Sound and emulator mouse input are
        paused while it is up and restored afterwards, including on cancel.

        Returns:
            (filepath, success); filepath is "" when cancelled or without a host
        """
        if not self.is_available():
            return "", False

        self._temp_disable_sound()
        self._block_mouse()
        try:
            filepath = self.host.openfile(filename, directory, filter_options) or ""
        finally:
            self._resume_mouse()
            self._temp_enable_sound()
        return filepath, filepath != ""

    def get_text(self, control_id):
        if (control_id or 0) == 0 or not self.is_available():
            return ""
        return self.host.gettext(control_id) or ""

    def set_text(self, control_id, text):
        if (control_id or 0) == 0 or not self.is_available():
            return
        self.host.settext(control_id, text or "")

    def is_checked(self, control_id):
        if (control_id or 0) == 0 or not self.is_available():
            return False
        return bool(self.host.ischecked(control_id))

    def get_property(self, control_id, prop):
        if (control_id or 0) == 0 or not prop or not self.is_available():
            return ""
        return self.host.getproperty(control_id, prop) or ""

    def set_property(self, control_id, prop, value):
        if (control_id or 0) == 0 or not prop or not self.is_available():
            return
        self.host.setproperty(control_id, prop, value if value is not None else "")
