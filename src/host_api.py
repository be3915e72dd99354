#!/usr/bin/env python3

"""
host_api.py — The emulator-side calls PKlogview depends on.

EmulatorHost lists the form/control widget calls and the client calls
(pause and sound) that a host must provide. Controls are identified by
integer ids handed out by the host; 0 never refers to a control.
Concrete hosts: TkFormsHost in tk_host.py, and FakeHost in the tests.
"""


class EmulatorHost:
    """Base class for hosts; every method must be overridden."""

    # Version string of the emulator build, for host-specific workarounds
    version = ""

    # Host builds that need the block-input property re-applied after form creation
    BLOCK_INPUT_FIX_VERSIONS = ("2.9", "future")

    def needs_block_input_fix(self):
        return any(self.version.startswith(v) for v in self.BLOCK_INPUT_FIX_VERSIONS)

    # --- Forms ---
    def newform(self, width, height, title, on_close):
        raise NotImplementedError

    def destroy(self, control_id):
        raise NotImplementedError

    def setlocation(self, control_id, x, y):
        raise NotImplementedError

    def button(self, form_id, text, on_click, x, y, width=None, height=None):
        raise NotImplementedError

    def checkbox(self, form_id, text, x, y):
        raise NotImplementedError

    def dropdown(self, form_id, items, x, y, width=None, height=None):
        raise NotImplementedError

    def setdropdownitems(self, control_id, items, sort_alphabetically=True):
        raise NotImplementedError

    def label(self, form_id, text, x, y, width=None, height=None, monospaced=False):
        raise NotImplementedError

    def textbox(self, form_id, text, width=None, height=None, boxtype=None, x=0, y=0,
                multiline=False, monospaced=False, scrollbars=None):
        raise NotImplementedError

    def addclick(self, control_id, on_click):
        raise NotImplementedError

    def gettext(self, control_id):
        raise NotImplementedError

    def settext(self, control_id, text):
        raise NotImplementedError

    def getproperty(self, control_id, prop):
        raise NotImplementedError

    def setproperty(self, control_id, prop, value):
        raise NotImplementedError

    def ischecked(self, control_id):
        raise NotImplementedError

    def openfile(self, filename, directory, filter_spec):
        """Blocking file-open dialog. Returns the chosen path or "" if cancelled."""
        raise NotImplementedError

    # --- Client ---
    def unpause(self):
        raise NotImplementedError

    def get_sound_on(self):
        raise NotImplementedError

    def set_sound_on(self, enabled):
        raise NotImplementedError
