#!/usr/bin/env python3

"""
tk_host.py — EmulatorHost backed by tkinter, for running PKlogview standalone.

Forms are Toplevel windows on a hidden root; the pygame loop calls pump()
every frame so they stay responsive. Sound is routed to pygame.mixer.
"""

import tkinter as tk
from tkinter import filedialog, ttk

import pygame

from host_api import EmulatorHost


def parse_filter_spec(filter_spec):
    """
    Convert "Randomizer Log (*.log)|*.log|All files (*.*)|*.*" into
    tkinter filetypes: [("Randomizer Log (*.log)", "*.log"), ("All files (*.*)", "*.*")]
    """
    parts = (filter_spec or "").split("|")
    filetypes = []
    for i in range(0, len(parts) - 1, 2):
        filetypes.append((parts[i], parts[i + 1].replace(";", " ")))
    return filetypes or [("All files", "*.*")]


class TkFormsHost(EmulatorHost):
    version = "tk"

    def __init__(self, root=None):
        self.root = root or tk.Tk()
        self.root.withdraw()
        self._widgets = {}
        self._variables = {}
        self._next_id = 1
        self.paused = False
        self._sound_on = True

    def _register(self, widget, variable=None):
        control_id = self._next_id
        self._next_id += 1
        self._widgets[control_id] = widget
        if variable is not None:
            self._variables[control_id] = variable
        return control_id

    def pump(self):
        """Process pending tk events; call once per frame."""
        try:
            self.root.update()
        except tk.TclError:
            pass

    @staticmethod
    def _place(widget, x, y, width=None, height=None):
        kwargs = {"x": x, "y": y}
        if width is not None:
            kwargs["width"] = width
        if height is not None:
            kwargs["height"] = height
        widget.place(**kwargs)

    # --- Forms ---
    def newform(self, width, height, title, on_close):
        window = tk.Toplevel(self.root)
        window.title(title or "")
        window.geometry(f"{width}x{height}")
        window.resizable(False, False)
        window.protocol("WM_DELETE_WINDOW", on_close)
        return self._register(window)

    def destroy(self, control_id):
        widget = self._widgets.pop(control_id, None)
        self._variables.pop(control_id, None)
        if widget is None:
            return
        try:
            widget.destroy()
        except tk.TclError:
            pass
        # Children of a destroyed form are gone too
        for child_id, child in list(self._widgets.items()):
            if not child.winfo_exists():
                self._widgets.pop(child_id, None)
                self._variables.pop(child_id, None)

    def setlocation(self, control_id, x, y):
        widget = self._widgets.get(control_id)
        if widget is not None:
            widget.geometry(f"+{int(x)}+{int(y)}")

    def button(self, form_id, text, on_click, x, y, width=None, height=None):
        widget = tk.Button(self._widgets[form_id], text=text, command=on_click)
        self._place(widget, x, y, width, height)
        return self._register(widget)

    def checkbox(self, form_id, text, x, y):
        variable = tk.BooleanVar(value=False)
        widget = tk.Checkbutton(self._widgets[form_id], text=text, variable=variable)
        self._place(widget, x, y)
        return self._register(widget, variable)

    def dropdown(self, form_id, items, x, y, width=None, height=None):
        variable = tk.StringVar()
        widget = ttk.Combobox(self._widgets[form_id], textvariable=variable, values=list(items))
        self._place(widget, x, y, width, height)
        return self._register(widget, variable)

    def setdropdownitems(self, control_id, items, sort_alphabetically=True):
        widget = self._widgets.get(control_id)
        if widget is not None:
            values = sorted(items) if sort_alphabetically else list(items)
            widget.configure(values=values)

    def label(self, form_id, text, x, y, width=None, height=None, monospaced=False):
        font = ("Courier New", 8) if monospaced else None
        widget = tk.Label(self._widgets[form_id], text=text, font=font, anchor="w")
        self._place(widget, x, y, width, height)
        return self._register(widget)

    def textbox(self, form_id, text, width=None, height=None, boxtype=None, x=0, y=0,
                multiline=False, monospaced=False, scrollbars=None):
        variable = tk.StringVar(value=text or "")
        font = ("Courier New", 8) if monospaced else None
        widget = tk.Entry(self._widgets[form_id], textvariable=variable, font=font)
        self._place(widget, x, y, width, height)
        return self._register(widget, variable)

    def addclick(self, control_id, on_click):
        widget = self._widgets.get(control_id)
        if widget is not None:
            widget.bind("<Button-1>", lambda _event: on_click())

    def gettext(self, control_id):
        variable = self._variables.get(control_id)
        if variable is not None and not isinstance(variable, tk.BooleanVar):
            return variable.get()
        widget = self._widgets.get(control_id)
        if widget is not None:
            try:
                return widget.cget("text")
            except tk.TclError:
                return ""
        return ""

    def settext(self, control_id, text):
        variable = self._variables.get(control_id)
        if variable is not None and not isinstance(variable, tk.BooleanVar):
            variable.set(text)
            return
        widget = self._widgets.get(control_id)
        if widget is not None:
            try:
                widget.configure(text=text)
            except tk.TclError:
                pass

    def getproperty(self, control_id, prop):
        # tkinter widgets have no matching properties; AutoSize etc. are implied by place()
        return ""

    def setproperty(self, control_id, prop, value):
        return None

    def ischecked(self, control_id):
        variable = self._variables.get(control_id)
        if isinstance(variable, tk.BooleanVar):
            return variable.get()
        return False

    def openfile(self, filename, directory, filter_spec):
        path = filedialog.askopenfilename(
            parent=self.root,
            initialdir=directory or None,
            initialfile=filename or None,
            filetypes=parse_filter_spec(filter_spec),
        )
        return path or ""

    # --- Client ---
    def unpause(self):
        self.paused = False

    def get_sound_on(self):
        return self._sound_on

    def set_sound_on(self, enabled):
        self._sound_on = bool(enabled)
        if pygame.mixer.get_init():
            if self._sound_on:
                pygame.mixer.unpause()
            else:
                pygame.mixer.pause()
