#!/usr/bin/env python3

"""
Per-frame mouse input for the emulator window
"""


class Input:
    """
    Tracks the left mouse button between frames and reports a click on the press edge.

    allow_mouse is switched off while a form popup is open; once resume_mouse is set
    (the popup closed) mouse input comes back on the next frame the button is released,
    so the click that closed the popup is not also delivered to the emulator window.
    """

    def __init__(self):
        self.allow_mouse = True
        self.resume_mouse = False
        self._was_pressed = False

    def update(self, xmouse, ymouse, pressed, on_click):
        """
        Call once per frame with the cursor position in screen coordinates.
        on_click(xmouse, ymouse) runs when the button goes down this frame.
        Returns True if a click was dispatched.
        """
        if not self.allow_mouse:
            if self.resume_mouse and not pressed:
                self.allow_mouse = True
                self.resume_mouse = False
            self._was_pressed = pressed
            return False

        clicked = pressed and not self._was_pressed
        self._was_pressed = pressed
        if clicked:
            print(f"[Input] Click at {xmouse},{ymouse}")
            on_click(xmouse, ymouse)
        return clicked
