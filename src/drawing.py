#!/usr/bin/env python3

"""
drawing.py — Rendering primitives for the overlay, on top of pygame.

Everything draws onto the surface it is given, in virtual screen
coordinates (240x160 game screen plus the tracker gap on the right).
"""

import os

import pygame
from PIL import Image

import theme
from config import SCREEN_HEIGHT, SCREEN_WIDTH
from constants import ButtonTypes, PixelImages

# Approximate pixel widths of the tracker font; anything not listed is 4px
_CHAR_WIDTHS = {
    " ": 3, "!": 2, ".": 2, ",": 2, "'": 2, ":": 2, ";": 2, "|": 2,
    "i": 2, "l": 2, "j": 3, "t": 3, "f": 3, "I": 2, "1": 3, "(": 3, ")": 3,
    "m": 6, "w": 6, "M": 6, "W": 6, "#": 6, "%": 6, "@": 6,
}

_image_cache = {}
_missing_images = set()


def calc_word_pixel_length(text):
    """Width in pixels of text drawn with the tracker font."""
    if not text:
        return 0
    return sum(_CHAR_WIDTHS.get(ch, 4) + 1 for ch in text) - 1


def get_word_wrap_lines(text, max_chars):
    """Split text into lines of at most max_chars characters, breaking on spaces."""
    lines = []
    line = ""
    for word in (text or "").split(" "):
        test = (line + " " + word).strip()
        if len(test) <= max_chars:
            line = test
        else:
            if line:
                lines.append(line)
            line = word
    if line:
        lines.append(line)
    return lines


def draw_rectangle(surf, x, y, width, height, border_color, fill_color=None):
    """Filled rectangle with a 1px border, matching the emulator's drawRectangle."""
    rect = pygame.Rect(int(x), int(y), int(width) + 1, int(height) + 1)
    if fill_color is not None:
        pygame.draw.rect(surf, fill_color, rect)
    pygame.draw.rect(surf, border_color, rect, 1)


def draw_line(surf, x1, y1, x2, y2, color):
    pygame.draw.line(surf, color, (int(x1), int(y1)), (int(x2), int(y2)))


def load_gif_first_frame(path):
    """Animated icon sets are GIFs; the overlay shows their first frame."""
    pil_img = Image.open(path)
    try:
        frame = pil_img.convert("RGBA")
        return pygame.image.frombytes(frame.tobytes(), frame.size, frame.mode)
    finally:
        pil_img.close()


def _load_image(path):
    if path in _image_cache:
        return _image_cache[path]
    if path in _missing_images:
        return None
    if not path or not os.path.exists(path):
        _missing_images.add(path)
        print(f"[Drawing] Missing image: {path}")
        return None
    try:
        if path.lower().endswith(".gif"):
            img = load_gif_first_frame(path)
        else:
            img = pygame.image.load(path)
        if pygame.display.get_surface() is not None:
            img = img.convert_alpha()
        _image_cache[path] = img
        return img
    except Exception as e:
        _missing_images.add(path)
        print(f"[Drawing] Failed to load {path}: {e}")
        return None


def draw_image(surf, path, x, y, width=None, height=None):
    """Draw an image file; silently skipped if the file is missing."""
    img = _load_image(path)
    if img is None:
        return False
    if width is not None and height is not None and img.get_size() != (width, height):
        img = pygame.transform.scale(img, (int(width), int(height)))
    surf.blit(img, (int(x), int(y)))
    return True


def draw_text(surf, x, y, text, color, shadowcolor=None, size=None):
    """Draw text with an optional 1px drop shadow."""
    if text is None or text == "":
        return
    font = theme.get_font(size) if size else theme.get_font()
    text = str(text)
    if shadowcolor:
        surf.blit(font.render(text, False, shadowcolor), (int(x) + 2, int(y) + 1))
    surf.blit(font.render(text, False, color), (int(x) + 1, int(y)))


def draw_pixel_image(surf, image, x, y, color):
    """Draw a PixelImages grid, one pixel per set cell."""
    for row_index, row in enumerate(image):
        for col_index, cell in enumerate(row):
            if cell:
                surf.set_at((int(x) + col_index, int(y) + row_index), color)


def draw_underline(surf, button, color):
    x1 = button.box[0] + 2
    x2 = button.box[0] + button.box[2] + 1
    y = button.box[1] + button.box[3] - 1
    draw_line(surf, x1, y, x2, y, color)


def draw_background_and_margins(surf, x=0, y=0, width=SCREEN_WIDTH, height=SCREEN_HEIGHT):
    bg = theme.color("Main background")
    pygame.draw.rect(surf, bg, pygame.Rect(x, y, width, height))


def draw_button(surf, button, shadowcolor=None):
    """Draw a button according to its type, then its own extra drawing."""
    if button is None or not button.is_visible():
        return

    x, y, width, height = button.box[:4]
    text_color = theme.color(button.text_color)
    border_color = theme.color(button.box_colors[0])
    fill_color = theme.color(button.box_colors[1])
    if button.shadowcolor is False:
        shadowcolor = None
    text = button.get_text()

    if button.type == ButtonTypes.FULL_BORDER:
        draw_rectangle(surf, x, y, width, height, border_color, fill_color)
        draw_text(surf, x + 1, y, text, text_color, shadowcolor)
    elif button.type == ButtonTypes.NO_BORDER:
        draw_text(surf, x, y, text, text_color, shadowcolor)
    elif button.type == ButtonTypes.CHECKBOX:
        draw_rectangle(surf, x, y, width, height, border_color, fill_color)
        if button.toggle_state:
            draw_pixel_image(surf, PixelImages.CHECKMARK, x + 1, y + 1, theme.color(button.toggle_color))
        draw_text(surf, x + width + 1, y - 2, text, text_color, shadowcolor)
    elif button.type == ButtonTypes.PIXELIMAGE:
        if shadowcolor:
            draw_pixel_image(surf, button.image, x + 1, y + 1, shadowcolor)
        draw_pixel_image(surf, button.image, x, y, text_color)
        if text:
            draw_text(surf, x + width + 1, y, text, text_color, shadowcolor)
    elif button.type in (ButtonTypes.IMAGE, ButtonTypes.POKEMON_ICON):
        path = button.get_icon_path() if hasattr(button, "get_icon_path") else button.image
        draw_image(surf, path, x, y, width, height)

    button.draw(surf, shadowcolor)
