#!/usr/bin/env python3

"""
file_manager.py — Path helpers and log/ROM filename matching.

Provides:
  - build_image_path / get_path_if_exists / prepend_dir: file-system lookups
  - plain_formatter: normalizes ROM names so a loaded ROM can be matched to its log
  - previous_rom_name: steps a numbered ROM name back by one (for "previous attempt" logs)
  - get_quickload_files: randomizer settings files used by generate-each-time mode
"""

import os
import re

from config import EXT_DIR, IMAGES_DIR, QUICKLOAD_DIR, Extensions, PostFixes

slash = os.sep
working_dir = EXT_DIR + slash


def build_image_path(folder, filename, extension):
    return os.path.join(IMAGES_DIR, folder, f"{filename}{extension}")


def file_exists(path):
    return bool(path) and os.path.isfile(path)


def get_path_if_exists(path):
    """Return the path unchanged if the file exists, otherwise None."""
    if file_exists(path):
        return path
    return None


def prepend_dir(filename):
    return os.path.join(working_dir, filename)


def extract_file_name_from_path(path):
    """'C:/roms/Kaizo.rnqs' -> 'Kaizo'"""
    if not path:
        return ""
    return os.path.splitext(os.path.basename(path))[0]


def plain_formatter(filename):
    """
    Reduce a ROM filename to a comparable form: auto-appended postfixes and the
    .gba extension are removed, spaces become underscores, digits are dropped
    and the result is lowercased.
    """
    filename = filename or ""
    filename = filename.replace(PostFixes.AUTORANDOMIZED, "")
    filename = filename.replace(PostFixes.PREVIOUSATTEMPT, "")
    filename = filename.replace(Extensions.GBA_ROM, "")
    filename = filename.replace(" ", "_")
    filename = re.sub(r"\d", "", filename)
    return filename.lower()


def previous_rom_name(romname):
    """
    Decrement the number in a premade ROM's name, keeping its zero padding.
    'Kaizo 012' -> 'Kaizo 011'; a name without a number is treated as 0.
    """
    prefix_match = re.search(r"[^0-9]+", romname or "")
    number_match = re.search(r"[0-9]+", romname or "")
    prefix = prefix_match.group(0) if prefix_match else ""
    number = number_match.group(0) if number_match else "0"
    return f"{prefix}{int(number) - 1:0{len(number)}d}"


def get_quickload_files(quickload_dir=QUICKLOAD_DIR):
    """
    List the randomizer settings files in the quickload folder.

    Returns:
        dict: {"settingsList": [absolute paths, sorted]}
    """
    settings_list = []
    if os.path.isdir(quickload_dir):
        for filename in sorted(os.listdir(quickload_dir)):
            if filename.lower().endswith(Extensions.QUICKLOAD_SETTINGS):
                settings_list.append(os.path.join(quickload_dir, filename))
    return {"settingsList": settings_list}
