import os
import sys
import tempfile
from pathlib import Path

import pytest

# Keep settings, saves and the log file out of the source tree
os.environ.setdefault("PKLOGVIEW_BASE_DIR", tempfile.mkdtemp(prefix="pklogview-tests-"))

SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

import resources  # noqa: E402
from host_api import EmulatorHost  # noqa: E402
from program import Program  # noqa: E402
from randomizer_log import log_data_from_dict  # noqa: E402
from settings import Options  # noqa: E402


class FakeHost(EmulatorHost):
    """Records every host call; control ids count up from 1."""

    def __init__(self, openfile_result=""):
        self.calls = []
        self.last_id = 0
        self.texts = {}
        self.close_callbacks = {}
        self.click_callbacks = {}
        self.sound_on = True
        self.openfile_result = openfile_result

    def _new_id(self):
        self.last_id += 1
        return self.last_id

    def newform(self, width, height, title, on_close):
        form_id = self._new_id()
        self.close_callbacks[form_id] = on_close
        self.calls.append(("newform", form_id, title))
        return form_id

    def destroy(self, control_id):
        self.calls.append(("destroy", control_id))

    def setlocation(self, control_id, x, y):
        self.calls.append(("setlocation", control_id, x, y))

    def button(self, form_id, text, on_click, x, y, width=None, height=None):
        control_id = self._new_id()
        self.click_callbacks[control_id] = on_click
        self.calls.append(("button", form_id, text))
        return control_id

    def checkbox(self, form_id, text, x, y):
        self.calls.append(("checkbox", form_id, text))
        return self._new_id()

    def dropdown(self, form_id, items, x, y, width=None, height=None):
        self.calls.append(("dropdown", form_id))
        return self._new_id()

    def setdropdownitems(self, control_id, items, sort_alphabetically=True):
        self.calls.append(("setdropdownitems", control_id, list(items)))

    def label(self, form_id, text, x, y, width=None, height=None, monospaced=False):
        self.calls.append(("label", form_id, text))
        return self._new_id()

    def textbox(self, form_id, text, width=None, height=None, boxtype=None, x=0, y=0,
                multiline=False, monospaced=False, scrollbars=None):
        control_id = self._new_id()
        self.texts[control_id] = text
        self.calls.append(("textbox", form_id, text))
        return control_id

    def addclick(self, control_id, on_click):
        self.click_callbacks[control_id] = on_click

    def gettext(self, control_id):
        return self.texts.get(control_id, "")

    def settext(self, control_id, text):
        self.texts[control_id] = text

    def getproperty(self, control_id, prop):
        return ""

    def setproperty(self, control_id, prop, value):
        self.calls.append(("setproperty", control_id, prop, value))

    def ischecked(self, control_id):
        return False

    def openfile(self, filename, directory, filter_spec):
        self.calls.append(("openfile", filename, directory, filter_spec))
        return self.openfile_result

    def unpause(self):
        self.calls.append("unpause")

    def get_sound_on(self):
        return self.sound_on

    def set_sound_on(self, enabled):
        self.calls.append(("set_sound_on", enabled))
        self.sound_on = enabled

    def destroyed(self):
        return [call[1] for call in self.calls if isinstance(call, tuple) and call[0] == "destroy"]


def _moves(count):
    return [{"level": 1 + i * 4, "name": f"Move {i + 1}"} for i in range(count)]


SAMPLE_LOG = {
    "settings": {"version": "4.6.1", "game": "Fire Red (U) 1.0", "settingsString": "411AAABBBCCC", "seed": 42},
    "pokemon": {
        "1": {"name": "Bulbasaur", "types": ["Grass", "Poison"], "abilities": ["Overgrow"],
              "moveset": [{"level": 1, "name": "Tackle"}, {"level": 7, "name": "Leech Seed"}] + _moves(8),
              "evolutions": [2], "stats": {"hp": 45, "atk": 49, "def": 49, "spa": 65, "spd": 65, "spe": 45}},
        "2": {"name": "Ivysaur", "types": ["Grass", "Poison"], "abilities": ["Overgrow"],
              "moveset": [{"level": 1, "name": "Tackle"}], "evolutions": [3]},
        "3": {"name": "Venusaur", "types": ["Grass", "Poison"], "abilities": ["Overgrow"],
              "moveset": [{"level": 1, "name": "Petal Dance"}]},
        "4": {"name": "Charmander", "types": ["Fire"], "abilities": ["Blaze"],
              "moveset": [{"level": 1, "name": "Scratch"}, {"level": 7, "name": "Ember"}]},
        **{
            str(i): {"name": f"Zubat{i}", "types": ["Poison", "Flying"], "abilities": ["Inner Focus"],
                     "moveset": [{"level": 1, "name": "Leech Life"}]}
            for i in range(5, 21)
        },
    },
    "trainers": {
        "101": {"name": "Gary", "filename": "frlg-rival-1", "group": "Rival", "whichRival": 1,
                "party": [{"pokemonId": 4, "level": 5}]},
        "102": {"name": "Gary", "filename": "frlg-rival-2", "group": "Rival", "whichRival": 2,
                "party": [{"pokemonId": 1, "level": 5}]},
        "103": {"name": "Brock", "filename": "frlg-gymleader-1", "group": "Gym",
                "party": [{"pokemonId": 5, "level": 12}, {"pokemonId": 6, "level": 14}]},
        "104": {"name": "Misty", "filename": "frlg-gymleader-2", "group": "Gym",
                "party": [{"pokemonId": 7, "level": 21}]},
        "105": {"name": "Lorelei", "filename": "frlg-elitefour-1", "group": "Elite 4",
                "party": [{"pokemonId": 8, "level": 54}]},
        "106": {"name": "Giovanni", "filename": "frlg-boss-1", "group": "Boss",
                "party": [{"pokemonId": 9, "level": 30}]},
        "107": {"name": "Unknown", "filename": "unknown", "group": "Other"},
        "108": {"name": "Youngster", "filename": "frlg-youngster", "group": "Other",
                "party": [{"pokemonId": 10, "level": 9}]},
    },
    "routes": {
        "89": {
            "name": "Route 1",
            "encounterAreas": {
                "Walking": [
                    {"pokemonId": 10, "levelMin": 2, "levelMax": 4, "rate": 30},
                    {"pokemonId": 13, "levelMin": 2, "levelMax": 5, "rate": 70},
                ],
                "Surfing": [{"pokemonId": 14, "levelMin": 20, "levelMax": 20, "rate": 100}],
            },
            "trainers": [108, 107],
        },
        "90": {"name": "Route 2"},
    },
    "tms": {str(n): {"moveId": 200 + n, "moveName": f"TM Move {n}"} for n in range(1, 41)},
    "gymTMs": [
        {"number": 39, "gymNumber": 1, "leader": "Brock"},
        {"number": 3, "gymNumber": 2},
        {"number": "x"},
    ],
}


@pytest.fixture
def fake_host():
    return FakeHost()


@pytest.fixture
def options(tmp_path):
    return Options({}, path=str(tmp_path / "pklogview_settings.json"))


@pytest.fixture
def make_program(options):
    """Build a Program; with_log=True loads the sample log and builds every tab."""

    created = []

    def _make(host=None, with_log=True, which_rival=None):
        program = Program(host=host, options=options)
        created.append(program)
        if which_rival is not None:
            program.tracker.data["whichRival"] = which_rival
        if with_log:
            program.log.data = log_data_from_dict(SAMPLE_LOG)
            program.log.loaded_log_path = "/logs/FireRed AutoRandomized.gba.log"
            program.overlay.build_all_tabs()
        return program

    yield _make

    for program in created:
        resources.remove_language_listener(program.overlay.rebuild_screen)


@pytest.fixture
def program(make_program):
    return make_program()


def click_inside(target, button):
    """Click one pixel inside a button's top-left corner."""
    x, y = (button.clickable_area or button.box)[:2]
    return target.check_input(x + 1, y + 1)
