#!/usr/bin/env python3

"""
log_tabs.py — The list tabs of the log viewer: Pokémon, Trainers, Routes, TMs and Misc.

Each list tab builds one button per record from the parsed log, then
realigns: filters the buttons for the active grid filter, sorts them and
assigns each one a page.
"""

import os
import re

import drawing
import resources
import theme
from buttons import OverlayButton
from config import Extensions, Folders
from constants import ButtonTypes
from file_manager import build_image_path
from log_search import SearchFilters, matches_search
from log_tab_base import GridButton, LogTab, NavFilter, NavFilterButton, TabId


def pokemon_icon_path(options, pokemon_id):
    icon_set = options.icon_set()
    return build_image_path(icon_set["folder"], str(pokemon_id), icon_set["extension"])


def trainer_image_path(trainer):
    return build_image_path(Folders.TRAINERS, trainer.filename, Extensions.TRAINER)


def tab_icon(name, width, height):
    return {"image": build_image_path(Folders.ICONS, name, ".png"), "w": width, "h": height}


def fit_text(text, max_width):
    """Trim text until it fits in max_width pixels."""
    text = text or ""
    while text and drawing.calc_word_pixel_length(text) > max_width:
        text = text[:-1]
    return text


def build_nav_buttons(tab, nav_filters, y=13):
    """Lay out a row of filter buttons from left to right, sized to their text."""
    buttons = []
    x = tab.GRID_X
    for nav_filter in sorted(nav_filters, key=lambda f: f.index):
        width = drawing.calc_word_pixel_length(nav_filter.get_text()) + 4
        buttons.append(NavFilterButton(tab, nav_filter, [x, y, width, 11]))
        x += width + 6
    return buttons


# ===== Pokémon =====
class PokemonGridButton(GridButton):
    def __init__(self, owner, pokemon):
        super().__init__(owner, [0, 0, 32, 32], button_type=ButtonTypes.POKEMON_ICON)
        self.pokemon = pokemon
        self.pokemon_id = pokemon.id
        self.pokemon_name = pokemon.name

    def get_icon_path(self):
        return pokemon_icon_path(self.owner.overlay.program.options, self.pokemon_id)

    def include_in_grid(self, filter_key):
        if not filter_key or filter_key == "#":
            return True
        search_filter = self.owner.overlay.search.current_filter
        if search_filter == SearchFilters.ABILITY:
            return any(matches_search(filter_key, ability) for ability in self.pokemon.abilities)
        if search_filter == SearchFilters.LEVELUP_MOVE:
            return any(matches_search(filter_key, move.name) for move in self.pokemon.moveset)
        return matches_search(filter_key, self.pokemon_name)

    def on_click(self):
        overlay = self.owner.overlay
        overlay.windower.change_tab(TabId.POKEMON_DETAILS, 1, 1, self.pokemon_id)
        overlay.program.change_info_view(self.pokemon_id)
        overlay.program.redraw(True)

    def draw(self, surf, shadowcolor):
        name = fit_text(self.pokemon_name, self.owner.CELL_WIDTH - 2)
        drawing.draw_text(surf, self.box[0], self.box[1] + 32, name, theme.color("Default text"), shadowcolor)


class LogTabPokemon(LogTab):
    TAB_ID = TabId.POKEMON
    TITLE_KEY = "TabPokemon"
    CAN_REALIGN = True
    CAN_REBUILD = True

    GRID_X = 6
    GRID_Y = 14
    GRID_COLUMNS = 5
    GRID_ROWS = 3
    CELL_WIDTH = 46
    CELL_HEIGHT = 44

    def get_tab_icons(self):
        return [tab_icon("tab-pokemon", 14, 12)]

    def build_paged_buttons(self):
        pokemon = sorted(self.log_data.pokemon.values(), key=lambda p: p.id)
        self.paged_buttons = [PokemonGridButton(self, p) for p in pokemon]
        self._layout(self.paged_buttons)

    def realign_grid(self, grid_filter=None, sort_key=None, starting_page=None):
        if grid_filter is None:
            grid_filter = "#"
        if sort_key is None:
            sort_key = self.overlay.search.current_sort_order.sort_key

        self.windower.filter_grid = grid_filter
        included = [b for b in self.paged_buttons if b.include_in_grid(grid_filter)]
        included.sort(key=sort_key)
        self._apply_pages(self._layout(included), starting_page)

    def rebuild(self):
        self.realign_grid(self.windower.filter_grid, None, self.windower.current_page)


# ===== Trainers =====
class TrainerGroups:
    ALL = "All"
    RIVAL = "Rival"
    GYM = "Gym"
    ELITE4 = "Elite 4"
    BOSS = "Boss"
    OTHER = "Other"

    # Display order of groups in the "All" view
    ORDER = [RIVAL, GYM, ELITE4, BOSS, OTHER]
    LEVELED = {RIVAL, BOSS, GYM, ELITE4}


def _trainer_level(button):
    level = button.trainer.maxlevel
    return level if level is not None else 999


def sort_trainers_all(button):
    trainer = button.trainer
    if trainer.group in TrainerGroups.ORDER:
        group_index = TrainerGroups.ORDER.index(trainer.group)
    else:
        group_index = len(TrainerGroups.ORDER)
    level = _trainer_level(button) if trainer.group in TrainerGroups.LEVELED else 0
    return (group_index, level, trainer.id)


def sort_trainers_by_level(button):
    return (_trainer_level(button), button.trainer.id)


def sort_trainers_by_filename(button):
    return (button.trainer.filename[-5:], button.trainer.id)


TRAINER_FILTERS = [
    NavFilter("All", "FilterAll", TrainerGroups.ALL, 1, sort_trainers_all),
    NavFilter("Rival", "FilterRival", TrainerGroups.RIVAL, 2, sort_trainers_by_level),
    NavFilter("Gym", "FilterGym", TrainerGroups.GYM, 3, sort_trainers_by_filename),
    NavFilter("Elite4", "FilterElite4", TrainerGroups.ELITE4, 4, sort_trainers_by_filename),
    NavFilter("Boss", "FilterBoss", TrainerGroups.BOSS, 5, sort_trainers_by_level),
]


def gym_number_of(trainer):
    """'frlg-gymleader-3' -> 3; None when the filename carries no number."""
    match = re.search(r"(\d+)$", trainer.filename or "")
    return int(match.group(1)) if match else None


class TrainerGridButton(GridButton):
    def __init__(self, owner, trainer):
        super().__init__(owner, [0, 0, 32, 32], button_type=ButtonTypes.IMAGE)
        self.trainer = trainer
        self.trainer_id = trainer.id
        self.image = trainer_image_path(trainer)

    def include_in_grid(self, filter_key):
        return filter_key == TrainerGroups.ALL or self.trainer.group == filter_key

    def on_click(self):
        overlay = self.owner.overlay
        overlay.windower.change_tab(TabId.TRAINER_DETAILS, 1, 1, self.trainer_id)
        overlay.program.redraw(True)

    def draw(self, surf, shadowcolor):
        name = fit_text(self.trainer.name, self.owner.CELL_WIDTH - 2)
        drawing.draw_text(surf, self.box[0], self.box[1] + 31, name, theme.color("Default text"), shadowcolor)


class LogTabTrainers(LogTab):
    TAB_ID = TabId.TRAINERS
    TITLE_KEY = "TabTrainers"
    CAN_REALIGN = True
    CAN_REBUILD = True

    GRID_X = 6
    GRID_Y = 26
    GRID_COLUMNS = 5
    GRID_ROWS = 3
    CELL_WIDTH = 46
    CELL_HEIGHT = 42

    NAV_FILTERS = TRAINER_FILTERS

    def get_tab_icons(self):
        return [tab_icon("tab-trainers", 14, 12)]

    def _is_excluded(self, trainer, which_rival):
        if trainer.name == "Unknown":
            return True
        if trainer.group == TrainerGroups.RIVAL and which_rival is not None:
            return trainer.which_rival is not None and trainer.which_rival != which_rival
        return False

    def build_paged_buttons(self):
        """
        Build one button per trainer, and the table of gym TMs keyed by TM number:
        {number: {"leader": str, "gymNumber": int, "trainerId": int or None}}
        """
        which_rival = self.overlay.program.tracker.data.get("whichRival")
        trainers = sorted(self.log_data.trainers.values(), key=lambda t: t.id)

        self.buttons = build_nav_buttons(self, self.NAV_FILTERS)
        self.paged_buttons = [
            TrainerGridButton(self, t) for t in trainers if not self._is_excluded(t, which_rival)
        ]
        self._layout(self.paged_buttons)

        leaders = {}
        for trainer in trainers:
            if trainer.group == TrainerGroups.GYM and trainer.name != "Unknown":
                number = gym_number_of(trainer)
                if number is not None and number not in leaders:
                    leaders[number] = trainer

        gym_tms = {}
        for entry in self.log_data.gym_tms:
            try:
                tm_number = int(entry["number"])
                gym_number = int(entry["gymNumber"])
            except (KeyError, TypeError, ValueError):
                print(f"[LogOverlay] Skipping malformed gym TM entry: {entry}")
                continue
            leader = leaders.get(gym_number)
            gym_tms[tm_number] = {
                "leader": entry.get("leader") or (leader.name if leader else ""),
                "gymNumber": gym_number,
                "trainerId": leader.id if leader else entry.get("trainerId"),
            }
        return gym_tms

    def realign_grid(self, grid_filter=None, sort_key=None, starting_page=None):
        nav_filter = self._filter_for(grid_filter) or self._filter_for(TrainerGroups.ALL)
        if sort_key is None:
            sort_key = nav_filter.sort_key

        self.windower.filter_grid = nav_filter.group
        included = [b for b in self.paged_buttons if b.include_in_grid(nav_filter.group)]
        included.sort(key=sort_key)
        self._apply_pages(self._layout(included), starting_page)

    def rebuild(self):
        self.realign_grid(self.windower.filter_grid, None, self.windower.current_page)


# ===== Routes =====
def sort_routes_by_id(button):
    return button.route_id


class RouteGridButton(GridButton):
    def __init__(self, owner, route):
        super().__init__(
            owner, [0, 0, owner.CELL_WIDTH - 4, 10],
            button_type=ButtonTypes.NO_BORDER, text=route.name,
        )
        self.route = route
        self.route_id = route.id

    def get_text(self):
        return fit_text(self.route.name, self.box[2])

    def on_click(self):
        overlay = self.owner.overlay
        overlay.windower.change_tab(TabId.ROUTE_DETAILS, 1, 1, self.route_id)
        overlay.program.redraw(True)


class LogTabRoutes(LogTab):
    TAB_ID = TabId.ROUTES
    TITLE_KEY = "TabRoutes"
    CAN_REALIGN = True
    CAN_REBUILD = True

    GRID_X = 6
    GRID_Y = 15
    GRID_COLUMNS = 2
    GRID_ROWS = 12
    CELL_WIDTH = 116
    CELL_HEIGHT = 11

    def get_tab_icons(self):
        return [tab_icon("tab-routes", 12, 12)]

    def build_paged_buttons(self):
        routes = sorted(self.log_data.routes.values(), key=lambda r: r.id)
        self.paged_buttons = [
            RouteGridButton(self, r) for r in routes if r.encounter_areas or r.trainers
        ]
        self._layout(self.paged_buttons)

    def realign_grid(self, grid_filter=None, sort_key=None, starting_page=None):
        if grid_filter is None:
            grid_filter = "#"
        if sort_key is None:
            sort_key = sort_routes_by_id

        self.windower.filter_grid = grid_filter
        included = [b for b in self.paged_buttons if b.include_in_grid(grid_filter)]
        included.sort(key=sort_key)
        self._apply_pages(self._layout(included), starting_page)

    def rebuild(self):
        self.realign_grid(self.windower.filter_grid, None, self.windower.current_page)


# ===== TMs =====
class TMGroups:
    TM_NUMBER = "TM #"
    GYM_TMS = "Gym TMs"


def sort_tms_by_number(button):
    return button.tm.number


def sort_tms_by_gym(button):
    gym_number = button.gym_info["gymNumber"] if button.gym_info else 99
    return (gym_number, button.tm.number)


TM_FILTERS = [
    NavFilter("TMNumber", "FilterTMNumber", TMGroups.TM_NUMBER, 1, sort_tms_by_number),
    NavFilter("GymTMs", "FilterGymTMs", TMGroups.GYM_TMS, 2, sort_tms_by_gym),
]


class TMGridButton(GridButton):
    def __init__(self, owner, tm, gym_info=None):
        super().__init__(owner, [0, 0, owner.CELL_WIDTH - 4, 10], button_type=ButtonTypes.NO_BORDER)
        self.tm = tm
        self.gym_info = gym_info

    def get_text(self):
        text = f"TM{self.tm.number:02d} {self.tm.move_name}"
        return fit_text(text, self.box[2])

    def update_self(self):
        self.text_color = "Intermediate text" if self.gym_info else "Default text"

    def include_in_grid(self, filter_key):
        if filter_key == TMGroups.GYM_TMS:
            return self.gym_info is not None
        return True

    def on_click(self):
        if not self.gym_info or self.gym_info.get("trainerId") is None:
            return
        overlay = self.owner.overlay
        overlay.windower.change_tab(TabId.TRAINER_DETAILS, 1, 1, self.gym_info["trainerId"])
        overlay.program.redraw(True)


class LogTabTMs(LogTab):
    TAB_ID = TabId.TMS
    TITLE_KEY = "TabTMs"
    CAN_REALIGN = True
    CAN_REBUILD = True

    GRID_X = 6
    GRID_Y = 26
    GRID_COLUMNS = 2
    GRID_ROWS = 11
    CELL_WIDTH = 116
    CELL_HEIGHT = 11

    NAV_FILTERS = TM_FILTERS

    def get_tab_icons(self):
        return [tab_icon("tab-tms", 12, 12)]

    def build_paged_buttons(self, gym_tms=None):
        gym_tms = gym_tms or {}
        tms = sorted(self.log_data.tms.values(), key=lambda tm: tm.number)
        self.buttons = build_nav_buttons(self, self.NAV_FILTERS)
        self.paged_buttons = [TMGridButton(self, tm, gym_tms.get(tm.number)) for tm in tms]
        self._layout(self.paged_buttons)

    def realign_grid(self, grid_filter=None, sort_key=None, starting_page=None):
        nav_filter = self._filter_for(grid_filter) or self._filter_for(TMGroups.TM_NUMBER)
        if sort_key is None:
            sort_key = nav_filter.sort_key

        self.windower.filter_grid = nav_filter.group
        included = [b for b in self.paged_buttons if b.include_in_grid(nav_filter.group)]
        included.sort(key=sort_key)
        self._apply_pages(self._layout(included), starting_page)

    def rebuild(self):
        self.realign_grid(self.windower.filter_grid, None, self.windower.current_page)


# ===== Misc =====
class LogTabMisc(LogTab):
    TAB_ID = TabId.MISC
    TITLE_KEY = "TabMisc"
    CAN_REFRESH = True

    TEXT_X = 6
    TEXT_Y = 15
    LINE_HEIGHT = 11
    WRAP_CHARS = 52

    def get_tab_icons(self):
        return [tab_icon("tab-misc", 10, 12)]

    def _toggle_pre_evolutions(self, button):
        options = self.overlay.program.options
        button.toggle_state = not button.toggle_state
        options.update_setting("Show Pre Evolutions", button.toggle_state)
        options.save()
        self.overlay.program.redraw(True)

    def refresh_buttons(self):
        options = self.overlay.program.options
        self.buttons = [
            OverlayButton(
                [self.TEXT_X, 140, 8, 8],
                tab=self.TAB_ID,
                is_visible=lambda: self.windower.current_tab == self.TAB_ID,
                button_type=ButtonTypes.CHECKBOX,
                get_text=lambda: resources.text("LogOverlay", "OptionPreEvolutions"),
                toggle_state=bool(options["Show Pre Evolutions"]),
                on_click=self._toggle_pre_evolutions,
            )
        ]

    def info_lines(self):
        """(label, value) rows describing the loaded log."""
        program = self.overlay.program
        settings = self.log_data.settings or {}
        log_path = program.log.loaded_log_path
        rows = [
            ("LabelLogFile", os.path.basename(log_path.replace("\\", "/")) if log_path else "-"),
            ("LabelVersion", str(settings.get("version", ""))),
            ("LabelGame", settings.get("game") or program.session.get_game_name()),
        ]
        return [(resources.text("LogOverlay", key), value) for key, value in rows]

    def draw_tab(self, surf):
        shadowcolor = theme.calc_shadow_color(theme.color("Main background"))
        text_color = theme.color("Default text")
        label_color = theme.color(theme.HEADER_HIGHLIGHT_KEY)

        y = self.TEXT_Y
        for label, value in self.info_lines():
            drawing.draw_text(surf, self.TEXT_X, y, f"{label}:", label_color, shadowcolor)
            drawing.draw_text(surf, self.TEXT_X + 60, y, value, text_color, shadowcolor)
            y += self.LINE_HEIGHT

        settings_string = (self.log_data.settings or {}).get("settingsString", "")
        if settings_string:
            label = resources.text("LogOverlay", "LabelSettings")
            drawing.draw_text(surf, self.TEXT_X, y, f"{label}:", label_color, shadowcolor)
            y += self.LINE_HEIGHT
            for line in drawing.get_word_wrap_lines(settings_string, self.WRAP_CHARS)[:6]:
                drawing.draw_text(surf, self.TEXT_X, y, line, text_color, shadowcolor)
                y += self.LINE_HEIGHT

        super().draw_tab(surf)

