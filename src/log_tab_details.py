#!/usr/bin/env python3

"""
log_tab_details.py — Detail (zoom) tabs: one Pokémon, one trainer, one route.

A detail tab shows the record whose id is the Windower's info_id. Its
buttons are rebuilt every time the tab is entered, and clicking a related
record (an evolution, a party member, an encounter) moves to another
detail tab.
"""

import math

import drawing
import resources
import theme
from constants import ButtonTypes
from log_tab_base import GridButton, LogTab, NavFilter, TabId
from log_tabs import build_nav_buttons, fit_text, pokemon_icon_path, trainer_image_path


def _shadow():
    return theme.calc_shadow_color(theme.color("Main background"))


class DetailButton(GridButton):
    """A button on a detail tab; visible on every page of it."""

    def is_visible(self):
        return self.owner.windower.current_tab == self.tab


class PokemonIconButton(DetailButton):
    def __init__(self, owner, box, pokemon_id):
        super().__init__(owner, box, button_type=ButtonTypes.POKEMON_ICON)
        self.pokemon_id = pokemon_id

    def get_icon_path(self):
        return pokemon_icon_path(self.owner.overlay.program.options, self.pokemon_id)


class PokemonLinkButton(PokemonIconButton):
    """Pokémon icon that zooms into that Pokémon when clicked."""

    def on_click(self):
        overlay = self.owner.overlay
        if overlay.program.log.data.pokemon.get(self.pokemon_id) is None:
            return
        overlay.windower.change_tab(TabId.POKEMON_DETAILS, 1, 1, self.pokemon_id)
        overlay.program.change_info_view(self.pokemon_id)
        overlay.program.redraw(True)


# ===== Pokémon details =====
class LogTabPokemonDetails(LogTab):
    TAB_ID = TabId.POKEMON_DETAILS
    IS_DETAIL = True
    CAN_REBUILD = True

    MOVES_PER_PAGE = 8
    MOVES_X = 124
    MOVES_Y = 26
    LINE_HEIGHT = 11
    EVO_Y = 116

    def __init__(self, overlay):
        super().__init__(overlay)
        self.pokemon = None

    def enter(self, page_num=None, filter_grid=None):
        self.build_zoom_buttons(self.windower.info_id)

    def rebuild(self):
        self.build_zoom_buttons(self.windower.info_id)

    def build_zoom_buttons(self, pokemon_id):
        """Rebuild the buttons for one Pokémon; its level-up moves set the page count."""
        self.pokemon = self.log_data.pokemon.get(pokemon_id)
        self.buttons = []
        self.paged_buttons = []
        if self.pokemon is None:
            self.windower.total_pages = 1
            return

        self.buttons.append(PokemonIconButton(self, [6, 14, 32, 32], pokemon_id))

        related = list(self.pokemon.evolutions)
        if self.overlay.program.options["Show Pre Evolutions"]:
            related = list(self.pokemon.pre_evolutions) + related
        for index, evo_id in enumerate(related[:6]):
            self.buttons.append(PokemonLinkButton(self, [6 + index * 34, self.EVO_Y + 10, 32, 32], evo_id))

        self.windower.total_pages = max(1, math.ceil(len(self.pokemon.moveset) / self.MOVES_PER_PAGE))

    def visible_moves(self):
        if self.pokemon is None:
            return []
        page = self.windower.current_page or 1
        start = (page - 1) * self.MOVES_PER_PAGE
        return self.pokemon.moveset[start:start + self.MOVES_PER_PAGE]

    def draw_tab(self, surf):
        shadowcolor = _shadow()
        text_color = theme.color("Default text")
        label_color = theme.color(theme.HEADER_HIGHLIGHT_KEY)
        pokemon = self.pokemon
        if pokemon is None:
            drawing.draw_text(surf, 6, 15, resources.text("LogOverlay", "LabelNoData"), text_color, shadowcolor)
            return

        drawing.draw_text(surf, 42, 15, pokemon.name, label_color, shadowcolor)
        drawing.draw_text(surf, 42, 26, " / ".join(pokemon.types), text_color, shadowcolor)
        drawing.draw_text(surf, 42, 37, f"BST: {pokemon.bst}", text_color, shadowcolor)

        y = 52
        drawing.draw_text(surf, 6, y, resources.text("LogOverlay", "LabelAbilities"), label_color, shadowcolor)
        for ability in pokemon.abilities:
            y += self.LINE_HEIGHT
            drawing.draw_text(surf, 10, y, ability, text_color, shadowcolor)

        drawing.draw_text(
            surf, self.MOVES_X, 15, resources.text("LogOverlay", "LabelLevelupMoves"), label_color, shadowcolor,
        )
        level_label = resources.text("LogOverlay", "LabelLevel")
        for index, move in enumerate(self.visible_moves()):
            y = self.MOVES_Y + index * self.LINE_HEIGHT
            drawing.draw_text(surf, self.MOVES_X, y, f"{level_label}{move.level}", text_color, shadowcolor)
            drawing.draw_text(surf, self.MOVES_X + 28, y, fit_text(move.name, 80), text_color, shadowcolor)

        key = "LabelEvolutions" if len(self.buttons) > 1 else "LabelNoEvolutions"
        drawing.draw_text(surf, 6, self.EVO_Y, resources.text("LogOverlay", key), label_color, shadowcolor)

        super().draw_tab(surf)


# ===== Trainer details =====
class PartyMemberButton(PokemonLinkButton):
    def __init__(self, owner, box, member):
        super().__init__(owner, box, member.pokemon_id)
        self.member = member

    def draw(self, surf, shadowcolor):
        pokemon = self.owner.log_data.pokemon.get(self.pokemon_id)
        name = pokemon.name if pokemon else f"#{self.pokemon_id}"
        x = self.box[0] + self.box[2] + 2
        text_color = theme.color("Default text")
        drawing.draw_text(surf, x, self.box[1] + 4, fit_text(name, 76), text_color, shadowcolor)
        level_label = resources.text("LogOverlay", "LabelLevel")
        drawing.draw_text(surf, x, self.box[1] + 15, f"{level_label}{self.member.level}", text_color, shadowcolor)


class LogTabTrainerDetails(LogTab):
    TAB_ID = TabId.TRAINER_DETAILS
    IS_DETAIL = True
    CAN_REBUILD = True

    GRID_X = 6
    GRID_Y = 28
    GRID_COLUMNS = 2
    GRID_ROWS = 3
    CELL_WIDTH = 116
    CELL_HEIGHT = 40

    def __init__(self, overlay):
        super().__init__(overlay)
        self.trainer = None

    def enter(self, page_num=None, filter_grid=None):
        self.build_zoom_buttons(self.windower.info_id)

    def rebuild(self):
        self.build_zoom_buttons(self.windower.info_id)

    def build_zoom_buttons(self, trainer_id):
        self.trainer = self.log_data.trainers.get(trainer_id)
        self.buttons = []
        self.paged_buttons = []
        if self.trainer is not None:
            for index, member in enumerate(self.trainer.party[: self.per_page]):
                col = index % self.GRID_COLUMNS
                row = index // self.GRID_COLUMNS
                box = [self.GRID_X + col * self.CELL_WIDTH, self.GRID_Y + row * self.CELL_HEIGHT, 32, 32]
                self.buttons.append(PartyMemberButton(self, box, member))
        self.windower.total_pages = 1

    def draw_tab(self, surf):
        shadowcolor = _shadow()
        trainer = self.trainer
        if trainer is None:
            text = resources.text("LogOverlay", "LabelNoData")
            drawing.draw_text(surf, 6, 15, text, theme.color("Default text"), shadowcolor)
            return

        drawing.draw_text(surf, 6, 15, trainer.name, theme.color(theme.HEADER_HIGHLIGHT_KEY), shadowcolor)
        info = trainer.group
        if trainer.maxlevel is not None:
            info = f"{info}  {resources.text('LogOverlay', 'LabelLevel')}{trainer.maxlevel}"
        drawing.draw_text(surf, 120, 15, info, theme.color("Default text"), shadowcolor)

        super().draw_tab(surf)


# ===== Route details =====
TRAINERS_AREA = "Trainers"


class AreaFilter(NavFilter):
    """Filter for one encounter area of a route; its text is the area name."""

    def __init__(self, area, index, sort_key):
        super().__init__(area, None, area, index, sort_key)

    def get_text(self):
        return self.key


def sort_encounters(button):
    return (-button.encounter.rate, button.pokemon_id)


def sort_route_trainers(button):
    return button.trainer.id


class EncounterButton(PokemonLinkButton):
    def __init__(self, owner, area, encounter):
        super().__init__(owner, [0, 0, 32, 32], encounter.pokemon_id)
        self.area = area
        self.encounter = encounter

    def is_visible(self):
        return GridButton.is_visible(self)

    def include_in_grid(self, filter_key):
        return self.area == filter_key

    def draw(self, surf, shadowcolor):
        enc = self.encounter
        levels = f"{enc.level_min}" if enc.level_min == enc.level_max else f"{enc.level_min}-{enc.level_max}"
        label = f"{resources.text('LogOverlay', 'LabelLevel')}{levels} {enc.rate:g}%"
        drawing.draw_text(surf, self.box[0], self.box[1] + 31, label, theme.color("Default text"), shadowcolor)


class RouteTrainerButton(GridButton):
    def __init__(self, owner, trainer):
        super().__init__(owner, [0, 0, 32, 32], button_type=ButtonTypes.IMAGE)
        self.area = TRAINERS_AREA
        self.trainer = trainer
        self.image = trainer_image_path(trainer)

    def include_in_grid(self, filter_key):
        return self.area == filter_key

    def on_click(self):
        overlay = self.owner.overlay
        overlay.windower.change_tab(TabId.TRAINER_DETAILS, 1, 1, self.trainer.id)
        overlay.program.redraw(True)

    def draw(self, surf, shadowcolor):
        name = fit_text(self.trainer.name, self.owner.CELL_WIDTH - 2)
        drawing.draw_text(surf, self.box[0], self.box[1] + 31, name, theme.color("Default text"), shadowcolor)


class LogTabRouteDetails(LogTab):
    TAB_ID = TabId.ROUTE_DETAILS
    IS_DETAIL = True
    CAN_REALIGN = True
    CAN_REBUILD = True

    GRID_X = 6
    GRID_Y = 26
    GRID_COLUMNS = 4
    GRID_ROWS = 3
    CELL_WIDTH = 58
    CELL_HEIGHT = 42

    def __init__(self, overlay):
        super().__init__(overlay)
        self.route = None

    def enter(self, page_num=None, filter_grid=None):
        self.build_zoom_buttons(self.windower.info_id)
        self.realign_grid(filter_grid, None, page_num)

    def rebuild(self):
        self.build_zoom_buttons(self.windower.info_id)
        self.realign_grid(self.windower.filter_grid, None, self.windower.current_page)

    def build_zoom_buttons(self, route_id):
        """One filter per encounter area (plus trainers), one button per encounter."""
        self.route = self.log_data.routes.get(route_id)
        self.NAV_FILTERS = []
        self.buttons = []
        self.paged_buttons = []
        if self.route is None:
            return

        for area, encounters in self.route.encounter_areas.items():
            self.NAV_FILTERS.append(AreaFilter(area, len(self.NAV_FILTERS) + 1, sort_encounters))
            self.paged_buttons.extend(EncounterButton(self, area, enc) for enc in encounters)

        trainers = [self.log_data.trainers.get(t) for t in self.route.trainers]
        trainers = [t for t in trainers if t is not None and t.name != "Unknown"]
        if trainers:
            self.NAV_FILTERS.append(AreaFilter(TRAINERS_AREA, len(self.NAV_FILTERS) + 1, sort_route_trainers))
            self.paged_buttons.extend(RouteTrainerButton(self, t) for t in trainers)

        self.buttons = build_nav_buttons(self, self.NAV_FILTERS)

    def realign_grid(self, grid_filter=None, sort_key=None, starting_page=None):
        nav_filter = self._filter_for(grid_filter)
        if nav_filter is None and self.NAV_FILTERS:
            nav_filter = self.NAV_FILTERS[0]
        if nav_filter is None:
            self._apply_pages(self._layout([]), starting_page)
            return
        if sort_key is None:
            sort_key = nav_filter.sort_key

        self.windower.filter_grid = nav_filter.group
        included = [b for b in self.paged_buttons if b.include_in_grid(nav_filter.group)]
        included.sort(key=sort_key)
        self._apply_pages(self._layout(included), starting_page)

    def draw_tab(self, surf):
        shadowcolor = _shadow()
        if self.route is None:
            text = resources.text("LogOverlay", "LabelNoData")
            drawing.draw_text(surf, 6, 15, text, theme.color("Default text"), shadowcolor)
            return

        name = fit_text(self.route.name, 80)
        x = 236 - drawing.calc_word_pixel_length(name)
        drawing.draw_text(surf, x, 13, name, theme.color(theme.HEADER_HIGHLIGHT_KEY), shadowcolor)
        super().draw_tab(surf)
