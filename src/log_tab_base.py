#!/usr/bin/env python3

"""
log_tab_base.py — Tab identifiers and the base class shared by every log viewer tab.

A tab advertises what it supports through capability flags; the overlay and
the Windower check these flags instead of probing for methods:

  CAN_REALIGN      realign_grid(grid_filter, sort_key, starting_page) re-filters and re-pages its grid
  CAN_REFRESH      refresh_buttons() rebuilds a non-paged screen
  CAN_CHECK_INPUT  check_input(x, y) handles clicks inside the tab area
  CAN_DRAW         draw_tab(surf) draws the tab area
  CAN_REBUILD      rebuild() re-applies the current view after the log data was rebuilt
  IS_DETAIL        a zoomed-in view of one record, reachable from a list tab; entering one
                   runs enter() and the header shows a back arrow instead of a close icon
"""

import math
from enum import Enum

import drawing
import resources
import theme
from buttons import OverlayButton, check_buttons_clicked
from constants import ButtonTypes


class TabId(Enum):
    POKEMON = "Pokemon"
    TRAINERS = "Trainers"
    ROUTES = "Routes"
    TMS = "TMs"
    MISC = "Misc"
    POKEMON_DETAILS = "PokemonDetails"
    TRAINER_DETAILS = "TrainerDetails"
    ROUTE_DETAILS = "RouteDetails"


class GridButton(OverlayButton):
    """A button in a tab's paged grid; shown only on its tab and page."""

    def __init__(self, owner, box, **kwargs):
        super().__init__(box, tab=owner.TAB_ID, **kwargs)
        self.owner = owner

    def is_visible(self):
        windower = self.owner.windower
        return windower.current_tab == self.tab and windower.current_page == self.page_visible


class NavFilterButton(OverlayButton):
    """
    A text button above a grid that re-filters it; underlined while its group is
    the active filter.
    """

    def __init__(self, owner, nav_filter, box):
        super().__init__(box, button_type=ButtonTypes.NO_BORDER, tab=owner.TAB_ID)
        self.owner = owner
        self.nav_filter = nav_filter

    def get_text(self):
        return self.nav_filter.get_text()

    def is_selected(self):
        return self.owner.windower.filter_grid == self.nav_filter.group

    def is_visible(self):
        return self.owner.windower.current_tab == self.tab

    def update_self(self):
        self.text_color = theme.HEADER_HIGHLIGHT_KEY if self.is_selected() else "Default text"

    def on_click(self):
        self.owner.realign_grid(self.nav_filter.group, self.nav_filter.sort_key)
        self.owner.overlay.program.redraw(True)

    def draw(self, surf, shadowcolor):
        if self.is_selected():
            drawing.draw_underline(surf, self, theme.color(theme.HEADER_HIGHLIGHT_KEY))


class LogTab:
    TAB_ID = None
    TITLE_KEY = ""
    IS_DETAIL = False
    CAN_REALIGN = False
    CAN_REFRESH = False
    CAN_CHECK_INPUT = True
    CAN_DRAW = True
    CAN_REBUILD = False

    # Grid geometry, in screen pixels
    GRID_X = 4
    GRID_Y = 14
    GRID_COLUMNS = 1
    GRID_ROWS = 1
    CELL_WIDTH = 40
    CELL_HEIGHT = 40

    # Named filters shown above the grid
    NAV_FILTERS = []

    def __init__(self, overlay):
        self.overlay = overlay
        self.paged_buttons = []
        self.buttons = []

    @property
    def windower(self):
        return self.overlay.windower

    @property
    def log_data(self):
        return self.overlay.program.log.data

    @property
    def per_page(self):
        return self.GRID_COLUMNS * self.GRID_ROWS

    def get_tab_icons(self):
        return []

    def _filter_for(self, group):
        for nav_filter in self.NAV_FILTERS:
            if nav_filter.group == group:
                return nav_filter
        return None

    def _layout(self, ordered_buttons):
        """
        Position buttons in reading order and assign each its page. Buttons that
        are not in ordered_buttons are hidden (page -1). Returns the page count.
        """
        for button in self.paged_buttons:
            button.page_visible = -1

        per_page = max(1, self.per_page)
        for index, button in enumerate(ordered_buttons):
            slot = index % per_page
            button.page_visible = index // per_page + 1
            button.box[0] = self.GRID_X + (slot % self.GRID_COLUMNS) * self.CELL_WIDTH
            button.box[1] = self.GRID_Y + (slot // self.GRID_COLUMNS) * self.CELL_HEIGHT

        return max(1, math.ceil(len(ordered_buttons) / per_page))

    def _apply_pages(self, total_pages, starting_page=None):
        windower = self.windower
        windower.total_pages = total_pages
        page = starting_page if starting_page is not None else 1
        windower.current_page = min(max(page, 1), total_pages)

    def build_paged_buttons(self, *args):
        return None

    def realign_grid(self, grid_filter=None, sort_key=None, starting_page=None):
        return None

    def refresh_buttons(self):
        return None

    def rebuild(self):
        return None

    def enter(self, page_num=None, filter_grid=None):
        """Runs when the Windower switches to this tab, after the new state is applied."""
        return None

    def all_buttons(self):
        return self.buttons + self.paged_buttons

    def check_input(self, xmouse, ymouse):
        return check_buttons_clicked(xmouse, ymouse, self.all_buttons())

    def draw_tab(self, surf):
        shadowcolor = theme.calc_shadow_color(theme.color("Main background"))
        for button in self.all_buttons():
            button.update_self()
            drawing.draw_button(surf, button, shadowcolor)


class NavFilter:
    """A named grid filter: the group key it selects and how it sorts the grid."""

    def __init__(self, key, resource_key, group, index, sort_key):
        self.key = key
        self.resource_key = resource_key
        self.group = group
        self.index = index
        self.sort_key = sort_key

    def get_text(self):
        return resources.text("LogOverlay", self.resource_key)
