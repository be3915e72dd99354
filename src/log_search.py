#!/usr/bin/env python3

"""
log_search.py — Searching the Pokémon grid of the log viewer.

The search lives beside the overlay while the Pokémon tab is shown. Its text
is entered through a popup form; applying it realigns the Pokémon grid with
the search text as the grid filter.
"""

import resources
from log_tab_base import TabId


class SearchFilters:
    POKEMON_NAME = "Pokemon Name"
    ABILITY = "Ability"
    LEVELUP_MOVE = "Levelup Move"

    RESOURCE_KEYS = {
        POKEMON_NAME: "FilterPokemonName",
        ABILITY: "FilterAbility",
        LEVELUP_MOVE: "FilterLevelupMove",
    }

    ORDER = [POKEMON_NAME, ABILITY, LEVELUP_MOVE]


class SortOrder:
    def __init__(self, key, index, sort_key):
        self.key = key
        self.index = index
        self.sort_key = sort_key


SORT_ORDERS = {
    "PokedexNum": SortOrder("PokedexNum", 1, lambda b: b.pokemon_id),
    "Alphabetical": SortOrder("Alphabetical", 2, lambda b: (b.pokemon_name.lower(), b.pokemon_id)),
}
DEFAULT_SORT_ORDER = "PokedexNum"


def matches_search(term, value):
    """Case-insensitive prefix or substring match of term against value."""
    if not term or value is None:
        return False
    term = term.lower()
    value = str(value).lower()
    return value[: len(term)] == term or term in value


class LogSearchScreen:
    MAX_SEARCH_LENGTH = 20

    def __init__(self, overlay):
        self.overlay = overlay
        self.search_text = ""
        self.current_filter = SearchFilters.POKEMON_NAME
        self.current_sort_order = SORT_ORDERS[DEFAULT_SORT_ORDER]
        self.is_displayed = False
        self.allowed_tab_views = {TabId.POKEMON}

    @property
    def windower(self):
        return self.overlay.windower

    def is_active(self):
        return self.search_text != ""

    def try_display_or_hide(self):
        """
        Show the search beside the overlay when the current tab supports it,
        reloading the results for any active search. Returns True if shown.
        """
        if self.overlay.is_displayed and self.windower.current_tab in self.allowed_tab_views:
            self.is_displayed = True
            if self.is_active():
                self._realign_results()
            return True
        self.is_displayed = False
        return False

    def _realign_results(self):
        pokemon_tab = self.overlay.get_tab(TabId.POKEMON)
        grid_filter = self.search_text if self.is_active() else None
        pokemon_tab.realign_grid(grid_filter, self.current_sort_order.sort_key)

    def clear_search(self):
        self.search_text = ""
        self.is_displayed = False

    def reset_search_sort_filter(self):
        self.current_filter = SearchFilters.POKEMON_NAME
        self.current_sort_order = SORT_ORDERS[DEFAULT_SORT_ORDER]

    def update_search(self, text=None, search_filter=None):
        """Apply new search text and/or filter to the Pokémon grid."""
        if text is not None:
            self.search_text = text.strip()[: self.MAX_SEARCH_LENGTH]
        if search_filter in SearchFilters.RESOURCE_KEYS:
            self.current_filter = search_filter

        if not self.overlay.is_displayed:
            return
        if self.windower.current_tab != TabId.POKEMON:
            self.overlay.windower.change_tab(TabId.POKEMON)
        self._realign_results()
        self.overlay.program.redraw(True)

    def get_filter_text(self, search_filter):
        return resources.text("LogSearchScreen", SearchFilters.RESOURCE_KEYS[search_filter])

    def open_search_prompt(self):
        """Popup with a textbox for the search text and a dropdown to pick the field searched."""
        forms = self.overlay.program.forms
        form = forms.create_form(resources.text("LogSearchScreen", "Title"), 320, 150)
        if form.control_id == 0:
            return form

        filter_names = {self.get_filter_text(f): f for f in SearchFilters.ORDER}

        form.create_label(resources.text("LogSearchScreen", "Prompt"), 18, 10)
        textbox = form.create_textbox(self.search_text, 20, 30, 280, 20)
        form.create_label(resources.text("LogSearchScreen", "FilterLabel"), 18, 58)
        dropdown = form.create_dropdown(
            list(filter_names), 100, 56, 200, 20,
            start_item=self.get_filter_text(self.current_filter), sort_alphabetically=False,
        )

        def on_search():
            chosen = filter_names.get(forms.get_text(dropdown), self.current_filter)
            self.update_search(forms.get_text(textbox), chosen)
            form.destroy()

        form.create_button(resources.text("LogSearchScreen", "ButtonSearch"), 70, 90, on_search)
        form.create_button(resources.text("AllScreens", "Cancel"), 170, 90, form.destroy)
        return form
