#!/usr/bin/env python3

"""
navigator.py — Tab and page state for the log viewer overlay.

The Windower is the single owner of which tab is shown, which page of it,
the id of the record a detail tab is zoomed into, and the active grid
filter. Entering a detail tab from a list tab remembers where the player
came from, so the header's back arrow can return there.
"""

from dataclasses import dataclass
from typing import Optional

import resources
from log_tab_base import TabId


@dataclass
class HistoryEntry:
    tab: Optional[TabId]
    page: Optional[int]
    total_pages: Optional[int]
    info_id: int
    filter_grid: str


class Windower:
    DEFAULT_PAGE = 1
    DEFAULT_TOTAL_PAGES = 1
    DEFAULT_INFO_ID = -1
    DEFAULT_FILTER = "#"
    DEFAULT_TAB = TabId.POKEMON

    def __init__(self, overlay):
        self.overlay = overlay
        self.history = []
        self.reset()

    def reset(self):
        """Back to the closed state: no tab, no pages, empty history."""
        self.current_tab = None
        self.current_page = None
        self.total_pages = None
        self.info_id = self.DEFAULT_INFO_ID
        self.filter_grid = self.DEFAULT_FILTER
        self.history.clear()

    def snapshot(self):
        return HistoryEntry(
            tab=self.current_tab,
            page=self.current_page,
            total_pages=self.total_pages,
            info_id=self.info_id,
            filter_grid=self.filter_grid,
        )

    def is_detail_tab(self, tab_id):
        tab = self.overlay.get_tab(tab_id)
        return tab is not None and tab.IS_DETAIL

    def get_page_text(self):
        label = resources.text("AllScreens", "Page")
        if self.current_page is None or self.total_pages is None:
            return label
        return f"{label} {self.current_page}/{self.total_pages}"

    def prev_page(self):
        if self.current_page is None or self.total_pages is None or self.total_pages <= 1:
            return
        self.current_page = ((self.current_page - 2 + self.total_pages) % self.total_pages) + 1
        self.overlay.program.redraw(True)

    def next_page(self):
        if self.current_page is None or self.total_pages is None or self.total_pages <= 1:
            return
        self.current_page = (self.current_page % self.total_pages) + 1
        self.overlay.program.redraw(True)

    def _apply(self, tab_id, page_num, total_pages, info_id, filter_grid):
        self.current_tab = tab_id
        if page_num is not None:
            self.current_page = page_num
        elif self.current_page is None:
            self.current_page = self.DEFAULT_PAGE
        if total_pages is not None:
            self.total_pages = total_pages
        elif self.total_pages is None:
            self.total_pages = self.DEFAULT_TOTAL_PAGES
        if info_id is not None:
            self.info_id = info_id
        if filter_grid is not None:
            self.filter_grid = filter_grid

    # Same assignment again; the search view may have re-derived pages from stale values
    _resync = _apply

    def _clamp_page(self):
        if self.total_pages is None or self.total_pages < 1:
            return
        if self.current_page is None or self.current_page < 1:
            self.current_page = 1
        elif self.current_page > self.total_pages:
            self.current_page = self.total_pages

    def change_tab(self, tab_id, page_num=None, total_pages=None, info_id=None, filter_grid=None):
        """
        Show a tab. Values that are not supplied keep their current value,
        falling back to page 1 of 1, info id -1 and filter "#".
        """
        tab = self.overlay.get_tab(tab_id)
        if tab is None:
            return

        self.overlay.is_displayed = True

        previous = self.snapshot()
        self._apply(tab_id, page_num, total_pages, info_id, filter_grid)

        if tab.IS_DETAIL:
            tab.enter(page_num, filter_grid)
            self._clamp_page()

            # Only remember list tabs, so detail-to-detail hops don't pile up
            if previous.tab is not None and not self.is_detail_tab(previous.tab):
                self.history.append(previous)

        self.overlay.refresh_buttons()

        if self.overlay.search.try_display_or_hide():
            self._resync(tab_id, page_num, total_pages, info_id, filter_grid)
            self._clamp_page()

    def go_back(self):
        """Return to the tab the history remembers, or the Pokémon list when there is none."""
        if self.history:
            entry = self.history.pop()
            self.change_tab(entry.tab, entry.page, entry.total_pages, entry.info_id, entry.filter_grid)
            return

        default_tab = self.overlay.get_tab(self.DEFAULT_TAB)
        if default_tab is not None and default_tab.CAN_REALIGN:
            default_tab.realign_grid()
        self.change_tab(self.DEFAULT_TAB)
