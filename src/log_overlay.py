#!/usr/bin/env python3

"""
log_overlay.py — The randomizer log viewer drawn over the game screen.

The overlay has a header bar (one button per list tab, the pager and a
close/back icon) and a tab area below it. The Windower decides which tab
and page are shown; the overlay builds the tabs from the parsed log, routes
clicks and draws.
"""

import os

import drawing
import file_manager
import resources
import theme
from buttons import OverlayButton, check_buttons_clicked
from config import LOG_FILE_FILTER, SCREEN_HEIGHT, SCREEN_WIDTH, Extensions, Folders, PostFixes
from constants import ButtonTypes, PixelImages, Screens
from log_search import LogSearchScreen
from log_tab_base import TabId
from log_tab_details import LogTabPokemonDetails, LogTabRouteDetails, LogTabTrainerDetails
from log_tabs import LogTabMisc, LogTabPokemon, LogTabRoutes, LogTabTMs, LogTabTrainers
from navigator import Windower

# Player head icons per game, indexed by seed parity
TRAINER_HEAD_ICONS = {
    1: {0: "girl-rs", 1: "boy-rs"},
    2: {0: "girl-e", 1: "boy-e"},
    3: {0: "girl-frlg", 1: "boy-frlg"},
}


class HeaderTabButton(OverlayButton):
    """Header button that switches to one of the list tabs."""

    SPACER = 3

    def __init__(self, overlay, tab, x, y, height):
        self.overlay = overlay
        self.icons = tab.get_tab_icons()
        width = self.SPACER
        for icon in self.icons:
            width += icon.get("w", 0) + self.SPACER
        super().__init__(
            [x, y, width, height],
            button_type=ButtonTypes.NO_BORDER,
            text_color=LogOverlay.COLORS["headerText"],
            box_colors=[LogOverlay.COLORS["headerBorder"], LogOverlay.COLORS["headerFill"]],
            tab=tab.TAB_ID,
        )
        self.is_selected = False

    def update_self(self):
        self.is_selected = self.overlay.windower.current_tab == self.tab
        self.text_color = theme.HEADER_HIGHLIGHT_KEY if self.is_selected else LogOverlay.COLORS["headerText"]

    def on_click(self):
        if self.is_selected:
            return
        overlay = self.overlay
        overlay.windower.history.clear()
        overlay.windower.change_tab(self.tab)
        overlay.search.reset_search_sort_filter()
        overlay.refresh_active_tab_grid()
        overlay.program.redraw(True)

    def draw(self, surf, shadowcolor):
        x = self.box[0] + self.SPACER
        for icon in self.icons:
            y = self.box[1] + self.box[3] - icon.get("h", 0)
            if not drawing.draw_image(surf, icon["image"], x, y, icon.get("w"), icon.get("h")):
                # No icon file; fall back to the first letter of the tab name
                tab = self.overlay.get_tab(self.tab)
                letter = resources.text("LogOverlay", tab.TITLE_KEY)[:1]
                drawing.draw_text(surf, x + 2, self.box[1], letter, theme.color(self.text_color), shadowcolor)
            x += icon.get("w", 0) + self.SPACER
        if self.is_selected:
            drawing.draw_underline(surf, self, theme.color(theme.HEADER_HIGHLIGHT_KEY))


class CloseBackButton(OverlayButton):
    """
    Top-right icon. On a detail tab it is a back arrow that returns through the
    tab history; otherwise it closes the overlay.
    """

    def __init__(self, overlay, box):
        super().__init__(
            box,
            button_type=ButtonTypes.PIXELIMAGE,
            image=PixelImages.CLOSE,
            text_color=LogOverlay.COLORS["headerText"],
        )
        self.overlay = overlay

    def is_back_mode(self):
        return self.overlay.windower.is_detail_tab(self.overlay.windower.current_tab)

    def update_self(self):
        if self.is_back_mode():
            self.text_color = theme.HEADER_HIGHLIGHT_KEY
            self.image = PixelImages.LEFT_ARROW
            self.box[1] = 1
        else:
            self.text_color = LogOverlay.COLORS["headerText"]
            self.image = PixelImages.CLOSE
            self.box[1] = 2

    def on_click(self):
        if self.image == PixelImages.CLOSE:
            self.overlay.close()
        else:
            self.overlay.windower.go_back()
            self.overlay.program.redraw(True)


class LogOverlay:
    COLORS = {
        "headerText": "Header text",
        "headerBorder": "Upper box background",
        "headerFill": "Main background",
    }
    MARGIN = 2
    TAB_HEIGHT = 12
    PAGER_OFFSET_X = 155

    # Screen space occupied by the visible tab
    TAB_BOX = {
        "x": MARGIN,
        "y": TAB_HEIGHT,
        "width": SCREEN_WIDTH - MARGIN * 2,
        "height": SCREEN_HEIGHT - TAB_HEIGHT - MARGIN - 1,
    }

    ORDERED_TABS = [TabId.POKEMON, TabId.TRAINERS, TabId.ROUTES, TabId.TMS, TabId.MISC]

    def __init__(self, program):
        self.program = program
        self.is_displayed = False
        self.is_game_over = False

        self.windower = Windower(self)
        self.search = LogSearchScreen(self)
        self.tabs = {
            TabId.POKEMON: LogTabPokemon(self),
            TabId.TRAINERS: LogTabTrainers(self),
            TabId.ROUTES: LogTabRoutes(self),
            TabId.TMS: LogTabTMs(self),
            TabId.MISC: LogTabMisc(self),
            TabId.POKEMON_DETAILS: LogTabPokemonDetails(self),
            TabId.TRAINER_DETAILS: LogTabTrainerDetails(self),
            TabId.ROUTE_DETAILS: LogTabRouteDetails(self),
        }
        self.header_buttons = self._create_header_buttons()

    def get_tab(self, tab_id):
        if tab_id is None:
            return None
        return self.tabs.get(tab_id)

    @property
    def current_tab(self):
        return self.get_tab(self.windower.current_tab)

    @property
    def tab_history(self):
        return self.windower.history

    def _has_pages(self):
        return (self.windower.total_pages or 0) > 1

    def _create_header_buttons(self):
        pager_x = self.MARGIN + self.PAGER_OFFSET_X
        header_text = self.COLORS["headerText"]
        return {
            "CurrentPage": OverlayButton(
                [pager_x, 0, 50, 10],
                button_type=ButtonTypes.NO_BORDER,
                get_text=self.windower.get_page_text,
                text_color=header_text,
                is_visible=self._has_pages,
            ),
            "PrevPage": OverlayButton(
                [pager_x - 13, 1, 10, 10],
                button_type=ButtonTypes.PIXELIMAGE,
                image=PixelImages.LEFT_ARROW,
                text_color=header_text,
                shadowcolor=False,
                is_visible=self._has_pages,
                on_click=lambda _button: self.windower.prev_page(),
            ),
            "NextPage": OverlayButton(
                [pager_x + 50, 1, 10, 10],
                button_type=ButtonTypes.PIXELIMAGE,
                image=PixelImages.RIGHT_ARROW,
                text_color=header_text,
                shadowcolor=False,
                is_visible=self._has_pages,
                on_click=lambda _button: self.windower.next_page(),
            ),
            "XIcon": CloseBackButton(self, [self.MARGIN + 228, 2, 10, 10]),
        }

    def add_header_tab_buttons(self):
        """One header button per list tab, laid out left to right by icon width."""
        offset_x = self.MARGIN + 1
        for tab_id in self.ORDERED_TABS:
            button = HeaderTabButton(self, self.tabs[tab_id], offset_x, 1, self.TAB_HEIGHT - 1)
            self.header_buttons[tab_id] = button
            offset_x += button.box[2] + HeaderTabButton.SPACER

    def initialize(self):
        self.is_displayed = False
        self.is_game_over = False
        self.windower.reset()
        self.add_header_tab_buttons()

        if self.program.options["Open Book Play Mode"]:
            logpath = self.get_log_file_autodetected() or self.get_log_file_from_prompt()
            if logpath and self.program.log.parse_log(logpath):
                self.build_all_tabs()
                self.windower.current_tab = TabId.POKEMON
                self.search.reset_search_sort_filter()
                self.refresh_active_tab_grid()

    def refresh_buttons(self):
        for button in self.header_buttons.values():
            button.update_self()

    def build_all_tabs(self):
        """Build the paged buttons of every list tab from the parsed log."""
        self.tabs[TabId.POKEMON].build_paged_buttons()
        gym_tms = self.tabs[TabId.TRAINERS].build_paged_buttons()
        self.tabs[TabId.ROUTES].build_paged_buttons()
        self.tabs[TabId.TMS].build_paged_buttons(gym_tms)

    def refresh_active_tab_grid(self):
        tab = self.current_tab
        if tab is None:
            return
        if tab.CAN_REALIGN:
            if self.search.is_active() and self.windower.current_tab in self.search.allowed_tab_views:
                tab.realign_grid(self.windower.filter_grid, self.search.current_sort_order.sort_key)
            else:
                tab.realign_grid()
        elif tab.CAN_REFRESH:
            self.windower.filter_grid = ""
            self.windower.total_pages = 1
            self.windower.current_page = 1
            tab.refresh_buttons()

    def rebuild_screen(self, *_args):
        """Rebuild everything shown, e.g. after the display language changed."""
        if not self.is_displayed:
            return
        self.windower.history.clear()
        self.build_all_tabs()
        self.add_header_tab_buttons()

        tab = self.current_tab
        if tab is not None:
            if tab.CAN_REBUILD:
                tab.rebuild()
            elif tab.CAN_REFRESH:
                tab.refresh_buttons()
        self.refresh_buttons()

    def close(self):
        """Hide the overlay and return to the screen that fits the game state."""
        self.windower.history.clear()
        self.is_displayed = False
        self.search.clear_search()
        if self.is_game_over:
            self.program.change_screen_view(Screens.GAME_OVER)
        elif not self.program.is_valid_map_location():
            self.program.change_screen_view(Screens.STARTUP)
        else:
            self.program.change_screen_view(Screens.TRACKER)

    def get_player_icon_head(self):
        session = self.program.session
        seed_choice = (session.current_seed or 1) % 2
        heads = TRAINER_HEAD_ICONS.get(session.game, TRAINER_HEAD_ICONS[3])
        return file_manager.build_image_path(Folders.PLAYER, heads[seed_choice], Extensions.TRAINER)

    # ===== Input =====
    def check_input(self, xmouse, ymouse):
        if not self.is_displayed:
            return None
        clicked = check_buttons_clicked(xmouse, ymouse, self.header_buttons)
        tab = self.current_tab
        if clicked is None and tab is not None and tab.CAN_CHECK_INPUT:
            clicked = tab.check_input(xmouse, ymouse)
        return clicked

    # ===== Drawing =====
    def draw_screen(self, surf):
        if not self.is_displayed:
            return

        drawing.draw_background_and_margins(surf, 0, 0, SCREEN_WIDTH, SCREEN_HEIGHT)

        header_shadow = theme.calc_shadow_color(theme.color("Main background"))
        border_color = theme.color("Upper box border")

        # Tab dividers
        drawing.draw_line(surf, self.MARGIN, 1, self.MARGIN, self.TAB_BOX["y"] - 1, border_color)
        divider_height = self.TAB_HEIGHT - 1
        for tab_id in self.ORDERED_TABS:
            button = self.header_buttons.get(tab_id)
            if button is None:
                continue
            right_edge = button.box[0] + button.box[2] + 2
            drawing.draw_line(
                surf, right_edge, self.TAB_HEIGHT - divider_height, right_edge, self.TAB_BOX["y"], border_color,
            )

        for button in self.header_buttons.values():
            drawing.draw_button(surf, button, header_shadow)

        tab = self.current_tab
        if tab is not None and tab.CAN_DRAW:
            tab.draw_tab(surf)

    # ===== Log files =====
    def view_log_file(self, postfix=PostFixes.AUTORANDOMIZED):
        logpath = self.get_log_file_autodetected(postfix)

        log = self.program.log
        has_parsed_this_log = log.data.is_parsed() and postfix in (log.loaded_log_path or "")

        # Only prompt when nothing was detected and nothing matching is parsed yet
        if logpath is None and not has_parsed_this_log:
            logpath = self.get_log_file_from_prompt()

        return self.parse_and_display(logpath)

    def get_log_file_autodetected(self, postfix=None):
        """Path of the log for the ROM being played, or None if it can't be found."""
        postfix = postfix or PostFixes.AUTORANDOMIZED
        options = self.program.options
        session = self.program.session

        romname, rompath = None, None
        roms_folder = options.files.get("ROMs Folder")
        if options["Use premade ROMs"] and roms_folder:
            if not roms_folder.endswith(file_manager.slash):
                roms_folder += file_manager.slash
                options.files["ROMs Folder"] = roms_folder

            romname = session.get_rom_name() or ""
            if postfix == PostFixes.PREVIOUSATTEMPT:
                romname = file_manager.previous_rom_name(romname)

            rompath = roms_folder + romname + Extensions.GBA_ROM
            if not file_manager.file_exists(rompath):
                romname = romname.replace(" ", "_")
                rompath = roms_folder + romname + Extensions.GBA_ROM
        elif options["Generate ROM each time"]:
            # The auto-randomized ROM is named after the settings file it was generated from
            quickload_files = file_manager.get_quickload_files()
            settings_list = quickload_files["settingsList"]
            settings_name = file_manager.extract_file_name_from_path(settings_list[0] if settings_list else "")
            romname = f"{settings_name} {postfix}{Extensions.GBA_ROM}"
            rompath = file_manager.prepend_dir(romname)

        # The ROM the host is playing must be the one the log belongs to
        if self.program.forms.is_available():
            loaded = file_manager.plain_formatter((session.get_rom_name() or "N/A") + Extensions.GBA_ROM)
            if loaded != file_manager.plain_formatter(romname or ""):
                print(f"[LogOverlay] Loaded ROM does not match autodetected ROM '{romname}'")
                return None

        return file_manager.get_path_if_exists((rompath or "") + Extensions.RANDOMIZER_LOGFILE)

    def get_log_file_from_prompt(self):
        """Ask the player for a log file. Returns its path, or None if cancelled."""
        suggested = (self.program.session.get_rom_name() or "") + Extensions.RANDOMIZER_LOGFILE
        working_dir = file_manager.working_dir.rstrip(os.sep)
        filepath, success = self.program.forms.open_file_prompt(suggested, working_dir, LOG_FILE_FILTER)
        return filepath if success else None

    def parse_and_display(self, logpath):
        """Parse (or reuse) a log and show it, opening on the lead Pokémon when there is one."""
        log = self.program.log
        if logpath is not None and log.loaded_log_path != logpath:
            log.reset()
            log.loaded_log_path = logpath

        if log.data.is_parsed():
            self.is_displayed = True
        else:
            self.is_displayed = log.parse_log(logpath)

        if not self.is_displayed:
            return False

        self.windower.history.clear()
        self.build_all_tabs()
        self.windower.change_tab(TabId.POKEMON)
        self.search.reset_search_sort_filter()
        self.refresh_active_tab_grid()

        lead = self.program.tracker.get_pokemon(1, True) or {}
        lead_id = lead.get("pokemonID")
        if lead_id in log.data.pokemon:
            self.windower.change_tab(TabId.POKEMON_DETAILS, 1, 1, lead_id)
            self.program.change_info_view(lead_id)
        else:
            self.program.redraw(True)
        return True
