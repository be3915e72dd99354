import json

import pytest

import resources
from conftest import SAMPLE_LOG, FakeHost, click_inside
from constants import PixelImages, Screens
from log_tab_base import TabId
from navigator import HistoryEntry


def _write_log(path) -> str:
    path.write_text(json.dumps(SAMPLE_LOG), encoding="utf-8")
    return str(path)


# ===== Header =====
def test_close_icon_on_list_tab(program) -> None:
    overlay = program.overlay
    overlay.windower.change_tab(TabId.POKEMON)

    x_icon = overlay.header_buttons["XIcon"]
    assert x_icon.image == PixelImages.CLOSE
    assert x_icon.box[1] == 2


def test_back_arrow_on_detail_tab(program) -> None:
    overlay = program.overlay
    overlay.windower.change_tab(TabId.POKEMON)
    overlay.windower.change_tab(TabId.POKEMON_DETAILS, 1, 1, 1)

    x_icon = overlay.header_buttons["XIcon"]
    assert x_icon.image == PixelImages.LEFT_ARROW
    assert x_icon.box[1] == 1


@pytest.mark.parametrize(
    ("map_id", "game_over", "expected"),
    [
        (0, False, Screens.STARTUP),
        (12, False, Screens.TRACKER),
        (12, True, Screens.GAME_OVER),
    ],
)
def test_close_picks_screen_for_game_state(program, map_id, game_over, expected) -> None:
    overlay = program.overlay
    program.session.map_id = map_id
    overlay.windower.change_tab(TabId.POKEMON)
    overlay.search.update_search("bulb")
    overlay.is_game_over = game_over

    clicked = click_inside(program, overlay.header_buttons["XIcon"])

    assert clicked is overlay.header_buttons["XIcon"]
    assert overlay.is_displayed is False
    assert overlay.search.search_text == ""
    assert overlay.tab_history == []
    assert program.current_screen == expected


def test_back_arrow_click_returns_to_list(program) -> None:
    overlay = program.overlay
    overlay.windower.change_tab(TabId.TRAINERS)
    overlay.windower.change_tab(TabId.TRAINER_DETAILS, 1, 1, 103)

    click_inside(program, overlay.header_buttons["XIcon"])

    assert overlay.is_displayed is True
    assert overlay.windower.current_tab == TabId.TRAINERS
    assert overlay.header_buttons["XIcon"].image == PixelImages.CLOSE


def test_header_tab_click_switches_and_clears_history(program) -> None:
    overlay = program.overlay
    overlay.windower.change_tab(TabId.POKEMON)
    overlay.tab_history.append(HistoryEntry(TabId.ROUTES, 1, 1, -1, "#"))

    click_inside(program, overlay.header_buttons[TabId.TRAINERS])

    assert overlay.windower.current_tab == TabId.TRAINERS
    assert overlay.windower.filter_grid == "All"
    assert overlay.tab_history == []
    assert overlay.header_buttons[TabId.TRAINERS].is_selected is True
    assert overlay.header_buttons[TabId.POKEMON].is_selected is False


def test_header_click_on_selected_tab_does_nothing(program) -> None:
    overlay = program.overlay
    overlay.windower.change_tab(TabId.POKEMON)
    entry = HistoryEntry(TabId.ROUTES, 1, 1, -1, "#")
    overlay.tab_history.append(entry)

    clicked = click_inside(program, overlay.header_buttons[TabId.POKEMON])

    assert clicked is overlay.header_buttons[TabId.POKEMON]
    assert overlay.tab_history == [entry]


def test_header_tabs_do_not_overlap(program) -> None:
    overlay = program.overlay
    boxes = [overlay.header_buttons[tab_id].box for tab_id in overlay.ORDERED_TABS]

    for left, right in zip(boxes, boxes[1:]):
        assert left[0] + left[2] < right[0]
    assert boxes[-1][0] + boxes[-1][2] < overlay.header_buttons["XIcon"].box[0]


def test_pager_only_shown_with_pages(program) -> None:
    overlay = program.overlay
    overlay.windower.change_tab(TabId.MISC)
    overlay.refresh_active_tab_grid()
    assert not overlay.header_buttons["NextPage"].is_visible()

    click_inside(program, overlay.header_buttons[TabId.POKEMON])
    assert overlay.windower.total_pages == 2

    click_inside(program, overlay.header_buttons["NextPage"])
    assert overlay.windower.current_page == 2
    assert overlay.header_buttons["CurrentPage"].get_text() == "Page 2/2"


def test_grid_click_opens_pokemon_details(program) -> None:
    overlay = program.overlay
    overlay.windower.change_tab(TabId.POKEMON)
    overlay.refresh_active_tab_grid()
    first = overlay.get_tab(TabId.POKEMON).paged_buttons[0]

    clicked = click_inside(program, first)

    assert clicked is first
    assert overlay.windower.current_tab == TabId.POKEMON_DETAILS
    assert overlay.windower.info_id == 1
    assert program.info_pokemon_id == 1


def test_input_ignored_while_closed(program) -> None:
    assert program.overlay.check_input(231, 3) is None


# ===== Log files =====
def test_parse_and_display_opens_lead_pokemon(make_program, tmp_path) -> None:
    program = make_program(with_log=False)
    program.tracker.set_party([{"pokemonID": 4, "level": 7}])

    assert program.overlay.parse_and_display(_write_log(tmp_path / "run.log")) is True

    windower = program.overlay.windower
    assert program.overlay.is_displayed is True
    assert windower.current_tab == TabId.POKEMON_DETAILS
    assert windower.info_id == 4
    assert [entry.tab for entry in windower.history] == [TabId.POKEMON]
    assert program.info_pokemon_id == 4


def test_parse_and_display_without_lead_shows_pokemon(make_program, tmp_path) -> None:
    program = make_program(with_log=False)

    assert program.overlay.parse_and_display(_write_log(tmp_path / "run.log")) is True

    windower = program.overlay.windower
    assert windower.current_tab == TabId.POKEMON
    assert (windower.current_page, windower.total_pages) == (1, 2)
    assert windower.history == []


def test_parse_and_display_missing_log(make_program, tmp_path) -> None:
    program = make_program(with_log=False)

    assert program.overlay.parse_and_display(str(tmp_path / "missing.log")) is False
    assert program.overlay.is_displayed is False


def test_view_log_file_without_host_or_log(make_program) -> None:
    program = make_program(with_log=False)

    assert program.overlay.view_log_file() is False
    assert program.overlay.is_displayed is False


def test_autodetect_premade_rom_log(make_program, options, tmp_path) -> None:
    options.update_setting("Use premade ROMs", True)
    options.files["ROMs Folder"] = str(tmp_path)
    program = make_program(with_log=False)
    program.session.rom_name = "Kaizo 012"
    for name in ("Kaizo 012.gba", "Kaizo 012.gba.log", "Kaizo 011.gba", "Kaizo 011.gba.log"):
        (tmp_path / name).write_text("", encoding="utf-8")

    overlay = program.overlay
    assert overlay.get_log_file_autodetected() == str(tmp_path / "Kaizo 012.gba.log")
    assert overlay.get_log_file_autodetected("PreviousAttempt") == str(tmp_path / "Kaizo 011.gba.log")
    assert options.files["ROMs Folder"].endswith(("/", "\\"))


def test_autodetect_retries_with_underscores(make_program, options, tmp_path) -> None:
    options.update_setting("Use premade ROMs", True)
    options.files["ROMs Folder"] = str(tmp_path)
    program = make_program(with_log=False)
    program.session.rom_name = "Kaizo 013"
    (tmp_path / "Kaizo_013.gba.log").write_text("", encoding="utf-8")

    assert program.overlay.get_log_file_autodetected() == str(tmp_path / "Kaizo_013.gba.log")


def test_autodetect_rejects_mismatched_loaded_rom(make_program, options, fake_host) -> None:
    options.update_setting("Generate ROM each time", True)
    program = make_program(host=fake_host, with_log=False)
    program.session.rom_name = "Kaizo 012"

    assert program.overlay.get_log_file_autodetected() is None


def test_log_prompt_returns_chosen_path(make_program) -> None:
    host = FakeHost(openfile_result="/logs/run.log")
    program = make_program(host=host, with_log=False)
    program.session.rom_name = "Kaizo"

    assert program.overlay.get_log_file_from_prompt() == "/logs/run.log"
    openfile = next(call for call in host.calls if call[0] == "openfile")
    assert openfile[1] == "Kaizo.log"


def test_log_prompt_cancel_returns_none(make_program, fake_host) -> None:
    program = make_program(host=fake_host, with_log=False)

    assert program.overlay.get_log_file_from_prompt() is None


def test_player_head_icon_follows_seed(program) -> None:
    program.session.current_seed = 1
    assert program.overlay.get_player_icon_head().endswith("boy-frlg.png")

    program.session.game = 2
    program.session.current_seed = 4
    assert program.overlay.get_player_icon_head().endswith("girl-e.png")


def test_language_change_rebuilds_displayed_overlay(program) -> None:
    overlay = program.overlay
    overlay.windower.change_tab(TabId.TRAINERS)
    overlay.refresh_active_tab_grid()
    overlay.windower.change_tab(TabId.TRAINER_DETAILS, 1, 1, 103)
    assert len(overlay.tab_history) == 1

    table = {"LogOverlay": {"FilterAll": "Alle"}}
    try:
        assert resources.set_language("Deutsch", table) is True
        trainers_tab = overlay.get_tab(TabId.TRAINERS)
        assert trainers_tab.buttons[0].get_text() == "Alle"
        assert overlay.tab_history == []
        assert [b.pokemon_id for b in overlay.current_tab.buttons] == [5, 6]
    finally:
        resources.set_language("English")
