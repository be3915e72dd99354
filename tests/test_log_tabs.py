import json
from types import SimpleNamespace

from log_search import SORT_ORDERS, SearchFilters, matches_search
from log_tab_base import TabId
from log_tabs import (
    TMGroups,
    TrainerGroups,
    fit_text,
    gym_number_of,
    sort_trainers_all,
    sort_trainers_by_level,
)
from randomizer_log import LogPartyMember, LogTrainer


def _visible_order(tab, attr):
    """Ids of the grid buttons that are shown, in page then layout order."""
    shown = [b for b in tab.paged_buttons if b.page_visible > 0]
    shown.sort(key=lambda b: (b.page_visible, b.box[1], b.box[0]))
    return [getattr(b, attr) for b in shown]


# ===== Search matching =====
def test_matches_search_prefix_and_substring() -> None:
    assert matches_search("bulb", "Bulbasaur")
    assert matches_search("SAUR", "Bulbasaur")
    assert not matches_search("char", "Bulbasaur")
    assert not matches_search("", "Bulbasaur")
    assert not matches_search("x", None)


# ===== Pokémon =====
def test_pokemon_grid_pages(program) -> None:
    overlay = program.overlay
    overlay.windower.change_tab(TabId.POKEMON)
    pokemon_tab = overlay.get_tab(TabId.POKEMON)

    pokemon_tab.realign_grid()

    assert overlay.windower.total_pages == 2
    assert _visible_order(pokemon_tab, "pokemon_id") == list(range(1, 21))
    assert {b.page_visible for b in pokemon_tab.paged_buttons if b.pokemon_id <= 15} == {1}
    assert {b.page_visible for b in pokemon_tab.paged_buttons if b.pokemon_id > 15} == {2}


def test_search_by_name(program) -> None:
    overlay = program.overlay
    overlay.windower.change_tab(TabId.POKEMON)

    overlay.search.update_search("saur")

    pokemon_tab = overlay.get_tab(TabId.POKEMON)
    assert _visible_order(pokemon_tab, "pokemon_name") == ["Bulbasaur", "Ivysaur", "Venusaur"]
    assert overlay.windower.filter_grid == "saur"
    assert overlay.windower.total_pages == 1


def test_search_by_ability_and_move(program) -> None:
    overlay = program.overlay
    overlay.windower.change_tab(TabId.POKEMON)
    pokemon_tab = overlay.get_tab(TabId.POKEMON)

    overlay.search.update_search("blaze", SearchFilters.ABILITY)
    assert _visible_order(pokemon_tab, "pokemon_name") == ["Charmander"]

    overlay.search.update_search("leech", SearchFilters.LEVELUP_MOVE)
    assert _visible_order(pokemon_tab, "pokemon_id") == [1] + list(range(5, 21))


def test_search_switches_to_pokemon_tab(program) -> None:
    overlay = program.overlay
    overlay.windower.change_tab(TabId.TMS)

    overlay.search.update_search("ivy")

    assert overlay.windower.current_tab == TabId.POKEMON
    assert overlay.search.is_displayed is True
    assert _visible_order(overlay.get_tab(TabId.POKEMON), "pokemon_name") == ["Ivysaur"]


def test_search_text_is_truncated(program) -> None:
    search = program.overlay.search

    search.update_search("  " + "a" * 30 + "  ")

    assert search.search_text == "a" * 20


def test_alphabetical_sort(program) -> None:
    overlay = program.overlay
    overlay.windower.change_tab(TabId.POKEMON)
    overlay.search.current_sort_order = SORT_ORDERS["Alphabetical"]

    overlay.search.update_search("a")

    names = _visible_order(overlay.get_tab(TabId.POKEMON), "pokemon_name")
    assert names[:4] == ["Bulbasaur", "Charmander", "Ivysaur", "Venusaur"]


def test_search_survives_revisiting_pokemon_tab(program) -> None:
    overlay = program.overlay
    windower = overlay.windower
    windower.change_tab(TabId.POKEMON)
    overlay.search.update_search("venu")

    windower.change_tab(TabId.POKEMON_DETAILS, 1, 1, 3)
    windower.go_back()

    assert windower.current_tab == TabId.POKEMON
    assert _visible_order(overlay.get_tab(TabId.POKEMON), "pokemon_name") == ["Venusaur"]


def test_search_page_survives_detail_round_trip(program) -> None:
    overlay = program.overlay
    windower = overlay.windower
    windower.change_tab(TabId.POKEMON)
    overlay.search.update_search("zubat")
    assert windower.total_pages == 2
    windower.next_page()

    windower.change_tab(TabId.POKEMON_DETAILS, 1, 1, 20)
    windower.go_back()

    assert windower.current_tab == TabId.POKEMON
    assert (windower.current_page, windower.total_pages, windower.filter_grid) == (2, 2, "zubat")


def test_search_prompt_applies_text_and_filter(make_program, fake_host) -> None:
    program = make_program(host=fake_host)
    overlay = program.overlay
    overlay.windower.change_tab(TabId.POKEMON)

    form = overlay.search.open_search_prompt()
    textbox = next(cid for cid, kind in form.created_controls.items() if kind.name == "TEXTBOX")
    dropdown = next(cid for cid, kind in form.created_controls.items() if kind.name == "DROPDOWN")
    fake_host.settext(textbox, "overgrow")
    fake_host.settext(dropdown, "Ability")
    search_button = next(cid for cid, kind in form.created_controls.items() if kind.name == "BUTTON")
    fake_host.click_callbacks[search_button]()

    assert overlay.search.search_text == "overgrow"
    assert overlay.search.current_filter == SearchFilters.ABILITY
    assert _visible_order(overlay.get_tab(TabId.POKEMON), "pokemon_id") == [1, 2, 3]
    assert fake_host.destroyed() == [form.control_id]


# ===== Trainers =====
def test_trainers_exclude_unknown_and_other_rival(make_program) -> None:
    program = make_program(which_rival=1)
    trainers_tab = program.overlay.get_tab(TabId.TRAINERS)

    ids = {b.trainer_id for b in trainers_tab.paged_buttons}

    assert 107 not in ids
    assert 102 not in ids
    assert 101 in ids


def test_trainers_keep_all_rivals_when_unknown(program) -> None:
    trainers_tab = program.overlay.get_tab(TabId.TRAINERS)

    ids = {b.trainer_id for b in trainers_tab.paged_buttons}

    assert {101, 102} <= ids
    assert 107 not in ids


def test_trainers_all_sorted_by_group_then_level(make_program) -> None:
    program = make_program(which_rival=1)
    program.overlay.windower.change_tab(TabId.TRAINERS)
    trainers_tab = program.overlay.get_tab(TabId.TRAINERS)

    trainers_tab.realign_grid()

    assert program.overlay.windower.filter_grid == TrainerGroups.ALL
    assert _visible_order(trainers_tab, "trainer_id") == [101, 103, 104, 105, 106, 108]


def test_trainer_without_party_sorts_last() -> None:
    empty = SimpleNamespace(trainer=LogTrainer(1, "Gary", group="Rival"))
    leveled = SimpleNamespace(trainer=LogTrainer(2, "Gary", group="Rival", party=[LogPartyMember(4, 50)]))

    assert sorted([empty, leveled], key=sort_trainers_by_level) == [leveled, empty]
    assert sorted([empty, leveled], key=sort_trainers_all) == [leveled, empty]


def test_trainer_filters(make_program) -> None:
    program = make_program(which_rival=1)
    program.overlay.windower.change_tab(TabId.TRAINERS)
    trainers_tab = program.overlay.get_tab(TabId.TRAINERS)

    trainers_tab.realign_grid(TrainerGroups.GYM)
    assert _visible_order(trainers_tab, "trainer_id") == [103, 104]

    trainers_tab.realign_grid(TrainerGroups.BOSS)
    assert _visible_order(trainers_tab, "trainer_id") == [106]

    trainers_tab.realign_grid("No such group")
    assert program.overlay.windower.filter_grid == TrainerGroups.ALL


def test_trainer_nav_button_click_realigns(program) -> None:
    overlay = program.overlay
    overlay.windower.change_tab(TabId.TRAINERS)
    trainers_tab = overlay.get_tab(TabId.TRAINERS)
    gym_button = next(b for b in trainers_tab.buttons if b.nav_filter.group == TrainerGroups.GYM)

    gym_button.on_click()

    assert overlay.windower.filter_grid == TrainerGroups.GYM
    assert gym_button.is_selected()
    assert _visible_order(trainers_tab, "trainer_id") == [103, 104]


def test_gym_number_from_filename() -> None:
    assert gym_number_of(LogTrainer(1, "Brock", filename="frlg-gymleader-3")) == 3
    assert gym_number_of(LogTrainer(2, "Rocket", filename="frlg-grunt")) is None


def test_gym_tms_matched_to_leaders(program) -> None:
    gym_tms = program.overlay.get_tab(TabId.TRAINERS).build_paged_buttons()

    assert gym_tms == {
        39: {"leader": "Brock", "gymNumber": 1, "trainerId": 103},
        3: {"leader": "Misty", "gymNumber": 2, "trainerId": 104},
    }


# ===== TMs =====
def test_tm_grid_pages_and_gym_filter(program) -> None:
    overlay = program.overlay
    overlay.windower.change_tab(TabId.TMS)
    tms_tab = overlay.get_tab(TabId.TMS)

    tms_tab.realign_grid()
    assert overlay.windower.filter_grid == TMGroups.TM_NUMBER
    assert overlay.windower.total_pages == 2

    tms_tab.realign_grid(TMGroups.GYM_TMS)
    shown = [b for b in tms_tab.paged_buttons if b.page_visible > 0]
    shown.sort(key=lambda b: (b.box[1], b.box[0]))
    assert [b.tm.number for b in shown] == [39, 3]
    assert overlay.windower.total_pages == 1


def test_tm_without_gym_is_not_a_link(program) -> None:
    overlay = program.overlay
    overlay.windower.change_tab(TabId.TMS)
    tms_tab = overlay.get_tab(TabId.TMS)

    plain = next(b for b in tms_tab.paged_buttons if b.tm.number == 1)
    plain.on_click()

    assert overlay.windower.current_tab == TabId.TMS
    assert overlay.windower.history == []


# ===== Routes =====
def test_routes_without_data_are_hidden(program) -> None:
    routes_tab = program.overlay.get_tab(TabId.ROUTES)

    assert [b.route_id for b in routes_tab.paged_buttons] == [89]


def test_route_details_areas_and_sorting(program) -> None:
    overlay = program.overlay
    windower = overlay.windower
    windower.change_tab(TabId.ROUTES)
    windower.change_tab(TabId.ROUTE_DETAILS, 1, 1, 89)
    details = overlay.get_tab(TabId.ROUTE_DETAILS)

    assert [f.group for f in details.NAV_FILTERS] == ["Walking", "Surfing", "Trainers"]
    assert _visible_order(details, "pokemon_id") == [13, 10]

    details.realign_grid("Trainers")
    shown = [b.trainer.id for b in details.paged_buttons if b.page_visible > 0]
    assert shown == [108]
    assert windower.filter_grid == "Trainers"


def test_route_trainer_click_opens_trainer_details(program) -> None:
    overlay = program.overlay
    windower = overlay.windower
    windower.change_tab(TabId.ROUTES)
    windower.change_tab(TabId.ROUTE_DETAILS, 1, 1, 89, "Trainers")
    details = overlay.get_tab(TabId.ROUTE_DETAILS)

    trainer_button = next(b for b in details.paged_buttons if b.page_visible > 0)
    trainer_button.on_click()

    assert windower.current_tab == TabId.TRAINER_DETAILS
    assert windower.info_id == 108
    assert len(windower.history) == 1


# ===== Details =====
def test_pre_evolutions_follow_option(program) -> None:
    overlay = program.overlay
    details = overlay.get_tab(TabId.POKEMON_DETAILS)

    details.build_zoom_buttons(2)
    assert [b.pokemon_id for b in details.buttons] == [2, 3]

    program.options.update_setting("Show Pre Evolutions", True)
    details.build_zoom_buttons(2)
    assert [b.pokemon_id for b in details.buttons] == [2, 1, 3]


def test_visible_moves_follow_page(program) -> None:
    overlay = program.overlay
    overlay.windower.change_tab(TabId.POKEMON_DETAILS, 1, 1, 1)
    details = overlay.get_tab(TabId.POKEMON_DETAILS)

    assert len(details.visible_moves()) == 8
    overlay.windower.next_page()
    assert [m.name for m in details.visible_moves()] == ["Move 7", "Move 8"]


def test_trainer_details_party_links(program) -> None:
    overlay = program.overlay
    overlay.windower.change_tab(TabId.TRAINER_DETAILS, 1, 1, 103)
    details = overlay.get_tab(TabId.TRAINER_DETAILS)

    assert [b.pokemon_id for b in details.buttons] == [5, 6]
    assert overlay.windower.total_pages == 1


# ===== Misc =====
def test_misc_info_and_toggle(program, options) -> None:
    overlay = program.overlay
    overlay.windower.change_tab(TabId.MISC, 3, 4, None, "#")
    overlay.refresh_active_tab_grid()

    windower = overlay.windower
    assert (windower.filter_grid, windower.current_page, windower.total_pages) == ("", 1, 1)

    misc = overlay.get_tab(TabId.MISC)
    assert [value for _label, value in misc.info_lines()] == [
        "FireRed AutoRandomized.gba.log", "4.6.1", "Fire Red (U) 1.0",
    ]

    toggle = misc.buttons[0]
    assert toggle.is_visible()
    toggle.on_click()

    assert options["Show Pre Evolutions"] is True
    with open(options.path, encoding="utf-8") as f:
        assert json.load(f)["Show Pre Evolutions"] is True


def test_fit_text_trims_to_width() -> None:
    assert fit_text("Bulbasaur", 1000) == "Bulbasaur"
    assert len(fit_text("Bulbasaur", 12)) < len("Bulbasaur")
    assert fit_text(None, 10) == ""
