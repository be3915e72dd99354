import json

import resources
from settings import Options, load_tracker_settings


def test_defaults_fill_missing_options(tmp_path) -> None:
    options = Options({"Show Pre Evolutions": True, "Bogus": 1}, path=str(tmp_path / "s.json"))

    assert options["Show Pre Evolutions"] is True
    assert options["Auto save tracked game data"] is True
    assert options["Bogus"] is None
    assert options.files["ROMs Folder"] is None


def test_unknown_option_is_not_stored(tmp_path) -> None:
    options = Options(path=str(tmp_path / "s.json"))

    options.update_setting("Bogus", True)

    assert "Bogus" not in options.to_dict()


def test_save_and_load_round_trip(tmp_path) -> None:
    path = str(tmp_path / "nested" / "s.json")
    options = Options(path=path)
    options.update_setting("Pokemon icon set", "2")
    options.files["ROMs Folder"] = "/roms/"

    assert options.save() is True
    loaded = Options.load(path)

    assert loaded["Pokemon icon set"] == "2"
    assert loaded.icon_set()["folder"] == "pokemonStadium"
    assert loaded.files["ROMs Folder"] == "/roms/"


def test_broken_settings_file_loads_as_empty(tmp_path) -> None:
    path = tmp_path / "s.json"
    path.write_text("{not json", encoding="utf-8")

    assert load_tracker_settings(str(path)) == {}
    assert load_tracker_settings(str(tmp_path / "missing.json")) == {}


def test_language_table_falls_back_to_english() -> None:
    try:
        assert resources.set_language("Pirate", {"AllScreens": {"Back": "Avast"}}) is True
        assert resources.text("AllScreens", "Back") == "Avast"
        assert resources.text("AllScreens", "Cancel") == "Cancel"
        assert resources.text("Nowhere", "Missing") == "Missing"
    finally:
        resources.set_language("English")


def test_unknown_language_keeps_current() -> None:
    assert resources.set_language("Klingon") is False
    assert resources.get_language() == "English"


def test_settings_file_is_plain_json(tmp_path) -> None:
    path = tmp_path / "s.json"
    Options(path=str(path)).save()

    data = json.loads(path.read_text(encoding="utf-8"))

    assert data["Language"] == "English"
    assert "FILES" in data


def test_unknown_icon_set_falls_back_to_original(tmp_path) -> None:
    options = Options({"Pokemon icon set": "9"}, path=str(tmp_path / "s.json"))
    assert options.icon_set()["folder"] == "pokemonIcons"

    options.update_setting("Pokemon icon set", "4")
    assert options.icon_set()["extension"] == ".gif"
