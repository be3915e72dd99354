import json

from tracker import Tracker


def test_get_pokemon_by_slot() -> None:
    tracker = Tracker()
    tracker.set_party([{"pokemonID": 4}, {"pokemonID": 7}])

    assert tracker.get_pokemon(2) == {"pokemonID": 7}
    assert tracker.get_pokemon(3) is None
    assert tracker.get_pokemon(1, is_own=False) is None


def test_save_appends_extension_and_load_restores(tmp_path) -> None:
    tracker = Tracker()
    tracker.data["whichRival"] = 3
    tracker.data["notes"] = {"4": "Has Blaze"}

    assert tracker.save_data(str(tmp_path / "run")) is True
    saved = tmp_path / "run.tdat"
    assert "savedAt" in json.loads(saved.read_text(encoding="utf-8"))

    other = Tracker()
    assert other.load_data(str(saved)) is True
    assert other.data["whichRival"] == 3
    assert other.data["notes"] == {"4": "Has Blaze"}
    assert "savedAt" not in other.data


def test_load_rejects_missing_and_malformed(tmp_path) -> None:
    tracker = Tracker()
    broken = tmp_path / "broken.tdat"
    broken.write_text("[1, 2]", encoding="utf-8")

    assert tracker.load_data(str(tmp_path / "missing.tdat")) is False
    assert tracker.load_data(str(broken)) is False
    assert tracker.data["party"] == []
