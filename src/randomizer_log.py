#!/usr/bin/env python3

"""
randomizer_log.py — Parsed randomizer log data and the loader that fills it.

The overlay only reads the records defined here. The text log produced by the
randomizer is converted elsewhere; the built-in parser reads its JSON export:

{
    "settings": {"version": "...", "game": "...", "settingsString": "...", "seed": 123},
    "pokemon":  {"1": {"name": "Bulbasaur", "types": [...], "abilities": [...],
                       "moveset": [{"level": 1, "name": "Tackle"}], "evolutions": [2],
                       "stats": {"hp": 45, ...}}},
    "trainers": {"102": {"name": "Brock", "filename": "frlg-gymleader-1", "group": "Gym",
                         "whichRival": null, "party": [{"pokemonId": 74, "level": 12, "moves": [...]}]}},
    "routes":   {"89": {"name": "Route 1", "encounterAreas": {"Walking": [...]}, "trainers": [...]}},
    "tms":      {"1": {"moveId": 264, "moveName": "Focus Punch"}},
    "gymTMs":   [{"number": 39, "leader": "Brock"}, ...]
}
"""

import json
import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class LogMove:
    level: int
    name: str


@dataclass
class LogPokemon:
    id: int
    name: str
    types: List[str] = field(default_factory=list)
    abilities: List[str] = field(default_factory=list)
    moveset: List[LogMove] = field(default_factory=list)
    evolutions: List[int] = field(default_factory=list)
    pre_evolutions: List[int] = field(default_factory=list)
    stats: Dict[str, int] = field(default_factory=dict)

    @property
    def bst(self):
        return sum(self.stats.values())


@dataclass
class LogPartyMember:
    pokemon_id: int
    level: int
    moves: List[str] = field(default_factory=list)


@dataclass
class LogTrainer:
    id: int
    name: str
    filename: str = "unknown"
    group: str = "Other"
    which_rival: Optional[int] = None
    party: List[LogPartyMember] = field(default_factory=list)

    @property
    def maxlevel(self):
        if not self.party:
            return None
        return max(member.level for member in self.party)


@dataclass
class LogEncounter:
    pokemon_id: int
    level_min: int
    level_max: int
    rate: float


@dataclass
class LogRoute:
    id: int
    name: str
    encounter_areas: Dict[str, List[LogEncounter]] = field(default_factory=dict)
    trainers: List[int] = field(default_factory=list)


@dataclass
class LogTM:
    number: int
    move_id: int
    move_name: str


@dataclass
class LogData:
    settings: Optional[dict] = None
    pokemon: Dict[int, LogPokemon] = field(default_factory=dict)
    trainers: Dict[int, LogTrainer] = field(default_factory=dict)
    routes: Dict[int, LogRoute] = field(default_factory=dict)
    tms: Dict[int, LogTM] = field(default_factory=dict)
    gym_tms: List[dict] = field(default_factory=list)

    def is_parsed(self):
        return self.settings is not None


def _int_keys(mapping):
    return {int(k): v for k, v in (mapping or {}).items()}


def _build_pre_evolutions(pokemon):
    for mon in pokemon.values():
        for evo_id in mon.evolutions:
            target = pokemon.get(evo_id)
            if target is not None and mon.id not in target.pre_evolutions:
                target.pre_evolutions.append(mon.id)


def log_data_from_dict(raw):
    """Build LogData from the decoded JSON export."""
    data = LogData(settings=dict(raw.get("settings") or {}))

    for pid, entry in _int_keys(raw.get("pokemon")).items():
        data.pokemon[pid] = LogPokemon(
            id=pid,
            name=entry.get("name", f"#{pid}"),
            types=list(entry.get("types", [])),
            abilities=list(entry.get("abilities", [])),
            moveset=[LogMove(m.get("level", 1), m.get("name", "")) for m in entry.get("moveset", [])],
            evolutions=[int(e) for e in entry.get("evolutions", [])],
            stats=dict(entry.get("stats", {})),
        )
    _build_pre_evolutions(data.pokemon)

    for tid, entry in _int_keys(raw.get("trainers")).items():
        data.trainers[tid] = LogTrainer(
            id=tid,
            name=entry.get("name", "Unknown"),
            filename=entry.get("filename", "unknown"),
            group=entry.get("group", "Other"),
            which_rival=entry.get("whichRival"),
            party=[
                LogPartyMember(p.get("pokemonId", 0), p.get("level", 1), list(p.get("moves", [])))
                for p in entry.get("party", [])
            ],
        )

    for rid, entry in _int_keys(raw.get("routes")).items():
        areas = {}
        for area_name, encounters in (entry.get("encounterAreas") or {}).items():
            areas[area_name] = [
                LogEncounter(
                    e.get("pokemonId", 0), e.get("levelMin", 1),
                    e.get("levelMax", e.get("levelMin", 1)), e.get("rate", 0),
                )
                for e in encounters
            ]
        data.routes[rid] = LogRoute(
            id=rid,
            name=entry.get("name", f"Route {rid}"),
            encounter_areas=areas,
            trainers=[int(t) for t in entry.get("trainers", [])],
        )

    for number, entry in _int_keys(raw.get("tms")).items():
        data.tms[number] = LogTM(number, entry.get("moveId", 0), entry.get("moveName", ""))

    data.gym_tms = [dict(g) for g in raw.get("gymTMs", [])]
    return data


def parse_json_log(logpath):
    """
    Default parser. Returns LogData, or None if the file is missing or unreadable.
    """
    if not logpath or not os.path.isfile(logpath):
        print(f"[RandomizerLog] Log file not found: {logpath}")
        return None
    try:
        with open(logpath, "r", encoding="utf-8") as f:
            raw = json.load(f)
        data = log_data_from_dict(raw)
        print(
            f"[RandomizerLog] Parsed {os.path.basename(logpath)}: "
            f"{len(data.pokemon)} pokemon, {len(data.trainers)} trainers, {len(data.routes)} routes"
        )
        return data
    except Exception as e:
        print(f"[RandomizerLog] Failed to parse {logpath}: {e}")
        return None


class RandomizerLog:
    """Holds the most recently parsed log and the path it came from."""

    def __init__(self, parser=parse_json_log):
        self.parser = parser
        self.data = LogData()
        self.loaded_log_path = None

    def reset(self):
        self.data = LogData()

    def parse_log(self, logpath):
        """Parse a log into self.data. Returns True on success."""
        if not logpath:
            return False
        parsed = self.parser(logpath)
        if parsed is None:
            return False
        self.data = parsed
        self.loaded_log_path = logpath
        return True
