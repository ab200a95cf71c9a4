from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Set, Tuple
import json

from . import tables as builtin


# ----------------------------
# JSON helpers
# ----------------------------

def load_json_table(path: Path, default: Any) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return default


def _pair(value: Any) -> Optional[Tuple[int, int]]:
    """Accept ``[min, max]`` or ``{"min": .., "max": ..}``."""
    try:
        if isinstance(value, dict):
            return int(value["min"]), int(value["max"])
        lo, hi = value
        return int(lo), int(hi)
    except (KeyError, TypeError, ValueError):
        return None


# ----------------------------
# Data models
# ----------------------------

@dataclass(frozen=True)
class ClimateEntry:
    condition: str
    min: int
    max: int

    def contains(self, roll: int) -> bool:
        return self.min <= roll <= self.max


@dataclass(frozen=True)
class EnergyRule:
    """How long a condition can hold before it burns out.

    ``dc`` is the d20 target on the first check; each survived check adds
    ``increase``. ``regresses_to`` is the calmer condition it decays into.
    """
    dc: int = 0
    increase: int = 0
    regresses_to: Optional[str] = None

    def effective_dc(self, energy: int) -> int:
        return self.dc + max(0, energy) * self.increase


@dataclass(frozen=True)
class WindTier:
    name: str
    min: int
    max: int
    effect: str = ""


@dataclass
class ClimateTable:
    """Roll table for one climate and season, harshest condition first."""
    climate: str
    season: str
    entries: List[ClimateEntry]

    @property
    def conditions(self) -> List[str]:
        return [e.condition for e in self.entries]

    def index_of(self, condition: str) -> int:
        for i, e in enumerate(self.entries):
            if e.condition == condition:
                return i
        return -1

    def condition_at(self, index: int) -> str:
        index = max(0, min(len(self.entries) - 1, index))
        return self.entries[index].condition

    def condition_for_roll(self, roll: int) -> Optional[str]:
        for e in self.entries:
            if e.contains(roll):
                return e.condition
        return None

    def random_condition(self, dice, weighted: bool = True, default: str = "Clear Skies") -> str:
        roll = dice.weighted_d100() if weighted else dice.d100()
        return self.condition_for_roll(roll) or default


# ----------------------------
# Table pack
# ----------------------------

def _builtin_climates() -> Dict[str, Dict[str, List[ClimateEntry]]]:
    return {
        climate: {
            season: [ClimateEntry(c, lo, hi) for c, lo, hi in rows]
            for season, rows in seasons.items()
        }
        for climate, seasons in builtin.CLIMATE_TABLES.items()
    }


def _builtin_temperatures() -> Dict[str, Dict[str, Dict[str, Tuple[int, int]]]]:
    return {
        climate: {season: dict(ranges) for season, ranges in seasons.items()}
        for climate, seasons in builtin.TEMPERATURE_RANGES.items()
    }


@dataclass
class WeatherTables:
    """Every lookup the generator needs, with fallbacks for missing entries.

    Built from ``tables.py`` and optionally overlaid with JSON files from a
    tables folder (see :meth:`load`).
    """

    climates: Dict[str, Dict[str, List[ClimateEntry]]] = field(default_factory=_builtin_climates)
    biome_map: Dict[str, str] = field(default_factory=lambda: dict(builtin.BIOME_MAP))
    temperatures: Dict[str, Dict[str, Dict[str, Tuple[int, int]]]] = field(default_factory=_builtin_temperatures)
    time_modifiers: List[int] = field(default_factory=lambda: list(builtin.TIME_MODIFIERS))
    constraints: Dict[str, Dict[str, int]] = field(
        default_factory=lambda: {k: dict(v) for k, v in builtin.TEMPERATURE_CONSTRAINTS.items()}
    )
    winds: Dict[str, Tuple[int, int]] = field(default_factory=lambda: dict(builtin.WIND_SPEED_RANGES))
    wind_tiers: List[WindTier] = field(
        default_factory=lambda: [WindTier(*row) for row in builtin.WIND_INTENSITY]
    )
    energy: Dict[str, EnergyRule] = field(
        default_factory=lambda: {k: EnergyRule(*v) for k, v in builtin.ENERGY_RULES.items()}
    )
    effects: Dict[str, str] = field(default_factory=lambda: dict(builtin.WEATHER_EFFECTS))
    celestial: Dict[str, str] = field(default_factory=lambda: dict(builtin.CELESTIAL_EFFECTS))

    default_climate: str = builtin.DEFAULT_CLIMATE
    log: Callable[[str], None] = field(default=print, repr=False, compare=False)
    _warned: Set[str] = field(default_factory=set, init=False, repr=False, compare=False)

    def _warn_once(self, key: str, msg: str) -> None:
        if key in self._warned:
            return
        self._warned.add(key)
        self.log(f"[Weather] {msg}")

    # ---------- climate tables ----------

    def climate_key(self, biome: str) -> str:
        name = str(biome or "").strip()
        if name in self.climates:
            return name
        mapped = self.biome_map.get(name.lower())
        if mapped in self.climates:
            return mapped
        self._warn_once(f"biome:{name}", f"Unknown biome '{name}', using {self.default_climate}")
        return self.default_climate

    def climate_table(self, biome: str, season: str) -> ClimateTable:
        key = self.climate_key(biome)
        seasons = self.climates.get(key) or self.climates[builtin.DEFAULT_CLIMATE]
        entries = seasons.get(season)
        if not entries:
            self._warn_once(f"season:{key}:{season}", f"No {season} table for {key}, using spring")
            season = "spring"
            entries = seasons.get("spring") or next(iter(seasons.values()))
        return ClimateTable(climate=key, season=season, entries=list(entries))

    # ---------- temperature ----------

    def temperature_range(self, biome: str, season: str, condition: str) -> Optional[Tuple[int, int]]:
        key = self.climate_key(biome)
        rng = self.temperatures.get(key, {}).get(season, {}).get(condition)
        if rng is None:
            self._warn_once(
                f"temp:{key}:{season}:{condition}",
                f"No temperature range for {condition} in {key}/{season}",
            )
        return rng

    def time_modifier(self, hour: int) -> int:
        if not self.time_modifiers:
            return 0
        return self.time_modifiers[int(hour) % len(self.time_modifiers)]

    def constraint(self, condition: str) -> Tuple[Optional[int], Optional[int]]:
        c = self.constraints.get(condition, {})
        return c.get("min"), c.get("max")

    # ---------- wind ----------

    def wind_range(self, condition: str) -> Tuple[int, int]:
        return self.winds.get(condition, builtin.DEFAULT_WIND_RANGE)

    def wind_tier(self, speed: int) -> WindTier:
        for tier in self.wind_tiers:
            if speed <= tier.max:
                return tier
        return self.wind_tiers[-1]

    # ---------- conditions ----------

    def energy_rule(self, condition: str) -> EnergyRule:
        return self.energy.get(condition, EnergyRule())

    def effect(self, condition: str) -> str:
        return self.effects.get(condition, "")

    def celestial_effect(self, event: str) -> str:
        return self.celestial.get(event, "")

    # ---------- loading ----------

    @classmethod
    def load(cls, tables_dir: Optional[Path] = None,
             log: Callable[[str], None] = print) -> "WeatherTables":
        """Built-in tables, overlaid with any JSON files found in ``tables_dir``.

        - climates.json: {"climates": {climate: {season: [{condition, min, max}]}},
          "biomes": {name: climate}, "energy": {condition: {dc, increase, regresses_to}}}
        - temperatures.json: {"ranges": {climate: {season: {condition: [min, max]}}},
          "time_modifiers": [24 ints], "constraints": {condition: {min, max}}}
        - winds.json: {"speeds": {condition: [min, max]}, "intensity": [{name, min, max, effect}]}
        - effects.json: {"conditions": {condition: text}, "celestial": {event: text}}
        """
        t = cls(log=log)
        if tables_dir is None:
            return t
        tables_dir = Path(tables_dir)
        if not tables_dir.is_dir():
            log(f"[Weather] Tables folder not found: {tables_dir}; using built-in tables")
            return t

        t._apply_climates(t._read(tables_dir / "climates.json"))
        t._apply_temperatures(t._read(tables_dir / "temperatures.json"))
        t._apply_winds(t._read(tables_dir / "winds.json"))
        t._apply_effects(t._read(tables_dir / "effects.json"))
        return t

    def _read(self, path: Path) -> Dict[str, Any]:
        if not path.exists():
            return {}
        data = load_json_table(path, default=None)
        if not isinstance(data, dict):
            self.log(f"[Weather] Could not read {path.name}; using built-in copy")
            return {}
        return data

    def _apply_climates(self, data: Dict[str, Any]) -> None:
        for climate, seasons in (data.get("climates") or {}).items():
            if not isinstance(seasons, dict):
                continue
            target = self.climates.setdefault(climate, {})
            for season, rows in seasons.items():
                entries: List[ClimateEntry] = []
                for row in rows or []:
                    rng = _pair(row)
                    if rng is None or not isinstance(row, dict) or not row.get("condition"):
                        continue
                    entries.append(ClimateEntry(str(row["condition"]), rng[0], rng[1]))
                if entries:
                    target[season] = entries
                else:
                    self.log(f"[Weather] Skipping empty {climate}/{season} table")

        for name, climate in (data.get("biomes") or {}).items():
            self.biome_map[str(name).lower()] = str(climate)

        for condition, rule in (data.get("energy") or {}).items():
            if not isinstance(rule, dict):
                continue
            self.energy[condition] = EnergyRule(
                dc=int(rule.get("dc", 0)),
                increase=int(rule.get("increase", 0)),
                regresses_to=rule.get("regresses_to"),
            )

    def _apply_temperatures(self, data: Dict[str, Any]) -> None:
        for climate, seasons in (data.get("ranges") or {}).items():
            for season, ranges in (seasons or {}).items():
                bucket = self.temperatures.setdefault(climate, {}).setdefault(season, {})
                for condition, value in (ranges or {}).items():
                    rng = _pair(value)
                    if rng is not None:
                        bucket[condition] = rng

        mods = data.get("time_modifiers")
        if isinstance(mods, list) and len(mods) == 24:
            self.time_modifiers = [int(m) for m in mods]
        elif mods is not None:
            self.log("[Weather] time_modifiers must list 24 hours; keeping built-in offsets")

        for condition, c in (data.get("constraints") or {}).items():
            if isinstance(c, dict):
                self.constraints[condition] = {k: int(v) for k, v in c.items() if k in ("min", "max")}

    def _apply_winds(self, data: Dict[str, Any]) -> None:
        for condition, value in (data.get("speeds") or {}).items():
            rng = _pair(value)
            if rng is not None:
                self.winds[condition] = rng

        tiers = []
        for row in data.get("intensity") or []:
            rng = _pair(row)
            if rng is None or not isinstance(row, dict) or not row.get("name"):
                continue
            tiers.append(WindTier(str(row["name"]), rng[0], rng[1], str(row.get("effect", ""))))
        if tiers:
            self.wind_tiers = sorted(tiers, key=lambda tr: tr.max)

    def _apply_effects(self, data: Dict[str, Any]) -> None:
        self.effects.update({k: str(v) for k, v in (data.get("conditions") or {}).items()})
        self.celestial.update({k: str(v) for k, v in (data.get("celestial") or {}).items()})
