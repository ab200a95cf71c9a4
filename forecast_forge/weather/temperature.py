from __future__ import annotations

from typing import Optional

from .climate import WeatherTables
from .config import ForecastConfig


def _clamp(x: int, a: int, b: int) -> int:
    return max(a, min(b, x))


class TemperatureModel:
    """Hourly temperature: a draw from the condition's range, shifted by
    time of day, kept plausible for the condition and smoothed hour to hour."""

    def __init__(self, tables: WeatherTables, config: Optional[ForecastConfig] = None):
        self.tables = tables
        self.config = config or ForecastConfig()

    def constrain(self, condition: str, temperature: int) -> int:
        lo, hi = self.tables.constraint(condition)
        if hi is not None:
            temperature = min(temperature, hi)
        if lo is not None:
            temperature = max(temperature, lo)
        return temperature

    def generate(self, condition: str, biome: str, season: str, hour: int, dice) -> int:
        rng = self.tables.temperature_range(biome, season, condition)
        if rng is None:
            return int(self.config.default_temperature)
        lo, hi = sorted(rng)
        base = dice.randint(lo, hi)
        return self.constrain(condition, base + self.tables.time_modifier(hour))

    def smooth(self, previous: Optional[int], target: int) -> int:
        if previous is None:
            return int(target)
        step = int(self.config.max_temp_change)
        return previous + _clamp(int(target) - previous, -step, step)

    def next_hour(self, previous: Optional[int], condition: str, biome: str,
                  season: str, hour: int, dice) -> int:
        return self.smooth(previous, self.generate(condition, biome, season, hour, dice))
