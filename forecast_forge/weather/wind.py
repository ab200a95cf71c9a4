from __future__ import annotations

from typing import Optional

from .climate import WeatherTables
from .config import ForecastConfig
from .tables import WIND_DIRECTIONS


# ----------------------------
# Compass helpers
# ----------------------------

def direction_to_angle(direction: str) -> float:
    """N = 0°, clockwise in 45° steps. Unknown directions read as north."""
    try:
        return WIND_DIRECTIONS.index(direction) * 45.0
    except ValueError:
        return 0.0


def angle_to_direction(angle: float) -> str:
    index = int(((angle % 360) + 22.5) // 45) % 8
    return WIND_DIRECTIONS[index]


def shortest_arc(start: float, end: float) -> float:
    """Signed difference from ``start`` to ``end`` in [-180, 180]."""
    diff = end - start
    if diff > 180:
        diff -= 360
    if diff < -180:
        diff += 360
    return diff


# ----------------------------
# Model
# ----------------------------

class WindModel:

    def __init__(self, tables: WeatherTables, config: Optional[ForecastConfig] = None):
        self.tables = tables
        self.config = config or ForecastConfig()

    def random_direction(self, dice) -> str:
        return dice.choice(WIND_DIRECTIONS)

    def next_direction(self, current: str, dice) -> str:
        if current not in WIND_DIRECTIONS:
            return self.random_direction(dice)
        if dice.random() > self.config.change_frequency:
            return current
        shift = dice.randint(-1, 1) * int(self.config.direction_variability)
        return WIND_DIRECTIONS[(WIND_DIRECTIONS.index(current) + shift) % 8]

    def random_speed(self, condition: str, dice) -> int:
        lo, hi = sorted(self.tables.wind_range(condition))
        return dice.randint(lo, hi)

    def next_speed(self, current: int, target: int, dice) -> int:
        jitter = self.config.speed_jitter
        change = (target - current) + dice.uniform(-jitter, jitter)
        limit = self.config.max_speed_change
        change = max(-limit, min(limit, change))
        return max(0, int(round(current + change)))

    def classify_intensity(self, speed: int) -> str:
        return self.tables.wind_tier(speed).name

    def intensity_effect(self, tier: str) -> str:
        for t in self.tables.wind_tiers:
            if t.name == tier:
                return t.effect
        return ""

    def effect_for_speed(self, speed: int) -> str:
        """Gameplay text once the wind is strong enough to matter, else ''."""
        if speed < self.config.wind_effect_threshold:
            return ""
        return self.intensity_effect(self.classify_intensity(speed))
