from __future__ import annotations

from dataclasses import replace
from typing import List, Sequence
import math

from .climate import WeatherTables
from .forecast import ForecastHour
from .wind import angle_to_direction, direction_to_angle, shortest_arc


TRAVEL_PREFIX = "You are traveling between regions. "
EARLY_SUFFIX = " The climate is beginning to change as you travel."
MIXED_PREFIX = "You're experiencing a mixture of weather from both regions. "
LATE_SUFFIX = " You're almost at your destination."


def _lerp(a: float, b: float, t: float) -> float:
    return a * (1 - t) + b * t


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def blend_direction(source: str, target: str, progress: float) -> str:
    start = direction_to_angle(source)
    diff = shortest_arc(start, direction_to_angle(target))
    return angle_to_direction(start + diff * progress)


def travel_effects(source_effects: str, target_effects: str, chosen_effects: str, progress: float) -> str:
    if progress < 0.25:
        return TRAVEL_PREFIX + source_effects + EARLY_SUFFIX
    if progress < 0.75:
        return TRAVEL_PREFIX + MIXED_PREFIX + chosen_effects
    return TRAVEL_PREFIX + target_effects + LATE_SUFFIX


class RegionTransitionBlender:
    """Mixes two regions' forecasts hour by hour while a party travels.

    ``progress`` 0 is all source, 1 is all target. The condition is a weighted
    coin flip per hour, redrawn on every call; the numbers interpolate.
    """

    def __init__(self, tables: WeatherTables):
        self.tables = tables

    def blend_hour(self, src: ForecastHour, tgt: ForecastHour, progress: float, dice) -> ForecastHour:
        use_target = dice.random() < progress
        chosen = tgt if use_target else src
        speed = max(0, _round_half_up(_lerp(src.wind_speed, tgt.wind_speed, progress)))
        return replace(
            src,
            condition=chosen.condition,
            temperature=_round_half_up(_lerp(src.temperature, tgt.temperature, progress)),
            wind_direction=blend_direction(src.wind_direction, tgt.wind_direction, progress),
            wind_speed=speed,
            wind_intensity=self.tables.wind_tier(speed).name,
            effects=travel_effects(src.effects, tgt.effects, chosen.effects, progress),
            has_shooting_star=src.has_shooting_star or tgt.has_shooting_star,
            has_meteor_impact=src.has_meteor_impact or tgt.has_meteor_impact,
            is_transitional=True,
            transition_progress=progress,
        )

    def blend(self, source: Sequence[ForecastHour], target: Sequence[ForecastHour],
              progress: float, dice) -> List[ForecastHour]:
        if not source:
            return list(target)
        if not target:
            return list(source)
        progress = max(0.0, min(1.0, float(progress)))
        return [self.blend_hour(s, t, progress, dice) for s, t in zip(source, target)]
