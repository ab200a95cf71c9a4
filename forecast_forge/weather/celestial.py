from __future__ import annotations

from dataclasses import dataclass

from .climate import WeatherTables


SHOOTING_STAR = "Shooting Star"
METEOR_IMPACT = "Meteor Impact"


@dataclass(frozen=True)
class CelestialEvents:
    shooting_star: bool = False
    meteor_impact: bool = False


class CelestialEventGenerator:
    """Rare sky events: a shooting star on a natural 100, and a meteor on a
    natural 20 rolled only when a star fell."""

    def __init__(self, tables: WeatherTables):
        self.tables = tables

    def roll(self, dice) -> CelestialEvents:
        shooting_star = dice.d100() == 100
        meteor_impact = shooting_star and dice.d20() == 20
        return CelestialEvents(shooting_star=shooting_star, meteor_impact=meteor_impact)

    def effects_text(self, events: CelestialEvents) -> str:
        # a meteor outshines the shooting star
        if events.meteor_impact:
            return self.tables.celestial_effect(METEOR_IMPACT)
        if events.shooting_star:
            return self.tables.celestial_effect(SHOOTING_STAR)
        return ""
