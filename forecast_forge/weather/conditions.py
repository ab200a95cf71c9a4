from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Optional

from .climate import ClimateTable, WeatherTables


# ----------------------------
# Data models
# ----------------------------

@dataclass(frozen=True)
class ConditionState:
    condition: str
    energy: int = 0


@dataclass(frozen=True)
class ConditionRoll:
    """What happened on one condition step (kept on the engine for debugging)."""
    previous: str
    condition: str
    energy_roll: Optional[int] = None     # d20 against the persistence DC
    energy_dc: Optional[int] = None
    burned_out: bool = False
    walk_roll: Optional[int] = None       # d20 for the random walk
    walk_shift: int = 0
    redrawn: bool = False                 # previous condition was not in the table


class ConditionStep(NamedTuple):
    state: ConditionState
    roll: ConditionRoll


# ----------------------------
# Rules
# ----------------------------

def walk_shift(roll: int) -> int:
    """d20 -> index shift. Index 0 is the harshest row of the table."""
    if roll <= 1:
        return -2
    if roll <= 5:
        return -1
    if roll <= 15:
        return 0
    if roll <= 19:
        return 1
    return 2


def next_condition(state: ConditionState,
                   table: ClimateTable,
                   tables: WeatherTables,
                   dice,
                   weighted: bool = True,
                   default: str = "Clear Skies") -> ConditionStep:
    """One persistence check followed, if the weather held, by a random walk.

    A condition with energy ``e`` burns out when a d20 comes under
    ``dc + e * increase`` and decays one step along its regression path.
    Surviving the check adds one energy.
    """
    rule = tables.energy_rule(state.condition)

    energy_roll = None
    dc = None
    energy = state.energy
    if rule.dc > 0 and rule.regresses_to:
        dc = rule.effective_dc(state.energy)
        energy_roll = dice.d20()
        if energy_roll < dc:
            new = ConditionState(rule.regresses_to, 0)
            return ConditionStep(new, ConditionRoll(
                previous=state.condition,
                condition=new.condition,
                energy_roll=energy_roll,
                energy_dc=dc,
                burned_out=True,
            ))
        energy += 1

    idx = table.index_of(state.condition)
    if idx < 0:
        drawn = table.random_condition(dice, weighted=weighted, default=default)
        return ConditionStep(ConditionState(drawn, 0), ConditionRoll(
            previous=state.condition,
            condition=drawn,
            energy_roll=energy_roll,
            energy_dc=dc,
            redrawn=True,
        ))

    walk_roll = dice.d20()
    shift = walk_shift(walk_roll)
    landed = table.condition_at(idx + shift)
    new = ConditionState(landed, energy if landed == state.condition else 0)
    return ConditionStep(new, ConditionRoll(
        previous=state.condition,
        condition=landed,
        energy_roll=energy_roll,
        energy_dc=dc,
        walk_roll=walk_roll,
        walk_shift=shift,
    ))


def start_condition(table: ClimateTable, dice, weighted: bool = True,
                    default: str = "Clear Skies") -> ConditionState:
    return ConditionState(table.random_condition(dice, weighted=weighted, default=default), 0)

