import pytest

from forecast_forge.core.dice import ScriptedDice
from forecast_forge.weather.conditions import ConditionState, next_condition, walk_shift


@pytest.mark.parametrize("roll, shift", [
    (1, -2), (2, -1), (5, -1), (6, 0), (15, 0), (16, 1), (19, 1), (20, 2),
])
def test_walk_shift(roll, shift):
    assert walk_shift(roll) == shift


@pytest.mark.parametrize("roll", range(1, 21))
def test_thunderstorm_after_three_checks_always_burns_out(tables, roll):
    table = tables.climate_table("tropical-rainforest", "winter")
    step = next_condition(ConditionState("Thunderstorm", 3), table, tables, ScriptedDice({20: [roll]}))
    assert step.state == ConditionState("Heavy Rain", 0)
    assert step.roll.burned_out
    assert step.roll.energy_dc == 24
    assert step.roll.walk_roll is None


def test_surviving_the_check_builds_energy(tables):
    table = tables.climate_table("tropical-rainforest", "winter")
    step = next_condition(ConditionState("Heavy Rain", 0), table, tables, ScriptedDice({20: [15, 10]}))
    assert step.state == ConditionState("Heavy Rain", 1)
    assert not step.roll.burned_out
    assert step.roll.energy_dc == 12
    assert step.roll.walk_shift == 0


def test_energy_resets_when_the_walk_moves(tables):
    table = tables.climate_table("tropical-rainforest", "winter")
    # Rain at energy 2: DC 16, survived on 16; walk 20 moves two rows calmer
    step = next_condition(ConditionState("Rain", 2), table, tables, ScriptedDice({20: [16, 20]}))
    assert step.state == ConditionState("Clear Skies", 0)


def test_snow_wears_down_over_successive_checks(tables):
    table = tables.climate_table("boreal-forest", "winter")
    dice = ScriptedDice({20: [15, 10, 20, 10, 20]})
    state = ConditionState("Snow", 0)

    state = next_condition(state, table, tables, dice).state
    assert state == ConditionState("Snow", 1)
    state = next_condition(state, table, tables, dice).state
    assert state == ConditionState("Snow", 2)
    # DC 25 now, so even a natural 20 fails
    step = next_condition(state, table, tables, dice)
    assert step.state == ConditionState("Freezing Cold", 0)
    assert step.roll.energy_dc == 25


def test_clear_skies_never_burns_out(tables):
    table = tables.climate_table("temperate", "summer")
    step = next_condition(ConditionState("Clear Skies", 0), table, tables, ScriptedDice({20: [10]}))
    assert step.state.condition == "Clear Skies"
    assert step.roll.energy_roll is None
    assert step.roll.walk_roll == 10


def test_natural_one_walks_two_rows_harsher(tables):
    table = tables.climate_table("temperate", "summer")
    step = next_condition(ConditionState("Clear Skies", 0), table, tables, ScriptedDice({20: [1]}))
    assert step.state == ConditionState("Rain", 0)


def test_walk_clamps_at_table_edges(tables):
    table = tables.climate_table("temperate", "summer")
    step = next_condition(ConditionState("Scorching Heat", 0), table, tables, ScriptedDice({20: [19, 20]}))
    assert step.state.condition == "Scorching Heat"
    assert step.state.energy == 1


def test_condition_missing_from_table_is_redrawn(tables):
    table = tables.climate_table("desert", "summer")
    dice = ScriptedDice({20: [20], 6: [6, 6, 6]})
    step = next_condition(ConditionState("Blizzard", 0), table, tables, dice)
    assert step.roll.redrawn
    assert step.state == ConditionState("Scorching Heat", 0)
