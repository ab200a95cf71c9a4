from forecast_forge.core.dice import ScriptedDice
from forecast_forge.weather.celestial import CelestialEventGenerator, CelestialEvents
from forecast_forge.weather.tables import CELESTIAL_EFFECTS


def test_meteor_text_supersedes_shooting_star(tables):
    gen = CelestialEventGenerator(tables)
    events = gen.roll(ScriptedDice({100: [100], 20: [20]}))
    assert events == CelestialEvents(shooting_star=True, meteor_impact=True)
    assert gen.effects_text(events) == CELESTIAL_EFFECTS["Meteor Impact"]


def test_shooting_star_alone(tables):
    gen = CelestialEventGenerator(tables)
    events = gen.roll(ScriptedDice({100: [100], 20: [3]}))
    assert events == CelestialEvents(shooting_star=True, meteor_impact=False)
    assert gen.effects_text(events) == CELESTIAL_EFFECTS["Shooting Star"]


def test_no_star_means_no_meteor_roll(tables):
    gen = CelestialEventGenerator(tables)
    dice = ScriptedDice({100: [99], 20: [20]})
    events = gen.roll(dice)
    assert events == CelestialEvents()
    assert gen.effects_text(events) == ""
    assert dice.d20() == 20
