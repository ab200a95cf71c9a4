import json

import pytest

from forecast_forge.core.dice import ScriptedDice
from forecast_forge.weather import tables as builtin
from forecast_forge.weather.climate import ClimateEntry, ClimateTable, WeatherTables


@pytest.mark.parametrize("biome, expected", [
    ("temperate", "temperate-deciduous"),
    ("arctic", "tundra"),
    ("Mountain", "boreal-forest"),
    ("swamp", "tropical-seasonal"),
    ("boreal-forest", "boreal-forest"),
])
def test_climate_key(tables, biome, expected):
    assert tables.climate_key(biome) == expected


def test_unknown_biome_falls_back_and_logs_once(tables, logs):
    assert tables.climate_key("moon") == "temperate-deciduous"
    assert tables.climate_key("moon") == "temperate-deciduous"
    assert len(logs) == 1
    assert "moon" in logs[0]


def test_missing_season_uses_spring(tables, logs):
    t = tables.climate_table("desert", "monsoon")
    assert t.season == "spring"
    assert t.conditions == [c for c, _, _ in builtin.CLIMATE_TABLES["desert"]["spring"]]
    assert logs


def test_index_lookup_and_clamp(tables):
    t = tables.climate_table("temperate", "winter")
    assert t.index_of("Blizzard") == 0
    assert t.index_of("Rain") == -1
    assert t.condition_at(-3) == "Blizzard"
    assert t.condition_at(99) == "Clear Skies"


def test_random_condition_flat_and_weighted(tables):
    t = tables.climate_table("temperate", "summer")
    assert t.random_condition(ScriptedDice({100: [50]}), weighted=False) == "Clear Skies"
    assert t.random_condition(ScriptedDice({6: [1, 1, 1]}), weighted=True) == "Thunderstorm"


def test_random_condition_outside_every_range_is_clear_skies():
    t = ClimateTable("test", "spring", [ClimateEntry("Rain", 1, 10)])
    assert t.random_condition(ScriptedDice({100: [50]}), weighted=False) == "Clear Skies"


def test_builtin_tables_cover_the_whole_d100():
    for climate, seasons in builtin.CLIMATE_TABLES.items():
        assert set(seasons) == set(builtin.SEASONS), climate
        for season, rows in seasons.items():
            expected = 1
            for _, lo, hi in rows:
                assert lo == expected, (climate, season)
                expected = hi + 1
            assert expected == 101, (climate, season)


def test_every_table_condition_has_temperature_wind_and_effects(tables):
    for climate, seasons in builtin.CLIMATE_TABLES.items():
        for season, rows in seasons.items():
            for condition, _, _ in rows:
                assert tables.temperature_range(climate, season, condition) is not None
                assert condition in tables.winds
                assert tables.effect(condition)


def test_regression_targets_are_known_conditions(tables):
    for condition, rule in tables.energy.items():
        if rule.regresses_to:
            assert rule.regresses_to in tables.energy, condition


def test_time_modifiers(tables):
    assert len(tables.time_modifiers) == 24
    assert tables.time_modifier(4) == -12
    assert tables.time_modifier(14) == 10
    assert tables.time_modifier(15) == 10


def test_load_overlays_json_files(tmp_path, logs):
    (tmp_path / "climates.json").write_text(json.dumps({
        "climates": {"desert": {"summer": [{"condition": "Blizzard", "min": 1, "max": 100}]}},
        "biomes": {"dunes": "desert"},
    }), encoding="utf-8")
    (tmp_path / "winds.json").write_text(json.dumps({"speeds": {"Rain": [30, 40]}}), encoding="utf-8")
    (tmp_path / "effects.json").write_text("{not json", encoding="utf-8")

    t = WeatherTables.load(tmp_path, log=logs.append)

    assert t.climate_table("dunes", "summer").conditions == ["Blizzard"]
    assert t.climate_table("desert", "winter").conditions[0] == "Rain"
    assert t.wind_range("Rain") == (30, 40)
    assert t.effect("Rain") == builtin.WEATHER_EFFECTS["Rain"]
    assert any("effects.json" in m for m in logs)


def test_load_missing_folder_uses_builtins(tmp_path, logs):
    t = WeatherTables.load(tmp_path / "nope", log=logs.append)
    assert t.climate_table("tundra", "winter").conditions[0] == "Blizzard"
    assert logs and "not found" in logs[0]
