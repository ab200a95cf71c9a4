import json

from forecast_forge.core.context import ForecastContext
from forecast_forge.weather.config import ForecastConfig


def test_derive_seed_is_stable():
    a = ForecastContext(master_seed=1)
    b = ForecastContext(master_seed=1)
    assert a.derive_seed("region", "vale") == b.derive_seed("region", "vale")
    assert a.derive_seed("region", "vale") != a.derive_seed("region", "peaks")
    assert ForecastContext(master_seed=2).derive_seed("region", "vale") != a.derive_seed("region", "vale")


def test_derived_dice_replay(ctx):
    one = ctx.derive_dice("x")
    two = ctx.derive_dice("x")
    assert [one.d20() for _ in range(10)] == [two.d20() for _ in range(10)]


def test_load_config(tmp_path, ctx):
    path = tmp_path / "weather.json"
    path.write_text(json.dumps({
        "horizon_hours": 30,
        "use_weighted_distribution": "false",
        "max_temp_change": "abc",
        "bogus": 1,
    }), encoding="utf-8")
    cfg = ctx.load_config(path)
    assert cfg is ctx.config
    assert cfg.horizon_hours == 30
    assert cfg.use_weighted_distribution is False
    assert cfg.max_temp_change == 5


def test_load_config_missing_file_logs(tmp_path, ctx, logs):
    cfg = ctx.load_config(tmp_path / "missing.json")
    assert cfg == ForecastConfig()
    assert any("No usable config" in m for m in logs)


def test_config_round_trip():
    cfg = ForecastConfig(transition_duration_hours=6, speed_jitter=2.5)
    assert ForecastConfig.from_dict(cfg.to_dict()) == cfg


def test_tables_dir_override(tmp_path, ctx):
    (tmp_path / "effects.json").write_text(json.dumps({"conditions": {"Rain": "Wet."}}), encoding="utf-8")
    assert ctx.tables.effect("Rain") != "Wet."
    ctx.set_tables_dir(tmp_path)
    assert ctx.tables.effect("Rain") == "Wet."
