from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict


@dataclass
class ForecastConfig:
    """Tuning knobs for forecast generation and travel blending."""

    horizon_hours: int = 24
    max_chunk_hours: int = 8           # chunk length is a dN roll with N = this
    transition_duration_hours: int = 12

    max_temp_change: int = 5           # °F per hour
    default_temperature: int = 70
    default_condition: str = "Clear Skies"
    use_weighted_distribution: bool = True  # 3d6 bell curve instead of flat d100

    change_frequency: float = 0.3      # chance per hour that wind direction may shift
    direction_variability: int = 1     # octants moved per shift
    max_speed_change: int = 10         # mph per hour
    speed_jitter: float = 5.0          # ± mph noise added on the way to the target
    wind_effect_threshold: int = 15    # mph at which wind text joins the effects

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ForecastConfig":
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in (data or {}).items():
            if key not in known:
                continue
            default = getattr(cls, key)
            if isinstance(default, bool) and isinstance(value, str):
                kwargs[key] = value.strip().lower() in ("1", "true", "yes", "on")
                continue
            try:
                kwargs[key] = type(default)(value)
            except (TypeError, ValueError):
                continue
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
