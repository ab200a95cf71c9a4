from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional
import math

from forecast_forge.core.context import ForecastContext
from .blend import RegionTransitionBlender
from .forecast import ForecastHour, WeatherEngine
from .seasons import AUTO


# ----------------------------
# Region descriptors
# ----------------------------

@dataclass
class Region:
    """Minimal region record. Any object or mapping with ``id`` and
    ``climate`` works just as well."""
    id: str
    climate: str = "temperate"
    season: str = AUTO
    name: str = ""


def _field(region: Any, name: str, default: Any = None) -> Any:
    if isinstance(region, Mapping):
        return region.get(name, default)
    return getattr(region, name, default)


def region_id(region: Any) -> Optional[str]:
    rid = _field(region, "id")
    return None if rid is None else str(rid)


def region_climate(region: Any) -> str:
    return str(_field(region, "climate") or "temperate")


def region_season(region: Any) -> str:
    return str(_field(region, "season") or AUTO)


def region_label(region: Any) -> str:
    return str(_field(region, "name") or region_id(region))


# ----------------------------
# Travel state
# ----------------------------

@dataclass
class TransitionState:
    source_region: Any
    target_region: Any
    progress: float = 0.0
    duration_hours: int = 12
    elapsed_hours: float = 0.0


@dataclass(frozen=True)
class TransitionInfo:
    source_region: Any
    target_region: Any
    progress: float
    remaining_hours: int


# ----------------------------
# Service
# ----------------------------

class RegionWeatherService:
    """One weather engine per region id, plus the journey between two regions.

    Each region rolls its own dice derived from the context's master seed and
    the region id, so a region's weather does not depend on which other
    regions exist.
    """

    def __init__(self, ctx: Optional[ForecastContext] = None):
        self.ctx = ctx or ForecastContext()
        self.engines: Dict[str, WeatherEngine] = {}
        self.transition: Optional[TransitionState] = None
        self.blender = RegionTransitionBlender(self.ctx.tables)
        self.blend_dice = self.ctx.derive_dice("transition")

    # ---------- regions ----------

    def _engine(self, region: Any) -> Optional[WeatherEngine]:
        rid = region_id(region) if region is not None else None
        if rid is None:
            return None
        return self.engines.get(rid)

    def initialize_region(self, region: Any, date: Optional[datetime] = None) -> List[ForecastHour]:
        if region is None or region_id(region) is None:
            return []
        # one engine per id; initializing again restarts its forecast
        engine = self._engine(region)
        if engine is None:
            rid = region_id(region)
            engine = WeatherEngine(self.ctx.tables, self.ctx.derive_dice("region", rid), self.ctx.config)
            self.engines[rid] = engine
        engine.initialize(region_climate(region), region_season(region), date or datetime.now())
        self.ctx.log(
            f"[Weather] Initialized {region_label(region)} ({region_climate(region)}): "
            f"{engine.current().condition}"
        )
        return engine.get_24_hour_forecast()

    def advance_region(self, region: Any, hours: int, date: Optional[datetime] = None) -> List[ForecastHour]:
        if region is None or region_id(region) is None:
            return []
        if self._engine(region) is None:
            self.initialize_region(region, date)
        engine = self._engine(region)
        engine.advance_time(hours, date)
        return engine.get_24_hour_forecast()

    def get_region_forecast(self, region: Any) -> List[ForecastHour]:
        engine = self._engine(region)
        if engine is None:
            return []
        return engine.get_24_hour_forecast()

    # ---------- travel ----------

    def is_in_transition(self) -> bool:
        return self.transition is not None

    def start_transition(self, source: Any, target: Any,
                         date: Optional[datetime] = None) -> Optional[List[ForecastHour]]:
        if source is None or target is None:
            return None
        if region_id(source) == region_id(target):
            self.ctx.log("[Weather] Ignoring travel to the region you are already in")
            return None

        for region in (source, target):
            if self._engine(region) is None:
                self.initialize_region(region, date)

        self.transition = TransitionState(
            source_region=source,
            target_region=target,
            progress=0.0,
            duration_hours=max(1, int(self.ctx.config.transition_duration_hours)),
        )
        self.ctx.log(f"[Weather] Travel started: {region_label(source)} -> {region_label(target)}")
        return self.get_transition_weather()

    def advance_transition(self, hours: float) -> Optional[List[ForecastHour]]:
        tr = self.transition
        if tr is None:
            return None
        tr.elapsed_hours += max(0.0, float(hours))
        tr.progress = min(1.0, tr.elapsed_hours / tr.duration_hours)
        if tr.progress >= 1.0:
            return self.end_transition()
        return self.get_transition_weather()

    def end_transition(self) -> Optional[List[ForecastHour]]:
        tr = self.transition
        if tr is None:
            return None
        self.transition = None
        self.ctx.log(f"[Weather] Arrived in {region_label(tr.target_region)}")
        return self.get_region_forecast(tr.target_region)

    def get_transition_weather(self) -> Optional[List[ForecastHour]]:
        tr = self.transition
        if tr is None:
            return None
        return self.blender.blend(
            self.get_region_forecast(tr.source_region),
            self.get_region_forecast(tr.target_region),
            tr.progress,
            self.blend_dice,
        )

    def get_transition_info(self) -> Optional[TransitionInfo]:
        tr = self.transition
        if tr is None:
            return None
        return TransitionInfo(
            source_region=tr.source_region,
            target_region=tr.target_region,
            progress=tr.progress,
            remaining_hours=int(math.ceil(round(tr.duration_hours * (1 - tr.progress), 6))),
        )

    # ---------- clock ----------

    def advance_time(self, region: Any, hours: int, date: Optional[datetime] = None) -> List[ForecastHour]:
        """Move the world clock. While traveling both ends of the journey
        advance together and the blended (or arrival) forecast is returned."""
        tr = self.transition
        if tr is None:
            return self.advance_region(region, hours, date)
        self.advance_region(tr.source_region, hours, date)
        self.advance_region(tr.target_region, hours, date)
        return self.advance_transition(hours) or []
