from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

from .celestial import CelestialEventGenerator
from .climate import WeatherTables
from .conditions import ConditionRoll, ConditionState, next_condition, start_condition
from .config import ForecastConfig
from .seasons import AUTO, resolve_season
from .temperature import TemperatureModel
from .wind import WindModel


ONE_HOUR = timedelta(hours=1)


def top_of_hour(date: datetime) -> datetime:
    return date.replace(minute=0, second=0, microsecond=0)


# ----------------------------
# Data models
# ----------------------------

@dataclass(frozen=True)
class ForecastHour:
    date: datetime
    hour: int
    condition: str
    temperature: int
    wind_direction: str
    wind_speed: int
    wind_intensity: str
    effects: str = ""
    has_shooting_star: bool = False
    has_meteor_impact: bool = False
    is_transitional: bool = False
    transition_progress: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "hour": self.hour,
            "condition": self.condition,
            "temperature": self.temperature,
            "wind_direction": self.wind_direction,
            "wind_speed": self.wind_speed,
            "wind_intensity": self.wind_intensity,
            "effects": self.effects,
            "has_shooting_star": self.has_shooting_star,
            "has_meteor_impact": self.has_meteor_impact,
            "is_transitional": self.is_transitional,
            "transition_progress": self.transition_progress,
        }


@dataclass
class EngineState:
    """Generator state for one region.

    ``current_condition`` and the wind/temperature fields describe the tail
    of the queue, i.e. where the next chunk continues from.
    """
    biome: str
    season: str = AUTO
    current_condition: str = "Clear Skies"
    current_condition_energy: int = 0
    current_wind_direction: str = "N"
    current_wind_speed: int = 5
    last_temperature: Optional[int] = None
    forecast_queue: List[ForecastHour] = field(default_factory=list)
    last_roll: Optional[ConditionRoll] = None


# ----------------------------
# Engine
# ----------------------------

class WeatherEngine:
    """Rolling hourly forecast for one region.

    The queue always holds at least ``config.horizon_hours`` hours. It is
    built from chunks of 1..``max_chunk_hours`` hours that share a condition;
    temperature, wind and sky events are rolled per hour.
    """

    def __init__(self, tables: WeatherTables, dice,
                 config: Optional[ForecastConfig] = None):
        self.tables = tables
        self.dice = dice
        self.config = config or ForecastConfig()
        self.temperature = TemperatureModel(tables, self.config)
        self.wind = WindModel(tables, self.config)
        self.celestial = CelestialEventGenerator(tables)
        self.state: Optional[EngineState] = None

    @property
    def is_initialized(self) -> bool:
        return self.state is not None

    # ---------- public API ----------

    def initialize(self, biome: str, season: str, date: datetime) -> ForecastHour:
        self.state = EngineState(
            biome=biome,
            season=season or AUTO,
            current_wind_direction=self.wind.random_direction(self.dice),
            current_wind_speed=self.wind.random_speed(self.config.default_condition, self.dice),
        )
        self._fill(top_of_hour(date), first=True)
        return self.current()

    def advance_time(self, hours: int, date: Optional[datetime] = None) -> ForecastHour:
        """Consume ``hours`` from the front of the queue and top it back up.

        ``date`` is the moment before advancing; it only matters when every
        queued hour was consumed.
        """
        if self.state is None:
            raise RuntimeError("WeatherEngine.advance_time called before initialize")
        hours = int(hours)
        if hours < 0:
            raise ValueError(f"Cannot advance by a negative number of hours: {hours}")
        if hours == 0:
            return self.current()

        queue = self.state.forecast_queue
        if date is None:
            date = queue[0].date if queue else datetime.now()
        del queue[:hours]

        if queue:
            self._fill(queue[-1].date + ONE_HOUR)
        else:
            self._fill(top_of_hour(date) + timedelta(hours=hours))
        return self.current()

    def current(self) -> Optional[ForecastHour]:
        if self.state is None or not self.state.forecast_queue:
            return None
        return self.state.forecast_queue[0]

    def get_24_hour_forecast(self) -> List[ForecastHour]:
        if self.state is None:
            return []
        return list(self.state.forecast_queue[:24])

    @property
    def forecast(self) -> List[ForecastHour]:
        if self.state is None:
            return []
        return list(self.state.forecast_queue)

    # ---------- generation ----------

    def _fill(self, start: datetime, first: bool = False) -> None:
        st = self.state
        horizon = max(1, int(self.config.horizon_hours))
        while len(st.forecast_queue) < horizon:
            if st.forecast_queue:
                start = st.forecast_queue[-1].date + ONE_HOUR
            self._generate_chunk(start, first=first)
            first = False

    def _generate_chunk(self, start: datetime, first: bool = False) -> None:
        st = self.state
        cfg = self.config
        season = resolve_season(st.season, start)
        table = self.tables.climate_table(st.biome, season)

        if first:
            state = start_condition(table, self.dice, cfg.use_weighted_distribution, cfg.default_condition)
        else:
            state = ConditionState(st.current_condition, st.current_condition_energy)
        step = next_condition(state, table, self.tables, self.dice,
                              weighted=cfg.use_weighted_distribution,
                              default=cfg.default_condition)
        st.current_condition = step.state.condition
        st.current_condition_energy = step.state.energy
        st.last_roll = step.roll

        condition = st.current_condition
        hours = self.dice.d(max(1, int(cfg.max_chunk_hours)))
        for i in range(hours):
            date = start + timedelta(hours=i)
            st.forecast_queue.append(self._generate_hour(date, condition, season))

    def _generate_hour(self, date: datetime, condition: str, season: str) -> ForecastHour:
        st = self.state
        dice = self.dice

        temp = self.temperature.next_hour(st.last_temperature, condition, st.biome, season, date.hour, dice)
        st.last_temperature = temp

        st.current_wind_direction = self.wind.next_direction(st.current_wind_direction, dice)
        target = self.wind.random_speed(condition, dice)
        st.current_wind_speed = self.wind.next_speed(st.current_wind_speed, target, dice)
        speed = st.current_wind_speed

        events = self.celestial.roll(dice)

        parts = [self.tables.effect(condition), self.wind.effect_for_speed(speed), self.celestial.effects_text(events)]
        effects = "\n\n".join(p for p in parts if p)

        return ForecastHour(
            date=date,
            hour=date.hour,
            condition=condition,
            temperature=temp,
            wind_direction=st.current_wind_direction,
            wind_speed=speed,
            wind_intensity=self.wind.classify_intensity(speed),
            effects=effects,
            has_shooting_star=events.shooting_star,
            has_meteor_impact=events.meteor_impact,
        )
