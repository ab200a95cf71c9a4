from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import hashlib
import random
from typing import Any, Callable, Optional, Sequence

from .dice import Dice
from forecast_forge.weather.climate import WeatherTables, load_json_table
from forecast_forge.weather.config import ForecastConfig


def _stable_int_from_parts(parts: Sequence[Any]) -> int:
    h = hashlib.sha256()
    for p in parts:
        h.update(str(p).encode("utf-8"))
        h.update(b"\x1f")
    # random.Random accepts up to 2**32-1 nicely, keep it compact
    return int.from_bytes(h.digest()[:4], "big")


@dataclass
class ForecastContext:
    """Shared services for the weather core.

    Holds the master seed every region derives its dice from, the tuning
    config, the data tables and the log callable.
    """

    master_seed: int = 1337
    log: Callable[[str], None] = print

    # Optional folder of JSON table overrides (climates.json, temperatures.json, ...)
    tables_dir: Optional[Path] = None
    config: ForecastConfig = field(default_factory=ForecastConfig)

    _tables: Optional[WeatherTables] = field(default=None, init=False, repr=False)

    # ---------- tables / config ----------

    @property
    def tables(self) -> WeatherTables:
        if self._tables is None:
            self._tables = WeatherTables.load(self.tables_dir, log=self.log)
        return self._tables

    def set_tables_dir(self, new_dir: Optional[Path]) -> None:
        self.tables_dir = Path(new_dir) if new_dir is not None else None
        self._tables = None

    def load_config(self, path: Path) -> ForecastConfig:
        data = load_json_table(Path(path), default=None)
        if not isinstance(data, dict):
            self.log(f"[Weather] No usable config at {path}; using defaults")
            self.config = ForecastConfig()
        else:
            self.config = ForecastConfig.from_dict(data)
        return self.config

    # ---------- RNG / reproducibility ----------

    def derive_seed(self, *parts: Any) -> int:
        """Derive a deterministic sub-seed from the master seed + arbitrary parts."""
        return _stable_int_from_parts((self.master_seed, *parts))

    def derive_rng(self, *parts: Any) -> random.Random:
        return random.Random(self.derive_seed(*parts))

    def derive_dice(self, *parts: Any) -> Dice:
        return Dice(self.derive_rng(*parts))
