from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence, TypeVar
import random


T = TypeVar("T")


class Dice:
    """Tabletop dice on top of a ``random.Random``.

    Every random draw in the weather core goes through one of these, so a
    forecast can be replayed from a seed or driven by fixed rolls in tests.
    """

    def __init__(self, rng: Optional[random.Random] = None, seed: Optional[int] = None):
        if rng is None:
            rng = random.Random(seed)
        self.rng = rng

    # ---------- dice ----------

    def d(self, sides: int) -> int:
        return self.rng.randint(1, sides)

    def d6(self) -> int:
        return self.d(6)

    def d8(self) -> int:
        return self.d(8)

    def d20(self) -> int:
        return self.d(20)

    def d100(self) -> int:
        return self.d(100)

    def weighted_d100(self) -> int:
        """3d6 bell curve stretched over 1..100 (middle results are common)."""
        roll = self.d6() + self.d6() + self.d6()
        normalized = int(((roll - 3) / 15) * 100) + 1
        return min(max(normalized, 1), 100)

    # ---------- continuous draws ----------

    def random(self) -> float:
        return self.rng.random()

    def uniform(self, a: float, b: float) -> float:
        return a + (b - a) * self.random()

    def randint(self, a: int, b: int) -> int:
        return self.rng.randint(a, b)

    def choice(self, items: Sequence[T]) -> T:
        return items[self.rng.randrange(len(items))]


class ScriptedDice(Dice):
    """Dice that replay queued results before falling back to a seeded rng.

    ``rolls`` maps a die size to the results it should return in order,
    e.g. ``{20: [1, 15], 8: [8]}``. ``randoms`` feeds ``random()`` (and so
    ``uniform()``).
    """

    def __init__(self,
                 rolls: Optional[Dict[int, Iterable[int]]] = None,
                 randoms: Optional[Iterable[float]] = None,
                 seed: int = 0):
        super().__init__(seed=seed)
        self._rolls: Dict[int, List[int]] = {int(k): list(v) for k, v in (rolls or {}).items()}
        self._randoms: List[float] = list(randoms or [])

    def queue(self, sides: int, *results: int) -> None:
        self._rolls.setdefault(int(sides), []).extend(results)

    def queue_random(self, *values: float) -> None:
        self._randoms.extend(values)

    def d(self, sides: int) -> int:
        pending = self._rolls.get(sides)
        if pending:
            return pending.pop(0)
        return super().d(sides)

    def random(self) -> float:
        if self._randoms:
            return self._randoms.pop(0)
        return super().random()
