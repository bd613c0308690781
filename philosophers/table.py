"""The round table: philosophers seated in a ring, one fork each."""

from __future__ import annotations

import threading
import time
from collections.abc import Iterator
from dataclasses import dataclass, field

from philosophers.args import Settings


def timestamp_ms() -> int:
    """Wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


@dataclass(eq=False)
class Philosopher:
    """One seat at the table, owning the fork to its left."""

    id: int
    last_meal_time: int = field(default_factory=timestamp_ms)
    meals_eaten: int = 0
    fork: threading.Lock = field(default_factory=threading.Lock, repr=False)
    neighbour: Philosopher | None = field(default=None, repr=False)

    def forks_in_order(self) -> tuple[threading.Lock, threading.Lock]:
        """The two forks this philosopher needs, lower-numbered seat first."""
        other = self.neighbour if self.neighbour is not None else self
        if self.id < other.id:
            return self.fork, other.fork
        return other.fork, self.fork

    def starving_for(self, now: int) -> int:
        """Milliseconds since the last meal began, as of ``now``."""
        return now - self.last_meal_time


class Table:
    """Philosophers numbered from 1, each sharing a fork with the next."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.meal_lock = threading.RLock()
        self.philosophers = [
            Philosopher(seat) for seat in range(1, settings.number_of_philosophers + 1)
        ]
        for philosopher, following in zip(
            self.philosophers, self.philosophers[1:] + self.philosophers[:1]
        ):
            philosopher.neighbour = following

    def __iter__(self) -> Iterator[Philosopher]:
        return iter(self.philosophers)

    def __len__(self) -> int:
        return len(self.philosophers)

    def all_ate(self) -> bool:
        """True once every philosopher has eaten the required number of meals."""
        target = self.settings.number_of_eats
        if target is None or target <= 0:
            return False
        with self.meal_lock:
            return all(p.meals_eaten >= target for p in self.philosophers)