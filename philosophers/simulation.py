"""Threads that run the dining philosophers and the monitor that watches them."""

from __future__ import annotations

import sys
import threading
import time
from typing import TextIO

from philosophers.args import Settings
from philosophers.table import Philosopher, Table, timestamp_ms

_MONITOR_PAUSE = 0.0005


def _sleep_ms(milliseconds: float) -> None:
    if milliseconds > 0:
        time.sleep(milliseconds / 1000)


def run_lone_philosopher(settings: Settings, out: TextIO | None = None) -> None:
    """Play out a table with a single philosopher, who holds one fork and dies."""
    out = sys.stdout if out is None else out
    start_time = timestamp_ms()
    out.write(f"{timestamp_ms() - start_time} 1 has taken a fork\n")
    _sleep_ms(settings.time_to_die)
    out.write(f"{settings.time_to_die} 1 died\n")
    out.flush()


class Simulation:
    """One dinner: a thread per philosopher plus a monitor thread."""

    def __init__(self, settings: Settings, out: TextIO | None = None) -> None:
        self.settings = settings
        self.table = Table(settings)
        self.out = sys.stdout if out is None else out
        self.start_time = timestamp_ms()
        self._print_lock = threading.Lock()
        self._state_lock = threading.Lock()
        self._started = threading.Event()
        self._running = False
        self._all_ate = False

    @property
    def running(self) -> bool:
        """Whether the dinner is still going on."""
        with self._state_lock:
            return self._running

    @running.setter
    def running(self, value: bool) -> None:
        with self._state_lock:
            self._running = value

    @property
    def all_ate(self) -> bool:
        """Whether the dinner ended because everyone had eaten enough."""
        with self._state_lock:
            return self._all_ate

    def _should_stop(self) -> bool:
        with self._state_lock:
            return not self._running or self._all_ate

    def announce(self, philosopher: Philosopher, message: str) -> None:
        """Print a timestamped status line, but only while the dinner runs."""
        with self._print_lock, self._state_lock:
            if self._running:
                elapsed = timestamp_ms() - self.start_time
                self.out.write(f"{elapsed} {philosopher.id} {message}\n")
                self.out.flush()

    def _take_forks(
        self, philosopher: Philosopher
    ) -> tuple[threading.Lock, threading.Lock] | None:
        if self._should_stop():
            return None
        first, second = philosopher.forks_in_order()
        first.acquire()
        self.announce(philosopher, "has taken a fork")
        second.acquire()
        self.announce(philosopher, "has taken a fork")
        return first, second

    def _eat(self, philosopher: Philosopher) -> None:
        with self.table.meal_lock:
            philosopher.last_meal_time = timestamp_ms()
            philosopher.meals_eaten += 1
        self.announce(philosopher, "is eating")
        _sleep_ms(self.settings.time_to_eat)

    def live(self, philosopher: Philosopher) -> None:
        """The life of one philosopher: take forks, eat, sleep, think, repeat."""
        settings = self.settings
        self._started.wait()
        with self.table.meal_lock:
            philosopher.last_meal_time = timestamp_ms()
        if philosopher.id % 2 == 0:
            _sleep_ms(settings.time_to_eat / 2)

        while not self._should_stop():
            forks = self._take_forks(philosopher)
            if forks is None:
                break
            try:
                self._eat(philosopher)
            finally:
                for fork in forks:
                    fork.release()
            self.announce(philosopher, "is sleeping")
            _sleep_ms(settings.time_to_sleep)
            self.announce(philosopher, "is thinking")
            if (
                settings.number_of_philosophers % 2 != 0
                and settings.time_to_eat >= settings.time_to_sleep
            ):
                _sleep_ms(settings.time_to_eat)

    def check_once(self) -> bool:
        """Look at every philosopher once; return True when the dinner is over."""
        for philosopher in self.table:
            now = timestamp_ms()
            with self.table.meal_lock:
                starved = philosopher.starving_for(now) >= self.settings.time_to_die
            if starved:
                with self._print_lock:
                    self.out.write(f"{now - self.start_time} {philosopher.id} died\n")
                    self.out.flush()
                    self.running = False
                return True
            if self.table.all_ate():
                with self._state_lock:
                    self._all_ate = True
                    self._running = False
                return True
        return False

    def monitor(self) -> None:
        """Watch the table until someone dies or everyone has eaten enough."""
        while not self.check_once():
            time.sleep(_MONITOR_PAUSE)

    def run(self) -> None:
        """Run the whole dinner and wait for every thread to finish."""
        if self.settings.number_of_philosophers == 1:
            run_lone_philosopher(self.settings, self.out)
            return
        workers = [
            threading.Thread(target=self.live, args=(philosopher,), daemon=True)
            for philosopher in self.table
        ]
        for worker in workers:
            worker.start()
        self.start_time = timestamp_ms()
        self.running = True
        self._started.set()
        watcher = threading.Thread(target=self.monitor, daemon=True)
        watcher.start()
        for worker in workers:
            worker.join()
        watcher.join()