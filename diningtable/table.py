"""Thread-based dining table: one thread per philosopher, one lock per fork."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass, field
from typing import TextIO

from .clock import now_ms, sleep_ms
from .config import Settings

_MONITOR_POLL_SECONDS = 100e-6
_STAGGER_SECONDS = 100e-6


@dataclass
class Fork:
    """A fork on the table, guarded by its own lock."""

    fork_id: int
    lock: threading.Lock = field(
        default_factory=threading.Lock, compare=False, repr=False
    )


@dataclass
class Philosopher:
    """State of one seat at the table.

    Philosophers at even positions pick up their left fork first and those
    at odd positions their right fork first, so the table cannot deadlock.
    """

    philo_id: int
    first_fork: Fork
    second_fork: Fork
    meals_eaten: int = 0
    last_eat_time: int = 0
    full: bool = False


class Table:
    """Runs the simulation with threads and writes its log to ``out``.

    Each log line reads ``<ms since start> <philosopher id> <action>``.
    """

    def __init__(self, settings: Settings, out: TextIO | None = None) -> None:
        if settings.philosophers < 2:
            raise ValueError("a threaded table needs at least two philosophers")
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        count = settings.philosophers
        self.forks = tuple(Fork(index) for index in range(count))
        start = now_ms()
        seats = []
        for index in range(count):
            left = self.forks[index]
            right = self.forks[(index + 1) % count]
            first, second = (left, right) if index % 2 == 0 else (right, left)
            seats.append(Philosopher(index + 1, first, second, last_eat_time=start))
        self.philosophers = tuple(seats)
        self.start_time = start
        self.full_count = 0
        self._running = True
        self._state_lock = threading.Lock()
        self._print_lock = threading.Lock()
        self._ready = threading.Event()

    def is_running(self) -> bool:
        """Return whether the simulation is still going."""
        with self._state_lock:
            return self._running

    def stop(self) -> None:
        """End the simulation; philosophers finish their current step and leave."""
        with self._state_lock:
            self._running = False

    def run(self) -> int | None:
        """Run the simulation until someone dies or everyone has eaten enough.

        Returns the id of the philosopher who died, or None if nobody did.
        """
        threads = [
            threading.Thread(target=self._dine, args=(philosopher,), daemon=True)
            for philosopher in self.philosophers
        ]
        for thread in threads:
            thread.start()
        time.sleep(_STAGGER_SECONDS)
        with self._state_lock:
            self.start_time = now_ms()
        self._ready.set()
        try:
            return self._monitor()
        finally:
            for thread in threads:
                thread.join()

    def _say(self, philosopher: Philosopher, action: str) -> None:
        with self._print_lock:
            if self.is_running():
                stamp = now_ms() - self.start_time
                self.out.write(f"{stamp} {philosopher.philo_id} {action}\n")

    def _dine(self, philosopher: Philosopher) -> None:
        self._ready.wait()
        if philosopher.philo_id % 2 == 0:
            time.sleep(_STAGGER_SECONDS)
        while self.is_running():
            self._eat(philosopher)
            if not self.is_running():
                break
            self._sleep_and_think(philosopher)

    def _eat(self, philosopher: Philosopher) -> None:
        if not self.is_running():
            return
        with philosopher.first_fork.lock:
            self._say(philosopher, "has taken a fork")
            with philosopher.second_fork.lock:
                self._say(philosopher, "has taken a fork")
                with self._state_lock:
                    philosopher.last_eat_time = now_ms()
                self._say(philosopher, "is eating")
                sleep_ms(self.settings.time_to_eat, self.is_running)
                with self._state_lock:
                    philosopher.meals_eaten += 1

    def _sleep_and_think(self, philosopher: Philosopher) -> None:
        settings = self.settings
        self._say(philosopher, "is sleeping")
        sleep_ms(settings.time_to_sleep, self.is_running)
        self._say(philosopher, "is thinking")
        if settings.philosophers % 2 == 1:
            sleep_ms(settings.time_to_eat * 2 - settings.time_to_sleep, self.is_running)

    def _monitor(self) -> int | None:
        while self.is_running():
            dead = self._find_dead()
            if dead is not None:
                return dead
            if self._everyone_full():
                return None
            time.sleep(_MONITOR_POLL_SECONDS)
        return None

    def _starved(self, philosopher: Philosopher) -> bool:
        now = now_ms()
        with self._state_lock:
            if philosopher.meals_eaten > 0:
                since = philosopher.last_eat_time
            else:
                since = self.start_time
        return self.settings.time_to_die < now - since

    def _find_dead(self) -> int | None:
        for philosopher in self.philosophers:
            if self._starved(philosopher):
                with self._print_lock:
                    with self._state_lock:
                        if not self._running:
                            return None
                        stamp = now_ms() - self.start_time
                        self.out.write(f"{stamp} {philosopher.philo_id} died\n")
                        self._running = False
                return philosopher.philo_id
        return None

    def _everyone_full(self) -> bool:
        limit = self.settings.meal_limit
        if not limit:
            return False
        with self._state_lock:
            for philosopher in self.philosophers:
                if philosopher.meals_eaten >= limit and not philosopher.full:
                    philosopher.full = True
                    self.full_count += 1
            if self.full_count >= len(self.philosophers):
                self._running = False
                return True
        return False