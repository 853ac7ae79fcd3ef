"""Dining table built on counting semaphores.

The forks form a shared pool rather than fixed pairs, and a second
semaphore lets at most half of the table reach for forks at once. Every
seat has its own watcher that notices when it starves.
"""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass
from typing import TextIO

from .clock import now_ms, sleep_ms
from .config import Settings

_WATCH_POLL_SECONDS = 100e-6
_STAGGER_SECONDS = 100e-6
_ACQUIRE_TIMEOUT_SECONDS = 1e-3


@dataclass
class Seat:
    """State of one philosopher at the semaphore table."""

    philo_id: int
    meals_eaten: int = 0
    last_eat_time: int = 0
    full: bool = False


class SemaphoreTable:
    """Runs the simulation with a shared fork pool and writes its log to ``out``.

    Each log line reads ``<ms since start> <philosopher id> <action>``.
    """

    def __init__(self, settings: Settings, out: TextIO | None = None) -> None:
        if settings.philosophers < 2:
            raise ValueError("a semaphore table needs at least two philosophers")
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        count = settings.philosophers
        self._forks = threading.Semaphore(count)
        self._fork_pairs = threading.Semaphore(count // 2)
        self._full = threading.Semaphore(0)
        self._print_lock = threading.Lock()
        self._state_lock = threading.Lock()
        self._ready = threading.Event()
        self._ended = threading.Event()
        self._dead: int | None = None
        self.start_time = now_ms()
        self.seats = tuple(
            Seat(index + 1, last_eat_time=self.start_time) for index in range(count)
        )

    def run(self) -> int | None:
        """Run until someone dies or every philosopher has eaten enough.

        Returns the id of the philosopher who died, or None if nobody did.
        """
        workers = []
        for seat in self.seats:
            workers.append(threading.Thread(target=self._dine, args=(seat,), daemon=True))
            workers.append(threading.Thread(target=self._watch, args=(seat,), daemon=True))
        if self.settings.has_meal_limit:
            workers.append(threading.Thread(target=self._count_full, daemon=True))
        for worker in workers:
            worker.start()
        with self._state_lock:
            self.start_time = now_ms()
            for seat in self.seats:
                seat.last_eat_time = self.start_time
        self._ready.set()
        self._ended.wait()
        for worker in workers:
            worker.join()
        return self._dead

    def _keep_going(self) -> bool:
        return not self._ended.is_set()

    def _finish(self, dead: int | None = None) -> None:
        with self._print_lock:
            if self._ended.is_set():
                return
            if dead is not None:
                stamp = now_ms() - self.start_time
                self.out.write(f"{stamp} {dead} died\n")
                self._dead = dead
            self._ended.set()

    def _say(self, seat: Seat, action: str) -> None:
        with self._print_lock:
            if not self._ended.is_set():
                stamp = now_ms() - self.start_time
                self.out.write(f"{stamp} {seat.philo_id} {action}\n")

    def _acquire(self, semaphore: threading.Semaphore) -> bool:
        while self._keep_going():
            if semaphore.acquire(timeout=_ACQUIRE_TIMEOUT_SECONDS):
                return True
        return False

    def _watch(self, seat: Seat) -> None:
        self._ready.wait()
        limit = self.settings.time_to_die
        while self._keep_going():
            time.sleep(_WATCH_POLL_SECONDS)
            with self._state_lock:
                since = seat.last_eat_time
            if limit < now_ms() - since:
                self._finish(seat.philo_id)
                return

    def _count_full(self) -> None:
        self._ready.wait()
        for _ in self.seats:
            if not self._acquire(self._full):
                return
        self._finish()

    def _dine(self, seat: Seat) -> None:
        self._ready.wait()
        if seat.philo_id % 2 == 0:
            time.sleep(_STAGGER_SECONDS)
        while self._keep_going():
            if not self._eat(seat):
                break
            if not self._keep_going():
                break
            self._sleep_and_think(seat)

    def _eat(self, seat: Seat) -> bool:
        if not self._acquire(self._fork_pairs):
            return False
        held = 0
        try:
            try:
                while held < 2 and self._acquire(self._forks):
                    held += 1
                    self._say(seat, "has taken a fork")
                if held < 2:
                    return False
                with self._state_lock:
                    seat.last_eat_time = now_ms()
                self._say(seat, "is eating")
            finally:
                self._fork_pairs.release()
            sleep_ms(self.settings.time_to_eat, self._keep_going)
            limit = self.settings.meal_limit
            with self._state_lock:
                seat.meals_eaten += 1
                reached = bool(limit) and seat.meals_eaten == limit and not seat.full
                if reached:
                    seat.full = True
            if reached:
                self._full.release()
            return True
        finally:
            for _ in range(held):
                self._forks.release()

    def _sleep_and_think(self, seat: Seat) -> None:
        settings = self.settings
        self._say(seat, "is sleeping")
        sleep_ms(settings.time_to_sleep, self._keep_going)
        self._say(seat, "is thinking")
        if settings.philosophers % 2 == 1:
            sleep_ms(settings.time_to_eat * 2 - settings.time_to_sleep, self._keep_going)