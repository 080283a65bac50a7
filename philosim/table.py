"""The dining table: forks, philosophers and the watcher that detects starvation."""

from __future__ import annotations

import threading
import time
from typing import TextIO

from philosim.args import Settings

_POLL_SECONDS = 0.00005
_WATCH_PAUSE_SECONDS = 0.0001


def _now_ms() -> int:
    return time.monotonic_ns() // 1_000_000


class Philosopher:
    """One diner, sharing a fork on each side with its neighbours."""

    def __init__(
        self,
        table: Table,
        ident: int,
        left: threading.Lock,
        right: threading.Lock,
    ) -> None:
        self.table = table
        self.ident = ident
        self.left = left
        self.right = right
        self.meals_eaten = 0
        self.last_meal_time = 0

    def _fork_order(self) -> tuple[threading.Lock, threading.Lock]:
        if self.ident % 2 == 0:
            return self.left, self.right
        return self.right, self.left

    def take_forks(self) -> bool:
        """Pick up both forks; return False if the meal is over because someone died."""
        if self.table.someone_died():
            return False
        for fork in self._fork_order():
            fork.acquire()
            self.table.announce(self, "has taken a fork")
        return True

    def eat(self) -> None:
        """Eat with both forks in hand, then put them down."""
        with self.table.meals_lock:
            self.last_meal_time = self.table.elapsed()
            self.meals_eaten += 1
        self.table.announce(self, "is eating")
        self.table.sleep(self.table.settings.time_to_eat)
        for fork in self._fork_order():
            fork.release()

    def _finished(self) -> bool:
        meals = self.table.settings.meals
        return meals is not None and self.meals_eaten >= meals

    def live(self) -> None:
        """Eat, sleep and think until someone dies or enough meals are eaten."""
        if self.ident % 2 != 0:
            self.table.sleep(self.table.settings.time_to_eat)
        while True:
            with self.table.meals_lock:
                if self.table.someone_died() or self._finished():
                    break
            if not self.take_forks():
                break
            self.eat()
            self.table.announce(self, "is sleeping")
            self.table.sleep(self.table.settings.time_to_sleep)
            self.table.announce(self, "is thinking")

    def live_alone(self) -> None:
        """With a single fork on the table the only philosopher starves."""
        with self.left:
            self.table.announce(self, "has taken a fork")
            self.table.sleep(self.table.settings.time_to_die)
        self.table.announce(self, "died")


class Table:
    """Shared state of one simulation and the output it writes to."""

    def __init__(self, settings: Settings, out: TextIO) -> None:
        self.settings = settings
        self.out = out
        self.start_time = _now_ms()
        self.stdout_lock = threading.Lock()
        self.meals_lock = threading.Lock()
        self.death_lock = threading.Lock()
        self._someone_died = False
        count = settings.philosophers
        self.forks = [threading.Lock() for _ in range(count)]
        self.philosophers = [
            Philosopher(self, index + 1, fork, self.forks[(index + 1) % count])
            for index, fork in enumerate(self.forks)
        ]

    def elapsed(self) -> int:
        """Milliseconds since the simulation started."""
        return _now_ms() - self.start_time

    def someone_died(self) -> bool:
        with self.death_lock:
            return self._someone_died

    def _write(self, ident: int, message: str) -> None:
        self.out.write(f"{self.elapsed()}   {ident} {message}\n")
        self.out.flush()

    def announce(self, philosopher: Philosopher, message: str) -> None:
        """Print a state change, unless the simulation has already ended in a death."""
        if self.someone_died():
            return
        with self.stdout_lock:
            self._write(philosopher.ident, message)

    def sleep(self, milliseconds: int) -> None:
        """Wait for the given time, waking early if someone dies."""
        started = self.elapsed()
        while self.elapsed() - started < milliseconds:
            time.sleep(_POLL_SECONDS)
            if self.someone_died():
                break

    def flag_death(self, philosopher: Philosopher) -> None:
        """Record a death and print it; later announcements are suppressed."""
        with self.death_lock, self.stdout_lock:
            self._someone_died = True
            self._write(philosopher.ident, "died")

    def watch(self) -> None:
        """Scan the philosophers until one has gone too long without eating."""
        limit = self.settings.time_to_die
        meals = self.settings.meals
        while True:
            for philosopher in self.philosophers:
                with self.meals_lock:
                    if self.elapsed() - philosopher.last_meal_time > limit:
                        if meals is None or philosopher.meals_eaten < meals:
                            self.flag_death(philosopher)
                        return
            time.sleep(_WATCH_PAUSE_SECONDS)

    def run(self) -> None:
        """Run the whole simulation and return when every thread has finished."""
        self.start_time = _now_ms()
        if len(self.philosophers) == 1:
            alone = threading.Thread(target=self.philosophers[0].live_alone)
            alone.start()
            alone.join()
            return
        threads = []
        for philosopher in self.philosophers:
            with self.meals_lock:
                philosopher.last_meal_time = self.elapsed()
            thread = threading.Thread(target=philosopher.live)
            thread.start()
            threads.append(thread)
        watcher = threading.Thread(target=self.watch)
        watcher.start()
        for thread in threads:
            thread.join()
        watcher.join()