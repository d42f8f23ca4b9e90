"""The dining table: forks, philosophers and their threads."""

from __future__ import annotations

import sys
import threading
import time
from typing import TextIO

from .parsing import Settings


def clamp_durations(time_to_die: int, time_to_eat: int, time_to_sleep: int) -> tuple[int, int]:
    """Return (time_to_eat, time_to_sleep), cut down to time_to_die when dying is certain."""
    if time_to_sleep < time_to_die and time_to_eat < time_to_die < time_to_eat + time_to_sleep:
        return time_to_die, time_to_die
    if time_to_die <= time_to_sleep or time_to_die <= time_to_eat:
        return time_to_die, time_to_die
    return time_to_eat, time_to_sleep


class Philosopher:
    """One diner, holding the indexes of the two forks beside it."""

    def __init__(self, table: Table, ident: int, right_fork: int, left_fork: int) -> None:
        self.table = table
        self.id = ident
        self.right_fork = right_fork
        self.left_fork = left_fork
        self.meals_eaten = 0
        self.last_meal = 0

    def __repr__(self) -> str:
        return f"Philosopher(id={self.id}, meals_eaten={self.meals_eaten})"

    def take_forks_and_eat(self) -> bool:
        """Pick up both forks and eat; False if the simulation must stop."""
        table = self.table
        if table.should_stop(self):
            return False
        if self.id % 2 == 0:
            first, second = self.right_fork, self.left_fork
        else:
            first, second = self.left_fork, self.right_fork
        with table.forks[first]:
            if table.should_stop(self):
                return False
            table.announce(self, "has taken a fork")
            with table.forks[second]:
                if table.should_stop(self):
                    return False
                table.announce(self, "is eating")
                time.sleep(table.time_to_eat / 1000)
                self.last_meal = table.elapsed_ms()
        return True

    def sleep_and_think(self) -> bool:
        """Sleep, then think; False if the simulation must stop."""
        table = self.table
        if table.should_stop(self):
            return False
        table.announce(self, "is sleeping")
        time.sleep(table.time_to_sleep / 1000)
        if table.should_stop(self):
            return False
        table.announce(self, "is thinking")
        return True

    def run(self) -> None:
        """Live until death, the meal limit, or another diner's death."""
        table = self.table
        self.last_meal = table.elapsed_ms()
        if len(table.philosophers) == 1:
            table.announce(self, "has taken a fork")
            time.sleep(table.time_to_die / 1000)
            table.announce(self, "died")
            return
        while self.take_forks_and_eat():
            self.meals_eaten += 1
            if self.meals_eaten == table.settings.max_meals:
                break
            if not self.sleep_and_think():
                break


class Table:
    """Shared state of one simulation."""

    def __init__(self, settings: Settings, output: TextIO | None = None) -> None:
        self.settings = settings
        self.output = output if output is not None else sys.stdout
        self.time_to_die = settings.time_to_die
        self.time_to_eat = settings.time_to_eat
        self.time_to_sleep = settings.time_to_sleep
        self.is_dead = False
        self.forks = [threading.Lock() for _ in range(settings.philosophers)]
        self._dead_lock = threading.Lock()
        self._write_lock = threading.Lock()
        count = settings.philosophers
        self.philosophers = [
            Philosopher(self, index + 1, index, (index + 1) % count) for index in range(count)
        ]
        self._start = time.monotonic()

    def elapsed_ms(self) -> int:
        """Milliseconds since the table was laid."""
        return int((time.monotonic() - self._start) * 1000)

    def announce(self, philosopher: Philosopher, message: str) -> None:
        """Write one timestamped status line."""
        with self._write_lock:
            self.output.write(f"{self.elapsed_ms()} {philosopher.id} {message}\n")
            self.output.flush()

    def should_stop(self, philosopher: Philosopher) -> bool:
        """True once someone has died or this philosopher starves now."""
        with self._dead_lock:
            if self.is_dead:
                return True
        return self.check_starvation(philosopher)

    def check_starvation(self, philosopher: Philosopher) -> bool:
        """Declare the philosopher dead if it went too long without eating."""
        since_meal = self.elapsed_ms() - philosopher.last_meal
        if since_meal >= self.time_to_die:
            with self._dead_lock:
                self.is_dead = True
                self.announce(philosopher, "died")
            return True
        self.time_to_eat, self.time_to_sleep = clamp_durations(
            self.time_to_die, self.time_to_eat, self.time_to_sleep
        )
        return False

    def run(self) -> None:
        """Start one thread per philosopher and wait for all of them."""
        threads = [threading.Thread(target=philosopher.run) for philosopher in self.philosophers]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()