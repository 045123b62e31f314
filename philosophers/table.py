"""Shared simulation state: settings, philosophers, forks and output."""

import enum
import sys
import threading
from dataclasses import dataclass, field
from typing import List, Optional

from .args import validate_args
from .clock import Clock


class State(enum.IntEnum):
    """What a philosopher does next."""

    EAT = 0
    SLEEP = 1
    THINK = 2


@dataclass(frozen=True)
class Settings:
    """Simulation parameters, durations in milliseconds."""

    philo_num: int
    die_dur: int
    eat_dur: int
    sleep_dur: int
    max_meals: Optional[int] = None

    @property
    def think_dur(self):
        """Half the slack left after eating and sleeping, truncated to zero."""
        return int((self.die_dur - self.eat_dur - self.sleep_dur) / 2)

    @classmethod
    def from_args(cls, args):
        """Build settings from the program arguments (without program name)."""
        values = validate_args(args)
        max_meals = values[4] if len(values) == 5 else None
        return cls(*values[:4], max_meals=max_meals)


@dataclass(eq=False)
class Philosopher:
    """One philosopher seated at the table."""

    id: int
    forks: List[int]
    state: State
    meal_count: int = 0
    last_meal: int = 0
    meal_lock: threading.Lock = field(default_factory=threading.Lock, repr=False)
    thread: Optional[threading.Thread] = field(default=None, repr=False)


def _initial_states(count):
    states = []
    alternate = State.EAT
    for _ in range(count):
        states.append(alternate)
        alternate = State.SLEEP if alternate == State.EAT else State.EAT
    if states:
        states[-1] = State.THINK
    return states


class Table:
    """Holds the philosophers, their forks and the shared flags."""

    def __init__(self, settings, out=None, clock=None):
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        self.clock = clock if clock is not None else Clock()
        count = settings.philo_num
        self.forks = [threading.Lock() for _ in range(count)]
        self.philosophers = [
            Philosopher(
                id=i + 1,
                forks=[i, (i + 1) % count],
                state=state,
            )
            for i, state in enumerate(_initial_states(count))
        ]
        self.has_started = False
        self._dead = False
        self._stamp_lock = threading.Lock()
        self._dead_lock = threading.Lock()
        self._start_lock = threading.Lock()
        self._released = threading.Event()

    def is_dead(self):
        """Whether the simulation has ended."""
        with self._dead_lock:
            return self._dead

    def stop(self):
        """End the simulation without printing anything."""
        with self._stamp_lock, self._dead_lock:
            self._dead = True
        self._released.set()

    def print_state(self, philo_id, time, text):
        """Print a state line unless the simulation has ended.

        An id of -1 prints regardless.
        """
        with self._stamp_lock, self._dead_lock:
            if not self._dead or philo_id == -1:
                print(f"{time} {philo_id} {text}", file=self.out, flush=True)

    def announce_death(self, philo_id):
        """End the simulation and print that ``philo_id`` died."""
        with self._stamp_lock, self._dead_lock:
            self._dead = True
            print(f"{self.clock.now()} {philo_id} died", file=self.out, flush=True)
        self._released.set()

    def start(self):
        """Mark the start time and release the waiting philosophers."""
        with self._start_lock:
            self.has_started = True
            self.clock.mark_start()
        self._released.set()

    def wait_for_start(self):
        """Block until started or stopped; return whether it started."""
        self._released.wait()
        with self._start_lock:
            return self.has_started