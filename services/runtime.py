"""
Clock and random-source collaborators.

The date fallback needs "today" and the timeline/geography builders sample
sentences at random. Both are passed in so tests can pin them down.
"""

import random
from datetime import date
from typing import Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")


class Clock(Protocol):
    def today(self) -> date: ...


class RandomSource(Protocol):
    def choice(self, seq: Sequence[T]) -> T: ...


class SystemClock:
    """Wall-clock time."""

    def today(self) -> date:
        return date.today()


class FixedClock:
    """Always reports the same day."""

    def __init__(self, day: date):
        self.day = day

    def today(self) -> date:
        return self.day


def default_random(seed: Optional[int] = None) -> random.Random:
    """Uniform random source, reproducible when seeded."""
    return random.Random(seed)
