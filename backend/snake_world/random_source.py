"""
Random number sources for reward placement.

The world only ever asks for one thing: a uniform integer in
``[0, upper)``. Anything with a ``draw_uniform`` method will do, which lets
tests and replays feed the engine a fixed sequence.
"""

import random
from typing import Iterable, Optional, Protocol


class RandomSource(Protocol):
    def draw_uniform(self, upper: int) -> int:
        ...


def _check_upper(upper: int) -> None:
    if upper <= 0:
        raise ValueError(f"Upper bound must be positive, got {upper}.")


class PythonRandomSource:
    """Uniform draws backed by ``random.Random``. Pass a seed for repeatable games."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def draw_uniform(self, upper: int) -> int:
        _check_upper(upper)
        return self._rng.randrange(upper)

    def __repr__(self):
        return f"<PythonRandomSource seed={self.seed}>"


class SequenceRandomSource:
    """
    Replays a fixed sequence of values, once.

    Running past the end raises instead of starting over, so a world whose
    only scripted values are all occupied fails on the next reward draw
    rather than sampling forever. Every value must also fit the bound it is
    drawn against.
    """

    def __init__(self, values: Iterable[int]):
        self.values = list(values)
        if not self.values:
            raise ValueError("SequenceRandomSource needs at least one value.")
        self.draws = 0

    @property
    def remaining(self) -> int:
        return len(self.values) - self.draws

    def draw_uniform(self, upper: int) -> int:
        _check_upper(upper)
        if self.draws >= len(self.values):
            raise ValueError(f"Random sequence exhausted after {self.draws} draws.")
        value = self.values[self.draws]
        self.draws += 1
        if not 0 <= value < upper:
            raise ValueError(f"Sequence value {value} is outside [0, {upper}).")
        return value
