"""Simulation engine for advancing a field generation by generation."""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from lifesim.core.clock import Clock
from lifesim.core.field import Field

logger = logging.getLogger(__name__)


class SimulationEngine:
    """Owns the current generation and advances it serially.

    Each advance replaces the current field with ``field.step()`` and moves
    the clock on by one, so subscribers see every generation. Earlier
    generations are never modified and may be kept by the caller.
    """

    def __init__(self, field: Field, clock: Optional[Clock] = None):
        # Own copy: the caller's Field can still grow through add().
        self._initial = Field(field.cells)
        self._field = Field(self._initial.cells)
        self._clock = clock if clock is not None else Clock()

    @property
    def field(self) -> Field:
        return self._field

    @property
    def initial_field(self) -> Field:
        return Field(self._initial.cells)

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def generation(self) -> int:
        return self._clock.generation

    @property
    def population(self) -> int:
        return len(self._field)

    def step(self, generations: int = 1) -> Field:
        """Advance by a number of generations and return the new field."""
        if generations < 0:
            raise ValueError("generations must be >= 0")
        for _ in range(generations):
            self._field = self._field.step()
            generation = self._clock.advance()
            logger.debug("generation %d: population %d", generation, len(self._field))
        return self._field

    def run(self, generations: int = 1) -> Field:
        """Run the simulation for the given number of generations."""
        return self.step(generations)

    def iter_generations(self, limit: Optional[int] = None) -> Iterator[Field]:
        """Yield successive generations, forever when ``limit`` is None."""
        produced = 0
        while limit is None or produced < limit:
            yield self.step()
            produced += 1

    def is_stable(self) -> bool:
        """True when the next generation equals the current one."""
        return self._field.step() == self._field

    def reset(self) -> None:
        """Return to the initial field and zero the generation count."""
        self._field = Field(self._initial.cells)
        self._clock.reset()
