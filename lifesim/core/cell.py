"""Grid coordinates on the unbounded Life plane."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Cell:
    """A single (x, y) position; x grows to the right, y grows downwards."""

    x: int
    y: int

    def neighbors(self) -> tuple[Cell, ...]:
        """Return the 8 surrounding cells.

        Order is row-major over x then y within the 3x3 block, skipping the
        cell itself: (x-1, y-1), (x-1, y), (x-1, y+1), (x, y-1), ...
        """
        return tuple(
            Cell(x, y)
            for x in range(self.x - 1, self.x + 2)
            for y in range(self.y - 1, self.y + 2)
            if (x, y) != (self.x, self.y)
        )
