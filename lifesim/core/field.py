"""Sparse Game of Life field.

A Field stores only the coordinates of live cells, so the plane it lives on
has no size limit in any direction. Generations are values: ``step()`` builds
a new Field and never touches the one it was called on.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Iterator, Optional, Protocol

from lifesim.core.cell import Cell
from lifesim.core.exceptions import RenderError
from lifesim.utils.consts import (
    ALIVE,
    DEAD,
    DEFAULT_DISPLAY_PADDING,
    EMPTY_FIELD,
    ROW_SEPARATOR,
)

Bounds = tuple[int, int, int, int]


class TextSink(Protocol):
    """Anything a rendered field can be written to."""

    def write(self, text: str) -> object: ...


class Field:
    """The set of live cells for one generation."""

    def __init__(self, cells: Iterable[Cell] = ()):
        self._cells: set[Cell] = set(cells)

    @classmethod
    def from_text(cls, text: str) -> Field:
        """Build a field from rows of ``X`` (alive) and anything else (dead).

        Row index becomes y and column index becomes x. Unknown characters
        are dead cells; rows may differ in length.
        """
        field = cls()
        for y, line in enumerate(text.split(ROW_SEPARATOR)):
            for x, char in enumerate(line):
                if char == ALIVE:
                    field.add(Cell(x, y))
        return field

    def add(self, cell: Cell) -> None:
        """Mark ``cell`` alive. Only meant for use while building a field."""
        self._cells.add(cell)

    @property
    def cells(self) -> frozenset[Cell]:
        return frozenset(self._cells)

    def neighbor_counts(self) -> dict[Cell, int]:
        """Count live neighbours for every cell adjacent to a live cell.

        Cells with no live neighbour are left out of the mapping.
        """
        counts: Counter[Cell] = Counter()
        for cell in self._cells:
            counts.update(cell.neighbors())
        return dict(counts)

    def step(self) -> Field:
        """Return the next generation under the B3/S23 rule."""
        return Field(
            cell
            for cell, count in self.neighbor_counts().items()
            if count == 3 or (count == 2 and cell in self._cells)
        )

    def bounds(self) -> Optional[Bounds]:
        """Return (min_x, min_y, max_x, max_y) of the live cells, or None."""
        if not self._cells:
            return None
        xs = [cell.x for cell in self._cells]
        ys = [cell.y for cell in self._cells]
        return min(xs), min(ys), max(xs), max(ys)

    def _rows(self, bounds: Bounds, padding: int) -> Iterator[str]:
        min_x, min_y, max_x, max_y = bounds
        for y in range(min_y - padding, max_y + 1 + padding):
            row = "".join(
                ALIVE if Cell(x, y) in self._cells else DEAD
                for x in range(min_x - padding, max_x + 1 + padding)
            )
            yield row + ROW_SEPARATOR

    def to_string(self, padding: int = 0) -> str:
        """Render the bounding box of the live cells, grown by ``padding``.

        Every row, the last included, ends with a line feed. An empty field
        renders as ``"empty"``.
        """
        if padding < 0:
            raise ValueError("padding must be >= 0")
        bounds = self.bounds()
        if bounds is None:
            return EMPTY_FIELD
        return "".join(self._rows(bounds, padding))

    def write(self, sink: TextSink, padding: int = 0) -> None:
        """Write the rendering of this field to ``sink``.

        Raises:
            RenderError: if the sink fails with an OSError
        """
        text = self.to_string(padding)
        try:
            sink.write(text)
        except OSError as exc:
            raise RenderError(
                f"Failed to write field: {exc}",
                details={"population": len(self._cells)},
            ) from exc

    def __str__(self) -> str:
        return self.to_string(DEFAULT_DISPLAY_PADDING)

    def __repr__(self) -> str:
        return f"Field({sorted(self._cells)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Field):
            return NotImplemented
        return self._cells == other._cells

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, cell: object) -> bool:
        return cell in self._cells

    def __iter__(self) -> Iterator[Cell]:
        return iter(sorted(self._cells))


def parse(text: str) -> Field:
    """Parse a textual pattern into a Field."""
    return Field.from_text(text)


def render(field: Field, padding: int = 0) -> str:
    """Render ``field`` as text; ``padding=0`` round-trips with :func:`parse`."""
    return field.to_string(padding)
