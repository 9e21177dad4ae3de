"""Terminal frame renderer driven by the simulation clock."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from lifesim.core.exceptions import RenderError
from lifesim.core.simulation_engine import SimulationEngine
from lifesim.utils.consts import CLEAR_SCREEN, DEFAULT_DISPLAY_PADDING


class TerminalRenderer:
    """Draws the engine's current field every time the clock advances.

    Subscribe it to ``engine.clock`` (or call :meth:`attach`) and each
    generation is written as a full frame: optional screen clear, a status
    line, then the padded field.
    """

    def __init__(
        self,
        engine: SimulationEngine,
        stream: Optional[TextIO] = None,
        padding: int = DEFAULT_DISPLAY_PADDING,
        clear_screen: bool = True,
    ):
        if padding < 0:
            raise ValueError("padding must be >= 0")
        self._engine = engine
        self._stream = stream if stream is not None else sys.stdout
        self._padding = padding
        self._clear_screen = clear_screen
        self.frames_drawn = 0

    def attach(self) -> None:
        self._engine.clock.subscribe(self)

    def detach(self) -> None:
        self._engine.clock.unsubscribe(self)

    def on_generation(self, generation: int) -> None:
        self.show()

    def show(self) -> None:
        """Write the current generation as one frame."""
        engine = self._engine
        header = f"generation {engine.generation}, population {engine.population}\n"
        try:
            if self._clear_screen:
                self._stream.write(CLEAR_SCREEN)
            self._stream.write(header)
            engine.field.write(self._stream, self._padding)
            self._stream.write("\n")
            self._stream.flush()
        except OSError as exc:
            raise RenderError(
                f"Failed to draw frame: {exc}",
                details={"generation": engine.generation},
            ) from exc
        self.frames_drawn += 1
