"""Conway's Game of Life on an unbounded, sparse grid.

Only live cells are stored, so patterns can drift arbitrarily far in any
direction. Each generation is a new immutable-by-convention Field.

Getting started:
    from lifesim import parse, render

    field = parse(".X.\\n..X\\nXXX")
    field = field.step()
    print(render(field, padding=2))
"""

__version__ = "0.1.0"

from lifesim.core.cell import Cell
from lifesim.core.clock import Clock
from lifesim.core.exceptions import (
    ConfigurationError,
    LifeSimError,
    PatternError,
    RenderError,
)
from lifesim.core.field import Field, parse, render
from lifesim.core.patterns import create_field, list_available_patterns, load_pattern_file
from lifesim.core.simulation_engine import SimulationEngine
from lifesim.display.terminal import TerminalRenderer

__all__ = [
    # Core
    "Cell",
    "Field",
    "parse",
    "render",
    "Clock",
    "SimulationEngine",
    # Patterns
    "create_field",
    "list_available_patterns",
    "load_pattern_file",
    # Display
    "TerminalRenderer",
    # Errors
    "LifeSimError",
    "ConfigurationError",
    "PatternError",
    "RenderError",
]
