"""Core modules for lifesim.

- cell: grid coordinates and neighbour enumeration
- field: sparse live-cell set, parsing, stepping and rendering
- clock: generation counter with subscribers
- simulation_engine: serial generation driver
- patterns: named seed pattern registry and file loading
"""

from lifesim.core.cell import Cell
from lifesim.core.clock import Clock
from lifesim.core.exceptions import (
    ConfigurationError,
    LifeSimError,
    PatternError,
    RenderError,
)
from lifesim.core.field import Field, parse, render
from lifesim.core.patterns import (
    PatternRegistry,
    create_field,
    list_available_patterns,
    load_pattern_file,
    register_pattern,
)
from lifesim.core.simulation_engine import SimulationEngine

__all__ = [
    "Cell",
    "Field",
    "parse",
    "render",
    "Clock",
    "SimulationEngine",
    "PatternRegistry",
    "create_field",
    "list_available_patterns",
    "load_pattern_file",
    "register_pattern",
    "LifeSimError",
    "ConfigurationError",
    "PatternError",
    "RenderError",
]
