"""Core modules for lifesim.

- cell: Cell state enumeration
- grid: row-major indexing helpers and the Update record
- board: LifeBoard, the generate-then-apply engine
- patterns: named seed pattern registry
- render: text and HTML projections
- clock / simulation_engine: tick source and orchestration
"""

from lifesim.core.board import LifeBoard
from lifesim.core.cell import Cell
from lifesim.core.clock import Clock
from lifesim.core.exceptions import (
    ConfigurationError,
    InvalidCellError,
    InvalidLengthError,
    LifeError,
)
from lifesim.core.grid import NEIGHBOR_OFFSETS, Update, coordinates_of, index_of
from lifesim.core.patterns import (
    PatternRegistry,
    get_pattern,
    list_available_patterns,
    register_pattern,
)
from lifesim.core.render import render_html, render_text
from lifesim.core.simulation_engine import SimulationEngine

__all__ = [
    # Cells and indexing
    "Cell",
    "NEIGHBOR_OFFSETS",
    "Update",
    "coordinates_of",
    "index_of",
    # Engine
    "LifeBoard",
    "SimulationEngine",
    "Clock",
    # Patterns
    "PatternRegistry",
    "get_pattern",
    "list_available_patterns",
    "register_pattern",
    # Rendering
    "render_html",
    "render_text",
    # Errors
    "LifeError",
    "ConfigurationError",
    "InvalidLengthError",
    "InvalidCellError",
]
