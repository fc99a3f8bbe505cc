"""Conway's Game of Life on a bounded grid.

lifesim advances a fixed-size, row-major board one generation at a time
using a two-phase step: every cell's next state is computed against the
previous generation, then all changes are committed together.

Getting started:
    from lifesim import LifeBoard

    board = LifeBoard.default()
    board.step()
    print(board)
"""

__version__ = "0.1.0"

from lifesim.interfaces.board import Board
from lifesim.core.board import LifeBoard
from lifesim.core.cell import Cell
from lifesim.core.clock import Clock
from lifesim.core.exceptions import (
    ConfigurationError,
    InvalidCellError,
    InvalidLengthError,
    LifeError,
)
from lifesim.core.grid import Update, coordinates_of, index_of
from lifesim.core.patterns import list_available_patterns, register_pattern
from lifesim.core.render import render_html, render_text
from lifesim.core.simulation_engine import SimulationEngine
from lifesim.host.backend import GameBackend

__all__ = [
    # Core
    "Board",
    "LifeBoard",
    "Cell",
    "Update",
    "Clock",
    "SimulationEngine",
    # Indexing
    "index_of",
    "coordinates_of",
    # Patterns
    "list_available_patterns",
    "register_pattern",
    # Rendering
    "render_text",
    "render_html",
    # Host binding
    "GameBackend",
    # Errors
    "LifeError",
    "ConfigurationError",
    "InvalidLengthError",
    "InvalidCellError",
]
