"""Simulation engine for orchestrating board execution."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lifesim.interfaces.board import Board

logger = logging.getLogger(__name__)


class SimulationEngine:
    """Minimal simulation engine.

    This delegates execution to the board's step/reset methods.
    """

    def run(self, board: "Board", generations: int = 1) -> int:
        """Run the board for the given number of generations."""
        return self.step(board, generations)

    def step(self, board: "Board", generations: int = 1) -> int:
        """Advance the board by a number of generations."""
        return board.step(generations)

    def reset(self, board: "Board") -> None:
        """Reset the board."""
        board.reset()

    def run_until_stable(self, board: "Board", max_generations: int) -> int:
        """Step until a generation changes nothing or the limit is reached.

        The generation that changes nothing is counted.

        Returns:
            Number of generations run
        """
        if max_generations < 0:
            raise ValueError("max_generations must be >= 0")

        for run in range(1, max_generations + 1):
            if board.step(1) == 0:
                logger.info(f"Board stable at generation {board.generation}")
                return run
        return max_generations
