"""Board abstraction - behavioral contract.

A Board owns a fixed-size, row-major grid of cells and advances it one
generation at a time. Renderers and hosts depend only on this interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lifesim.core.cell import Cell


class Board(ABC):
    """Base class for Life boards.

    Every concrete board implementation (e.g., LifeBoard) must inherit
    from this class and implement all abstract members.
    """

    @property
    @abstractmethod
    def row_size(self) -> int:
        """Number of columns per row."""
        ...

    @property
    @abstractmethod
    def rows(self) -> int:
        """Number of rows."""
        ...

    @property
    @abstractmethod
    def cells(self) -> tuple[Cell, ...]:
        """Read-only row-major view of the current cells."""
        ...

    @property
    @abstractmethod
    def generation(self) -> int:
        """Number of generations applied since construction or reset."""
        ...

    @abstractmethod
    def step(self, generations: int = 1) -> int:
        """Advance the board, returning the number of cells that changed."""
        ...

    @abstractmethod
    def tick(self, cycles: int = 1) -> None:
        """Clock subscriber hook; advances by ``cycles`` generations."""
        ...

    @abstractmethod
    def reset(self) -> None:
        """Restore the board to its construction-time cells."""
        ...
