"""Life board engine.

LifeBoard owns a bounded, rectangular grid stored in row-major order and
advances it with a two-phase step: a read-only scan that records an Update
for every cell whose state changes, followed by a commit that applies them.
Neighbor counts therefore always see the previous generation.
"""

from __future__ import annotations

import logging
import random
from typing import Iterable, Optional

from lifesim.core.cell import Cell
from lifesim.core.exceptions import InvalidLengthError
from lifesim.core.grid import NEIGHBOR_OFFSETS, Update, coordinates_of, in_bounds, index_of
from lifesim.core.patterns import DEFAULT_PATTERN, get_pattern
from lifesim.core.render import render_text
from lifesim.interfaces.board import Board
from lifesim.interfaces.random_source import RandomSource
from lifesim.utils.consts import DEFAULT_ROW_SIZE, DEFAULT_ROWS

logger = logging.getLogger(__name__)


def _check_row_size(length: int, row_size: int) -> None:
    # bool is an int subclass but never a width
    if isinstance(row_size, bool) or not isinstance(row_size, int) or row_size <= 0:
        raise InvalidLengthError(length, row_size)


class LifeBoard(Board):
    """Conway's Game of Life (B3/S23) on a bounded grid."""

    def __init__(self, cells: Iterable, row_size: int):
        """Create a board from a row-major cell sequence.

        Prefer from_cells(); this constructor performs the same validation.

        Raises:
            InvalidLengthError: If the sequence length is not a positive
                multiple of row_size
            InvalidCellError: If a value is not a valid cell state
        """
        board = [Cell.coerce(value) for value in cells]
        _check_row_size(len(board), row_size)
        if not board or len(board) % row_size != 0:
            raise InvalidLengthError(len(board), row_size)

        self._board: list[Cell] = board
        self._row_size = row_size
        self._initial: tuple[Cell, ...] = tuple(board)
        self._generation = 0

    @classmethod
    def from_cells(cls, cells: Iterable, row_size: int) -> "LifeBoard":
        """Build a board from explicit cells (Cell, 0/1 or bool values)."""
        return cls(cells, row_size)

    @classmethod
    def empty(cls, row_size: int, rows: int) -> "LifeBoard":
        _check_row_size(0, row_size)
        return cls([Cell.DEAD] * (row_size * max(rows, 0)), row_size)

    @classmethod
    def from_pattern(
        cls,
        name: str,
        row_size: int,
        rows: int,
        origin: tuple[int, int] = (0, 0),
    ) -> "LifeBoard":
        """Place a registered pattern on an otherwise dead grid.

        Pattern cells that fall outside the grid are dropped.
        """
        board = cls.empty(row_size, rows)
        origin_row, origin_col = origin
        for d_row, d_col in get_pattern(name):
            row, col = origin_row + d_row, origin_col + d_col
            if in_bounds(row, col, rows, row_size):
                board._board[index_of(row, col, row_size)] = Cell.ALIVE
        board._initial = tuple(board._board)
        return board

    @classmethod
    def default(
        cls, row_size: int = DEFAULT_ROW_SIZE, rows: int = DEFAULT_ROWS
    ) -> "LifeBoard":
        """Dead grid seeded with a vertical three-cell bar in the top-left corner."""
        return cls.from_pattern(DEFAULT_PATTERN, row_size, rows)

    @classmethod
    def random(
        cls,
        row_size: int = DEFAULT_ROW_SIZE,
        rows: int = DEFAULT_ROWS,
        rng: Optional[RandomSource] = None,
    ) -> "LifeBoard":
        """Grid where each cell is alive with probability 0.5.

        Args:
            row_size: Columns per row
            rows: Number of rows
            rng: Callable returning a float in [0, 1) or a bool. A float is
                alive when >= 0.5. Defaults to a fresh random.Random().
        """
        _check_row_size(0, row_size)
        if rng is None:
            rng = random.Random().random

        def draw() -> Cell:
            value = rng()
            if isinstance(value, bool):
                return Cell.ALIVE if value else Cell.DEAD
            return Cell.ALIVE if value >= 0.5 else Cell.DEAD

        return cls([draw() for _ in range(row_size * max(rows, 0))], row_size)

    @property
    def row_size(self) -> int:
        return self._row_size

    @property
    def rows(self) -> int:
        return len(self._board) // self._row_size

    @property
    def cells(self) -> tuple[Cell, ...]:
        return tuple(self._board)

    @property
    def generation(self) -> int:
        return self._generation

    def as_bytes(self) -> bytes:
        """One byte per cell (0 dead, 1 alive) in row-major order."""
        return bytes(self._board)

    def population(self) -> int:
        return sum(1 for cell in self._board if cell is Cell.ALIVE)

    def is_extinct(self) -> bool:
        return Cell.ALIVE not in self._board

    def cell_at(self, row: int, col: int) -> Cell:
        return self._board[index_of(row, col, self._row_size)]

    def alive_neighbor_count(self, index: int) -> int:
        """Count alive cells among the eight neighbors of ``index``.

        The grid has hard edges: offsets that leave the grid are skipped.
        """
        row, col = coordinates_of(index, self._row_size)
        rows = self.rows
        count = 0
        for d_row, d_col in NEIGHBOR_OFFSETS:
            n_row, n_col = row + d_row, col + d_col
            if not in_bounds(n_row, n_col, rows, self._row_size):
                continue
            if self._board[index_of(n_row, n_col, self._row_size)] is Cell.ALIVE:
                count += 1
        return count

    def generate_updates(self) -> list[Update]:
        """Scan phase: compute transitions against the current generation."""
        updates: list[Update] = []
        for index, cell in enumerate(self._board):
            alive_neighbors = self.alive_neighbor_count(index)

            if cell is Cell.DEAD:
                if alive_neighbors == 3:
                    updates.append(Update(index, Cell.ALIVE))
            elif alive_neighbors < 2 or alive_neighbors > 3:
                # under- or overpopulation
                updates.append(Update(index, Cell.DEAD))
        return updates

    def apply_updates(self, updates: Iterable[Update]) -> int:
        """Commit phase: write every update. Returns the number applied."""
        applied = 0
        for update in updates:
            self._board[update.index] = update.value
            applied += 1
        return applied

    def step(self, generations: int = 1) -> int:
        if generations < 0:
            raise ValueError("generations must be >= 0")

        changed = 0
        for _ in range(generations):
            changed += self.apply_updates(self.generate_updates())
            self._generation += 1
        if generations:
            logger.debug(
                f"Advanced {generations} generation(s) to {self._generation}, "
                f"{changed} cell(s) changed"
            )
        return changed

    def tick(self, cycles: int = 1) -> None:
        self.step(cycles)

    def reset(self) -> None:
        self._board = list(self._initial)
        self._generation = 0

    def __len__(self) -> int:
        return len(self._board)

    def __getitem__(self, index: int) -> Cell:
        return self._board[index]

    def __iter__(self):
        return iter(self._board)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LifeBoard):
            return NotImplemented
        return self._board == other._board

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return render_text(self)

    def __repr__(self) -> str:
        return (
            f"LifeBoard(row_size={self._row_size}, rows={self.rows}, "
            f"generation={self._generation})"
        )
