"""Row-major grid indexing helpers.

Cells are stored in a flat sequence where ``index = row * row_size + col``.
These helpers are pure; callers must supply in-range coordinates.
"""

from __future__ import annotations

from dataclasses import dataclass

from lifesim.core.cell import Cell

NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)
"""Compass offsets (row delta, column delta) of the eight neighbors."""


@dataclass(frozen=True)
class Update:
    """New state for one cell, produced by the scan phase of a step."""

    index: int
    value: Cell


def index_of(row: int, col: int, row_size: int) -> int:
    """Return the flat index of ``(row, col)``."""
    assert row >= 0, f"row {row} out of range"
    assert 0 <= col < row_size, f"col {col} out of range for row size {row_size}"
    return row * row_size + col


def coordinates_of(index: int, row_size: int) -> tuple[int, int]:
    """Return ``(row, col)`` for a flat index. Inverse of index_of()."""
    assert index >= 0, f"index {index} out of range"
    assert row_size > 0, "row size must be positive"
    return divmod(index, row_size)


def in_bounds(row: int, col: int, rows: int, row_size: int) -> bool:
    return 0 <= row < rows and 0 <= col < row_size
