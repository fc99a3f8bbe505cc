"""Cell state enumeration."""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from lifesim.core.exceptions import InvalidCellError


class Cell(IntEnum):
    """State of a single grid cell.

    The integer values are the byte-level representation handed to hosts
    through ``LifeBoard.as_bytes()``.
    """

    DEAD = 0
    """Empty cell."""

    ALIVE = 1
    """Populated cell."""

    @classmethod
    def coerce(cls, value: Any) -> "Cell":
        """Convert a Cell, a 0/1 integer or a bool into a Cell.

        Raises:
            InvalidCellError: If the value is not a recognised cell state
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, (bool, int)):
            try:
                return cls(int(value))
            except ValueError as exc:
                raise InvalidCellError(value) from exc
        raise InvalidCellError(value)

    def __str__(self) -> str:
        return str(int(self))
