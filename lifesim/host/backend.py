"""Host binding layer.

Exposes a board to an embedding environment (a web page, a GUI timer,
a game loop) through a small surface: create, render, tick, and raw
byte access for drawing.
"""

from __future__ import annotations

import logging
from contextlib import nullcontext
from dataclasses import dataclass
from typing import ContextManager, Optional, Protocol

from lifesim.core.board import LifeBoard
from lifesim.core.render import render_html
from lifesim.interfaces.random_source import RandomSource
from lifesim.utils.consts import HOST_ROW_SIZE, HOST_ROWS

logger = logging.getLogger(__name__)


class LifeBackend(Protocol):
    """Minimal backend required by a host."""

    @property
    def row_size(self) -> int:
        ...

    def render(self) -> str:
        ...

    def on_tick(self) -> None:
        ...

    def board(self) -> bytes:
        ...

    def board_len(self) -> int:
        ...


@dataclass
class GameBackend(LifeBackend):
    """Adapter that exposes a LifeBoard through the LifeBackend interface.

    A host that ticks from a timer thread passes a lock; every call is
    serialized through it. Without one, calls are not synchronized.
    """

    game: LifeBoard
    lock: ContextManager | None = None

    def __post_init__(self) -> None:
        if self.lock is None:
            self.lock = nullcontext()

    @classmethod
    def new(
        cls,
        row_size: int = HOST_ROW_SIZE,
        rows: int = HOST_ROWS,
        rng: Optional[RandomSource] = None,
        lock: ContextManager | None = None,
    ) -> "GameBackend":
        """Create a backend around a randomly seeded board."""
        backend = cls(LifeBoard.random(row_size, rows, rng=rng), lock=lock)
        backend.log(f"Created {row_size}x{rows} random board")
        return backend

    @property
    def row_size(self) -> int:
        return self.game.row_size

    def render(self) -> str:
        assert self.lock is not None
        with self.lock:
            return render_html(self.game)

    def on_tick(self) -> None:
        assert self.lock is not None
        with self.lock:
            changed = self.game.step()
            if changed and self.game.is_extinct():
                self.alert(f"Board went extinct at generation {self.game.generation}")

    def board(self) -> bytes:
        """Snapshot of the cells, one byte per cell, row-major."""
        assert self.lock is not None
        with self.lock:
            return self.game.as_bytes()

    def board_len(self) -> int:
        return len(self.game)

    def log(self, message: str) -> None:
        logger.info(message)

    def alert(self, message: str) -> None:
        logger.warning(message)
