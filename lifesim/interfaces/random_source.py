"""Random source protocol for seeding boards."""

from __future__ import annotations

from typing import Protocol, Union


class RandomSource(Protocol):
    """Callable producing a uniform float in [0, 1) or a fair bool.

    ``random.Random().random`` satisfies this protocol.
    """

    def __call__(self) -> Union[float, bool]:
        ...
