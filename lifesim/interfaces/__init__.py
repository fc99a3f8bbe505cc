"""Interface abstractions for lifesim.

Defines behavioral contracts that implementations must satisfy:
- Board: Life board interface (abstract base class)
- IClock, ClockSubscriber: generation tick source and its subscribers
- RandomSource: injected randomness for seeding boards
"""

from lifesim.interfaces.board import Board
from lifesim.interfaces.clock import ClockSubscriber, IClock
from lifesim.interfaces.random_source import RandomSource

__all__ = [
    "Board",
    "IClock",
    "ClockSubscriber",
    "RandomSource",
]
