"""Seed pattern registry.

Patterns are stored as tuples of ``(row, col)`` offsets of alive cells,
relative to the pattern's top-left corner. Boards place them on an empty
grid; cells falling outside the grid are clipped.

Built-in patterns are registered when this module is imported.
"""

from __future__ import annotations

Pattern = tuple[tuple[int, int], ...]


class PatternRegistry:
    """Registry of named seed patterns.

    THREAD SAFETY: Not thread-safe. All pattern registration should happen
    during module initialization before any threads are spawned.
    """

    def __init__(self):
        self._patterns: dict[str, Pattern] = {}

    def register(self, name: str, offsets) -> None:
        """Register a pattern under ``name``."""
        if name in self._patterns:
            raise ValueError(f"Pattern '{name}' already registered")
        pattern = tuple((int(row), int(col)) for row, col in offsets)
        if any(row < 0 or col < 0 for row, col in pattern):
            raise ValueError(f"Pattern '{name}' has negative offsets")
        self._patterns[name] = pattern

    def get(self, name: str) -> Pattern:
        """Get a pattern by name."""
        if name not in self._patterns:
            raise ValueError(
                f"Unknown pattern '{name}'. Available: {list(self._patterns.keys())}"
            )
        return self._patterns[name]

    def list_patterns(self) -> list[str]:
        """List all registered pattern names."""
        return list(self._patterns.keys())


# Global registry
_REGISTRY = PatternRegistry()

DEFAULT_PATTERN = "bar"


def register_pattern(name: str, offsets) -> None:
    """Register a pattern globally."""
    _REGISTRY.register(name, offsets)


def get_pattern(name: str) -> Pattern:
    """Get a pattern by name."""
    return _REGISTRY.get(name)


def list_available_patterns() -> list[str]:
    """List all registered patterns."""
    return _REGISTRY.list_patterns()


register_pattern(DEFAULT_PATTERN, [(0, 0), (1, 0), (2, 0)])
register_pattern("blinker", [(0, 0), (0, 1), (0, 2)])
register_pattern("block", [(0, 0), (0, 1), (1, 0), (1, 1)])
register_pattern("glider", [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)])
