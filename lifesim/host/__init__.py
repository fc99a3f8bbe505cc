"""Host binding layer for embedding environments."""

from lifesim.host.backend import GameBackend, LifeBackend

__all__ = ["GameBackend", "LifeBackend"]
