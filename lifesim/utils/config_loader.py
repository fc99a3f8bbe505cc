"""Helpers for loading and validating lifesim configuration."""

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Optional
import threading

import yaml  # type: ignore[import-untyped]

from lifesim.core.board import LifeBoard
from lifesim.core.exceptions import ConfigurationError
from lifesim.core.patterns import list_available_patterns
from lifesim.interfaces.random_source import RandomSource
from lifesim.utils.consts import DEFAULT_FREQUENCY, DEFAULT_ROW_SIZE, DEFAULT_ROWS

SEED_DEFAULT = "default"
SEED_RANDOM = "random"


@dataclass(frozen=True)
class BoardConfig:
    row_size: int = DEFAULT_ROW_SIZE
    rows: int = DEFAULT_ROWS
    seed: str = SEED_DEFAULT
    cells: Optional[tuple[int, ...]] = None


@dataclass(frozen=True)
class SimulationConfig:
    generations: int = 1
    frequency: int = DEFAULT_FREQUENCY


@dataclass(frozen=True)
class RenderConfig:
    alive: str = "1"
    dead: str = "0"
    separator: str = "\n"


@dataclass(frozen=True)
class LifeConfig:
    board: BoardConfig
    simulation: SimulationConfig
    render: RenderConfig


# Configuration cache with thread safety
_LOADER_CACHE: dict[str, LifeConfig] = {}
_CACHE_LOCK = threading.RLock()


def _get_config_path(path: Optional[str] = None) -> str:
    if path is None:
        # Bundled defaults live in lifesim/config.yaml
        base = Path(__file__).parent.parent / "config.yaml"
        path = str(base)

    return path


def _load_yaml_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Failed to parse config: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigurationError("top-level config must be a mapping")
    return raw


def _section(raw: dict[str, Any], name: str) -> dict[str, Any]:
    value = raw.get(name) or {}
    if not isinstance(value, dict):
        raise ConfigurationError(name, "section must be a mapping")
    return value


def _build_cells(cells_raw: Any) -> Optional[tuple[int, ...]]:
    if cells_raw is None:
        return None
    if not isinstance(cells_raw, (list, tuple)):
        raise ConfigurationError("board.cells", "must be a list of 0/1 values")
    for value in cells_raw:
        # floats and strings are rejected, not truncated
        if not isinstance(value, (bool, int)) or value not in (0, 1):
            raise ConfigurationError(
                "board.cells",
                f"cells must be 0 or 1, got {value!r}",
            )
    return tuple(int(v) for v in cells_raw)


def _build_board_cfg(board_raw: dict[str, Any]) -> BoardConfig:
    return BoardConfig(
        row_size=int(board_raw.get("row_size", DEFAULT_ROW_SIZE)),
        rows=int(board_raw.get("rows", DEFAULT_ROWS)),
        seed=str(board_raw.get("seed", SEED_DEFAULT)),
        cells=_build_cells(board_raw.get("cells")),
    )


def _build_simulation_cfg(sim_raw: dict[str, Any]) -> SimulationConfig:
    return SimulationConfig(
        generations=int(sim_raw.get("generations", 1)),
        frequency=int(sim_raw.get("frequency", DEFAULT_FREQUENCY)),
    )


def _build_render_cfg(render_raw: dict[str, Any]) -> RenderConfig:
    return RenderConfig(
        alive=str(render_raw.get("alive", "1")),
        dead=str(render_raw.get("dead", "0")),
        separator=str(render_raw.get("separator", "\n")),
    )


def _parse_life_cfg_from_dict(raw: dict[str, Any]) -> LifeConfig:
    try:
        cfg = LifeConfig(
            board=_build_board_cfg(_section(raw, "board")),
            simulation=_build_simulation_cfg(_section(raw, "simulation")),
            render=_build_render_cfg(_section(raw, "render")),
        )
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Invalid config schema: {exc}") from exc

    validate_config(cfg)
    return cfg


def validate_config(cfg: LifeConfig) -> None:
    """Sanity checks to fail fast on bad configs."""
    board = cfg.board
    if board.row_size <= 0:
        raise ConfigurationError("board.row_size", "must be positive")
    if board.rows <= 0:
        raise ConfigurationError("board.rows", "must be positive")
    if board.cells is not None:
        if len(board.cells) != board.row_size * board.rows:
            raise ConfigurationError(
                "board.cells",
                f"expected {board.row_size * board.rows} cells, got {len(board.cells)}",
            )
        if any(v not in (0, 1) for v in board.cells):
            raise ConfigurationError("board.cells", "cells must be 0 or 1")
    elif board.seed not in (SEED_DEFAULT, SEED_RANDOM, *list_available_patterns()):
        raise ConfigurationError(
            "board.seed",
            f"unknown seed '{board.seed}'",
            details={"available": [SEED_DEFAULT, SEED_RANDOM, *list_available_patterns()]},
        )

    if cfg.simulation.generations < 0:
        raise ConfigurationError("simulation.generations", "must be >= 0")
    if cfg.simulation.frequency <= 0:
        raise ConfigurationError("simulation.frequency", "must be positive")

    if not cfg.render.alive or not cfg.render.dead:
        raise ConfigurationError("render", "alive and dead tokens must be non-empty")


def load_config(path: Optional[str] = None) -> LifeConfig:
    """Load and validate configuration from a YAML file.

    Args:
        path: Optional path to YAML config. If None, load bundled lifesim/config.yaml.

    Returns:
        LifeConfig instance

    Raises:
        ConfigurationError: on parse or validation errors
    """

    p = Path(_get_config_path(path=path))
    raw = _load_yaml_file(p)

    return _parse_life_cfg_from_dict(raw=raw)


def get_config(path: Optional[str] = None) -> LifeConfig:
    """Return the loaded config for path, loading and caching if necessary.

    THREAD SAFETY: This function is thread-safe. Multiple threads can
    safely call this concurrently.
    """
    key = _get_config_path(path=path)
    with _CACHE_LOCK:
        if key not in _LOADER_CACHE:
            _LOADER_CACHE[key] = load_config(path=key)
        return _LOADER_CACHE[key]


def clear_config_cache() -> None:
    """Clear all cached configurations.

    All subsequent calls to get_config() will reload from disk.
    """
    with _CACHE_LOCK:
        _LOADER_CACHE.clear()


def override_board(cfg: LifeConfig, **changes: Any) -> LifeConfig:
    """Return a copy of cfg with board fields replaced and re-validated.

    None values are ignored so argparse defaults can be passed straight in.
    """
    changes = {k: v for k, v in changes.items() if v is not None}
    if not changes:
        return cfg
    if "seed" in changes or "row_size" in changes or "rows" in changes:
        changes.setdefault("cells", None)
    updated = replace(cfg, board=replace(cfg.board, **changes))
    validate_config(updated)
    return updated


def build_board(cfg: LifeConfig, rng: Optional[RandomSource] = None) -> LifeBoard:
    """Construct the board described by cfg.board."""
    board = cfg.board
    if board.cells is not None:
        return LifeBoard.from_cells(board.cells, board.row_size)
    if board.seed == SEED_DEFAULT:
        return LifeBoard.default(board.row_size, board.rows)
    if board.seed == SEED_RANDOM:
        return LifeBoard.random(board.row_size, board.rows, rng=rng)
    return LifeBoard.from_pattern(board.seed, board.row_size, board.rows)
