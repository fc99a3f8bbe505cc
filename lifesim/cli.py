"""Command-line runner: print successive generations of a board."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from lifesim.core.exceptions import LifeError
from lifesim.core.render import render_html, render_text
from lifesim.core.simulation_engine import SimulationEngine
from lifesim.utils.config_loader import build_board, load_config, override_board

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run Conway's Game of Life.")
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a YAML config (defaults to the bundled config.yaml)",
    )
    parser.add_argument(
        "--generations",
        type=int,
        default=None,
        help="Number of generations to run (overrides config)",
    )
    parser.add_argument(
        "--seed",
        default=None,
        help="'default', 'random' or a registered pattern name",
    )
    parser.add_argument("--row-size", type=int, default=None)
    parser.add_argument("--rows", type=int, default=None)
    parser.add_argument(
        "--html",
        action="store_true",
        help="Render rows separated by <br/> instead of the config separator",
    )
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser.parse_args(argv)


def run(args: argparse.Namespace, out: TextIO) -> int:
    cfg = load_config(args.config)
    cfg = override_board(cfg, seed=args.seed, row_size=args.row_size, rows=args.rows)
    generations = (
        cfg.simulation.generations if args.generations is None else args.generations
    )
    if generations < 0:
        raise LifeError("generations must be >= 0")

    board = build_board(cfg)
    engine = SimulationEngine()

    def show() -> None:
        if args.html:
            text = render_html(board)
        else:
            text = render_text(
                board,
                alive=cfg.render.alive,
                dead=cfg.render.dead,
                separator=cfg.render.separator,
            )
        out.write(f"generation {board.generation}\n{text}\n\n")

    show()
    for _ in range(generations):
        engine.step(board)
        show()
        if board.is_extinct():
            logger.info(f"Extinct after {board.generation} generation(s)")
            break
    return 0


def main(argv: Optional[Sequence[str]] = None, out: TextIO = sys.stdout) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )
    try:
        return run(args, out)
    except LifeError as exc:
        logger.error(f"{exc}")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
