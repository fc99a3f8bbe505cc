import argparse
import sys
import threading
import time
from pathlib import Path

# Ensure local repo package is used even if another "lifesim" is on PYTHONPATH.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from lifesim import Clock, GameBackend


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Drive a random board from a host timer.")
    parser.add_argument("--ticks", type=int, default=20, help="Number of ticks to run")
    parser.add_argument(
        "--frequency",
        type=int,
        default=5,
        help="Generations per second",
    )
    parser.add_argument("--row-size", type=int, default=16)
    parser.add_argument("--rows", type=int, default=8)
    return parser.parse_args()


class BackendTicker:
    """Clock subscriber that forwards each tick to the host backend."""

    def __init__(self, backend: GameBackend):
        self.backend = backend

    def tick(self, cycles: int = 1) -> None:
        for _ in range(cycles):
            self.backend.on_tick()


def main() -> None:
    args = parse_args()

    backend = GameBackend.new(args.row_size, args.rows, lock=threading.Lock())
    clock = Clock(frequency=args.frequency)
    clock.subscribe(BackendTicker(backend))

    for _ in range(args.ticks):
        clock.tick()
        alive = sum(backend.board())
        print(f"tick {clock.cycle_count:3d} alive {alive:4d}")
        print(backend.render().replace("<br/>", "\n"))
        time.sleep(clock.interval)


if __name__ == "__main__":
    main()
