"""
CLI entry: seed a world, tick it on a timer and print every generation.
"""
import argparse
import logging
from typing import List, Optional

from .patterns import get_pattern, parse_points, pattern_names
from .runner import DEFAULT_INTERVAL, DEFAULT_TIME_BUDGET, simulate
from .world import OutOfBoundsError, Status, World, WorldConfig


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Conway's Game of Life on the console")
    p.add_argument("--width", type=int, default=10, help="Grid width")
    p.add_argument("--height", type=int, default=10, help="Grid height")
    p.add_argument("--pattern", choices=pattern_names(), default="sample", help="Named seed pattern")
    p.add_argument("--points", default=None, help='Explicit seed, e.g. "1,1;1,2;2,1" (overrides --pattern)')
    p.add_argument("--offset", type=int, nargs=2, default=(0, 0), metavar=("X", "Y"),
                   help="Translate the seed by X, Y")
    p.add_argument("--unbounded", action="store_true",
                   help="Let cells live outside the grid; width/height only frame the output")
    p.add_argument("--interval", type=float, default=DEFAULT_INTERVAL, help="Seconds between ticks")
    p.add_argument("--time-budget", type=float, default=DEFAULT_TIME_BUDGET,
                   help="Stop after this many seconds (0 = no limit)")
    p.add_argument("--max-generations", type=int, default=None, help="Stop after this many ticks")
    p.add_argument("--quiet", action="store_true", help="Only print the summary (shows a progress bar)")
    p.add_argument("--verbose", action="store_true", help="Debug logging for every step")
    return p


def _seed(args: argparse.Namespace) -> List:
    if args.points:
        ox, oy = args.offset
        return [(x + ox, y + oy) for (x, y) in parse_points(args.points)]
    return get_pattern(args.pattern, offset=tuple(args.offset))


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        cfg = WorldConfig(width=args.width, height=args.height, bounded=not args.unbounded)
        world = World(cfg, _seed(args))
    except (OutOfBoundsError, ValueError) as e:
        parser.error(str(e))

    def print_tick(i: int, status: Status, num_alive: int, fp: str, w: World) -> None:
        print(f"Iteration: {i} - Status: {status.value} - Num cells alive: {num_alive} - Hash: {fp}")
        print(w.render())
        if status.terminal:
            print("Stopping")

    if not args.quiet:
        print(world.render())
    try:
        report = simulate(
            world,
            max_generations=args.max_generations,
            time_budget=args.time_budget or None,
            interval=args.interval,
            on_tick=None if args.quiet else print_tick,
            progress=args.quiet,
        )
    except KeyboardInterrupt:
        print("Interrupted by user.")
        return

    if report["reason"] == "time_up":
        print("time up")
    final = report["final_status"]
    print("Ticker stopped")
    print(f"- iterations: {report['iterations']}")
    print(f"- last status: {final.value if final else '-'}")
    print(f"- cells alive: {report['alive']}")
    print(f"- distinct generations: {len(report['fingerprints'])}")


if __name__ == "__main__":
    main()
