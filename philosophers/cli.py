"""Command-line entry point for the dining philosophers simulation."""

from __future__ import annotations

import sys

from philosophers.args import ArgumentError, parse_args
from philosophers.simulation import Simulation, run_lone_philosopher


def main(argv: list[str] | None = None) -> int:
    """Parse the arguments, run the dinner and return the exit status."""
    argv = sys.argv[1:] if argv is None else argv
    try:
        settings = parse_args(argv)
    except ArgumentError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    if settings.number_of_philosophers == 1:
        run_lone_philosopher(settings, sys.stdout)
        return 0
    Simulation(settings, sys.stdout).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())