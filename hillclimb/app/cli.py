# hillclimb/app/cli.py
#!/usr/bin/env python3
"""
hillclimb MAP [--query direct|nearest|both] [-v]

Prints the fewest steps for each requested query, or "no path".
Exit status is 1 when the map can't be loaded.
"""

import argparse
import logging
import sys
from typing import List, Optional

from hillclimb.app.logging_config import configure_logging
from hillclimb.core.dijkstra import search
from hillclimb.core.parse import HeightMapParseError, load_map
from hillclimb.core.queries import QUERY_MODES, run_query


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="hillclimb",
                                description="Fewest climbing steps across a height map.")
    p.add_argument("map", help="text height map (a-z, S start, E end)")
    p.add_argument("--query", choices=QUERY_MODES + ("both",), default="both")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        grid = load_map(args.map)
    except (OSError, HeightMapParseError) as ex:
        print(f"Failed to load map {args.map}: {ex}", file=sys.stderr)
        return 1

    modes = QUERY_MODES if args.query == "both" else (args.query,)
    came_from = search(grid, grid.end)
    for mode in modes:
        res = run_query(grid, mode, came_from)
        print(f"{mode}: {res.steps if res.found else 'no path'}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
