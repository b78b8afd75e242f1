# kcoloring command line driver

import argparse
import logging

from .exploration import GraphExplorer
from .graph import load_graph
from .local_search import DEFAULT_MAX_FLIPS
from .solver import STRATEGIES, solve


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Find a k-coloring of a DIMACS graph")
    p.add_argument("k", type=int, help="Number of colors")
    p.add_argument("input", help="Path to DIMACS graph file")
    p.add_argument("--strategy", choices=sorted(STRATEGIES), default="dfs",
                   help="dfs: backtracking, dfs-fc: backtracking with forward checking, "
                        "local: min-conflicts local search")
    p.add_argument("--prune", action="store_true",
                   help="Leave vertices of degree < k out of the search")
    p.add_argument("--restore", action="store_true",
                   help="Color pruned vertices back in after the search")
    p.add_argument("--max-flips", type=int, default=DEFAULT_MAX_FLIPS,
                   help="Flip budget for local search")
    p.add_argument("--seed", type=int, default=None, help="Random seed for local search")
    p.add_argument("--verbose", action="store_true", help="Log local search progress")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    p.add_argument("--draw", action="store_true", help="Plot the colored graph")
    args = p.parse_args(argv)
    if args.k < 1:
        p.error("k must be a positive integer")
    if args.max_flips < 0:
        p.error("--max-flips must be >= 0")
    return p, args


def main(argv=None):
    parser, args = parse_args(argv)
    level = "INFO" if args.verbose and args.log_level != "DEBUG" else args.log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        G = load_graph(args.input)
    except (FileNotFoundError, ValueError) as e:
        parser.error(str(e))

    coloring = solve(
        G,
        args.k,
        strategy=args.strategy,
        prune=args.prune,
        restore=args.restore,
        max_flips=args.max_flips,
        seed=args.seed,
        verbose=args.verbose,
    )

    if coloring is None:
        print(f"no {args.k}-coloring")
        return 0

    for n, c in coloring.items():
        print(f"{n}: {c}")

    if args.draw:
        GraphExplorer(G).draw_coloring(coloring)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
