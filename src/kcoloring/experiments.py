import argparse
import csv
import glob
import logging
import os
import time
from typing import Dict, List, Optional, Sequence

from .graph import load_graph
from .local_search import DEFAULT_MAX_FLIPS
from .solver import solve

logger = logging.getLogger(__name__)


# --- Configuration ---
GRAPHS_DIR = 'data/benchmarks'

PARAM_GRID = {
    'k': [3, 4, 5],
    'strategy': ['dfs', 'dfs-fc', 'local'],
}
# seeds per setting, only used by local search
SEEDS = [42]

FIELDS = ['graph', 'strategy', 'k', 'seed', 'colorable', 'colors_used', 'runtime']


def run_experiments(
    graphs_dir: str,
    output_path: str,
    k_values: Sequence[int] = PARAM_GRID['k'],
    strategies: Sequence[str] = PARAM_GRID['strategy'],
    seeds: Sequence[int] = SEEDS,
    max_flips: int = DEFAULT_MAX_FLIPS,
) -> List[Dict]:
    """Run every (k, strategy, seed) combination on every graph in graphs_dir.

    Writes one CSV row per run to output_path and returns the rows.
    """
    graph_files = sorted(
        glob.glob(os.path.join(graphs_dir, '*.col')) + glob.glob(os.path.join(graphs_dir, '*.txt'))
    )
    if not graph_files:
        logger.warning("No graph files found in %s", graphs_dir)

    out_dir = os.path.dirname(output_path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)

    rows = []
    with open(output_path, 'w', newline='') as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=FIELDS)
        writer.writeheader()

        for graph_path in graph_files:
            graph_name = os.path.basename(graph_path)
            G = load_graph(graph_path)
            for k in k_values:
                for strategy in strategies:
                    # deterministic strategies run once
                    run_seeds: Sequence[Optional[int]] = seeds if strategy == 'local' else [None]
                    for seed in run_seeds:
                        logger.info("Running: %s, strategy=%s, k=%d, seed=%s",
                                    graph_name, strategy, k, seed)
                        start = time.time()
                        coloring = solve(G, k, strategy=strategy, max_flips=max_flips, seed=seed)
                        runtime = time.time() - start

                        row = {
                            'graph': graph_name,
                            'strategy': strategy,
                            'k': k,
                            'seed': '' if seed is None else seed,
                            'colorable': coloring is not None,
                            'colors_used': '' if coloring is None else len(set(coloring.values())),
                            'runtime': f"{runtime:.4f}",
                        }
                        writer.writerow(row)
                        csvfile.flush()
                        rows.append(row)
    return rows


def main(argv=None):
    parser = argparse.ArgumentParser(description='Run k-coloring strategy benchmarks')
    parser.add_argument('--graphs', '-g', default=GRAPHS_DIR, help='Directory of DIMACS graphs')
    parser.add_argument('--output', '-o', default='results/coloring_experiments.csv',
                        help='Path to CSV results file')
    parser.add_argument('--k', type=int, nargs='+', default=PARAM_GRID['k'])
    parser.add_argument('--strategies', nargs='+', choices=PARAM_GRID['strategy'],
                        default=PARAM_GRID['strategy'])
    parser.add_argument('--seeds', type=int, nargs='+', default=SEEDS)
    parser.add_argument('--max-flips', type=int, default=DEFAULT_MAX_FLIPS)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    run_experiments(args.graphs, args.output, args.k, args.strategies, args.seeds, args.max_flips)
    print(f"Experiments complete. Results saved to {args.output}")


if __name__ == '__main__':
    main()
