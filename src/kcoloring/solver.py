import logging
from typing import Callable, Dict, Optional

import networkx as nx
import numpy as np

from .dfs_coloring import DFSColoring
from .errors import UnsatisfiableWithinStrategy
from .graph import GraphLike, as_graph
from .local_search import DEFAULT_MAX_FLIPS, MinConflictsColoring
from .preprocessing import decompose, prune_low_degree, restore_pruned

logger = logging.getLogger(__name__)

ComponentSolver = Callable[..., Optional[Dict[int, int]]]


def _solve_dfs(G: nx.Graph, k: int, **_) -> Optional[Dict[int, int]]:
    return DFSColoring(G, k).color()


def _solve_dfs_fc(G: nx.Graph, k: int, **_) -> Optional[Dict[int, int]]:
    return DFSColoring(G, k, forward_checking=True).color()


def _solve_local(G: nx.Graph, k: int, max_flips=DEFAULT_MAX_FLIPS, rng=None,
                 verbose=False, **_) -> Optional[Dict[int, int]]:
    return MinConflictsColoring(G, k, max_flips=max_flips, rng=rng, verbose=verbose).color()


STRATEGIES: Dict[str, ComponentSolver] = {
    "dfs": _solve_dfs,
    "dfs-fc": _solve_dfs_fc,
    "local": _solve_local,
}


def solve(
    G: GraphLike,
    k: int,
    strategy: str = "dfs",
    prune: bool = False,
    restore: bool = False,
    max_flips: int = DEFAULT_MAX_FLIPS,
    seed: Optional[int] = None,
    verbose: bool = False,
) -> Optional[Dict[int, int]]:
    """Color G with k colors, one connected component at a time.

    Returns the merged coloring, or None as soon as any component fails.
    With ``prune``, vertices of degree < k are left out of the search and of
    the result unless ``restore`` is also set.
    """
    if strategy not in STRATEGIES:
        raise ValueError(f"unknown strategy {strategy!r}, expected one of {sorted(STRATEGIES)}")
    if k < 1:
        raise ValueError(f"k must be a positive integer, got {k}")

    G = as_graph(G)
    solve_component = STRATEGIES[strategy]

    pruned = []
    if prune:
        G_search, pruned = prune_low_degree(G, k)
    else:
        G_search = G
    components = decompose(G_search, k)

    # A single generator shared by every component of this call
    rng = None
    if strategy == "local":
        rng = np.random.default_rng(seed)

    coloring: Dict[int, int] = {}
    for i, component in enumerate(components):
        result = solve_component(component, k, max_flips=max_flips, rng=rng, verbose=verbose)
        if result is None:
            logger.info(
                "Component %d/%d (%d vertices) has no %d-coloring under '%s'",
                i + 1, len(components), component.number_of_nodes(), k, strategy,
            )
            return None
        coloring.update(result)

    if restore and pruned:
        coloring = restore_pruned(G, coloring, pruned, k)
    return coloring


def solve_or_raise(G: GraphLike, k: int, strategy: str = "dfs", **kwargs) -> Dict[int, int]:
    coloring = solve(G, k, strategy=strategy, **kwargs)
    if coloring is None:
        raise UnsatisfiableWithinStrategy(k, strategy)
    return coloring
