import logging
from typing import Dict, Iterable, List, Mapping, Tuple

import networkx as nx

from .errors import InvariantViolation

logger = logging.getLogger(__name__)


def prune_low_degree(G: nx.Graph, k: int) -> Tuple[nx.Graph, List[int]]:
    """Drop every vertex whose degree is below k.

    Single pass: degrees are read from ``G`` and are not recomputed after
    removal. Returns the induced subgraph on the remaining vertices and the
    sorted list of removed vertices.
    """
    pruned = sorted(v for v, d in G.degree() if d < k)
    keep = [v for v in G.nodes() if G.degree(v) >= k]
    if pruned:
        logger.debug("Pruned %d vertices with degree < %d", len(pruned), k)
    return G.subgraph(keep).copy(), pruned


def connected_components(G: nx.Graph) -> List[nx.Graph]:
    """Split G into its connected components, as induced subgraph copies.

    Each traversal starts at the smallest vertex not yet visited, so the
    components come out ordered by their minimum vertex id.
    """
    components = []
    visited = set()
    for root in sorted(G.nodes()):
        if root in visited:
            continue
        members = list(nx.dfs_preorder_nodes(G, source=root))
        visited.update(members)
        components.append(G.subgraph(members).copy())
    return components


def decompose(G: nx.Graph, k: int, prune: bool = False) -> List[nx.Graph]:
    if prune:
        G, _ = prune_low_degree(G, k)
    components = connected_components(G)
    if len(components) > 1:
        logger.warning(
            "Graph splits into %d connected components; coloring them independently",
            len(components),
        )
    return components


def restore_pruned(
    G: nx.Graph, coloring: Mapping[int, int], pruned: Iterable[int], k: int
) -> Dict[int, int]:
    """Color pruned vertices back in, after the rest of G has been colored.

    Each vertex gets the lowest color not used by its colored neighbors in G.
    A pruned vertex has fewer than k neighbors, so a free color always exists.
    """
    restored = dict(coloring)
    for v in pruned:
        if v in restored:
            raise InvariantViolation(f"vertex {v} is already colored")
        used = {restored[u] for u in G[v] if u in restored}
        free = next((c for c in range(k) if c not in used), None)
        if free is None:
            raise InvariantViolation(
                f"vertex {v} has degree {G.degree(v)} >= {k} and cannot be restored"
            )
        restored[v] = free
    return restored
