import logging
import os
from typing import Dict, Iterable, Mapping, Optional, Union

import networkx as nx

logger = logging.getLogger(__name__)

Coloring = Dict[int, int]
GraphLike = Union[nx.Graph, Mapping[int, Iterable[int]]]


def as_graph(adjacency: GraphLike) -> nx.Graph:
    """Build an undirected ``nx.Graph`` from a vertex -> neighbors mapping.

    A ``nx.Graph`` is returned unchanged. A mapping must be symmetric, free of
    self-loops and keyed by non-negative integers.
    """
    if isinstance(adjacency, nx.Graph):
        if adjacency.is_directed():
            raise ValueError("graph must be undirected")
        if nx.number_of_selfloops(adjacency):
            raise ValueError("graph must not contain self-loops")
        return adjacency

    G = nx.Graph()
    for v, neighbors in adjacency.items():
        _check_vertex(v)
        G.add_node(v)
        for u in neighbors:
            _check_vertex(u)
            if u == v:
                raise ValueError(f"self-loop on vertex {v}")
            if u not in adjacency or v not in adjacency[u]:
                raise ValueError(f"adjacency is not symmetric: {v} -> {u}")
            G.add_edge(v, u)
    return G


def _check_vertex(v) -> None:
    if isinstance(v, bool) or not isinstance(v, int) or v < 0:
        raise ValueError(f"vertex ids must be non-negative integers, got {v!r}")


def verify_coloring(G: nx.Graph, coloring: Mapping[int, int], k: Optional[int] = None) -> bool:
    # Only edges with both ends colored are checked
    for u, v in G.edges():
        if u in coloring and v in coloring and coloring[u] == coloring[v]:
            return False
    if k is not None and any(not 0 <= c < k for c in coloring.values()):
        return False
    return True


def is_complete(G: nx.Graph, coloring: Mapping[int, int]) -> bool:
    return all(v in coloring for v in G.nodes())


def count_conflicts(G: nx.Graph, coloring: Mapping[int, int]) -> int:
    """Number of monochromatic edges among colored vertices."""
    return sum(
        1
        for u, v in G.edges()
        if u in coloring and v in coloring and coloring[u] == coloring[v]
    )


def load_graph(path: str) -> nx.Graph:
    """Load a graph from a DIMACS ``.col`` file.

    Vertices ``1..n`` from the problem line are always added, so isolated
    vertices survive. Edges that reference vertices outside that range, or
    loop on a single vertex, are skipped with a warning.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Input file {path} does not exist")

    G = nx.Graph()
    node_count: Optional[int] = None
    skipped = 0

    with open(path, "r") as f:
        for lineno, line in enumerate(f, start=1):
            line = line.strip()
            if not line or line.startswith("c"):
                continue

            parts = line.split()
            try:
                if parts[0] == "p":
                    if len(parts) >= 4 and parts[1] == "edge":
                        node_count = int(parts[2])
                    elif len(parts) >= 3:
                        node_count = int(parts[1])
                    else:
                        raise ValueError("incomplete problem line")
                    G.add_nodes_from(range(1, node_count + 1))

                elif parts[0] == "e":
                    u, v = int(parts[1]), int(parts[2])
                    in_range = u >= 1 and v >= 1
                    if node_count is not None:
                        in_range = in_range and u <= node_count and v <= node_count
                    if not in_range or u == v:
                        skipped += 1
                        continue
                    G.add_edge(u, v)

                else:
                    logger.debug("Ignoring line %d: %r", lineno, line)
            except (IndexError, ValueError) as e:
                raise ValueError(f"Error reading file {path}, line {lineno}: {e}") from e

    if skipped:
        logger.warning("Skipped %d invalid edge(s) in %s", skipped, path)
    logger.info(
        "Loaded graph with %d nodes and %d edges", G.number_of_nodes(), G.number_of_edges()
    )
    return G
