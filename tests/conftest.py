from __future__ import annotations

import itertools
import random
from typing import Dict, Iterable, Set, Tuple

import matplotlib

matplotlib.use("Agg")

import networkx as nx
import pytest


def adjacency(edges: Iterable[Tuple[int, int]], nodes: Iterable[int] = ()) -> Dict[int, Set[int]]:
    adj: Dict[int, Set[int]] = {v: set() for v in nodes}
    for u, v in edges:
        adj.setdefault(u, set()).add(v)
        adj.setdefault(v, set()).add(u)
    return adj


def brute_force_colorable(G: nx.Graph, k: int) -> bool:
    # Exhaustive check, only for tiny graphs
    nodes = sorted(G.nodes())
    if not nodes:
        return True
    for colors in itertools.product(range(k), repeat=len(nodes)):
        c = dict(zip(nodes, colors))
        if all(c[u] != c[v] for u, v in G.edges()):
            return True
    return False


def random_graphs(count: int, max_nodes: int = 7, seed: int = 1234):
    rnd = random.Random(seed)
    for _ in range(count):
        n = rnd.randint(1, max_nodes)
        p = rnd.choice([0.2, 0.4, 0.6, 0.8])
        yield nx.gnp_random_graph(n, p, seed=rnd.randrange(10**6))


def assert_valid(G: nx.Graph, coloring: Dict[int, int], k: int) -> None:
    assert set(coloring) == set(G.nodes())
    for u, v in G.edges():
        assert coloring[u] != coloring[v], f"edge ({u}, {v}) is monochromatic"
    assert all(0 <= c < k for c in coloring.values())


@pytest.fixture
def path3() -> nx.Graph:
    return nx.Graph([(1, 2), (2, 3)])


@pytest.fixture
def triangle() -> nx.Graph:
    return nx.Graph([(1, 2), (2, 3), (1, 3)])


@pytest.fixture
def two_edges() -> nx.Graph:
    return nx.Graph([(1, 2), (3, 4)])


@pytest.fixture
def petersen() -> nx.Graph:
    return nx.petersen_graph()


@pytest.fixture
def grid() -> nx.Graph:
    return nx.convert_node_labels_to_integers(nx.grid_2d_graph(4, 4))


@pytest.fixture
def write_dimacs(tmp_path):
    def _write(G: nx.Graph, name: str = "graph.col") -> str:
        path = tmp_path / name
        lines = ["c test graph", f"p edge {G.number_of_nodes()} {G.number_of_edges()}"]
        lines += [f"e {u} {v}" for u, v in G.edges()]
        path.write_text("\n".join(lines) + "\n")
        return str(path)
    return _write
