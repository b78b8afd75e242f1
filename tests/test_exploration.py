from __future__ import annotations

import networkx as nx

from kcoloring import color
from kcoloring.exploration import GraphExplorer


def test_basic_stats():
    G = nx.Graph([(1, 2), (2, 3), (10, 11)])
    G.add_node(20)
    stats = GraphExplorer(G).compute_basic_stats(k=2)
    assert stats["num_nodes"] == 6
    assert stats["num_edges"] == 3
    assert stats["max_degree"] == 2
    assert stats["avg_degree"] == 1.0
    assert stats["degree_histogram"] == {0: 1, 1: 4, 2: 1}
    assert stats["num_components"] == 3
    assert stats["component_sizes"] == [3, 2, 1]
    assert stats["prunable"] == 5


def test_stats_on_empty_graph():
    stats = GraphExplorer(nx.Graph()).compute_basic_stats()
    assert stats["num_nodes"] == 0
    assert stats["avg_degree"] == 0.0
    assert "prunable" not in stats


def test_from_file(write_dimacs, triangle):
    explorer = GraphExplorer.from_file(write_dimacs(triangle))
    assert explorer.compute_basic_stats()["num_edges"] == 3


def test_draw_coloring_to_file(tmp_path, petersen):
    coloring = color(petersen, 3)
    out = tmp_path / "petersen.png"
    GraphExplorer(petersen).draw_coloring(coloring, path=str(out))
    assert out.exists() and out.stat().st_size > 0


def test_draw_partial_coloring(tmp_path, path3):
    out = tmp_path / "partial.png"
    GraphExplorer(path3).draw_coloring({2: 0}, path=str(out))
    assert out.exists()
