from collections import Counter
from typing import Mapping, Optional

import matplotlib.pyplot as plt
from matplotlib.colors import to_rgba
import networkx as nx

from .graph import load_graph


class GraphExplorer:
    def __init__(self, G: nx.Graph):
        self.G = G

    @classmethod
    def from_file(cls, filepath: str) -> "GraphExplorer":
        return cls(load_graph(filepath))

    def compute_basic_stats(self, k: Optional[int] = None) -> dict:
        # basic graph statistics, plus how many vertices degree pruning would drop
        stats = {}
        stats['num_nodes'] = self.G.number_of_nodes()
        stats['num_edges'] = self.G.number_of_edges()
        stats['density'] = nx.density(self.G) if stats['num_nodes'] > 1 else 0.0
        degrees = [d for _, d in self.G.degree()]
        stats['avg_degree'] = sum(degrees) / len(degrees) if degrees else 0.0
        stats['max_degree'] = max(degrees, default=0)
        stats['degree_histogram'] = Counter(degrees)
        stats['num_components'] = nx.number_connected_components(self.G)
        stats['component_sizes'] = sorted(
            (len(c) for c in nx.connected_components(self.G)),
            reverse=True
        )
        if k is not None:
            stats['prunable'] = sum(1 for d in degrees if d < k)
        return stats

    def draw_coloring(self, coloring: Optional[Mapping[int, int]] = None,
                      path: Optional[str] = None, seed: int = 0) -> None:
        """Draw the graph, filling each node by its color class.

        Uncolored nodes are grey. Saves to ``path`` when given, else shows the figure.
        """
        coloring = coloring or {}
        cmap = plt.get_cmap('tab20')
        node_color = [
            cmap(coloring[v] % cmap.N) if v in coloring else to_rgba('lightgrey')
            for v in self.G.nodes()
        ]

        fig = plt.figure(figsize=(10, 8))
        pos = nx.spring_layout(self.G, seed=seed)
        nx.draw(self.G, pos, with_labels=True, node_color=node_color, node_size=500, font_size=10)
        if path:
            fig.savefig(path)
            plt.close(fig)
        else:
            plt.show()
