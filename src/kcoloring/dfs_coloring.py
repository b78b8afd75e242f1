import logging
import sys
from collections import Counter
from typing import Dict, List, Optional, Set, Tuple

import networkx as nx

from .errors import InvariantViolation

logger = logging.getLogger(__name__)


class DFSColoring:
    """DSATUR-guided backtracking search for a k-coloring of G.

    The recursion is the search stack: each frame picks one vertex, tries its
    legal colors in order and undoes the assignment when every child fails.
    With ``forward_checking`` a color is rejected up front when it would
    leave some uncolored neighbor with no legal color.
    """

    def __init__(self, G: nx.Graph, k: int, forward_checking: bool = False):
        self.G = G                                  # Graph to color (never mutated)
        self.k = k                                  # Number of colors
        self.forward_checking = forward_checking
        self.n = G.number_of_nodes()

        # Colors past n are interchangeable with unused ones below n
        self.palette = range(max(0, min(k, self.n)))

        self.coloring: Dict[int, int] = {}
        self.nodes = 0                              # Assignments tried
        self.backtracks = 0                         # Assignments undone

    def color(self) -> Optional[Dict[int, int]]:
        """Run the search. Returns a complete coloring, or None if none exists."""
        self.coloring = {}
        self.nodes = 0
        self.backtracks = 0
        if self.n and self.k <= 0:
            return None

        # One frame per colored vertex
        if sys.getrecursionlimit() < self.n + 1000:
            sys.setrecursionlimit(self.n + 1000)

        result = self.dfs()
        logger.debug(
            "DFS (k=%d, forward_checking=%s) on %d vertices: %s after %d nodes, %d backtracks",
            self.k, self.forward_checking, self.n,
            "colored" if result is not None else "exhausted",
            self.nodes, self.backtracks,
        )
        return result

    def frontier(self) -> Set[int]:
        # Uncolored vertices with at least one colored neighbor
        return {
            u
            for v in self.coloring
            for u in self.G[v]
            if u not in self.coloring
        }

    def score(self, v: int) -> Tuple[int, int, int, int]:
        """Selection key: saturation, colored neighbors, uncolored degree, lowest id."""
        neighbor_colors = set()
        colored = 0
        for u in self.G[v]:
            if u in self.coloring:
                neighbor_colors.add(self.coloring[u])
                colored += 1
        return len(neighbor_colors), colored, self.G.degree(v) - colored, -v

    def select_vertex(self, frontier: Set[int]) -> Optional[int]:
        if frontier:
            return max(frontier, key=self.score)
        # New root: first call, or the previous component is fully colored
        remaining = [v for v in self.G.nodes() if v not in self.coloring]
        if not remaining:
            return None
        return max(remaining, key=lambda v: (self.G.degree(v), -v))

    def color_order(self, frontier: Set[int]) -> List[int]:
        # Most used colors around the frontier first, then lowest id
        border = {u for f in frontier for u in self.G[f] if u in self.coloring}
        usage = Counter(self.coloring[u] for u in border)
        return sorted(self.palette, key=lambda c: (-usage[c], c))

    def forward_check(self, v: int, c: int) -> bool:
        """False if coloring v with c leaves an uncolored neighbor with no color."""
        for n in self.G[v]:
            if n in self.coloring:
                continue
            forced = {self.coloring[m] for m in self.G[n] if m in self.coloring}
            forced.add(c)
            if len(forced) >= self.k:
                return False
        return True

    def assign(self, v: int, c: int) -> None:
        if v in self.coloring:
            raise InvariantViolation(f"vertex {v} is already colored")
        self.coloring[v] = c
        self.nodes += 1

    def dfs(self) -> Optional[Dict[int, int]]:
        frontier = self.frontier()
        v = self.select_vertex(frontier)
        if v is None:
            return dict(self.coloring)

        used = {self.coloring[u] for u in self.G[v] if u in self.coloring}
        for c in self.color_order(frontier):
            if c in used:
                continue
            if self.forward_checking and not self.forward_check(v, c):
                continue
            self.assign(v, c)
            result = self.dfs()
            if result is not None:
                return result
            # backtrack
            del self.coloring[v]
            self.backtracks += 1
        return None


def color(G: nx.Graph, k: int, forward_checking: bool = False) -> Optional[Dict[int, int]]:
    return DFSColoring(G, k, forward_checking=forward_checking).color()
