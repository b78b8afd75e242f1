import logging
from typing import Dict, List, Optional

import networkx as nx
import numpy as np

logger = logging.getLogger(__name__)

DEFAULT_MAX_FLIPS = 100000
DEFAULT_REPORT_EVERY = 1000


class MinConflictsColoring:
    """Randomized min-conflicts search for a k-coloring.

    Incomplete: a None result only means the flip budget ran out. All
    randomness comes from one ``numpy.random.Generator``, either injected as
    ``rng`` or built from ``seed``.
    """

    def __init__(
        self,
        G: nx.Graph,
        k: int,
        max_flips: int = DEFAULT_MAX_FLIPS,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
        verbose: bool = False,                  # log progress every report_every flips
        report_every: int = DEFAULT_REPORT_EVERY,
    ):
        if max_flips < 0:
            raise ValueError(f"max_flips must be >= 0, got {max_flips}")
        if report_every < 1:
            raise ValueError(f"report_every must be >= 1, got {report_every}")

        self.G = G
        self.k = k
        self.max_flips = max_flips
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.verbose = verbose
        self.report_every = report_every

        # Vertices are mapped to array positions 0..n-1
        self.vertices: List[int] = sorted(G.nodes())
        self.index = {v: i for i, v in enumerate(self.vertices)}
        self.n = len(self.vertices)
        self.edges = np.array(
            [(self.index[u], self.index[v]) for u, v in G.edges()], dtype=np.intp
        ).reshape(-1, 2)
        self.adj = [[self.index[u] for u in G[v]] for v in self.vertices]

        self.colors = np.zeros(self.n, dtype=np.int64)
        self.flips = 0

    def random_coloring(self) -> np.ndarray:
        return self.rng.integers(0, self.k, size=self.n)

    def conflict_counts(self) -> np.ndarray:
        """Per-vertex number of neighbors sharing its color."""
        u, v = self.edges[:, 0], self.edges[:, 1]
        same = self.colors[u] == self.colors[v]
        return (
            np.bincount(u[same], minlength=self.n)
            + np.bincount(v[same], minlength=self.n)
        )

    def select_vertex(self, counts: np.ndarray) -> int:
        conflicted = np.flatnonzero(counts)
        if self.rng.random() < 0.5:
            return int(self.rng.choice(conflicted))
        # Shuffle first so argmax breaks ties at random
        shuffled = self.rng.permutation(conflicted)
        return int(shuffled[np.argmax(counts[shuffled])])

    def recolor(self, i: int) -> None:
        used = {int(self.colors[j]) for j in self.adj[i]}
        if self.k > 2 * len(used):
            # Mostly free palette: rejection sampling stays uniform over free colors
            c = int(self.rng.integers(self.k))
            while c in used:
                c = int(self.rng.integers(self.k))
            self.colors[i] = c
            return
        free = [c for c in range(self.k) if c not in used]
        if free:
            self.colors[i] = free[int(self.rng.integers(len(free)))]
        else:
            self.colors[i] = self.rng.integers(self.k)

    def result(self) -> Dict[int, int]:
        return {v: int(self.colors[i]) for i, v in enumerate(self.vertices)}

    def color(self) -> Optional[Dict[int, int]]:
        self.flips = 0
        if self.n == 0:
            return {}
        if self.k <= 0:
            return None

        self.colors = self.random_coloring()
        for flip in range(self.max_flips):
            counts = self.conflict_counts()
            if not counts.any():
                logger.debug("Min-conflicts solved %d vertices after %d flips", self.n, flip)
                return self.result()
            if self.verbose and flip % self.report_every == 0:
                logger.info(
                    "flip %d: %d conflicting edges, %d conflicted vertices",
                    flip, int(counts.sum()) // 2, int(np.count_nonzero(counts)),
                )
            self.recolor(self.select_vertex(counts))
            self.flips += 1

        # The last flip may have removed the last conflict
        if not self.conflict_counts().any():
            return self.result()
        logger.debug("Min-conflicts gave up after %d flips", self.flips)
        return None


def color_local(
    G: nx.Graph,
    k: int,
    max_flips: int = DEFAULT_MAX_FLIPS,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
    verbose: bool = False,
    report_every: int = DEFAULT_REPORT_EVERY,
) -> Optional[Dict[int, int]]:
    return MinConflictsColoring(
        G, k, max_flips=max_flips, rng=rng, seed=seed,
        verbose=verbose, report_every=report_every,
    ).color()
