from .dfs_coloring import DFSColoring, color
from .errors import InvariantViolation, KColoringError, UnsatisfiableWithinStrategy
from .graph import as_graph, count_conflicts, is_complete, load_graph, verify_coloring
from .local_search import MinConflictsColoring, color_local
from .preprocessing import connected_components, decompose, prune_low_degree, restore_pruned
from .solver import STRATEGIES, solve, solve_or_raise

__version__ = "0.1.0"
