class KColoringError(Exception):
    """Base class for errors raised by the coloring engines."""


class UnsatisfiableWithinStrategy(KColoringError):
    """The selected engine could not produce a valid k-coloring.

    For the backtracking strategies this is conclusive for the component that
    failed. For local search it only means the flip budget ran out.
    """

    def __init__(self, k: int, strategy: str):
        self.k = k
        self.strategy = strategy
        if strategy == "local":
            detail = "flip budget exhausted, not a proof"
        else:
            detail = "search space exhausted"
        super().__init__(f"no {k}-coloring found by '{strategy}' ({detail})")


class InvariantViolation(KColoringError, AssertionError):
    """Programmer error: the search broke one of its own invariants."""
