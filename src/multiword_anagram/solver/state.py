"""Mutable bookkeeping for a single solve call."""

from dataclasses import dataclass, field
from time import time

from bitarray import bitarray
from bitarray.util import zeros


@dataclass(kw_only=True)
class SearchState:
    """State shared by every recursive step of one search."""

    timeout_seconds: float | None = None
    """Wall-clock budget, or None for no limit."""

    max_solutions: int | None = None
    """Solution cap, or None for no limit."""

    n_patterns: int = 0
    """Number of required patterns; sizes `satisfied`."""

    start_time: float = field(default_factory=time)
    """Timestamp when the search started, in seconds since the epoch."""

    timed_out: bool = False
    """Set once the deadline has passed; never cleared."""

    solutions_found: int = 0
    """Number of distinct solutions found so far."""

    nodes_visited: int = 0
    """Number of dictionary nodes entered."""

    satisfied: bitarray = field(init=False)
    """Bit `i` is set while some chosen word contains pattern `i`."""

    def __post_init__(self) -> None:
        self.satisfied = zeros(self.n_patterns)

    def elapsed(self) -> float:
        """Seconds since the search started."""
        return time() - self.start_time

    def hit_solution_cap(self) -> bool:
        return self.max_solutions is not None and self.solutions_found >= self.max_solutions

    def should_stop(self) -> bool:
        """Poll every global cutoff: the timed-out flag, the deadline, and the solution cap.

        Sets `timed_out` when the deadline has just passed.
        """
        if self.timed_out:
            return True
        if self.timeout_seconds is not None and self.elapsed() > self.timeout_seconds:
            self.timed_out = True
            return True
        return self.hit_solution_cap()

    def stopped(self) -> bool:
        """Cheap re-check after returning from a branch, without reading the clock."""
        return self.timed_out or self.hit_solution_cap()

    def all_satisfied(self) -> bool:
        return self.satisfied.all()
