"""RAM accounting for the in-memory file system."""

from constants import RAM_SIZE, DIRECTORY_SIZE, ENTRY_HEADER_SIZE


def directory_footprint() -> int:
    """Nominal bytes taken by one directory node."""
    return DIRECTORY_SIZE


def entry_footprint(capacity: int) -> int:
    """Nominal bytes taken by one file with a `capacity` byte buffer."""
    return ENTRY_HEADER_SIZE + capacity


class MemoryBudget:
    """Tracks nominal RAM use against the fixed budget.

    The budget is informational only: allocations are counted and reported,
    never refused. Exhausting real interpreter memory surfaces as MemoryError.
    """

    def __init__(self, total: int = RAM_SIZE):
        self.total = total
        self.used = 0
        self.allocations = 0

    @property
    def free(self) -> int:
        return self.total - self.used

    @property
    def over_budget(self) -> bool:
        return self.used > self.total

    def charge(self, nbytes: int):
        """Record a new allocation."""
        if nbytes < 0:
            raise ValueError("Allocation size cannot be negative")
        self.used += nbytes
        self.allocations += 1

    def usage_percent(self) -> float:
        if not self.total:
            return 0.0
        return self.used / self.total * 100
