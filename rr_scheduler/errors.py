"""
Exceptions raised when scheduling input is malformed.
"""


class SchedulingError(ValueError):
    """Base class for rejected scheduling input."""


class DuplicateRosterError(SchedulingError):
    """A roster appears more than once in a single scheduling call."""

    def __init__(self, duplicates):
        self.duplicates = list(duplicates)
        super().__init__(f"Duplicate rosters: {self.duplicates}")


class InvalidRosterError(SchedulingError):
    """A roster identifier collides with the bye marker."""


class UnevenDivisionsError(SchedulingError):
    """Divisions produced different numbers of intra-division weeks."""

    def __init__(self, week_counts):
        self.week_counts = list(week_counts)
        super().__init__(
            f"Divisions must produce the same number of weeks, got {self.week_counts}"
        )


class RosterLimitError(SchedulingError):
    """Too many rosters to enumerate every matching."""

    def __init__(self, count: int, limit: int):
        self.count = count
        self.limit = limit
        super().__init__(f"{count} rosters exceeds the limit of {limit}")
