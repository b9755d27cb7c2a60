"""
Data models for the round-robin scheduler.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Optional, Set, Tuple

import pandas as pd


class Bye:
    """Sentinel opponent for a roster that rests this week."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "bye"

    def __reduce__(self):
        return (Bye, ())


BYE = Bye()


@dataclass(frozen=True, eq=False)
class Matchup:
    """An unordered pairing of two rosters (or a roster and the bye)."""
    first: Hashable
    second: Hashable

    def __eq__(self, other):
        if not isinstance(other, Matchup):
            return NotImplemented
        return frozenset((self.first, self.second)) == frozenset((other.first, other.second))

    def __hash__(self):
        return hash(frozenset((self.first, self.second)))

    def __repr__(self) -> str:
        return f"({self.first!r}, {self.second!r})"

    def __iter__(self):
        return iter((self.first, self.second))

    @property
    def rosters(self) -> Tuple[Hashable, Hashable]:
        """Both sides of the matchup, in display order."""
        return (self.first, self.second)

    @property
    def is_bye(self) -> bool:
        return self.first is BYE or self.second is BYE

    @property
    def opponent_of_bye(self) -> Optional[Hashable]:
        """The real roster resting in a bye matchup, None for a real game."""
        if self.first is BYE:
            return self.second
        if self.second is BYE:
            return self.first
        return None

    def contains(self, roster: Hashable) -> bool:
        return roster == self.first or roster == self.second

    def opponent(self, roster: Hashable) -> Hashable:
        if roster == self.first:
            return self.second
        if roster == self.second:
            return self.first
        raise KeyError(roster)


Week = List[Matchup]


@dataclass
class Schedule:
    """A complete season of weeks."""
    weeks: List[Week] = field(default_factory=list)
    rosters: List[Hashable] = field(default_factory=list)
    divisions: Dict[str, List[Hashable]] = field(default_factory=dict)
    division_weeks: int = 0
    season_length: int = 0

    @property
    def is_cycled(self) -> bool:
        return len(self.weeks) > self.season_length

    def phase_of(self, week_index: int) -> str:
        """Whether a (zero-based) week is intra- or inter-division play."""
        if week_index % max(self.season_length, 1) < self.division_weeks:
            return "Division"
        return "Inter-Division"

    def matchups_used(self) -> Set[Matchup]:
        """Every matchup that appears anywhere in the schedule."""
        return {matchup for week in self.weeks for matchup in week}

    def get_team_schedule(self, roster: Hashable) -> List[Tuple[int, Hashable]]:
        """Get (week number, opponent) for every week a roster appears in."""
        games = []
        for week_number, week in enumerate(self.weeks, start=1):
            for matchup in week:
                if matchup.contains(roster):
                    games.append((week_number, matchup.opponent(roster)))
        return games

    def to_dataframe(self) -> pd.DataFrame:
        """Convert schedule to pandas DataFrame."""
        if not self.weeks:
            return pd.DataFrame()

        data = []
        for week_index, week in enumerate(self.weeks):
            for order, matchup in enumerate(week, start=1):
                resting = matchup.opponent_of_bye
                data.append({
                    'Week': week_index + 1,
                    'Order': order,
                    'Home': resting if matchup.is_bye else matchup.first,
                    'Away': None if matchup.is_bye else matchup.second,
                    'Bye': matchup.is_bye,
                    'Phase': self.phase_of(week_index),
                })

        return pd.DataFrame(data)

    def get_summary_stats(self) -> Dict[str, Any]:
        """Get summary statistics for the schedule."""
        if not self.weeks:
            return {}

        games = Counter()
        byes = Counter()
        for week in self.weeks:
            for matchup in week:
                if matchup.is_bye:
                    byes[matchup.opponent_of_bye] += 1
                else:
                    games[matchup.first] += 1
                    games[matchup.second] += 1

        total_matchups = sum(len(week) for week in self.weeks)
        stats = {
            'total_weeks': len(self.weeks),
            'season_length': self.season_length,
            'division_weeks': self.division_weeks,
            'total_matchups': total_matchups,
            'total_byes': sum(byes.values()),
            'games_per_roster': dict(games),
            'byes_per_roster': dict(byes),
            'cycled': self.is_cycled,
        }

        return stats
