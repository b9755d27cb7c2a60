"""
Matchup generation for round-robin scheduling.
"""

from collections import Counter
from typing import Hashable, Iterable, List, Optional, Sequence, Tuple

from .errors import DuplicateRosterError, InvalidRosterError
from .logging_config import get_logger
from .models import BYE, Matchup, Week

logger = get_logger(__name__)


def pairs(sequence: Sequence) -> List[Tuple]:
    """
    Pair the first element with each later element, in order.

    This is only "head vs. rest"; the remaining pairings come from the
    recursion in available_matchup_sets.

    Args:
        sequence: Ordered elements

    Returns:
        List[Tuple]: (head, element) for every element after the head
    """
    if len(sequence) < 2:
        return []

    head = sequence[0]
    return [(head, element) for element in sequence[1:]]


def validate_rosters(rosters: Iterable[Hashable]) -> List[Hashable]:
    """
    Reject rosters that would make a schedule ambiguous.

    Raises:
        InvalidRosterError: A roster is the bye marker
        DuplicateRosterError: A roster is listed more than once
    """
    rosters = list(rosters)
    if any(roster is BYE for roster in rosters):
        raise InvalidRosterError("The bye marker cannot be used as a roster")

    counts = Counter(rosters)
    duplicates = [roster for roster, count in counts.items() if count > 1]
    if duplicates:
        raise DuplicateRosterError(duplicates)

    return rosters


def _matchings(rosters: List[Hashable]) -> List[Week]:
    if len(rosters) == 2:
        return [[Matchup(rosters[0], rosters[1])]]

    weeks = []
    for a, b in pairs(rosters):
        remainder = [roster for roster in rosters if roster != a and roster != b]
        for rest in _matchings(remainder):
            weeks.append([Matchup(a, b)] + rest)
    return weeks


def available_matchup_sets(rosters: Iterable[Hashable],
                           fixed_matchups: Optional[Iterable[Matchup]] = None) -> List[Week]:
    """
    Generate every legal matchup set (week) for the rosters.

    A matchup set pairs every roster exactly once. When the roster count is
    odd the bye is prepended, so one roster rests each week. Weeks come out
    ordered by the first roster's opponent, then recursively by the rest.

    The number of weeks is (n-1)!! for n rosters after the bye is added,
    so 8 rosters give 105 weeks and 14 give 135135.

    Args:
        rosters: Distinct roster identifiers
        fixed_matchups: If given, only weeks containing all of these

    Returns:
        List[Week]: Every perfect matching, in generation order
    """
    rosters = validate_rosters(rosters)
    if len(rosters) < 2:
        return []

    if len(rosters) % 2 == 1:
        rosters = [BYE] + rosters

    weeks = _matchings(rosters)

    if fixed_matchups:
        required = set(fixed_matchups)
        weeks = [week for week in weeks if required.issubset(week)]

    logger.debug("Generated %d matchup sets for %d rosters", len(weeks), len(rosters))
    return weeks
