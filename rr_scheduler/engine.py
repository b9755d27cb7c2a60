"""
Core scheduling engine: greedy week selection and division composition.
"""

from collections import Counter
from itertools import cycle, islice
from typing import Dict, Hashable, Iterable, List, Optional, Sequence, Set, Tuple

from .config import SchedulerConfig
from .errors import UnevenDivisionsError
from .logging_config import get_logger
from .matchups import available_matchup_sets, validate_rosters
from .models import BYE, Matchup, Schedule, Week

logger = get_logger(__name__)


def valid_schedules(rosters: Iterable[Hashable],
                    exclude_matchups: Optional[Iterable[Matchup]] = None) -> List[Week]:
    """
    Greedily pick weeks that never repeat a matchup.

    Walks the matchup sets in generation order and keeps every week that
    shares no matchup with the weeks already kept or with exclude_matchups.
    There is no backtracking, so the result is not always the longest
    possible repeat-free schedule.

    Args:
        rosters: Distinct roster identifiers
        exclude_matchups: Matchups to treat as already played

    Returns:
        List[Week]: Selected weeks, in order
    """
    used: Set[Matchup] = set(exclude_matchups or ())
    selected = []

    for week in available_matchup_sets(rosters):
        if used.isdisjoint(week):
            selected.append(week)
            used.update(week)

    logger.debug("Selected %d repeat-free weeks", len(selected))
    return selected


def smoosh_byes(week: Sequence[Matchup]) -> Week:
    """
    Merge division byes in the same week into real cross-division matchups.

    Byes pair up in the order they appear: (bye, a) with the next (bye, b)
    becomes (a, b) in the first bye's position. A merged matchup never takes
    a third bye, so an odd number of byes leaves the last one standing.
    Everything else keeps its place.
    """
    bye_positions = [i for i, matchup in enumerate(week) if matchup.is_bye]

    merged = {}
    for first, second in zip(bye_positions[0::2], bye_positions[1::2]):
        merged[first] = Matchup(week[first].opponent_of_bye, week[second].opponent_of_bye)
        merged[second] = None

    smooshed: Week = []
    for i, matchup in enumerate(week):
        if i not in merged:
            smooshed.append(matchup)
        elif merged[i] is not None:
            smooshed.append(merged[i])
    return smooshed


def cycle_weeks(weeks: Sequence[Week], num_weeks: int) -> List[Week]:
    """Repeat weeks from the start until exactly num_weeks are produced."""
    if num_weeks < 0:
        raise ValueError(f"num_weeks must be non-negative, got {num_weeks}")
    if not weeks:
        return []
    return [list(week) for week in islice(cycle(weeks), num_weeks)]


def _division_seasons(divisions: List[List[Hashable]]) -> List[Week]:
    """Per-division weeks, combined by week index and bye-smooshed."""
    per_division = [valid_schedules(division) for division in divisions]

    week_counts = [len(weeks) for weeks in per_division]
    if len(set(week_counts)) > 1:
        raise UnevenDivisionsError(week_counts)

    combined = []
    for weeks in zip(*per_division):
        week = [matchup for division_week in weeks for matchup in division_week]
        combined.append(smoosh_byes(week))
    return combined


def compose_season(divisions: Sequence[Iterable[Hashable]]) -> Tuple[List[Week], List[Week]]:
    """
    Build the intra-division and inter-division weeks of one season.

    Returns:
        Tuple[List[Week], List[Week]]: (division weeks, inter-division weeks)
    """
    divisions = [list(division) for division in divisions]
    all_rosters = validate_rosters(roster for division in divisions for roster in division)

    division_weeks = _division_seasons(divisions)
    division_matchups = {matchup for week in division_weeks for matchup in week}
    inter_weeks = valid_schedules(all_rosters, division_matchups)

    logger.info(
        "Built season for %d divisions: %d division weeks, %d inter-division weeks",
        len(divisions), len(division_weeks), len(inter_weeks)
    )
    return division_weeks, inter_weeks


def schedule_for_divisions(divisions: Sequence[Iterable[Hashable]],
                           num_weeks: Optional[int] = None) -> List[Week]:
    """
    Build a season of intra-division weeks followed by inter-division weeks.

    Each division is scheduled on its own and the division weeks are played
    side by side, with division byes merged into cross-division games where
    they meet. Inter-division weeks then come from the full roster pool and
    never repeat a matchup already played inside a division.

    Args:
        divisions: Roster lists, one per division
        num_weeks: If given, cycle the season to exactly this many weeks

    Returns:
        List[Week]: The combined schedule

    Raises:
        DuplicateRosterError: A roster appears twice across divisions
        UnevenDivisionsError: Divisions produce different week counts
    """
    if num_weeks is not None and num_weeks < 0:
        raise ValueError(f"num_weeks must be non-negative, got {num_weeks}")

    division_weeks, inter_weeks = compose_season(divisions)
    season = division_weeks + inter_weeks

    if num_weeks is None:
        return season
    return cycle_weeks(season, num_weeks)


def build_schedule(config: SchedulerConfig) -> Schedule:
    """
    Run the division composer from a configuration.

    Args:
        config: Scheduler configuration

    Returns:
        Schedule: Weeks plus the division layout they came from
    """
    division_rosters = config.division_rosters()
    division_weeks, inter_weeks = compose_season(division_rosters.values())
    season = division_weeks + inter_weeks

    weeks = season if config.num_weeks is None else cycle_weeks(season, config.num_weeks)

    return Schedule(
        weeks=weeks,
        rosters=config.get_all_rosters(),
        divisions=division_rosters,
        division_weeks=len(division_weeks),
        season_length=len(season),
    )


def validate_schedule(schedule: Schedule) -> Dict[str, List[str]]:
    """
    Validate a completed schedule.

    Args:
        schedule: Schedule to validate

    Returns:
        Dict[str, List[str]]: Validation results
    """
    violations = {
        'errors': [],
        'warnings': []
    }

    if not schedule.weeks:
        violations['errors'].append("No weeks scheduled")
        return violations

    expected = set(schedule.rosters)
    for week_number, week in enumerate(schedule.weeks, start=1):
        appearances = Counter(
            roster for matchup in week for roster in matchup if roster is not BYE
        )
        for roster, count in appearances.items():
            if count > 1:
                violations['errors'].append(
                    f"Roster {roster} scheduled {count} times in week {week_number}"
                )
        for roster in expected - set(appearances):
            violations['errors'].append(f"Roster {roster} missing from week {week_number}")

        if len(expected) % 2 == 0 and any(matchup.is_bye for matchup in week):
            violations['warnings'].append(f"Week {week_number} has a bye with an even roster count")

    seen = set()
    for week_number, week in enumerate(schedule.weeks[:schedule.season_length], start=1):
        for matchup in week:
            if matchup in seen:
                violations['errors'].append(f"Matchup {matchup} repeated in week {week_number}")
            seen.add(matchup)

    if schedule.is_cycled:
        violations['warnings'].append(
            f"Season of {schedule.season_length} weeks cycled to {len(schedule.weeks)} weeks"
        )

    return violations
