"""Random team partitioning for Team Randomizer."""

import random
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

import pandas as pd


class TeamAssignment:
    """Immutable result of one randomization.

    ``revision`` records the roster revision the assignment was drawn from,
    so a caller can tell when the roster has moved on and the teams are stale.
    """

    def __init__(self, teams: Iterable[Iterable[str]], revision: Optional[int] = None):
        self._teams: Tuple[Tuple[str, ...], ...] = tuple(tuple(team) for team in teams)
        self.revision = revision

    def __repr__(self) -> str:
        return f"TeamAssignment(teams={self._teams!r}, revision={self.revision!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TeamAssignment):
            return NotImplemented
        return self._teams == other._teams

    def __hash__(self) -> int:
        return hash(self._teams)

    def __len__(self) -> int:
        return len(self._teams)

    def __iter__(self):
        return iter(self._teams)

    def __getitem__(self, index: int) -> Tuple[str, ...]:
        return self._teams[index]

    @property
    def teams(self) -> Tuple[Tuple[str, ...], ...]:
        return self._teams

    @property
    def team_count(self) -> int:
        return len(self._teams)

    def sizes(self) -> List[int]:
        return [len(team) for team in self._teams]

    def members(self) -> List[str]:
        """All assigned members, team by team."""
        return [member for team in self._teams for member in team]

    def is_stale(self, revision: int) -> bool:
        """Check whether the roster has changed since this assignment was drawn."""
        return self.revision is None or self.revision != revision

    def summary(self) -> Dict[str, Any]:
        """Get a summary of the assignment.

        Returns:
            Dictionary with assignment statistics, teams keyed from 1
        """
        if not self._teams:
            return {
                'total_people': 0,
                'teams': {},
                'team_sizes': {},
                'average_team_size': 0.0
            }

        teams = {number: list(team) for number, team in enumerate(self._teams, start=1)}
        team_sizes = {number: len(team) for number, team in teams.items()}
        average_size = sum(team_sizes.values()) / len(team_sizes)

        return {
            'total_people': sum(team_sizes.values()),
            'teams': teams,
            'team_sizes': team_sizes,
            'average_team_size': round(average_size, 2)
        }

    def to_frame(self) -> pd.DataFrame:
        """Lay the teams out side by side, one column per team.

        Shorter teams are padded with empty strings.
        """
        depth = max(self.sizes(), default=0)
        columns = {
            f"Team {number}": list(team) + [""] * (depth - len(team))
            for number, team in enumerate(self._teams, start=1)
        }
        return pd.DataFrame(columns, index=pd.RangeIndex(1, depth + 1))


def partition(
    roster: Sequence[str],
    team_count: int,
    rng: Optional[random.Random] = None,
    revision: Optional[int] = None,
) -> TeamAssignment:
    """Split a roster snapshot into randomly shuffled, balanced teams.

    The roster is shuffled with an unbiased Fisher-Yates shuffle, then dealt
    out round-robin: the i-th shuffled member joins team ``i % team_count``.
    Team sizes therefore differ by at most one.

    A non-positive ``team_count`` is treated as 1. Asking for more teams than
    there are members leaves the surplus teams empty.

    Args:
        roster: Member names; never modified
        team_count: Number of teams to produce
        rng: Random source, defaults to the module-level generator
        revision: Roster revision the snapshot was taken at

    Returns:
        The new team assignment
    """
    team_count = max(1, team_count)
    shuffled = list(roster)
    (rng or random).shuffle(shuffled)

    teams: List[List[str]] = [[] for _ in range(team_count)]
    for position, member in enumerate(shuffled):
        teams[position % team_count].append(member)

    return TeamAssignment(teams, revision=revision)
