"""
Match: immutable value for one game in progress

A Match is only ever built through `Match.start` or `Match.update_score`.
Every construction, direct or through those two, checks the invariants:

1. id, home_team, away_team and start_time are never None
2. trimmed home_team != trimmed away_team
3. both trimmed team names follow the team-name grammar
4. 0 <= home_score, away_score <= SCORE_LIMIT

Team names are stored trimmed.
"""
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Any, Dict
from uuid import UUID, uuid4

from scoreboard.core.constants import (
    SCORE_LIMIT,
    TEAM_NAME_EXTRA_CHARS,
    TEAM_NAME_LENGTH_LIMIT,
)
from scoreboard.core.exceptions import (
    DuplicateTeams,
    InvalidTeamName,
    MissingField,
    ScoreOutOfRange,
)


@dataclass(frozen=True)
class Match:
    id: UUID
    home_team: str
    away_team: str
    home_score: int
    away_score: int
    start_time: datetime

    def __post_init__(self):
        _require(self.id, "Match ID")
        _require(self.home_team, "Home team name")
        _require(self.away_team, "Away team name")
        _require(self.start_time, "Start time")
        home = _trimmed(self.home_team, "home")
        away = _trimmed(self.away_team, "away")
        if home == away:
            raise DuplicateTeams(home)
        _check_team_name(home, "home")
        _check_team_name(away, "away")
        _check_score(self.home_score, "home")
        _check_score(self.away_score, "away")

    @property
    def total_score(self) -> int:
        return self.home_score + self.away_score

    @classmethod
    def start(cls, home_team: str, away_team: str) -> "Match":
        """
        Start a new match at 0 - 0

        Flow:
        1. Check that both names are present
        2. Reject identical names (after trimming)
        3. Check each name against the team-name grammar
        4. Build the Match with a fresh id and the current UTC time

        Raises:
            MissingField: a team name is None
            DuplicateTeams: both names are the same after trimming
            InvalidTeamName: a name breaks the grammar
        """
        _require(home_team, "Home team name")
        _require(away_team, "Away team name")

        return cls(
            id=uuid4(),
            home_team=_trimmed(home_team, "home"),
            away_team=_trimmed(away_team, "away"),
            home_score=0,
            away_score=0,
            start_time=datetime.now(timezone.utc),
        )

    @classmethod
    def update_score(cls, match: "Match", home_score: int, away_score: int) -> "Match":
        """
        Return a copy of `match` with the new absolute scores

        id, teams and start_time are carried over unchanged.

        Raises:
            MissingField: match is None
            ScoreOutOfRange: a score is negative, above SCORE_LIMIT or not an int
        """
        if match is None:
            raise MissingField("Match")
        return replace(match, home_score=home_score, away_score=away_score)

    def involves(self, team_name: str) -> bool:
        return team_name in (self.home_team, self.away_team)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": str(self.id),
            "home_team": self.home_team,
            "away_team": self.away_team,
            "home_score": self.home_score,
            "away_score": self.away_score,
            "total_score": self.total_score,
            "start_time": self.start_time.isoformat(),
        }

    def __str__(self):
        return f"{self.home_team} {self.home_score} - {self.away_score} {self.away_team}"


def _require(value, field):
    if value is None:
        raise MissingField(field)


def _trimmed(team_name, side):
    if not isinstance(team_name, str):
        raise InvalidTeamName(team_name, side)
    return team_name.strip()


def _check_team_name(team_name, side):
    if not 1 <= len(team_name) <= TEAM_NAME_LENGTH_LIMIT:
        raise InvalidTeamName(team_name, side)
    if not all(ch.isalpha() or ch in TEAM_NAME_EXTRA_CHARS for ch in team_name):
        raise InvalidTeamName(team_name, side)


def _check_score(score, side):
    # bool is an int subclass, True must not count as a goal
    if isinstance(score, bool) or not isinstance(score, int):
        raise ScoreOutOfRange(score, side)
    if score < 0 or score > SCORE_LIMIT:
        raise ScoreOutOfRange(score, side)
