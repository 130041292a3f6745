"""
Request / response bodies for the HTTP layer

Range and name checks are left to the domain (Match) so every rule lives in
one place and the error kinds stay the same over HTTP.
"""
from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel

from scoreboard.core.match import Match


class MatchStart(BaseModel):
    # None is allowed through so it is reported as a missing field
    home_team: Optional[str] = None
    away_team: Optional[str] = None


class ScoreUpdate(BaseModel):
    # Any: no coercion of true / "3" / 1.5, Match decides
    home_score: Any
    away_score: Any


class MatchResponse(BaseModel):
    id: UUID
    home_team: str
    away_team: str
    home_score: int
    away_score: int
    total_score: int
    start_time: datetime

    @classmethod
    def from_match(cls, match: Match) -> "MatchResponse":
        return cls(**match.to_dict())


class ErrorDetail(BaseModel):
    kind: str
    message: str
