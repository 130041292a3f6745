"""In-memory live scoreboard for matches in progress."""
from scoreboard.core.exceptions import (
    CapacityError,
    CapacityExceeded,
    ConflictError,
    DuplicateTeams,
    ErrorKind,
    InvalidTeamName,
    MatchNotFound,
    MissingField,
    NotFoundError,
    ScoreboardException,
    ScoreOutOfRange,
    TeamAlreadyPlaying,
    ValidationError,
)
from scoreboard.core.match import Match
from scoreboard.core.registry import MatchRegistry

__version__ = "1.0.0"

__all__ = [
    "CapacityError",
    "CapacityExceeded",
    "ConflictError",
    "DuplicateTeams",
    "ErrorKind",
    "InvalidTeamName",
    "Match",
    "MatchNotFound",
    "MatchRegistry",
    "MissingField",
    "NotFoundError",
    "ScoreboardException",
    "ScoreOutOfRange",
    "TeamAlreadyPlaying",
    "ValidationError",
]
