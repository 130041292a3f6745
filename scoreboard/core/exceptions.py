"""
Scoreboard exceptions

Every business-rule failure has its own class so the API layer (or any other
caller) can tell them apart by type or by `kind`, never by message text.
"""
from enum import Enum

from scoreboard.core.constants import ErrorMessages


class ErrorKind(str, Enum):
    MISSING_FIELD = "missing_field"
    DUPLICATE_TEAMS = "duplicate_teams"
    INVALID_TEAM_NAME = "invalid_team_name"
    SCORE_OUT_OF_RANGE = "score_out_of_range"
    CAPACITY_EXCEEDED = "capacity_exceeded"
    TEAM_ALREADY_PLAYING = "team_already_playing"
    MATCH_NOT_FOUND = "match_not_found"


class ScoreboardException(Exception):
    """Base class for all scoreboard errors"""
    kind: ErrorKind


# ============ Categories ============

class ValidationError(ScoreboardException):
    """A Match invariant would be violated"""
    pass


class CapacityError(ScoreboardException):
    """The registry cannot hold another match"""
    pass


class ConflictError(ScoreboardException):
    """The request clashes with a match already in progress"""
    pass


class NotFoundError(ScoreboardException):
    """The referenced match is not registered"""
    pass


# ============ Match validation ============

class MissingField(ValidationError):
    """A required id, team name or start time is None"""
    kind = ErrorKind.MISSING_FIELD

    def __init__(self, field):
        self.field = field
        super().__init__(ErrorMessages.FIELD_MISSING.format(field=field))


class DuplicateTeams(ValidationError):
    """Home and away team are the same after trimming"""
    kind = ErrorKind.DUPLICATE_TEAMS

    def __init__(self, team_name):
        self.team_name = team_name
        super().__init__(ErrorMessages.SAME_TEAMS.format(team=team_name))


class InvalidTeamName(ValidationError):
    """Team name is empty, too long, or contains a forbidden character"""
    kind = ErrorKind.INVALID_TEAM_NAME

    def __init__(self, team_name, side="home"):
        self.team_name = team_name
        self.side = side
        template = (
            ErrorMessages.INVALID_HOME_TEAM if side == "home"
            else ErrorMessages.INVALID_AWAY_TEAM
        )
        super().__init__(template.format(team=team_name))


class ScoreOutOfRange(ValidationError):
    """Score is not an integer between 0 and SCORE_LIMIT"""
    kind = ErrorKind.SCORE_OUT_OF_RANGE

    def __init__(self, score, side="home"):
        self.score = score
        self.side = side
        template = (
            ErrorMessages.HOME_SCORE_RANGE if side == "home"
            else ErrorMessages.AWAY_SCORE_RANGE
        )
        super().__init__(template.format(score=score))


# ============ Registry ============

class CapacityExceeded(CapacityError):
    """MATCHES_LIMIT matches are already in progress"""
    kind = ErrorKind.CAPACITY_EXCEEDED

    def __init__(self, active, limit):
        self.active = active
        self.limit = limit
        super().__init__(ErrorMessages.TOO_MANY_ACTIVE.format(active=active, limit=limit))


class TeamAlreadyPlaying(ConflictError):
    """The team is home or away team of an active match"""
    kind = ErrorKind.TEAM_ALREADY_PLAYING

    def __init__(self, team_name):
        self.team_name = team_name
        super().__init__(ErrorMessages.MATCH_ALREADY_EXISTS.format(team=team_name))


class MatchNotFound(NotFoundError):
    """Match does not exist (never started or already finished)"""
    kind = ErrorKind.MATCH_NOT_FOUND

    def __init__(self, match_id):
        self.match_id = match_id
        super().__init__(ErrorMessages.MATCH_NOT_FOUND.format(match_id=match_id))
