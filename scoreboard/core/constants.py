"""
Scoreboard constants

Limits, the team-name grammar, and the error message templates shared by
Match validation and the registry.
"""
# Maximum number of matches in progress at the same time
MATCHES_LIMIT = 100

# Maximum length of a team name after trimming
TEAM_NAME_LENGTH_LIMIT = 30

# Inclusive maximum score for either team
SCORE_LIMIT = 50

# Besides Unicode letters (str.isalpha: Lu, Ll, Lt, Lm, Lo) a team name may
# only contain ASCII digits, ASCII space and these punctuation marks
TEAM_NAME_EXTRA_CHARS = frozenset("0123456789 -'.&(),/")


class ErrorMessages:
    """Message templates for every failure the scoreboard raises."""

    FIELD_MISSING = "{field} must not be None"
    SAME_TEAMS = "Team names must be different: {team}"
    INVALID_HOME_TEAM = "Invalid home team name: {team!r}"
    INVALID_AWAY_TEAM = "Invalid away team name: {team!r}"
    HOME_SCORE_RANGE = "Home score out of range: {score!r}"
    AWAY_SCORE_RANGE = "Away score out of range: {score!r}"
    MATCH_ALREADY_EXISTS = "Match already exists for a team: {team}"
    MATCH_NOT_FOUND = "Match not found with ID: {match_id}"
    TOO_MANY_ACTIVE = "Too many active matches, current: {active}, limit: {limit}"
