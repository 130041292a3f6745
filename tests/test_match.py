"""Match value entity: construction paths and invariants."""

from __future__ import annotations

import dataclasses
from datetime import datetime, timezone
from uuid import UUID

import pytest

from scoreboard.core.constants import SCORE_LIMIT, TEAM_NAME_LENGTH_LIMIT
from scoreboard.core.exceptions import (
    DuplicateTeams,
    ErrorKind,
    InvalidTeamName,
    MissingField,
    ScoreOutOfRange,
    ValidationError,
)
from scoreboard.core.match import Match


def test_start_creates_match_at_nil_nil() -> None:
    before = datetime.now(timezone.utc)
    match = Match.start("Mexico", "Canada")

    assert isinstance(match.id, UUID)
    assert match.home_team == "Mexico"
    assert match.away_team == "Canada"
    assert match.home_score == 0
    assert match.away_score == 0
    assert match.total_score == 0
    assert match.start_time >= before
    assert match.start_time.tzinfo is not None


def test_start_generates_unique_ids() -> None:
    ids = {Match.start(f"Home {i}", f"Away {i}").id for i in range(50)}
    assert len(ids) == 50


def test_team_names_are_stored_trimmed() -> None:
    match = Match.start("  Spain ", "\tBrazil")
    assert match.home_team == "Spain"
    assert match.away_team == "Brazil"


@pytest.mark.parametrize(
    "name",
    [
        "A",
        "A" * TEAM_NAME_LENGTH_LIMIT,
        "Bayern München",
        "São Paulo",
        "Brighton & Hove Albion",
        "Olympique Lyonnais (W)",
        "St. Mirren",
        "Queen's Park",
        "Real Madrid C.F.",
        "Inter, Milan",
        "Bosnia/Herzegovina",
        "Schalke 04",
        "Spartak-2",
        "Ελλάδα",
        "日本",
        " " * 5 + "Padded" + " " * 40,
    ],
)
def test_valid_team_names(name) -> None:
    match = Match.start(name, "Opponent")
    assert match.home_team == name.strip()


@pytest.mark.parametrize(
    "name",
    [
        "",
        " ",
        "A" * (TEAM_NAME_LENGTH_LIMIT + 1),
        "A" * (TEAM_NAME_LENGTH_LIMIT + 2),
        "⚽FC",
        "FC_United",
        "Team@Home",
        "Tab\tInside",
        "New\nLine",
        "Hash#Tag",
        "Plus+",
        "Team ½",
        "Team²",
        "Ⅻ Legion",
        "Club ③",
        "٣٤ Club",
    ],
)
def test_invalid_team_names_rejected_on_either_side(name) -> None:
    with pytest.raises(InvalidTeamName) as home_err:
        Match.start(name, "Valid")
    assert home_err.value.side == "home"

    with pytest.raises(InvalidTeamName) as away_err:
        Match.start("Valid", name)
    assert away_err.value.side == "away"


def test_non_string_team_name_is_invalid() -> None:
    with pytest.raises(InvalidTeamName):
        Match.start(42, "Valid")


def test_missing_team_name() -> None:
    with pytest.raises(MissingField, match="Home team name"):
        Match.start(None, "Valid")
    with pytest.raises(MissingField, match="Away team name"):
        Match.start("Valid", None)


def test_duplicate_teams_after_trim() -> None:
    with pytest.raises(DuplicateTeams) as err:
        Match.start("Chile", " Chile ")
    assert err.value.kind is ErrorKind.DUPLICATE_TEAMS
    assert err.value.team_name == "Chile"


def test_team_comparison_is_case_sensitive() -> None:
    match = Match.start("chile", "Chile")
    assert match.home_team != match.away_team


def test_duplicate_checked_before_grammar() -> None:
    with pytest.raises(DuplicateTeams):
        Match.start("⚽", "⚽")


def test_validation_errors_share_a_base() -> None:
    for call in (
        lambda: Match.start(None, "A"),
        lambda: Match.start("A", "A"),
        lambda: Match.start("", "A"),
    ):
        with pytest.raises(ValidationError):
            call()


def test_update_score_keeps_identity() -> None:
    original = Match.start("Spain", "Brazil")
    updated = Match.update_score(original, 10, 2)

    assert updated.id == original.id
    assert updated.home_team == original.home_team
    assert updated.away_team == original.away_team
    assert updated.start_time == original.start_time
    assert (updated.home_score, updated.away_score) == (10, 2)
    assert updated.total_score == 12
    # the original value is untouched
    assert (original.home_score, original.away_score) == (0, 0)


def test_update_score_is_repeatable() -> None:
    original = Match.start("Spain", "Brazil")
    assert Match.update_score(original, 3, 1) == Match.update_score(original, 3, 1)


@pytest.mark.parametrize("home, away", [(0, 0), (SCORE_LIMIT, SCORE_LIMIT), (0, SCORE_LIMIT)])
def test_update_score_bounds_inclusive(home, away) -> None:
    match = Match.update_score(Match.start("Spain", "Brazil"), home, away)
    assert (match.home_score, match.away_score) == (home, away)


@pytest.mark.parametrize(
    "home, away, side",
    [
        (-1, 0, "home"),
        (SCORE_LIMIT + 1, 0, "home"),
        (0, -1, "away"),
        (0, SCORE_LIMIT + 1, "away"),
        (1.5, 0, "home"),
        (True, 0, "home"),
        (0, "3", "away"),
        (None, 0, "home"),
    ],
)
def test_update_score_out_of_range(home, away, side) -> None:
    match = Match.start("Spain", "Brazil")
    with pytest.raises(ScoreOutOfRange) as err:
        Match.update_score(match, home, away)
    assert err.value.side == side
    assert err.value.kind is ErrorKind.SCORE_OUT_OF_RANGE


def test_match_is_immutable() -> None:
    match = Match.start("Spain", "Brazil")
    with pytest.raises(dataclasses.FrozenInstanceError):
        match.home_score = 5


def test_direct_construction_checks_every_invariant() -> None:
    now = datetime.now(timezone.utc)
    match = Match.start("Spain", "Brazil")
    with pytest.raises(ScoreOutOfRange):
        Match(match.id, "Spain", "Brazil", 51, 0, now)
    with pytest.raises(MissingField, match="Start time"):
        Match(match.id, "Spain", "Brazil", 0, 0, None)
    with pytest.raises(MissingField, match="Match ID"):
        Match(None, "Spain", "Brazil", 0, 0, now)
    with pytest.raises(DuplicateTeams):
        Match(match.id, "⚽", "⚽", 0, 0, now)
    with pytest.raises(DuplicateTeams):
        Match(match.id, "Spain", " Spain ", 0, 0, now)
    with pytest.raises(InvalidTeamName) as err:
        Match(match.id, "Spain", "⚽FC", 0, 0, now)
    assert err.value.side == "away"
    with pytest.raises(InvalidTeamName):
        Match(match.id, "Team ½", "Brazil", 0, 0, now)
    with pytest.raises(MissingField, match="Home team name"):
        Match(match.id, None, "Brazil", 0, 0, now)


def test_update_score_of_missing_match() -> None:
    with pytest.raises(MissingField, match="Match must not be None"):
        Match.update_score(None, 1, 0)


def test_to_dict_and_str() -> None:
    match = Match.update_score(Match.start("Spain", "Brazil"), 10, 2)
    data = match.to_dict()

    assert data["id"] == str(match.id)
    assert data["total_score"] == 12
    assert data["start_time"] == match.start_time.isoformat()
    assert str(match) == "Spain 10 - 2 Brazil"
