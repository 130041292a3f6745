"""
MatchRegistry: owns every match currently in progress

Responsibilities:
1. Start a match (capacity + double-booking checks)
2. Update a match score
3. Finish a match
4. Produce the ranked summary

Concurrency:
- One lock guards the whole mapping, so each compound operation (check,
  then insert/replace/remove) is atomic with respect to the others
- Match values are immutable; readers only ever see complete values
"""
import logging
import threading
from typing import Dict, List
from uuid import UUID

from scoreboard.core.constants import MATCHES_LIMIT
from scoreboard.core.exceptions import (
    CapacityExceeded,
    MatchNotFound,
    TeamAlreadyPlaying,
)
from scoreboard.core.match import Match

logger = logging.getLogger(__name__)


class MatchRegistry:
    """In-memory, thread-safe registry of matches in progress"""

    def __init__(self, matches_limit: int = MATCHES_LIMIT):
        self.matches_limit = matches_limit
        # Insertion ordered: position doubles as registration order
        self._matches: Dict[UUID, Match] = {}
        self._lock = threading.Lock()

    def __len__(self):
        with self._lock:
            return len(self._matches)

    def __contains__(self, match_id):
        with self._lock:
            return match_id in self._matches

    def start_match(self, home_team: str, away_team: str) -> Match:
        """
        Start a new match and register it

        Checks, in order (all under the lock):
        1. Registry is below its capacity
        2. Neither team is playing in another match
        3. Match.start validation (names, duplicates)
        4. Insert

        Args:
            home_team: home team name
            away_team: away team name

        Returns:
            the new Match at 0 - 0

        Raises:
            CapacityExceeded: matches_limit matches are already active
            TeamAlreadyPlaying: a team is already in an active match
            ValidationError: see Match.start
        """
        with self._lock:
            # 1. Capacity
            active = len(self._matches)
            if active >= self.matches_limit:
                logger.warning(f"Rejected {home_team!r} vs {away_team!r}: registry full ({active})")
                raise CapacityExceeded(active, self.matches_limit)

            # 2. Double booking (stored names are trimmed)
            for team_name in (home_team, away_team):
                if not isinstance(team_name, str):
                    continue
                candidate = team_name.strip()
                if any(match.involves(candidate) for match in self._matches.values()):
                    logger.warning(f"Rejected start: {candidate!r} is already playing")
                    raise TeamAlreadyPlaying(candidate)

            # 3. Build (validation errors propagate untouched)
            match = Match.start(home_team, away_team)

            # 4. Register
            self._matches[match.id] = match

        logger.info(f"Started match {match.id}: {match}")
        return match

    def update_score(self, match_id: UUID, home_score: int, away_score: int) -> Match:
        """
        Replace the score of an active match

        Scores are absolute values, not increments.

        Raises:
            MatchNotFound: no active match has this id
            ScoreOutOfRange: a score is outside [0, SCORE_LIMIT]
        """
        with self._lock:
            current = self._matches.get(match_id)
            if current is None:
                logger.warning(f"Score update for unknown match {match_id}")
                raise MatchNotFound(match_id)

            updated = Match.update_score(current, home_score, away_score)
            self._matches[match_id] = updated

        logger.info(f"Updated match {match_id}: {updated}")
        return updated

    def finish_match(self, match_id: UUID) -> Match:
        """
        Remove a match from the registry

        Returns:
            the match as it was when finished

        Raises:
            MatchNotFound: no active match has this id (including one already finished)
        """
        with self._lock:
            finished = self._matches.pop(match_id, None)

        if finished is None:
            logger.warning(f"Finish requested for unknown match {match_id}")
            raise MatchNotFound(match_id)

        logger.info(f"Finished match {match_id}: {finished}")
        return finished

    def get_match(self, match_id: UUID) -> Match:
        with self._lock:
            match = self._matches.get(match_id)
        if match is None:
            raise MatchNotFound(match_id)
        return match

    def get_summary(self) -> List[Match]:
        """
        Ranked snapshot of all matches in progress

        Ordering:
        - total_score descending
        - start_time descending (most recently started first)
        - otherwise most recently registered first

        The list is built fresh on every call; changing it does not touch
        the registry.
        """
        with self._lock:
            snapshot = list(self._matches.values())

        # sorted() is stable, also with reverse=True: feeding the newest
        # registrations first keeps them first among exact ties.
        snapshot.reverse()
        return sorted(snapshot, key=_ranking_key, reverse=True)


def _ranking_key(match: Match):
    return match.total_score, match.start_time
