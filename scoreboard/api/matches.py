"""
Match API Endpoints

Responsibilities:
1. Start / finish matches
2. Update scores
3. Serve the ranked summary

No business rules live here: every check happens in MatchRegistry / Match,
this layer only translates their exceptions into HTTP status codes.
"""
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
import logging

from scoreboard.core.exceptions import (
    CapacityError,
    ConflictError,
    NotFoundError,
    ScoreboardException,
    ValidationError,
)
from scoreboard.core.registry import MatchRegistry
from scoreboard.schemas import ErrorDetail, MatchResponse, MatchStart, ScoreUpdate

router = APIRouter(prefix="/api/matches", tags=["matches"])
logger = logging.getLogger(__name__)

STATUS_BY_CATEGORY = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_409_CONFLICT),
    (CapacityError, status.HTTP_409_CONFLICT),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
)


def get_registry(request: Request) -> MatchRegistry:
    """FastAPI dependency: the registry owned by the running app"""
    return request.app.state.registry


def to_http_error(exc: ScoreboardException) -> HTTPException:
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    for category, code in STATUS_BY_CATEGORY:
        if isinstance(exc, category):
            status_code = code
            break
    detail = ErrorDetail(kind=exc.kind.value, message=str(exc))
    return HTTPException(status_code=status_code, detail=detail.model_dump())


@router.post("", response_model=MatchResponse, status_code=status.HTTP_201_CREATED)
def start_match(body: MatchStart, registry: MatchRegistry = Depends(get_registry)):
    """
    Start a match at 0 - 0

    Errors:
        400: missing / duplicate / invalid team name
        409: a team is already playing, or the scoreboard is full
    """
    try:
        match = registry.start_match(body.home_team, body.away_team)
        return MatchResponse.from_match(match)

    except ScoreboardException as e:
        raise to_http_error(e)
    except Exception as e:
        logger.error(f"Failed to start match: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")


@router.get("/summary", response_model=List[MatchResponse])
def get_summary(registry: MatchRegistry = Depends(get_registry)):
    """Matches in progress, highest total score first, newest first on ties"""
    try:
        return [MatchResponse.from_match(match) for match in registry.get_summary()]

    except Exception as e:
        logger.error(f"Failed to build summary: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")


@router.get("/{match_id}", response_model=MatchResponse)
def get_match(match_id: UUID, registry: MatchRegistry = Depends(get_registry)):
    try:
        return MatchResponse.from_match(registry.get_match(match_id))

    except ScoreboardException as e:
        raise to_http_error(e)
    except Exception as e:
        logger.error(f"Failed to get match {match_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")


@router.put("/{match_id}/score", response_model=MatchResponse)
def update_score(
    match_id: UUID,
    body: ScoreUpdate,
    registry: MatchRegistry = Depends(get_registry)
):
    """
    Set the absolute score of a match

    Errors:
        400: a score is outside [0, 50]
        404: match not found
    """
    try:
        match = registry.update_score(match_id, body.home_score, body.away_score)
        return MatchResponse.from_match(match)

    except ScoreboardException as e:
        raise to_http_error(e)
    except Exception as e:
        logger.error(f"Failed to update score of {match_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")


@router.delete("/{match_id}", status_code=status.HTTP_204_NO_CONTENT)
def finish_match(match_id: UUID, registry: MatchRegistry = Depends(get_registry)):
    """
    Finish a match and drop it from the scoreboard

    Errors:
        404: match not found (or already finished)
    """
    try:
        registry.finish_match(match_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    except ScoreboardException as e:
        raise to_http_error(e)
    except Exception as e:
        logger.error(f"Failed to finish match {match_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")
