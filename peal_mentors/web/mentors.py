"""Mentor matching routes: recommendations, criteria match, search."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from peal_mentors.matching.matcher import MentorMatcher
from peal_mentors.mentors.models import (
    AVAILABILITY_STATES,
    MatchingCriteria,
    SearchFilters,
    parse_bool,
    parse_number,
)

from .dependencies import get_matcher

router = APIRouter(prefix="/api/mentors")


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def _parse_limit(value) -> int | None:
    number = parse_number(value)
    if number is None or number < 1:
        return None
    return int(number)


@router.get("/match/recommendations")
def recommendations(request: Request, matcher: MentorMatcher = Depends(get_matcher)):
    user_id = request.query_params.get("userId", "").strip()
    if not user_id:
        return _error("User ID is required", 400)

    matches = matcher.get_recommendations(user_id)
    return {"matches": [m.to_dict() for m in matches]}


@router.post("/match")
async def match(request: Request, matcher: MentorMatcher = Depends(get_matcher)):
    try:
        body = await request.json()
    except ValueError:  # JSONDecodeError and UnicodeDecodeError
        return _error("Request body must be JSON", 400)

    if not isinstance(body, dict):
        return _error("Request body must be a JSON object", 400)

    user_id = str(body.get("userId") or "").strip()
    if not user_id:
        return _error("User ID is required", 400)

    criteria = MatchingCriteria.from_dict(body.get("criteria"))
    limit = _parse_limit(body.get("limit"))

    matches = matcher.find_matches(user_id, criteria, limit)
    return {"matches": [m.to_dict() for m in matches]}


@router.get("/search")
def search(request: Request, matcher: MentorMatcher = Depends(get_matcher)):
    query = request.query_params.get("q", "")
    availability = request.query_params.get("availability")
    filters = SearchFilters(
        availability=availability if availability in AVAILABILITY_STATES else None,
        accepts_remote=parse_bool(request.query_params.get("acceptsRemote")),
    )

    results = matcher.search_candidates(query, filters)
    return {"mentors": [r.to_dict() for r in results]}
