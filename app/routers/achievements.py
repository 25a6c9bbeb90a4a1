from __future__ import annotations

from fastapi import APIRouter, Depends

from app.core.deps import get_trip_session
from app.schemas.achievements import AchievementsResponse
from app.schemas.stats import UserStats
from app.services.achievements import summarize, upcoming_goals
from app.services.session import TripSession

router = APIRouter(tags=["achievements"])


@router.get("/stats", response_model=UserStats)
def get_stats(session: TripSession = Depends(get_trip_session)) -> UserStats:
    return session.stats


@router.get("/achievements", response_model=AchievementsResponse)
def get_achievements(session: TripSession = Depends(get_trip_session)) -> AchievementsResponse:
    items = session.achievements()
    return AchievementsResponse(items=items, summary=summarize(items), upcoming=upcoming_goals(items))
