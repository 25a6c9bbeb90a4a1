from __future__ import annotations

from pydantic import BaseModel


class Achievement(BaseModel):
    id: str
    title: str
    description: str
    category: str
    reward: str | None = None
    progress: float
    max_progress: float
    is_unlocked: bool
    progress_ratio: float


class AchievementSummary(BaseModel):
    unlocked_count: int
    in_progress_count: int
    total_points: int
    overall_progress_percent: int


class AchievementsResponse(BaseModel):
    items: list[Achievement]
    summary: AchievementSummary
    upcoming: list[Achievement]
