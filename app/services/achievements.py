from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from app.schemas.achievements import Achievement, AchievementSummary
from app.schemas.stats import UserStats

POINTS_PER_ACHIEVEMENT = 100
UPCOMING_LIMIT = 3


@dataclass(frozen=True)
class AchievementDefinition:
    id: str
    title: str
    description: str
    category: str
    max_progress: float
    progress: Callable[[UserStats], float]
    reward: str | None = None


def _km_walked(stats: UserStats) -> float:
    # Stats accumulate meters; the goal is stated in kilometres
    return stats.distance_walked / 1000


DEFINITIONS: tuple[AchievementDefinition, ...] = (
    AchievementDefinition(
        id="1",
        title="Первооткрыватель",
        description="Посетите 5 новых мест",
        category="Исследование",
        max_progress=5,
        progress=lambda s: s.visited_places,
        reward="+50 очков опыта",
    ),
    AchievementDefinition(
        id="2",
        title="Путешественник",
        description="Пройдите 50 км по городу",
        category="Активность",
        max_progress=50,
        progress=_km_walked,
        reward="Специальный бейдж",
    ),
    AchievementDefinition(
        id="3",
        title="Гурман",
        description="Посетите 10 кафе и ресторанов",
        category="Специализация",
        max_progress=10,
        progress=lambda s: s.restaurants_visited,
        reward="Скидки в ресторанах",
    ),
    AchievementDefinition(
        id="4",
        title="Исследователь",
        description="Посетите места разных категорий (кафе, парки, театры и т.д.)",
        category="Исследование",
        max_progress=5,
        progress=lambda s: s.categories_explored,
        reward="Эксклюзивные маршруты",
    ),
    AchievementDefinition(
        id="5",
        title="Социальный",
        description="Добавьте 15 мест в избранное",
        category="Социальное",
        max_progress=15,
        progress=lambda s: s.favorite_places,
        reward="Персональные рекомендации",
    ),
    AchievementDefinition(
        id="6",
        title="Активист",
        description="Используйте приложение 30 дней подряд",
        category="Активность",
        max_progress=30,
        progress=lambda s: s.days_active,
        reward="Премиум функции",
    ),
    AchievementDefinition(
        id="7",
        title="Коллекционер",
        description="Оставьте комментарии ко всем коллекциям",
        category="Коллекции",
        max_progress=10,
        progress=lambda s: s.collection_comments,
        reward="Специальный титул",
    ),
)


def evaluate(definition: AchievementDefinition, stats: UserStats) -> Achievement:
    progress = definition.progress(stats)
    return Achievement(
        id=definition.id,
        title=definition.title,
        description=definition.description,
        category=definition.category,
        reward=definition.reward,
        progress=progress,
        max_progress=definition.max_progress,
        is_unlocked=progress >= definition.max_progress,
        progress_ratio=min(progress / definition.max_progress, 1.0),
    )


def evaluate_achievements(stats: UserStats) -> list[Achievement]:
    return [evaluate(d, stats) for d in DEFINITIONS]


def summarize(achievements: Sequence[Achievement]) -> AchievementSummary:
    total = len(achievements)
    unlocked = sum(1 for a in achievements if a.is_unlocked)
    return AchievementSummary(
        unlocked_count=unlocked,
        in_progress_count=total - unlocked,
        total_points=unlocked * POINTS_PER_ACHIEVEMENT,
        overall_progress_percent=round(unlocked / total * 100) if total else 0,
    )


def upcoming_goals(achievements: Sequence[Achievement], limit: int = UPCOMING_LIMIT) -> list[Achievement]:
    """Started but locked achievements, closest to completion first.

    ``sorted`` is stable, so equal ratios keep definition order.
    """
    started = [a for a in achievements if a.progress > 0 and not a.is_unlocked]
    return sorted(started, key=lambda a: a.progress_ratio, reverse=True)[:limit]
