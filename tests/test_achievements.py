from app.schemas.stats import UserStats
from app.services.achievements import DEFINITIONS, evaluate_achievements, summarize, upcoming_goals


def _unlocked(stats):
    return [a.id for a in evaluate_achievements(stats) if a.is_unlocked]


def test_seven_definitions_in_fixed_order():
    assert [d.id for d in DEFINITIONS] == ["1", "2", "3", "4", "5", "6", "7"]
    assert [a.max_progress for a in evaluate_achievements(UserStats())] == [5, 50, 10, 5, 15, 30, 10]


def test_five_visits_unlock_only_first_achievement():
    stats = UserStats(
        visited_places=5,
        distance_walked=10,
        restaurants_visited=0,
        categories_explored=1,
        favorite_places=0,
        days_active=0,
        collection_comments=0,
    )
    assert _unlocked(stats) == ["1"]


def test_distance_goal_is_measured_in_kilometres():
    assert "2" not in _unlocked(UserStats(distance_walked=49_996))
    assert "2" not in _unlocked(UserStats(distance_walked=49_999))
    assert "2" in _unlocked(UserStats(distance_walked=50_000))

    walker = evaluate_achievements(UserStats(distance_walked=12_500))[1]
    assert walker.progress == 12.5
    assert walker.progress_ratio == 0.25


def test_progress_ratio_is_capped():
    first = evaluate_achievements(UserStats(visited_places=12))[0]
    assert first.is_unlocked
    assert first.progress_ratio == 1.0


def test_summary_aggregates():
    stats = UserStats(visited_places=5, favorite_places=15, days_active=30)
    summary = summarize(evaluate_achievements(stats))
    assert summary.unlocked_count == 3
    assert summary.in_progress_count == 4
    assert summary.total_points == 300
    assert summary.overall_progress_percent == 43


def test_summary_with_nothing_unlocked():
    summary = summarize(evaluate_achievements(UserStats()))
    assert summary.unlocked_count == 0
    assert summary.overall_progress_percent == 0


def test_upcoming_goals_sorted_by_ratio_with_stable_ties():
    stats = UserStats(
        visited_places=4,  # 0.8
        restaurants_visited=5,  # 0.5
        categories_explored=1,  # 0.2
        favorite_places=3,  # 0.2
        days_active=30,  # unlocked
        collection_comments=2,  # 0.2
    )
    goals = upcoming_goals(evaluate_achievements(stats))
    assert [a.id for a in goals] == ["1", "3", "4"]

    # equal ratios keep definition order: 4, 5, 7
    goals = upcoming_goals(evaluate_achievements(stats), limit=10)
    assert [a.id for a in goals] == ["1", "3", "4", "5", "7"]


def test_upcoming_goals_skip_untouched_and_unlocked():
    stats = UserStats(visited_places=5)
    assert upcoming_goals(evaluate_achievements(stats)) == []
