import random
from datetime import datetime, timedelta

from planner_service.config import Settings
from planner_service.schemas.enums import AgeBand, Goal, Level
from planner_service.schemas.profile import PlannerProfile
from planner_service.services.adaptation import (
    LoggedSet,
    apply_pain_volume_cut,
    collect_excluded_exercise_ids,
    generate_adapted_plan,
)
from planner_service.services.plan_generator import generate_plan

NOW = datetime(2026, 3, 10, 12, 0)


def test_recent_painful_sets_are_excluded():
    logs = [
        LoggedSet(exercise_id=4, pain=6, completed_at=NOW - timedelta(days=2)),
        LoggedSet(exercise_id=4, pain=7, completed_at=NOW - timedelta(days=1)),
        LoggedSet(exercise_id=9, pain=5, completed_at=NOW - timedelta(days=7)),
    ]

    assert collect_excluded_exercise_ids(logs, NOW, Settings()) == [4, 9]


def test_mild_old_or_unscored_sets_are_ignored():
    logs = [
        LoggedSet(exercise_id=1, pain=4, completed_at=NOW),
        LoggedSet(exercise_id=2, pain=9, completed_at=NOW - timedelta(days=7, seconds=1)),
        LoggedSet(exercise_id=3, pain=None, completed_at=NOW),
    ]

    assert collect_excluded_exercise_ids(logs, NOW, Settings()) == []


def test_pain_threshold_is_configurable():
    logs = [LoggedSet(exercise_id=1, pain=3, completed_at=NOW)]

    assert collect_excluded_exercise_ids(logs, NOW, Settings(PAIN_THRESHOLD=3)) == [1]


def test_painful_exercise_is_dropped_and_volume_cut(catalog, profile):
    settings = Settings()
    baseline = generate_plan(catalog, profile, AgeBand.PRIME, 1, rng=random.Random(21), settings=settings)
    painful_id = baseline.days[0].items[0].exercise_id
    logs = [LoggedSet(exercise_id=painful_id, pain=6, completed_at=NOW - timedelta(days=1))]

    for seed in range(10):
        adapted = generate_adapted_plan(
            catalog, profile, AgeBand.PRIME, 1, logs, NOW, rng=random.Random(seed), settings=settings
        )

        assert adapted.pain_reported is True
        assert adapted.excluded_exercise_ids == [painful_id]
        assert painful_id not in adapted.plan.exercise_ids()
        # hypertrophy 3 sets -> floor(3 * 0.7) = 2
        assert {item.sets for day in adapted.plan.days for item in day.items} == {2}


def test_pain_cut_stacks_with_deload(catalog):
    profile = PlannerProfile(level=Level.INTERMEDIATE, goal=Goal.STRENGTH, days_per_week=3, session_minutes=30)
    logs = [LoggedSet(exercise_id=1, pain=8, completed_at=NOW)]
    adapted = generate_adapted_plan(catalog, profile, AgeBand.PRIME, 4, logs, NOW, rng=random.Random(2))

    # 4 sets -> deload 2 -> pain cut max(1, floor(1.4)) = 1
    assert adapted.plan.is_deload is True
    assert {item.sets for day in adapted.plan.days for item in day.items} == {1}


def test_no_pain_leaves_plan_untouched(catalog, profile):
    plain = generate_plan(catalog, profile, AgeBand.PRIME, 1, rng=random.Random(8))
    adapted = generate_adapted_plan(catalog, profile, AgeBand.PRIME, 1, [], NOW, rng=random.Random(8))

    assert adapted.pain_reported is False
    assert adapted.excluded_exercise_ids == []
    assert adapted.plan == plain


def test_volume_cut_recomputes_day_minutes(catalog, profile):
    plan = generate_plan(catalog, profile, AgeBand.PRIME, 1, rng=random.Random(4))
    cut = apply_pain_volume_cut(plan, profile.session_minutes, Settings())

    for before, after in zip(plan.days, cut.days):
        assert [i.exercise_id for i in before.items] == [i.exercise_id for i in after.items]
        assert after.total_minutes <= before.total_minutes
    assert plan.days[0].items[0].sets == 3
