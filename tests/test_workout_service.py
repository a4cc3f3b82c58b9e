import random
from datetime import date, datetime, timedelta

import pytest

from planner_service.exceptions import (
    InvalidSetLogException,
    ProfileNotFoundException,
    WorkoutNotFoundException,
)
from planner_service.models import Profile, SetLog, Workout, WorkoutLog
from planner_service.schemas.workout import PlanRequest, SetLogInput, WorkoutCompletionRequest
from planner_service.scripts.seed_exercises import seed
from planner_service.services.profile_service import upsert_profile
from planner_service.services.workout_service import WorkoutService

WEEK_START = date(2026, 10, 19)
NOW = datetime(2026, 10, 24, 18, 0)


@pytest.fixture()
def service(db, profile_input):
    seed(db)
    upsert_profile(db, "user-1", profile_input, WEEK_START)
    return WorkoutService(db, "user-1", rng=random.Random(99))


def _first_week(service):
    return service.create_week_plan(PlanRequest(week_start=WEEK_START, week_index=1), now=NOW)


def _complete_all(service, week_index, now=NOW):
    responses = []
    for workout in service.list_workouts():
        if workout.week_index == week_index and not workout.completed:
            responses.append(service.complete_workout(workout.id, WorkoutCompletionRequest(), now=now))
    return responses


def test_create_week_persists_scheduled_days(service, db):
    result = _first_week(service)

    assert result.created is True
    assert len(result.workout_ids) == 3
    workouts = db.query(Workout).order_by(Workout.day_index).all()
    assert [w.scheduled_date for w in workouts] == [date(2026, 10, 19), date(2026, 10, 21), date(2026, 10, 23)]
    assert [w.focus for w in workouts] == ["push", "pull", "legs + core"]
    assert all(len(w.items) == 5 for w in workouts)
    assert [item.order_index for item in workouts[0].items] == [0, 1, 2, 3, 4]


def test_create_week_is_idempotent(service, db):
    first = _first_week(service)
    second = _first_week(service)

    assert second.created is False
    assert second.workout_ids == first.workout_ids
    assert db.query(Workout).count() == 3


def test_replace_existing_regenerates_unlogged_week(service, db):
    _first_week(service)
    result = service.create_week_plan(
        PlanRequest(week_start=WEEK_START, week_index=1, replace_existing=True), now=NOW
    )

    assert result.created is True
    assert db.query(Workout).count() == 3


def test_replace_existing_keeps_logged_week(service, db):
    first = _first_week(service)
    service.complete_workout(first.workout_ids[0], WorkoutCompletionRequest(), now=NOW)

    result = service.create_week_plan(
        PlanRequest(week_start=WEEK_START, week_index=1, replace_existing=True), now=NOW
    )

    assert result.created is False
    assert result.workout_ids == first.workout_ids


def test_create_week_requires_profile(db):
    seed(db)
    service = WorkoutService(db, "no-profile")

    with pytest.raises(ProfileNotFoundException):
        service.create_week_plan(PlanRequest(week_start=WEEK_START, week_index=1), now=NOW)


def test_completion_logs_sets(service, db):
    week = _first_week(service)
    workout = service.get_workout(week.workout_ids[0])
    item = workout.items[0]
    request = WorkoutCompletionRequest(
        notes="felt good",
        perceived_difficulty=7,
        sets=[
            SetLogInput(workout_item_id=item.id, set_index=1, reps=10, rpe=8),
            SetLogInput(workout_item_id=item.id, set_index=2, reps=9, rpe=9, pain=2),
        ],
    )

    response = service.complete_workout(workout.id, request, now=NOW)

    assert response.ok is True
    assert response.next_week_created is False
    log = db.get(WorkoutLog, response.workout_log_id)
    assert log.notes == "felt good"
    assert [s.reps for s in log.set_logs] == [10, 9]
    assert service.get_workout(workout.id).completed is True


def test_completing_the_week_creates_the_next_one(service, db):
    _first_week(service)
    responses = _complete_all(service, 1)

    assert [r.next_week_created for r in responses] == [False, False, True]
    assert responses[-1].next_week_index == 2
    next_week = db.query(Workout).filter(Workout.week_index == 2).order_by(Workout.day_index).all()
    assert len(next_week) == 3
    assert all(w.week_start == WEEK_START + timedelta(days=7) for w in next_week)
    assert next_week[0].scheduled_date == date(2026, 10, 26)


def test_duplicate_completion_creates_next_week_once(service, db):
    week = _first_week(service)
    _complete_all(service, 1)

    again = service.complete_workout(week.workout_ids[-1], WorkoutCompletionRequest(), now=NOW)

    assert again.next_week_created is False
    assert db.query(Workout).filter(Workout.week_index == 2).count() == 3
    assert db.query(WorkoutLog).count() == 4


def test_lost_race_keeps_log_and_reuses_existing_week(service, db, monkeypatch):
    week = _first_week(service)
    for workout_id in week.workout_ids[:-1]:
        service.complete_workout(workout_id, WorkoutCompletionRequest(), now=NOW)

    # Another request already wrote day 1 of week 2 between our check and insert
    db.add(
        Workout(
            user_id="user-1",
            week_start=WEEK_START + timedelta(days=7),
            week_index=2,
            day_index=1,
            title="Day 2",
            focus="pull",
            total_minutes=30,
        )
    )
    db.commit()
    monkeypatch.setattr(service.repository, "week_exists", lambda user_id, week_index: False)

    response = service.complete_workout(week.workout_ids[-1], WorkoutCompletionRequest(), now=NOW)

    assert response.next_week_created is False
    assert db.get(WorkoutLog, response.workout_log_id) is not None
    assert db.query(Workout).filter(Workout.week_index == 2).count() == 1


def test_completion_without_profile_still_logs(service, db):
    week = _first_week(service)
    db.query(Profile).delete()
    db.commit()

    responses = _complete_all(service, 1)

    assert len(responses) == 3
    assert all(r.next_week_created is False for r in responses)
    assert db.query(WorkoutLog).count() == 3
    assert db.query(Workout).filter(Workout.week_index == 2).count() == 0
    assert sorted(w.id for w in service.list_workouts()) == sorted(week.workout_ids)


def test_pain_adapts_the_next_week(service, db):
    week = _first_week(service)
    first = service.get_workout(week.workout_ids[0])
    painful = first.items[0]
    service.complete_workout(
        first.id,
        WorkoutCompletionRequest(sets=[SetLogInput(workout_item_id=painful.id, set_index=1, reps=5, pain=7)]),
        now=NOW,
    )
    _complete_all(service, 1)

    next_week = [w for w in service.list_workouts() if w.week_index == 2]
    exercise_ids = {item.exercise_id for w in next_week for item in w.items}
    assert len(next_week) == 3
    assert painful.exercise_id not in exercise_ids
    assert {item.sets for w in next_week for item in w.items} == {2}


def test_old_pain_is_ignored(service, db):
    week = _first_week(service)
    first = service.get_workout(week.workout_ids[0])
    painful = first.items[0]
    service.complete_workout(
        first.id,
        WorkoutCompletionRequest(sets=[SetLogInput(workout_item_id=painful.id, set_index=1, reps=5, pain=9)]),
        now=NOW - timedelta(days=10),
    )
    _complete_all(service, 1)

    next_week = [w for w in service.list_workouts() if w.week_index == 2]
    assert {item.sets for w in next_week for item in w.items} == {3}


def test_set_logs_must_belong_to_the_workout(service, db):
    week = _first_week(service)
    other = service.get_workout(week.workout_ids[1])
    request = WorkoutCompletionRequest(
        sets=[SetLogInput(workout_item_id=other.items[0].id, set_index=1, reps=8)]
    )

    with pytest.raises(InvalidSetLogException) as exc_info:
        service.complete_workout(week.workout_ids[0], request, now=NOW)

    assert exc_info.value.item_ids == [other.items[0].id]
    assert db.query(WorkoutLog).count() == 0
    assert db.query(SetLog).count() == 0


def test_other_users_workouts_are_not_visible(service, db):
    week = _first_week(service)
    stranger = WorkoutService(db, "user-2")

    assert stranger.list_workouts() == []
    with pytest.raises(WorkoutNotFoundException):
        stranger.get_workout(week.workout_ids[0])
    with pytest.raises(WorkoutNotFoundException):
        stranger.complete_workout(week.workout_ids[0], WorkoutCompletionRequest(), now=NOW)


def test_regenerated_week_keeps_pain_adaptation(service, db):
    week = _first_week(service)
    first = service.get_workout(week.workout_ids[0])
    painful = first.items[0]
    service.complete_workout(
        first.id,
        WorkoutCompletionRequest(sets=[SetLogInput(workout_item_id=painful.id, set_index=1, reps=5, pain=8)]),
        now=NOW,
    )
    _complete_all(service, 1)

    for seed in range(10):
        service.rng = random.Random(seed)
        result = service.create_week_plan(
            PlanRequest(week_start=WEEK_START + timedelta(days=7), week_index=2, replace_existing=True),
            now=NOW,
        )
        assert result.created is True

        regenerated = [w for w in service.list_workouts() if w.week_index == 2]
        assert len(regenerated) == 3
        assert painful.exercise_id not in {item.exercise_id for w in regenerated for item in w.items}
        assert {item.sets for w in regenerated for item in w.items} == {2}
