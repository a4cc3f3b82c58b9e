from collections.abc import Iterable
from datetime import date, datetime

from sqlalchemy.orm import Session, selectinload

from ..models import SetLog, Workout, WorkoutItem, WorkoutLog
from ..schemas.plan import DayPlan
from ..schemas.workout import WorkoutCompletionRequest
from ..services.adaptation import LoggedSet


class WorkoutRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_workout(self, workout_id: int, user_id: str) -> Workout | None:
        return (
            self.db.query(Workout)
            .options(selectinload(Workout.items))
            .filter(Workout.id == workout_id, Workout.user_id == user_id)
            .first()
        )

    def list_workouts(self, user_id: str) -> list[Workout]:
        return (
            self.db.query(Workout)
            .options(selectinload(Workout.items))
            .filter(Workout.user_id == user_id)
            .order_by(Workout.week_start.desc(), Workout.day_index)
            .all()
        )

    def list_week_workouts(self, user_id: str, week_index: int) -> list[Workout]:
        return (
            self.db.query(Workout)
            .options(selectinload(Workout.items))
            .filter(Workout.user_id == user_id, Workout.week_index == week_index)
            .order_by(Workout.day_index)
            .all()
        )

    def week_exists(self, user_id: str, week_index: int) -> bool:
        return (
            self.db.query(Workout.id)
            .filter(Workout.user_id == user_id, Workout.week_index == week_index)
            .first()
            is not None
        )

    def completed_workout_ids(self, user_id: str, workout_ids: Iterable[int]) -> set[int]:
        workout_ids = list(workout_ids)
        if not workout_ids:
            return set()
        rows = (
            self.db.query(WorkoutLog.workout_id)
            .filter(WorkoutLog.user_id == user_id, WorkoutLog.workout_id.in_(workout_ids))
            .distinct()
            .all()
        )
        return {row.workout_id for row in rows}

    def recent_set_logs(self, user_id: str, since: datetime) -> list[LoggedSet]:
        """Set logs with a pain score, for this user, completed at or after ``since``."""
        rows = (
            self.db.query(WorkoutItem.exercise_id, SetLog.pain, WorkoutLog.completed_at)
            .join(WorkoutLog, SetLog.workout_log_id == WorkoutLog.id)
            .join(WorkoutItem, SetLog.workout_item_id == WorkoutItem.id)
            .filter(
                WorkoutLog.user_id == user_id,
                WorkoutLog.completed_at >= since,
                SetLog.pain.is_not(None),
            )
            .all()
        )
        return [LoggedSet(exercise_id=row.exercise_id, pain=row.pain, completed_at=row.completed_at) for row in rows]

    def delete_workouts(self, workouts: Iterable[Workout]) -> None:
        # Items are loaded with the workout so the ORM cascade removes them.
        for workout in workouts:
            self.db.delete(workout)
        self.db.flush()

    def add_workout(
        self,
        user_id: str,
        week_start: date,
        week_index: int,
        day_index: int,
        scheduled_date: date,
        day: DayPlan,
    ) -> Workout:
        workout = Workout(
            user_id=user_id,
            week_start=week_start,
            week_index=week_index,
            day_index=day_index,
            scheduled_date=scheduled_date,
            title=day.title,
            focus=day.focus,
            total_minutes=day.total_minutes,
            items=[
                WorkoutItem(
                    exercise_id=item.exercise_id,
                    order_index=order_index,
                    sets=item.sets,
                    reps=item.reps,
                    rest_seconds=item.rest_seconds,
                    reason=item.reason,
                )
                for order_index, item in enumerate(day.items)
            ],
        )
        self.db.add(workout)
        self.db.flush()
        return workout

    def create_log(
        self,
        workout: Workout,
        user_id: str,
        request: WorkoutCompletionRequest,
        completed_at: datetime,
    ) -> WorkoutLog:
        log = WorkoutLog(
            workout_id=workout.id,
            user_id=user_id,
            completed_at=completed_at,
            notes=request.notes,
            perceived_difficulty=request.perceived_difficulty,
            set_logs=[
                SetLog(
                    workout_item_id=entry.workout_item_id,
                    set_index=entry.set_index,
                    reps=entry.reps,
                    rpe=entry.rpe,
                    pain=entry.pain,
                )
                for entry in request.sets
            ],
        )
        self.db.add(log)
        self.db.flush()
        return log
