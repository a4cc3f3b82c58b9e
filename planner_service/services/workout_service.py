"""Week plans and workout completion for a single user.

Completing the last open workout of a week generates the following week.
Concurrent completions converge on one next week: the existence check runs
first, and a duplicate insert that slips past it is rejected by the unique
(user_id, week_index, day_index) index, rolled back and treated as "already
created".
"""

import random
from datetime import date, datetime, timedelta

import structlog
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..config import Settings, get_settings
from ..exceptions import InvalidSetLogException, ProfileNotFoundException, WorkoutNotFoundException
from ..metrics import (
    NEXT_WEEKS_CREATED_TOTAL,
    PAIN_EXCLUSIONS_TOTAL,
    PLAN_EMPTY_DAYS_TOTAL,
    PLANS_GENERATED_TOTAL,
    WORKOUT_LOGS_CREATED_TOTAL,
    WORKOUTS_CREATED_TOTAL,
)
from ..models import Profile, Workout, utcnow
from ..repositories.workout_repository import WorkoutRepository
from ..schemas.workout import (
    PlanRequest,
    WeekPlanResponse,
    WorkoutCompletionRequest,
    WorkoutCompletionResponse,
    WorkoutResponse,
)
from .adaptation import LoggedSet, generate_adapted_plan
from .age_band import calculate_age_band
from .catalog_service import load_catalog
from .profile_service import get_profile, to_planner_profile
from .schedule import get_scheduled_date

logger = structlog.get_logger(__name__)


class WorkoutService:
    def __init__(
        self,
        db: Session,
        user_id: str,
        rng: random.Random | None = None,
        settings: Settings | None = None,
    ):
        self.db = db
        self.user_id = user_id
        self.repository = WorkoutRepository(db)
        self.rng = rng or random.Random()
        self.settings = settings or get_settings()

    def _to_response(self, workout: Workout, completed_ids: set[int]) -> WorkoutResponse:
        response = WorkoutResponse.model_validate(workout)
        return response.model_copy(update={"completed": workout.id in completed_ids})

    def list_workouts(self) -> list[WorkoutResponse]:
        workouts = self.repository.list_workouts(self.user_id)
        completed = self.repository.completed_workout_ids(self.user_id, [w.id for w in workouts])
        return [self._to_response(workout, completed) for workout in workouts]

    def get_workout(self, workout_id: int) -> WorkoutResponse:
        workout = self.repository.get_workout(workout_id, self.user_id)
        if workout is None:
            raise WorkoutNotFoundException(workout_id)
        completed = self.repository.completed_workout_ids(self.user_id, [workout.id])
        return self._to_response(workout, completed)

    def create_week_plan(self, request: PlanRequest, now: datetime | None = None) -> WeekPlanResponse:
        """Generate the week, or return it unchanged when it already exists.

        With ``replace_existing`` a week nobody has logged yet is deleted and
        regenerated, which is how a profile edit reaches the current week.
        """
        now = now or utcnow()
        existing = self.repository.list_week_workouts(self.user_id, request.week_index)
        trigger = "initial"
        if existing:
            logged = self.repository.completed_workout_ids(self.user_id, [w.id for w in existing])
            if not request.replace_existing or logged:
                return WeekPlanResponse(
                    week_index=request.week_index,
                    created=False,
                    workout_ids=[w.id for w in existing],
                )
            trigger = "replace"

        profile = get_profile(self.db, self.user_id)
        if profile is None:
            raise ProfileNotFoundException(self.user_id)

        if existing:
            self.repository.delete_workouts(existing)

        since = now - timedelta(days=self.settings.PAIN_LOOKBACK_DAYS)
        set_logs = self.repository.recent_set_logs(self.user_id, since)
        workout_ids = self._generate_week(
            profile,
            request.week_start,
            request.week_index,
            now,
            trigger,
            set_logs,
        )
        if workout_ids is None:
            current = self.repository.list_week_workouts(self.user_id, request.week_index)
            return WeekPlanResponse(
                week_index=request.week_index,
                created=False,
                workout_ids=[w.id for w in current],
            )
        return WeekPlanResponse(week_index=request.week_index, created=True, workout_ids=workout_ids)

    def complete_workout(
        self,
        workout_id: int,
        request: WorkoutCompletionRequest,
        now: datetime | None = None,
    ) -> WorkoutCompletionResponse:
        now = now or utcnow()
        workout = self.repository.get_workout(workout_id, self.user_id)
        if workout is None:
            raise WorkoutNotFoundException(workout_id)

        item_ids = {item.id for item in workout.items}
        unknown = sorted({entry.workout_item_id for entry in request.sets} - item_ids)
        if unknown:
            raise InvalidSetLogException(workout_id, unknown)

        try:
            log = self.repository.create_log(workout, self.user_id, request, now)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        WORKOUT_LOGS_CREATED_TOTAL.inc()
        logger.info(
            "workout_service.workout_completed",
            user_id=self.user_id,
            workout_id=workout.id,
            week_index=workout.week_index,
            sets=len(request.sets),
        )

        next_week_index = self._create_next_week_if_complete(workout, now)
        return WorkoutCompletionResponse(
            workout_log_id=log.id,
            next_week_created=next_week_index is not None,
            next_week_index=next_week_index,
        )

    def _create_next_week_if_complete(self, workout: Workout, now: datetime) -> int | None:
        week = self.repository.list_week_workouts(self.user_id, workout.week_index)
        completed = self.repository.completed_workout_ids(self.user_id, [w.id for w in week])
        if not week or len(completed) < len(week):
            return None

        next_week_index = workout.week_index + 1
        if self.repository.week_exists(self.user_id, next_week_index):
            logger.debug("workout_service.next_week_exists", user_id=self.user_id, week_index=next_week_index)
            return None

        profile = get_profile(self.db, self.user_id)
        if profile is None:
            logger.warning("workout_service.profile_missing", user_id=self.user_id, week_index=next_week_index)
            return None

        since = now - timedelta(days=self.settings.PAIN_LOOKBACK_DAYS)
        set_logs = self.repository.recent_set_logs(self.user_id, since)
        workout_ids = self._generate_week(
            profile,
            workout.week_start + timedelta(days=7),
            next_week_index,
            now,
            "completion",
            set_logs,
        )
        if workout_ids is None:
            return None

        NEXT_WEEKS_CREATED_TOTAL.inc()
        return next_week_index

    def _generate_week(
        self,
        profile: Profile,
        week_start: date,
        week_index: int,
        now: datetime,
        trigger: str,
        set_logs: list[LoggedSet] | None = None,
    ) -> list[int] | None:
        """Generate and persist one week; ``None`` when another writer got there first."""
        adapted = generate_adapted_plan(
            load_catalog(self.db),
            to_planner_profile(profile),
            calculate_age_band(profile.birth_date, now.date()),
            week_index,
            set_logs or [],
            now,
            rng=self.rng,
            settings=self.settings,
        )
        plan = adapted.plan

        try:
            workouts = [
                self.repository.add_workout(
                    self.user_id,
                    week_start,
                    week_index,
                    day_index,
                    get_scheduled_date(week_start, day_index, profile.days_per_week, profile.training_days),
                    day,
                )
                for day_index, day in enumerate(plan.days)
            ]
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            logger.info(
                "workout_service.week_already_created",
                user_id=self.user_id,
                week_index=week_index,
                error=str(exc.orig),
            )
            return None
        except Exception:
            self.db.rollback()
            raise

        PLANS_GENERATED_TOTAL.labels(trigger=trigger).inc()
        WORKOUTS_CREATED_TOTAL.inc(len(workouts))
        PLAN_EMPTY_DAYS_TOTAL.inc(sum(1 for day in plan.days if not day.items))
        if adapted.excluded_exercise_ids:
            PAIN_EXCLUSIONS_TOTAL.inc(len(adapted.excluded_exercise_ids))

        logger.info(
            "workout_service.week_created",
            user_id=self.user_id,
            week_index=week_index,
            trigger=trigger,
            deload=plan.is_deload,
            pain_reported=adapted.pain_reported,
            workouts=len(workouts),
        )
        return [w.id for w in workouts]
