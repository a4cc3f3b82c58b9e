"""Pain-driven adaptation of the next week's plan.

Exercises that hurt recently are excluded from generation, and if anything
hurt at all every prescribed set count is cut once more. The cut is
independent of the deload and stacks with it.
"""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import datetime, timedelta

import structlog

from ..config import Settings, get_settings
from ..schemas.enums import AgeBand
from ..schemas.exercise import ExerciseRecord
from ..schemas.plan import PlanResult
from ..schemas.profile import PlannerProfile
from .plan_generator import apply_volume_cut, capped_day_minutes, generate_plan

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class LoggedSet:
    exercise_id: int
    pain: int | None
    completed_at: datetime


@dataclass(frozen=True)
class AdaptedPlan:
    plan: PlanResult
    excluded_exercise_ids: list[int] = field(default_factory=list)
    pain_reported: bool = False


def is_painful(logged: LoggedSet, since: datetime, settings: Settings) -> bool:
    return logged.pain is not None and logged.pain >= settings.PAIN_THRESHOLD and logged.completed_at >= since


def collect_excluded_exercise_ids(
    set_logs: Iterable[LoggedSet],
    now: datetime,
    settings: Settings | None = None,
) -> list[int]:
    settings = settings or get_settings()
    since = now - timedelta(days=settings.PAIN_LOOKBACK_DAYS)
    return sorted({logged.exercise_id for logged in set_logs if is_painful(logged, since, settings)})


def apply_pain_volume_cut(
    plan: PlanResult,
    session_minutes: int,
    settings: Settings | None = None,
) -> PlanResult:
    settings = settings or get_settings()
    days = []
    for day in plan.days:
        items = [
            item.model_copy(update={"sets": apply_volume_cut(item.sets, settings.PAIN_VOLUME_FACTOR)})
            for item in day.items
        ]
        days.append(
            day.model_copy(
                update={
                    "items": items,
                    "total_minutes": capped_day_minutes(items, session_minutes, settings),
                }
            )
        )
    return plan.model_copy(update={"days": days})


def generate_adapted_plan(
    catalog: Sequence[ExerciseRecord],
    profile: PlannerProfile,
    age_band: AgeBand,
    week_index: int,
    set_logs: Iterable[LoggedSet],
    now: datetime,
    rng: random.Random | None = None,
    settings: Settings | None = None,
) -> AdaptedPlan:
    settings = settings or get_settings()
    excluded = collect_excluded_exercise_ids(set_logs, now, settings)

    plan = generate_plan(
        catalog,
        profile,
        age_band,
        week_index,
        excluded_exercise_ids=excluded,
        rng=rng,
        settings=settings,
    )
    if excluded:
        logger.info(
            "adaptation.pain_reported",
            week_index=week_index,
            excluded_exercise_ids=excluded,
        )
        plan = apply_pain_volume_cut(plan, profile.session_minutes, settings)

    return AdaptedPlan(plan=plan, excluded_exercise_ids=excluded, pain_reported=bool(excluded))
