"""Weekly plan generation.

The generator is a pure function of the catalog snapshot, the profile, the
already-resolved age band and the target week. It performs no I/O and never
raises for a validated profile: an empty eligible pool simply yields a day
without items, and an unsupported ``days_per_week`` falls back to the
three-day split.
"""

from __future__ import annotations

import math
import random
import re
from collections.abc import Iterable, Sequence

import structlog

from ..config import Settings, get_settings
from ..labels import PATTERN_LABELS, build_focus
from ..schemas.enums import AgeBand, Equipment, Goal, Injury, Level, Pattern
from ..schemas.exercise import ExerciseRecord
from ..schemas.plan import DayPlan, PlanItem, PlanResult
from ..schemas.profile import PlannerProfile
from ..tables import AGE_ADJUSTMENTS, GOAL_DEFAULTS, get_day_split, target_exercise_count

logger = structlog.get_logger(__name__)

_NUMBER_RE = re.compile(r"\d+")


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def get_exercise_pool(
    catalog: Iterable[ExerciseRecord],
    patterns: Iterable[Pattern],
    age_band: AgeBand,
    level: Level,
    equipment: Iterable[Equipment | str],
    injuries: Iterable[Injury | str],
    excluded_ids: Iterable[int] = (),
) -> list[ExerciseRecord]:
    """Return the catalog entries a user may be given on a day.

    Equipment is an all-of requirement (every listed tag must be owned),
    contraindications are an any-of exclusion (one shared tag disqualifies).
    """
    allow_advanced = AGE_ADJUSTMENTS[AgeBand(age_band)].allow_advanced
    level = Level(level)
    wanted = {Pattern(p) for p in patterns}
    owned = {Equipment(tag) for tag in equipment}
    hurt = {Injury(tag) for tag in injuries}
    excluded = set(excluded_ids)

    pool: list[ExerciseRecord] = []
    for exercise in catalog:
        if exercise.pattern not in wanted:
            continue
        if exercise.id in excluded:
            continue
        if exercise.is_advanced_skill and not allow_advanced:
            continue
        if exercise.difficulty is Level.ADVANCED:
            if level is Level.BEGINNER:
                continue
            if level is Level.INTERMEDIATE and not allow_advanced:
                continue
        if not exercise.equipment <= owned:
            continue
        if exercise.contraindications & hurt:
            continue
        pool.append(exercise)
    return pool


def pick_exercises(
    pool: Sequence[ExerciseRecord],
    count: int,
    rng: random.Random | None = None,
) -> list[ExerciseRecord]:
    """Uniformly sample up to ``count`` distinct exercises from ``pool``."""
    rng = rng or random.Random()
    shuffled = list(pool)
    rng.shuffle(shuffled)
    return shuffled[: max(count, 0)]


def apply_volume_cut(sets: int, factor: float) -> int:
    return max(1, math.floor(sets * factor))


def is_deload_week(week_index: int, settings: Settings | None = None) -> bool:
    settings = settings or get_settings()
    return week_index % settings.DELOAD_EVERY_N_WEEKS == 0


def apply_deload(sets: int, settings: Settings | None = None) -> int:
    settings = settings or get_settings()
    return apply_volume_cut(sets, settings.DELOAD_FACTOR)


def build_reason(pattern: Pattern) -> str:
    return f"Chosen to strengthen {PATTERN_LABELS[Pattern(pattern)]} without overloading sensitive areas."


def size_item(
    exercise: ExerciseRecord,
    goal: Goal,
    age_band: AgeBand,
    deload: bool = False,
    settings: Settings | None = None,
) -> PlanItem:
    goal_config = GOAL_DEFAULTS[Goal(goal)]
    age_config = AGE_ADJUSTMENTS[AgeBand(age_band)]

    sets = min(goal_config.sets, age_config.max_sets)
    if deload:
        sets = apply_deload(sets, settings)

    return PlanItem(
        exercise_id=exercise.id,
        sets=sets,
        reps=goal_config.reps,
        rest_seconds=goal_config.rest_seconds + age_config.rest_bonus,
        reason=build_reason(exercise.pattern),
    )


def estimate_item_seconds(item: PlanItem, settings: Settings | None = None) -> int:
    settings = settings or get_settings()
    tokens = [int(token) for token in _NUMBER_RE.findall(item.reps)] or [settings.DEFAULT_REPS_PER_SET]
    if len(tokens) >= 2:
        per_set_value = _round_half_up((tokens[0] + tokens[1]) / 2)
    else:
        per_set_value = tokens[0]

    # "30-45s" is already seconds per set; rep ranges are converted.
    if "s" in item.reps:
        per_set_seconds = per_set_value
    else:
        per_set_seconds = per_set_value * settings.SECONDS_PER_REP
    return item.sets * (per_set_seconds + item.rest_seconds)


def estimate_minutes(items: Iterable[PlanItem], settings: Settings | None = None) -> float:
    return sum(estimate_item_seconds(item, settings) for item in items) / 60


def capped_day_minutes(items: Iterable[PlanItem], session_minutes: int, settings: Settings | None = None) -> int:
    return min(session_minutes, _round_half_up(estimate_minutes(items, settings)))


def generate_plan(
    catalog: Sequence[ExerciseRecord],
    profile: PlannerProfile,
    age_band: AgeBand,
    week_index: int,
    excluded_exercise_ids: Iterable[int] = (),
    rng: random.Random | None = None,
    settings: Settings | None = None,
) -> PlanResult:
    settings = settings or get_settings()
    rng = rng or random.Random()
    excluded = set(excluded_exercise_ids)
    deload = is_deload_week(week_index, settings)
    target = target_exercise_count(profile.session_minutes)

    days: list[DayPlan] = []
    for day_index, patterns in enumerate(get_day_split(profile.days_per_week)):
        pool = get_exercise_pool(
            catalog,
            patterns,
            age_band,
            profile.level,
            profile.equipment,
            profile.injuries,
            excluded,
        )
        if not pool:
            logger.warning(
                "plan_generator.empty_pool",
                day_index=day_index,
                patterns=[p.value for p in patterns],
                age_band=AgeBand(age_band).value,
                user_level=profile.level.value,
            )

        items = [
            size_item(exercise, profile.goal, age_band, deload=deload, settings=settings)
            for exercise in pick_exercises(pool, target, rng)
        ]
        days.append(
            DayPlan(
                title=f"Day {day_index + 1}",
                focus=build_focus(patterns),
                patterns=list(patterns),
                items=items,
                total_minutes=capped_day_minutes(items, profile.session_minutes, settings),
            )
        )

    logger.debug(
        "plan_generator.generated",
        week_index=week_index,
        days=len(days),
        deload=deload,
        excluded=len(excluded),
    )
    return PlanResult(week_index=week_index, is_deload=deload, days=days)
