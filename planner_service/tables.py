"""Static planning tables: goal sizing, age-band adjustments and day splits."""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .schemas.enums import AgeBand, Goal, Pattern


@dataclass(frozen=True)
class GoalDefaults:
    sets: int
    reps: str
    rest_seconds: int


@dataclass(frozen=True)
class AgeAdjustment:
    max_sets: int
    rest_bonus: int
    allow_advanced: bool


GOAL_DEFAULTS: Mapping[Goal, GoalDefaults] = MappingProxyType(
    {
        Goal.FAT_LOSS: GoalDefaults(sets=3, reps="10-15", rest_seconds=75),
        Goal.STRENGTH: GoalDefaults(sets=4, reps="4-8", rest_seconds=150),
        Goal.HYPERTROPHY: GoalDefaults(sets=3, reps="8-12", rest_seconds=90),
        Goal.MOBILITY: GoalDefaults(sets=2, reps="30-45s", rest_seconds=45),
        Goal.SKILL: GoalDefaults(sets=3, reps="3-6", rest_seconds=150),
    }
)

AGE_ADJUSTMENTS: Mapping[AgeBand, AgeAdjustment] = MappingProxyType(
    {
        AgeBand.TEEN: AgeAdjustment(max_sets=3, rest_bonus=15, allow_advanced=False),
        AgeBand.PRIME: AgeAdjustment(max_sets=5, rest_bonus=0, allow_advanced=True),
        AgeBand.BUILD: AgeAdjustment(max_sets=4, rest_bonus=15, allow_advanced=True),
        AgeBand.REBUILD: AgeAdjustment(max_sets=4, rest_bonus=30, allow_advanced=False),
        AgeBand.STRONG50: AgeAdjustment(max_sets=3, rest_bonus=45, allow_advanced=False),
        AgeBand.ACTIVE60: AgeAdjustment(max_sets=3, rest_bonus=60, allow_advanced=False),
    }
)

_FULL_BODY = (Pattern.PUSH, Pattern.PULL, Pattern.LEGS, Pattern.CORE)

SPLIT_BY_DAYS: Mapping[int, tuple[tuple[Pattern, ...], ...]] = MappingProxyType(
    {
        2: (_FULL_BODY, _FULL_BODY),
        3: ((Pattern.PUSH,), (Pattern.PULL,), (Pattern.LEGS, Pattern.CORE)),
        4: (
            (Pattern.PUSH,),
            (Pattern.PULL,),
            (Pattern.LEGS,),
            (Pattern.PUSH, Pattern.PULL, Pattern.CORE),
        ),
        5: (
            (Pattern.PUSH,),
            (Pattern.PULL,),
            (Pattern.LEGS,),
            (Pattern.PUSH, Pattern.CORE),
            (Pattern.PULL, Pattern.LEGS),
        ),
        6: (
            (Pattern.PUSH,),
            (Pattern.PULL,),
            (Pattern.LEGS,),
            (Pattern.PUSH,),
            (Pattern.PULL,),
            (Pattern.LEGS, Pattern.CORE),
        ),
    }
)

FALLBACK_DAYS_PER_WEEK = 3


def get_day_split(days_per_week: int) -> tuple[tuple[Pattern, ...], ...]:
    return SPLIT_BY_DAYS.get(days_per_week, SPLIT_BY_DAYS[FALLBACK_DAYS_PER_WEEK])


def target_exercise_count(session_minutes: int) -> int:
    if session_minutes >= 45:
        return 5
    if session_minutes >= 30:
        return 4
    return 3
