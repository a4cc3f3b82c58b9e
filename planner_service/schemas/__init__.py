from .enums import AgeBand, Equipment, Goal, Injury, Level, Pattern, ProgressionRelation
from .exercise import ExerciseRecord
from .plan import DayPlan, PlanItem, PlanResult
from .profile import PlannerProfile, ProfileInput, ProfileResponse, ProfileSummary
from .workout import (
    PlanRequest,
    SetLogInput,
    WeekPlanResponse,
    WorkoutCompletionRequest,
    WorkoutCompletionResponse,
    WorkoutItemResponse,
    WorkoutResponse,
)
