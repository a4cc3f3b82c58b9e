from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


class PlanRequest(BaseModel):
    week_start: date
    week_index: int = Field(..., ge=1)
    replace_existing: bool = False


class WeekPlanResponse(BaseModel):
    week_index: int
    created: bool
    workout_ids: list[int]


class SetLogInput(BaseModel):
    workout_item_id: int
    set_index: int = Field(..., ge=1)
    reps: int = Field(..., ge=1)
    rpe: int | None = Field(None, ge=1, le=10)
    pain: int | None = Field(None, ge=0, le=10)


class WorkoutCompletionRequest(BaseModel):
    notes: str | None = None
    perceived_difficulty: int | None = Field(None, ge=1, le=10)
    sets: list[SetLogInput] = Field(default_factory=list)


class WorkoutCompletionResponse(BaseModel):
    ok: bool = True
    workout_log_id: int
    next_week_created: bool = False
    next_week_index: int | None = None


class WorkoutItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    exercise_id: int
    order_index: int
    sets: int
    reps: str
    rest_seconds: int
    reason: str


class WorkoutResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: str
    week_start: date
    week_index: int
    day_index: int
    scheduled_date: date | None = None
    title: str
    focus: str
    total_minutes: int
    created_at: datetime | None = None
    completed: bool = False
    items: list[WorkoutItemResponse] = []
