from pydantic import BaseModel, Field

from .enums import Pattern


class PlanItem(BaseModel):
    exercise_id: int
    sets: int = Field(..., ge=1)
    reps: str
    rest_seconds: int
    reason: str


class DayPlan(BaseModel):
    title: str
    focus: str
    patterns: list[Pattern]
    items: list[PlanItem] = Field(default_factory=list)
    total_minutes: int = 0


class PlanResult(BaseModel):
    week_index: int
    is_deload: bool = False
    days: list[DayPlan]

    def exercise_ids(self) -> set[int]:
        return {item.exercise_id for day in self.days for item in day.items}
