from datetime import date, datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import AgeBand, Equipment, Goal, Injury, Level

Weekday = Annotated[int, Field(ge=0, le=6)]


class ProfileInput(BaseModel):
    """Onboarding / profile edit payload."""

    birth_date: date
    height_cm: float = Field(..., ge=120, le=230)
    weight_kg: float = Field(..., ge=30, le=250)
    level: Level
    goal: Goal
    days_per_week: int = Field(..., ge=2, le=6)
    session_minutes: int = Field(..., ge=20, le=60)
    training_days: list[Weekday] = Field(default_factory=list)
    equipment: list[Equipment] = Field(default_factory=list)
    injuries: list[Injury] = Field(default_factory=list)
    notes: str | None = None


class PlannerProfile(BaseModel):
    """The subset of a profile the plan generator reads."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    level: Level
    goal: Goal
    days_per_week: int
    session_minutes: int
    equipment: frozenset[Equipment] = frozenset()
    injuries: frozenset[Injury] = frozenset()
    training_days: tuple[int, ...] = ()

    @field_validator("equipment", "injuries", "training_days", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return value if value is not None else []


class ProfileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: str
    birth_date: date
    age_band: AgeBand
    height_cm: float
    weight_kg: float
    level: Level
    goal: Goal
    days_per_week: int
    session_minutes: int
    training_days: list[int] = []
    equipment: list[Equipment] = []
    injuries: list[Injury] = []
    notes: str | None = None
    updated_at: datetime | None = None


class ProfileSummary(BaseModel):
    profile: ProfileResponse
    copy_lines: list[str]
    bmi: float | None = None
    bmi_category: str | None = None
