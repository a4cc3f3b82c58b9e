from pydantic import BaseModel, ConfigDict, field_validator

from .enums import Equipment, Injury, Level, Pattern


class ExerciseRecord(BaseModel):
    """Catalog entry as seen by the plan generator."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    name: str = ""
    pattern: Pattern
    difficulty: Level = Level.BEGINNER
    equipment: frozenset[Equipment] = frozenset()
    contraindications: frozenset[Injury] = frozenset()
    is_advanced_skill: bool = False

    @field_validator("equipment", "contraindications", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return value if value is not None else []

    @field_validator("equipment", mode="after")
    @classmethod
    def _drop_none_tag(cls, value: frozenset[Equipment]) -> frozenset[Equipment]:
        # "NONE" describes bodyweight work, it is never a requirement.
        return frozenset(tag for tag in value if tag is not Equipment.NONE)

