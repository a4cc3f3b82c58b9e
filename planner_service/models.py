from datetime import UTC, datetime

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import relationship

from .database import Base


def utcnow() -> datetime:
    """Naive UTC timestamp, the form every DateTime column stores."""
    return datetime.now(UTC).replace(tzinfo=None)


class Exercise(Base):
    __tablename__ = "exercises"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, unique=True)
    pattern = Column(String(32), nullable=False, index=True)
    difficulty = Column(String(32), nullable=False, default="BEGINNER")
    equipment = Column(JSON, nullable=False, default=list)
    contraindications = Column(JSON, nullable=False, default=list)
    is_advanced_skill = Column(Boolean, nullable=False, default=False)
    cues = Column(JSON, nullable=False, default=list)
    errors = Column(JSON, nullable=False, default=list)

    def __repr__(self):
        return "<Exercise(id=%s, name='%s', pattern=%s)>" % (self.id, self.name, self.pattern)


class ExerciseProgression(Base):
    __tablename__ = "exercise_progressions"

    id = Column(Integer, primary_key=True, index=True)
    from_exercise_id = Column(Integer, ForeignKey("exercises.id", ondelete="CASCADE"), nullable=False, index=True)
    to_exercise_id = Column(Integer, ForeignKey("exercises.id", ondelete="CASCADE"), nullable=False)
    # PROGRESSION or REGRESSION
    relation = Column(String(20), nullable=False)
    order_index = Column(Integer, nullable=False)


class Profile(Base):
    __tablename__ = "profiles"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(255), nullable=False, unique=True, index=True)
    birth_date = Column(Date, nullable=False)
    age_band = Column(String(32), nullable=False)
    height_cm = Column(Float, nullable=False)
    weight_kg = Column(Float, nullable=False)
    level = Column(String(32), nullable=False)
    goal = Column(String(32), nullable=False)
    days_per_week = Column(Integer, nullable=False)
    session_minutes = Column(Integer, nullable=False)
    equipment = Column(JSON, nullable=False, default=list)
    injuries = Column(JSON, nullable=False, default=list)
    training_days = Column(JSON, nullable=False, default=list)
    notes = Column(Text, nullable=True)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)


class Workout(Base):
    __tablename__ = "workouts"
    __table_args__ = (
        # One row per user/week/day: a duplicate next-week insert fails here.
        Index("ix_workouts_unique_user_week_day", "user_id", "week_index", "day_index", unique=True),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(255), nullable=False, index=True)
    week_start = Column(Date, nullable=False)
    week_index = Column(Integer, nullable=False, default=1)
    day_index = Column(Integer, nullable=False)
    scheduled_date = Column(Date, nullable=True)
    title = Column(String(255), nullable=False)
    focus = Column(Text, nullable=False)
    total_minutes = Column(Integer, nullable=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    items = relationship(
        "WorkoutItem",
        back_populates="workout",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="WorkoutItem.order_index",
    )
    logs = relationship("WorkoutLog", back_populates="workout", cascade="all, delete-orphan", passive_deletes=True)

    def __repr__(self):
        return "<Workout(id=%s, user_id='%s', week=%s, day=%s)>" % (
            self.id,
            self.user_id,
            self.week_index,
            self.day_index,
        )


class WorkoutItem(Base):
    __tablename__ = "workout_items"

    id = Column(Integer, primary_key=True, index=True)
    workout_id = Column(Integer, ForeignKey("workouts.id", ondelete="CASCADE"), nullable=False, index=True)
    exercise_id = Column(Integer, ForeignKey("exercises.id", ondelete="RESTRICT"), nullable=False)
    order_index = Column(Integer, nullable=False)
    sets = Column(Integer, nullable=False)
    reps = Column(String(32), nullable=False)
    rest_seconds = Column(Integer, nullable=False)
    reason = Column(Text, nullable=False)

    workout = relationship("Workout", back_populates="items")


class WorkoutLog(Base):
    __tablename__ = "workout_logs"

    id = Column(Integer, primary_key=True, index=True)
    workout_id = Column(Integer, ForeignKey("workouts.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(String(255), nullable=False, index=True)
    completed_at = Column(DateTime, nullable=False, default=utcnow)
    notes = Column(Text, nullable=True)
    perceived_difficulty = Column(Integer, nullable=True)

    workout = relationship("Workout", back_populates="logs")
    set_logs = relationship("SetLog", back_populates="workout_log", cascade="all, delete-orphan", passive_deletes=True)


class SetLog(Base):
    __tablename__ = "set_logs"

    id = Column(Integer, primary_key=True, index=True)
    workout_log_id = Column(Integer, ForeignKey("workout_logs.id", ondelete="CASCADE"), nullable=False, index=True)
    workout_item_id = Column(Integer, ForeignKey("workout_items.id", ondelete="CASCADE"), nullable=False, index=True)
    set_index = Column(Integer, nullable=False)
    reps = Column(Integer, nullable=False)
    rpe = Column(Integer, nullable=True)
    pain = Column(Integer, nullable=True)

    workout_log = relationship("WorkoutLog", back_populates="set_logs")
