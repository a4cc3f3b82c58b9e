"""initial planner tables

Revision ID: 0001_initial_planner
Revises: 
Create Date: 2026-10-19 10:00:00.000000
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "0001_initial_planner"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "exercises",
        sa.Column("id", sa.Integer, primary_key=True, index=True),
        sa.Column("name", sa.String(length=255), nullable=False, unique=True),
        sa.Column("pattern", sa.String(length=32), nullable=False, index=True),
        sa.Column("difficulty", sa.String(length=32), nullable=False),
        sa.Column("equipment", sa.JSON, nullable=False),
        sa.Column("contraindications", sa.JSON, nullable=False),
        sa.Column("is_advanced_skill", sa.Boolean, nullable=False),
        sa.Column("cues", sa.JSON, nullable=False),
        sa.Column("errors", sa.JSON, nullable=False),
    )

    op.create_table(
        "exercise_progressions",
        sa.Column("id", sa.Integer, primary_key=True, index=True),
        sa.Column(
            "from_exercise_id",
            sa.Integer,
            sa.ForeignKey("exercises.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column("to_exercise_id", sa.Integer, sa.ForeignKey("exercises.id", ondelete="CASCADE"), nullable=False),
        sa.Column("relation", sa.String(length=20), nullable=False),
        sa.Column("order_index", sa.Integer, nullable=False),
    )

    op.create_table(
        "profiles",
        sa.Column("id", sa.Integer, primary_key=True, index=True),
        sa.Column("user_id", sa.String(length=255), nullable=False, unique=True, index=True),
        sa.Column("birth_date", sa.Date, nullable=False),
        sa.Column("age_band", sa.String(length=32), nullable=False),
        sa.Column("height_cm", sa.Float, nullable=False),
        sa.Column("weight_kg", sa.Float, nullable=False),
        sa.Column("level", sa.String(length=32), nullable=False),
        sa.Column("goal", sa.String(length=32), nullable=False),
        sa.Column("days_per_week", sa.Integer, nullable=False),
        sa.Column("session_minutes", sa.Integer, nullable=False),
        sa.Column("equipment", sa.JSON, nullable=False),
        sa.Column("injuries", sa.JSON, nullable=False),
        sa.Column("training_days", sa.JSON, nullable=False),
        sa.Column("notes", sa.Text, nullable=True),
        sa.Column("updated_at", sa.DateTime, nullable=False),
    )

    op.create_table(
        "workouts",
        sa.Column("id", sa.Integer, primary_key=True, index=True),
        sa.Column("user_id", sa.String(length=255), nullable=False, index=True),
        sa.Column("week_start", sa.Date, nullable=False),
        sa.Column("week_index", sa.Integer, nullable=False),
        sa.Column("day_index", sa.Integer, nullable=False),
        sa.Column("scheduled_date", sa.Date, nullable=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("focus", sa.Text, nullable=False),
        sa.Column("total_minutes", sa.Integer, nullable=False),
        sa.Column("created_at", sa.DateTime, nullable=False),
    )
    op.create_index(
        "ix_workouts_unique_user_week_day",
        "workouts",
        ["user_id", "week_index", "day_index"],
        unique=True,
    )

    op.create_table(
        "workout_items",
        sa.Column("id", sa.Integer, primary_key=True, index=True),
        sa.Column(
            "workout_id",
            sa.Integer,
            sa.ForeignKey("workouts.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column("exercise_id", sa.Integer, sa.ForeignKey("exercises.id", ondelete="RESTRICT"), nullable=False),
        sa.Column("order_index", sa.Integer, nullable=False),
        sa.Column("sets", sa.Integer, nullable=False),
        sa.Column("reps", sa.String(length=32), nullable=False),
        sa.Column("rest_seconds", sa.Integer, nullable=False),
        sa.Column("reason", sa.Text, nullable=False),
    )

    op.create_table(
        "workout_logs",
        sa.Column("id", sa.Integer, primary_key=True, index=True),
        sa.Column(
            "workout_id",
            sa.Integer,
            sa.ForeignKey("workouts.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column("user_id", sa.String(length=255), nullable=False, index=True),
        sa.Column("completed_at", sa.DateTime, nullable=False),
        sa.Column("notes", sa.Text, nullable=True),
        sa.Column("perceived_difficulty", sa.Integer, nullable=True),
    )

    op.create_table(
        "set_logs",
        sa.Column("id", sa.Integer, primary_key=True, index=True),
        sa.Column(
            "workout_log_id",
            sa.Integer,
            sa.ForeignKey("workout_logs.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column(
            "workout_item_id",
            sa.Integer,
            sa.ForeignKey("workout_items.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column("set_index", sa.Integer, nullable=False),
        sa.Column("reps", sa.Integer, nullable=False),
        sa.Column("rpe", sa.Integer, nullable=True),
        sa.Column("pain", sa.Integer, nullable=True),
    )


def downgrade() -> None:
    op.drop_table("set_logs")
    op.drop_table("workout_logs")
    op.drop_table("workout_items")
    op.drop_index("ix_workouts_unique_user_week_day", table_name="workouts")
    op.drop_table("workouts")
    op.drop_table("profiles")
    op.drop_table("exercise_progressions")
    op.drop_table("exercises")
