from __future__ import annotations

import argparse
from typing import Any

import structlog

from ..catalog_data import BASE_CUES, BASE_ERRORS, DEFAULT_EXERCISES, DEFAULT_PROGRESSIONS
from ..database import SessionLocal
from ..logging_config import configure_logging
from ..models import Exercise, ExerciseProgression, SetLog, Workout, WorkoutItem, WorkoutLog
from ..schemas.enums import ProgressionRelation

logger = structlog.get_logger(__name__)


def seed(
    db,
    exercises: list[dict[str, Any]] = DEFAULT_EXERCISES,
    progressions: list[tuple[str, str]] = DEFAULT_PROGRESSIONS,
) -> tuple[int, int]:
    """Replace the exercise catalog with ``exercises`` and their progressions.

    Workouts reference catalog rows, so every workout, log and set log is
    removed first. Returns ``(exercises_created, progression_links_created)``.
    """
    try:
        for model in (SetLog, WorkoutLog, WorkoutItem, Workout, ExerciseProgression, Exercise):
            db.query(model).delete(synchronize_session=False)

        rows = [
            Exercise(
                name=entry["name"],
                pattern=entry["pattern"],
                difficulty=entry.get("difficulty", "BEGINNER"),
                equipment=list(entry.get("equipment", [])),
                contraindications=list(entry.get("contraindications", [])),
                is_advanced_skill=entry.get("is_advanced_skill", False),
                cues=list(BASE_CUES),
                errors=list(BASE_ERRORS),
            )
            for entry in exercises
        ]
        db.add_all(rows)
        db.flush()

        name_to_id = {row.name: row.id for row in rows}
        links = 0
        for order_index, (easier, harder) in enumerate(progressions):
            from_id = name_to_id.get(easier)
            to_id = name_to_id.get(harder)
            if from_id is None or to_id is None:
                logger.warning("seed.unknown_progression", easier=easier, harder=harder)
                continue
            db.add_all(
                [
                    ExerciseProgression(
                        from_exercise_id=from_id,
                        to_exercise_id=to_id,
                        relation=ProgressionRelation.PROGRESSION.value,
                        order_index=order_index,
                    ),
                    ExerciseProgression(
                        from_exercise_id=to_id,
                        to_exercise_id=from_id,
                        relation=ProgressionRelation.REGRESSION.value,
                        order_index=order_index,
                    ),
                ]
            )
            links += 2

        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info("seed.finished", exercises=len(rows), progressions=links)
    return len(rows), links


def main() -> None:
    parser = argparse.ArgumentParser(description="Replace the exercise catalog with the default calisthenics set")
    parser.parse_args()

    configure_logging()
    db = SessionLocal()
    try:
        created, links = seed(db)
    finally:
        db.close()
    print(f"Exercises seeding finished: exercises={created}, progression_links={links}")


if __name__ == "__main__":
    main()
