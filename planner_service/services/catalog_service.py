from collections.abc import Iterable

import structlog
from sqlalchemy.orm import Session

from ..exceptions import CatalogValidationError
from ..models import Exercise, ExerciseProgression
from ..schemas.enums import ProgressionRelation
from ..schemas.exercise import ExerciseRecord

logger = structlog.get_logger(__name__)


def validate_catalog(records: Iterable[ExerciseRecord]) -> list[ExerciseRecord]:
    """Reject catalogs where two entries share an id."""
    records = list(records)
    seen: set[int] = set()
    duplicates: set[int] = set()
    for record in records:
        if record.id in seen:
            duplicates.add(record.id)
        seen.add(record.id)
    if duplicates:
        raise CatalogValidationError(f"Duplicate exercise ids in catalog: {sorted(duplicates)}")
    return records


def load_catalog(db: Session) -> list[ExerciseRecord]:
    rows = db.query(Exercise).order_by(Exercise.id).all()
    catalog = validate_catalog(ExerciseRecord.model_validate(row) for row in rows)
    logger.debug("catalog.loaded", exercises=len(catalog))
    return catalog


def _linked_exercises(db: Session, exercise_id: int, relation: ProgressionRelation) -> list[ExerciseRecord]:
    rows = (
        db.query(Exercise)
        .join(ExerciseProgression, ExerciseProgression.to_exercise_id == Exercise.id)
        .filter(
            ExerciseProgression.from_exercise_id == exercise_id,
            ExerciseProgression.relation == relation.value,
        )
        .order_by(ExerciseProgression.order_index)
        .all()
    )
    return [ExerciseRecord.model_validate(row) for row in rows]


def list_progressions(db: Session, exercise_id: int) -> list[ExerciseRecord]:
    return _linked_exercises(db, exercise_id, ProgressionRelation.PROGRESSION)


def list_regressions(db: Session, exercise_id: int) -> list[ExerciseRecord]:
    return _linked_exercises(db, exercise_id, ProgressionRelation.REGRESSION)
