from datetime import date

import structlog
from sqlalchemy.orm import Session

from ..exceptions import ProfileNotFoundException
from ..labels import AGE_BAND_COPY
from ..models import Profile, utcnow
from ..schemas.enums import AgeBand
from ..schemas.profile import PlannerProfile, ProfileInput, ProfileResponse, ProfileSummary
from .age_band import calculate_age_band
from .schedule import normalize_training_days

logger = structlog.get_logger(__name__)


def calculate_bmi(weight_kg: float, height_cm: float) -> float | None:
    height_m = height_cm / 100
    if height_m <= 0:
        return None
    return round(weight_kg / (height_m * height_m), 1)


def bmi_category(bmi: float) -> str:
    if bmi < 18.5:
        return "Underweight"
    if bmi < 25:
        return "Normal"
    if bmi < 30:
        return "Overweight"
    if bmi < 35:
        return "Obesity I"
    if bmi < 40:
        return "Obesity II"
    return "Obesity III"


def get_profile(db: Session, user_id: str) -> Profile | None:
    return db.query(Profile).filter(Profile.user_id == user_id).first()


def upsert_profile(db: Session, user_id: str, data: ProfileInput, today: date | None = None) -> Profile:
    """Create or update the user's profile, deriving age band and weekdays."""
    values = {
        "birth_date": data.birth_date,
        "age_band": calculate_age_band(data.birth_date, today).value,
        "height_cm": data.height_cm,
        "weight_kg": round(data.weight_kg, 1),
        "level": data.level.value,
        "goal": data.goal.value,
        "days_per_week": data.days_per_week,
        "session_minutes": data.session_minutes,
        "training_days": normalize_training_days(data.days_per_week, data.training_days),
        "equipment": [tag.value for tag in data.equipment],
        "injuries": [tag.value for tag in data.injuries],
        "notes": data.notes,
    }

    profile = get_profile(db, user_id)
    created = profile is None
    if created:
        profile = Profile(user_id=user_id, **values)
        db.add(profile)
    else:
        for key, value in values.items():
            setattr(profile, key, value)
        profile.updated_at = utcnow()

    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(profile)

    logger.info(
        "profile.saved",
        user_id=user_id,
        created=created,
        age_band=profile.age_band,
        days_per_week=profile.days_per_week,
    )
    return profile


def to_planner_profile(profile: Profile) -> PlannerProfile:
    return PlannerProfile.model_validate(profile)


def get_profile_summary(db: Session, user_id: str) -> ProfileSummary:
    profile = get_profile(db, user_id)
    if profile is None:
        raise ProfileNotFoundException(user_id)

    bmi = calculate_bmi(profile.weight_kg, profile.height_cm)
    return ProfileSummary(
        profile=ProfileResponse.model_validate(profile),
        copy_lines=list(AGE_BAND_COPY[AgeBand(profile.age_band)]),
        bmi=bmi,
        bmi_category=bmi_category(bmi) if bmi is not None else None,
    )
