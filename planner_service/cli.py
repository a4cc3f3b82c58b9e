"""``planner-preview``: print one generated week for a profile file.

The profile file is JSON with the onboarding fields (``level``, ``goal``,
``days_per_week``, ``session_minutes``, ``equipment``, ``injuries``) plus
either ``birth_date`` or ``age_band``. Plans are generated against the
built-in catalog, so no database is needed.
"""

from __future__ import annotations

import argparse
import json
import random
import sys
from datetime import date
from pathlib import Path

import structlog
from pydantic import ValidationError

from .catalog_data import default_catalog
from .logging_config import configure_logging
from .schemas.enums import AgeBand
from .schemas.profile import PlannerProfile
from .services.age_band import calculate_age_band
from .services.plan_generator import generate_plan

logger = structlog.get_logger(__name__)


def resolve_age_band(data: dict, today: date | None = None) -> AgeBand:
    if data.get("age_band"):
        return AgeBand(data["age_band"])
    if data.get("birth_date"):
        return calculate_age_band(date.fromisoformat(data["birth_date"]), today)
    raise ValueError("profile needs either 'age_band' or 'birth_date'")


def build_preview(data: dict, week_index: int = 1, seed: int | None = None, excluded: list[int] | None = None) -> dict:
    catalog = default_catalog()
    names = {exercise.id: exercise.name for exercise in catalog}
    age_band = resolve_age_band(data)
    plan = generate_plan(
        catalog,
        PlannerProfile.model_validate(data),
        age_band,
        week_index,
        excluded_exercise_ids=excluded or [],
        rng=random.Random(seed),
    )

    preview = plan.model_dump(mode="json")
    preview["age_band"] = age_band.value
    for day in preview["days"]:
        for item in day["items"]:
            item["exercise_name"] = names[item["exercise_id"]]
    return preview


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Preview a generated calisthenics week for a profile")
    parser.add_argument("profile", type=Path, help="Path to a profile JSON file")
    parser.add_argument("--week-index", type=int, default=1, help="Week number, 1-based (every 4th week deloads)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for a reproducible selection")
    parser.add_argument(
        "--exclude",
        type=int,
        action="append",
        default=[],
        metavar="EXERCISE_ID",
        help="Exercise id to leave out (repeatable)",
    )
    args = parser.parse_args(argv)

    configure_logging()
    if args.week_index < 1:
        parser.error("--week-index must be >= 1")

    try:
        data = json.loads(args.profile.read_text(encoding="utf-8"))
        preview = build_preview(data, week_index=args.week_index, seed=args.seed, excluded=args.exclude)
    except (OSError, ValueError, ValidationError) as exc:
        logger.error("cli.preview_failed", profile=str(args.profile), error=str(exc))
        return 1

    json.dump(preview, sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
