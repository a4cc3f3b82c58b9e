"""Reference calisthenics catalog and its progression chains."""

from __future__ import annotations

from typing import Any

from .schemas.exercise import ExerciseRecord

BASE_CUES = ["Neutral spine, controlled tempo", "Breathe and keep steady tension"]
BASE_ERRORS = ["Partial range of motion", "Losing core tension"]

DEFAULT_EXERCISES: list[dict[str, Any]] = [
    {"name": "Wall Push-up", "pattern": "PUSH", "difficulty": "BEGINNER"},
    {"name": "Incline Push-up", "pattern": "PUSH", "difficulty": "BEGINNER"},
    {"name": "Knee Push-up", "pattern": "PUSH", "difficulty": "BEGINNER"},
    {"name": "Standard Push-up", "pattern": "PUSH", "difficulty": "BEGINNER"},
    {"name": "Decline Push-up", "pattern": "PUSH", "difficulty": "INTERMEDIATE"},
    {"name": "Archer Push-up", "pattern": "PUSH", "difficulty": "ADVANCED"},
    {
        "name": "Pseudo Planche Push-up",
        "pattern": "PUSH",
        "difficulty": "ADVANCED",
        "is_advanced_skill": True,
        "contraindications": ["wrist"],
    },
    {"name": "Pike Push-up", "pattern": "PUSH", "difficulty": "INTERMEDIATE"},
    {"name": "Elevated Pike Push-up", "pattern": "PUSH", "difficulty": "ADVANCED"},
    {
        "name": "Handstand Hold",
        "pattern": "SKILL",
        "difficulty": "ADVANCED",
        "is_advanced_skill": True,
        "contraindications": ["wrist", "shoulder"],
    },
    {"name": "Bench Dip", "pattern": "PUSH", "difficulty": "BEGINNER", "contraindications": ["shoulder"]},
    {
        "name": "Dips Support Hold",
        "pattern": "PUSH",
        "difficulty": "INTERMEDIATE",
        "equipment": ["DIPS_BAR"],
        "contraindications": ["shoulder"],
    },
    {
        "name": "Dip",
        "pattern": "PUSH",
        "difficulty": "INTERMEDIATE",
        "equipment": ["DIPS_BAR"],
        "contraindications": ["shoulder"],
    },
    {"name": "Ring Push-up", "pattern": "PUSH", "difficulty": "INTERMEDIATE", "equipment": ["RINGS"]},
    {
        "name": "Ring Dip",
        "pattern": "PUSH",
        "difficulty": "ADVANCED",
        "equipment": ["RINGS"],
        "contraindications": ["shoulder"],
        "is_advanced_skill": True,
    },
    {"name": "Close-Grip Push-up", "pattern": "PUSH", "difficulty": "INTERMEDIATE"},
    {"name": "Wide Push-up", "pattern": "PUSH", "difficulty": "INTERMEDIATE"},
    {"name": "Diamond Push-up", "pattern": "PUSH", "difficulty": "ADVANCED"},
    {"name": "Explosive Push-up", "pattern": "PUSH", "difficulty": "ADVANCED", "is_advanced_skill": True},
    {"name": "Scapular Push-up", "pattern": "PUSH", "difficulty": "BEGINNER"},
    {"name": "Dead Hang", "pattern": "PULL", "difficulty": "BEGINNER"},
    {"name": "Scapular Pull-up", "pattern": "PULL", "difficulty": "BEGINNER", "equipment": ["PULLUP_BAR"]},
    {"name": "Assisted Pull-up", "pattern": "PULL", "difficulty": "BEGINNER", "equipment": ["PULLUP_BAR", "BANDS"]},
    {"name": "Negative Pull-up", "pattern": "PULL", "difficulty": "INTERMEDIATE", "equipment": ["PULLUP_BAR"]},
    {"name": "Pull-up", "pattern": "PULL", "difficulty": "INTERMEDIATE", "equipment": ["PULLUP_BAR"]},
    {"name": "Chin-up", "pattern": "PULL", "difficulty": "INTERMEDIATE", "equipment": ["PULLUP_BAR"]},
    {"name": "Neutral Grip Pull-up", "pattern": "PULL", "difficulty": "INTERMEDIATE", "equipment": ["PULLUP_BAR"]},
    {
        "name": "Archer Pull-up",
        "pattern": "PULL",
        "difficulty": "ADVANCED",
        "equipment": ["PULLUP_BAR"],
        "is_advanced_skill": True,
    },
    {"name": "Inverted Row", "pattern": "PULL", "difficulty": "BEGINNER"},
    {"name": "Ring Row", "pattern": "PULL", "difficulty": "BEGINNER", "equipment": ["RINGS"]},
    {"name": "Australian Row", "pattern": "PULL", "difficulty": "BEGINNER"},
    {"name": "Towel Row", "pattern": "PULL", "difficulty": "BEGINNER", "contraindications": ["shoulder"]},
    {"name": "Band Face Pull", "pattern": "PULL", "difficulty": "BEGINNER", "equipment": ["BANDS"]},
    {"name": "Band Pull-apart", "pattern": "PULL", "difficulty": "BEGINNER", "equipment": ["BANDS"]},
    {"name": "Ring Curl", "pattern": "PULL", "difficulty": "INTERMEDIATE", "equipment": ["RINGS"]},
    {"name": "Band Bicep Curl", "pattern": "PULL", "difficulty": "BEGINNER", "equipment": ["BANDS"]},
    {"name": "Air Squat", "pattern": "LEGS", "difficulty": "BEGINNER"},
    {"name": "Box Squat", "pattern": "LEGS", "difficulty": "BEGINNER"},
    {"name": "Split Squat", "pattern": "LEGS", "difficulty": "BEGINNER"},
    {"name": "Reverse Lunge", "pattern": "LEGS", "difficulty": "BEGINNER"},
    {"name": "Forward Lunge", "pattern": "LEGS", "difficulty": "BEGINNER"},
    {"name": "Bulgarian Split Squat", "pattern": "LEGS", "difficulty": "INTERMEDIATE"},
    {"name": "Step-up", "pattern": "LEGS", "difficulty": "BEGINNER"},
    {"name": "Single-leg RDL", "pattern": "LEGS", "difficulty": "INTERMEDIATE"},
    {"name": "Glute Bridge", "pattern": "LEGS", "difficulty": "BEGINNER"},
    {"name": "Hip Thrust", "pattern": "LEGS", "difficulty": "INTERMEDIATE"},
    {"name": "Calf Raise", "pattern": "LEGS", "difficulty": "BEGINNER"},
    {"name": "Wall Sit", "pattern": "LEGS", "difficulty": "INTERMEDIATE", "is_advanced_skill": True},
    {"name": "Dead Bug", "pattern": "CORE", "difficulty": "BEGINNER"},
    {
        "name": "Hollow Hold",
        "pattern": "CORE",
        "difficulty": "INTERMEDIATE",
        "is_advanced_skill": True,
        "contraindications": ["lower_back"],
    },
    {"name": "Plank", "pattern": "CORE", "difficulty": "BEGINNER"},
    {"name": "Side Plank", "pattern": "CORE", "difficulty": "BEGINNER"},
    {"name": "Bird Dog", "pattern": "CORE", "difficulty": "BEGINNER"},
    {"name": "Hanging Knee Raise", "pattern": "CORE", "difficulty": "INTERMEDIATE", "equipment": ["PULLUP_BAR"]},
    {"name": "Leg Raise", "pattern": "CORE", "difficulty": "ADVANCED", "equipment": ["PULLUP_BAR"]},
    {"name": "Reverse Crunch", "pattern": "CORE", "difficulty": "BEGINNER"},
    {"name": "Mountain Climber", "pattern": "CORE", "difficulty": "BEGINNER"},
    {"name": "Pallof Press", "pattern": "CORE", "difficulty": "BEGINNER", "equipment": ["BANDS"]},
    {"name": "Cat-Cow", "pattern": "MOBILITY", "difficulty": "BEGINNER"},
    {"name": "Thoracic Rotation", "pattern": "MOBILITY", "difficulty": "BEGINNER"},
    {"name": "Hip Flexor Stretch", "pattern": "MOBILITY", "difficulty": "BEGINNER"},
    {"name": "Ankle Mobility Drill", "pattern": "MOBILITY", "difficulty": "BEGINNER"},
    {"name": "Wrist Mobility Flow", "pattern": "MOBILITY", "difficulty": "BEGINNER", "contraindications": ["wrist"]},
    {
        "name": "Shoulder Dislocates",
        "pattern": "MOBILITY",
        "difficulty": "BEGINNER",
        "equipment": ["BANDS"],
        "contraindications": ["shoulder"],
    },
    {"name": "Scapular Wall Slide", "pattern": "MOBILITY", "difficulty": "BEGINNER"},
    {"name": "Couch Stretch", "pattern": "MOBILITY", "difficulty": "BEGINNER"},
    {"name": "90/90 Hip Switch", "pattern": "MOBILITY", "difficulty": "BEGINNER"},
    {"name": "Hamstring Sweep", "pattern": "MOBILITY", "difficulty": "BEGINNER"},
    {"name": "Cossack Squat", "pattern": "MOBILITY", "difficulty": "INTERMEDIATE"},
    {
        "name": "Tuck Front Lever Hold",
        "pattern": "SKILL",
        "difficulty": "ADVANCED",
        "equipment": ["PULLUP_BAR"],
        "is_advanced_skill": True,
        "contraindications": ["shoulder", "elbow"],
    },
    {
        "name": "Tuck L-Sit",
        "pattern": "SKILL",
        "difficulty": "INTERMEDIATE",
        "equipment": ["PARALLETTES"],
        "contraindications": ["wrist"],
    },
    {
        "name": "Skin the Cat",
        "pattern": "SKILL",
        "difficulty": "ADVANCED",
        "equipment": ["RINGS"],
        "is_advanced_skill": True,
        "contraindications": ["shoulder"],
    },
    {
        "name": "Handstand Kick-up",
        "pattern": "SKILL",
        "difficulty": "ADVANCED",
        "is_advanced_skill": True,
        "contraindications": ["wrist", "shoulder"],
    },
    {
        "name": "Muscle-up",
        "pattern": "SKILL",
        "difficulty": "ADVANCED",
        "equipment": ["PULLUP_BAR"],
        "is_advanced_skill": True,
        "contraindications": ["shoulder", "elbow"],
    },
    {
        "name": "Planche Lean",
        "pattern": "SKILL",
        "difficulty": "ADVANCED",
        "is_advanced_skill": True,
        "contraindications": ["wrist", "shoulder"],
    },
    {
        "name": "Tuck Back Lever",
        "pattern": "SKILL",
        "difficulty": "ADVANCED",
        "equipment": ["RINGS"],
        "is_advanced_skill": True,
        "contraindications": ["shoulder", "elbow"],
    },
]

# (easier, harder) pairs; the seed stores a PROGRESSION link and its REGRESSION mirror.
DEFAULT_PROGRESSIONS: list[tuple[str, str]] = [
    ("Wall Push-up", "Incline Push-up"),
    ("Incline Push-up", "Knee Push-up"),
    ("Knee Push-up", "Standard Push-up"),
    ("Standard Push-up", "Decline Push-up"),
    ("Decline Push-up", "Archer Push-up"),
    ("Archer Push-up", "Pseudo Planche Push-up"),
    ("Dead Hang", "Scapular Pull-up"),
    ("Scapular Pull-up", "Assisted Pull-up"),
    ("Assisted Pull-up", "Negative Pull-up"),
    ("Negative Pull-up", "Pull-up"),
    ("Pull-up", "Archer Pull-up"),
    ("Air Squat", "Box Squat"),
    ("Box Squat", "Split Squat"),
    ("Split Squat", "Bulgarian Split Squat"),
    ("Glute Bridge", "Hip Thrust"),
    ("Dead Bug", "Plank"),
    ("Plank", "Side Plank"),
    ("Tuck L-Sit", "Planche Lean"),
]


def default_catalog() -> list[ExerciseRecord]:
    """The reference catalog with ids assigned in seed order, starting at 1."""
    return [ExerciseRecord(id=index, **entry) for index, entry in enumerate(DEFAULT_EXERCISES, start=1)]
