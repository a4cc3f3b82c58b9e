from enum import Enum


class AgeBand(str, Enum):
    TEEN = "TEEN"
    PRIME = "PRIME"
    BUILD = "BUILD"
    REBUILD = "REBUILD"
    STRONG50 = "STRONG50"
    ACTIVE60 = "ACTIVE60"


class Level(str, Enum):
    BEGINNER = "BEGINNER"
    INTERMEDIATE = "INTERMEDIATE"
    ADVANCED = "ADVANCED"


class Goal(str, Enum):
    FAT_LOSS = "FAT_LOSS"
    STRENGTH = "STRENGTH"
    HYPERTROPHY = "HYPERTROPHY"
    MOBILITY = "MOBILITY"
    SKILL = "SKILL"


class Pattern(str, Enum):
    PUSH = "PUSH"
    PULL = "PULL"
    LEGS = "LEGS"
    CORE = "CORE"
    SKILL = "SKILL"
    MOBILITY = "MOBILITY"


class Equipment(str, Enum):
    NONE = "NONE"
    PULLUP_BAR = "PULLUP_BAR"
    RINGS = "RINGS"
    PARALLETTES = "PARALLETTES"
    BANDS = "BANDS"
    DIPS_BAR = "DIPS_BAR"


class Injury(str, Enum):
    WRIST = "wrist"
    SHOULDER = "shoulder"
    ELBOW = "elbow"
    LOWER_BACK = "lower_back"
    KNEE = "knee"


class ProgressionRelation(str, Enum):
    PROGRESSION = "PROGRESSION"
    REGRESSION = "REGRESSION"
