from .schemas.enums import AgeBand, Pattern

PATTERN_LABELS: dict[Pattern, str] = {
    Pattern.PUSH: "push",
    Pattern.PULL: "pull",
    Pattern.LEGS: "legs",
    Pattern.CORE: "core",
    Pattern.SKILL: "skill",
    Pattern.MOBILITY: "mobility",
}

AGE_BAND_COPY: dict[AgeBand, list[str]] = {
    AgeBand.TEEN: ["Learn solid technique from day one", "Safe, clean progress"],
    AgeBand.PRIME: ["Push your limits, intelligently", "A plan built for high performance"],
    AgeBand.BUILD: ["Train hard, stay in control", "Steady progress week after week"],
    AgeBand.REBUILD: ["A plan tuned for recovery", "Progress designed to last"],
    AgeBand.STRONG50: ["A plan tuned for recovery", "Progress designed to last"],
    AgeBand.ACTIVE60: ["A plan tuned for recovery", "Progress designed to last"],
}


def build_focus(patterns) -> str:
    return " + ".join(PATTERN_LABELS[Pattern(p)] for p in patterns)
