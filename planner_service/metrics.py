from prometheus_client import Counter

PLANS_GENERATED_TOTAL = Counter(
    "planner_plans_generated_total",
    "Number of weekly plans generated",
    ["trigger"],  # initial | replace | completion
)

PLAN_EMPTY_DAYS_TOTAL = Counter(
    "planner_plan_empty_days_total",
    "Number of generated days whose eligible pool was empty",
)

WORKOUTS_CREATED_TOTAL = Counter(
    "planner_workouts_created_total",
    "Number of workout day rows persisted",
)

WORKOUT_LOGS_CREATED_TOTAL = Counter(
    "planner_workout_logs_created_total",
    "Number of workout completions logged",
)

NEXT_WEEKS_CREATED_TOTAL = Counter(
    "planner_next_weeks_created_total",
    "Number of next-week plans created on week completion",
)

PAIN_EXCLUSIONS_TOTAL = Counter(
    "planner_pain_exclusions_total",
    "Number of exercises excluded from a plan because of reported pain",
)
