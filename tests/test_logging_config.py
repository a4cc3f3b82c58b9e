import json
import logging
import random

from planner_service.config import Settings
from planner_service.logging_config import build_processors
from planner_service.schemas.enums import AgeBand, Goal, Level
from planner_service.schemas.profile import PlannerProfile
from planner_service.services import plan_generator


class RecordingLogger:
    def __init__(self):
        self.events = []

    def warning(self, event, **kw):
        self.events.append((event, kw))

    def debug(self, event, **kw):
        pass


def _render(settings, method_name, event_dict):
    for processor in build_processors(settings, json_logs=True):
        event_dict = processor(logging.getLogger("planner_service.test"), method_name, event_dict)
    return json.loads(event_dict)


def test_json_event_keeps_user_level_next_to_log_level():
    rendered = _render(
        Settings(APP_ENV="prod", SERVICE_NAME="planner-test"),
        "warning",
        {"event": "plan_generator.empty_pool", "user_level": "BEGINNER", "day_index": 2},
    )

    assert rendered["level"] == "warning"
    assert rendered["user_level"] == "BEGINNER"
    assert rendered["service"] == "planner-test"
    assert rendered["env"] == "prod"
    assert rendered["logger"] == "planner_service.test"
    assert "timestamp" in rendered


def test_empty_pool_warning_reports_the_users_level(monkeypatch):
    recorder = RecordingLogger()
    monkeypatch.setattr(plan_generator, "logger", recorder)
    profile = PlannerProfile(level=Level.BEGINNER, goal=Goal.SKILL, days_per_week=2, session_minutes=20)

    plan_generator.generate_plan([], profile, AgeBand.TEEN, 1, rng=random.Random(0))

    assert [event for event, _ in recorder.events] == ["plan_generator.empty_pool"] * 2
    _, fields = recorder.events[0]
    assert fields["user_level"] == "BEGINNER"
    assert fields["age_band"] == "TEEN"
    assert "level" not in fields
