import logging
import sys

import sentry_sdk
import structlog
from sentry_sdk.integrations.logging import LoggingIntegration
from structlog.contextvars import merge_contextvars

from .config import Settings, get_settings

# Event keys the generator and services attach to planning events.
PLAN_CONTEXT_KEYS = ("user_id", "week_index", "trigger")


def service_context_processor(settings: Settings):
    def add_service_and_env(logger, method_name, event_dict):
        event_dict.setdefault("service", settings.SERVICE_NAME)
        event_dict.setdefault("env", settings.APP_ENV)
        return event_dict

    return add_service_and_env


def tag_sentry_scope(logger, method_name, event_dict):
    """Copy planning identifiers onto the Sentry scope so errors group per user and week."""
    for key in PLAN_CONTEXT_KEYS:
        value = event_dict.get(key)
        if value is not None:
            sentry_sdk.set_tag(key, value)
    return event_dict


def init_sentry(settings: Settings) -> bool:
    if not settings.SENTRY_DSN:
        return False
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.APP_ENV,
        integrations=[LoggingIntegration(level=logging.INFO, event_level=logging.ERROR)],
        traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
        send_default_pii=False,
    )
    sentry_sdk.set_tag("service", settings.SERVICE_NAME)
    return True


def build_processors(settings: Settings, json_logs: bool) -> list:
    renderer = structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    return [
        merge_contextvars,
        service_context_processor(settings),
        tag_sentry_scope,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        renderer,
    ]


def configure_logging(settings: Settings | None = None, json_logs: bool | None = None) -> None:
    """Route structlog through stdlib logging on stderr.

    ``json_logs`` defaults to JSON everywhere except the local and dev
    environments, which get the console renderer.
    """
    settings = settings or get_settings()
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    if json_logs is None:
        json_logs = settings.APP_ENV not in {"local", "dev"}

    init_sentry(settings)

    # Plan previews go to stdout.
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=log_level, force=True)

    structlog.configure(
        processors=build_processors(settings, json_logs),
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
