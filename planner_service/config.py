from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PLANNER_DATABASE_URL: str = "sqlite:///./planner.db"
    DEBUG: bool = False

    SERVICE_NAME: str = "planner-service"
    APP_ENV: str = "local"
    LOG_LEVEL: str = "INFO"
    SENTRY_DSN: str | None = None
    SENTRY_TRACES_SAMPLE_RATE: float = 0.0

    # Empirical planning constants; override through the environment or by
    # passing a Settings instance to the generator.
    SECONDS_PER_REP: int = 4
    DEFAULT_REPS_PER_SET: int = 8
    DELOAD_EVERY_N_WEEKS: int = 4
    DELOAD_FACTOR: float = 0.7
    PAIN_THRESHOLD: int = 5
    PAIN_LOOKBACK_DAYS: int = 7
    PAIN_VOLUME_FACTOR: float = 0.7

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
