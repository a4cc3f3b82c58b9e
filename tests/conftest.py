import random
import sys
from datetime import date
from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config

SERVICE_ROOT = Path(__file__).resolve().parents[1]
if str(SERVICE_ROOT) not in sys.path:
    sys.path.insert(0, str(SERVICE_ROOT))

from planner_service.catalog_data import default_catalog  # noqa: E402
from planner_service.database import Base, create_engine_and_session  # noqa: E402
from planner_service.schemas.enums import Equipment, Goal, Level  # noqa: E402
from planner_service.schemas.profile import PlannerProfile, ProfileInput  # noqa: E402


def _alembic_upgrade_head(db_url: str) -> None:
    cfg = Config(str(SERVICE_ROOT / "alembic.ini"))
    # Pin script_location so running from another directory finds the migrations
    cfg.set_main_option("script_location", str(SERVICE_ROOT / "alembic"))
    cfg.set_main_option("sqlalchemy.url", db_url)
    command.upgrade(cfg, "head")


@pytest.fixture(scope="session")
def test_db_url(tmp_path_factory) -> str:
    tmp_dir = tmp_path_factory.mktemp("planner_db")
    db_path = tmp_dir / "test_planner.db"
    return f"sqlite:///{db_path}"


@pytest.fixture(scope="session")
def migrated_db(test_db_url: str):
    _alembic_upgrade_head(test_db_url)
    yield test_db_url


@pytest.fixture(scope="session")
def session_factory(migrated_db: str):
    engine, factory = create_engine_and_session(migrated_db)
    yield engine, factory
    engine.dispose()


@pytest.fixture()
def db(session_factory):
    engine, factory = session_factory
    session = factory()
    try:
        yield session
    finally:
        session.close()
        # Clean all tables after each test
        with engine.connect() as connection:
            transaction = connection.begin()
            for table in reversed(Base.metadata.sorted_tables):
                connection.execute(table.delete())
            transaction.commit()


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture()
def catalog():
    return default_catalog()


@pytest.fixture()
def profile() -> PlannerProfile:
    return PlannerProfile(
        level=Level.INTERMEDIATE,
        goal=Goal.HYPERTROPHY,
        days_per_week=3,
        session_minutes=45,
        equipment=[Equipment.PULLUP_BAR, Equipment.BANDS],
        injuries=[],
    )


@pytest.fixture()
def profile_input() -> ProfileInput:
    return ProfileInput(
        birth_date=date(1990, 6, 15),
        height_cm=180,
        weight_kg=80,
        level=Level.INTERMEDIATE,
        goal=Goal.HYPERTROPHY,
        days_per_week=3,
        session_minutes=45,
        training_days=[0, 2, 4],
        equipment=[Equipment.PULLUP_BAR, Equipment.BANDS],
        injuries=[],
    )
