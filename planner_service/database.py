from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from .config import settings

Base = declarative_base()


def create_engine_and_session(
    database_url: str,
    *,
    echo: bool = False,
    expire_on_commit: bool = False,
    autoflush: bool = False,
) -> tuple[Engine, sessionmaker[Session]]:
    connect_args = {"check_same_thread": False} if database_url.startswith("sqlite") else {}
    engine = create_engine(database_url, echo=echo, connect_args=connect_args)
    session_factory = sessionmaker(
        bind=engine,
        expire_on_commit=expire_on_commit,
        autoflush=autoflush,
        class_=Session,
    )
    return engine, session_factory


engine, SessionLocal = create_engine_and_session(settings.PLANNER_DATABASE_URL, echo=settings.DEBUG)
