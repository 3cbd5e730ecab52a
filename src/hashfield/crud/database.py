from __future__ import annotations
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from hashfield.config import load_config


def get_url(explicit: str | None = None) -> str:
    if explicit:
        return explicit
    return load_config().db_url


def make_engine(db_url: str | None = None) -> Engine:
    return create_engine(get_url(db_url), echo=False)


def init_db(engine: Engine) -> None:
    SQLModel.metadata.create_all(engine)


def get_session(engine: Engine):
    with Session(engine) as session:
        yield session
