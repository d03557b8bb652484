from typing import Optional
from fastapi import Request
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from mei_dashboard.core.config import DATABASE_URL, SQL_ECHO


def build_engine(database_url: Optional[str] = None, echo: bool = SQL_ECHO) -> Engine:
    url = database_url or DATABASE_URL
    if url.startswith("sqlite"):
        # SQLite em memória precisa de uma única conexão compartilhada
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in url:
            kwargs["poolclass"] = StaticPool
        return create_engine(url, echo=echo, **kwargs)
    return create_engine(url, echo=echo, pool_pre_ping=True)


def create_db_and_tables(engine: Engine) -> None:
    from mei_dashboard.models import das_payment, profile, recurring_debt, transaction, user  # noqa: F401  registra os modelos
    SQLModel.metadata.create_all(engine)


def get_session(request: Request):
    with Session(request.app.state.engine) as session:
        yield session
