from typing import Iterator
from sqlmodel import SQLModel, create_engine, Session
from sqlalchemy.engine import Engine
from .config import settings
from . import models_db  # noqa: F401  registra las tablas en SQLModel.metadata

def _make_engine(url: str) -> Engine:
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, echo=False, connect_args=connect_args)

engine = _make_engine(settings.db_url)

def init_db(bind: Engine | None = None) -> None:
    SQLModel.metadata.create_all(bind or engine)

def get_session() -> Iterator[Session]:
    # Desactiva la expiración de atributos tras commit (evita {} en respuestas)
    with Session(engine, expire_on_commit=False) as session:
        yield session
