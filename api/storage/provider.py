from __future__ import annotations
from typing import Iterator

from fastapi import Depends
from sqlmodel import Session

from ..config import settings
from ..db import get_session
from .base import Storage
from .memory import MemoryStorage
from .sql import SqlStorage

# Instancia única del backend en memoria (vive lo que vive el proceso)
memory_storage = MemoryStorage()


def get_storage(session: Session = Depends(get_session)) -> Iterator[Storage]:
    if settings.storage_backend == "memory":
        yield memory_storage
    else:
        yield SqlStorage(session)
