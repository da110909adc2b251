"""FastAPI dependency injection."""

from __future__ import annotations

from warplanner.config import settings
from warplanner.store import BoardStore

_store = BoardStore(settings.rounds)


def get_settings():
    return settings


def get_store() -> BoardStore:
    return _store
