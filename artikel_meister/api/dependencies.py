from typing import Optional

from fastapi import Depends

from artikel_meister.db.database import KeyValueStore, create_store
from artikel_meister.db.repository import StateRepository
from artikel_meister.services.game import GameService

_store: Optional[KeyValueStore] = None


def get_store() -> KeyValueStore:
    """Хранилище создаётся один раз на процесс."""
    global _store
    if _store is None:
        _store = create_store()
    return _store


def get_repository(store: KeyValueStore = Depends(get_store)) -> StateRepository:
    return StateRepository(store)


def get_game_service(repository: StateRepository = Depends(get_repository)) -> GameService:
    return GameService(repository)
