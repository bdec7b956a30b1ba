import random
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from artikel_meister.api.dependencies import get_store, get_game_service
from artikel_meister.db.database import MemoryStore
from artikel_meister.db.repository import StateRepository
from artikel_meister.main import app
from artikel_meister.models.schemas import VocabularyWord
from artikel_meister.services.game import GameService

NOW = datetime(2024, 5, 1, 12, 0, 0)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def make_word():
    def _make_word(german, article="das", english=None, word_class="noun"):
        return VocabularyWord(
            german=german,
            article=article,
            word_class=word_class,
            english_translations=english or [german.lower()],
        )
    return _make_word


@pytest.fixture
def store():
    return MemoryStore()


class BrokenReadStore(MemoryStore):
    """Хранилище, в котором чтение выбранного ключа падает по флагу."""

    def __init__(self, broken_key):
        super().__init__()
        self.broken_key = broken_key
        self.broken = False

    def load(self, key):
        if self.broken and key == self.broken_key:
            raise OSError("storage unavailable")
        return super().load(key)


@pytest.fixture
def broken_read_store():
    return BrokenReadStore


@pytest.fixture
def repository(store):
    return StateRepository(store)


@pytest.fixture
def game(repository, now):
    return GameService(repository, clock=lambda: now, rng=random.Random(7))


@pytest.fixture
def client(store, now):
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_game_service] = lambda: GameService(
        StateRepository(store), clock=lambda: now, rng=random.Random(7)
    )
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
