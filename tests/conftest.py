import random

import pytest
from httpx import ASGITransport, AsyncClient

from expanse.main import app
from expanse.models.game import GameState
from expanse.registry import GameRegistry, get_registry
from expanse.schemas.actions import InitGame
from expanse.services.game_service import GameStore


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def store(rng: random.Random) -> GameStore:
    """Two-player game, Action phase, round 1."""
    game_store = GameStore(rng=rng)
    game_store.dispatch(InitGame(player_count=2))
    return game_store


@pytest.fixture
def state(store: GameStore) -> GameState:
    """A mutable copy of a freshly initialized two-player game."""
    return store.state.model_copy(deep=True)


@pytest.fixture
async def client() -> AsyncClient:
    """HTTP client backed by an isolated, empty game registry."""
    test_registry = GameRegistry()
    app.dependency_overrides[get_registry] = lambda: test_registry
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
