"""In-memory registry of running games, injected into the routers with Depends.

Games live only as long as the process unless removed with DELETE /games/{id}.
"""

import itertools

from expanse.services.game_service import GameStore


class GameRegistry:
    def __init__(self) -> None:
        self._stores: dict[int, GameStore] = {}
        self._ids = itertools.count(1)

    def create(self, seed: int | None = None) -> tuple[int, GameStore]:
        game_id = next(self._ids)
        store = GameStore(seed=seed)
        self._stores[game_id] = store
        return game_id, store

    def get(self, game_id: int) -> GameStore | None:
        return self._stores.get(game_id)

    def remove(self, game_id: int) -> bool:
        """Drop a finished or abandoned game.  Returns False if it was not registered."""
        return self._stores.pop(game_id, None) is not None

    def clear(self) -> None:
        self._stores.clear()


registry = GameRegistry()


def get_registry() -> GameRegistry:
    return registry
