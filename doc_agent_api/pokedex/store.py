"""
In‑memory Pokédex store.
"""

from typing import Optional

from doc_agent_api.core.store import KeyedStore, ReadWriteLock, SequentialIds
from doc_agent_api.pokedex.models import Pokemon


class PokedexStore(KeyedStore[Pokemon]):
    """Captured Pokémon keyed by a counter that starts at 1 and never repeats."""

    def __init__(self, lock: Optional[ReadWriteLock] = None) -> None:
        super().__init__(SequentialIds(), lock=lock, name="pokemon")
