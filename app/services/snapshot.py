"""Per-request arena of one owner's individuals.

Every engine function takes a ``Snapshot`` explicitly. Nothing here is cached
between calls.
"""
import logging
from typing import Iterable, Iterator
from app.core.errors import NotFoundError
from app.models.individual import Individual

logger = logging.getLogger(__name__)

class Snapshot:
    def __init__(self, individuals: Iterable[Individual]):
        self._by_id: dict[int, Individual] = {}
        for ind in individuals:
            # duplicate ids are bad data; first one wins
            self._by_id.setdefault(ind.id, ind)

    def get(self, individual_id: int | None) -> Individual | None:
        if individual_id is None:
            return None
        return self._by_id.get(individual_id)

    def require(self, individual_id: int) -> Individual:
        ind = self._by_id.get(individual_id)
        if ind is None:
            raise NotFoundError(f"Individual {individual_id} not found")
        return ind

    def children_index(self) -> dict[int, list[int]]:
        """Parent id -> child ids, in snapshot order."""
        index: dict[int, list[int]] = {}
        for ind in self._by_id.values():
            for parent_id in {ind.fatherId, ind.motherId}:
                if parent_id is not None:
                    index.setdefault(parent_id, []).append(ind.id)
        return index

    def __contains__(self, individual_id: object) -> bool:
        return individual_id in self._by_id

    def __iter__(self) -> Iterator[Individual]:
        return iter(self._by_id.values())

    def __len__(self) -> int:
        return len(self._by_id)

async def load_snapshot(store, owner_id: str) -> Snapshot:
    individuals = await store.list_individuals(owner_id)
    logger.debug("Loaded %d individuals for owner %s", len(individuals), owner_id)
    return Snapshot(individuals)
