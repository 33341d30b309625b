import logging
from collections import deque
from app.core.config import settings
from app.core.errors import InvalidArgumentError
from app.models.individual import Individual
from app.services.snapshot import Snapshot

logger = logging.getLogger(__name__)

MAX_PEDIGREE_GENERATIONS = settings.PEDIGREE_GENERATIONS

def ancestry_of(snapshot: Snapshot, subject_id: int, max_generations: int) -> dict[int, Individual]:
    """Breadth-first closure over father/mother links, at most ``max_generations`` hops up.

    Each individual is added once, so ancestors reached by two paths (or looping
    back through bad data) are never expanded twice. Unknown parent ids are left
    out; an unknown subject raises ``NotFoundError``.
    """
    if not 0 <= max_generations <= MAX_PEDIGREE_GENERATIONS:
        raise InvalidArgumentError(
            f"generations must be between 0 and {MAX_PEDIGREE_GENERATIONS}, got {max_generations}"
        )
    snapshot.require(subject_id)
    result: dict[int, Individual] = {}
    frontier = [subject_id]
    generation = 0
    while frontier:
        next_frontier: list[int] = []
        for individual_id in frontier:
            ind = snapshot.get(individual_id)
            if ind is None or ind.id in result:
                continue
            result[ind.id] = ind
            if generation == max_generations:
                continue
            for parent_id in (ind.fatherId, ind.motherId):
                if parent_id is not None and parent_id not in result and parent_id not in next_frontier:
                    next_frontier.append(parent_id)
        frontier = next_frontier
        generation += 1
    logger.debug("Ancestry of %s (%d generations): %d individuals", subject_id, max_generations, len(result))
    return result

def ancestor_depths(snapshot: Snapshot, subject_id: int, max_depth: int) -> dict[int, list[int]]:
    """Every depth at which each ancestor is reached, one entry per distinct path.

    The subject itself is recorded at depth 0. There is deliberately no visited
    set: the depth cap alone bounds the walk to ``2**(max_depth + 1) - 1`` steps.
    """
    depths: dict[int, list[int]] = {}
    queue = deque([(subject_id, 0)])
    while queue:
        individual_id, depth = queue.popleft()
        ind = snapshot.get(individual_id)
        if ind is None:
            continue
        depths.setdefault(ind.id, []).append(depth)
        if depth < max_depth:
            for parent_id in (ind.fatherId, ind.motherId):
                if parent_id is not None:
                    queue.append((parent_id, depth + 1))
    return depths

def known_generations(pedigree: dict[int, Individual], subject_id: int,
                      max_generations: int = MAX_PEDIGREE_GENERATIONS) -> int:
    """How many ancestor generations hold at least one known record."""
    known = 0
    ids = {subject_id}
    for generation in range(1, max_generations + 1):
        next_ids = set()
        for individual_id in ids:
            ind = pedigree.get(individual_id)
            if not ind:
                continue
            for parent_id in (ind.fatherId, ind.motherId):
                if parent_id is not None and parent_id in pedigree:
                    next_ids.add(parent_id)
        if not next_ids:
            break
        known = generation
        ids = next_ids
    return known
