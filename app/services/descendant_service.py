import logging
from collections import deque
from app.models.individual import Individual
from app.services.snapshot import Snapshot

logger = logging.getLogger(__name__)

def descendants_of(snapshot: Snapshot, subject_id: int) -> list[Individual]:
    """All individuals reachable through child links, in discovery order.

    No generation cap; the visited set (seeded with the subject) bounds the
    walk by the snapshot size even when parent data loops. A dangling parent
    reference is not an individual, so asking for its descendants is a
    ``NotFoundError``.
    """
    snapshot.require(subject_id)
    children = snapshot.children_index()
    visited = {subject_id}
    found: list[Individual] = []
    queue = deque([subject_id])
    while queue:
        parent_id = queue.popleft()
        for child_id in children.get(parent_id, []):
            if child_id in visited:
                continue
            visited.add(child_id)
            found.append(snapshot.require(child_id))
            queue.append(child_id)
    logger.debug("Descendants of %s: %d individuals", subject_id, len(found))
    return found
