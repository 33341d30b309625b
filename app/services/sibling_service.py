from app.models.genealogy import SiblingKind
from app.models.individual import Individual
from app.services.snapshot import Snapshot

def _compare(subject: Individual, other: Individual) -> SiblingKind | None:
    father_match = subject.fatherId is not None and subject.fatherId == other.fatherId
    mother_match = subject.motherId is not None and subject.motherId == other.motherId
    if father_match and mother_match:
        return "full"
    if father_match or mother_match:
        return "half"
    return None

def siblings_of(snapshot: Snapshot, subject_id: int) -> list[tuple[Individual, SiblingKind]]:
    subject = snapshot.require(subject_id)
    if subject.fatherId is None and subject.motherId is None:
        return []
    out: list[tuple[Individual, SiblingKind]] = []
    for other in snapshot:
        if other.id == subject.id:
            continue
        kind = _compare(subject, other)
        if kind:
            out.append((other, kind))
    return out

def sibling_kind(snapshot: Snapshot, a_id: int, b_id: int) -> SiblingKind | None:
    """Whether two candidate partners are already known siblings."""
    if a_id == b_id:
        return None
    a = snapshot.get(a_id)
    b = snapshot.get(b_id)
    if a is None or b is None:
        return None
    return _compare(a, b)
