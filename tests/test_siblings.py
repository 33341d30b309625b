import pytest
from app.core.errors import NotFoundError
from app.services.sibling_service import sibling_kind, siblings_of
from tests.factories import ind, snapshot_of


def test_full_and_half_siblings(snapshot):
    result = [(s.id, kind) for s, kind in siblings_of(snapshot, 3)]
    assert result == [(4, "full"), (7, "half")]


def test_unrelated_parents_full_siblings_only():
    snap = snapshot_of(ind(1), ind(2), ind(3, 1, 2), ind(4, 1, 2))
    assert [(s.id, kind) for s, kind in siblings_of(snap, 3)] == [(4, "full")]


def test_no_parents_means_no_siblings(snapshot):
    assert siblings_of(snapshot, 1) == []
    assert siblings_of(snapshot, 5) == []


def test_parent_ids_are_compared_by_role():
    # 2 is the dam of 3 but recorded as sire of 6: not a shared parent
    snap = snapshot_of(ind(3, 1, 2), ind(6, 2, 5))
    assert siblings_of(snap, 3) == []


def test_single_known_parent_gives_half_siblings():
    snap = snapshot_of(ind(1), ind(2, father=1), ind(3, father=1))
    assert [(s.id, kind) for s, kind in siblings_of(snap, 2)] == [(3, "half")]


def test_unknown_subject_is_not_found(snapshot):
    with pytest.raises(NotFoundError):
        siblings_of(snapshot, 404)


def test_dangling_parent_reference_is_not_a_subject():
    snap = snapshot_of(ind(1, father=999), ind(2, father=999))
    assert [(s.id, kind) for s, kind in siblings_of(snap, 1)] == [(2, "half")]
    with pytest.raises(NotFoundError):
        siblings_of(snap, 999)
    assert sibling_kind(snap, 999, 1) is None


def test_sibling_kind_pairs(snapshot):
    assert sibling_kind(snapshot, 3, 4) == "full"
    assert sibling_kind(snapshot, 4, 3) == "full"
    assert sibling_kind(snapshot, 3, 7) == "half"
    assert sibling_kind(snapshot, 1, 2) is None
    assert sibling_kind(snapshot, 3, 6) is None


def test_sibling_kind_edge_cases(snapshot):
    assert sibling_kind(snapshot, 3, 3) is None
    assert sibling_kind(snapshot, 3, 404) is None
    assert sibling_kind(snapshot, 404, 3) is None
