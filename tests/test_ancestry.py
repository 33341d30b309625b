import pytest
from app.core.errors import InvalidArgumentError, NotFoundError
from app.services.ancestry_service import ancestor_depths, ancestry_of, known_generations
from tests.factories import ind, snapshot_of


def test_zero_generations_is_just_the_subject(snapshot):
    assert ancestry_of(snapshot, 3, 0) == {3: snapshot.get(3)}


def test_parents_and_grandparents(snapshot):
    assert set(ancestry_of(snapshot, 3, 1)) == {1, 2, 3}
    assert set(ancestry_of(snapshot, 6, 5)) == {2, 5, 6}


def test_generation_cap_limits_depth():
    # 10 -> 9 -> ... -> 0 through fathers
    chain = [ind(0)] + [ind(i, father=i - 1) for i in range(1, 11)]
    pedigree = ancestry_of(snapshot_of(*chain), 10, 2)
    assert set(pedigree) == {10, 9, 8}


def test_ancestor_reached_twice_is_listed_once():
    # 5 is grandsire on both sides of 6
    snap = snapshot_of(ind(5), ind(3, father=5), ind(4, father=5), ind(6, 3, 4))
    pedigree = ancestry_of(snap, 6, 5)
    assert list(pedigree) == [6, 3, 4, 5]


def test_cycle_terminates_and_keeps_each_individual_once():
    snap = snapshot_of(ind(1, father=3), ind(2, father=1), ind(3, father=2))
    pedigree = ancestry_of(snap, 1, 5)
    assert set(pedigree) == {1, 2, 3}


def test_own_parent_does_not_loop():
    snap = snapshot_of(ind(1, father=1, mother=1))
    assert ancestry_of(snap, 1, 5) == {1: snap.get(1)}


def test_dangling_parent_is_just_absent():
    snap = snapshot_of(ind(1, father=999, mother=2), ind(2))
    assert set(ancestry_of(snap, 1, 5)) == {1, 2}


def test_unknown_subject_is_not_found(snapshot):
    with pytest.raises(NotFoundError):
        ancestry_of(snapshot, 404, 3)


def test_dangling_parent_reference_is_not_a_subject():
    snap = snapshot_of(ind(1, father=999), ind(2, father=999))
    assert set(ancestry_of(snap, 1, 5)) == {1}
    with pytest.raises(NotFoundError):
        ancestry_of(snap, 999, 5)


@pytest.mark.parametrize("generations", [-1, 6, 50])
def test_out_of_range_generations(snapshot, generations):
    with pytest.raises(InvalidArgumentError):
        ancestry_of(snapshot, 3, generations)


def test_ancestor_depths_records_every_path():
    snap = snapshot_of(ind(5), ind(3, father=5), ind(4, father=5), ind(6, 3, 4))
    depths = ancestor_depths(snap, 6, 10)
    assert depths == {6: [0], 3: [1], 4: [1], 5: [2, 2]}


def test_ancestor_depths_respects_cap_on_cycles():
    snap = snapshot_of(ind(1, father=1))
    assert ancestor_depths(snap, 1, 3) == {1: [0, 1, 2, 3]}


def test_ancestor_depths_of_unknown_subject(snapshot):
    assert ancestor_depths(snapshot, 404, 10) == {}


def test_known_generations(snapshot):
    assert known_generations(ancestry_of(snapshot, 1, 5), 1) == 0
    assert known_generations(ancestry_of(snapshot, 3, 5), 3) == 1

    chain = [ind(0)] + [ind(i, father=i - 1) for i in range(1, 8)]
    snap = snapshot_of(*chain)
    assert known_generations(ancestry_of(snap, 7, 5), 7) == 5
    assert known_generations(ancestry_of(snap, 7, 3), 7, 3) == 3
