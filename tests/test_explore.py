import pytest

from klotski_core.board import popcount
from klotski_core.presets import HAKOIRI
from search.bfs import Solver
from search.errors import NoSolutionError
from search.explore import depth_profile, enumerate_states
from sample_puzzles import BLOCKED, CORNER, LINE


@pytest.fixture(scope="module")
def hakoiri_states():
    return enumerate_states(HAKOIRI)


def test_enumerate_small():
    assert len(enumerate_states(LINE)) == 6
    assert len(enumerate_states(BLOCKED)) == 3


def test_enumerate_reports_discoveries():
    seen = []
    visited = enumerate_states(CORNER, on_discover=seen.append)
    # root is not reported, everything else once
    assert len(seen) == len(visited) - 1
    assert len(set(seen)) == len(seen)


def test_enumerate_ids_dense():
    visited = enumerate_states(CORNER)
    for i, s in enumerate(visited):
        sid, parent = visited.record(s)
        assert sid == i
        assert parent < sid


def test_depth_profile_line():
    assert depth_profile(LINE) == [1, 2, 2, 1]


def test_depth_profile_covers_all_states():
    assert sum(depth_profile(CORNER)) == len(enumerate_states(CORNER))


def test_solver_and_enumeration_agree_on_unsolvable():
    solver = Solver(BLOCKED)
    with pytest.raises(NoSolutionError):
        solver.solve()
    assert set(solver.visited) == set(enumerate_states(BLOCKED))


def test_occupancy_and_shape_invariants(hakoiri_states):
    shapes = [popcount(m) for m in HAKOIRI.initial().masks]
    for s in hakoiri_states:
        assert [popcount(m) for m in s.masks] == shapes
        assert popcount(s.occupancy()) == HAKOIRI.occupied
        assert sum(popcount(m) for m in s.masks) == HAKOIRI.occupied
        assert HAKOIRI.board.contains(s.occupancy())


def test_reference_goal_is_reachable(hakoiri_states):
    assert any(HAKOIRI.is_goal(s) for s in hakoiri_states)


def test_moves_are_reversible(hakoiri_states):
    # bounded sample of the reachable set to keep the run short
    for i, a in enumerate(hakoiri_states):
        if i >= 500:
            break
        for b in HAKOIRI.successors(a):
            assert a in set(HAKOIRI.successors(b))


def test_re_enumeration_is_idempotent(hakoiri_states):
    # bounded sample, as above
    for i, a in enumerate(hakoiri_states):
        if i >= 200:
            break
        assert set(HAKOIRI.successors(a)) == set(HAKOIRI.successors(a))
