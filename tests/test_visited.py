import pytest

from klotski_core.state import BoardState
from search.errors import MissingRecordError
from search.visited import NO_PARENT, VisitedTable

ROOT = BoardState((1,))


def test_root_record():
    t = VisitedTable(ROOT)
    assert t.record(ROOT) == (0, NO_PARENT)
    assert len(t) == 1 and ROOT in t


def test_ids_are_dense_and_path_follows_parents():
    t = VisitedTable(ROOT)
    a = BoardState((2,))
    b = BoardState((4,))
    c = BoardState((8,))
    assert t.add(a, 0) == 1
    assert t.add(b, 0) == 2
    assert t.add(c, 1) == 3
    assert t.record(c) == (3, 1)
    assert t.path_to(c) == [ROOT, a, c]
    assert t.path_to(ROOT) == [ROOT]
    assert list(t) == [ROOT, a, b, c]


def test_records_are_written_once():
    t = VisitedTable(ROOT)
    t.add(BoardState((2,)), 0)
    with pytest.raises(ValueError):
        t.add(BoardState((2,)), 0)


def test_missing_record():
    t = VisitedTable(ROOT)
    with pytest.raises(MissingRecordError):
        t.record(BoardState((2,)))
    with pytest.raises(KeyError):
        t.path_to(BoardState((2,)))
