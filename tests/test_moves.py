from klotski_core.board import popcount
from klotski_core.moves import Move, describe_move, describe_path, is_single_move, successors
from klotski_core.presets import HAKOIRI, initial
from sample_puzzles import CORNER, LINE


def test_initial_successors_move_only_small_pieces():
    s = initial()
    succs = list(successors(HAKOIRI, s))
    # only the four 1x1 pieces next to the two empty cells can move
    assert len(succs) == 4
    for ns in succs:
        assert ns.masks[1:] == s.masks[1:]
        assert popcount(ns.masks[0]) == 4


def test_successor_order_is_stable():
    s = initial()
    first = list(successors(HAKOIRI, s))
    second = list(successors(HAKOIRI, s))
    assert first == second
    assert len(set(first)) == len(first)


def test_edge_guards_single_piece():
    # piece in the top-left corner can only go right or down
    succs = list(successors(LINE, LINE.initial()))
    assert [ns.masks[0] for ns in succs] == [0b000_010, 0b001_000]


def test_overlap_inside_group_is_rejected():
    # the two stacked 1x1 pieces in column 1 may not slide onto each other
    for ns in successors(CORNER, CORNER.initial()):
        assert popcount(ns.masks[0]) == 3
        assert ns.masks[0] & ns.masks[1] == 0


def test_describe_move():
    s = initial()
    first = next(iter(successors(HAKOIRI, s)))
    assert describe_move(HAKOIRI, s, first) == Move(slot=0, piece="S", direction="down")
    assert is_single_move(HAKOIRI, s, first)
    assert not is_single_move(HAKOIRI, s, s)


def test_describe_path():
    s = LINE.initial()
    right = next(iter(successors(LINE, s)))
    moves = describe_path(LINE, [s, right])
    assert [m.direction for m in moves] == ["right"]
