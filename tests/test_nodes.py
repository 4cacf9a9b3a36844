from pathgrid.core.nodes import NodeArena, SearchNode


def _chain():
    arena = NodeArena()
    a = arena.add(SearchNode((0, 0), 0, 28))
    b = arena.add(SearchNode((0, 1), 10, 20, parent=a))
    arena.add(SearchNode((1, 0), 10, 20, parent=a))  # sibling, not on the path
    c = arena.add(SearchNode((1, 2), 24, 10, parent=b))
    return arena, a, b, c


def test_f_cost():
    assert SearchNode((0, 0), 14, 20).f_cost == 34


def test_indices_are_stable():
    arena, a, b, c = _chain()
    assert (a, b, c) == (0, 1, 3)
    assert len(arena) == 4
    assert arena[c].position == (1, 2)


def test_lineage_walks_parents_back_to_root():
    arena, a, b, c = _chain()
    assert list(arena.lineage(c)) == [c, b, a]
    assert list(arena.lineage(a)) == [a]


def test_reconstruct_path_forward_order_and_next_links():
    arena, a, b, c = _chain()
    assert arena.reconstruct_path(c) == [(0, 0), (0, 1), (1, 2)]
    assert arena[a].next == b
    assert arena[b].next == c
    assert arena[c].next is None
    assert arena[2].next is None


def test_clear():
    arena, *_ = _chain()
    arena.clear()
    assert len(arena) == 0
