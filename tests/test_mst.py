import math

import pytest

from algoshelf.dsu import DisjointSetUnion
from algoshelf.mst import kruskal, prim_matrix

I = math.inf

SOURCE_COST = [
    [I, 25, I, I, I, 5, I],
    [25, I, 12, I, I, I, 10],
    [I, 12, I, 8, I, I, I],
    [I, I, 8, I, 16, I, 14],
    [I, I, I, 16, I, 20, 18],
    [5, I, I, I, 20, I, I],
    [I, 10, I, 14, 18, I, I],
]


def _edges_of(matrix):
    return [
        (i, j, matrix[i][j])
        for i in range(len(matrix))
        for j in range(i + 1, len(matrix))
        if matrix[i][j] != I
    ]


def _spans(n, tree):
    dsu = DisjointSetUnion(n)
    for u, v in tree:
        dsu.unite(u, v)
    return len({dsu.find(i) for i in range(n)}) == 1


def test_prim_and_kruskal_agree_on_source_graph():
    tree = prim_matrix(SOURCE_COST)
    prim_cost = sum(SOURCE_COST[u][v] for u, v in tree)
    kruskal_cost, kruskal_tree = kruskal(len(SOURCE_COST), _edges_of(SOURCE_COST))
    assert prim_cost == kruskal_cost
    assert len(tree) == len(SOURCE_COST) - 1
    assert len(kruskal_tree) == len(SOURCE_COST) - 1


def test_prim_starts_with_cheapest_edge():
    tree = prim_matrix(SOURCE_COST)
    assert tree[0] == (0, 5)


def test_prim_tree_spans_all_vertices():
    tree = prim_matrix(SOURCE_COST)
    assert _spans(len(SOURCE_COST), tree)
    assert all(SOURCE_COST[u][v] != I for u, v in tree)


def test_kruskal_tree_spans_and_uses_given_edges():
    edges = _edges_of(SOURCE_COST)
    _, tree = kruskal(len(SOURCE_COST), edges)
    given = {(u, v) for u, v, _ in edges}
    assert set(tree) <= given
    assert _spans(len(SOURCE_COST), tree)


def test_kruskal_skips_heaviest_edge_of_cycle():
    cost, tree = kruskal(3, [(0, 1, 1), (1, 2, 2), (0, 2, 3)])
    assert (0, 2) not in tree
    assert cost == 1 + 2


def test_kruskal_on_disconnected_graph_builds_forest():
    _, tree = kruskal(4, [(0, 1, 7), (2, 3, 4)])
    assert len(tree) == 2
    assert tree[0] == (2, 3)


def test_kruskal_rejects_unknown_vertex():
    with pytest.raises(ValueError):
        kruskal(2, [(0, 2, 1)])


def test_prim_on_disconnected_graph_raises():
    matrix = [
        [I, 1, I, I],
        [1, I, I, I],
        [I, I, I, 2],
        [I, I, 2, I],
    ]
    with pytest.raises(ValueError):
        prim_matrix(matrix)


def test_prim_rejects_non_square_matrix():
    with pytest.raises(ValueError):
        prim_matrix([[I, 1], [1]])


def test_prim_single_vertex_has_no_edges():
    assert prim_matrix([[I]]) == []