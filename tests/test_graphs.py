import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.graphs import format_mst, hamiltonian_cycle, prim_mst, tsp_min_distance

SOURCE_GRAPH = [
    [0, 1, 0, 1, 0],
    [1, 0, 1, 1, 1],
    [0, 1, 0, 0, 1],
    [1, 1, 0, 0, 1],
    [0, 1, 1, 1, 0],
]


def _symmetric(matrix):
    size = len(matrix)
    return [
        [0 if i == j else matrix[min(i, j)][max(i, j)] for j in range(size)] for i in range(size)
    ]


square_matrices = st.integers(min_value=2, max_value=6).flatmap(
    lambda n: st.lists(
        st.lists(st.integers(min_value=1, max_value=50), min_size=n, max_size=n),
        min_size=n,
        max_size=n,
    )
)

adjacency_matrices = st.integers(min_value=2, max_value=6).flatmap(
    lambda n: st.lists(
        st.lists(st.integers(min_value=0, max_value=1), min_size=n, max_size=n),
        min_size=n,
        max_size=n,
    )
)


def test_hamiltonian_cycle_source_graph():
    assert hamiltonian_cycle(SOURCE_GRAPH) == [0, 1, 2, 4, 3, 0]


def test_hamiltonian_cycle_absent():
    graph = [
        [0, 1, 0, 1, 0],
        [1, 0, 1, 1, 1],
        [0, 1, 0, 0, 1],
        [1, 1, 0, 0, 0],
        [0, 1, 1, 0, 0],
    ]
    assert hamiltonian_cycle(graph) is None


def test_hamiltonian_rejects_non_square():
    with pytest.raises(ValueError):
        hamiltonian_cycle([[0, 1], [1]])


@given(adjacency_matrices)
def test_hamiltonian_cycle_is_valid_when_found(matrix):
    graph = _symmetric(matrix)
    cycle = hamiltonian_cycle(graph)
    if cycle is None:
        assert cycle is None
        return
    assert cycle[0] == cycle[-1] == 0
    assert sorted(cycle[:-1]) == list(range(len(graph)))
    assert all(graph[a][b] for a, b in zip(cycle, cycle[1:]))


@given(st.integers(min_value=2, max_value=7))
def test_complete_graph_has_cycle(size):
    graph = [[0 if i == j else 1 for j in range(size)] for i in range(size)]
    cycle = hamiltonian_cycle(graph)
    assert cycle is not None
    assert len(cycle) == size + 1


@given(square_matrices)
def test_prim_mst_spans_graph(matrix):
    graph = _symmetric(matrix)
    size = len(graph)
    edges = prim_mst(graph)
    assert len(edges) == size - 1
    assert sorted(v for _, v, _ in edges) == list(range(1, size))
    assert all(graph[u][v] == w for u, v, w in edges)
    star_weight = sum(graph[0][v] for v in range(1, size))
    assert sum(w for _, _, w in edges) <= star_weight


def test_prim_mst_single_vertex():
    assert prim_mst([[0]]) == []


def test_prim_mst_disconnected():
    graph = [[0, 1, 0], [1, 0, 0], [0, 0, 0]]
    with pytest.raises(ValueError):
        prim_mst(graph)


def test_format_mst():
    assert format_mst([(0, 1, 2)]) == "Edge   Weight\n0 - 1    2\n"


def test_format_mst_round_trip_of_prim():
    graph = _symmetric([[0, 4, 9], [0, 0, 3], [0, 0, 0]])
    text = format_mst(prim_mst(graph))
    lines = text.splitlines()
    assert lines[0] == "Edge   Weight"
    assert len(lines) == len(graph)


def test_tsp_classic():
    distances = [
        [0, 10, 15, 20],
        [10, 0, 35, 25],
        [15, 35, 0, 30],
        [20, 25, 30, 0],
    ]
    assert tsp_min_distance(distances) == 80


def test_tsp_rejects_empty():
    with pytest.raises(ValueError):
        tsp_min_distance([])


@given(square_matrices)
def test_tsp_not_worse_than_identity_tour(matrix):
    graph = _symmetric(matrix)
    size = len(graph)
    order = [*range(size), 0]
    identity_cost = sum(graph[a][b] for a, b in zip(order, order[1:]))
    best = tsp_min_distance(graph)
    assert best <= identity_cost
    assert best >= size * min(min(row[j] for j in range(size) if j != i) for i, row in enumerate(graph))


@given(st.integers(min_value=2, max_value=6), st.integers(min_value=1, max_value=100))
def test_tsp_uniform_distances(size, distance):
    graph = [[0 if i == j else distance for j in range(size)] for i in range(size)]
    assert tsp_min_distance(graph) == size * distance