import networkx as nx
import pytest

from ecgen import InvalidArgument, brgc, emk, sjt
from ecgen.walk import to_networkx, visit_order


@pytest.mark.parametrize("n", [2, 3, 4, 5])
def test_gray_code_is_hamiltonian_path_in_hypercube(n):
    walk = to_networkx(brgc(n))
    cube = nx.hypercube_graph(n)
    assert set(walk.nodes) == set(cube.nodes)
    assert all(cube.has_edge(u, v) for u, v in walk.edges)
    assert walk.number_of_edges() == 2**n - 1
    assert nx.is_connected(walk)


def test_sjt_walk_uses_adjacent_transpositions():
    walk = to_networkx(sjt(list(range(4))))
    assert walk.number_of_nodes() == 24
    for u, v in walk.edges:
        positions = [i for i in range(4) if u[i] != v[i]]
        assert len(positions) == 2 and positions[1] == positions[0] + 1


def test_combination_walk_is_a_path():
    walk = to_networkx(emk([1, 1, 1, 0, 0, 0]))
    degrees = sorted(d for _, d in walk.degree())
    assert degrees == [1, 1] + [2] * 18


def test_visit_order_and_step_attributes():
    walk = to_networkx(brgc(2))
    assert visit_order(walk) == [(0, 0), (1, 0), (1, 1), (0, 1)]
    assert walk.edges[(1, 0), (1, 1)]["step"] == 2
    assert walk.nodes[(0, 1)]["index"] == 3


def test_repeated_state_raises():
    with pytest.raises(InvalidArgument, match="visited twice"):
        to_networkx([(0, 0), (0, 1), (0, 0)])


def test_custom_key():
    walk = to_networkx(sjt(list("abc")), key="".join)
    assert "abc" in walk and "bac" in walk
