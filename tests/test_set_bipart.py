import pytest

from ecgen import InvalidArgument, set_bipart, set_bipart_gen, stirling2nd


def test_set_bipart():
    n = 5
    b = [0] * (n - 1) + [1]
    cnt = 1
    for x in set_bipart_gen(n):
        b[x] = 1 - b[x]
        cnt += 1
    assert cnt == 15


def test_set_bipart_order(snapshot):
    states = snapshot(set_bipart(4), key=lambda s: "".join(map(str, s)))
    assert states == ["0001", "0011", "0111", "0101", "0100", "0110", "0010"]


@pytest.mark.parametrize("n", range(2, 11))
def test_set_bipart_visits_each_partition_once(n, snapshot, diff):
    states = snapshot(set_bipart(n))
    assert len(states) == stirling2nd(n, 2) == 2 ** (n - 1) - 1
    assert len(set(states)) == len(states)
    for s in states:
        assert s[0] == 0 and 1 in s
    for prev, cur in zip(states, states[1:]):
        assert len(diff(prev, cur)) == 1


def test_set_bipart_two_elements(snapshot):
    assert list(set_bipart_gen(2)) == []
    assert snapshot(set_bipart(2)) == [(0, 1)]


@pytest.mark.parametrize("n", [-1, 0, 1])
def test_set_bipart_too_small_raises(n):
    with pytest.raises(InvalidArgument):
        set_bipart_gen(n)
