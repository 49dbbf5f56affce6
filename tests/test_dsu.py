import pytest
from hypothesis import given
from hypothesis import strategies as st

from cpkit.dsu import UnionFind


def test_join_reports_merges():
    uf = UnionFind(4)
    assert uf.join(0, 1)
    assert uf.join(2, 3)
    assert not uf.join(1, 0)
    assert uf.connected(0, 1)
    assert not uf.connected(1, 2)
    assert uf.join(1, 3)
    assert uf.connected(0, 2)


def test_fresh_elements_are_their_own_roots():
    uf = UnionFind(5)
    assert [uf.find(i) for i in range(5)] == list(range(5))


@pytest.mark.parametrize("bad", [-1, 3])
def test_out_of_range(bad):
    uf = UnionFind(3)
    with pytest.raises(IndexError):
        uf.find(bad)


def _components(n, edges):
    label = list(range(n))
    changed = True
    while changed:
        changed = False
        for a, b in edges:
            m = min(label[a], label[b])
            if label[a] != m or label[b] != m:
                label[a] = label[b] = m
                changed = True
    return label


@given(
    st.integers(min_value=1, max_value=30).flatmap(
        lambda n: st.tuples(
            st.just(n),
            st.lists(st.tuples(st.integers(0, n - 1), st.integers(0, n - 1)), max_size=40),
        )
    )
)
def test_matches_naive_components(case):
    n, edges = case
    uf = UnionFind(n)
    merges = sum(uf.join(a, b) for a, b in edges)
    label = _components(n, edges)
    for a in range(n):
        for b in range(n):
            assert uf.connected(a, b) == (label[a] == label[b])
    assert merges == n - len(set(label))