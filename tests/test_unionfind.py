import pytest

from tspmst.unionfind import UnionFind


def test_fresh_elements_are_their_own_roots():
    uf = UnionFind(5)
    assert [uf.find(a) for a in range(1, 6)] == list(range(1, 6))


def test_fresh_elements_are_not_connected():
    uf = UnionFind(4)
    assert not uf.connected(1, 2)
    assert uf.connected(3, 3)


def test_union_connects():
    uf = UnionFind(4)
    uf.union(1, 3)
    assert uf.connected(1, 3)
    assert uf.connected(3, 1)
    assert not uf.connected(1, 2)


def test_union_is_transitive():
    uf = UnionFind(6)
    uf.union(1, 2)
    uf.union(2, 3)
    uf.union(5, 6)
    assert uf.connected(1, 3)
    assert uf.connected(5, 6)
    assert not uf.connected(3, 5)
    uf.union(3, 6)
    assert all(uf.connected(1, a) for a in (2, 3, 5, 6))
    assert not uf.connected(1, 4)


def test_equal_weights_keep_first_root():
    uf = UnionFind(3)
    uf.union(2, 3)
    assert uf.find(3) == 2


def test_lighter_set_goes_under_heavier():
    uf = UnionFind(4)
    uf.union(2, 3)
    uf.union(1, 2)
    assert uf.find(1) == uf.find(2) == uf.find(3)
    assert uf.find(1) == 2


def test_find_returns_member_of_range():
    uf = UnionFind(10)
    for a, b in [(1, 10), (4, 7), (7, 1), (2, 3)]:
        uf.union(a, b)
    for a in range(1, 11):
        root = uf.find(a)
        assert 1 <= root <= 10
        assert uf.find(root) == root


@pytest.mark.parametrize("bad", [0, 4, -1])
def test_out_of_range_raises(bad):
    uf = UnionFind(3)
    with pytest.raises(IndexError):
        uf.find(bad)


def test_union_out_of_range_raises():
    uf = UnionFind(3)
    with pytest.raises(IndexError):
        uf.union(1, 9)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        UnionFind(-1)


def test_len_reports_size():
    assert len(UnionFind(7)) == 7