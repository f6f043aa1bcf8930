import pytest

from brumby.cache import CacheStats


def test_add_bool():
    assert CacheStats() + True == CacheStats(hits=1, misses=0)
    assert CacheStats() + False == CacheStats(hits=0, misses=1)


def test_add_assign_bool():
    cs = CacheStats(hits=1, misses=0)
    cs += False
    assert cs == CacheStats(hits=1, misses=1)
    cs += True
    assert cs == CacheStats(hits=2, misses=1)


def test_add_self():
    cs = CacheStats(hits=4, misses=5)
    assert cs + CacheStats(hits=3, misses=1) == CacheStats(hits=7, misses=6)


def test_add_assign_self():
    cs = CacheStats(hits=4, misses=5)
    cs += CacheStats(hits=3, misses=1)
    assert cs == CacheStats(hits=7, misses=6)


def test_add_does_not_mutate_operand():
    cs = CacheStats(hits=4, misses=5)
    _ = cs + True
    assert cs == CacheStats(hits=4, misses=5)


def test_add_unsupported_type():
    with pytest.raises(TypeError):
        CacheStats() + 1.5