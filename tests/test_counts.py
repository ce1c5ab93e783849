import pytest
from algotrace.counts import CharCountTable

def test_increment_from_absent_and_present():
    t = CharCountTable()
    assert t.increment("a") == 1
    assert t.increment("a") == 2
    assert t.count("a") == 2
    assert t.count("z") == 0

def test_decrement_removes_key_at_zero():
    t = CharCountTable()
    t.increment("a"); t.increment("a")
    assert t.decrement("a") is True
    assert t.count("a") == 1 and "a" in t
    assert t.decrement("a") is True
    assert "a" not in t
    assert t.is_empty()

def test_decrement_absent_is_reported_not_driven_negative():
    t = CharCountTable()
    assert t.decrement("x") is False
    assert "x" not in t
    assert len(t) == 0

def test_snapshot_is_independent_and_read_only():
    t = CharCountTable()
    t.increment("a")
    snap = t.snapshot()
    t.increment("a"); t.increment("b")
    assert dict(snap) == {"a": 1}
    with pytest.raises(TypeError):
        snap["a"] = 5
