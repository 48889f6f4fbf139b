"""Tests for ResultStore accumulation and clearing."""

from app.results import ResultStore
from app.schemas.business import BusinessInfo


def _biz(name: str) -> BusinessInfo:
    return BusinessInfo(name=name, address="N/A", phone="555-0100")


def test_prepend_most_recent_first():
    store = ResultStore()
    store.prepend("s1", [_biz("A")])
    total = store.prepend("s1", [_biz("B")])

    assert total == 2
    assert [b.name for b in store.get_results("s1")] == ["B", "A"]


def test_prepend_keeps_block_order():
    store = ResultStore()
    store.prepend("s1", [_biz("A")])
    store.prepend("s1", [_biz("B"), _biz("C")])

    assert [b.name for b in store.get_results("s1")] == ["B", "C", "A"]


def test_duplicates_are_kept():
    store = ResultStore()
    store.prepend("s1", [_biz("A")])
    store.prepend("s1", [_biz("A")])

    assert len(store.get_results("s1")) == 2


def test_empty_block_does_not_create_session():
    store = ResultStore()
    assert store.prepend("s1", []) == 0
    assert store.get_session("s1") is None


def test_sessions_are_isolated():
    store = ResultStore()
    store.prepend("s1", [_biz("A")])
    store.prepend("s2", [_biz("B")])

    assert [b.name for b in store.get_results("s1")] == ["A"]
    assert [b.name for b in store.get_results("s2")] == ["B"]


def test_get_results_returns_copy():
    store = ResultStore()
    store.prepend("s1", [_biz("A")])
    store.get_results("s1").clear()

    assert len(store.get_results("s1")) == 1


def test_clear():
    store = ResultStore()
    store.prepend("s1", [_biz("A"), _biz("B")])

    assert store.clear("s1") == 2
    assert store.get_results("s1") == []


def test_clear_unknown_session():
    assert ResultStore().clear("missing") == 0


def test_evicts_least_recently_updated():
    store = ResultStore(max_sessions=2)
    store.prepend("s1", [_biz("A")])
    store.prepend("s2", [_biz("B")])
    store.prepend("s1", [_biz("C")])
    store.prepend("s3", [_biz("D")])

    assert store.get_session("s2") is None
    assert store.get_session("s1") is not None
    assert store.get_session("s3") is not None
