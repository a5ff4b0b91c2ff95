from types import SimpleNamespace

import pytest

from syncfetch._multimap import OrderedMultimap
from syncfetch.headers import Headers
from syncfetch.params import QueryParams


def test_set_existing_key_keeps_position():
    m = OrderedMultimap([("a", "1"), ("b", "2"), ("c", "3")])
    m.set("b", "two")
    assert list(m.items()) == [("a", "1"), ("b", "two"), ("c", "3")]


def test_delete_then_set_moves_to_end():
    m = OrderedMultimap([("a", "1"), ("b", "2")])
    m.delete("a")
    m.set("a", "again")
    assert list(m.keys()) == ["b", "a"]


def test_missing_keys_do_not_raise():
    m = OrderedMultimap()
    assert m.get("nope") is None
    m.delete("nope")
    assert not m.has("nope")


def test_fold_case():
    m = OrderedMultimap({"Accept": "*/*"}, fold_case=True)
    assert m.normalize("ACCEPT") == "accept"
    assert m.get("accept") == "*/*"
    assert list(m.keys()) == ["accept"]

    m = OrderedMultimap({"Accept": "*/*"})
    assert m.get("accept") is None
    assert m.get("Accept") == "*/*"


@pytest.mark.parametrize(
    "init,expected",
    [
        ({"a": "1", "b": 2}, [("a", "1"), ("b", "2")]),
        ([("a", "1"), ("b", "2")], [("a", "1"), ("b", "2")]),
        ([["a"], ["b", "2"]], [("a", ""), ("b", "2")]),
        ((pair for pair in [("x", 1)]), [("x", "1")]),
        (SimpleNamespace(first="1", second=None), [("first", "1"), ("second", "null")]),
        (Headers({"X-A": "1"}), [("x-a", "1")]),
    ],
)
def test_initializers(init, expected):
    assert list(OrderedMultimap(init).items()) == expected


@pytest.mark.parametrize("init", ["a=1", 42, [("a", "1", "extra")], ["ab"]])
def test_rejects_malformed_initializers(init):
    with pytest.raises(TypeError):
        OrderedMultimap(init)


def test_views_are_live_and_restartable():
    m = OrderedMultimap([("a", "1")])
    keys = m.keys()
    assert list(keys) == ["a"]
    m.set("b", "2")
    assert list(keys) == ["a", "b"]
    assert list(keys) == ["a", "b"]


def test_mutation_during_iteration_raises():
    m = OrderedMultimap([("a", "1"), ("b", "2")])
    with pytest.raises(RuntimeError):
        for key in m.keys():
            m.delete(key)


def test_for_each():
    params = QueryParams("a=1&b=2")
    seen = []
    params.for_each(lambda value, key, owner: seen.append((key, value, owner)))
    assert seen == [("a", "1", params), ("b", "2", params)]


def test_copy_keeps_policy():
    m = OrderedMultimap({"A": "1"}, fold_case=True)
    copied = m.copy()
    copied.set("B", "2")
    assert copied.fold_case
    assert list(copied.keys()) == ["a", "b"]
    assert list(m.keys()) == ["a"]
