import pytest

from syncfetch.params import QueryParams


def test_parse_roundtrip():
    assert QueryParams.parse("alpha=one&beta=two").to_string() == "alpha=one&beta=two"
    assert str(QueryParams("alpha=one&beta=two")) == "alpha=one&beta=two"


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("", []),
        ("?", []),
        ("?a=1", [("a", "1")]),
        ("a", [("a", "")]),
        ("a=", [("a", "")]),
        ("a=b=c", [("a", "b=c")]),
        ("a=1&b=2&a=3", [("a", "3"), ("b", "2")]),
        ("??a=1", [("?a", "1")]),
    ],
)
def test_parse(raw, expected):
    assert list(QueryParams.parse(raw).items()) == expected


def test_scalar_initializer_is_parsed():
    assert list(QueryParams(5).items()) == [("5", "")]


def test_mapping_initializer():
    params = QueryParams({"b": 2, "a": None})
    assert str(params) == "b=2&a=null"


def test_keys_are_case_sensitive():
    params = QueryParams("Key=1&key=2")
    assert params.get("Key") == "1"
    assert params.get("key") == "2"
    assert len(params) == 2


def test_sort():
    assert QueryParams.parse("b=2&a=1").sort().to_string() == "a=1&b=2"


def test_sort_keeps_values():
    params = QueryParams("zeta=z&alpha=a&mid=m")
    params.sort()
    assert list(params.items()) == [("alpha", "a"), ("mid", "m"), ("zeta", "z")]


def test_serialize_without_escaping():
    params = QueryParams()
    params.set("q", "a b&c")
    assert params.to_string() == "q=a b&c"


def test_serialized_form_has_no_question_mark():
    params = QueryParams("?x=1")
    assert not str(params).startswith("?")
