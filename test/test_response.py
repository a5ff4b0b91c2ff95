import pytest

from syncfetch.code import Code
from syncfetch.exceptions import FetchException
from syncfetch.response import Response


@pytest.mark.parametrize(
    "status,ok",
    [(0, False), (199, False), (200, True), (204, True), (299, True), (300, False), (404, False), (500, False)],
)
def test_ok(status, ok):
    assert Response(status=status).ok is ok


@pytest.mark.parametrize("status", ["201", " 201 ", 201.0])
def test_status_coercion(status):
    assert Response(status=status).status == 201


@pytest.mark.parametrize("status", [None, -1, "-1", "abc", "", 2.5, "200 OK", True])
def test_invalid_status(status):
    with pytest.raises(FetchException) as exc_info:
        Response(status=status)
    assert exc_info.value.code == Code.INVALID_COMPONENT


def test_status_is_required():
    with pytest.raises(TypeError):
        Response("body")


def test_fields():
    response = Response(
        '{"a": 1}',
        status=200,
        status_text="OK",
        headers=[("Content-Type", "application/json")],
        url="http://example.com/final",
    )
    assert response.status_text == "OK"
    assert response.url == "http://example.com/final"
    assert response.headers.get("content-type") == "application/json"
    assert response.text() == '{"a": 1}'
    assert response.json() == {"a": 1}


def test_defaults():
    response = Response(status=204)
    assert response.body is None
    assert response.text() == ""
    assert response.status_text == ""
    assert response.url == ""


def test_clone():
    response = Response("hi", status=200, headers={"x-a": "1"})
    clone = response.clone()
    clone.headers.append("x-a", "2")
    assert response.headers.get("x-a") == "1"
    assert clone.headers.get("x-a") == "1, 2"
    assert clone.text() == "hi"
    assert clone.status == 200
