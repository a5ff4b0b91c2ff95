__all__ = ["Request"]


import json as jsonlib
from typing import Any

from ._body import Body
from ._stringify import to_str
from .code import Code
from .exceptions import FetchException
from .headers import Headers
from .params import QueryParams
from .url import URL

_METHODS_WITHOUT_BODY = ("GET", "HEAD")
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded;charset=UTF-8"
JSON_CONTENT_TYPE = "application/json"


class Request(Body):
    """A request to be sent by `fetch`.

    Args:
        resource: The target, as a URL string or `URL`, or another `Request` to
            copy. When copying, the remaining arguments are ignored.
        method: The HTTP method. Upper-cased.
        headers: Anything `Headers` accepts.
        body: The request body. `QueryParams` bodies are form encoded and set
            the content-type; other values are converted to strings.
        json: A value serialized as the JSON body. Mutually exclusive with
            `body`.
    """

    _url: URL
    _method: str

    def __init__(
        self,
        resource: "str | URL | Request",
        *,
        method: str = "GET",
        headers: Any = None,
        body: Any = None,
        json: Any = None,
    ) -> None:
        if isinstance(resource, Request):
            self._url = URL(resource._url)
            self._method = resource._method
            self._headers = Headers(resource._headers)
            self._body = resource._body
            return

        self._url = URL(resource)
        self._method = to_str(method).upper()
        self._headers = Headers(headers)
        self._body = None

        if body is not None and json is not None:
            msg = "cannot set both body and json"
            raise TypeError(msg)
        if json is not None:
            self._check_body_allowed()
            self._body = jsonlib.dumps(json)
            if "content-type" not in self._headers:
                self._headers.set("content-type", JSON_CONTENT_TYPE)
        elif body is not None and body != "":
            self._check_body_allowed()
            if isinstance(body, QueryParams):
                self._body = body.to_string()
                self._headers.set("content-type", FORM_CONTENT_TYPE)
            else:
                self._body = to_str(body)

    def _check_body_allowed(self) -> None:
        if self._method in _METHODS_WITHOUT_BODY:
            raise FetchException(
                Code.INVALID_BODY_FOR_METHOD,
                f"{self._method} request cannot have a body",
            )

    @property
    def method(self) -> str:
        """The request method, e.g. GET or POST."""
        return self._method

    @property
    def url(self) -> str:
        """The target URL as a string."""
        return self._url.href

    def clone(self) -> "Request":
        """Returns an independent copy of this request."""
        return Request(self)

    def __repr__(self) -> str:
        return f"<Request [{self._method} {self._url.href}]>"
