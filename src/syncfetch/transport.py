"""Blocking transports used by `fetch`.

A transport opens one `Exchange` per request. The exchange collects the
request headers, performs the whole network round trip inside `send`, and
then exposes the reply as plain strings, the way a synchronous
XMLHttpRequest would.
"""

from __future__ import annotations

__all__ = ["Exchange", "HttpxExchange", "HttpxTransport", "Transport"]


from typing import Protocol

import httpx

from .code import Code
from .exceptions import FetchException


class Exchange(Protocol):
    """A single request/reply round trip.

    Before `send` succeeds, the reply members are zero or empty. A network
    failure inside `send` is raised as a `FetchException` with code
    `Code.TRANSPORT_FAULT`; the reply members then hold whatever partial
    state the transport has.
    """

    status: int
    status_text: str
    response_text: str
    response_url: str

    def set_request_header(self, name: str, value: str) -> None:
        """Adds a header to the outgoing request."""
        ...

    def send(self, body: str | None) -> None:
        """Sends the request and blocks until the reply has been read."""
        ...

    def all_response_headers(self) -> str:
        """Returns the reply headers, one ``name: value`` pair per line."""
        ...


class Transport(Protocol):
    """Factory of exchanges."""

    def open(self, method: str, url: str) -> Exchange:
        """Starts an exchange for the given method and target."""
        ...

    def close(self) -> None:
        """Releases any resources held by the transport."""
        ...


class HttpxExchange:
    """An `Exchange` performed with an `httpx.Client`."""

    def __init__(self, session: httpx.Client, method: str, url: str) -> None:
        self._session = session
        self._method = method
        self._url = url
        self._request_headers: list[tuple[str, str]] = []
        self._response_headers: list[tuple[str, str]] = []
        self.status = 0
        self.status_text = ""
        self.response_text = ""
        self.response_url = ""

    def set_request_header(self, name: str, value: str) -> None:
        self._request_headers.append((name, value))

    def send(self, body: str | None) -> None:
        try:
            resp = self._session.request(
                self._method,
                self._url,
                headers=self._request_headers,
                content=body,
                follow_redirects=True,
            )
        # InvalidURL is raised while building the request and is not an
        # HTTPError.
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchException(Code.TRANSPORT_FAULT, str(e)) from e

        self.status = resp.status_code
        self.status_text = resp.reason_phrase
        self.response_text = resp.text
        self.response_url = str(resp.url)
        self._response_headers = list(resp.headers.multi_items())

    def all_response_headers(self) -> str:
        return "\r\n".join(f"{k}: {v}" for k, v in self._response_headers)


class HttpxTransport:
    """
    A `Transport` backed by httpx.

    Args:
        session (httpx.Client): The httpx client to send requests with. If not
            given, a client with httpx defaults is created and closed by
            `close()`. A supplied client is left open.
    """

    def __init__(self, session: httpx.Client | None = None) -> None:
        if session:
            self._session = session
            self._close_client = False
        else:
            self._session = httpx.Client()
            self._close_client = True
        self._closed = False

    def open(self, method: str, url: str) -> HttpxExchange:
        return HttpxExchange(self._session, method, url)

    def close(self) -> None:
        """Close the HTTP client. After closing, the transport cannot be used."""
        if not self._closed:
            self._closed = True
            if self._close_client:
                self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, _exc_type, _exc_value, _traceback):
        self.close()
