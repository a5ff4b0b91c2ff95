__all__ = ["FetchOptions", "Fetcher", "fetch"]


import atexit
import logging
import re
from dataclasses import dataclass, replace
from typing import Any

from .code import Code
from .exceptions import FetchException
from .headers import Headers
from .request import Request
from .response import Response
from .transport import HttpxTransport, Transport
from .url import URL

logger = logging.getLogger(__name__)

_LINE_BREAKS = re.compile(r"[\r\n]+")


@dataclass
class FetchOptions:
    """Options for building the request of a fetch.

    Fields left as None take the value of the defaults they are merged onto.
    """

    method: str | None = None
    headers: Any = None
    body: Any = None
    json: Any = None

    def merge(self, other: "FetchOptions | None") -> "FetchOptions":
        """Returns these options overridden by the fields set in `other`.

        Headers are combined: these headers first, then those of `other`,
        which replace values for the same key.
        """
        if other is None:
            return replace(self)
        headers = Headers(self.headers)
        for key, value in Headers(other.headers).items():
            headers.set(key, value)
        return FetchOptions(
            method=other.method if other.method is not None else self.method,
            headers=headers,
            body=other.body if other.body is not None else self.body,
            json=other.json if other.json is not None else self.json,
        )


class Fetcher:
    """
    Sends requests through a blocking transport.

    Args:
        transport (Transport): The transport to use. Defaults to an
            `HttpxTransport` owned and closed by this fetcher.
        options (FetchOptions): Defaults applied to every request built by
            `fetch`. Not applied to `Request` instances passed in directly.
    """

    def __init__(
        self,
        transport: Transport | None = None,
        options: FetchOptions | None = None,
    ) -> None:
        if transport is not None:
            self._transport = transport
            self._close_transport = False
        else:
            self._transport = HttpxTransport()
            self._close_transport = True
        self._options = options or FetchOptions()

    @property
    def options(self) -> FetchOptions:
        return self._options

    def close(self) -> None:
        """Close the transport if this fetcher created it."""
        if self._close_transport:
            self._transport.close()

    def __enter__(self):
        return self

    def __exit__(self, _exc_type, _exc_value, _traceback):
        self.close()

    def _merge_options(self, options: FetchOptions | None) -> FetchOptions:
        return self._options.merge(options)

    def fetch(
        self,
        resource: "str | URL | Request",
        options: FetchOptions | None = None,
        **kwargs: Any,
    ) -> Response:
        """Sends a request and returns the reply.

        Keyword arguments are the fields of `FetchOptions` and take
        precedence over `options`. A transport fault while sending is logged
        and suppressed; the returned response then reflects whatever the
        transport managed to read, typically a status of 0.

        A `Request` is sent as is; passing options with one is a `TypeError`.
        """
        if isinstance(resource, Request):
            if options is not None or kwargs:
                msg = "options cannot be combined with a Request"
                raise TypeError(msg)
            request = resource
        else:
            if kwargs:
                options = (options or FetchOptions()).merge(FetchOptions(**kwargs))
            merged = self._merge_options(options)
            request = Request(
                URL(resource),
                method=merged.method or "GET",
                headers=merged.headers,
                body=merged.body,
                json=merged.json,
            )

        logger.debug("Sending %s %s", request.method, request.url)
        exchange = self._transport.open(request.method, request.url)
        for key, value in request.headers.items():
            exchange.set_request_header(key, value)

        try:
            exchange.send(request.body)
        except FetchException as e:
            if e.code != Code.TRANSPORT_FAULT:
                raise
            logger.warning(
                "Transport fault on %s %s: %s", request.method, request.url, e
            )

        headers = parse_header_block(exchange.all_response_headers())
        logger.debug(
            "Received %s for %s %s", exchange.status, request.method, request.url
        )
        return Response(
            exchange.response_text,
            status=exchange.status,
            status_text=exchange.status_text,
            headers=headers,
            url=exchange.response_url,
        )


def parse_header_block(raw: str) -> Headers:
    """Parses ``name: value`` lines into `Headers`, merging repeated names."""
    headers = Headers()
    for line in _LINE_BREAKS.split(raw.strip()):
        if not line:
            continue
        name, _, value = line.partition(":")
        headers.append(name.strip(), value.strip())
    return headers


_default_fetcher: Fetcher | None = None


def fetch(
    resource: "str | URL | Request",
    options: FetchOptions | None = None,
    **kwargs: Any,
) -> Response:
    """Sends a request with a shared `Fetcher` and returns the reply.

    The shared fetcher is created on first use and closed at interpreter exit.
    """
    global _default_fetcher
    if _default_fetcher is None:
        _default_fetcher = Fetcher()
        atexit.register(_default_fetcher.close)
    return _default_fetcher.fetch(resource, options, **kwargs)
