__all__ = ["Response"]


from typing import Any

from ._body import Body
from ._stringify import to_str
from .code import Code
from .exceptions import FetchException
from .headers import Headers


class Response(Body):
    """The reply to a request made by `fetch`.

    Args:
        body: The body text, if any.
        status: The status code. Must be a non-negative integer, or a string
            of digits.
        status_text: The reason phrase.
        headers: Anything `Headers` accepts.
        url: The URL the reply came from, after any redirects.
    """

    _status: int
    _status_text: str
    _url: str

    def __init__(
        self,
        body: str | None = None,
        *,
        status: Any,
        status_text: Any = "",
        headers: Any = None,
        url: Any = "",
    ) -> None:
        self._body = body
        self._headers = Headers(headers)
        self._status = _parse_status(status)
        self._status_text = to_str(status_text)
        self._url = to_str(url)

    @property
    def ok(self) -> bool:
        """Whether the status is in the 200-299 range."""
        return 200 <= self._status <= 299

    @property
    def status(self) -> int:
        return self._status

    @property
    def status_text(self) -> str:
        return self._status_text

    @property
    def url(self) -> str:
        return self._url

    def clone(self) -> "Response":
        """Returns a copy of this response with its own headers."""
        return Response(
            self._body,
            status=self._status,
            status_text=self._status_text,
            headers=Headers(self._headers),
            url=self._url,
        )

    def __repr__(self) -> str:
        return f"<Response [{self._status}]>"


def _parse_status(status: Any) -> int:
    text = to_str(status).strip()
    if not (text.isascii() and text.isdigit()):
        raise FetchException(
            Code.INVALID_COMPONENT, f"unable to parse status code {text!r}"
        )
    return int(text)
