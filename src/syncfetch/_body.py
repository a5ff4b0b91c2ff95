import json
from typing import Any

from .headers import Headers


class Body:
    """Members shared by `Request` and `Response`."""

    _headers: Headers
    _body: str | None

    @property
    def headers(self) -> Headers:
        """The headers of this message."""
        return self._headers

    @property
    def body(self) -> str | None:
        """The raw body. Prefer `text()` or `json()`."""
        return self._body

    def json(self) -> Any:
        """Returns the result of parsing the body as JSON."""
        return json.loads(self.text())

    def text(self) -> str:
        """Returns the body as text, or an empty string when there is none."""
        if self._body is None:
            return ""
        return self._body
