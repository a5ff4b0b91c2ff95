__all__ = ["QueryParams"]


from typing import Any

from ._multimap import MultimapView
from ._stringify import UNDEFINED, to_str


class QueryParams(MultimapView):
    """Container of URL query parameters.

    Keys are case-sensitive and unique: a repeated key in a parsed query
    string overwrites the earlier value at the earlier position. Values are
    neither escaped on output nor unescaped on input.
    """

    def __init__(self, init: Any = None) -> None:
        if isinstance(init, (str, int, float)) or init is UNDEFINED:
            super().__init__()
            self._parse_into(to_str(init))
        else:
            super().__init__(init)

    @classmethod
    def parse(cls, raw: Any) -> "QueryParams":
        """Parses a raw query string such as ``"?a=1&b=2"``."""
        params = cls()
        params._parse_into(to_str(raw))
        return params

    def _parse_into(self, raw: str) -> None:
        if raw.startswith("?"):
            raw = raw[1:]
        if not raw:
            return
        for segment in raw.split("&"):
            key, _, value = segment.partition("=")
            self.set(key, value)

    def sort(self) -> "QueryParams":
        """Sorts all pairs by key. Pairs with equal keys keep their order."""
        ordered = sorted(self._map.items(), key=lambda pair: pair[0])
        self._map.clear()
        for key, value in ordered:
            self._map.set(key, value)
        return self

    def to_string(self) -> str:
        """Returns the query string, without a leading ``?``."""
        return "&".join(f"{key}={value}" for key, value in self._map.items())

    def __str__(self) -> str:
        return self.to_string()
