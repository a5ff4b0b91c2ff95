__all__ = ["Headers"]


from typing import Any

from ._multimap import MultimapView
from ._stringify import to_str


class Headers(MultimapView):
    """Container of HTTP headers.

    This class behaves like a dictionary with case-insensitive keys and
    string values. Keys are stored lowercase, so iteration yields them in the
    order their lowercase form was first inserted. Repeated values for one
    key are merged into a single comma-separated value by `append`.
    """

    _fold_case = True

    def append(self, key: Any, value: Any) -> None:
        """Add a header value, merging with any existing value.

        To overwrite an existing value, use `set` or `self[key] = value`.
        """
        value = to_str(value)
        current = self._map.get(key)
        if current is None:
            self._map.set(key, value)
            return
        tokens = [token.strip() for token in current.split(",")]
        tokens.append(value)
        self._map.set(key, ", ".join(tokens))
