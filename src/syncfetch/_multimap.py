from collections.abc import (
    Callable,
    ItemsView,
    Iterable,
    Iterator,
    KeysView,
    MutableMapping,
    ValuesView,
)
from typing import Any

from ._stringify import to_str

__all__ = ["MultimapView", "OrderedMultimap"]


class OrderedMultimap(MutableMapping[str, str]):
    """Ordered string-to-string map with optional case-insensitive keys.

    Keys and values are coerced with `to_str` on the way in. Each normalized
    key appears at most once: setting an existing key replaces its value
    without moving it, deleting removes it from the order.

    Views returned by `keys`, `values` and `entries` are live. Mutating the
    map while iterating one of them raises `RuntimeError`.
    """

    _store: dict[str, str]
    _fold_case: bool

    def __init__(self, init: Any = None, *, fold_case: bool = False) -> None:
        self._store = {}
        self._fold_case = fold_case
        if init is not None:
            for key, value in _iter_pairs(init):
                self.set(key, value)

    @property
    def fold_case(self) -> bool:
        return self._fold_case

    def normalize(self, key: Any) -> str:
        """Returns the canonical form of a key as stored in this map."""
        key = to_str(key)
        if self._fold_case:
            return key.lower()
        return key

    def __getitem__(self, key: Any) -> str:
        return self._store[self.normalize(key)]

    def __setitem__(self, key: Any, value: Any) -> None:
        self._store[self.normalize(key)] = to_str(value)

    def __delitem__(self, key: Any) -> None:
        del self._store[self.normalize(key)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._store)

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, key: object) -> bool:
        return self.normalize(key) in self._store

    def get(self, key: Any, default: Any = None) -> Any:
        """Returns the value for the key, or None if there is none."""
        return self._store.get(self.normalize(key), default)

    def set(self, key: Any, value: Any) -> None:
        self[key] = value

    def has(self, key: Any) -> bool:
        return key in self

    def delete(self, key: Any) -> None:
        """Removes the key if present. Missing keys are ignored."""
        self._store.pop(self.normalize(key), None)

    # Delegate views to _store rather than the base class implementations
    # that go through the dunder methods.

    def keys(self) -> KeysView[str]:
        return self._store.keys()

    def values(self) -> ValuesView[str]:
        return self._store.values()

    def items(self) -> ItemsView[str, str]:
        return self._store.items()

    def clear(self) -> None:
        self._store.clear()

    def copy(self) -> "OrderedMultimap":
        return OrderedMultimap(self, fold_case=self._fold_case)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._store.items())!r})"


class MultimapView(MutableMapping[str, str]):
    """Base for collections whose storage is a composed `OrderedMultimap`.

    Subclasses choose the case-folding policy through `_fold_case` and add
    their own grammar on top; storage semantics live only in the map.
    """

    _fold_case = False
    _map: OrderedMultimap

    def __init__(self, init: Any = None) -> None:
        self._map = OrderedMultimap(init, fold_case=self._fold_case)

    def __getitem__(self, key: Any) -> str:
        return self._map[key]

    def __setitem__(self, key: Any, value: Any) -> None:
        self._map[key] = value

    def __delitem__(self, key: Any) -> None:
        del self._map[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._map)

    def __len__(self) -> int:
        return len(self._map)

    def __contains__(self, key: object) -> bool:
        return key in self._map

    def get(self, key: Any, default: Any = None) -> Any:
        """Returns the value associated to the key, or None if there is none."""
        return self._map.get(key, default)

    def set(self, key: Any, value: Any) -> None:
        """Sets the value for the key, keeping the key's original position."""
        self._map.set(key, value)

    def has(self, key: Any) -> bool:
        return self._map.has(key)

    def delete(self, key: Any) -> None:
        self._map.delete(key)

    def keys(self) -> KeysView[str]:
        return self._map.keys()

    def values(self) -> ValuesView[str]:
        return self._map.values()

    def items(self) -> ItemsView[str, str]:
        return self._map.items()

    def entries(self) -> ItemsView[str, str]:
        """Returns a view of the (key, value) pairs in insertion order."""
        return self._map.items()

    def for_each(self, callback: Callable[[str, str, Any], object]) -> None:
        """Calls `callback(value, key, self)` once per pair, in order."""
        for key, value in self._map.items():
            callback(value, key, self)

    def clear(self) -> None:
        self._map.clear()

    def copy(self):
        return type(self)(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._map.items())!r})"


def _iter_pairs(init: Any) -> Iterator[tuple[Any, Any]]:
    # Pair iteration is preferred; field maps are the fallback. Anything else
    # is rejected instead of silently producing an empty map.
    if isinstance(init, (str, bytes)):
        msg = f"cannot build a map from {type(init).__name__}"
        raise TypeError(msg)
    items = getattr(init, "items", None)
    if callable(items):
        yield from items()
        return
    if isinstance(init, Iterable):
        for pair in init:
            yield _unpack_pair(pair)
        return
    if hasattr(init, "__dict__"):
        yield from vars(init).items()
        return
    msg = f"cannot build a map from {type(init).__name__}"
    raise TypeError(msg)


def _unpack_pair(pair: Any) -> tuple[Any, Any]:
    if isinstance(pair, (str, bytes)) or not isinstance(pair, Iterable):
        msg = f"expected a key/value pair, got {pair!r}"
        raise TypeError(msg)
    parts = list(pair)
    if len(parts) == 1:
        return parts[0], ""
    if len(parts) == 2:
        return parts[0], parts[1]
    msg = f"expected a key/value pair, got {pair!r}"
    raise TypeError(msg)
