import math
from typing import Any

__all__ = ["UNDEFINED", "to_str"]


class _Undefined:
    """Marker for an argument that was never supplied."""

    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined()


def to_str(thing: Any) -> str:
    """Converts any input into the canonical string used by maps and URLs.

    The mapping is fixed: ``None`` -> ``"null"``, booleans -> ``"true"`` /
    ``"false"``, `UNDEFINED` -> ``"undefined"``, lists and tuples -> ``""``,
    numbers -> their natural decimal form, callables -> ``"function"`` and
    every other object -> ``"object"``.
    """
    if isinstance(thing, str):
        return thing
    if thing is None:
        return "null"
    if thing is True:
        return "true"
    if thing is False:
        return "false"
    if thing is UNDEFINED:
        return "undefined"
    if isinstance(thing, (list, tuple)):
        return ""
    if isinstance(thing, int):
        return str(thing)
    if isinstance(thing, float):
        return _float_to_str(thing)
    if callable(thing):
        return "function"
    return "object"


def _float_to_str(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
        return str(int(value))
    return repr(value)
