"""Structured method parameters, given by position or by name."""

from __future__ import annotations

from enum import Enum
from typing import Any, Union

Key = Union[str, int]

_MISSING = object()


class ParamType(Enum):
    """How the parameters were given."""

    NULL = "null"
    ARRAY = "array"
    MAP = "map"


class Parameter:
    """Parameters of a call: a list (by position), a dict (by name) or none.

    Any value that is neither a list nor a dict gives empty parameters.
    """

    __slots__ = ("_type", "_array", "_map")

    def __init__(self, value: Any = None) -> None:
        self._array: list[Any] = []
        self._map: dict[str, Any] = {}
        if isinstance(value, list):
            self._type = ParamType.ARRAY
            self._array = list(value)
        elif isinstance(value, dict):
            self._type = ParamType.MAP
            self._map = dict(value)
        else:
            self._type = ParamType.NULL

    @classmethod
    def from_json(cls, value: Any) -> Parameter:
        """Build parameters from a decoded JSON value."""
        return cls(value)

    @property
    def type(self) -> ParamType:
        return self._type

    @property
    def array(self) -> list[Any]:
        """Positional values; empty unless given by position."""
        return list(self._array)

    @property
    def map(self) -> dict[str, Any]:
        """Named values; empty unless given by name."""
        return dict(self._map)

    def to_json(self) -> list[Any] | dict[str, Any] | None:
        """Return the parameters as a JSON-compatible value."""
        if self._type is ParamType.ARRAY:
            return list(self._array)
        if self._type is ParamType.MAP:
            return dict(self._map)
        return None

    def has(self, key: Key) -> bool:
        """Tell whether a name (str) or a position (int) is present."""
        if isinstance(key, str):
            return self._type is ParamType.MAP and key in self._map
        _check_index(key)
        return self._type is ParamType.ARRAY and 0 <= key < len(self._array)

    def get(self, key: Key, default: Any = _MISSING) -> Any:
        """Return the value at a name (str) or position (int).

        Without a default, a missing name raises KeyError and a missing
        position raises IndexError.
        """
        if self.has(key):
            return self._map[key] if isinstance(key, str) else self._array[key]
        if default is not _MISSING:
            return default
        if isinstance(key, str):
            raise KeyError(key)
        raise IndexError(f"parameter index out of range: {key}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Parameter):
            return NotImplemented
        return self._type is other._type and self.to_json() == other.to_json()

    def __repr__(self) -> str:
        return f"Parameter({self.to_json()!r})"


def _check_index(key: Any) -> None:
    if not isinstance(key, int) or isinstance(key, bool):
        raise TypeError(f"parameter key must be a str or an int, not {type(key).__name__}")