"""Request identifiers: a string, an integer or null."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

IdValue = Union[int, str, None]


class IdType(Enum):
    """The kind of value an identifier holds."""

    NULL = "null"
    NUMBER = "number"
    STRING = "string"


def _is_valid(value: Any) -> bool:
    if value is None or isinstance(value, str):
        return True
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Identifier:
    """An identifier set by the client; ``None`` means no identifier."""

    value: IdValue = None

    def __post_init__(self) -> None:
        if not _is_valid(self.value):
            raise ValueError(f"identifier must be a string, an integer or null, not {self.value!r}")

    @property
    def type(self) -> IdType:
        if self.value is None:
            return IdType.NULL
        if isinstance(self.value, str):
            return IdType.STRING
        return IdType.NUMBER

    def to_json(self) -> IdValue:
        """Return the identifier as a JSON-compatible value."""
        return self.value

    @classmethod
    def from_json(cls, value: Any) -> Identifier:
        """Build an identifier from a decoded JSON value.

        Raises ValueError for anything but a string, an integer or null.
        """
        return cls(value)