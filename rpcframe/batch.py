"""Batches: several requests sent together and the array of their responses."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Iterator

from .errors import Error, ErrorCode, JsonRpcError
from .request import Request
from .response import Response


@dataclass(frozen=True)
class BatchEntry:
    """One item of a batch: the request, or the error it failed with."""

    request: Request | None = None
    error: Error | None = None

    @property
    def ok(self) -> bool:
        """True when the item was a valid request."""
        return self.error is None


def _entry(value: Any) -> BatchEntry:
    try:
        return BatchEntry(request=Request.from_json(value))
    except JsonRpcError as exc:
        return BatchEntry(error=exc.to_error())


@dataclass
class BatchRequest:
    """The items of a batch, in the order they were sent.

    A single request object makes a batch of one.
    """

    entries: list[BatchEntry] = field(default_factory=list)

    @classmethod
    def parse(cls, text: str | bytes) -> BatchRequest:
        """Decode a JSON text into a batch.

        Raises JsonRpcError with PARSE_ERROR for text that is not JSON.
        """
        try:
            value = json.loads(text)
        except json.JSONDecodeError:
            raise JsonRpcError(ErrorCode.PARSE_ERROR, "Parse error") from None
        except (TypeError, ValueError):
            raise JsonRpcError(ErrorCode.INVALID_REQUEST, "Invalid Request") from None
        return cls.from_json(value)

    @classmethod
    def from_json(cls, value: Any) -> BatchRequest:
        """Build a batch from a decoded JSON value.

        Invalid items become entries with an error. Raises JsonRpcError
        with INVALID_REQUEST for an empty array or a value that is neither
        an array nor an object.
        """
        if isinstance(value, list):
            if not value:
                raise JsonRpcError(ErrorCode.INVALID_REQUEST, "Invalid Request")
            return cls([_entry(item) for item in value])
        if isinstance(value, dict):
            return cls([_entry(value)])
        raise JsonRpcError(ErrorCode.INVALID_REQUEST, "Invalid Request")

    def __iter__(self) -> Iterator[BatchEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


@dataclass
class BatchResponse:
    """The responses to a batch, in the order they were added."""

    responses: list[Response] = field(default_factory=list)

    def add(self, response: Response) -> None:
        """Append a response to the batch."""
        self.responses.append(response)

    def to_json(self) -> list[dict[str, Any]]:
        """Return the responses as a JSON-compatible list."""
        return [response.to_json() for response in self.responses]

    def __iter__(self) -> Iterator[Response]:
        return iter(self.responses)

    def __len__(self) -> int:
        return len(self.responses)