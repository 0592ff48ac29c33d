"""Response objects: a result or an error for one request."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .errors import (
    ERROR_FIELD,
    ID_FIELD,
    JSONRPC_FIELD,
    JSONRPC_VERSION,
    RESULT_FIELD,
    Error,
    ErrorCode,
)
from .identifier import Identifier


@dataclass
class Response:
    """The reply to a request.

    Carries ``error`` when its code is not SUCCESS, otherwise ``result``.
    """

    id: Identifier = field(default_factory=Identifier)
    result: Any = None
    error: Error = field(default_factory=Error)
    jsonrpc_version: str = JSONRPC_VERSION

    def __post_init__(self) -> None:
        if not isinstance(self.id, Identifier):
            self.id = Identifier(self.id)

    def to_json(self) -> dict[str, Any]:
        """Return the response as a JSON-compatible dict."""
        body: dict[str, Any] = {JSONRPC_FIELD: self.jsonrpc_version}
        if self.error.code != ErrorCode.SUCCESS:
            body[ERROR_FIELD] = self.error.to_json()
        else:
            body[RESULT_FIELD] = self.result
        body[ID_FIELD] = self.id.to_json()
        return body