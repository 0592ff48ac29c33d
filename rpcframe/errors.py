"""Error objects, error codes and protocol constants for JSON-RPC 2.0."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any

JSONRPC_VERSION = "2.0"

JSONRPC_FIELD = "jsonrpc"
METHOD_FIELD = "method"
PARAMS_FIELD = "params"
ID_FIELD = "id"
RESULT_FIELD = "result"
ERROR_FIELD = "error"
CODE_FIELD = "code"
MESSAGE_FIELD = "message"
DATA_FIELD = "data"


class ErrorCode(IntEnum):
    """Pre-defined JSON-RPC error codes.

    Codes from -32099 to -32000 are reserved for implementation-defined
    server errors.
    """

    SUCCESS = 0
    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603


@dataclass(frozen=True)
class Error:
    """A JSON-RPC error object: a code, a short message and optional data."""

    code: int = ErrorCode.SUCCESS
    message: str = ""
    data: Any = None

    def to_json(self) -> dict[str, Any]:
        """Return the error as a JSON-compatible dict; ``data`` only if set."""
        body: dict[str, Any] = {CODE_FIELD: int(self.code), MESSAGE_FIELD: self.message}
        if self.data is not None:
            body[DATA_FIELD] = self.data
        return body


class JsonRpcError(Exception):
    """Raised when a JSON-RPC message cannot be parsed or is not valid."""

    def __init__(self, code: int, message: str, data: Any = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.data = data

    def to_error(self) -> Error:
        """Return the error object to send back in a response."""
        return Error(self.code, self.message, self.data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"