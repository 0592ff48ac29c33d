"""Request objects: a method call or a notification."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from .errors import (
    ID_FIELD,
    JSONRPC_FIELD,
    JSONRPC_VERSION,
    METHOD_FIELD,
    PARAMS_FIELD,
    ErrorCode,
    JsonRpcError,
)
from .identifier import Identifier
from .parameter import Parameter


def _invalid_request() -> JsonRpcError:
    return JsonRpcError(ErrorCode.INVALID_REQUEST, "Invalid Request")


@dataclass(frozen=True)
class Request:
    """A call of ``method`` with ``params``; without an id it is a notification."""

    method: str
    params: Parameter = field(default_factory=Parameter)
    id: Identifier = field(default_factory=Identifier)
    jsonrpc_version: str = JSONRPC_VERSION

    def __post_init__(self) -> None:
        if not isinstance(self.params, Parameter):
            object.__setattr__(self, "params", Parameter(self.params))
        if not isinstance(self.id, Identifier):
            object.__setattr__(self, "id", Identifier(self.id))

    @classmethod
    def parse(cls, text: str | bytes) -> Request:
        """Decode a JSON text into a request.

        Raises JsonRpcError with PARSE_ERROR for text that is not JSON and
        INVALID_REQUEST for JSON that is not a valid request.
        """
        try:
            value = json.loads(text)
        except json.JSONDecodeError:
            raise JsonRpcError(ErrorCode.PARSE_ERROR, "Parse error") from None
        except (TypeError, ValueError):
            raise _invalid_request() from None
        return cls.from_json(value)

    @classmethod
    def from_json(cls, value: Any) -> Request:
        """Build a request from a decoded JSON value.

        Raises JsonRpcError with INVALID_REQUEST if the value is not a valid
        request object. An id of an unsupported type is treated as absent.
        """
        if not isinstance(value, dict):
            raise _invalid_request()

        version = value.get(JSONRPC_FIELD)
        if not isinstance(version, str) or version != JSONRPC_VERSION:
            raise _invalid_request()

        method = value.get(METHOD_FIELD)
        if not isinstance(method, str):
            raise _invalid_request()

        params = Parameter()
        if PARAMS_FIELD in value:
            raw_params = value[PARAMS_FIELD]
            if not isinstance(raw_params, (list, dict)):
                raise _invalid_request()
            params = Parameter.from_json(raw_params)

        identifier = Identifier()
        if ID_FIELD in value:
            try:
                identifier = Identifier.from_json(value[ID_FIELD])
            except ValueError:
                identifier = Identifier()

        return cls(method=method, params=params, id=identifier, jsonrpc_version=version)

    def to_json(self) -> dict[str, Any]:
        """Return the request as a JSON-compatible dict."""
        body: dict[str, Any] = {
            JSONRPC_FIELD: self.jsonrpc_version,
            METHOD_FIELD: self.method,
            PARAMS_FIELD: self.params.to_json(),
        }
        if not self.is_notification():
            body[ID_FIELD] = self.id.to_json()
        return body

    def is_internal_method(self) -> bool:
        """Tell whether the method name holds the reserved ``rpc.`` marker."""
        return "rpc." in self.method

    def is_notification(self) -> bool:
        """Tell whether the request carries no identifier."""
        return self.id.value is None