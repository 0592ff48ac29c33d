"""A small example service: subtract, sum and get_data methods."""

from __future__ import annotations

from typing import Any, Callable, Iterable

from .errors import JSONRPC_VERSION, Error, ErrorCode
from .request import Request
from .response import Response

Handler = Callable[[Request], Response]


class _BadParams(Exception):
    """Raised inside a handler when the parameters cannot be used."""


def _error(request: Request, code: ErrorCode, message: str) -> Response:
    return Response(id=request.id, error=Error(code, message))


def _as_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise _BadParams(value)
    return value


def _as_ints(values: Iterable[Any]) -> list[int]:
    return [_as_int(value) for value in values]


def _subtract_positional(request: Request) -> Response:
    values = request.params.array
    if len(values) != 2:
        raise _BadParams(values)
    minuend, subtrahend = _as_ints(values)
    return Response(id=request.id, result=minuend - subtrahend)


def _subtract_named(request: Request) -> Response:
    values = request.params.map
    if len(values) != 2 or "minuend" not in values or "subtrahend" not in values:
        raise _BadParams(values)
    minuend = _as_int(values["minuend"])
    subtrahend = _as_int(values["subtrahend"])
    return Response(id=request.id, result=minuend - subtrahend)


def _guarded(handler: Handler) -> Handler:
    def run(request: Request) -> Response:
        try:
            return handler(request)
        except _BadParams:
            return _error(request, ErrorCode.INVALID_PARAMS, "Invalid params")

    run.__name__ = handler.__name__
    run.__doc__ = handler.__doc__
    return run


@_guarded
def subtract(request: Request) -> Response:
    """Subtract two integers, given by position or as minuend and subtrahend."""
    if not request.params.array:
        return _subtract_named(request)
    return _subtract_positional(request)


@_guarded
def sum_numbers(request: Request) -> Response:
    """Add up the integers given by position; at least one is needed."""
    values = request.params.array
    if not values:
        raise _BadParams(values)
    return Response(id=request.id, result=sum(_as_ints(values)))


def get_data(request: Request) -> Response:
    """Return a fixed pair of sample values."""
    return Response(id=request.id, result=["hello", 5])


_METHODS: dict[str, Handler] = {
    "subtract": subtract,
    "sum": sum_numbers,
    "get_data": get_data,
}


def dispatch(request: Request) -> Response:
    """Call the method a request names and return its response."""
    if request.jsonrpc_version != JSONRPC_VERSION:
        return _error(request, ErrorCode.INVALID_REQUEST, "Invalid Request")
    handler = _METHODS.get(request.method)
    if handler is None:
        return _error(request, ErrorCode.METHOD_NOT_FOUND, "Method not found")
    return handler(request)