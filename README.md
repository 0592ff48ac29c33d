# rpcframe

Message objects for JSON-RPC 2.0: parse incoming requests, one at a time or
in batches, and build responses that follow the specification. The package
uses only the standard library.

## Installation

```
pip install rpcframe
```

## Parsing a request

```python
from rpcframe.request import Request

request = Request.parse('{"jsonrpc": "2.0", "method": "subtract", "params": [42, 23], "id": 1}')
request.method             # "subtract"
request.params.get(0)      # 42
request.id.value           # 1
request.is_notification()  # False
```

`Request.parse` takes a `str` or `bytes` of JSON text; `Request.from_json`
takes an already decoded value. Both raise `rpcframe.errors.JsonRpcError`:

- with code `ErrorCode.PARSE_ERROR` (-32700) when the text is not valid JSON;
- with code `ErrorCode.INVALID_REQUEST` (-32600) when the value is not an
  object, `"jsonrpc"` is not exactly `"2.0"`, `"method"` is not a string, or
  `"params"` is present but is neither an array nor an object.

An `"id"` that is not a string, an integer or null is treated as absent, so
the request becomes a notification. `JsonRpcError.to_error()` gives the
`Error` object to put into a response.

A request can also be built directly and turned back into JSON:

```python
request = Request("sum", params=[1, 2, 4], id="1")
request.to_json()
# {"jsonrpc": "2.0", "method": "sum", "params": [1, 2, 4], "id": "1"}
```

`is_notification()` is true when the request has no identifier (`id` is
null), and `to_json()` then leaves out the `"id"` member.
`is_internal_method()` is true when the method name contains `"rpc."`.

## Identifiers

`rpcframe.identifier.Identifier` wraps a string, an integer or `None`; any
other value raises `ValueError`. Its `type` property is an `IdType`
(`NULL`, `NUMBER` or `STRING`).

## Parameters

`rpcframe.parameter.Parameter` holds the by-position (list) or by-name (dict)
parameters of a request; anything else gives empty parameters of type
`ParamType.NULL`. The `type`, `array` and `map` properties show what was
given.

- `has(key)` tells whether a name (`str`) or a position (`int`) is present.
- `get(key)` returns the value, raising `KeyError` for a missing name and
  `IndexError` for a missing position.
- `get(key, default)` returns `default` when the key is missing.

A key that is neither a `str` nor an `int` raises `TypeError`.

## Building a response

```python
from rpcframe.errors import Error, ErrorCode
from rpcframe.response import Response

response = Response(id=request.id, result=19)
response.to_json()   # {"jsonrpc": "2.0", "result": 19, "id": "1"}

failed = Response(id=request.id)
failed.error = Error(ErrorCode.METHOD_NOT_FOUND, "Method not found")
failed.to_json()
# {"jsonrpc": "2.0", "error": {"code": -32601, "message": "Method not found"}, "id": "1"}
```

A response carries `"error"` when its error code is not `ErrorCode.SUCCESS`
and `"result"` otherwise, never both. Its id is always written, as `null` when
there is none. `Error.to_json()` includes `"data"` only when data was given.

## Batches

`BatchRequest.parse` (or `BatchRequest.from_json`) accepts a JSON array of
requests or a single request object, which makes a batch of one. Each element
becomes a `BatchEntry` holding either the parsed `request` or the `error` it
failed with, so one bad element does not spoil the rest of the batch;
`entry.ok` is true for valid elements. Text that is not JSON raises
`JsonRpcError` with `PARSE_ERROR`; an empty array, or a value that is neither
an array nor an object, raises it with `INVALID_REQUEST`.

```python
from rpcframe.batch import BatchRequest, BatchResponse
from rpcframe.response import Response
from rpcframe.service import dispatch

batch = BatchRequest.parse(text)
replies = BatchResponse()
for entry in batch:
    if not entry.ok:
        replies.add(Response(error=entry.error))
    elif not entry.request.is_notification():
        replies.add(dispatch(entry.request))
if len(replies):
    payload = replies.to_json()
```

Notifications get no reply, and a batch made up only of notifications gets no
reply at all. `BatchResponse.to_json()` returns the responses as a list in the
order they were added.

## Example service

`rpcframe.service.dispatch(request)` serves three methods and answers
anything else with "Method not found" (-32601):

- `subtract`: two integers by position, or by name as `minuend` and
  `subtrahend`;
- `sum`: adds up one or more integers given by position;
- `get_data`: returns `["hello", 5]`.

Parameters of the wrong number or type give "Invalid params" (-32602), and a
request whose version is not `"2.0"` gives "Invalid Request" (-32600). Use it
as a model for your own handlers.

## What it does not do

rpcframe only builds and reads messages. It has no transport, no server or
client, and no command-line tool: reading the text off a socket or HTTP body
and sending the reply back is left to the application.