import json

import pytest

from rpcframe.errors import ErrorCode, JsonRpcError
from rpcframe.identifier import Identifier, IdType
from rpcframe.parameter import Parameter, ParamType
from rpcframe.request import Request

PARAMS = {"key1": "value1", "key2": 42}


def test_constructor():
    req = Request(jsonrpc_version="2.0", method="example_method", params=Parameter(PARAMS), id=Identifier(1))
    assert req.jsonrpc_version == "2.0"
    assert req.method == "example_method"
    assert req.params.to_json() == PARAMS
    assert req.id.type is IdType.NUMBER
    assert req.id.value == 1


def test_constructor_converts_plain_values():
    req = Request(method="m", params=[1, 2], id="abc")
    assert req.params.type is ParamType.ARRAY
    assert req.id.type is IdType.STRING
    assert req.id.value == "abc"


def test_parse_from_string():
    text = """{
        "jsonrpc": "2.0",
        "method": "example_method",
        "params": {"key1": "value1", "key2": 42},
        "id": 1
    }"""
    req = Request.parse(text)
    assert req.jsonrpc_version == "2.0"
    assert req.method == "example_method"
    assert req.params.to_json() == PARAMS
    assert req.id.type is IdType.NUMBER
    assert req.id.value == 1


def test_from_json():
    value = {"jsonrpc": "2.0", "method": "example_method", "params": PARAMS, "id": 1}
    req = Request.from_json(value)
    assert req.jsonrpc_version == "2.0"
    assert req.method == "example_method"
    assert req.params.to_json() == PARAMS
    assert req.id.type is IdType.NUMBER
    assert req.id.value == 1


def test_to_json_and_from_json_round_trip():
    req = Request(method="example_method", params=Parameter(PARAMS), id=Identifier(1))
    back = Request.from_json(req.to_json())
    assert back.jsonrpc_version == req.jsonrpc_version
    assert back.method == req.method
    assert back.params.to_json() == req.params.to_json()
    assert back.id.value == req.id.value
    assert back == req


def test_round_trip_through_text():
    req = Request(method="sum", params=[1, 2, 4], id="7")
    assert Request.parse(json.dumps(req.to_json())) == req


def test_is_internal_method():
    assert Request(method="rpc.example_method", id=Identifier(1)).is_internal_method() is True
    assert Request(method="example_method", id=Identifier(1)).is_internal_method() is False


def test_is_notification():
    assert Request(method="example_method", id=Identifier(1)).is_notification() is False
    assert Request(method="example_method", id=Identifier()).is_notification() is True


def test_notification_parsed_without_id():
    req = Request.parse('{"jsonrpc": "2.0", "method": "update", "params": [1,2,3,4,5]}')
    assert req.is_notification() is True
    assert req.params.to_json() == [1, 2, 3, 4, 5]


def test_to_json_of_notification_omits_id():
    assert Request(method="foobar").to_json() == {"jsonrpc": "2.0", "method": "foobar", "params": None}


def test_to_json_with_string_id():
    req = Request(method="foobar", params={"a": 1}, id="1")
    assert req.to_json() == {"jsonrpc": "2.0", "method": "foobar", "params": {"a": 1}, "id": "1"}


def test_params_may_be_omitted():
    req = Request.parse('{"jsonrpc": "2.0", "method": "foobar", "id": 3}')
    assert req.params.type is ParamType.NULL
    assert req.params.to_json() is None


def test_invalid_json_is_parse_error():
    text = '{"jsonrpc": "2.0", "method": "foobar", "params": "bar", "baz]'
    with pytest.raises(JsonRpcError) as info:
        Request.parse(text)
    assert info.value.code == ErrorCode.PARSE_ERROR
    assert info.value.message == "Parse error"


@pytest.mark.parametrize(
    "value",
    [
        {"jsonrpc": "2.0", "method": 1, "params": "bar"},
        {"jsonrpc": "2.0", "method": "foobar", "params": "bar"},
        {"jsonrpc": "2.0", "method": "foobar", "params": None},
        {"jsonrpc": "1.0", "method": "foobar"},
        {"jsonrpc": 2.0, "method": "foobar"},
        {"method": "foobar"},
        {"jsonrpc": "2.0"},
        {"foo": "boo"},
        1,
        "text",
        [1, 2],
    ],
)
def test_invalid_request(value):
    with pytest.raises(JsonRpcError) as info:
        Request.from_json(value)
    assert info.value.code == ErrorCode.INVALID_REQUEST
    assert info.value.message == "Invalid Request"


def test_invalid_request_from_text():
    with pytest.raises(JsonRpcError) as info:
        Request.parse('{"jsonrpc": "2.0", "method": 1, "params": "bar"}')
    assert info.value.code == ErrorCode.INVALID_REQUEST


def test_id_of_unsupported_type_is_treated_as_absent():
    req = Request.parse('{"jsonrpc": "2.0", "method": "foobar", "id": 1.5}')
    assert req.id.type is IdType.NULL
    assert req.is_notification() is True


def test_null_id_is_notification():
    req = Request.parse('{"jsonrpc": "2.0", "method": "foobar", "id": null}')
    assert req.is_notification() is True