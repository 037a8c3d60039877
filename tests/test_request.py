import pytest

from jrpctypes.errors import JsonRpcError, SerializationError
from jrpctypes.ident import Id, IdKind
from jrpctypes.params import Params
from jrpctypes.request import Request


@pytest.mark.parametrize(
    "text, method, params, ident",
    [
        (
            '{"jsonrpc": "2.0", "method": "subtract", "params": [42, 23], "id": 1}',
            "subtract",
            [42, 23],
            1,
        ),
        (
            '{"jsonrpc": "2.0", "method": "subtract", "params": [23, 42], "id": 2}',
            "subtract",
            [23, 42],
            2,
        ),
        (
            '{"jsonrpc": "2.0", "method": "subtract", '
            '"params": {"subtrahend": 23, "minuend": 42}, "id": 3}',
            "subtract",
            {"subtrahend": 23, "minuend": 42},
            3,
        ),
        (
            '{"jsonrpc": "2.0", "method": "subtract", '
            '"params": {"minuend": 42, "subtrahend": 23}, "id": 4}',
            "subtract",
            {"minuend": 42, "subtrahend": 23},
            4,
        ),
        ('{"jsonrpc": "2.0", "method": "foobar", "id": "1"}', "foobar", None, "1"),
    ],
)
def test_deserialize_spec_requests(text, method, params, ident):
    req = Request.from_json(text)
    assert req.jsonrpc == "2.0"
    assert req.method == method
    if params is None:
        assert req.params is None
    else:
        assert req.params.value == params
    assert req.id == Id.coerce(ident)


@pytest.mark.parametrize(
    "text",
    [
        '{"jsonrpc": "2.0", "method": "foobar, "params": "bar", "baz]',
        '{"jsonrpc": "2.0", "method": 1, "params": "bar"}',
    ],
)
def test_deserialize_spec_invalid(text):
    with pytest.raises(SerializationError):
        Request.from_json(text)


@pytest.mark.parametrize(
    "text",
    [
        '{"jsonrpc": "2.0", "method": "subtract", "params": [42, 23]}',
        '{"jsonrpc": "2.0", "method": "subtract", "params": [42, 23], "id":{}}',
        '{"jsonrpc": "2.0", "method": "subtract", "params": [42, 23], "id":[]}',
        '{"jsonrpc": "2.0", "method": "subtract", "params": 1, "id":2}',
        '{"jsonrpc": "2.0", "method": "subtract", "params": "hello", "id":2}',
        '{"jsonrpc": "2.1", "method": "subtract", "id":2}',
        '{"jsonrpc": 2.0, "method": "subtract", "id":2}',
    ],
)
def test_negative_serde(text):
    with pytest.raises(SerializationError):
        Request.from_json(text)


def test_missing_method_and_version():
    with pytest.raises(SerializationError, match="method"):
        Request.from_json('{"jsonrpc": "2.0", "id": 1}')
    with pytest.raises(SerializationError, match="jsonrpc"):
        Request.from_json('{"method": "m", "id": 1}')


def test_non_object_is_rejected():
    with pytest.raises(SerializationError):
        Request.from_json("[1, 2]")


def test_null_params_read_as_absent():
    req = Request.from_json('{"jsonrpc": "2.0", "method": "m", "params": null, "id": 5}')
    assert req.params is None


def test_builder_round_trip():
    req = Request.builder().id(10).method("test-method").params([10, 0]).build()
    text = req.to_json()
    assert text == '{"jsonrpc":"2.0","method":"test-method","params":[10,0],"id":10}'
    again = Request.from_json(text)
    assert again == req


def test_builder_params_str():
    req = Request.builder().id(10).method("subtract").params_str("[5,2]").build()
    assert req.params == Params([5, 2])
    assert req.id.kind is IdKind.NUMBER


def test_builder_without_params_writes_null():
    req = Request.builder().method("ping").id("abc").build()
    assert req.to_dict() == {"jsonrpc": "2.0", "method": "ping", "params": None, "id": "abc"}


def test_builder_rejects_scalar_params():
    with pytest.raises(SerializationError):
        Request.builder().params(3)
    with pytest.raises(SerializationError):
        Request.builder().params_str('"hello"')


def test_builder_requires_method_and_id():
    with pytest.raises(JsonRpcError):
        Request.builder().id(1).build()
    with pytest.raises(JsonRpcError):
        Request.builder().method("m").build()


def test_builder_sets_method_and_id_once():
    with pytest.raises(JsonRpcError):
        Request.builder().method("a").method("b")
    with pytest.raises(JsonRpcError):
        Request.builder().id(1).id(2)


def test_id_from_request():
    req = Request.builder().method("m").id("req-7").build()
    assert Id.coerce(req).as_str() == "req-7"