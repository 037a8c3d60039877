import pytest

from jrpctypes.errors import InvalidTypeError, JsonRpcError, SerializationError
from jrpctypes.ident import Id


def test_invalid_type_message_and_detail():
    err = InvalidTypeError("cannot convert Id type Number to String")
    assert str(err) == "invalid type: cannot convert Id type Number to String"
    assert err.detail == "cannot convert Id type Number to String"


def test_serialization_error_message_and_detail():
    err = SerializationError("broken")
    assert str(err) == "serialization error: broken"
    assert err.detail == "broken"


@pytest.mark.parametrize(
    "cls, builtin",
    [(InvalidTypeError, TypeError), (SerializationError, ValueError)],
)
def test_hierarchy(cls, builtin):
    err = cls("z")
    assert isinstance(err, JsonRpcError)
    assert isinstance(err, builtin)
    assert err.detail == "z"


def test_caught_through_base_class():
    with pytest.raises(JsonRpcError) as info:
        Id.from_json_value([1, 2])
    assert isinstance(info.value, SerializationError)
    assert str(info.value).startswith("serialization error: ")


def test_invalid_type_caught_as_type_error():
    with pytest.raises(TypeError) as info:
        Id.coerce(7).as_str()
    assert isinstance(info.value, InvalidTypeError)
    assert info.value.detail == "cannot convert Id type Number to String"