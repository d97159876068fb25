import pytest
from bson import ObjectId

from model_market_api.app.core.object_id import InvalidObjectId, parse_object_id


def test_parses_hex_string():
    oid = ObjectId()

    assert parse_object_id(str(oid)) == oid


def test_returns_object_id_unchanged():
    oid = ObjectId()

    assert parse_object_id(oid) is oid


@pytest.mark.parametrize(
    "value",
    [
        "",
        "abc",
        "zzzzzzzzzzzzzzzzzzzzzzzz",  # right length, not hex
        "6650f1c2a4b5c6d7e8f9012",  # 23 characters
        "twelve bytes",  # accepted by bson, not a path identifier
        None,
        12345,
    ],
)
def test_rejects_malformed_values(value):
    with pytest.raises(InvalidObjectId) as excinfo:
        parse_object_id(value)

    assert excinfo.value.value == value


def test_invalid_object_id_is_a_value_error():
    assert issubclass(InvalidObjectId, ValueError)
