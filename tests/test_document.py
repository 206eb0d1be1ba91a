import pytest

from forumkit.decoding.document import PairsDocument, json_array_documents, json_object_document
from forumkit.decoding.errors import InvalidKey, InvalidValue, MalformedDocument
from forumkit.decoding.wire_value import Newtype, Some, WireObject
from forumkit.models.snowflake import Snowflake


def test_keys_are_returned_in_source_order():
    document = json_object_document('{"b": 1, "a": 2, "b": 3}')
    keys = []

    while (key := document.next_key()) is not None:
        keys.append(key)
        document.skip_value()

    assert keys == ["b", "a", "b"]


def test_raw_value_keeps_wire_shape():
    document = PairsDocument([("emoji_id", Some(Newtype("Id", "1")))])

    assert document.next_key() == "emoji_id"
    assert document.next_raw_value() == Some(Newtype("Id", "1"))
    assert document.next_key() is None


def test_nested_json_objects_become_wire_objects():
    document = json_object_document('{"inner": {"x": 1}}')

    assert document.next_key() == "inner"
    assert document.next_raw_value() == WireObject((("x", 1),))


def test_typed_value_unwraps_and_validates():
    document = PairsDocument([("id", Newtype("Id", "42"))])

    document.next_key()

    assert document.next_value(Snowflake) == 42


def test_typed_value_error_names_current_key():
    document = PairsDocument([("id", "not-a-number")])
    document.next_key()

    with pytest.raises(InvalidValue) as excinfo:
        document.next_value(Snowflake)

    assert excinfo.value.field == "id"


def test_invalid_key_leaves_value_pending():
    document = PairsDocument([(None, "skipped"), ("name", "kept")])

    with pytest.raises(InvalidKey):
        document.next_key()

    document.skip_value()

    assert document.next_key() == "name"
    assert document.next_value(str) == "kept"


def test_next_key_requires_consumed_value():
    document = PairsDocument([("a", 1), ("b", 2)])
    document.next_key()

    with pytest.raises(RuntimeError):
        document.next_key()


def test_value_requires_key():
    document = PairsDocument([("a", 1)])

    with pytest.raises(RuntimeError):
        document.skip_value()


def test_from_mapping_preserves_order():
    document = PairsDocument.from_mapping({"z": 1, "y": 2})

    assert document.next_key() == "z"
    document.skip_value()
    assert document.next_key() == "y"


def test_json_array_documents():
    documents = json_array_documents('[{"a": 1}, {}]')

    assert len(documents) == 2
    assert documents[1].next_key() is None


def test_json_errors():
    with pytest.raises(MalformedDocument):
        json_object_document("{not json}")

    with pytest.raises(MalformedDocument):
        json_array_documents('{"a": 1}')
