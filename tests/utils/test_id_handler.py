"""
Tests for ObjectId conversion helpers
"""

import pytest
from bson import ObjectId

from opsgraph.core.exceptions import InvalidIdentifier, NotFound
from opsgraph.utils.id_handler import IdHandler


def test_ensure_object_id_accepts_string_and_object_id():
    oid = ObjectId()
    assert IdHandler.ensure_object_id(str(oid)) == oid
    assert IdHandler.ensure_object_id(oid) is oid


@pytest.mark.parametrize("value", [None, "", "not-an-id", "123", 42])
def test_ensure_object_id_returns_none_for_bad_input(value):
    assert IdHandler.ensure_object_id(value) is None


def test_parse_object_id_raises_invalid_identifier():
    with pytest.raises(InvalidIdentifier) as exc_info:
        IdHandler.parse_object_id("S2")

    assert exc_info.value.code == "INVALID_IDENTIFIER"
    assert exc_info.value.extensions == {"code": "INVALID_IDENTIFIER", "id": "S2"}


def test_format_object_ids_converts_nested_values():
    oid = ObjectId()
    doc = {"_id": oid, "nested": {"ref": oid}, "refs": [{"ref": oid}], "name": "x"}

    formatted = IdHandler.format_object_ids(doc)

    assert formatted == {
        "_id": str(oid),
        "nested": {"ref": str(oid)},
        "refs": [{"ref": str(oid)}],
        "name": "x",
    }


def test_raise_if_not_found():
    assert IdHandler.raise_if_not_found({"_id": "1"}, "Rank", "1") == {"_id": "1"}
    with pytest.raises(NotFound, match="Rank with ID 'abc' not found"):
        IdHandler.raise_if_not_found(None, "Rank", "abc")
