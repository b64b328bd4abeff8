import json

import pytest

from todo_service.items import Base, Done, Pending
from todo_service.serialization import ItemSchema, ToDoItems


def test_schema_from_mapping():
    schema = ItemSchema.from_mapping({"title": "wash car", "status": "pending"})
    assert schema == ItemSchema("wash car", "pending")


def test_schema_ignores_extra_fields():
    schema = ItemSchema.from_mapping({"title": "a", "status": "done", "extra": 1})
    assert (schema.title, schema.status) == ("a", "done")


@pytest.mark.parametrize("data", [{"title": "a"}, {"status": "done"}, {}])
def test_schema_missing_field(data):
    with pytest.raises(ValueError, match="missing field"):
        ItemSchema.from_mapping(data)


def test_schema_non_string_field():
    with pytest.raises(ValueError, match="must be a string"):
        ItemSchema.from_mapping({"title": 3, "status": "done"})


def test_schema_non_object():
    with pytest.raises(ValueError):
        ItemSchema.from_mapping(["title", "status"])


def test_from_items_splits_and_counts():
    items = [Pending("a"), Done("b"), Pending("c")]
    result = ToDoItems.from_items(items)
    assert result.pending_items == [Base("a", "pending"), Base("c", "pending")]
    assert result.done_items == [Base("b", "done")]
    assert result.pending_item_count == len(result.pending_items)
    assert result.done_item_count == len(result.done_items)


def test_from_items_empty():
    result = ToDoItems.from_items([])
    assert result.to_dict() == {
        "pending_items": [],
        "done_items": [],
        "pending_item_count": 0,
        "done_item_count": 0,
    }


def test_to_dict_shape():
    result = ToDoItems.from_items([Done("b")])
    assert result.to_dict()["done_items"] == [{"title": "b", "status": "done"}]


def test_to_json_round_trip():
    result = ToDoItems.from_items([Pending("a"), Done("b")])
    assert json.loads(result.to_json()) == result.to_dict()


def test_to_json_field_order():
    text = ToDoItems.from_items([]).to_json()
    keys = list(json.loads(text))
    assert keys == ["pending_items", "done_items", "pending_item_count", "done_item_count"]
    assert " " not in text


def test_from_items_rejects_other_objects():
    with pytest.raises(TypeError):
        ToDoItems.from_items([Base("a", "pending")])