import pytest

from todo_service.items import (
    Base,
    Done,
    Pending,
    UnknownItemTypeError,
    to_do_factory,
)
from todo_service.state import read_file


@pytest.fixture
def state_path(tmp_path):
    return tmp_path / "state.json"


def test_factory_builds_pending():
    item = to_do_factory("pending", "wash car")
    assert isinstance(item, Pending)
    assert (item.title, item.status) == ("wash car", "pending")


def test_factory_builds_done():
    item = to_do_factory("done", "wash car")
    assert isinstance(item, Done)
    assert item.status == "done"


def test_factory_rejects_unknown_type():
    with pytest.raises(UnknownItemTypeError, match="The item type is not accepted") as info:
        to_do_factory("archived", "wash car")
    assert info.value.item_type == "archived"


def test_unknown_type_is_value_error():
    with pytest.raises(ValueError):
        to_do_factory("", "x")


def test_items_are_bases_with_fixed_status():
    assert Pending("a") == Pending("a")
    assert Pending("a") != Done("a")
    assert isinstance(Done("a"), Base)


def test_create_adds_and_saves(state_path, capsys):
    state = {}
    Pending("wash car").create(state, state_path)
    assert state == {"wash car": "pending"}
    assert read_file(state_path) == state
    assert "The to do item wash car has been created" in capsys.readouterr().out


def test_delete_removes_and_saves(state_path, capsys):
    state = {"wash car": "pending", "buy milk": "done"}
    Pending("wash car").delete(state, state_path)
    assert state == {"buy milk": "done"}
    assert read_file(state_path) == {"buy milk": "done"}
    assert "The to do item wash car has been deleted" in capsys.readouterr().out


def test_delete_missing_item_leaves_state(state_path):
    state = {"buy milk": "done"}
    Done("wash car").delete(state, state_path)
    assert read_file(state_path) == {"buy milk": "done"}


def test_set_to_done(state_path, capsys):
    state = {"wash car": "pending"}
    Pending("wash car").set_to_done(state, state_path)
    assert read_file(state_path) == {"wash car": "done"}
    assert "wash car is now set to done" in capsys.readouterr().out


def test_set_to_pending(state_path, capsys):
    state = {"wash car": "done"}
    Done("wash car").set_to_pending(state, state_path)
    assert read_file(state_path) == {"wash car": "pending"}
    assert "wash car is now set to pending" in capsys.readouterr().out


def test_get_found_prints_quoted_status(capsys):
    result = Pending("wash car").get({"wash car": "pending"})
    out = capsys.readouterr().out
    assert result == "pending"
    assert "To do Item: wash car" in out
    assert 'Status: "pending"' in out


def test_get_missing(capsys):
    assert Done("wash car").get({}) is None
    assert "To do item wash car was not found" in capsys.readouterr().out