"""
Path addressing: get / set / remove / has.
"""
from __future__ import annotations

from collections import namedtuple
from dataclasses import dataclass
from types import MappingProxyType, SimpleNamespace

import pytest

from underscore.errors import PathError
from underscore.methods.collection import get, has, remove
from underscore.methods.collection import set as set_path

Point = namedtuple("Point", "x y")


@dataclass(frozen=True)
class Frozen:
    name: str
    age: int = 0


class Person:
    def __init__(self, name):
        self.name = name

    def greet(self):
        return f"hi {self.name}"


# ---------------------------------------------------------------- get


def test_get_nested_value():
    assert get({"foo": {"bar": "ter"}}, "foo.bar") == "ter"


def test_get_missing_returns_default():
    data = {"foo": {"bar": "ter"}}
    assert get(data, "foo.nope") is None
    assert get(data, "foo.nope", "default") == "default"
    assert get(data, "foo.bar.deeper", "default") == "default"


def test_get_callable_default_is_called_lazily():
    assert get({}, "x", lambda: "lazy") == "lazy"


def test_get_prefers_literal_key_with_delimiter():
    assert get({"foo.bar": 1, "foo": {"bar": 2}}, "foo.bar") == 1


def test_get_none_path_returns_collection():
    data = {"a": 1}
    assert get(data, None) is data


def test_get_list_index():
    assert get({"users": [{"name": "ada"}, {"name": "bob"}]}, "users.1.name") == "bob"
    assert get([1, 2], "5", "nope") == "nope"


def test_get_missing_index_does_not_pluck_from_elements():
    assert get([[1, 2], [3, 4, 5]], "2", "d") == "d"
    assert get({"rows": [[1], [2, 3]]}, "rows.1.1") == 3
    assert get({"rows": [[1], [2, 3]]}, "rows.5", "d") == "d"


def test_get_integer_and_string_keys_match():
    assert get({1: "one"}, "1") == "one"
    assert get({"1": "one"}, 1) == "one"


def test_get_through_records():
    data = SimpleNamespace(child=SimpleNamespace(sort=5))
    assert get(data, "child.sort") == 5


def test_get_never_returns_methods():
    assert get(Person("ada"), "name") == "ada"
    assert get(Person("ada"), "greet") is None


def test_get_namedtuple_by_field_and_position():
    assert get(Point(1, 2), "y") == 2
    assert get(Point(1, 2), "0") == 1


def test_get_wildcard_collects_across_children():
    data = {"a": {"x": 1}, "b": {"x": 2}, "c": {}}
    assert get(data, "*.x") == [1, 2]


def test_get_wildcard_over_list():
    data = {"users": [{"tags": ["a"]}, {"tags": ["b", "c"]}]}
    assert get(data, "users.*.tags.0") == ["a", "b"]


def test_get_plucks_field_across_sequence():
    assert get([{"id": 1}, {"id": 2}, {"other": 3}], "id") == [1, 2]
    assert get([{"other": 1}], "id", "none") == "none"


def test_get_custom_delimiter():
    assert get({"a": {"b": 1}}, "a/b", delimiter="/") == 1


def test_get_on_scalar_returns_default():
    assert get("text", "x", "d") == "d"
    assert get(None, "x.y", "d") == "d"


# ---------------------------------------------------------------- set


def test_set_creates_intermediate_mappings():
    result = set_path({"foo": {"foo": "bar"}}, "foo.bar.bis", "ter")
    assert result == {"foo": {"foo": "bar", "bar": {"bis": "ter"}}}


def test_set_mutates_in_place_and_returns_root():
    data = {"a": {}}
    assert set_path(data, "a.b", 1) is data
    assert data == {"a": {"b": 1}}


def test_set_on_record():
    data = SimpleNamespace(foo={"foo": "bar"}, bar="bis")
    result = set_path(data, "foo.bar.bis", "ter")

    assert result.foo["bar"]["bis"] == "ter"
    assert hasattr(result, "bar")


def test_set_replaces_scalar_intermediate():
    assert set_path({"a": 1}, "a.b", 2) == {"a": {"b": 2}}


def test_set_on_none_root_builds_mapping():
    assert set_path(None, "a.b", 1) == {"a": {"b": 1}}


@pytest.mark.parametrize("path", ["", None])
def test_set_empty_path_is_noop(path):
    data = {"a": 1}
    assert set_path(data, path, 5) is data
    assert data == {"a": 1}


def test_set_keeps_existing_integer_keys():
    assert set_path({1: "one"}, "1", "uno") == {1: "uno"}


def test_set_list_index_and_append():
    assert set_path([1, 2], "0", 9) == [9, 2]
    assert set_path([1, 2], "2", 3) == [1, 2, 3]


@pytest.mark.parametrize("path", ["5", "name"])
def test_set_unaddressable_list_slot_raises(path):
    with pytest.raises(PathError):
        set_path([1], path, 0)


def test_set_rebuilds_tuples():
    result = set_path((1, 2), "0", 9)
    assert result == (9, 2)
    assert isinstance(result, tuple)

    data = {"t": (1, 2)}
    set_path(data, "t.0", 5)
    assert data["t"] == (5, 2)


def test_set_inside_tuple_keeps_tuple_when_child_is_mutable():
    inner = {"x": 1}
    tup = (1, inner)
    data = {"t": tup}

    set_path(data, "t.1.x", 2)
    assert data["t"] is tup
    assert inner == {"x": 2}


def test_set_namedtuple_field():
    assert set_path(Point(1, 2), "y", 5) == Point(1, 5)


def test_set_frozen_dataclass_returns_new_instance():
    frozen = Frozen("foo")
    result = set_path(frozen, "age", 3)

    assert result == Frozen("foo", 3)
    assert frozen.age == 0


def test_set_unknown_field_on_frozen_dataclass_returns_namespace():
    result = set_path(Frozen("foo"), "extra", 1)
    assert result == SimpleNamespace(name="foo", age=0, extra=1)


def test_set_read_only_mapping_returns_copy():
    proxy = MappingProxyType({"a": 1})
    assert set_path(proxy, "b", 2) == {"a": 1, "b": 2}
    assert dict(proxy) == {"a": 1}


@pytest.mark.parametrize("collection,path", [
    ({}, "a.b.c"),
    ({"a": [1, 2]}, "a.1"),
    (SimpleNamespace(), "x.y"),
    ((1, 2), "1"),
    ({"a": (1, {"b": 2})}, "a.1.b"),
    (Point(1, 2), "x"),
    ({"a.b": 1}, "a.b"),
    ({"a.b": 1, "a": {"b": 2}}, "a.b"),
])
def test_get_after_set_returns_value(collection, path):
    assert get(set_path(collection, path, "value"), path) == "value"


# ---------------------------------------------------------------- remove


def test_remove_nested_key():
    assert remove({"foo": {"bar": 1, "bis": 2}}, "foo.bar") == {"foo": {"bis": 2}}


def test_remove_from_records(object_multi):
    result = remove(object_multi, "0.foo")

    assert result is object_multi
    assert not hasattr(getattr(result, "0"), "foo")
    assert getattr(result, "0").bis == "ter"
    assert getattr(result, "1").foo == "bar"


@pytest.mark.parametrize("path", ["b", "b.c", "a.x.y"])
def test_remove_missing_path_is_noop(path):
    data = {"a": 1}
    assert remove(data, path) is data
    assert data == {"a": 1}


def test_remove_several_paths():
    assert remove({"a": 1, "b": 2, "c": 3}, ["a", "c"]) == {"b": 2}


def test_remove_sequence_items():
    assert remove([1, 2, 3], "1") == [1, 3]
    assert remove((1, 2, 3), "1") == (1, 3)


def test_remove_from_frozen_dataclass_returns_namespace():
    assert remove(Frozen("foo", 1), "age") == SimpleNamespace(name="foo")


@pytest.mark.parametrize("collection,path", [
    ({"a": {"b": 1}}, "a.b"),
    ({"a.b": 1}, "a.b"),
    ({"items": [{"x": 1}, {"x": 2, "y": 3}]}, "items.x"),
    ([{"id": 1}, {"id": 2}], "id"),
    (SimpleNamespace(a=SimpleNamespace(b=1)), "a.b"),
])
def test_remove_then_get_returns_default(collection, path):
    data = remove(collection, path)
    assert get(data, path, "gone") == "gone"


def test_set_and_remove_use_literal_key_like_get():
    data = {"a.b": 1}

    assert set_path(data, "a.b", 2) == {"a.b": 2}
    assert remove(data, "a.b") == {}


def test_remove_plucks_field_across_sequence():
    data = {"items": [{"x": 1}, {"x": 2, "y": 3}, "text"]}
    assert remove(data, "items.x") == {"items": [{}, {"y": 3}, "text"]}

    rows = ({"x": 1}, {"x": 2})
    assert remove(rows, "x") == ({}, {})


def test_set_unhashable_key_raises():
    with pytest.raises(PathError):
        set_path({}, ["a"], 1)


# ---------------------------------------------------------------- has


def test_has_sees_stored_none():
    assert has({"a": {"b": None}}, "a.b")
    assert not has({}, "a")
