from __future__ import annotations

from types import SimpleNamespace

import pytest

from underscore.methods.collection import sort


@pytest.fixture()
def people():
    child = SimpleNamespace(sort=5)
    child_alt = SimpleNamespace(sort=12)
    return [
        SimpleNamespace(name="foo", age=18, child=child),
        SimpleNamespace(name="bar", age=21, child=child_alt),
    ]


def test_sort_by_path(people):
    person, person_alt = people

    assert sort(people, "name", "asc") == [person_alt, person]
    assert sort(people, "child.sort", "desc") == [person_alt, person]


def test_sort_by_callable(people):
    person, person_alt = people
    assert sort(people, lambda value: value.child.sort, "desc") == [person_alt, person]


def test_sort_is_stable_both_ways():
    data = [
        {"id": "a", "rank": 2},
        {"id": "b", "rank": 1},
        {"id": "c", "rank": 2},
        {"id": "d", "rank": 1},
    ]

    assert [d["id"] for d in sort(data, "rank")] == ["b", "d", "a", "c"]
    assert [d["id"] for d in sort(data, "rank", "desc")] == ["a", "c", "b", "d"]


def test_sort_without_sorter_and_direction_is_case_insensitive():
    assert sort([3, 1, 2]) == [1, 2, 3]
    assert sort([3, 1, 2], direction="DESC") == [3, 2, 1]


def test_sort_mixed_types_groups_them():
    assert sort(["b", 3, None, "a", 1]) == [None, 1, 3, "a", "b"]


def test_sort_missing_keys_come_first():
    data = [{"v": 2}, {}, {"v": 1}]
    assert sort(data, "v") == [{}, {"v": 1}, {"v": 2}]


def test_sort_mapping_keeps_keys():
    result = sort({"x": 3, "y": 1, "z": 2})

    assert result == {"y": 1, "z": 2, "x": 3}
    assert list(result) == ["y", "z", "x"]


def test_sort_does_not_mutate_input():
    data = [3, 1, 2]
    sort(data)
    assert data == [3, 1, 2]
