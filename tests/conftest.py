from types import SimpleNamespace

import pytest


@pytest.fixture()
def array():
    return {"foo": "bar", "bis": "ter"}


@pytest.fixture()
def obj():
    return SimpleNamespace(foo="bar", bis="ter")


@pytest.fixture()
def array_multi():
    return [
        {"foo": "bar", "bis": "ter"},
        {"foo": "bar", "bis": "ter"},
        {"bar": "foo", "bis": "ter"},
    ]


@pytest.fixture()
def object_multi():
    """A record keyed "0".."2", each entry itself a record."""
    return SimpleNamespace(
        **{
            "0": SimpleNamespace(foo="bar", bis="ter"),
            "1": SimpleNamespace(foo="bar", bis="ter"),
            "2": SimpleNamespace(bar="foo", bis="ter"),
        }
    )


@pytest.fixture()
def records():
    return [
        SimpleNamespace(id=123, name="foo", group="primary", value=123456),
        SimpleNamespace(id=456, name="bar", group="primary", value=1468),
        SimpleNamespace(id=499, name="baz", group="secondary", value=2365),
        SimpleNamespace(id=789, name="ter", group="primary", value=2468),
    ]
