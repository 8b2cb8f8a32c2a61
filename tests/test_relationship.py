import pytest

from machinerepair.relationship import InitializerIsEmpty, Relationship


def test_empty_relationship_is_falsy_and_raises():
    relation = Relationship()
    assert relation.is_empty() is True
    assert bool(relation) is False
    with pytest.raises(InitializerIsEmpty, match="initializer was not set"):
        relation.get()


def test_value_relationship_returns_equal_object():
    relation = Relationship(value=[1, 2, 3])
    assert relation.get() == [1, 2, 3]
    assert bool(relation) is True


def test_value_relationship_caches_same_object():
    relation = Relationship(value={"name": "Acme"})
    first = relation.get()
    first["name"] = "Changed"
    assert relation.get() == {"name": "Changed"}


def test_initializer_loads_once_when_caching():
    calls = []

    def load(current):
        if current is not None:
            return current
        calls.append(1)
        return "loaded"

    relation = Relationship(load)
    assert relation.is_empty() is False
    assert relation.get() == "loaded"
    assert relation.get() == "loaded"
    assert len(calls) == 1


def test_initializer_receives_cached_value():
    seen = []

    def load(current):
        seen.append(current)
        return (current or 0) + 1

    relation = Relationship(load)
    assert relation.get() == 1
    assert relation.get() == 2
    assert seen == [None, 1]


def test_set_replaces_initializer():
    relation = Relationship()
    relation.set(lambda current: "fresh")
    assert bool(relation) is True
    assert relation.get() == "fresh"