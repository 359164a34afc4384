import pytest

from ember.registry import SingletonRegistry
from ember.types.boolean import Boolean
from ember.types.empty_list import EmptyList


def test_registry_creates_three_distinct_singletons(registry):
    assert isinstance(registry.true, Boolean)
    assert isinstance(registry.false, Boolean)
    assert isinstance(registry.empty_list, EmptyList)
    assert registry.true is not registry.false
    assert registry.true.value is True
    assert registry.false.value is False


def test_accessors_return_the_same_instance_every_time(registry):
    assert registry.true is registry.true
    assert registry.false is registry.false
    assert registry.empty_list is registry.empty_list
    assert registry.boolean(True) is registry.true
    assert registry.boolean(False) is registry.false


def test_registries_do_not_share_instances():
    a, b = SingletonRegistry(), SingletonRegistry()
    assert a.true is not b.true
    assert a.empty_list is not b.empty_list


def test_owns(registry):
    assert registry.owns(registry.true)
    assert registry.owns(registry.empty_list)
    assert not registry.owns(SingletonRegistry().true)


def test_singletons_are_read_only(registry):
    with pytest.raises(AttributeError):
        registry.true = registry.false
