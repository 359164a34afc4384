import pytest

from ember.registry import SingletonRegistry
from ember.reader.parser import read_string


def lines(*items):
    """A line source that hands out `items` one at a time, then None."""
    it = iter(items)
    return lambda: next(it, None)


@pytest.fixture
def registry():
    return SingletonRegistry()


@pytest.fixture
def rd(registry):
    def _read(source, line_source=None):
        return read_string(source, registry, line_source)
    return _read
