import pytest

from scoreboard.core.registry import MatchRegistry


@pytest.fixture
def registry():
    return MatchRegistry()


@pytest.fixture
def start_many(registry):
    """Start `count` matches between Home N and Away N."""
    def _start(count):
        return [registry.start_match(f"Home {i}", f"Away {i}") for i in range(count)]
    return _start
