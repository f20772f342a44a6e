import pytest

from grid4.core.engine import Engine
from grid4.core.history import History
from grid4.core.rules import GameConfig
from grid4.core.session import GameSession


@pytest.fixture
def engine():
    """Fresh 3x3 engine."""
    return Engine(3)


@pytest.fixture
def history():
    return History()


@pytest.fixture
def session():
    """Fresh 3x3 session with default player names."""
    return GameSession(GameConfig())
