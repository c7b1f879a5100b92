import pytest

from ttt import config
from tests.helpers import CapturedOutput


@pytest.fixture
def output():
    return CapturedOutput()


@pytest.fixture(autouse=True)
def default_board_size(monkeypatch):
    """Keep tests that change the global board size from leaking."""
    monkeypatch.setattr(config, "BOARD_SIZE", 3)
