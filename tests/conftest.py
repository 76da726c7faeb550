"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from tictactoe.app import create_app
from tictactoe.config import Settings
from tictactoe.engine import TurnEngine
from tictactoe.screen import Screen


# (row, col) pairs; player one takes the main diagonal on move 5
DIAGONAL_WIN = [(0, 0), (0, 1), (1, 1), (0, 2), (2, 2)]

# fills every square without completing a line
TIE_GAME = [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (2, 0), (2, 1), (1, 2), (2, 2)]


class RecordingScreen(Screen):
    def __init__(self):
        self.calls = []

    def draw_board(self, board):
        self.calls.append(("draw_board", board.rows()))

    def update_status(self, status):
        self.calls.append(("update_status", status))

    def stop_game(self):
        self.calls.append(("stop_game",))

    @property
    def statuses(self):
        return [call[1] for call in self.calls if call[0] == "update_status"]


@pytest.fixture
def screen() -> RecordingScreen:
    return RecordingScreen()


@pytest.fixture
def engine(screen: RecordingScreen) -> TurnEngine:
    return TurnEngine(screen=screen)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        host="127.0.0.1",
        port=8000,
        debug=False,
        log_level="DEBUG",
        player_one_name="Alice",
        player_two_name="Bob",
    )


@pytest.fixture
def client(test_settings: Settings) -> TestClient:
    app = create_app(test_settings)
    with TestClient(app) as test_client:
        yield test_client
