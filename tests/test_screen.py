import io

from conftest import DIAGONAL_WIN
from tictactoe.engine import TurnEngine
from tictactoe.screen import ConsoleScreen, SnapshotScreen


def test_console_screen_prints_status_above_board():
    out = io.StringIO()
    engine = TurnEngine(screen=ConsoleScreen(out))
    engine.play_turn(1, 1)

    text = out.getvalue()
    assert text.index("Player 1's turn") < text.index("Player 2's turn")
    assert "   | X |  " in text


def test_console_screen_announces_game_over():
    out = io.StringIO()
    engine = TurnEngine(screen=ConsoleScreen(out))
    for row, column in DIAGONAL_WIN:
        engine.play_turn(row, column)
    assert out.getvalue().rstrip().endswith("Type 'reset' to play again or 'quit'.")
    assert "Congratulations. Player 1 is the winner!" in out.getvalue()


def test_snapshot_screen_tracks_engine():
    screen = SnapshotScreen()
    engine = TurnEngine(screen=screen)
    assert screen.status == "Player 1's turn"
    assert screen.interactive

    for row, column in DIAGONAL_WIN:
        engine.play_turn(row, column)
    assert screen.board[0] == ["X", "O", "O"]
    assert screen.status == "Congratulations. Player 1 is the winner!"
    assert not screen.interactive

    engine.reset()
    assert screen.interactive
    assert screen.board == [["", "", ""]] * 3
