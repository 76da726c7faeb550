"""
Screens the turn engine reports to.
"""

import sys


class Screen:
    """Does nothing; subclasses render what they need."""

    def draw_board(self, board):
        pass

    def update_status(self, status):
        pass

    def stop_game(self):
        pass


class ConsoleScreen(Screen):
    def __init__(self, out=None):
        self.out = out if out is not None else sys.stdout
        self._board_text = ""

    def draw_board(self, board):
        self._board_text = str(board)

    def update_status(self, status):
        # status goes above the board, so both are written together
        print(status, file=self.out)
        print(self._board_text, file=self.out)
        print(file=self.out)

    def stop_game(self):
        print("Game over. Type 'reset' to play again or 'quit'.", file=self.out)


class SnapshotScreen(Screen):
    """Keeps the last rendered state for the web page."""

    def __init__(self):
        self.board = [["" for _ in range(3)] for _ in range(3)]
        self.status = ""
        self.interactive = True
        self.redraws = 0

    def draw_board(self, board):
        self.board = board.rows()
        self.interactive = True
        self.redraws += 1

    def update_status(self, status):
        self.status = status

    def stop_game(self):
        self.interactive = False
