"""
Turn sequencing and win/tie evaluation for a two player game.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .board import BOARD_SIZE, Board, CellOccupiedError


logger = logging.getLogger(__name__)

CELL_COUNT = BOARD_SIZE * BOARD_SIZE
# a player needs three marks, which alternating turns first allow on move 5
MIN_MOVES_FOR_WIN = 2 * BOARD_SIZE - 1


@dataclass(frozen=True)
class Player:
    name: str
    mark: str


DEFAULT_PLAYERS = (Player("Player 1", "X"), Player("Player 2", "O"))


class GameState(Enum):
    AWAITING_MOVE = "awaiting_move"
    GAME_OVER = "game_over"


class TurnResult(Enum):
    ACCEPTED = "accepted"
    INVALID = "invalid"
    WIN = "win"
    TIE = "tie"
    REFUSED = "refused"


Line = Tuple[Tuple[int, int], ...]


def _build_win_conditions():
    span = range(BOARD_SIZE)
    rows = [tuple((h, w) for w in span) for h in span]
    cols = [tuple((h, w) for h in span) for w in span]
    diags = [
        tuple((i, i) for i in span),
        tuple((BOARD_SIZE - 1 - i, i) for i in span),
    ]
    return tuple(rows + cols + diags)


WIN_CONDITIONS = _build_win_conditions()


def line_type(line: Line) -> str:
    if len({h for h, _ in line}) == 1:
        return "row"
    if len({w for _, w in line}) == 1:
        return "col"
    return "diag"


class TurnEngine:
    """
    Owns the board, both players and the turn order.

    Every change is reported to `screen`, any object with `draw_board(board)`,
    `update_status(text)` and `stop_game()`.
    """

    def __init__(self, players=DEFAULT_PLAYERS, board=None, screen=None):
        players = tuple(players)
        if len(players) != 2:
            raise ValueError("exactly two players are required")
        if any(not player.mark for player in players):
            raise ValueError("player marks must not be empty")
        if players[0].mark == players[1].mark:
            raise ValueError("player marks must be different")

        self.players = players
        self.board = board if board is not None else Board()
        self.screen = screen
        self.reset()

    @property
    def player_one(self) -> Player:
        return self.players[0]

    @property
    def player_two(self) -> Player:
        return self.players[1]

    @property
    def is_game_over(self) -> bool:
        return self.state is GameState.GAME_OVER

    @property
    def is_tie(self) -> bool:
        return self.is_game_over and self.winner is None

    def reset(self):
        self.board.reset()
        self.move_count = 0
        self.active_player = self.player_one
        self.state = GameState.AWAITING_MOVE
        self.winner: Optional[Player] = None
        self.status = ""
        logger.debug("new game: %s (%s) vs %s (%s)",
                     self.player_one.name, self.player_one.mark,
                     self.player_two.name, self.player_two.mark)
        self._start_turn()

    def play_turn(self, row: int, column: int) -> TurnResult:
        if self.is_game_over:
            logger.debug("move (%s, %s) refused, game is over", row, column)
            return TurnResult.REFUSED

        player = self.active_player
        try:
            self.board.set(row, column, player.mark)
        except CellOccupiedError as exc:
            logger.info("%s tried occupied square (%s, %s) held by %s",
                        player.name, exc.row, exc.column, exc.mark)
            self._start_turn(str(exc))
            return TurnResult.INVALID

        self.move_count += 1
        logger.debug("%s played (%s, %s), move %d", player.name, row, column, self.move_count)

        if self.move_count >= MIN_MOVES_FOR_WIN and self.check_win():
            self.winner = player
            self._finish(f"Congratulations. {player.name} is the winner!")
            return TurnResult.WIN
        if self.move_count >= CELL_COUNT:
            self._finish("The game is tied!")
            return TurnResult.TIE

        self._switch_player()
        self._start_turn()
        return TurnResult.ACCEPTED

    def check_win(self) -> bool:
        return self.winning_line() is not None

    def winning_line(self) -> Optional[Line]:
        """Return the first win condition fully held by the active player's mark."""
        mark = self.active_player.mark
        for line in WIN_CONDITIONS:
            if all(self.board.get(h, w) == mark for h, w in line):
                return line
        return None

    def turn_status(self) -> str:
        return f"{self.active_player.name}'s turn"

    def _switch_player(self):
        self.active_player = self.player_two if self.active_player == self.player_one else self.player_one

    def _start_turn(self, notice=""):
        self.status = self.turn_status() if notice == "" else f"{notice} {self.turn_status()}"
        self._draw()

    def _finish(self, status):
        self.state = GameState.GAME_OVER
        self.status = status
        logger.info(status)
        self._draw()
        if self.screen is not None:
            self.screen.stop_game()

    def _draw(self):
        if self.screen is not None:
            self.screen.draw_board(self.board)
            self.screen.update_status(self.status)
