"""
Two player tic-tac-toe, playable in the browser or in a terminal.
"""

from .board import Board, CellOccupiedError
from .engine import GameState, Player, TurnEngine, TurnResult

__version__ = "1.0.0"
