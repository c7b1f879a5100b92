"""Two-player N×N tic-tac-toe played in a text terminal."""

__version__ = "0.1.0"

from ttt.encode import Cell, Mark, Outcome
from ttt.board import Board
from ttt.players import HumanCLI, MoveSource, parse_move
from ttt.game import Game

__all__ = ["Board", "Cell", "Game", "HumanCLI", "Mark", "MoveSource", "Outcome", "parse_move"]
