"""Jump61_AI package exports."""

from .Board import Board
from .Jump61game import Jump61game
from .Player import Player, HumanPlayer, AIPlayer
from .engine.errors import IllegalMove, NothingToUndo, PreconditionViolated
from .engine.sides import Cell, Side

# Subpackages for the rule engine, AI search, and helpers
from . import ai, engine, utils

__all__ = [
    "Board",
    "Jump61game",
    "Player",
    "HumanPlayer",
    "AIPlayer",
    "Cell",
    "Side",
    "IllegalMove",
    "NothingToUndo",
    "PreconditionViolated",
    "ai",
    "engine",
    "utils",
]
