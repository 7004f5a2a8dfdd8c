"""Jump61_AI package exports."""

from .Square import Side, Square
from .Board import Board, ConstantBoard
from .Game import Game
from .Player import Player, HumanPlayer
from .AI import AI

# Subpackages for move validation, AI search, and helpers
from . import ai, engine, utils

__all__ = [
    "Side",
    "Square",
    "Board",
    "ConstantBoard",
    "Game",
    "Player",
    "HumanPlayer",
    "AI",
    "ai",
    "engine",
    "utils",
]
