"""Gomoku_Web package exports."""

from .Board import Board, Point, Stone
from .Game import Game
from .Match import Match
from .Player import Player, HumanPlayer, ComputerPlayer
from .ai.heuristic import AIDifficulty
from .engine.errors import CellOccupied, ErrorKind, GameError, GameOver, InvalidTurn, OutOfBounds

# Subpackages for rules, computer opponent, HTTP layer, and helpers
from . import ai, engine, utils, web

__all__ = [
    "Board",
    "Point",
    "Stone",
    "Game",
    "Match",
    "Player",
    "HumanPlayer",
    "ComputerPlayer",
    "AIDifficulty",
    "ErrorKind",
    "GameError",
    "OutOfBounds",
    "CellOccupied",
    "GameOver",
    "InvalidTurn",
    "ai",
    "engine",
    "utils",
    "web",
]
