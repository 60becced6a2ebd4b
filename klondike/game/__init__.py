"""Game logic."""

from .engine import GameEngine
from .renderer import BoardRenderer
from .validator import Destination, Move, MoveKind, MoveValidator, ValidationResult

__all__ = [
    "BoardRenderer",
    "Destination",
    "GameEngine",
    "Move",
    "MoveKind",
    "MoveValidator",
    "ValidationResult",
]
