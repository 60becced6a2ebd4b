"""Game models."""

from .card import RANK_CHARS, SUIT_CHARS, Card, Rank, Suit, create_full_deck
from .deck import CardSource, Deck
from .game_state import CursorState, DrawCursor, GameState, TableauCard

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "RANK_CHARS",
    "SUIT_CHARS",
    "create_full_deck",
    "CardSource",
    "Deck",
    "CursorState",
    "DrawCursor",
    "GameState",
    "TableauCard",
]
