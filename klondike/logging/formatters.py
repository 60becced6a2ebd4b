"""Formatters for game log output."""

from typing import Any

from klondike.models.card import Card, Suit
from klondike.models.game_state import GameState, TableauCard


def format_card(card: Card | None) -> str:
    """Format a single card to string.

    Args:
        card: Card to format.

    Returns:
        Card encoding (e.g., "c3"), or empty string for no card.
    """
    if card is None:
        return ""
    return card.encode()


def format_column(column: list[TableauCard]) -> str:
    """Format a tableau column to comma-separated string.

    Args:
        column: Column, buried end first.

    Returns:
        Comma-separated card strings with "**" for face-down cards
        (e.g., "**,**,HQ"). Empty string if the column is empty.
    """
    return ",".join(str(tc) for tc in column)


def format_discards(piles: dict[Suit, Card]) -> dict[str, str]:
    """Format discard piles to dict keyed by suit character."""
    return {suit.value: format_card(piles.get(suit)) for suit in Suit}


def format_board(state: GameState) -> dict[str, Any]:
    """Format the visible board to a JSON-serialisable snapshot.

    Args:
        state: Game state to snapshot.

    Returns:
        Dict with the stack top, stack size, columns and discard piles.
    """
    return {
        "stack_top": format_card(state.top_card()),
        "stack_size": len(state.draw_stack),
        "columns": [format_column(c) for c in state.columns],
        "discards": format_discards(state.discard_piles),
    }
