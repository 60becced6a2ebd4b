"""Text rendering of the board."""

from __future__ import annotations

from typing import TYPE_CHECKING

from klondike.models.card import Suit

from .engine import NUM_COLUMNS

if TYPE_CHECKING:
    from .engine import GameEngine

HEADER_PREFIX = "ColumnNames   S[T]ack        "
FIRST_ROW_BUFFER = " " * 19
FIRST_ROW_DRAW_STACK_BUFFER = " " * 8
LATER_ROW_BUFFER = " " * 29
SPACE_BETWEEN_COLUMNS = "  "
BLANK_CARD = "  "


class BoardRenderer:
    """Formats a game as fixed-width lines of text.

    Layout::

        ColumnNames   S[T]ack        [1] [2] ... [7] [D] [H] [c] [s]
        ----------------------------------------------------------------
                           D3        sK  **  **  ...  DA
                                         sJ  **  ...

    The first card row carries the top of the draw stack and the discard
    piles; later rows carry the deeper cards of each column.
    """

    def render(self, engine: GameEngine) -> list[str]:
        """Render the board.

        Args:
            engine: Game to render

        Returns:
            Lines of text, without trailing newlines
        """
        header = self.header()
        separator = "-" * len(header)

        columns = [engine.column_view(i) for i in range(1, NUM_COLUMNS + 1)]

        top = engine.top_card()
        top_text = top.encode() if top else BLANK_CARD

        first_row = FIRST_ROW_BUFFER + top_text + FIRST_ROW_DRAW_STACK_BUFFER
        first_row += self._slice(columns, 0)
        for suit in Suit:
            card = engine.discard_card(suit)
            first_row += " " + (card.encode() if card else BLANK_CARD)

        lines = [header, separator, first_row]
        longest = max((len(c) for c in columns), default=0)
        for i in range(1, longest):
            lines.append(LATER_ROW_BUFFER + self._slice(columns, i))
        return lines

    def header(self) -> str:
        header = HEADER_PREFIX
        for i in range(1, NUM_COLUMNS + 1):
            header += f"[{i}] "
        for suit in Suit:
            header += f"[{suit.value}] "
        return header

    def _slice(self, columns: list[list[str]], index: int) -> str:
        """Get the index-th card of every column, padded to fixed width."""
        result = ""
        for column in columns:
            result += column[index] if len(column) > index else BLANK_CARD
            result += SPACE_BETWEEN_COLUMNS
        return result
