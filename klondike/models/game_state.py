"""Game state models."""

from enum import Enum

from pydantic import BaseModel, Field

from .card import Card, Suit


class CursorState(str, Enum):
    """Whether a draw stack card is currently revealed."""

    REVEALING = "revealing"  # index points at the revealed card
    EXHAUSTED = "exhausted"  # nothing revealed, next turn starts from the front


class DrawCursor(BaseModel, frozen=True):
    """Position of the revealed card in the draw stack."""

    state: CursorState = CursorState.EXHAUSTED
    index: int = -1

    @classmethod
    def exhausted(cls) -> "DrawCursor":
        return cls()

    @classmethod
    def revealing(cls, index: int) -> "DrawCursor":
        return cls(state=CursorState.REVEALING, index=index)

    @property
    def is_exhausted(self) -> bool:
        return self.state == CursorState.EXHAUSTED

    def __str__(self) -> str:
        if self.is_exhausted:
            return "exhausted"
        return f"revealing({self.index})"


class TableauCard(BaseModel):
    """A card lying in a tableau column, with its orientation."""

    card: Card
    face_up: bool = False

    def __str__(self) -> str:
        return self.card.encode() if self.face_up else "**"


class GameState(BaseModel):
    """Overall game state."""

    game_number: int = 0
    move_count: int = 0

    draw_stack: list[Card] = Field(default_factory=list)
    cursor: DrawCursor = Field(default_factory=DrawCursor)

    # Position 0 is the buried end, the last position is exposed
    columns: list[list[TableauCard]] = Field(default_factory=list)

    # Only the latest card per pile is visible; cards it covered are kept
    # in buried_discards so every card stays accounted for.
    discard_piles: dict[Suit, Card] = Field(default_factory=dict)
    buried_discards: list[Card] = Field(default_factory=list)

    def top_card(self) -> Card | None:
        """Get the revealed draw stack card, if any."""
        if self.cursor.is_exhausted or not self.draw_stack:
            return None
        return self.draw_stack[self.cursor.index]

    def discard(self, pile: Suit, card: Card) -> None:
        """Place a card on a discard pile, covering the previous one."""
        previous = self.discard_piles.get(pile)
        if previous is not None:
            self.buried_discards.append(previous)
        self.discard_piles[pile] = card

    def all_cards(self) -> list[Card]:
        """Get every card held by any zone."""
        cards = list(self.draw_stack)
        for column in self.columns:
            cards.extend(tc.card for tc in column)
        cards.extend(self.discard_piles.values())
        cards.extend(self.buried_discards)
        return cards

    def reset_for_new_game(self) -> None:
        """Reset state for a new deal."""
        self.game_number += 1
        self.move_count = 0
        self.draw_stack = []
        self.cursor = DrawCursor.exhausted()
        self.columns = []
        self.discard_piles = {}
        self.buried_discards = []

    def __str__(self) -> str:
        top = self.top_card()
        top_str = top.encode() if top else "--"
        return (
            f"Game {self.game_number}, Move {self.move_count}, "
            f"stack {len(self.draw_stack)} [{top_str}] {self.cursor}"
        )
