"""Move text parsing and validation."""

from dataclasses import dataclass
from enum import Enum

from klondike.exceptions import InvalidCardError
from klondike.models.card import SUIT_CHARS, Card, Suit

NEW_GAME = "N"
TURN = "T"

# Card occupies positions 0-1, position 2 is a separator, destination follows
CARD_END = 2
DEST_START = 3


class MoveKind(str, Enum):
    """Kind of move requested."""

    NEW_GAME = "new_game"
    TURN = "turn"
    TRANSFER = "transfer"


@dataclass(frozen=True)
class Destination:
    """Where a transferred card goes: a column (1-indexed) or a discard pile."""

    column: int | None = None
    pile: Suit | None = None

    @property
    def is_discard(self) -> bool:
        return self.pile is not None

    def __str__(self) -> str:
        if self.pile is not None:
            return self.pile.value
        return str(self.column)


@dataclass(frozen=True)
class Move:
    """Structured move parsed from text."""

    kind: MoveKind
    card: Card | None = None
    destination: Destination | None = None


@dataclass
class ValidationResult:
    """Result of move validation."""

    is_valid: bool
    move: Move | None = None
    error_message: str = ""


class MoveValidator:
    """Turns raw move text into a Move, or explains why it cannot."""

    def __init__(self, num_columns: int = 7):
        """Initialize validator.

        Args:
            num_columns: Number of tableau columns a destination may name
        """
        self.num_columns = num_columns

    def validate(self, text: str) -> ValidationResult:
        """Validate a move string.

        Never raises for malformed text; problems are reported through the
        returned result.

        Args:
            text: Raw move text, e.g. "N", "T", "c2 7" or "HQ c"

        Returns:
            ValidationResult
        """
        if text == NEW_GAME:
            return ValidationResult(is_valid=True, move=Move(MoveKind.NEW_GAME))
        if text == TURN:
            return ValidationResult(is_valid=True, move=Move(MoveKind.TURN))

        if len(text) <= DEST_START:
            return ValidationResult(
                is_valid=False,
                error_message=f"Move too short: {text!r}",
            )

        try:
            card = Card.from_text(text[:CARD_END])
        except InvalidCardError as e:
            return ValidationResult(is_valid=False, error_message=str(e))

        destination = self.parse_destination(text[DEST_START:])
        if destination is None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid destination {text[DEST_START:]!r}",
            )

        return ValidationResult(
            is_valid=True,
            move=Move(MoveKind.TRANSFER, card=card, destination=destination),
        )

    def parse_destination(self, text: str) -> Destination | None:
        """Parse a destination: one suit character or a column number.

        Returns:
            Destination, or None if the text names neither
        """
        if len(text) == 1 and text in SUIT_CHARS:
            return Destination(pile=Suit(text))

        if not (text.isascii() and text.isdigit()):
            return None

        column = int(text)
        if 1 <= column <= self.num_columns:
            return Destination(column=column)
        return None
