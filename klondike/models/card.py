"""Card model and the fixed 52-card universe."""

from enum import Enum

from pydantic import BaseModel

from klondike.exceptions import InvalidCardError, InvalidRankError, InvalidSuitError


class Suit(str, Enum):
    """Card suit.

    The encoding is case-sensitive: diamonds and hearts are upper case,
    clubs and spades lower case. Member order is the display order of the
    discard piles.
    """

    DIAMOND = "D"
    HEART = "H"
    CLUB = "c"
    SPADE = "s"

    @classmethod
    def from_char(cls, char: str) -> "Suit":
        """Parse a single suit character.

        Raises:
            InvalidSuitError: If the character is not a recognised suit.
        """
        try:
            return cls(char)
        except ValueError:
            raise InvalidSuitError(f"Invalid suit {char!r}") from None


class Rank(str, Enum):
    """Card rank, in deck order (Ace low)."""

    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "T"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"

    @classmethod
    def from_char(cls, char: str) -> "Rank":
        """Parse a single rank character.

        Raises:
            InvalidRankError: If the character is not a recognised rank.
        """
        try:
            return cls(char)
        except ValueError:
            raise InvalidRankError(f"Invalid rank {char!r}") from None


SUIT_CHARS = "".join(s.value for s in Suit)
RANK_CHARS = "".join(r.value for r in Rank)


class Card(BaseModel, frozen=True):
    """Single card value.

    Equality and hashing depend on suit and rank only; whether a card is
    face up is tracked by the zone holding it.
    """

    suit: Suit
    rank: Rank

    @classmethod
    def from_text(cls, text: str) -> "Card":
        """Parse the two-character encoding, e.g. ``"c3"`` or ``"HQ"``.

        Raises:
            InvalidCardError: If the text is not exactly two characters.
            InvalidSuitError: If the first character is not a suit.
            InvalidRankError: If the second character is not a rank.
        """
        if len(text) != 2:
            raise InvalidCardError(f"Card text must be 2 characters, got {text!r}")
        return cls(suit=Suit.from_char(text[0]), rank=Rank.from_char(text[1]))

    def encode(self) -> str:
        return f"{self.suit.value}{self.rank.value}"

    def __str__(self) -> str:
        return self.encode()

    def __repr__(self) -> str:
        return f"Card({self.encode()})"


def create_full_deck() -> list[Card]:
    """Create the 52 cards in suit-major order (D, H, c, s x A..K)."""
    return [Card(suit=suit, rank=rank) for suit in Suit for rank in Rank]
