"""Card sources used to deal a game."""

import random
from typing import Protocol

from .card import Card, create_full_deck


class CardSource(Protocol):
    """Anything that can supply a shuffled set of cards for a deal."""

    def shuffle(self) -> None: ...

    def cards(self) -> list[Card]: ...


class Deck:
    """Standard 52-card deck shuffled with the ``random`` module."""

    def __init__(self, rng: random.Random | None = None):
        """Initialize deck.

        Args:
            rng: Random generator to shuffle with (a fresh, system-seeded one if not provided)
        """
        self._rng = rng or random.Random()
        self._cards: list[Card] = create_full_deck()

    def shuffle(self) -> None:
        """Randomise the order of the cards in place."""
        self._rng.shuffle(self._cards)

    def cards(self) -> list[Card]:
        """Get a copy of the cards in their current order."""
        return list(self._cards)

    def __len__(self) -> int:
        return len(self._cards)
