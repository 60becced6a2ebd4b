"""Shared fixtures: deterministic card sources and engines built on them."""

import pytest

from klondike.game.engine import GameEngine
from klondike.models.card import Card, create_full_deck


class FixedDeck:
    """Card source that never changes the order of its cards."""

    def __init__(self, cards: list[Card] | None = None):
        self.card_list = cards if cards is not None else create_full_deck()
        self.shuffle_count = 0

    def shuffle(self) -> None:
        self.shuffle_count += 1

    def cards(self) -> list[Card]:
        return list(self.card_list)


@pytest.fixture
def fixed_deck():
    return FixedDeck()


@pytest.fixture
def engine(fixed_deck):
    """Engine dealt from the unshuffled deck.

    Columns (buried end first, last card face up):
        1: sK
        2: sQ sJ
        3: sT s9 s8
        4: s7 s6 s5 s4
        5: s3 s2 sA cK cQ
        6: cJ cT c9 c8 c7 c6
        7: c5 c4 c3 c2 cA HK HQ
    Draw stack: DA..DK, HA..HJ
    """
    return GameEngine(fixed_deck)
