"""Tests for the shuffled deck."""

import random

from klondike.models.card import create_full_deck
from klondike.models.deck import Deck


class TestDeck:
    """Tests for Deck class."""

    def test_get_cards(self):
        """Test that a new deck holds all 52 cards."""
        deck = Deck()
        cards = deck.cards()
        assert len(cards) == 52
        assert len(deck) == 52
        assert set(cards) == set(create_full_deck())

    def test_shuffle_changes_order(self):
        """Test that shuffling changes the order of the cards."""
        deck = Deck()
        before = deck.cards()
        deck.shuffle()
        assert deck.cards() != before

    def test_shuffle_keeps_cards(self):
        """Test that shuffling neither adds nor loses cards."""
        deck = Deck()
        for _ in range(5):
            deck.shuffle()
        cards = deck.cards()
        assert len(cards) == 52
        assert set(cards) == set(create_full_deck())

    def test_cards_returns_copy(self):
        """Test that callers cannot change the deck through cards()."""
        deck = Deck()
        cards = deck.cards()
        cards.pop()
        assert len(deck.cards()) == 52

    def test_seeded_generator(self):
        """Test that an explicit generator makes shuffles reproducible."""
        deck1 = Deck(random.Random(42))
        deck2 = Deck(random.Random(42))
        deck1.shuffle()
        deck2.shuffle()
        assert deck1.cards() == deck2.cards()
