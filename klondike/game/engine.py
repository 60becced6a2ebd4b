"""Game engine holding one game of Klondike solitaire."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from klondike.exceptions import InvalidGameStateError
from klondike.models.card import Card, Suit
from klondike.models.deck import CardSource
from klondike.models.game_state import DrawCursor, GameState, TableauCard

from .validator import Destination, MoveKind, MoveValidator

if TYPE_CHECKING:
    from klondike.logging import GameLogger

logger = logging.getLogger(__name__)

NUM_COLUMNS = 7
NUM_CARDS_TO_TURN = 3
DECK_SIZE = 52

FACE_DOWN = "**"


class GameEngine:
    """Authoritative state of one game, driven by textual moves."""

    def __init__(
        self,
        source: CardSource,
        game_logger: GameLogger | None = None,
    ):
        """Initialize game engine and deal the first game.

        Args:
            source: Card source to deal from (shuffled on every deal)
            game_logger: GameLogger instance for detailed logging

        Raises:
            InvalidGameStateError: If the source does not supply 52 distinct cards
        """
        self.source = source
        self.game_logger = game_logger
        self.validator = MoveValidator(NUM_COLUMNS)
        self.state = GameState()
        self.moves_processed = 0

        self.initialize()

    @property
    def draw_stack(self) -> list[Card]:
        return self.state.draw_stack

    @property
    def cursor(self) -> DrawCursor:
        return self.state.cursor

    @property
    def columns(self) -> list[list[TableauCard]]:
        return self.state.columns

    @property
    def discard_piles(self) -> dict[Suit, Card]:
        return self.state.discard_piles

    def top_card(self) -> Card | None:
        """Get the revealed top of the draw stack, or None."""
        return self.state.top_card()

    def column_view(self, column: int) -> list[str]:
        """Get the visible text of a column, buried end first.

        Args:
            column: Column number (1-indexed)

        Returns:
            Card encodings, with "**" for face-down cards
        """
        return [
            tc.card.encode() if tc.face_up else FACE_DOWN
            for tc in self.state.columns[column - 1]
        ]

    def discard_card(self, pile: Suit) -> Card | None:
        """Get the latest card placed on a discard pile, or None."""
        return self.state.discard_piles.get(pile)

    def all_cards(self) -> list[Card]:
        """Get every card in play, including covered discards."""
        return self.state.all_cards()

    def initialize(self) -> None:
        """Shuffle and deal a new game, discarding any previous one.

        Raises:
            InvalidGameStateError: If the source does not supply 52 distinct cards
        """
        self.source.shuffle()
        cards = list(self.source.cards())

        if len(cards) != DECK_SIZE:
            raise InvalidGameStateError(
                f"Can't start game with {len(cards)} cards, need {DECK_SIZE}"
            )
        if len(set(cards)) != DECK_SIZE:
            raise InvalidGameStateError("Can't start game with duplicate cards")

        self.state.reset_for_new_game()

        # Deal from the end of the shuffled cards; last card of each column face up
        for i in range(NUM_COLUMNS):
            column = []
            for j in range(i + 1):
                column.append(TableauCard(card=cards.pop(), face_up=(i == j)))
            self.state.columns.append(column)

        self.state.draw_stack = cards

        logger.info(
            f"Game {self.state.game_number} dealt, {len(cards)} cards in draw stack"
        )

        if self.game_logger:
            self.game_logger.log_game_start(self.state.game_number, self.state)

    def process_move(self, move_text: str) -> bool:
        """Validate a move and apply it.

        Args:
            move_text: Move text ("N", "T" or "<card> <destination>")

        Returns:
            True if the move was allowed and executed, False otherwise

        Raises:
            InvalidGameStateError: If a new game cannot be dealt
        """
        validation = self.validator.validate(move_text)
        if not validation.is_valid:
            logger.debug(f"Rejected move {move_text!r}: {validation.error_message}")
            self._record_move(move_text, accepted=False)
            return False

        move = validation.move
        if move.kind == MoveKind.NEW_GAME:
            self.moves_processed += 1
            self.initialize()
            return True

        if move.kind == MoveKind.TURN:
            self.turn_stack()
            accepted = True
        else:
            accepted = self.move_card(move.card, move.destination)

        if accepted:
            logger.debug(f"Move {move_text!r} accepted: {self.state}")
        else:
            logger.debug(f"Move {move_text!r} not possible in current position")
        self._record_move(move_text, accepted=accepted)
        return accepted

    def turn_stack(self) -> None:
        """Reveal the next batch of the draw stack, recycling at the end."""
        size = len(self.state.draw_stack)
        if size == 0:
            return

        last_index = size - 1
        cursor = self.state.cursor

        if cursor.is_exhausted:
            self.state.cursor = DrawCursor.revealing(
                min(NUM_CARDS_TO_TURN - 1, last_index)
            )
        elif cursor.index == last_index:
            self.state.cursor = DrawCursor.exhausted()
        else:
            self.state.cursor = DrawCursor.revealing(
                min(cursor.index + NUM_CARDS_TO_TURN, last_index)
            )

    def move_card(self, card: Card, destination: Destination) -> bool:
        """Move a card (and anything above it) to a column or discard pile.

        The revealed draw stack card is checked first, then the face-up cards
        of columns 1..7 in order.

        Args:
            card: Card to move
            destination: Target column or discard pile

        Returns:
            True if the board changed
        """
        top = self.state.top_card()
        if top is not None and top == card:
            self._take_top_card()
            if destination.is_discard:
                self.state.discard(destination.pile, top)
            else:
                self.state.columns[destination.column - 1].append(
                    TableauCard(card=top, face_up=True)
                )
            return True

        for column in self.state.columns:
            for position, tableau_card in enumerate(column):
                if tableau_card.face_up and tableau_card.card == card:
                    return self._move_from_column(column, position, destination)

        return False

    def _take_top_card(self) -> None:
        """Remove the revealed card and reveal the one before it."""
        index = self.state.cursor.index
        del self.state.draw_stack[index]

        if index - 1 < 0:
            self.state.cursor = DrawCursor.exhausted()
            logger.debug("No earlier card to reveal, turning the draw stack")
            self.turn_stack()
        else:
            self.state.cursor = DrawCursor.revealing(index - 1)

    def _move_from_column(
        self,
        column: list[TableauCard],
        position: int,
        destination: Destination,
    ) -> bool:
        """Move the card at position, and every card above it, out of column."""
        if destination.is_discard:
            # Discard piles take single cards only
            if position != len(column) - 1:
                return False
            moved = column.pop()
            self.state.discard(destination.pile, moved.card)
        else:
            run = column[position:]
            del column[position:]
            self.state.columns[destination.column - 1].extend(run)

        if column:
            column[-1].face_up = True
        return True

    def _record_move(self, move_text: str, accepted: bool) -> None:
        """Count a processed move and write it to the game log."""
        self.moves_processed += 1
        self.state.move_count += 1

        if self.game_logger:
            self.game_logger.log_move(
                self.state.game_number,
                self.state.move_count,
                move_text,
                accepted,
                self.state,
            )
