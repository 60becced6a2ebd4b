"""Tests for move validation."""

import pytest

from klondike.game.validator import Destination, MoveKind, MoveValidator
from klondike.models.card import Card, Suit


@pytest.fixture
def validator():
    return MoveValidator()


class TestMoveValidator:
    """Tests for MoveValidator class."""

    def test_new_game(self, validator):
        """Test that N is a new game move."""
        result = validator.validate("N")
        assert result.is_valid
        assert result.move.kind == MoveKind.NEW_GAME

    def test_turn(self, validator):
        """Test that T is a turn move."""
        result = validator.validate("T")
        assert result.is_valid
        assert result.move.kind == MoveKind.TURN

    def test_commands_are_case_sensitive(self, validator):
        """Test that lower-case commands are not recognised."""
        assert not validator.validate("n").is_valid
        assert not validator.validate("t").is_valid

    def test_column_destination(self, validator):
        """Test a move to a numbered column."""
        result = validator.validate("c2 7")
        assert result.is_valid
        assert result.move.kind == MoveKind.TRANSFER
        assert result.move.card == Card.from_text("c2")
        assert result.move.destination == Destination(column=7)
        assert not result.move.destination.is_discard

    def test_discard_destination(self, validator):
        """Test a move to a discard pile."""
        result = validator.validate("HQ c")
        assert result.is_valid
        assert result.move.destination == Destination(pile=Suit.CLUB)
        assert result.move.destination.is_discard

    def test_separator_not_checked(self, validator):
        """Test that any character may separate card and destination."""
        assert validator.validate("c2-1").is_valid
        assert validator.validate("c2XD").is_valid

    def test_leading_zero_column(self, validator):
        """Test that a zero-padded column number is accepted."""
        result = validator.validate("c2 03")
        assert result.is_valid
        assert result.move.destination.column == 3

    @pytest.mark.parametrize(
        "move",
        [
            "",
            "F",
            "SomeTooLongString",
            "c2",
            "c2 ",
            "c2 X",
            "X2 c",
            "c1 c",
            "c2 0",
            "c2 8",
            "c2 10",
            "c2 -1",
            "c2 +1",
            "c2 cc",
            "c2 C",
            "c2  1",
        ],
    )
    def test_rejected_moves(self, validator, move):
        """Test that malformed moves are rejected without raising."""
        result = validator.validate(move)
        assert not result.is_valid
        assert result.move is None
        assert result.error_message

    def test_column_limit(self):
        """Test that the column limit comes from the validator."""
        validator = MoveValidator(num_columns=3)
        assert validator.validate("c2 3").is_valid
        assert not validator.validate("c2 4").is_valid
