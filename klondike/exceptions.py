"""Exceptions raised by the card models and the game engine."""


class InvalidCardError(ValueError):
    """Card text could not be parsed."""


class InvalidSuitError(InvalidCardError):
    """Unknown suit character."""


class InvalidRankError(InvalidCardError):
    """Unknown rank character."""


class InvalidGameStateError(RuntimeError):
    """The game cannot be dealt or has reached an impossible state."""
