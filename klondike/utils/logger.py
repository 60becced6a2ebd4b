"""Logging utilities and console display."""

import logging
import sys

HELP_TEXT = [
    "Moves:",
    "  N          start a new game",
    "  T          turn over the next cards of the draw stack",
    "  <card> <n> move a card (and the cards on top of it) to column n (1-7)",
    "  <card> <s> move a single card to the discard pile for suit s (D, H, c, s)",
    "  Q          quit",
    "Cards are written suit then rank, e.g. c3, HQ, sT, DA.",
]


def setup_logging(level: str = "WARNING") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


class GameDisplay:
    """Display game output to stdout."""

    def __init__(self, show_help: bool = True, show_rejections: bool = True):
        """Initialize display.

        Args:
            show_help: Whether to print the move summary at start-up
            show_rejections: Whether to report moves that were not accepted
        """
        self.show_help = show_help
        self.show_rejections = show_rejections

    def print_separator(self) -> None:
        """Print a separator line."""
        print("=" * 60)

    def print_help(self) -> None:
        """Print the move summary (if show_help is enabled)."""
        if not self.show_help:
            return
        for line in HELP_TEXT:
            print(line)
        print()

    def print_board(self, lines: list[str]) -> None:
        """Print rendered board lines."""
        print()
        for line in lines:
            print(line)
        print()

    def print_rejected(self, move: str) -> None:
        """Print a message for a move that was not accepted."""
        if self.show_rejections:
            print(f"Move not allowed: {move!r}")

    def print_summary(self, games: int, moves: int) -> None:
        """Print session totals."""
        self.print_separator()
        print(f"Games dealt: {games}")
        print(f"Moves processed: {moves}")
        self.print_separator()
