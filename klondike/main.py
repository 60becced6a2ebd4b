"""Main entry point for the Klondike console game."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable

from klondike.config import load_config
from klondike.exceptions import InvalidGameStateError
from klondike.game.engine import GameEngine
from klondike.game.renderer import BoardRenderer
from klondike.logging import GameLogConfig, GameLogger
from klondike.models.deck import Deck
from klondike.utils.logger import GameDisplay, setup_logging

logger = logging.getLogger(__name__)

PROMPT = "Move> "
QUIT = "Q"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Text-driven Klondike solitaire"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Hide the help banner and rejected-move messages",
    )
    parser.add_argument(
        "--max-moves",
        type=int,
        help="Stop after this many moves (overrides config)",
    )
    parser.add_argument(
        "--game-log",
        type=Path,
        help="Append a JSONL game log to this file",
    )
    return parser.parse_args(argv)


def run_game_loop(
    engine: GameEngine,
    display: GameDisplay,
    renderer: BoardRenderer,
    max_moves: int = 0,
    read_move: Callable[[str], str] | None = None,
) -> int:
    """Read moves until quit, end of input or the move limit.

    Args:
        engine: Game to drive
        display: Console display
        renderer: Board renderer
        max_moves: Maximum moves to process (0 = unlimited)
        read_move: Function returning the next input line (defaults to input)

    Returns:
        Number of moves processed by the engine
    """
    read_move = read_move or input
    display.print_board(renderer.render(engine))

    while max_moves == 0 or engine.moves_processed < max_moves:
        try:
            line = read_move(PROMPT)
        except EOFError:
            break

        move = line.rstrip("\r\n")
        if move == QUIT:
            break

        if not engine.process_move(move):
            display.print_rejected(move)
        display.print_board(renderer.render(engine))

    return engine.moves_processed


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    args = parse_args(argv)

    # Load config
    config = load_config(args.config)

    # Apply command-line overrides
    if args.verbose:
        config.logging.level = "DEBUG"
    if args.quiet:
        config.display.show_help = False
        config.display.show_rejections = False
    if args.max_moves is not None:
        config.game.max_moves = args.max_moves
    if args.game_log:
        config.game_log = GameLogConfig(enabled=True, output_path=str(args.game_log))

    # Setup logging
    setup_logging(config.logging.level)

    display = GameDisplay(
        show_help=config.display.show_help,
        show_rejections=config.display.show_rejections,
    )
    display.print_help()

    try:
        with GameLogger(config.game_log) as game_logger:
            game_logger.log_session_start()
            engine = GameEngine(Deck(), game_logger)

            run_game_loop(
                engine,
                display,
                BoardRenderer(),
                max_moves=config.game.max_moves,
            )

            game_logger.log_session_end(
                engine.state.game_number, engine.moves_processed
            )
            display.print_summary(engine.state.game_number, engine.moves_processed)
        return 0

    except KeyboardInterrupt:
        print("\nGame interrupted by user")
        return 1
    except InvalidGameStateError as e:
        logger.exception(f"Game cannot start: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
