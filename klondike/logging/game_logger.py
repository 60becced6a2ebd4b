"""Game logger for detailed game replay."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, TextIO

from pydantic import BaseModel

from klondike.models.game_state import GameState

from .formatters import format_board


class GameLogConfig(BaseModel):
    """Configuration for game logging."""

    enabled: bool = False
    output_path: str = "game_log.jsonl"


class GameLogger:
    """Logger for detailed game events in JSONL format.

    Each line in the output file is a JSON object representing one event.
    This allows step-by-step replay of the game.
    """

    def __init__(self, config: GameLogConfig | None = None):
        """Initialize game logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or GameLogConfig()
        self._file: TextIO | None = None

    def __enter__(self) -> "GameLogger":
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        """Write an event to the log file.

        Args:
            event: Event dictionary to write as JSON.
        """
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def log_session_start(self) -> None:
        """Log session start."""
        self._write({
            "type": "session_start",
            "timestamp": datetime.now().isoformat(),
        })

    def log_game_start(self, game_num: int, state: GameState) -> None:
        """Log a fresh deal.

        Args:
            game_num: Game number.
            state: Game state right after dealing.
        """
        self._write({
            "type": "game_start",
            "game": game_num,
            "board": format_board(state),
        })

    def log_move(
        self,
        game_num: int,
        move_num: int,
        move: str,
        accepted: bool,
        state: GameState,
    ) -> None:
        """Log a single move.

        Args:
            game_num: Game number.
            move_num: Move number within the game.
            move: Move text as entered.
            accepted: Whether the move was executed.
            state: Game state after the move.
        """
        self._write({
            "type": "move",
            "game": game_num,
            "move": move_num,
            "text": move,
            "accepted": accepted,
            "board": format_board(state),
        })

    def log_session_end(self, total_games: int, total_moves: int) -> None:
        """Log session end.

        Args:
            total_games: Number of games dealt during the session.
            total_moves: Number of moves processed during the session.
        """
        self._write({
            "type": "session_end",
            "total_games": total_games,
            "total_moves": total_moves,
        })
