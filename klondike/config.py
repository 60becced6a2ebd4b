"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel

from klondike.logging import GameLogConfig


class GameConfig(BaseModel):
    """Game configuration."""

    max_moves: int = 0  # 0 = unlimited


class DisplayConfig(BaseModel):
    """Console display configuration."""

    show_help: bool = True
    show_rejections: bool = True


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"


class Config(BaseModel):
    """Root configuration."""

    game: GameConfig = GameConfig()
    display: DisplayConfig = DisplayConfig()
    logging: LoggingConfig = LoggingConfig()
    game_log: GameLogConfig = GameLogConfig()


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()
