"""Text-driven Klondike solitaire engine."""

__version__ = "0.1.0"
