"""Tower of Hanoi terminal game with move suggestions and a saved match history."""

__version__ = "1.0.0"
__all__ = ["peg", "game", "history", "cli"]