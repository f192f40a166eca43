"""A terminal shark board game and small arithmetic, text and record helpers."""

__version__ = "0.1.0"
__all__ = ["basics", "board", "game", "records"]