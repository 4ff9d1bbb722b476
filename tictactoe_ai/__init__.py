"""Tic-tac-toe against a computer opponent at easy, medium and hard levels."""

__version__ = "1.0.0"
__all__ = ["board", "ai", "game"]