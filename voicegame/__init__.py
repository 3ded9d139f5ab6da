"""Voice-agent TicTacToe engine and tools."""

__version__ = "0.1.0"
