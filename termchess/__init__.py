"""Terminal chess against a UCI engine: board, moves, engine driver and CLI."""

__version__ = "0.1.0"