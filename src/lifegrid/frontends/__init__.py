"""Frontend interfaces for the Game of Life."""

from .console import ConsoleLife

__all__ = ["ConsoleLife"]
