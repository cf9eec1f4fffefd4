"""Frontend interfaces for driving a universe."""

from .cli import CLIUniverse

__all__ = ["CLIUniverse"]
