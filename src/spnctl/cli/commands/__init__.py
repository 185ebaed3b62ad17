"""CLI command handlers."""

from .show import cmd_show

__all__ = ["cmd_show"]
