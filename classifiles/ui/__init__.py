"""User interface components."""

from classifiles.ui.console import ConsoleUI

__all__ = ["ConsoleUI"]
