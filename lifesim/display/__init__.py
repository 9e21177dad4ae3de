"""Display collaborators that present generations to a user."""

from lifesim.display.terminal import TerminalRenderer

__all__ = ["TerminalRenderer"]
