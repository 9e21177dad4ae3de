"""Protocol for components that follow the generation clock."""

from __future__ import annotations

from typing import Protocol


class ClockSubscriber(Protocol):
    """Anything that wants to hear about each new generation."""

    def on_generation(self, generation: int) -> None:
        """Called once after the clock reaches ``generation``."""
        ...
