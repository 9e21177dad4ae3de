"""Generation clock with subscriber notification."""

from __future__ import annotations

from lifesim.interfaces.clock import ClockSubscriber


class Clock:
    """Counts generations and announces each one to its subscribers.

    ``frame_rate`` only paces a display loop; advancing never sleeps.
    """

    def __init__(self, frame_rate: float = 10.0):
        if frame_rate <= 0:
            raise ValueError("Clock frame rate must be positive")
        self._frame_rate = float(frame_rate)
        self._generation = 0
        self._subscribers: list[ClockSubscriber] = []

    @property
    def frame_rate(self) -> float:
        return self._frame_rate

    @property
    def frame_delay(self) -> float:
        """Seconds a display loop should wait between frames."""
        return 1.0 / self._frame_rate

    @property
    def generation(self) -> int:
        return self._generation

    def subscribe(self, subscriber: ClockSubscriber) -> None:
        if subscriber not in self._subscribers:
            self._subscribers.append(subscriber)

    def unsubscribe(self, subscriber: ClockSubscriber) -> None:
        if subscriber in self._subscribers:
            self._subscribers.remove(subscriber)

    def advance(self) -> int:
        """Move to the next generation and notify every subscriber once."""
        self._generation += 1
        for subscriber in list(self._subscribers):
            subscriber.on_generation(self._generation)
        return self._generation

    def reset(self) -> None:
        self._generation = 0
