"""Interface abstractions for lifesim.

- ClockSubscriber: anything notified when a generation is reached
"""

from lifesim.interfaces.clock import ClockSubscriber

__all__ = [
    "ClockSubscriber",
]
