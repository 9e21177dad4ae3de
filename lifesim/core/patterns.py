"""Seed pattern registry and pattern file loading.

Built-in patterns are registered when this module is imported. Additional
patterns can be registered by name and turned into fresh fields on demand.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from lifesim.core.exceptions import PatternError
from lifesim.core.field import Field

logger = logging.getLogger(__name__)


class PatternRegistry:
    """Registry of named seed patterns, stored as text.

    THREAD SAFETY: Not thread-safe. Registration should happen during module
    initialization before any threads are spawned.
    """

    def __init__(self):
        self._patterns: dict[str, str] = {}

    def register(self, name: str, text: str) -> None:
        """Register a pattern's textual form under ``name``."""
        if name in self._patterns:
            raise PatternError(name, f"Pattern '{name}' already registered")
        self._patterns[name] = text

    def get(self, name: str) -> str:
        """Get a pattern's text by name."""
        if name not in self._patterns:
            raise PatternError(
                name,
                f"Unknown pattern '{name}'. Available: {list(self._patterns.keys())}",
            )
        return self._patterns[name]

    def list_patterns(self) -> list[str]:
        """List all registered pattern names."""
        return list(self._patterns.keys())

    def create(self, name: str) -> Field:
        """Build a new field from a registered pattern."""
        return Field.from_text(self.get(name))


# Global registry
_REGISTRY = PatternRegistry()


def register_pattern(name: str, text: str) -> None:
    """Register a pattern globally."""
    _REGISTRY.register(name, text)


def get_pattern(name: str) -> str:
    """Get a pattern's text by name."""
    return _REGISTRY.get(name)


def create_field(name: str) -> Field:
    """Create a field from a registered pattern."""
    return _REGISTRY.create(name)


def list_available_patterns() -> list[str]:
    """List all registered patterns."""
    return _REGISTRY.list_patterns()


def verify_patterns_registered() -> None:
    """Verify that at least one pattern is registered.

    Raises:
        PatternError: If no patterns are registered
    """
    if not list_available_patterns():
        raise PatternError(
            "<any>",
            "No patterns registered! Ensure lifesim.core.patterns is imported.",
        )


def load_pattern_file(path: Union[str, Path]) -> Field:
    """Read a text pattern from ``path`` and parse it.

    Raises:
        PatternError: if the file cannot be read or is not valid UTF-8
    """
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise PatternError(str(p), f"Failed to read pattern file: {exc}") from exc

    field = Field.from_text(text)
    logger.info("Loaded pattern %s with %d live cells", p, len(field))
    return field


_BUILTIN_PATTERNS = {
    "blinker": "...\nXXX\n...",
    "block": "XX\nXX",
    "beacon": "XX..\nXX..\n..XX\n..XX",
    "toad": ".XXX\nXXX.",
    "glider": ".X.\n..X\nXXX",
    "lwss": ".X..X\nX....\nX...X\nXXXX.",
    "r-pentomino": ".XX\nXX.\n.X.",
}

for _name, _text in _BUILTIN_PATTERNS.items():
    register_pattern(_name, _text)
