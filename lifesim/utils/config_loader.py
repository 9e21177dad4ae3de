"""Helpers for loading and validating lifesim driver configuration."""

from dataclasses import dataclass, field, replace
import logging
from pathlib import Path
from typing import Any, Optional
import threading

import yaml  # type: ignore[import-untyped]

from lifesim.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DisplayConfig:
    padding: int = 2
    clear_screen: bool = True


@dataclass(frozen=True)
class RunConfig:
    generations: Optional[int] = None
    frame_rate: float = 10.0


@dataclass(frozen=True)
class PatternConfig:
    name: Optional[str] = "glider"
    path: Optional[str] = None


@dataclass(frozen=True)
class LifeConfig:
    display: DisplayConfig = field(default_factory=DisplayConfig)
    run: RunConfig = field(default_factory=RunConfig)
    pattern: PatternConfig = field(default_factory=PatternConfig)


# Configuration cache with thread safety
_LOADER_CACHE: dict[str, LifeConfig] = {}
_CACHE_LOCK = threading.RLock()

_DEFAULT_KEY = "default"


def _get_config_path(path: Optional[str] = None) -> str:
    if path is None:
        # Bundled defaults live next to the package: lifesim/config.yaml
        base = Path(__file__).parent.parent / "config.yaml"
        path = str(base)

    return path


def _load_yaml_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Failed to parse config: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigurationError("top level of config must be a mapping")
    return raw


def _section(raw: dict[str, Any], key: str) -> dict[str, Any]:
    value = raw.get(key) or {}
    if not isinstance(value, dict):
        raise ConfigurationError(key, "section must be a mapping")
    return value


def _build_display_cfg(display_raw: dict[str, Any]) -> DisplayConfig:
    clear_screen = display_raw.get("clear_screen", True)
    if not isinstance(clear_screen, bool):
        raise ConfigurationError("display.clear_screen", "must be a boolean")
    return DisplayConfig(
        padding=int(display_raw.get("padding", 2)),
        clear_screen=clear_screen,
    )


def _build_run_cfg(run_raw: dict[str, Any]) -> RunConfig:
    generations = run_raw.get("generations")
    return RunConfig(
        generations=None if generations is None else int(generations),
        frame_rate=float(run_raw.get("frame_rate", 10.0)),
    )


def _build_pattern_cfg(pattern_raw: dict[str, Any]) -> PatternConfig:
    if not pattern_raw:
        return PatternConfig()
    name = pattern_raw.get("name")
    path = pattern_raw.get("path")
    return PatternConfig(
        name=None if name is None else str(name),
        path=None if path is None else str(path),
    )


def _parse_life_cfg_from_dict(raw: dict[str, Any]) -> LifeConfig:
    try:
        cfg = LifeConfig(
            display=_build_display_cfg(_section(raw, "display")),
            run=_build_run_cfg(_section(raw, "run")),
            pattern=_build_pattern_cfg(_section(raw, "pattern")),
        )
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Invalid config schema: {exc}") from exc

    _validate_config(cfg)
    return cfg


def _validate_config(cfg: LifeConfig) -> None:
    """Basic sanity checks to fail fast on bad configs."""
    if cfg.display.padding < 0:
        raise ConfigurationError("display.padding", "must be >= 0")

    if cfg.run.generations is not None and cfg.run.generations < 0:
        raise ConfigurationError("run.generations", "must be >= 0 or null")
    if cfg.run.frame_rate <= 0:
        raise ConfigurationError("run.frame_rate", "must be positive")

    has_name = cfg.pattern.name is not None
    has_path = cfg.pattern.path is not None
    if has_name == has_path:
        raise ConfigurationError(
            "pattern", "exactly one of 'name' or 'path' must be set"
        )


def load_config(path: Optional[str] = None) -> LifeConfig:
    """Load and validate configuration from a YAML file.

    Args:
        path: Optional path to YAML config. If None, load bundled lifesim/config.yaml.

    Returns:
        LifeConfig instance

    Raises:
        ConfigurationError: on parse or validation errors
    """

    p = Path(_get_config_path(path=path))
    raw = _load_yaml_file(p)
    logger.debug("Loaded config from %s", p)

    return _parse_life_cfg_from_dict(raw=raw)


def apply_overrides(
    cfg: LifeConfig,
    generations: Optional[int] = None,
    frame_rate: Optional[float] = None,
    padding: Optional[int] = None,
) -> LifeConfig:
    """Return ``cfg`` with command-line values swapped in, validated again.

    Arguments left as None keep the configured value.

    Raises:
        ConfigurationError: if an override is out of range
    """
    overridden = replace(
        cfg,
        display=replace(
            cfg.display,
            padding=cfg.display.padding if padding is None else padding,
        ),
        run=replace(
            cfg.run,
            generations=cfg.run.generations if generations is None else generations,
            frame_rate=cfg.run.frame_rate if frame_rate is None else frame_rate,
        ),
    )
    _validate_config(overridden)
    return overridden


def get_config() -> LifeConfig:
    """Return the bundled config, loading and caching it if necessary.

    THREAD SAFETY: This function is thread-safe. Multiple threads can
    safely call this concurrently.
    """
    with _CACHE_LOCK:
        if _DEFAULT_KEY not in _LOADER_CACHE:
            _LOADER_CACHE[_DEFAULT_KEY] = load_config()
        return _LOADER_CACHE[_DEFAULT_KEY]


def clear_config_cache() -> None:
    """Clear all cached configurations.

    All subsequent calls to get_config() will reload from disk.
    """
    with _CACHE_LOCK:
        _LOADER_CACHE.clear()
