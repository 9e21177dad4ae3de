import argparse
import logging
import sys
import time
from pathlib import Path

# Ensure local repo package is used even if another "lifesim" is on PYTHONPATH.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from lifesim import (
    Clock,
    LifeSimError,
    SimulationEngine,
    TerminalRenderer,
    create_field,
    list_available_patterns,
    load_pattern_file,
)
from lifesim.utils.config_loader import apply_overrides, load_config

logger = logging.getLogger("run_life")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Animate Conway's Game of Life in the terminal.")
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--pattern",
        choices=list_available_patterns(),
        help="Built-in seed pattern",
    )
    source.add_argument(
        "--file",
        help="Path to a text pattern ('X' alive, anything else dead)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a YAML config (defaults to the bundled one)",
    )
    parser.add_argument(
        "--generations",
        type=int,
        default=None,
        help="Number of generations to run (0 runs until interrupted)",
    )
    parser.add_argument(
        "--frame-rate",
        type=float,
        default=None,
        help="Frames per second",
    )
    parser.add_argument(
        "--padding",
        type=int,
        default=None,
        help="Dead margin drawn around the live region",
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Do not clear the screen between frames",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    return parser


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()
    logging.basicConfig(level=args.log_level, format="%(levelname)s: %(message)s")

    try:
        cfg = load_config(args.config)
    except LifeSimError as exc:
        logger.error("%s", exc)
        return 1

    try:
        cfg = apply_overrides(
            cfg,
            generations=args.generations,
            frame_rate=args.frame_rate,
            padding=args.padding,
        )
    except LifeSimError as exc:
        parser.error(str(exc))

    try:
        if args.file:
            field = load_pattern_file(args.file)
        elif args.pattern:
            field = create_field(args.pattern)
        elif cfg.pattern.path is not None:
            field = load_pattern_file(cfg.pattern.path)
        else:
            field = create_field(cfg.pattern.name)
    except LifeSimError as exc:
        logger.error("%s", exc)
        return 1

    engine = SimulationEngine(field, Clock(frame_rate=cfg.run.frame_rate))
    renderer = TerminalRenderer(
        engine,
        padding=cfg.display.padding,
        clear_screen=cfg.display.clear_screen and not args.no_clear,
    )

    limit = cfg.run.generations or None
    try:
        renderer.show()
        renderer.attach()
        while limit is None or engine.generation < limit:
            time.sleep(engine.clock.frame_delay)
            engine.step()
    except KeyboardInterrupt:
        logger.info("Interrupted at generation %d", engine.generation)
    except LifeSimError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
