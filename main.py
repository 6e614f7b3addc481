"""Main entry point for the hole simulation.

This module provides command-line options to run the simulation:
- Window mode (default): pygame front end, drag the hole with the mouse
- Headless mode: no window, the hole wanders randomly, progress is logged
"""

import argparse
import json
import logging
import sys

from holesim.logging_config import configure_logging

logger = logging.getLogger(__name__)


def run_window(seed=None):
    """Run the interactive pygame front end."""
    try:
        import game
    except ImportError as e:
        logger.error("Error: pygame is required for window mode: %s", e)
        logger.error("Install with: pip install -e .")
        sys.exit(1)

    game.main(seed=seed)


def run_headless(max_frames, frame_ms, stats_interval, seed=None, mode_every=None, legacy_shape=False, export_stats=None):
    """Run the simulation without a window.

    Args:
        max_frames: Number of frames to simulate
        frame_ms: Simulated milliseconds per frame
        stats_interval: Log progress every N frames
        seed: Optional random seed for deterministic behavior
        mode_every: Advance the hole mode every N frames (optional)
        legacy_shape: Use the random 5-8 sided polygon in Shape mode
        export_stats: Optional filename to write the final stats as JSON
    """
    from holesim import HoleSimulation, SimulationConfig

    config = SimulationConfig(seed=seed)
    config.hole.legacy_shape = legacy_shape

    simulation = HoleSimulation(config)
    stats = simulation.run_headless(
        max_frames=max_frames,
        frame_ms=frame_ms,
        stats_interval=stats_interval,
        mode_every=mode_every,
    )

    logger.info("Final: score=%d mode=%s scale=%.3f", stats["score"], stats["mode"], stats["hole_scale"])
    if export_stats:
        with open(export_stats, "w", encoding="utf-8") as f:
            json.dump(stats, f, indent=2)
        logger.info("Stats exported to %s", export_stats)
    return stats


def main():
    """Parse command-line arguments and run the appropriate mode."""
    parser = argparse.ArgumentParser(
        description="Hole vs Zombies simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Play in a window (default)
  python main.py

  # Headless run, switching modes every 20 seconds of simulated time
  python main.py --headless --max-frames 10000 --mode-every 1200

  # Reproducible run with exported stats
  python main.py --headless --max-frames 5000 --seed 42 --export-stats results.json
        """,
    )

    parser.add_argument(
        "--headless", action="store_true", help="Run in headless mode (no window, stats only)"
    )
    parser.add_argument(
        "--max-frames",
        type=int,
        default=10000,
        help="Maximum frames to simulate in headless mode (default: 10000)",
    )
    parser.add_argument(
        "--frame-ms",
        type=float,
        default=1000.0 / 60.0,
        help="Simulated milliseconds per headless frame (default: 16.67)",
    )
    parser.add_argument(
        "--stats-interval",
        type=int,
        default=600,
        help="Log stats every N frames in headless mode (default: 600)",
    )
    parser.add_argument(
        "--mode-every",
        type=int,
        default=None,
        help="Advance the hole mode every N frames in headless mode (optional)",
    )
    parser.add_argument(
        "--legacy-shape",
        action="store_true",
        help="Use the random 5-8 sided polygon for Shape mode",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for deterministic behavior (optional)"
    )
    parser.add_argument(
        "--export-stats",
        type=str,
        default=None,
        metavar="FILENAME",
        help="Write final headless stats to a JSON file",
    )
    parser.add_argument("--log-level", type=str, default=None, help="Override HOLESIM_LOG_LEVEL")

    args = parser.parse_args()
    configure_logging(level=args.log_level, extra_loggers=["game"])

    if args.headless:
        logger.info("Starting headless simulation...")
        logger.info(
            "Configuration: %d frames of %.2f ms, stats every %d frames",
            args.max_frames,
            args.frame_ms,
            args.stats_interval,
        )
        run_headless(
            args.max_frames,
            args.frame_ms,
            args.stats_interval,
            seed=args.seed,
            mode_every=args.mode_every,
            legacy_shape=args.legacy_shape,
            export_stats=args.export_stats,
        )
    else:
        run_window(seed=args.seed)


if __name__ == "__main__":
    main()
