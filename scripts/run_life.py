#!/usr/bin/env python3
"""
Headless Two-Colour Life Runner

Loads a configuration (bundled name or file path), advances it a number of
generations and reports population metrics. Optionally prints text frames
and writes the metrics to a JSON file.
"""

import sys
import os
import json
import logging
from pathlib import Path

# Add repository root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.core.cell import CellState
from src.core.configuration import list_configurations, load_configuration_file, resolve_configuration_path
from src.core.settings import LifeSettings
from src.ui.render import render_ascii

logger = logging.getLogger(__name__)


def resolve_source(source: str) -> Path:
    """Treat source as a file path if it exists, else as a bundled configuration name."""
    path = Path(source)
    if path.is_file():
        return path
    return resolve_configuration_path(source)


def run_life(source: str, steps: int = 100, settings: LifeSettings = None, print_every: int = 0) -> dict:
    """Run a configuration and return metrics."""
    settings = settings or LifeSettings()
    path = resolve_source(source)

    world = load_configuration_file(path, settings.dead_char, settings.alive_char)
    logger.info(f"Configuration: {path}")
    logger.info(f"Evolution steps: {steps}")

    initial_live_count = world.live_count()
    initial_bounds = world.bounds()
    live_counts = [initial_live_count]

    if print_every:
        print(render_ascii(world), end="\n\n")

    for step in range(steps):
        live_count = world.step()
        live_counts.append(live_count)

        if step % 10 == 0 or step == steps - 1:
            logger.info(f"Generation {world.generation}: live={live_count}, entries={len(world)}")

        if print_every and world.generation % print_every == 0:
            print(f"-- generation {world.generation} --")
            print(render_ascii(world), end="\n\n")

        if live_count == 0:
            logger.info(f"Population died out at generation {world.generation}")
            break

    counts = world.count_by_state()
    results = {
        "configuration": str(path),
        "steps_requested": steps,
        "generations": world.generation,
        "initial_live_count": initial_live_count,
        "final_live_count": live_counts[-1],
        "final_color_a": counts[CellState.COLOR_A],
        "final_color_b": counts[CellState.COLOR_B],
        "initial_bounds": initial_bounds,
        "final_bounds": world.bounds(),
        "final_center_of_mass": world.get_center_of_mass(),
        "materialized_entries": len(world),
        "live_count_history": live_counts,
    }

    logger.info("=== FINAL METRICS ===")
    logger.info(f"Generations run: {results['generations']}")
    logger.info(f"Live cells: {initial_live_count} -> {results['final_live_count']}")
    logger.info(f"Final bounds: {results['final_bounds']}")
    return results


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser(description="Run a two-colour Life configuration headlessly")
    parser.add_argument("configuration", nargs="?", default="glider",
                        help=f"Bundled name ({', '.join(list_configurations())}) or file path")
    parser.add_argument("--steps", type=int, default=100, help="Generations to run")
    parser.add_argument("--dead-char", default=".", help="Dead cell marker")
    parser.add_argument("--alive-char", default="*", help="Live cell marker")
    parser.add_argument("--print-every", type=int, default=0, help="Print a frame every N generations")
    parser.add_argument("--results", type=Path, help="Write metrics JSON to this file")
    parser.add_argument("--log-level", default="INFO", help="Logging level")

    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        results = run_life(
            args.configuration,
            steps=args.steps,
            settings=LifeSettings(dead_char=args.dead_char, alive_char=args.alive_char),
            print_every=args.print_every
        )

        if args.results:
            args.results.parent.mkdir(parents=True, exist_ok=True)
            with open(args.results, 'w') as f:
                json.dump(results, f, indent=2)
            logger.info(f"Results saved to: {args.results}")

    except Exception as e:
        logger.error(f"Run failed: {e}")
        sys.exit(1)
