#!/usr/bin/env python3
"""
Memory profiling for the sparse Life world.

Evolves a seeded world over many generations while tracking process RSS
and the number of materialized buffer entries, to confirm memory follows
live activity rather than the area the pattern has swept.
"""

import psutil
import os
import time
from typing import Dict
import json
import sys
import gc

# Add repository root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.core.cell import CellState
from src.core.world import World
from src.patterns.library import get_pattern


def measure_memory_mb() -> float:
    """Get current process memory usage in MB."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss / 1024 / 1024


def create_test_world(gliders: int = 20, spacing: int = 12) -> World:
    """Seed a world with a diagonal fleet of gliders in alternating colours."""
    world = World()
    glider = get_pattern("glider")

    for i in range(gliders):
        state = CellState.COLOR_A if i % 2 == 0 else CellState.COLOR_B
        world.load_pattern(glider, i * spacing, -i * spacing, state)

    return world


def profile_memory_usage(generations: int = 500, gliders: int = 20, sample_every: int = 25) -> Dict:
    """Profile memory usage over a run of generations."""
    print(f"🔍 Profiling {generations} generations with {gliders} gliders...")
    print("=" * 60)

    gc.collect()
    time.sleep(0.1)  # Stabilize
    baseline_memory = measure_memory_mb()
    print(f"Baseline Memory:              {baseline_memory:6.1f} MB")

    world = create_test_world(gliders=gliders)
    setup_memory = measure_memory_mb()
    print(f"Memory After Setup:           {setup_memory:6.1f} MB")

    samples = []
    start_time = time.time()

    for generation in range(1, generations + 1):
        live_count = world.step()

        if generation % sample_every == 0 or generation == generations:
            memory = measure_memory_mb()
            entries = len(world)
            samples.append({
                'generation': generation,
                'memory_mb': memory,
                'live_count': live_count,
                'entries': entries,
                'entries_per_live_cell': entries / live_count if live_count else 0.0,
            })
            print(f"Gen {generation:5d}: live={live_count:5d} entries={entries:6d} | "
                  f"Memory: {memory:6.1f}MB | bounds={world.bounds()}")

    elapsed = time.time() - start_time
    gc.collect()
    final_memory = measure_memory_mb()

    # Entries should stay proportional to live cells as the fleet travels
    ratios = [s['entries_per_live_cell'] for s in samples if s['live_count']]
    max_ratio = max(ratios) if ratios else 0.0
    frontier_bounded = max_ratio <= 9.0

    results = {
        'timestamp': time.strftime('%Y-%m-%d %H:%M:%S'),
        'generations': generations,
        'gliders': gliders,
        'memory_baseline_mb': baseline_memory,
        'memory_setup_mb': setup_memory,
        'memory_final_mb': final_memory,
        'peak_memory_mb': max(s['memory_mb'] for s in samples) if samples else final_memory,
        'seconds_per_generation': elapsed / generations if generations else 0.0,
        'max_entries_per_live_cell': max_ratio,
        'frontier_bounded': frontier_bounded,
        'samples': samples,
    }

    print("\n" + "=" * 60)
    print("📊 MEMORY PROFILING SUMMARY")
    print("=" * 60)
    print(f"Peak Memory Usage:           {results['peak_memory_mb']:6.1f} MB")
    print(f"Time per Generation:         {results['seconds_per_generation'] * 1000:6.2f} ms")
    print(f"Max Entries per Live Cell:   {max_ratio:6.2f}")
    print(f"Frontier Bounded:            {'✅ YES' if frontier_bounded else '❌ NO'}")

    return results


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser(description="Memory profiling for the sparse Life world")
    parser.add_argument("--generations", type=int, default=500, help="Number of generations")
    parser.add_argument("--gliders", type=int, default=20, help="Number of gliders to seed")
    parser.add_argument("--output", type=str, default="logs/memory_profile.log", help="Output log file")
    args = parser.parse_args()

    os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)

    results = profile_memory_usage(generations=args.generations, gliders=args.gliders)

    with open(args.output, 'w') as f:
        json.dump(results, f, indent=2, default=str)

    print(f"\n📄 Detailed results saved to: {args.output}")
