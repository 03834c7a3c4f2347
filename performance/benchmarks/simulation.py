#!/usr/bin/env python3
"""
Performance benchmarking script for the erosion engine.

Runs the simulation headless (no rendering) to measure pure tick performance.
Profiles tick times, memory usage, and optionally hot code paths.
"""
from __future__ import annotations

import argparse
import cProfile
import io
import pstats
import tracemalloc
from typing import List, Optional, Sequence

from config import DEFAULT_SEED, GRID_HEIGHT, GRID_WIDTH, TICK_INTERVAL
from simulation.erosion import ErosionEngine
from performance.benchmarks.utils import (
    TickStats,
    Timer,
    format_memory_mb,
    format_time_ms,
    report_lines,
    summarize_ticks,
)

MEMORY_SAMPLE_EVERY = 100   # Ticks between tracemalloc snapshots


class PerformanceMetrics:
    """Tracks performance metrics during a benchmark run."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.tick_times: List[float] = []
        self.memory_snapshots: List[int] = []  # Bytes
        self.total_time: float = 0.0
        self.final_water: float = 0.0
        self.final_sediment: float = 0.0

    def record_memory(self):
        current, _peak = tracemalloc.get_traced_memory()
        self.memory_snapshots.append(current)

    @property
    def stats(self) -> TickStats:
        return summarize_ticks(self.tick_times)

    @property
    def ticks_per_second(self) -> float:
        return len(self.tick_times) / self.total_time if self.total_time > 0 else 0.0

    def within_frame_budget(self, budget: float = TICK_INTERVAL) -> bool:
        """True if the mean tick fits in one frame of the animation loop."""
        return self.stats.fits_budget(budget)

    def report(self) -> List[str]:
        s = self.stats
        rows = [
            ("Ticks:", f"{s.count} in {self.total_time:.2f}s ({self.ticks_per_second:.1f}/s)"),
            ("Mean / median:", f"{format_time_ms(s.mean)} / {format_time_ms(s.median)}"),
            ("Std dev:", format_time_ms(s.stdev)),
            ("Fastest / slowest:", f"{format_time_ms(s.fastest)} / {format_time_ms(s.slowest)}"),
            ("Fits frame budget:", f"{'yes' if self.within_frame_budget() else 'no'} "
                                   f"({format_time_ms(TICK_INTERVAL)})"),
            ("Water / sediment:", f"{self.final_water:.2f} / {self.final_sediment:.3f}"),
        ]
        if self.memory_snapshots:
            rows.append(("Peak traced memory:", format_memory_mb(max(self.memory_snapshots))))
        return report_lines(f"EROSION BENCHMARK ({self.width}×{self.height} cells)", rows)


def run_benchmark(
    num_ticks: int = 1000,
    width: int = GRID_WIDTH,
    height: int = GRID_HEIGHT,
    seed: int = DEFAULT_SEED,
    profile_hotspots: bool = False,
    verbose: bool = True,
) -> PerformanceMetrics:
    """
    Run a headless erosion benchmark.

    Args:
        num_ticks: Number of simulation ticks to run
        width, height: Grid size
        seed: Terrain seed
        profile_hotspots: If True, run cProfile to identify hot code paths
        verbose: Print the final report

    Returns:
        PerformanceMetrics object with collected data
    """
    engine = ErosionEngine(width, height, seed=seed)
    metrics = PerformanceMetrics(width, height)

    tracemalloc.start()
    profiler = cProfile.Profile() if profile_hotspots else None
    if profiler:
        profiler.enable()

    with Timer() as total:
        for i in range(num_ticks):
            with Timer(metrics.tick_times):
                engine.tick()
            if i % MEMORY_SAMPLE_EVERY == 0:
                metrics.record_memory()

    if profiler:
        profiler.disable()
    tracemalloc.stop()
    metrics.total_time = total.elapsed
    metrics.final_water = engine.total_water()
    metrics.final_sediment = engine.total_sediment()

    if verbose:
        print("\n".join(metrics.report()))
        if profiler:
            print_hotspots(profiler)

    return metrics


def print_hotspots(profiler: cProfile.Profile, limit: int = 20) -> None:
    """Print the top functions by cumulative time."""
    s = io.StringIO()
    pstats.Stats(profiler, stream=s).sort_stats("cumulative").print_stats(limit)
    print(f"\nHot code paths (top {limit} by cumulative time)")
    for line in s.getvalue().split("\n")[:limit + 5]:
        if line.strip():
            print(line)


def compare_grid_sizes(sizes: Sequence[int], num_ticks: int = 200) -> List[PerformanceMetrics]:
    """Run benchmarks on square grids of each size and print mean tick times."""
    results = [
        run_benchmark(num_ticks=num_ticks, width=size, height=size, verbose=False)
        for size in sizes
    ]
    rows = [
        (f"{m.width}×{m.height}:", f"{format_time_ms(m.stats.mean)} per tick")
        for m in results
    ]
    print("\n".join(report_lines("GRID SIZE COMPARISON", rows)))
    return results


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Benchmark the erosion engine headless")
    parser.add_argument("--ticks", type=int, default=1000, help="Number of ticks to run")
    parser.add_argument("--width", type=int, default=GRID_WIDTH)
    parser.add_argument("--height", type=int, default=GRID_HEIGHT)
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED)
    parser.add_argument("--profile", action="store_true", help="Show cProfile hot spots")
    parser.add_argument("--compare", type=int, nargs="+", metavar="SIZE",
                        help="Compare square grid sizes instead of a single run")
    args = parser.parse_args(argv)

    if args.compare:
        compare_grid_sizes(args.compare, num_ticks=args.ticks)
    else:
        run_benchmark(args.ticks, args.width, args.height, args.seed, profile_hotspots=args.profile)


if __name__ == "__main__":
    main()
