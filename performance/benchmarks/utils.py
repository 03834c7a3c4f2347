"""Timing and reporting helpers for the erosion benchmarks."""
from __future__ import annotations

import time
from dataclasses import dataclass
from statistics import mean, median, stdev
from typing import List, Optional, Sequence


class Timer:
    """Context manager measuring one block; optionally appends the result to a list."""

    def __init__(self, record: Optional[List[float]] = None):
        self.record = record
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, *args):
        self.elapsed = time.perf_counter() - self.start
        if self.record is not None:
            self.record.append(self.elapsed)


@dataclass(frozen=True)
class TickStats:
    """Summary of per-tick durations, in seconds."""
    count: int = 0
    mean: float = 0.0
    median: float = 0.0
    stdev: float = 0.0
    fastest: float = 0.0
    slowest: float = 0.0

    def fits_budget(self, budget: float) -> bool:
        return self.count > 0 and self.mean <= budget


def summarize_ticks(times: Sequence[float]) -> TickStats:
    """Collapse raw tick durations into a TickStats (all zero when empty)."""
    if not times:
        return TickStats()
    return TickStats(
        count=len(times),
        mean=mean(times),
        median=median(times),
        stdev=stdev(times) if len(times) > 1 else 0.0,
        fastest=min(times),
        slowest=max(times),
    )


def format_time_ms(seconds: float) -> str:
    """'12.34ms'"""
    return f"{seconds * 1000:.2f}ms"


def format_memory_mb(bytes_: int) -> str:
    return f"{bytes_ / (1024 * 1024):.1f} MB"


def report_lines(title: str, rows: Sequence[tuple], width: int = 60) -> List[str]:
    """Lay out a benchmark report: ruled title, then aligned label/value rows."""
    lines = ["", "=" * width, title, "=" * width]
    lines.extend(f"  {label:<22} {value}" for label, value in rows)
    return lines
