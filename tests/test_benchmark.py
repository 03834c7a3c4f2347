"""Tests for the headless benchmark helpers."""

import pytest

from performance.benchmarks.simulation import compare_grid_sizes, run_benchmark
from performance.benchmarks.utils import (
    TickStats,
    Timer,
    format_time_ms,
    report_lines,
    summarize_ticks,
)


def test_run_benchmark_records_every_tick():
    metrics = run_benchmark(num_ticks=5, width=10, height=10, verbose=False)
    assert len(metrics.tick_times) == 5
    assert metrics.stats.count == 5
    assert metrics.total_time > 0
    assert metrics.ticks_per_second > 0
    assert metrics.memory_snapshots
    assert metrics.final_water > 0


def test_report_mentions_grid_and_ticks():
    metrics = run_benchmark(num_ticks=3, width=6, height=4, verbose=False)
    text = "\n".join(metrics.report())
    assert "6×4" in text
    assert "3 in" in text


def test_compare_grid_sizes(capsys):
    results = compare_grid_sizes([5, 8], num_ticks=2)
    assert [m.width for m in results] == [5, 8]
    assert "8×8" in capsys.readouterr().out


def test_timer_records_into_list():
    times = []
    with Timer(times) as t:
        sum(range(1000))
    assert times == [t.elapsed]
    assert t.elapsed >= 0


class TestTickStats:
    """Test tick time summaries."""

    def test_empty(self):
        stats = summarize_ticks([])
        assert stats == TickStats()
        assert not stats.fits_budget(1.0)

    def test_values(self):
        stats = summarize_ticks([1.0, 3.0, 2.0])
        assert stats.count == 3
        assert stats.mean == pytest.approx(2.0)
        assert stats.median == 2.0
        assert stats.fastest == 1.0
        assert stats.slowest == 3.0
        assert stats.fits_budget(2.0)
        assert not stats.fits_budget(1.5)

    def test_single_tick_has_no_spread(self):
        assert summarize_ticks([0.5]).stdev == 0.0


def test_formatting():
    assert format_time_ms(0.01234) == "12.34ms"
    lines = report_lines("TITLE", [("Label:", "value")], width=10)
    assert lines[1] == "=" * 10
    assert lines[2] == "TITLE"
    assert lines[-1].split() == ["Label:", "value"]
