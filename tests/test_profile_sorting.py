"""Tests for the timing harness and the CSV output of a benchmark run.

Runs use tiny synthetic configurations written under pytest's tmp_path.
"""

from __future__ import annotations

import csv
from pathlib import Path

import numpy as np
import pytest

from algorithms.sorting.sort_dispatch import SortAlgorithm
from performance_profiling.sorting.array_generation import generate_array
from performance_profiling.sorting.benchmark_config import BenchmarkConfig, default_config, make_tier
from performance_profiling.sorting.profile_sorting_all import (
    ResultRow,
    build_result_row,
    format_console_line,
    format_csv_header,
    format_csv_row,
    prepare_input,
    run_sorting_benchmark,
    run_trials,
    time_sort_run,
)


def _tiny_config(seed=None) -> BenchmarkConfig:
    return BenchmarkConfig(
        tiers=(
            make_tier("small", (10, 20), ("insertion", "selection", "heapsort", "numpy")),
            make_tier("large", (40,), ("heapsort", "numpy"), note="quadratic skipped"),
        ),
        trials=5,
        seed=seed,
    )


def _read_rows(path: Path) -> list[list[str]]:
    with open(path, newline="") as f:
        return list(csv.reader(f))


@pytest.mark.parametrize("algorithm", list(SortAlgorithm))
def test_time_sort_run_leaves_original_untouched(algorithm: SortAlgorithm) -> None:
    arr = generate_array(200, 99)
    before = arr.copy()
    elapsed = time_sort_run(arr, algorithm)
    assert isinstance(elapsed, int)
    assert elapsed >= 0
    assert np.array_equal(arr, before)


def test_time_sort_run_accepts_algorithm_name() -> None:
    assert time_sort_run(generate_array(50, 1), "heapsort") >= 0


def test_prepare_input_returns_private_copy() -> None:
    arr = generate_array(20, 5)
    as_list = prepare_input(arr, SortAlgorithm.INSERTION)
    as_array = prepare_input(arr, SortAlgorithm.BASELINE)
    assert isinstance(as_list, list)
    assert isinstance(as_array, np.ndarray)
    assert as_array is not arr
    as_array.sort()
    assert not np.shares_memory(as_array, arr)


def test_run_trials_uses_fresh_seed_per_trial() -> None:
    times, seeds = run_trials(30, SortAlgorithm.HEAPSORT, 5, base_seed=1000)
    assert len(times) == 5
    assert seeds == [1000, 1001, 1002, 1003, 1004]


def test_build_result_row_average() -> None:
    row = build_result_row(1000, "insertion", [1, 2, 2, 3, 4])
    assert row.avg_time_ms == pytest.approx(2.4)
    assert row.trial_times_ms == (1, 2, 2, 3, 4)
    assert row.algorithm == "insertion"


def test_csv_header_for_five_trials() -> None:
    assert format_csv_header(5) == "Size,Algorithm,AvgTime(ms),Trial1,Trial2,Trial3,Trial4,Trial5"


def test_csv_and_console_formatting() -> None:
    row = ResultRow(size=5000, algorithm="heapsort", avg_time_ms=1.0 / 3, trial_times_ms=(0, 1, 0))
    assert format_csv_row(row) == "5000,heapsort,0.33,0,1,0"
    line = format_console_line(row)
    assert line.startswith("  heapsort       : avg =     0.33 ms")
    assert line.endswith("(trials: 0ms, 1ms, 0ms)")


def test_benchmark_writes_rows_in_order(tmp_path: Path) -> None:
    output = tmp_path / "out" / "results.csv"
    rows = run_sorting_benchmark(_tiny_config(seed=42), str(output))
    assert rows is not None

    lines = _read_rows(output)
    assert lines[0] == ["Size", "Algorithm", "AvgTime(ms)", "Trial1", "Trial2", "Trial3", "Trial4", "Trial5"]
    written = [(int(r[0]), r[1]) for r in lines[1:]]
    assert written == [
        (10, "insertion"), (10, "selection"), (10, "heapsort"), (10, "numpy"),
        (20, "insertion"), (20, "selection"), (20, "heapsort"), (20, "numpy"),
        (40, "heapsort"), (40, "numpy"),
    ]
    assert [(r.size, r.algorithm) for r in rows] == written


def test_benchmark_average_matches_trials(tmp_path: Path) -> None:
    output = tmp_path / "results.csv"
    run_sorting_benchmark(_tiny_config(seed=7), str(output))
    for record in _read_rows(output)[1:]:
        trials = [int(t) for t in record[3:]]
        assert len(trials) == 5
        assert record[2] == f"{sum(trials) / 5:.2f}"


def test_seeds_not_reused_across_algorithms(tmp_path: Path) -> None:
    rows = run_sorting_benchmark(_tiny_config(seed=0), str(tmp_path / "results.csv"))
    all_seeds = [s for row in rows for s in row.seeds]
    assert len(all_seeds) == len(set(all_seeds)) == 10 * 5


def test_unwritable_destination_aborts(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    # A directory cannot be opened for writing
    rows = run_sorting_benchmark(_tiny_config(), str(tmp_path))
    assert rows is None
    captured = capsys.readouterr()
    assert "Error writing results to" in captured.err
    assert "Testing array size" not in captured.out


def test_console_reports_phases(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    run_sorting_benchmark(_tiny_config(seed=1), str(tmp_path / "results.csv"))
    out = capsys.readouterr().out
    assert "PHASE 1: Testing small" in out
    assert "PHASE 2: Testing large" in out
    assert "Note: quadratic skipped" in out
    assert "Testing array size: 10" in out


def test_default_config_tiers() -> None:
    config = default_config()
    small, large = config.tiers
    assert config.trials == 5
    assert config.seed is None
    assert small.sizes == (1000, 5000, 10000, 25000, 50000, 75000, 100000, 150000)
    assert large.sizes == (200000, 250000, 500000, 750000, 1000000, 10000000)
    assert small.algorithms == tuple(SortAlgorithm)
    assert large.algorithms == (SortAlgorithm.HEAPSORT, SortAlgorithm.BASELINE)
    assert not any(a.is_quadratic for a in large.algorithms)


class _FailingAfterHeader:
    """Text file stand-in whose writes fail once the header is written."""

    def __init__(self) -> None:
        self.writes = 0

    def __enter__(self) -> "_FailingAfterHeader":
        return self

    def __exit__(self, *exc_info) -> None:
        return None

    def write(self, text: str) -> int:
        self.writes += 1
        if self.writes > 1:
            raise OSError(28, "No space left on device")
        return len(text)

    def flush(self) -> None:
        pass


def test_write_failure_mid_run_aborts(tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
                                      capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr(
        "performance_profiling.sorting.profile_sorting_all.open",
        lambda *args, **kwargs: _FailingAfterHeader(),
        raising=False,
    )
    rows = run_sorting_benchmark(_tiny_config(seed=2), str(tmp_path / "results.csv"))
    assert rows is None
    captured = capsys.readouterr()
    assert "Error writing results to" in captured.err
    assert "No space left on device" in captured.err
    assert "Testing array size: 10" in captured.out
    assert "Testing array size: 20" not in captured.out
    assert "PHASE 2" not in captured.out
