import os
import sys
import time
from typing import NamedTuple, Optional, Tuple

import numpy as np

from algorithms.sorting.sort_dispatch import SortAlgorithm, run_sort
from constants.string_constants import RESULTS_BASE_PATH, RESULTS_FILE_NAME, CSV_BASE_COLUMNS, \
    TRIAL_COLUMN_PREFIX, BANNER_WIDTH
from performance_profiling.sorting.array_generation import generate_array, make_seed
from performance_profiling.sorting.benchmark_config import default_config

NS_PER_MS = 1_000_000
DEFAULT_OUTPUT_PATH = os.path.join(RESULTS_BASE_PATH, RESULTS_FILE_NAME)


class ResultRow(NamedTuple):
    size: int
    algorithm: str
    avg_time_ms: float
    trial_times_ms: Tuple[int, ...]
    seeds: Tuple[int, ...] = ()


def prepare_input(arr_np: np.ndarray, algorithm: SortAlgorithm):
    """Returns a private copy of arr_np in the container the algorithm is timed on."""
    if algorithm.works_on_list:
        return arr_np.tolist()
    return arr_np.copy()


def time_sort_run(arr_np, algorithm) -> int:
    """
    Times one sort of a copy of arr_np.

    The copy is made before the clock starts so only the sort is measured.

    Returns:
        Elapsed whole milliseconds (integer division of the nanosecond delta).
    """
    algorithm = SortAlgorithm(algorithm)
    arr_input = prepare_input(np.asarray(arr_np), algorithm)

    start_time = time.perf_counter_ns()
    run_sort(algorithm, arr_input)
    end_time = time.perf_counter_ns()

    return (end_time - start_time) // NS_PER_MS


def run_trials(array_size: int, algorithm, trials: int, base_seed=None, seed_offset: int = 0):
    """Runs `trials` timings, each on a freshly generated array with its own seed."""
    times = []
    seeds = []
    for trial in range(trials):
        seed = make_seed(seed_offset + trial, base_seed)
        arr_np = generate_array(array_size, seed)
        times.append(time_sort_run(arr_np, algorithm))
        seeds.append(seed)
    return times, seeds


def build_result_row(array_size, algorithm, times, seeds=()) -> ResultRow:
    algorithm = SortAlgorithm(algorithm)
    avg = sum(times) / float(len(times)) if times else 0.0
    return ResultRow(
        size=array_size,
        algorithm=algorithm.value,
        avg_time_ms=avg,
        trial_times_ms=tuple(times),
        seeds=tuple(seeds)
    )


def format_csv_header(trials: int) -> str:
    trial_columns = [f"{TRIAL_COLUMN_PREFIX}{i}" for i in range(1, trials + 1)]
    return ",".join(list(CSV_BASE_COLUMNS) + trial_columns)


def format_csv_row(row: ResultRow) -> str:
    line = f"{row.size},{row.algorithm},{row.avg_time_ms:.2f}"
    for t in row.trial_times_ms:
        line += f",{t}"
    return line


def format_console_line(row: ResultRow) -> str:
    trials_str = ", ".join(f"{t}ms" for t in row.trial_times_ms)
    return f"  {row.algorithm:<15}: avg = {row.avg_time_ms:8.2f} ms  (trials: {trials_str})"


def profile_and_save_stats(config, file):
    """
    Runs every tier of config and writes one CSV row per (size, algorithm).

    Rows are written as soon as they are measured, in test order.

    Args:
        config: BenchmarkConfig describing tiers, trials and the base seed.
        file: Open text file the rows are written to (header already written).

    Returns:
        List of ResultRow in generation order.
    """
    rows = []
    seed_offset = 0

    for phase_number, tier in enumerate(config.tiers, start=1):
        print(f"PHASE {phase_number}: Testing {tier.name}")
        print("-" * BANNER_WIDTH)
        if tier.note:
            print(f"Note: {tier.note}")
        print()

        for array_size in tier.sizes:
            print(f"Testing array size: {array_size:,}")

            for algorithm in tier.algorithms:
                times, seeds = run_trials(array_size, algorithm, config.trials,
                                          base_seed=config.seed, seed_offset=seed_offset)
                seed_offset += config.trials

                row = build_result_row(array_size, algorithm, times, seeds)
                file.write(format_csv_row(row) + "\n")
                file.flush()
                rows.append(row)

                print(format_console_line(row))
                if config.seed is not None:
                    print(f"    Info: seeds {', '.join(str(s) for s in row.seeds)}")
            print()

    return rows


def run_sorting_benchmark(config=None, output_path: str = DEFAULT_OUTPUT_PATH) -> Optional[list]:
    """
    Opens output_path once, writes the header and runs the whole suite.

    Returns:
        The result rows, or None if the output could not be created or written.
    """
    if config is None:
        config = default_config()

    try:
        output_dir = os.path.dirname(output_path)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)

        with open(output_path, 'w') as file:
            file.write(format_csv_header(config.trials) + "\n")
            rows = profile_and_save_stats(config, file)
    except IOError as e:
        print(f"Error writing results to {output_path}: {e}", file=sys.stderr)
        return None

    return rows


if __name__ == "__main__":
    results = run_sorting_benchmark()
    if results is None:
        sys.exit(1)
    print(f"\nSorting profiling complete. Results saved to {DEFAULT_OUTPUT_PATH}")
