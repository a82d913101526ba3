import os
import sys
import time
import argparse
import traceback

from constants.string_constants import RESULTS_BASE_PATH, RESULTS_FILE_NAME, SYSTEM_INFO_FILE_NAME, \
    BANNER_WIDTH, PLOTS_OUTPUT_DIR
from performance_profiling.sorting.benchmark_config import default_config
from performance_profiling.sorting.profile_sorting_all import run_sorting_benchmark
from utils.utils import get_formatted_elapsed_time, write_system_info
from visualizations.plotter import generate_all_plots


def print_banner(title):
    print("=" * BANNER_WIDTH)
    print(f"  {title}")
    print("=" * BANNER_WIDTH)
    print()


def save_system_info(output_dir):
    file_path = os.path.join(output_dir, SYSTEM_INFO_FILE_NAME)
    try:
        os.makedirs(output_dir, exist_ok=True)
        with open(file_path, "w") as f:
            write_system_info(f)
        print(f"Info: System info successfully written to {file_path}")
    except IOError as e:
        print(f"Warning: Could not write system info to {file_path}: {e}")


def print_next_steps(results_path):
    print(f"Results saved to: {results_path}")
    print()
    print("Next steps:")
    print(f"1. Run with --plot (or visualizations/plotter.py) to chart {results_path}")
    print("2. Or import the CSV into a spreadsheet and create a line graph with:")
    print("   - X-axis: Array Size")
    print("   - Y-axis: Average Time (ms)")
    print("   - Separate lines for each algorithm")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Empirical analysis of sorting algorithms.")
    parser.add_argument(
        "--output",
        default=os.path.join(RESULTS_BASE_PATH, RESULTS_FILE_NAME),
        help="Path of the CSV file the results are written to."
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Pins the base seed so the generated arrays can be reproduced."
    )
    parser.add_argument(
        "--plot",
        action="store_true",
        help="If set, generates plots and summary statistics after the run."
    )
    args = parser.parse_args(argv)

    start_time = time.time()
    print_banner("Empirical Analysis of Sorting Algorithms")

    output_dir = os.path.dirname(args.output) or "."
    save_system_info(output_dir)

    rows = run_sorting_benchmark(default_config(seed=args.seed), args.output)
    if rows is None:
        return 1

    print()
    print_banner("Analysis Complete!")
    print(f"Total benchmarking time: {get_formatted_elapsed_time(start_time)}")
    print_next_steps(args.output)

    if args.plot:
        try:
            generate_all_plots(args.output, os.path.join(output_dir, PLOTS_OUTPUT_DIR))
        except Exception as e:
            print(f"Error generating plots: {e}", file=sys.stderr)
            traceback.print_exc()

    return 0


if __name__ == "__main__":
    sys.exit(main())
