import os
import re

import pandas as pd
import matplotlib.pyplot as plt

from constants.string_constants import RESULTS_BASE_PATH, RESULTS_FILE_NAME, PLOTS_OUTPUT_DIR, \
    SUMMARY_STATS_FILE_NAME, CSV_BASE_COLUMNS, TRIAL_COLUMN_PREFIX

# --- Configuration ---
RESULTS_FILE = os.path.join(RESULTS_BASE_PATH, RESULTS_FILE_NAME)
# Plotting Aesthetics
FIG_WIDTH = 8
FIG_HEIGHT = 6
FIG_DPI = 150
LABEL_FONT_SIZE = 13
TITLE_FONT_SIZE = 15
TICK_FONT_SIZE = 11
LEGEND_FONT_SIZE = 12
# Sorting order of the lines in the comparison plot
ALGORITHM_ORDER = ['insertion', 'selection', 'heapsort', 'numpy']
# --- End Configuration ---


def sanitize_filename(name):
    """Removes potentially problematic characters for filenames."""
    name = re.sub(r'[\\/*?:"<>|]+', '_', name)
    name = re.sub(r'\s+', '_', name)
    name = re.sub(r'[^a-zA-Z0-9_.-]', '', name)
    return name


def get_algorithm_sort_key(algorithm):
    if algorithm in ALGORITHM_ORDER:
        return (ALGORITHM_ORDER.index(algorithm), algorithm)
    return (len(ALGORITHM_ORDER), algorithm)


def get_trial_columns(df):
    return [col for col in df.columns if re.fullmatch(rf"{TRIAL_COLUMN_PREFIX}\d+", col)]


def load_results_file(file_path):
    """Loads the benchmark CSV, returning None when it is missing, empty or malformed."""
    try:
        df = pd.read_csv(file_path, skipinitialspace=True)
        missing = [col for col in CSV_BASE_COLUMNS if col not in df.columns]
        if missing:
            print(f"Warning: Required columns {missing} not found in {file_path}. Skipping.")
            return None
        trial_cols = get_trial_columns(df)
        if not trial_cols:
            print(f"Warning: No trial columns found in {file_path}. Skipping.")
            return None

        numeric_cols = ['Size', 'AvgTime(ms)'] + trial_cols
        for col in numeric_cols:
            df[col] = pd.to_numeric(df[col], errors='coerce')
        df.dropna(subset=numeric_cols, inplace=True)

        if df.empty:
            return None
        df['Size'] = df['Size'].astype(int)
        return df
    except FileNotFoundError:
        print(f"Error: File not found {file_path}")
        return None
    except pd.errors.EmptyDataError:
        print(f"Warning: Skipping empty file {file_path}")
        return None


def calculate_trial_stats(df):
    """Adds per-row trial statistics and a consistency flag for the reported average."""
    trial_cols = get_trial_columns(df)
    trials = df[trial_cols]

    stats_df = df[['Size', 'Algorithm', 'AvgTime(ms)']].copy()
    stats_df['Mean'] = trials.mean(axis=1)
    stats_df['Median'] = trials.median(axis=1)
    stats_df['StdDev'] = trials.std(axis=1) if len(trial_cols) >= 2 else 0.0
    stats_df['Min'] = trials.min(axis=1)
    stats_df['Max'] = trials.max(axis=1)
    stats_df['Count'] = trials.count(axis=1)
    stats_df['AvgMatchesTrials'] = (stats_df['Mean'] - stats_df['AvgTime(ms)']).abs() <= 0.005 + 1e-9
    return stats_df


def plot_comparison(stats_df, output_dir, log_scale=True):
    """One line per algorithm: average time against array size."""
    plt.figure(figsize=(FIG_WIDTH, FIG_HEIGHT))
    ax = plt.gca()

    algorithms = sorted(stats_df['Algorithm'].unique(), key=get_algorithm_sort_key)
    for algorithm in algorithms:
        algo_df = stats_df[stats_df['Algorithm'] == algorithm].sort_values('Size')
        ax.plot(algo_df['Size'], algo_df['AvgTime(ms)'], marker='o', linestyle='-', label=algorithm)

    if log_scale:
        # Zero-millisecond averages cannot be shown on a log axis
        ax.set_yscale('symlog', linthresh=1.0)
        ax.set_xscale('log')
    ax.set_xlabel('Array Size', fontsize=LABEL_FONT_SIZE)
    ax.set_ylabel('Average Time (ms)', fontsize=LABEL_FONT_SIZE)
    ax.set_title('Sorting Algorithms: Average Time vs. Array Size', fontsize=TITLE_FONT_SIZE)
    plt.xticks(fontsize=TICK_FONT_SIZE)
    plt.yticks(fontsize=TICK_FONT_SIZE)
    ax.grid(True, which='both', linestyle='--', linewidth=0.5)
    ax.legend(fontsize=LEGEND_FONT_SIZE)
    plt.tight_layout()

    scale_suffix = 'log' if log_scale else 'linear'
    plot_path = os.path.join(output_dir, f"comparison_avg_time_vs_size_{scale_suffix}.png")
    try:
        plt.savefig(plot_path, dpi=FIG_DPI)
    except Exception as e:
        print(f"Error saving comparison plot {plot_path}: {e}")
        plot_path = None
    plt.close()
    return plot_path


def plot_algorithm(stats_df, algorithm, output_dir):
    """Average time per size for a single algorithm, with trial standard deviation as error bars."""
    algo_df = stats_df[stats_df['Algorithm'] == algorithm].sort_values('Size')
    if algo_df.empty:
        return None

    plt.figure(figsize=(FIG_WIDTH, FIG_HEIGHT))
    plt.errorbar(algo_df['Size'], algo_df['AvgTime(ms)'], yerr=algo_df['StdDev'].fillna(0),
                 marker='o', linestyle='-', capsize=5, label=algorithm)
    plt.plot(algo_df['Size'], algo_df['Median'], marker='x', linestyle='--', color='green', label='Median')

    plt.xlabel('Array Size', fontsize=LABEL_FONT_SIZE)
    plt.ylabel('Time (ms)', fontsize=LABEL_FONT_SIZE)
    plt.title(f'Average Time per Array Size\nAlg: {algorithm}', fontsize=TITLE_FONT_SIZE)
    plt.xticks(fontsize=TICK_FONT_SIZE)
    plt.yticks(fontsize=TICK_FONT_SIZE)
    plt.grid(True, which='both', linestyle='--', linewidth=0.5)
    plt.legend(fontsize=LEGEND_FONT_SIZE)
    plt.tight_layout()

    plot_path = os.path.join(output_dir, f"{sanitize_filename(algorithm)}_time_vs_size.png")
    try:
        plt.savefig(plot_path, dpi=FIG_DPI)
    except Exception as e:
        print(f"Error saving plot {plot_path}: {e}")
        plot_path = None
    plt.close()
    return plot_path


def generate_all_plots(results_file=RESULTS_FILE, output_dir=PLOTS_OUTPUT_DIR):
    """
    Loads the results CSV, writes summary statistics and saves all plots.

    Returns:
        The summary statistics DataFrame, or None when there was no data to plot.
    """
    os.makedirs(output_dir, exist_ok=True)
    print(f"Input file: {os.path.abspath(results_file)}")
    print(f"Output directory: {os.path.abspath(output_dir)}")

    df = load_results_file(results_file)
    if df is None:
        print("No results were loaded. Nothing to plot.")
        return None

    stats_df = calculate_trial_stats(df)
    mismatched = stats_df[~stats_df['AvgMatchesTrials']]
    for _, row in mismatched.iterrows():
        print(f"Warning: Reported average {row['AvgTime(ms)']:.2f} for {row['Algorithm']} at size "
              f"{row['Size']} does not match the trial mean {row['Mean']:.2f}.")

    print("\n--- Generating Plots ---")
    plot_comparison(stats_df, output_dir, log_scale=True)
    plot_comparison(stats_df, output_dir, log_scale=False)
    for algorithm in sorted(stats_df['Algorithm'].unique(), key=get_algorithm_sort_key):
        plot_algorithm(stats_df, algorithm, output_dir)
    print("--- Plotting Finished ---")

    summary_path = os.path.join(output_dir, SUMMARY_STATS_FILE_NAME)
    try:
        stats_df.to_csv(summary_path, index=False, float_format='%.5f')
        print(f"Summary statistics saved to: {summary_path}")
    except Exception as e:
        print(f"Error saving summary statistics CSV: {e}")

    return stats_df


# Run manually
if __name__ == "__main__":
    generate_all_plots()
