RESULTS_BASE_PATH = 'results/'
RESULTS_FILE_NAME = 'results.csv'
SYSTEM_INFO_FILE_NAME = 'system_info.txt'
PLOTS_OUTPUT_DIR = 'visualizations_and_stats'
SUMMARY_STATS_FILE_NAME = 'summary_statistics.csv'
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CSV_BASE_COLUMNS = ("Size", "Algorithm", "AvgTime(ms)")
TRIAL_COLUMN_PREFIX = "Trial"

BANNER_WIDTH = 62
