# Sizes tested against every algorithm
SMALL_MEDIUM_ARRAY_SIZES = (1000, 5000, 10000, 25000, 50000, 75000, 100000, 150000)
# Quadratic sorts are skipped for these
LARGE_ARRAY_SIZES = (200000, 250000, 500000, 750000, 1000000, 10000000)

TRIALS = 5

ALL_ALGORITHMS = ("insertion", "selection", "heapsort", "numpy")
EFFICIENT_ALGORITHMS = ("heapsort", "numpy")

INT32_MIN = -2 ** 31
INT32_MAX_EXCLUSIVE = 2 ** 31
SEED_MODULUS = 2 ** 32
