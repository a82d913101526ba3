import time
import numpy as np

from constants.params import INT32_MIN, INT32_MAX_EXCLUSIVE, SEED_MODULUS

DATA_TYPE_SORT = np.int32


def make_seed(trial_index=0, base_seed=None):
    """
    Returns the seed for one trial.

    A pinned base seed gives base_seed + trial_index, otherwise the
    high-resolution clock is used. Folded into the range RandomState accepts.
    """
    if base_seed is None:
        base_seed = time.perf_counter_ns()
    return (base_seed + trial_index) % SEED_MODULUS


def generate_array(array_size, random_state_seed=None, dtype=DATA_TYPE_SORT):
    """Generates array_size signed integers spanning the full int32 range."""
    if random_state_seed is None:
        random_state_seed = make_seed()
    rng = np.random.RandomState(random_state_seed % SEED_MODULUS)
    arr_np = rng.randint(INT32_MIN, INT32_MAX_EXCLUSIVE, size=array_size, dtype=dtype)
    return arr_np


if __name__ == "__main__":
    arr = generate_array(10, random_state_seed=42)
    print(arr)
