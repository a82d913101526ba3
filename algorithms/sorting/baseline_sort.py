import numpy as np


def baseline_sort(arr):
    """Sorts with the container's own in-place sort (NumPy for arrays, list.sort otherwise)."""
    if isinstance(arr, np.ndarray):
        arr.sort(kind='quicksort')
    else:
        arr.sort()
