from enum import Enum

from algorithms.sorting.baseline_sort import baseline_sort
from algorithms.sorting.heap_sort import heap_sort
from algorithms.sorting.insertion_sort import insertion_sort
from algorithms.sorting.selection_sort import selection_sort


class SortAlgorithm(Enum):
    INSERTION = "insertion"
    SELECTION = "selection"
    HEAPSORT = "heapsort"
    BASELINE = "numpy"

    @property
    def is_quadratic(self):
        return self in (SortAlgorithm.INSERTION, SortAlgorithm.SELECTION)

    @property
    def works_on_list(self):
        """Pure-Python sorters run on a list copy, the baseline on an ndarray copy."""
        return self is not SortAlgorithm.BASELINE


SORT_FUNCTIONS = {
    SortAlgorithm.INSERTION: insertion_sort,
    SortAlgorithm.SELECTION: selection_sort,
    SortAlgorithm.HEAPSORT: heap_sort,
    SortAlgorithm.BASELINE: baseline_sort,
}


def run_sort(algorithm, arr):
    """Sorts arr in place with the given algorithm (enum member or its name)."""
    SORT_FUNCTIONS[SortAlgorithm(algorithm)](arr)
