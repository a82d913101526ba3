from dataclasses import dataclass
from typing import Optional, Tuple

from algorithms.sorting.sort_dispatch import SortAlgorithm
from constants.params import SMALL_MEDIUM_ARRAY_SIZES, LARGE_ARRAY_SIZES, TRIALS, ALL_ALGORITHMS, \
    EFFICIENT_ALGORITHMS


@dataclass(frozen=True)
class SizeTier:
    """A group of sizes sharing the same set of algorithms."""
    name: str
    sizes: Tuple[int, ...]
    algorithms: Tuple[SortAlgorithm, ...]
    note: Optional[str] = None


@dataclass(frozen=True)
class BenchmarkConfig:
    tiers: Tuple[SizeTier, ...]
    trials: int = TRIALS
    seed: Optional[int] = None


def make_tier(name, sizes, algorithm_names, note=None):
    return SizeTier(
        name=name,
        sizes=tuple(sizes),
        algorithms=tuple(SortAlgorithm(a) for a in algorithm_names),
        note=note
    )


def default_config(seed=None):
    """Builds the fixed two-tier configuration used for a full run."""
    return BenchmarkConfig(
        tiers=(
            make_tier("small to medium arrays (all algorithms)", SMALL_MEDIUM_ARRAY_SIZES, ALL_ALGORITHMS),
            make_tier("large arrays (efficient algorithms only)", LARGE_ARRAY_SIZES, EFFICIENT_ALGORITHMS,
                      note="Skipping O(n^2) algorithms as they would take too long"),
        ),
        trials=TRIALS,
        seed=seed
    )
