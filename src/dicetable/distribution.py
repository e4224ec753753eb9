import logging
import math
import numbers
from fractions import Fraction

import numpy as np

import dicetable.config as config
from dicetable.exceptions import EmptyInputError, CountOverflowError
from dicetable.table import Table

LOGGER = logging.getLogger(__name__)


def as_outcome_array(outcomes):
    """
    Convert a sequence of outcomes into a 1-d `int64` array.

    Raises:
      EmptyInputError: if there are no outcomes.
      TypeError: if the outcomes aren't integers.
      ValueError: if the outcomes aren't a flat sequence.
      OverflowError: if an outcome doesn't fit in 64 bits.
    """
    if not hasattr(outcomes, "__len__"):
        outcomes = list(outcomes)

    array = np.asarray(outcomes)
    if array.size == 0:
        raise EmptyInputError("Can't build a distribution from zero outcomes.")
    if array.ndim != 1:
        raise ValueError(
            f"Outcomes must be a flat sequence, got shape {array.shape}.")
    if array.dtype.kind not in "iu":
        if all(isinstance(o, numbers.Integral) and not isinstance(o, bool)
               for o in outcomes):
            raise OverflowError("Outcome too large for a 64-bit integer.")
        raise TypeError(f"Outcomes must be integers, got {array.dtype}.")

    if array.dtype.kind == "u" and array.max() > np.iinfo(np.int64).max:
        raise OverflowError("Outcome too large for a 64-bit integer.")

    return array.astype(np.int64)


def frozen(array):
    array.setflags(write=False)
    return array


class Distribution:
    """
    The distribution of a discrete random variable over integer outcomes.

    Built from every equally likely permutation's outcome, eg. the sums
    shown by all 36 ways of throwing 2d6. Holds three histograms indexed
    by `outcome - min()`:

      `values[i]`   the number of permutations giving exactly `min() + i`,
      `at_least[i]` the number giving `min() + i` or more,
      `at_most[i]`  the number giving `min() + i` or less.

    All counting is done in integers. Nothing changes after construction.
    """

    def __init__(self, outcomes):
        outcomes = as_outcome_array(outcomes)

        total = len(outcomes)
        if total > np.iinfo(config.count_dtype).max:
            raise CountOverflowError(
                f"{total} outcomes don't fit in {np.dtype(config.count_dtype)}.")

        lo = int(outcomes.min())
        hi = int(outcomes.max())
        LOGGER.debug("Counting %s outcomes in range [%s, %s].", total, lo, hi)

        values = np.bincount(outcomes - lo, minlength=hi - lo + 1)
        values = values.astype(config.count_dtype)

        # at_most[i] = sum(values[:i + 1]), at_least[i] = total - sum(values[:i])
        at_most = np.cumsum(values, dtype=config.count_dtype)
        at_least = total - at_most + values

        self._min = lo
        self._total_permutations = total
        self._values = frozen(values)
        self._at_least = frozen(at_least)
        self._at_most = frozen(at_most)

    @classmethod
    def new(cls, outcomes):
        return cls(outcomes)

    def min(self):
        """Returns the lowest possible result."""
        return self._min

    def max(self):
        """Returns the highest possible result."""
        return self._min + len(self._values) - 1

    def possible_permutations(self):
        """Returns the total number of possible permutations."""
        return self._total_permutations

    def total_permutations(self):
        return self._total_permutations

    def total_combinations(self):
        """Returns the number of steps from the lowest to the highest result.

        This is one less than the number of distinct results.
        """
        return self.max() - self.min()

    def _table(self, values):
        return Table(self._min, self._total_permutations, values)

    def exactly(self):
        """Returns a `Table` with the exact odds for each result."""
        return self._table(self._values)

    def at_least(self):
        """Returns a `Table` with the odds to get at least the result given.

        The lowest possible result will always have a 100% chance, and the
        highest possible result will always have the exact chance.
        """
        return self._table(self._at_least)

    def at_most(self):
        """Returns a `Table` with the odds to get at most the result given.

        The highest possible result will always have a 100% chance, and the
        lowest possible result will always have the exact chance.
        """
        return self._table(self._at_most)

    def _moments(self):
        outcomes = np.arange(self._min, self.max() + 1, dtype=np.int64)
        first = sum(int(o) * int(c) for o, c in zip(outcomes, self._values))
        second = sum(int(o) ** 2 * int(c) for o, c in zip(outcomes, self._values))
        n = self._total_permutations
        mean = Fraction(first, n)
        return mean, Fraction(second, n) - mean ** 2

    def mean(self):
        """Returns the expected result."""
        mean, _ = self._moments()
        return float(mean)

    def variance(self):
        _, variance = self._moments()
        return float(variance)

    def std_dev(self):
        """Returns the population standard deviation of the result."""
        return math.sqrt(self.variance())

    def __repr__(self):
        return (f"Distribution(min={self._min}, max={self.max()}, "
                f"total_permutations={self._total_permutations}, "
                f"values={self._values.tolist()})")
