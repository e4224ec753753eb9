import numpy as np

from dicetable.exceptions import OutOfRangeError


class Table:
    """
    A read-only mapping from outcome to a permutation count.

    Entry `i` of `values` holds the count for outcome `min + i`.
    Chances are counts divided by `norm`, which is the size of the
    whole sample space rather than the sum of this table's counts,
    so cumulative tables give a chance of 1 at their far end.

    Tables are built by `Distribution` and nothing here is validated:
    `values` must be non-empty and `norm` positive.
    """

    def __init__(self, min, norm, values):
        values = np.array(values, dtype=np.int64)
        values.setflags(write=False)
        self._values = values
        self._min = int(min)
        self._norm = int(norm)

    def min(self):
        """Returns the lowest outcome in the table."""
        return self._min

    def max(self):
        """Returns the highest outcome in the table."""
        return self._min + len(self._values) - 1

    def norm(self):
        """Returns the number of permutations chances are measured against."""
        return self._norm

    def __len__(self):
        return len(self._values)

    def __contains__(self, x):
        return self._min <= x <= self.max()

    def _index(self, x):
        if x not in self:
            raise OutOfRangeError(x, self._min, self.max())
        return x - self._min

    def permutations_of(self, x):
        """Returns the number of permutations that give the result `x`.

        Raises:
          OutOfRangeError: if `x` lies outside `[min(), max()]`.
        """
        return int(self._values[self._index(x)])

    def chance_of(self, x):
        """Returns the chance of the result `x`."""
        return self.permutations_of(x) / self._norm

    def to_permutations(self):
        return [(self._min + i, int(v)) for i, v in enumerate(self._values)]

    def to_chances(self):
        return [(self._min + i, int(v) / self._norm)
                for i, v in enumerate(self._values)]

    def __repr__(self):
        return (f"Table(min={self._min}, norm={self._norm}, "
                f"values={self._values.tolist()})")
