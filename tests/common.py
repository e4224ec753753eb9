# common.py

import collections
import itertools


def dice_outcomes(m, n):
    """Sum shown by every one of the `n ** m` ways of throwing `m` `n`-sided dice."""
    return [sum(faces) for faces in itertools.product(range(1, n + 1), repeat=m)]


def dice_sum_counts(m, n):
    """Number of ways each total from `m` to `m * n` can be thrown with `m`dn."""
    return dict(collections.Counter(dice_outcomes(m, n)))
