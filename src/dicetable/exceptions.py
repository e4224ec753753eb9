"""Exceptions raised by dicetable"""

class DistributionError(Exception):
    """Base class for errors building or querying a distribution"""


class EmptyInputError(DistributionError, ValueError):
    """A distribution was requested from zero outcomes"""


class OutOfRangeError(DistributionError, IndexError):
    """A table was queried outside the range of outcomes it holds"""

    def __init__(self, value, min, max):
        super().__init__(f"Outcome {value} is out of range [{min}, {max}].")
        self.value = value
        self.min = min
        self.max = max


class CountOverflowError(DistributionError, OverflowError):
    """The number of outcomes doesn't fit in the permutation counter"""
