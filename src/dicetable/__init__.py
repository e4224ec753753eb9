"""Exact probability tables for dice and other discrete outcomes."""

from dicetable.distribution import Distribution
from dicetable.table import Table
from dicetable.exceptions import (
    DistributionError,
    EmptyInputError,
    OutOfRangeError,
    CountOverflowError,
)
from dicetable.utils import enable_logging
