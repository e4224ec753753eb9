import os
import logging

import numpy as np

# Permutation counts are held in this type.
count_dtype = np.int64

log_level_name = os.environ.get("DICETABLE_LOG_LEVEL", "WARNING")


def log_level(name=None):
    """Map a level name such as `"DEBUG"` to its `logging` constant."""
    name = (name or log_level_name).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"I don't recognize the log level `{name}`.")
    return level
