"""
Small helpers used when summarising and cleaning track tables.
"""

from typing import Any, List, Sequence, Set, Union

import numpy as np
import pandas as pd

from .config import Config, DEFAULT_CONFIG
from .errors import LengthMismatch


def mode_of(values: Any, drop_missing: bool = True) -> Set[Any]:
    """
    Compute the mode(s) of a discrete distribution.

    Booleans are counted apart from numbers, so True and 1 are two values.
    Numerically equal numbers (1 and 1.0) count as the same value.

    Args:
        values: Vector or array of discrete values (flattened)
        drop_missing: Strip missing values before counting. When False, all
                      missing entries count as one value, returned as NaN

    Returns:
        Set of the value(s) with the highest count. All ties are included;
        empty input gives an empty set.
    """
    flat = np.ravel(np.asarray(values, dtype=object))
    missing = pd.isna(flat).astype(bool)
    is_bool = np.array([isinstance(v, (bool, np.bool_)) for v in flat], dtype=bool)

    counts = [
        pd.Series(flat[mask], dtype=object).value_counts(sort=False)
        for mask in (~is_bool & ~missing, is_bool & ~missing)
    ]
    n_missing = 0 if drop_missing else int(missing.sum())

    best = max([int(c.max()) for c in counts if not c.empty] + [n_missing])
    if best == 0:
        return set()

    modes = {v for c in counts for v in c.index[c == best].tolist()}
    if n_missing == best:
        modes.add(np.nan)
    return modes


def append_error(
    existing: Union[Sequence[str], pd.Series],
    new: Union[Sequence[str], pd.Series],
    config: Config = DEFAULT_CONFIG
) -> Union[List[str], pd.Series]:
    """
    Update the error codes of a trajectory table.

    "OK" entries are replaced by the new code; anything else gets the new
    code appended, e.g. "E1" + "E3" -> "E1+E3".

    Args:
        existing: Current error codes, one per row
        new: Codes to add, same length as existing
        config: Provides the "OK" sentinel and the separator

    Returns:
        Updated codes. A Series input returns a Series with the same index.
    """
    if len(existing) != len(new):
        raise LengthMismatch(
            f"Error codes have different lengths ({len(existing)} vs {len(new)})"
        )

    updated = [
        n if e == config.error_ok_code else f"{e}{config.error_separator}{n}"
        for e, n in zip(list(existing), list(new))
    ]

    if isinstance(existing, pd.Series):
        return pd.Series(updated, index=existing.index, name=existing.name)
    return updated
