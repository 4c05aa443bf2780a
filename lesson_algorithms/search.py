"""
Linear first-index search.

Responsibility: locate the first occurrence of a target in a sequence.
Indices are 0-based.

Two policies are provided for an absent target:
- first_index / first_index_vectorized return NOT_FOUND (None)
- first_index_strict raises TargetNotFoundError

first_index_unbounded keeps the original debugging-lesson bug: its counter
has no upper bound, so an absent target walks off the end of the sequence
and the access raises IndexError.
"""

import numpy as np
from typing import Any, Optional, Sequence

# Result for an absent target. -1 is not used: it is a valid Python index.
NOT_FOUND = None


class TargetNotFoundError(ValueError):
    """Raised by first_index_strict when the target does not occur."""

    def __init__(self, target: Any):
        super().__init__(f"target {target!r} does not occur in the sequence")
        self.target = target


def first_index_unbounded(target: Any, values: Sequence) -> int:
    """
    Return the index of the first element equal to target.

    Assumes target occurs at least once. If it does not, the scan runs
    past the last element and values[i] raises IndexError.

    Parameters
    ----------
    target : Any
        Value to search for.
    values : Sequence
        Indexable sequence.

    Returns
    -------
    int
        0-based index of the first match.
    """
    i = 0
    while values[i] != target:
        i += 1
    return i


def first_index(target: Any, values: Sequence) -> Optional[int]:
    """
    Return the index of the first element equal to target, or NOT_FOUND.

    The scan is bounded by len(values).

    Parameters
    ----------
    target : Any
        Value to search for.
    values : Sequence
        Indexable sequence.

    Returns
    -------
    int or None
        0-based index of the first match, NOT_FOUND if absent.
    """
    for i in range(len(values)):
        if values[i] == target:
            return i
    return NOT_FOUND


def first_index_strict(target: Any, values: Sequence) -> int:
    """Like first_index, but raise TargetNotFoundError when absent."""
    i = first_index(target, values)
    if i is NOT_FOUND:
        raise TargetNotFoundError(target)
    return i


def first_index_vectorized(target: Any, values: Sequence) -> Optional[int]:
    """
    Vectorized first_index: compare all elements at once.

    Only 1-D numeric sequences with a scalar target are compared as an
    array. Anything else (tuple elements, mixed types, strings) would be
    reshaped or coerced by np.asarray, so it goes through first_index.

    Parameters
    ----------
    target : Any
        Value to search for.
    values : Sequence
        Indexable sequence.

    Returns
    -------
    int or None
        0-based index of the first match, NOT_FOUND if absent.
    """
    try:
        arr = np.asarray(values)
    except ValueError:
        # ragged elements
        return first_index(target, values)
    if arr.ndim != 1 or arr.dtype.kind not in 'biufc' or np.ndim(target) != 0:
        return first_index(target, values)

    hits = np.flatnonzero(arr == target)
    if len(hits) == 0:
        return NOT_FOUND
    return int(hits[0])
