"""Element-wise equality for the value shapes the equality assertions accept."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import numpy as np


def _is_ordered_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def mappings_equal(left: Mapping, right: Mapping) -> bool:
    """Unordered key-to-value comparison; values compare with ``values_equal``."""
    if left.keys() != right.keys():
        return False
    return all(values_equal(left[key], right[key]) for key in left)


def sequences_equal(left: Sequence, right: Sequence) -> bool:
    """Ordered comparison; elements compare pairwise with ``values_equal``."""
    if len(left) != len(right):
        return False
    return all(values_equal(a, b) for a, b in zip(left, right))


def values_equal(left: Any, right: Any) -> bool:
    """Compare two values, treating None as the absent optional."""
    if left is None or right is None:
        return left is None and right is None

    if isinstance(left, np.ndarray) or isinstance(right, np.ndarray):
        return bool(np.array_equal(left, right))

    if isinstance(left, Mapping) and isinstance(right, Mapping):
        return mappings_equal(left, right)

    if _is_ordered_sequence(left) and _is_ordered_sequence(right):
        # tuple vs list is a shape mismatch, not an element mismatch
        if not (isinstance(left, type(right)) or isinstance(right, type(left))):
            return False
        return sequences_equal(left, right)

    return bool(left == right)
