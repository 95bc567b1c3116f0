from __future__ import annotations

import math
from typing import List, Sequence, TypeVar

T = TypeVar("T")


def sample_indices(length: int, max_points: int) -> List[int]:
    """
    Indices kept when reducing `length` items to about `max_points`.

    Every ceil(length / max_points)-th index is kept, and the last index is
    always included even when the stride does not land on it.

    :raises ValueError: if max_points < 1
    """
    if max_points < 1:
        raise ValueError(f"max_points must be >= 1, got {max_points}")
    if length <= max_points:
        return list(range(length))

    stride = math.ceil(length / max_points)
    indices = list(range(0, length, stride))
    if indices[-1] != length - 1:
        indices.append(length - 1)
    return indices


def downsample(items: Sequence[T], max_points: int) -> List[T]:
    """Fixed-stride reduction of `items`; see sample_indices."""
    return [items[i] for i in sample_indices(len(items), max_points)]
