"""Partition-based selection (quickselect).

Finds the value of a given rank without sorting the whole sequence. Average
cost is O(n); a pathological pivot sequence degrades to O(n^2), which the
default random pivot makes unlikely. The loop is iterative, so adversarial
inputs cannot exhaust the stack.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
import random
from typing import Any

from ..entities.column import compare_values

type PivotSelector = Callable[[Sequence[Any]], int]
type Comparator = Callable[[Any, Any], int]


def random_pivot(values: Sequence[Any]) -> int:
    return random.randrange(len(values))


def first_pivot(values: Sequence[Any]) -> int:
    _ = values
    return 0


def middle_pivot(values: Sequence[Any]) -> int:
    return len(values) // 2


def quickselect[T](
    values: Sequence[T],
    rank: int,
    pivot_selector: PivotSelector = random_pivot,
    compare: Comparator = compare_values,
) -> T:
    """Return the element that would sit at ``rank`` in ascending order.

    Ordering follows ``compare``; the default places NaN after every other
    value, matching ``Column.sorted_snapshot``, so the result does not depend
    on the pivot sequence.

    Args:
        values: Values to select from; left unmodified
        rank: Zero-based target rank
        pivot_selector: Returns the index of the pivot within a sequence
        compare: Three-way comparison returning a negative, zero or positive int

    Raises:
        ValueError: If ``values`` is empty
        IndexError: If ``rank`` is outside ``[0, len(values))``
    """
    if not values:
        raise ValueError("quickselect requires a non-empty sequence")
    if rank < 0 or rank >= len(values):
        raise IndexError(f"rank {rank} out of range for {len(values)} values")

    current: Sequence[T] = values
    while True:
        if len(current) == 1:
            return current[0]
        pivot = current[pivot_selector(current)]
        lows = [value for value in current if compare(value, pivot) < 0]
        highs = [value for value in current if compare(value, pivot) > 0]
        pivot_count = len(current) - len(lows) - len(highs)
        if rank < len(lows):
            current = lows
        elif rank < len(lows) + pivot_count:
            return pivot
        else:
            rank -= len(lows) + pivot_count
            current = highs
