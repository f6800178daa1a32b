"""
comparison sorts driven by a boolean "may precede" relation.

comparator(a, b) is true when a may be placed before, or level with, b.
`lambda a, b: a <= b` sorts ascending and `lambda a, b: a >= b` sorts descending,
whichever algorithm is used.
"""
import logging
from functools import cmp_to_key

from .types import *

logger = logging.getLogger(__name__)

__all__ = ['sort', 'quick_sort', 'partition', 'comparator_to_key', 'SORT_ALGORITHMS']


def comparator_to_key(comparator: Comparator[T]) -> Callable[[T], Any]:
    """
    adapt a boolean comparator to a sort key.
    works for strict (a < b) and non-strict (a <= b) relations alike: pairs the
    comparator cannot tell apart compare equal.
    """
    def three_way(a: T, b: T) -> int:
        a_first = comparator(a, b)
        b_first = comparator(b, a)
        if a_first and not b_first: return -1
        if b_first and not a_first: return 1
        return 0
    return cmp_to_key(three_way)


def partition(sequence: MutableSequence[T], lo: int, hi: int, comparator: Comparator[T]) -> int:
    """
    lomuto partition of sequence[lo:hi + 1] around the pivot sequence[hi].
    returns the pivot's final index.
    """
    pivot = sequence[hi]
    boundary = lo - 1
    for i in range(lo, hi):
        if comparator(sequence[i], pivot):
            boundary += 1
            sequence[i], sequence[boundary] = sequence[boundary], sequence[i]
    boundary += 1
    sequence[hi], sequence[boundary] = sequence[boundary], sequence[hi]
    return boundary


def quick_sort(sequence: MutableSequence[T], comparator: Comparator[T],
               lo: int = 0, hi: Optional[int] = None) -> MutableSequence[T]:
    """
    in-place quicksort of sequence[lo:hi + 1]; returns the same sequence.
    last element as pivot, no randomisation, so sorted input is the o(n^2) case.
    not stable.
    """
    if hi is None:
        hi = len(sequence) - 1
    # recurse into the smaller side and loop over the larger one to keep the stack o(log n)
    while lo < hi:
        p = partition(sequence, lo, hi, comparator)
        if p - lo < hi - p:
            quick_sort(sequence, comparator, lo, p - 1)
            lo = p + 1
        else:
            quick_sort(sequence, comparator, p + 1, hi)
            hi = p - 1
    return sequence


def _library_sort(sequence: MutableSequence[T], comparator: Comparator[T]) -> MutableSequence[T]:
    """stable sort using python's built-in timsort"""
    key = comparator_to_key(comparator)
    if isinstance(sequence, list):
        sequence.sort(key=key)
        return sequence
    # write back by index, not every mutable sequence takes slice assignment (deque)
    for i, x in enumerate(sorted(sequence, key=key)):
        sequence[i] = x
    return sequence


SORT_ALGORITHMS: Dict[str, Callable[[MutableSequence[Any], Comparator[Any]], MutableSequence[Any]]] = {
    'library': _library_sort,
    'quick': quick_sort,
}


def sort(sequence: MutableSequence[T], comparator: Comparator[T],
         algorithm: str = 'library') -> MutableSequence[T]:
    """
    sorts the sequence in place and returns it.

        sort(values, lambda a, b: a >= b)  # descending
    """
    try:
        impl = SORT_ALGORITHMS[algorithm]
    except KeyError:
        raise ValueError(f"unknown sort algorithm: '{algorithm}'") from None
    logger.debug("sorting %d elements with the %s algorithm", len(sequence), algorithm)
    return impl(sequence, comparator)
