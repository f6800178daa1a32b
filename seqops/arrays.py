"""
free functions over finite, indexable sequences.

every function here is eager and leaves its input untouched; sorting lives in
`seqops.sorting` because it is the one place inputs are mutated.
"""
import builtins
import logging
from itertools import compress

import numpy as np

from .types import *

logger = logging.getLogger(__name__)

__all__ = ['filter', 'map', 'first_or_default', 'some', 'every', 'find']


def _try_numpy_filter(data: Sequence[T], predicate: Predicate[T]) -> Optional[List[T]]:
    """
    build the keep-mask with numpy for homogeneous int/float data.
    the predicate sees, and the result holds, the original python objects.
    """
    kinds = {type(x) for x in data}
    if kinds != {int} and kinds != {float}:
        return None
    try:
        mask = np.fromiter((predicate(x) for x in data), dtype=bool, count=len(data))
        # select from the originals, a rebuilt array may widen big ints to float64
        return list(compress(data, mask))
    except (TypeError, ValueError, AttributeError) as e:  # catch specific errors
        logger.debug("numpy filter fell back to python: %s", e)
        return None


def filter(sequence: Sequence[T], predicate: Predicate[T]) -> List[T]:
    """
    returns a filtered copy of the sequence.
    only elements for which the predicate is true are kept, in their original order.

        filter([12345, 123, 125], lambda x: x != 12345)  # [123, 125]
    """
    if len(sequence) == 0:
        return []
    optimized = _try_numpy_filter(sequence, predicate)
    if optimized is not None:
        return optimized
    return [x for x in sequence if predicate(x)]


def map(sequence: Sequence[T], selector: Selector[T, U]) -> List[U]:
    """
    returns a copy of the sequence with the selector applied to every element.

        map([12345, 123], str)  # ['12345', '123']
    """
    return [selector(x) for x in sequence]


def first_or_default(sequence: Sequence[T], predicate: Optional[Predicate[T]] = None,
                     default: Optional[T] = None) -> Optional[T]:
    """first element satisfying the predicate, or default. no predicate means any element."""
    for x in sequence:
        if predicate is None or predicate(x):
            return x
    return default


def some(sequence: Sequence[T], predicate: Predicate[T]) -> bool:
    """check whether any element satisfies the predicate"""
    return builtins.any(predicate(x) for x in sequence)


def every(sequence: Sequence[T], predicate: Predicate[T]) -> bool:
    """check whether all elements satisfy the predicate (true for an empty sequence)"""
    return builtins.all(predicate(x) for x in sequence)


def find(sequence: Sequence[T], predicate: Predicate[T]) -> FindResult[T]:
    """
    returns the first element satisfying the predicate together with its index.
    a miss is reported as FindResult(None, -1, False) rather than an exception;
    call .unwrap() on the result to turn it into ElementNotFound.
    """
    for i, x in enumerate(sequence):
        if predicate(x):
            return FindResult(x, i, True)
    return FindResult.not_found()
