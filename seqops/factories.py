from .types import *
from .enumerable import Enumerable

def new(data: Iterable[T]) -> Enumerable[T]:
    """wrap a list without copying it"""
    return Enumerable(data)

def from_iterable(data: Iterable[T]) -> Enumerable[T]:
    """create enumerable from a copy of any iterable"""
    return Enumerable(list(data))

def empty() -> Enumerable[Any]:
    """create empty enumerable"""
    return Enumerable([])

# --- aliases ---
E = new
