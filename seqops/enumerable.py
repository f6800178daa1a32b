from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    @abstractmethod
    def _get_data(self) -> List[T]:
        """get the underlying data as a list"""
        pass

# --- base enumerable implementation ---

class _BaseEnumerable(IEnumerable[T]):
    def __init__(self, data: Iterable[T]):
        """wrap a list as-is; any other iterable is materialised once"""
        self._data: List[T] = data if isinstance(data, list) else list(data)

    def _get_data(self) -> List[T]:
        return self._data

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __len__(self) -> int:
        return self.to.count()

    def __repr__(self) -> str:
        return f"Enumerable({self._data!r})"

# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _CoreOperations[T]
):
    """a chainable wrapper owning one sequence; every sequence-producing call returns a new wrapper."""
    def __init__(self, data: Iterable[T]):
        super().__init__(data)
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)
