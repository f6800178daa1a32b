from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Sequence, MutableSequence
)

T = TypeVar('T')
U = TypeVar('U')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
# comparator(a, b) is true when a may be placed before (or level with) b
Comparator = Callable[[T, T], bool]


class ElementNotFound(ValueError):
    """raised when no element satisfies the condition"""

    def __init__(self, message: str = "no element satisfies the condition"):
        super().__init__(message)


class FindResult(Generic[T]):
    """outcome of a linear search: the element, its index and whether anything matched"""

    __slots__ = ('element', 'index', 'found')

    def __init__(self, element: Optional[T], index: int, found: bool):
        self.element = element
        self.index = index
        self.found = found

    @classmethod
    def not_found(cls) -> 'FindResult[T]':
        return cls(None, -1, False)

    def unwrap(self) -> T:
        """return the element, raising ElementNotFound on a miss"""
        if not self.found:
            raise ElementNotFound()
        return self.element

    def __bool__(self) -> bool:
        return self.found

    def __iter__(self) -> Iterator[Any]:
        # allows `element, index, found = find(...)`
        return iter((self.element, self.index, self.found))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, FindResult):
            return NotImplemented
        return (self.element, self.index, self.found) == (other.element, other.index, other.found)

    def __repr__(self) -> str:
        if not self.found:
            return "FindResult(not found)"
        return f"FindResult(element={self.element!r}, index={self.index})"
