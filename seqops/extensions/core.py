from __future__ import annotations
import typing
from .. import arrays, sorting
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class _CoreOperations(Generic[T]):
    def value(self: 'Enumerable[T]') -> List[T]:
        """the wrapped list itself, not a copy"""
        return self._get_data()

    def filter(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """filter elements based on a predicate"""
        from ..enumerable import Enumerable
        return Enumerable(arrays.filter(self._get_data(), predicate))

    def map(self: 'Enumerable[T]', selector: Selector[T, U]) -> 'Enumerable[U]':
        """project each element to a new form"""
        from ..enumerable import Enumerable
        return Enumerable(arrays.map(self._get_data(), selector))

    def sort(self: 'Enumerable[T]', comparator: Comparator[T], algorithm: str = 'library') -> 'Enumerable[T]':
        """
        sort a copy of the elements; this enumerable and any list obtained
        from value() keep their order.
        """
        from ..enumerable import Enumerable
        # copy first, the free function sorts in place
        data = list(self._get_data())
        return Enumerable(sorting.sort(data, comparator, algorithm))

    def first_or_default(self: 'Enumerable[T]', predicate: Optional[Predicate[T]] = None,
                         default: Optional[T] = None) -> Optional[T]:
        """get first matching element or default"""
        return arrays.first_or_default(self._get_data(), predicate, default)

    def first(self: 'Enumerable[T]', predicate: Optional[Predicate[T]] = None) -> T:
        """get first matching element, raising ElementNotFound when there is none"""
        data = self._get_data()
        if predicate is None:
            if not data: raise ElementNotFound("sequence contains no elements")
            return data[0]
        return arrays.find(data, predicate).unwrap()

    def some(self: 'Enumerable[T]', predicate: Predicate[T]) -> bool:
        """check if any element satisfies condition"""
        return arrays.some(self._get_data(), predicate)

    def every(self: 'Enumerable[T]', predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition"""
        return arrays.every(self._get_data(), predicate)

    def find(self: 'Enumerable[T]', predicate: Predicate[T]) -> FindResult[T]:
        """first matching element and its index"""
        return arrays.find(self._get_data(), predicate)
