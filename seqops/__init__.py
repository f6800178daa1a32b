"""
'    ____  ___  ___    ___   ____   ____
'   / ___)/ __)/ _ \  / _ \ |  _ \ / ___)
'   \___ \> _)( (_) )( (_) )| |_) )\___ \
'   (____/\___)\__\_) \___/ |  __/ (____/
'                           |_|
"""

# expose the main class
from .enumerable import Enumerable

# expose the free functions
from .arrays import (
    filter,
    map,
    first_or_default,
    some,
    every,
    find
)
from .sorting import (
    sort,
    quick_sort,
    partition,
    comparator_to_key,
    SORT_ALGORITHMS
)

# expose the factory functions
from .factories import (
    new,
    from_iterable,
    empty,
    E
)

# expose supporting types
from .types import (
    FindResult,
    ElementNotFound
)

# define what `import *` does
__all__ = [
    "Enumerable",
    "filter",
    "map",
    "first_or_default",
    "some",
    "every",
    "find",
    "sort",
    "quick_sort",
    "partition",
    "comparator_to_key",
    "SORT_ALGORITHMS",
    "new",
    "from_iterable",
    "empty",
    "E",
    "FindResult",
    "ElementNotFound"
]
