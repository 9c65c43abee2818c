import re
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Mapping
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')

# every resolved argument is called as fn(value, index)
IndexedFunc = Callable[[T, int], U]
Predicate = Callable[..., bool]
Selector = Callable[..., U]
Accumulator = Callable[..., U]

# what an operation accepts in place of a callable
Matcher = Union[Callable[..., Any], str, re.Pattern, Mapping[str, Any]]

Number = Union[int, float]


class _Missing:
    """marks an omitted optional argument where None is a legal value"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool: return False

    def __repr__(self) -> str: return "MISSING"


MISSING: Any = _Missing()
