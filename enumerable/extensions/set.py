from __future__ import annotations
import numbers
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import IEnumerable


def _kind(value: Any) -> Any:
    # bools never equal numbers; ints, floats and other numbers compare by value
    if isinstance(value, bool):
        return bool
    if isinstance(value, numbers.Number):
        return numbers.Number
    return type(value)


def strictly_equal(a: Any, b: Any) -> bool:
    """equality that does not cross kinds: 1 == 1.0, but 1 != True and 0 != False"""
    return a is b or (_kind(a) is _kind(b) and a == b)


def dedupe(data: Iterable[T]) -> List[T]:
    """drop strictly equal repeats, keeping the first occurrence of each in order."""
    result, seen, unhashable = [], set(), []
    for item in data:
        try:
            key = (_kind(item), item)
            if key in seen: continue
            seen.add(key)
        except TypeError:
            # unhashable values (lists, dicts) need a linear scan
            if any(strictly_equal(item, other) for other in unhashable): continue
            unhashable.append(item)
        result.append(item)
    return result


class _SetOperations(Generic[T]):
    def unique(self: 'IEnumerable[T]') -> 'IEnumerable[T]':
        """keep the first occurrence of each strictly distinct value, in order"""
        return self._commit(dedupe(self._get_data()), 'unique')
