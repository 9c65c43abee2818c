import typing
from .types import *

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable

def from_iterable(data: Iterable[T]) -> 'Enumerable[T]':
    """create enumerable holding a copy of the iterable"""
    from .enumerable import Enumerable
    return Enumerable(data)

def wrap(data: List[T]) -> 'Enumerable[T]':
    """
    use an existing list as the slot without copying it. operations that
    replace the slot swap in a new list, appends go to the original.
    """
    from .enumerable import Enumerable
    host = Enumerable()
    host._set_data(data)
    return host

def from_range(start: int, count: int) -> 'Enumerable[int]':
    """create enumerable of `count` consecutive integers"""
    from .enumerable import Enumerable
    return Enumerable(range(start, start + count))

def repeat(item: T, count: int) -> 'Enumerable[T]':
    """create enumerable with repeated item"""
    from .enumerable import Enumerable
    return Enumerable([item] * count)

def empty() -> 'Enumerable[Any]':
    """create empty enumerable"""
    from .enumerable import Enumerable
    return Enumerable()

# --- aliases ---
E = from_iterable
