from __future__ import annotations
import json
import typing
import numpy as np
import pandas as pd
from ..types import *
from ..config import get_options
from ..errors import InvalidArgumentError, InvalidStateError
from ..shorthand import Callback, resolve
from .set import strictly_equal

if typing.TYPE_CHECKING:
    from ..enumerable import IEnumerable


def _check_count(n: Any, op: str) -> int:
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise InvalidArgumentError(f"{op}() count must be a non-negative integer, got {n!r}")
    return n


class _TerminalOperations(Generic[T]):
    """operations that read the slot and return a value. none of them mutate."""

    # --- lookup ---

    def find(self: 'IEnumerable[T]', predicate: Optional[Matcher] = None) -> Optional[T]:
        """first element matching predicate, or None"""
        func = resolve(predicate)
        for index, item in enumerate(self._get_data()):
            if func(item, index): return item
        return None

    def find_last(self: 'IEnumerable[T]', predicate: Optional[Matcher] = None) -> Optional[T]:
        """last element matching predicate, or None. scans from the end."""
        func = resolve(predicate)
        data = self._get_data()
        for index in range(len(data) - 1, -1, -1):
            if func(data[index], index): return data[index]
        return None

    def index_of(self: 'IEnumerable[T]', value: T) -> int:
        """index of the first element strictly equal to value, or -1. True does not match 1."""
        for index, item in enumerate(self._get_data()):
            if strictly_equal(item, value): return index
        return -1

    def has(self: 'IEnumerable[T]', value: T) -> bool:
        return self.index_of(value) >= 0

    def __contains__(self: 'IEnumerable[T]', value: T) -> bool:
        return self.has(value)

    def at(self: 'IEnumerable[T]', index: int) -> Optional[T]:
        """element at index, or None when out of range. negative indices are out of range."""
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidArgumentError(f"index must be an integer, got {index!r}")
        data = self._get_data()
        return data[index] if 0 <= index < len(data) else None

    def first(self: 'IEnumerable[T]', n: Union[None, int, Matcher] = None) -> Union[Optional[T], List[T]]:
        """
        first element (None if empty), the first n elements as a new list,
        or with a callable the first element it matches.
        """
        if n is None:
            data = self._get_data()
            return data[0] if data else None
        if callable(n):
            return self.find(n)
        n = _check_count(n, 'first')
        return list(self._get_data()[:n])

    def last(self: 'IEnumerable[T]', n: Union[None, int, Matcher] = None) -> Union[Optional[T], List[T]]:
        """last element (None if empty), the last n elements, or the last match of a callable"""
        if n is None:
            data = self._get_data()
            return data[-1] if data else None
        if callable(n):
            return self.find_last(n)
        n = _check_count(n, 'last')
        data = self._get_data()
        return list(data[max(0, len(data) - n):])

    # --- predicates ---

    def all(self: 'IEnumerable[T]', predicate: Optional[Matcher] = None) -> bool:
        """true if every element matches. an empty sequence is true."""
        func = resolve(predicate)
        data = self._get_data()
        for index in range(len(data) - 1, -1, -1):
            if not func(data[index], index): return False
        return True

    every = all

    def none(self: 'IEnumerable[T]', predicate: Optional[Matcher] = None) -> bool:
        """true if no element matches. an empty sequence is true."""
        func = resolve(predicate)
        for index, item in enumerate(self._get_data()):
            if func(item, index): return False
        return True

    def any(self: 'IEnumerable[T]', predicate: Optional[Matcher] = None) -> bool:
        """true if at least one element matches"""
        func = resolve(predicate)
        for index, item in enumerate(self._get_data()):
            if func(item, index): return True
        return False

    some = any

    def count(self: 'IEnumerable[T]', predicate: Optional[Matcher] = None) -> int:
        """number of matching elements. use length() for the plain size."""
        if predicate is None:
            raise InvalidArgumentError("count() needs a predicate, use length() for the element count")
        func = resolve(predicate)
        return sum(1 for index, item in enumerate(self._get_data()) if func(item, index))

    # --- folding ---

    def reduce(self: 'IEnumerable[T]', accumulator: Accumulator, init: Any = MISSING) -> Any:
        """
        left fold with accumulator(acc, value, index).

        without init the first element seeds the fold and folding starts at
        index 1. None is a valid init. the accumulator must be a callable;
        shorthand strings and matchers only take one value.
        """
        fn = accumulator.fn if isinstance(accumulator, Callback) else accumulator
        if not callable(fn):
            raise InvalidArgumentError(f"reduce() needs a callable accumulator, got {type(fn).__name__}")
        func = resolve(fn, arity=3)
        data = self._get_data()
        start = 0
        if init is MISSING:
            if not data: raise InvalidStateError("cannot reduce an empty sequence without an initial value")
            init, start = data[0], 1
        acc = init
        for index in range(start, len(data)):
            acc = func(acc, data[index], index)
        return acc

    # --- views and conversions ---

    def value(self: 'IEnumerable[T]') -> List[T]:
        """the live slot list. mutating it directly bypasses the host."""
        return self._get_data()

    array = value
    to_json = value
    value_of = value

    def length(self: 'IEnumerable[T]') -> int:
        return len(self._get_data())

    size = length

    def __len__(self: 'IEnumerable[T]') -> int:
        return self.length()

    def __iter__(self: 'IEnumerable[T]') -> Iterator[T]:
        return iter(self._get_data())

    def to_list(self: 'IEnumerable[T]') -> List[T]:
        """a shallow copy of the slot"""
        return list(self._get_data())

    def to_numpy(self: 'IEnumerable[T]') -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._get_data())

    def to_series(self: 'IEnumerable[T]', name: Optional[str] = None) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._get_data(), name=name)

    def to_frame(self: 'IEnumerable[T]') -> pd.DataFrame:
        """convert records (dicts, dataclasses, tuples) to a pandas dataframe"""
        return pd.DataFrame(self._get_data())

    # --- diagnostics ---

    def to_string(self: 'IEnumerable[T]') -> str:
        """
        '[Enumerable [1,2,3]]'. for diagnostics only, the format is not stable.
        values json cannot encode are rendered with repr(); slots json cannot
        walk at all (non-string keys, cycles) fall back to repr() of the list.
        """
        data = self._get_data()
        limit = get_options().repr_limit
        shown = data if limit is None or len(data) <= limit else list(data[:limit]) + ['...']
        try:
            body = json.dumps(shown, separators=(',', ':'), default=repr)
        except (TypeError, ValueError):
            body = repr(shown)
        return f"[{type(self).__name__} {body}]"

    inspect = to_string

    def __repr__(self) -> str:
        return self.to_string()

    def __str__(self) -> str:
        return self.to_string()
