from __future__ import annotations
import re
import typing
from ..types import *
from ..errors import InvalidArgumentError
from ..shorthand import resolve

if typing.TYPE_CHECKING:
    from ..enumerable import IEnumerable


class _CoreOperations(Generic[T]):
    """
    operations that replace the slot contents (or append to it) and return
    the host so calls can be chained:

        coll.select('active').map('name').array()

    the new contents are built completely before they are committed, so a
    callback that raises leaves the slot as it was.
    """

    def each(self: 'IEnumerable[T]', fn: Union[Callable[..., Any], str], *args: Any) -> 'IEnumerable[T]':
        """
        invoke fn(value, index) for every element. a string names a method
        the elements expose; it is called on each element with *args.
        """
        data = self._get_data()
        if isinstance(fn, str):
            for item in list(data):
                getattr(item, fn)(*args)
            return self
        func = resolve(fn)
        for index, item in enumerate(list(data)):
            func(item, index)
        return self

    def map(self: 'IEnumerable[T]', selector: Optional[Matcher] = None) -> 'IEnumerable[U]':
        """replace each element with selector(value, index)"""
        func = resolve(selector)
        return self._commit([func(item, index) for index, item in enumerate(self._get_data())], 'map')

    def select(self: 'IEnumerable[T]', predicate: Optional[Matcher] = None) -> 'IEnumerable[T]':
        """keep the elements for which predicate(value, index) is truthy"""
        func = resolve(predicate)
        return self._commit([item for index, item in enumerate(self._get_data()) if func(item, index)], 'select')

    filter = select

    def reject(self: 'IEnumerable[T]', predicate: Optional[Matcher] = None) -> 'IEnumerable[T]':
        """drop the elements for which predicate is truthy; no predicate means compact()"""
        if predicate is None:
            return self.compact()
        func = resolve(predicate)
        return self._commit([item for index, item in enumerate(self._get_data()) if not func(item, index)], 'reject')

    def compact(self: 'IEnumerable[Optional[T]]') -> 'IEnumerable[T]':
        """drop None. falsy values like 0, False and '' stay."""
        return self._commit([item for item in self._get_data() if item is not None], 'compact')

    def grep(self: 'IEnumerable[T]', pattern: Union[str, re.Pattern], flags: int = 0) -> 'IEnumerable[T]':
        """keep the elements whose string form matches the regular expression"""
        if isinstance(pattern, str):
            pattern = re.compile(pattern, flags)
        elif not isinstance(pattern, re.Pattern):
            raise InvalidArgumentError(f"grep needs a pattern, got {type(pattern).__name__}")
        return self._commit([item for item in self._get_data() if pattern.search(str(item))], 'grep')

    def in_groups_of(self: 'IEnumerable[T]', n: int) -> 'IEnumerable[List[T]]':
        """
        split the slot into consecutive groups of n. the last group holds the
        remainder when the length is not a multiple of n.

            [1, 2, 3, 4, 5] -> [[1, 2], [3, 4], [5]]
        """
        if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
            raise InvalidArgumentError(f"group size must be a positive integer, got {n!r}")
        data = self._get_data()
        return self._commit([data[i:i + n] for i in range(0, len(data), n)], 'in_groups_of')

    def push(self: 'IEnumerable[T]', *values: T) -> 'IEnumerable[T]':
        """append values in order"""
        data = self._get_data()
        data.extend(values)
        # hosts that compute their slot on read only see the append through the setter
        self._set_data(data)
        return self

    add = push
