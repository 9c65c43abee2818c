from __future__ import annotations
import math
import numbers
import typing
from ..types import *
from ..errors import InvalidArgumentError
from ..shorthand import resolve

if typing.TYPE_CHECKING:
    from ..enumerable import IEnumerable


class _StatsOperations(Generic[T]):
    def _get_values(self: 'IEnumerable[T]', selector: Optional[Matcher]) -> List[Any]:
        """helper to apply an optional selector before aggregating"""
        data = self._get_data()
        if selector is None: return list(data)
        func = resolve(selector)
        return [func(item, index) for index, item in enumerate(data)]

    def max(self: 'IEnumerable[T]', selector: Optional[Matcher] = None) -> Any:
        """
        running maximum of the values, or of selector(value, index).
        starts from -inf, so an empty sequence gives -inf.
        """
        result = -math.inf
        for value in self._get_values(selector):
            if value > result: result = value
        return result

    def min(self: 'IEnumerable[T]', selector: Optional[Matcher] = None) -> Any:
        """running minimum, +inf for an empty sequence"""
        result = math.inf
        for value in self._get_values(selector):
            if value < result: result = value
        return result

    def sum(self: 'IEnumerable[T]', selector: Optional[Matcher] = None) -> Number:
        """arithmetic sum from 0. strings and other non-numbers are rejected, never concatenated."""
        total = 0
        for value in self._get_values(selector):
            if not isinstance(value, numbers.Number):
                raise InvalidArgumentError(f"sum() needs numbers, got {type(value).__name__}: {value!r}")
            total += value
        return total

    def avg(self: 'IEnumerable[T]', selector: Optional[Matcher] = None) -> float:
        """sum / length. an empty sequence gives nan."""
        length = len(self._get_data())
        if length == 0: return math.nan
        return self.sum(selector) / length

    mean = avg
