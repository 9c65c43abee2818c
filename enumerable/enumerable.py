from __future__ import annotations

import copy
import logging
from abc import ABC, abstractmethod
from .types import *

# --- operation sets ---
from .extensions.core import _CoreOperations
from .extensions.set import _SetOperations
from .extensions.terminal import _TerminalOperations
from .extensions.stats import _StatsOperations

logger = logging.getLogger(__name__)

# --- capability interface ---

class IEnumerable(ABC, Generic[T]):
    """
    anything that owns one ordered sequence slot. the operation sets only
    ever touch the slot through these two accessors.
    """

    @abstractmethod
    def _get_data(self) -> List[T]:
        """get the slot contents as a list"""
        pass

    @abstractmethod
    def _set_data(self, data: List[T]) -> None:
        """replace the slot contents"""
        pass

    def _commit(self, data: List[Any], op: str) -> 'IEnumerable[Any]':
        """replace the slot with a fully built list and hand back the host for chaining"""
        logger.debug("%s: %s replaced slot (%d -> %d items)",
                     type(self).__name__, op, len(self._get_data()), len(data))
        self._set_data(data)
        return self

    def fork(self) -> 'IEnumerable[T]':
        """
        a new host of the same type holding a shallow copy of the slot.
        transforming operations mutate in place; fork first to keep the original:

            evens = nums.fork().select(lambda n: n % 2 == 0)
        """
        twin = copy.copy(self)
        twin._set_data(list(self._get_data()))
        return twin

    clone = fork


class EnumerableMixin(
    IEnumerable[T],
    _CoreOperations[T],
    _SetOperations[T],
    _TerminalOperations[T],
    _StatsOperations[T],
):
    """
    the full operation set. subclass it and implement _get_data/_set_data
    to make any domain object enumerable:

        class Range(EnumerableMixin[int]):
            def __init__(self, start, stop):
                self.start, self.stop, self._items = start, stop, None

            def _get_data(self):
                if self._items is None:
                    self._items = list(range(self.start, self.stop + 1))
                return self._items

            def _set_data(self, data):
                self._items = data
    """


# --- list backed host ---

class Enumerable(EnumerableMixin[T]):
    """a plain host whose slot is a list it owns."""

    def __init__(self, data: Optional[Iterable[T]] = None):
        self._data: List[T] = list(data) if data is not None else []

    def _get_data(self) -> List[T]:
        return self._data

    def _set_data(self, data: List[T]) -> None:
        self._data = data

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, IEnumerable):
            return self._get_data() == other._get_data()
        return NotImplemented

    __hash__ = None


# --- attribute backed host ---

class SlotEnumerable(EnumerableMixin[T]):
    """
    makes an existing attribute the slot. name it with __enumerable_slot__:

        class Playlist(SlotEnumerable):
            __enumerable_slot__ = 'tracks'

            def __init__(self, title, tracks):
                self.title = title
                self.tracks = list(tracks)
    """
    __enumerable_slot__: str = 'items'

    def _get_data(self) -> List[T]:
        data = getattr(self, self.__enumerable_slot__, None)
        if data is None:
            data = []
            setattr(self, self.__enumerable_slot__, data)
        return data

    def _set_data(self, data: List[T]) -> None:
        setattr(self, self.__enumerable_slot__, data)
