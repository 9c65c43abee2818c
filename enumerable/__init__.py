"""
eager, chainable collection operations for any object that owns a list.

    >>> from enumerable import E
    >>> E(range(1, 11)).select(lambda n: n % 2 == 0).map(lambda n: n * n).array()
    [4, 16, 36, 64, 100]
"""
import logging

# expose the host classes
from .enumerable import IEnumerable, EnumerableMixin, Enumerable, SlotEnumerable

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    wrap,
    repeat,
    empty,
    E
)

# expose argument resolution and the error types
from .shorthand import Callback, Shorthand, resolve, parse as parse_shorthand
from .extensions.set import dedupe
from .errors import EnumerableError, InvalidArgumentError, InvalidStateError
from .config import Options, configure, get_options
from .types import MISSING

logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "IEnumerable",
    "EnumerableMixin",
    "Enumerable",
    "SlotEnumerable",
    "from_iterable",
    "from_range",
    "wrap",
    "repeat",
    "empty",
    "E",
    "Callback",
    "Shorthand",
    "resolve",
    "parse_shorthand",
    "dedupe",
    "EnumerableError",
    "InvalidArgumentError",
    "InvalidStateError",
    "Options",
    "configure",
    "get_options",
    "MISSING",
]
