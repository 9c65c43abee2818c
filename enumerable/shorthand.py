"""
turns the loose arguments operations accept into one concrete callable.

an operation argument is either a callback or a shorthand string. shorthands
come in two shapes:

    'name.first'     reads a (nested) property off each value
    'age > 20'       compares a property against a literal
    '> 20'           compares the value itself

property paths walk mapping keys, attributes and integer sequence indices.
a missing step reads as None rather than raising, so 'address.city' on a
record without an address is simply None. a step that lands on a method
calls it with no arguments: 'name.upper'.
"""
from __future__ import annotations

import ast
import inspect
import logging
import operator
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Callable, Optional, Tuple

from .config import get_options
from .errors import InvalidArgumentError
from .types import IndexedFunc

logger = logging.getLogger(__name__)

_EXPRESSION = re.compile(
    r'^\s*(?P<path>[^\s=!<>]*)\s*'
    r'(?:(?P<op>===|!==|==|!=|>=|<=|>|<)\s*(?P<literal>.*?))?\s*$'
)

_OPERATORS = {
    '==': operator.eq,
    '===': operator.eq,
    '!=': operator.ne,
    '!==': operator.ne,
    '>': operator.gt,
    '>=': operator.ge,
    '<': operator.lt,
    '<=': operator.le,
}

_WORD_LITERALS = {'true': True, 'false': False, 'null': None, 'undefined': None, 'None': None}


# --- argument variants ---

@dataclass(frozen=True)
class Callback:
    """an explicit callable argument"""
    fn: Callable[..., Any]


@dataclass(frozen=True)
class Shorthand:
    """a parsed shorthand: property path plus an optional comparison"""
    path: Tuple[str, ...]
    op: Optional[str] = None
    literal: Any = None

    @property
    def is_comparison(self) -> bool: return self.op is not None


def _parse_literal(text: str) -> Any:
    if text in _WORD_LITERALS:
        return _WORD_LITERALS[text]
    try:
        return ast.literal_eval(text)
    except (ValueError, SyntaxError):
        # bare words compare as strings: "role == admin"
        return text


def parse(text: str) -> Shorthand:
    """parse a shorthand string into its path and comparison parts"""
    match = _EXPRESSION.match(text)
    if match is None:
        raise InvalidArgumentError(f"cannot parse shorthand {text!r}")

    raw_path, op, raw_literal = match.group('path'), match.group('op'), match.group('literal')
    if not raw_path and op is None:
        raise InvalidArgumentError("empty shorthand")
    if op is not None and not raw_literal:
        raise InvalidArgumentError(f"shorthand {text!r} is missing a value after {op!r}")

    path = tuple(raw_path.split('.')) if raw_path else ()
    if any(segment == '' for segment in path):
        raise InvalidArgumentError(f"malformed property path in {text!r}")

    literal = _parse_literal(raw_literal) if op is not None else None
    return Shorthand(path, op, literal)


# --- property access ---

def get_path(value: Any, path: Tuple[str, ...]) -> Any:
    """
    read a property path off a value; missing steps give None. a step that
    lands on a method is called with no arguments, so 'name.upper' reads
    the upper-cased name.
    """
    for segment in path:
        if value is None:
            return None
        if isinstance(value, Mapping):
            value = value.get(segment)
        elif segment.isdigit() and isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
            index = int(segment)
            value = value[index] if index < len(value) else None
        else:
            value = getattr(value, segment, None)
            if inspect.ismethod(value) or inspect.isbuiltin(value):
                value = value()
    return value


def _compare(op: str, left: Any, right: Any) -> bool:
    try:
        return bool(_OPERATORS[op](left, right))
    except TypeError:
        # unorderable pairs (None > 20, 'a' < 3) are simply not a match
        return False


def _build(shorthand: Shorthand) -> IndexedFunc:
    path = shorthand.path
    if not shorthand.is_comparison:
        return lambda value, index=None: get_path(value, path)
    op, literal = shorthand.op, shorthand.literal
    return lambda value, index=None: _compare(op, get_path(value, path), literal)


def _compile_text(text: str) -> IndexedFunc:
    shorthand = parse(text)
    logger.debug("compiled shorthand %r -> %s", text, shorthand)
    return _build(shorthand)


_compile_cached = lru_cache(maxsize=get_options().shorthand_cache_size)(_compile_text)


def reset_cache() -> None:
    """drop compiled shorthands and resize the cache from the current options"""
    global _compile_cached
    _compile_cached = lru_cache(maxsize=get_options().shorthand_cache_size)(_compile_text)


def compile_shorthand(text: str) -> IndexedFunc:
    return _compile_cached(text)


# --- matchers beyond plain strings ---

def _matches(actual: Any, expected: Any) -> bool:
    if isinstance(expected, Mapping):
        return all(_matches(get_path(actual, tuple(key.split('.'))), sub) for key, sub in expected.items())
    if isinstance(expected, re.Pattern):
        return actual is not None and expected.search(str(actual)) is not None
    return actual == expected


def _from_mapping(expected: Mapping) -> IndexedFunc:
    expected = dict(expected)
    return lambda value, index=None: _matches(value, expected)


def _from_pattern(pattern: re.Pattern) -> IndexedFunc:
    return lambda value, index=None: pattern.search(str(value)) is not None


# --- callables ---

def _positional_capacity(fn: Callable, arity: int) -> float:
    if isinstance(fn, type) and fn.__module__ == 'builtins':
        # str, int, float ... convert the value alone
        return arity - 1
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        # builtins without introspectable signatures get the value arguments only
        return arity - 1

    capacity = 0
    for param in signature.parameters.values():
        if param.kind == param.VAR_POSITIONAL:
            return float('inf')
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            capacity += 1
    return capacity


def adapt(fn: Callable, arity: int = 2) -> Callable:
    """
    make fn callable with `arity` positional arguments.

    callbacks may take fewer arguments than an operation supplies: a map
    callback can be `lambda v: ...` or `lambda v, i: ...`. trailing arguments
    the callback does not accept are dropped.
    """
    capacity = _positional_capacity(fn, arity)
    if capacity >= arity:
        return fn
    keep = int(capacity)
    return lambda *args: fn(*args[:keep])


def resolve(arg: Any, arity: int = 2) -> Callable:
    """turn an operation argument into a function called as fn(value, index)"""
    if isinstance(arg, Callback):
        arg = arg.fn
    if isinstance(arg, str):
        return compile_shorthand(arg)
    if isinstance(arg, Shorthand):
        return _build(arg)
    if isinstance(arg, re.Pattern):
        return _from_pattern(arg)
    if isinstance(arg, Mapping):
        return _from_mapping(arg)
    if callable(arg):
        return adapt(arg, arity)
    if arg is None:
        raise InvalidArgumentError("a callback or shorthand string is required")
    raise InvalidArgumentError(f"cannot build a function from {type(arg).__name__}")
