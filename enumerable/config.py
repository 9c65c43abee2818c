from __future__ import annotations

import os
import logging
from dataclasses import dataclass, fields, replace
from typing import Any, Optional

from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)


def _env_repr_limit() -> Optional[int]:
    raw = os.environ.get("ENUMERABLE_REPR_LIMIT")
    if raw is None:
        return 100
    if raw.strip().lower() in ("", "none", "0"):
        return None
    try:
        limit = int(raw)
    except ValueError:
        raise InvalidArgumentError(f"ENUMERABLE_REPR_LIMIT must be an integer, got {raw!r}")
    _check_limit("ENUMERABLE_REPR_LIMIT", limit)
    return limit


def _check_limit(name: str, value: Any) -> None:
    # None means unlimited for both knobs
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidArgumentError(f"{name} must be a non-negative integer or None, got {value!r}")


@dataclass(frozen=True)
class Options:
    """library wide knobs. treat as read-only, change through configure()."""
    # max items rendered by to_string(); None renders everything
    repr_limit: Optional[int] = 100
    shorthand_cache_size: Optional[int] = 256


_options = Options(repr_limit=_env_repr_limit())


def get_options() -> Options:
    return _options


def configure(**changes) -> Options:
    """replace one or more options and return the new set"""
    global _options
    known = {f.name for f in fields(Options)}
    unknown = set(changes) - known
    if unknown:
        raise InvalidArgumentError(f"unknown option(s): {', '.join(sorted(unknown))}")
    for name in ('repr_limit', 'shorthand_cache_size'):
        if name in changes:
            _check_limit(name, changes[name])
    _options = replace(_options, **changes)
    logger.debug("options updated: %s", _options)
    if 'shorthand_cache_size' in changes:
        # the compiled shorthand cache is sized at build time
        from .shorthand import reset_cache
        reset_cache()
    return _options
