"""
a tiny test runner. tests register with @test("description") and fail
through assert_that(). each *_test.py module can run on its own:

    python enumerable_tests/core_test.py

the same functions are plain test_* functions, so pytest collects them too.
"""
import sys
import time
from functools import wraps
from typing import Any, Callable, Dict, List, Optional

_registry: List[Dict[str, Any]] = []


class _c:
    """ansi colour codes"""
    ok = '\033[92m'
    fail = '\033[91m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class SuiteAssertionError(AssertionError):
    """raised by assert_that, kept apart from errors the code under test raises."""


def test(description: str) -> Callable:
    """decorator to register a function as a test case."""

    def decorator(func: Callable) -> Callable:
        _registry.append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise SuiteAssertionError(message)


def raises(error_type: type, func: Callable, *args, **kwargs) -> Optional[BaseException]:
    """call func and return the error it raised; fail if it raised nothing or something else."""
    try:
        func(*args, **kwargs)
    except error_type as e:
        return e
    raise SuiteAssertionError(f"expected {error_type.__name__} from {getattr(func, '__name__', func)}")


def run(title: str = "test run") -> int:
    """run every registered test, print a report and return the failure count."""
    print(f"\n{_c.info}== {title} =={_c.reset}")
    started = time.perf_counter()
    failures = 0

    for case in _registry:
        try:
            case['func']()
        except SuiteAssertionError as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"
        else:
            print(f"  {_c.ok}pass{_c.reset}  {case['description']}")
            continue
        failures += 1
        print(f"  {_c.fail}FAIL{_c.reset}  {case['description']}")
        print(f"        {_c.grey}{error}{_c.reset}")

    elapsed = (time.perf_counter() - started) * 1000
    colour = _c.ok if failures == 0 else _c.fail
    print(f"{colour}{len(_registry) - failures}/{len(_registry)} passed in {elapsed:.1f}ms{_c.reset}\n")

    # allow several suites in one interpreter
    _registry.clear()
    return failures


def main(title: str) -> None:
    sys.exit(1 if run(title) else 0)
