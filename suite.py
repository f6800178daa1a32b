import sys
import time
from functools import wraps
from typing import List, Dict, Any, Callable, Type

_suite_state: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}


class _c:
    """terminal color codes."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class SuiteAssertionError(AssertionError):
    """an assertion failure, as opposed to an unexpected exception in the test body."""
    pass

# --- public api ---

def test(description: str) -> Callable:
    """register a function as a test case."""

    def decorator(func: Callable) -> Callable:
        _suite_state['tests'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise SuiteAssertionError(message)


def assert_raises(error_type: Type[BaseException], func: Callable, *args, **kwargs) -> BaseException:
    """call func and require it to raise error_type; returns the raised error."""
    try:
        func(*args, **kwargs)
    except error_type as e:
        return e
    raise SuiteAssertionError(f"expected {error_type.__name__} to be raised")


def run(title: str = "test run") -> bool:
    """run every registered test, print a report and return whether all passed."""
    print(f"\n{_c.info}--- {title} ---{_c.reset}")
    start_time = time.perf_counter()
    results = []

    for item in _suite_state['tests']:
        error = None
        try:
            item['func']()
        except SuiteAssertionError as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"

        results.append({'passed': error is None, 'description': item['description'], 'error': error})
        if error is None:
            print(f"  {_c.ok}pass{_c.reset}  {item['description']}")
        else:
            print(f"  {_c.fail}FAIL{_c.reset}  {item['description']}")
            print(f"        {_c.grey}{error}{_c.reset}")

    _suite_state['results'] = results
    # a module may run its own suite, so start the next one clean
    _suite_state['tests'] = []
    return _print_summary(start_time)


def main(title: str) -> None:
    """run the suite as a script, exiting non-zero on failure."""
    sys.exit(0 if run(title) else 1)


def _print_summary(start_time: float) -> bool:
    duration = (time.perf_counter() - start_time) * 1000
    results = _suite_state['results']
    failed = sum(1 for r in results if not r['passed'])
    color = _c.ok if failed == 0 else _c.fail

    print(f"\n{color}ran {len(results)} tests in {_c.warn}{duration:.2f}ms{color}: "
          f"{len(results) - failed} passed, {failed} failed{_c.reset}\n")
    return failed == 0
