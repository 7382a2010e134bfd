"""
Function tracing decorator.

Logs entry, return value and raised exceptions at TRACE level on the
logger named after the function's module, only when the installed router
enables TRACE for that module.
"""

import functools
import inspect
import logging
from pathlib import Path

from .levels import TRACE_LEVEL, LevelFilter


def _short_repr(value):
    if isinstance(value, Path):
        return f"Path('{value}')"
    if isinstance(value, str) and len(value) > 50:
        return f"'{value[:47]}...'"
    if isinstance(value, list) and len(value) > 3:
        return f"[...{len(value)} items...]"
    if isinstance(value, tuple) and len(value) > 3:
        return f"(...{len(value)} items...)"
    return repr(value)


def trace(func):
    """Decorator to trace function calls through flexilog.

    Does nothing (beyond one directive lookup) unless flexilog is
    installed and TRACE is enabled for the function's module.
    """
    module = inspect.getmodule(func)
    module_name = module.__name__ if module else "unknown"
    logger = logging.getLogger(module_name)
    func_name = func.__qualname__

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        # Lazy import to avoid circular dependency
        from .manager import get_router

        router = get_router()
        if router is None or not router.enabled(LevelFilter.TRACE, module_name):
            return func(*args, **kwargs)

        args_repr = [_short_repr(arg) for arg in args]
        args_repr.extend(f"{key}={_short_repr(value)}" for key, value in kwargs.items())

        logger.log(TRACE_LEVEL, ">> %s(%s)", func_name, ', '.join(args_repr))
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            logger.log(TRACE_LEVEL, "!! %s raised: %s: %s",
                       func_name, type(e).__name__, e)
            raise

        if result is not None:
            logger.log(TRACE_LEVEL, "<< %s returned: %s", func_name, _short_repr(result))
        else:
            logger.log(TRACE_LEVEL, "<< %s", func_name)
        return result

    return wrapper
