"""
Function tracing decorator.

Wraps a call in enter()/leave() on the process-wide TraceManager, so the
call, its return value and any exception it raises show up as a nested
block in the deferred trace:

    >  demo.factorial 3, 3
      ...
    <  demo.factorial returned: 6
"""

import functools
import inspect
from pathlib import Path


def _short_repr(value):
    if isinstance(value, Path):
        return f"Path('{value}')"
    if isinstance(value, str) and len(value) > 50:
        return f"'{value[:47]}...'"
    if isinstance(value, (list, tuple)) and len(value) > 3:
        return f"[...{len(value)} items...]"
    return repr(value)


def trace(func):
    """Decorator to trace function calls via the TraceManager.

    The leave() line is always enqueued, including when the function
    raises; the exception is recorded on the error channel and re-raised.
    """
    try:
        params = list(inspect.signature(func).parameters)
    except (TypeError, ValueError):
        params = []
    skip_first = bool(params) and params[0] in ('self', 'cls')
    module = inspect.getmodule(func)
    module_name = module.__name__ if module else "unknown"
    name = f"{module_name}.{func.__qualname__}"

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        # Lazy import to avoid circular dependency
        from .manager import get_trace

        tr = get_trace()

        args_repr = [_short_repr(a) for a in (args[1:] if skip_first else args)]
        args_repr.extend(f"{key}={_short_repr(value)}" for key, value in kwargs.items())

        if args_repr:
            tr.enter("%s %s", name, ', '.join(args_repr))
        else:
            tr.enter("%s", name)
        outcome = ''
        try:
            result = func(*args, **kwargs)
            if result is not None:
                outcome = f"returned: {_short_repr(result)}"
            return result
        except Exception as e:
            tr.error("%s raised: %s", name, e)
            outcome = f"raised {type(e).__name__}"
            raise
        finally:
            tr.leave(outcome)

    return wrapper
