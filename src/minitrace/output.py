"""Module-level trace functions for minitrace.

Thin wrappers that forward to the process-wide TraceManager, so call
sites can trace without holding a manager reference. The manager is
created on first use (or by init_trace()) and drains at interpreter exit.

Also re-exports the trace_lib public API for convenience imports.
"""

# Re-export trace_lib public API
from minitrace.lib.trace_lib import (                 # noqa: F401
    TraceManager, init_trace, get_trace,
    Severity, TraceHandler, format_message,
    trace,
)


def log(*args):
    """Queue an informational message."""
    get_trace().log(*args)


def warn(*args):
    """Queue a warning (stderr by default)."""
    get_trace().warn(*args)


def error(*args):
    """Queue an error (stderr by default)."""
    get_trace().error(*args)


def ignore(*args, **kwargs):
    """Swallow trace arguments; swap in for log() to silence a call site."""


def indent(*args):
    """Queue an optional message, then indent subsequent messages."""
    get_trace().indent(*args)


group = indent


def unindent():
    get_trace().unindent()


group_end = unindent
groupEnd = unindent


def enter(*args):
    """Queue an optional message and open a named scope."""
    get_trace().enter(*args)


def leave(*args):
    """Close the innermost scope, labelled with its name."""
    get_trace().leave(*args)


def scope(*args):
    """Context manager pairing enter(*args) with a guaranteed leave()."""
    return get_trace().scope(*args)


def flush():
    """Print everything queued so far. Returns the number of messages."""
    return get_trace().flush()


def close():
    """Flush and detach the exit hook of the process-wide manager."""
    get_trace().close()
