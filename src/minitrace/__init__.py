"""minitrace — deferred console tracing.

log/warn/error/enter/leave calls are queued and printed, indented and
optionally colored, when the interpreter exits.

    import minitrace as tr

    tr.enter("main")
    try:
        tr.log("%d! = %d", 3, 6)
    finally:
        tr.leave()
"""

from minitrace._version import __version__, __app_name__
from minitrace.output import (
    log, warn, error, ignore,
    indent, group, unindent, group_end, groupEnd,
    enter, leave, scope, flush, close,
    trace, init_trace, get_trace, TraceManager, TraceHandler, Severity,
)

__all__ = [
    "__version__", "__app_name__",
    "log", "warn", "error", "ignore",
    "indent", "group", "unindent", "group_end", "groupEnd",
    "enter", "leave", "scope", "flush", "close",
    "trace", "init_trace", "get_trace", "TraceManager", "TraceHandler", "Severity",
]
