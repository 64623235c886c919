"""
TraceManager: the deferred trace queue and its nesting state.

Central coordinator for trace output. Each call formats its arguments,
stamps the result with the current indentation width and appends it to
the queue. Nothing reaches the console until the queue is drained, which
happens once at interpreter exit (atexit) for the process-wide manager,
or whenever the owner calls flush()/close().

Nesting:
    enter("parse file=%s", path)    >  parse file=a.txt
        log("3 sections")             3 sections
    leave("ok")                     <  parse ok

The first word of every enter() message is pushed on a scope stack and
reused to label the matching leave() line. Callers keep enter/leave
balanced on error paths with try/finally, the scope() context manager, or
the @trace decorator; the manager itself never catches exceptions.

Concurrency: every operation holds one re-entrant lock. flush() drains a
snapshot of the queue; anything enqueued afterwards waits for the next
flush or the exit hook.
"""

import atexit
import threading
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional, TextIO

from .formatter import format_message
from .indentation import DEFAULT_UNIT, IndentationTracker, ScopeStack, join_name, scope_name
from .levels import Severity
from .messages import Message, MessageQueue
from .printer import IMMEDIATE_STYLES, Printer
from .probe import CapabilityProbe


class TraceManager:
    """Deferred, indented trace output.

    Usage::

        tr = TraceManager(colorize=True)
        tr.enter("factorial value=%d", 3)
        try:
            tr.log("calculating (%d-1)!", 3)
        finally:
            tr.leave("result=%d", 6)
        tr.flush()

    Args:
        indent_size: Spaces per nesting level
        colorize: Style lines with ANSI colors when the terminal supports it
        deferred: Queue messages until flush (False prints at call time)
        routes: Severity -> 'stdout' | 'stderr' overrides
        stdout: Explicit stdout stream (default: sys.stdout at print time)
        stderr: Explicit stderr stream (default: sys.stderr at print time)
        probe: Capability probe used for color decisions
        exit_hook: Register flush() to run at interpreter exit
    """

    def __init__(
        self,
        indent_size: int = DEFAULT_UNIT,
        colorize: bool = False,
        deferred: bool = True,
        routes: Optional[Dict[Severity, str]] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        probe: Optional[CapabilityProbe] = None,
        exit_hook: bool = False,
    ):
        self.indentation = IndentationTracker(indent_size)
        self.scopes = ScopeStack()
        self.queue = MessageQueue()
        self.deferred = deferred
        self.printer = Printer(
            routes=routes,
            stdout=stdout,
            stderr=stderr,
            colorize=colorize,
            probe=probe,
            styles=None if deferred else IMMEDIATE_STYLES,
        )
        self._lock = threading.RLock()
        self._exit_hook = False
        if exit_hook:
            self.register_exit_hook()

    # -- queue ---------------------------------------------------------------

    def write(self, text: str, severity: Severity = Severity.INFO) -> None:
        """Enqueue text at the current width (or print it when not deferred)."""
        with self._lock:
            message = Message(text, self.indentation.width, severity)
            if self.deferred:
                self.queue.append(message)
            else:
                self.printer.print_messages([message], header=False)

    def log(self, *args: Any) -> None:
        self.write(format_message(*args), Severity.INFO)

    def warn(self, *args: Any) -> None:
        self.write(format_message(*args), Severity.WARNING)

    def error(self, *args: Any) -> None:
        self.write(format_message(*args), Severity.ERROR)

    def ignore(self, *args: Any, **kwargs: Any) -> None:
        """Accept trace arguments and do nothing with them."""

    # -- nesting -------------------------------------------------------------

    def indent(self, *args: Any) -> None:
        """Log an optional message, then increase the indentation."""
        with self._lock:
            if args:
                self.log(*args)
            self.indentation.increase()

    group = indent

    def unindent(self) -> None:
        """Decrease the indentation (clamped at zero)."""
        with self._lock:
            self.indentation.decrease()

    group_end = unindent
    groupEnd = unindent

    @property
    def open_marker(self) -> str:
        return '>' + ' ' * (self.indentation.unit - 1)

    @property
    def close_marker(self) -> str:
        return '<' + ' ' * (self.indentation.unit - 1)

    def enter(self, *args: Any) -> None:
        """Log an optional message, remember its first word, indent."""
        with self._lock:
            message = format_message(*args)
            self.scopes.push(scope_name(message))
            if args:
                self.write(self.open_marker + message)
            self.indentation.increase()

    def leave(self, *args: Any) -> None:
        """Unindent, then log the entered scope name plus an optional message."""
        with self._lock:
            message = format_message(*args)
            self.indentation.decrease()
            name = self.scopes.pop()
            self.write(self.close_marker + join_name(name, message))

    @contextmanager
    def scope(self, *args: Any) -> Iterator["TraceManager"]:
        """enter(*args) on entry, leave() on exit, even when the body raises."""
        self.enter(*args)
        try:
            yield self
        finally:
            self.leave()

    # -- lifecycle -----------------------------------------------------------

    def flush(self) -> int:
        """Print every pending message now.

        Returns:
            Number of messages printed (0 leaves the console untouched).
        """
        with self._lock:
            messages = self.queue.drain()
            return self.printer.print_messages(messages)

    def close(self) -> None:
        """Flush and drop the exit hook. Safe to call more than once."""
        self.flush()
        self.unregister_exit_hook()

    def register_exit_hook(self) -> None:
        with self._lock:
            if not self._exit_hook:
                atexit.register(self.flush)
                self._exit_hook = True

    def unregister_exit_hook(self) -> None:
        with self._lock:
            if self._exit_hook:
                atexit.unregister(self.flush)
                self._exit_hook = False

    def __enter__(self) -> "TraceManager":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # -- inspection ----------------------------------------------------------

    @property
    def pending(self) -> int:
        """Number of queued messages."""
        return len(self.queue)

    @property
    def level(self) -> int:
        return self.indentation.level

    @property
    def width(self) -> int:
        return self.indentation.width

    @property
    def exit_hook_registered(self) -> bool:
        return self._exit_hook


# =============================================================================
# Module-level singleton
# =============================================================================

_manager: Optional[TraceManager] = None


def init_trace(**kwargs: Any) -> TraceManager:
    """Initialize the process-wide TraceManager.

    Call once at program startup. The new manager drains at interpreter
    exit unless exit_hook=False is passed. A previously initialized
    manager is closed (flushed) first so nothing it queued is lost.

    Args:
        **kwargs: TraceManager constructor arguments

    Returns:
        The initialized TraceManager instance
    """
    global _manager
    kwargs.setdefault('exit_hook', True)
    if _manager is not None:
        _manager.close()
    _manager = TraceManager(**kwargs)
    return _manager


def get_trace() -> TraceManager:
    """Get the process-wide TraceManager, creating a default if needed."""
    global _manager
    if _manager is None:
        _manager = TraceManager(exit_hook=True)
    return _manager
