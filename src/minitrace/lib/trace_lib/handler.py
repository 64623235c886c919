"""
logging.Handler bridge.

Lets code that already logs through the standard logging package feed the
deferred trace. Records are formatted by the handler's formatter and
enqueued at the manager's current indentation, so they nest inside any
enclosing enter()/leave() block.
"""

import logging
from typing import Optional

from .levels import Severity
from .manager import TraceManager, get_trace


def severity_for(levelno: int) -> Severity:
    """Map a logging level number onto a trace severity."""
    if levelno >= logging.ERROR:
        return Severity.ERROR
    if levelno >= logging.WARNING:
        return Severity.WARNING
    return Severity.INFO


class TraceHandler(logging.Handler):
    """Handler that enqueues records on a TraceManager.

    Args:
        manager: Target manager (default: the process-wide one, resolved
            at emit time)
        level: Minimum record level
    """

    def __init__(self, manager: Optional[TraceManager] = None, level: int = logging.NOTSET):
        super().__init__(level)
        self._manager = manager

    @property
    def manager(self) -> TraceManager:
        return self._manager if self._manager is not None else get_trace()

    def emit(self, record: logging.LogRecord) -> None:
        try:
            text = self.format(record)
            self.manager.write(text, severity_for(record.levelno))
        except Exception:
            self.handleError(record)
