"""
trace_lib — deferred, indented console tracing.

A reusable trace queue library providing:
- Deferred message queue, drained once at exit (or on flush())
- Indentation tracking with enter/leave scope labelling
- Severity channels routed to stdout/stderr
- Optional ANSI styling gated by a capability probe
- Function tracing decorator and a logging.Handler bridge

Public API:
    TraceManager       — central coordinator
    init_trace         — singleton initialization
    get_trace          — access singleton
    Severity           — message severity enum
    Message            — queued message record
    MessageQueue       — FIFO of pending messages
    format_message     — printf-style formatter
    CapabilityProbe    — color / tty detection
    ChannelConfig      — channel configuration
    parse_channel_spec — parse CLI channel spec
    build_routes       — channel specs -> severity routes
    trace              — function tracing decorator
    TraceHandler       — logging.Handler feeding a TraceManager
"""

from .levels import Severity
from .messages import Message, MessageQueue
from .indentation import IndentationTracker, ScopeStack
from .formatter import format_message
from .probe import CapabilityProbe
from .channels import (
    ChannelConfig, parse_channel_spec, build_routes, format_channel_list,
    DEFAULT_ROUTES,
)
from .printer import Printer, HEADER
from .manager import TraceManager, init_trace, get_trace
from .trace import trace
from .handler import TraceHandler

__all__ = [
    'TraceManager', 'init_trace', 'get_trace',
    'Severity', 'Message', 'MessageQueue',
    'IndentationTracker', 'ScopeStack',
    'format_message', 'CapabilityProbe',
    'ChannelConfig', 'parse_channel_spec', 'build_routes', 'format_channel_list',
    'DEFAULT_ROUTES',
    'Printer', 'HEADER',
    'trace', 'TraceHandler',
]
