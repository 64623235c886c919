"""
Printer: writes messages to their severity's stream.

The printer owns the presentation side of a drain: the separator header,
indentation (rebuilt only when the width changes between consecutive
messages), per-line indentation of multi-line text, stream routing and
optional ANSI styling.

Styling wraps the already-indented text, so indentation spaces are
enclosed by the style codes. A stream is only styled when colorize is
enabled and the capability probe confirms both color support and an
interactive stream.
"""

import sys
from typing import Dict, Iterable, Optional, TextIO, Tuple

from .channels import DEFAULT_ROUTES
from .levels import Severity
from .messages import Message
from .probe import CapabilityProbe


HEADER = '-' * 80

# (start, end) ANSI SGR pairs; 39 resets the foreground color only
DEFAULT_STYLES: Dict[Severity, Tuple[str, str]] = {
    Severity.INFO: ('\x1b[37m', '\x1b[39m'),
    Severity.WARNING: ('\x1b[33m', '\x1b[39m'),
    Severity.ERROR: ('\x1b[31m', '\x1b[39m'),
}

# Immediate printing leaves informational lines in the terminal's own color
IMMEDIATE_STYLES: Dict[Severity, Tuple[str, str]] = {
    Severity.WARNING: DEFAULT_STYLES[Severity.WARNING],
    Severity.ERROR: DEFAULT_STYLES[Severity.ERROR],
}


def indent_text(indentation: str, text: str) -> str:
    """Prefix every line of text with indentation."""
    if indentation:
        if '\n' in text:
            text = text.replace('\n', '\n' + indentation)
        text = indentation + text
    return text


class Printer:
    """Routes and styles trace lines.

    Args:
        routes: Severity -> 'stdout' | 'stderr'
        stdout: Explicit stdout stream; None resolves sys.stdout at print time
        stderr: Explicit stderr stream; None resolves sys.stderr at print time
        colorize: Allow ANSI styles when the probe reports support
        probe: Capability probe (default: probe the real environment)
        styles: Severity -> (start, end) escape pair
    """

    def __init__(
        self,
        routes: Optional[Dict[Severity, str]] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        colorize: bool = False,
        probe: Optional[CapabilityProbe] = None,
        styles: Optional[Dict[Severity, Tuple[str, str]]] = None,
    ):
        self.routes = dict(routes or DEFAULT_ROUTES)
        self._streams = {'stdout': stdout, 'stderr': stderr}
        self.colorize = colorize
        self.probe = probe or CapabilityProbe()
        self.styles = dict(DEFAULT_STYLES if styles is None else styles)

    def stream_for(self, severity: Severity) -> TextIO:
        dest = self.routes.get(severity, DEFAULT_ROUTES[severity])
        stream = self._streams.get(dest)
        if stream is None:
            # Lazy lookup so pytest's per-test capture is honoured
            stream = getattr(sys, dest)
        return stream

    def style_for(self, severity: Severity, stream: TextIO) -> Optional[Tuple[str, str]]:
        if not self.colorize:
            return None
        style = self.styles.get(severity)
        if style is None or not self.probe.can_style(stream):
            return None
        return style

    def write(self, text: str, severity: Severity = Severity.INFO) -> None:
        """Print one (already indented) line to its severity's stream."""
        stream = self.stream_for(severity)
        style = self.style_for(severity, stream)
        if style:
            text = style[0] + text + style[1]
        print(text, file=stream)

    def print_messages(self, messages: Iterable[Message], header: bool = True) -> int:
        """Print messages in order, preceded by the separator header.

        Nothing at all is printed (not even the header) when there are no
        messages.

        Returns:
            Number of messages printed.
        """
        count = 0
        width = 0
        indentation = ''
        for message in messages:
            if count == 0 and header:
                self.write(HEADER, Severity.INFO)
            if message.width != width:
                width = message.width
                indentation = ' ' * width
            self.write(indent_text(indentation, message.text), message.severity)
            count += 1
        return count
