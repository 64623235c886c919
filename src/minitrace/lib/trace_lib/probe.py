"""
Terminal capability probing.

Decides whether ANSI color styling may be used on a given stream. Two
independent checks must both pass:

1. The environment supports color: NO_COLOR unset, and either Windows 10+
   (native VT processing) or a TERM value known to understand ANSI codes.
2. The destination stream is interactive (isatty()).

All inputs are injectable so tests never depend on the real terminal.
"""

import os
import platform
import re
import sys
from typing import Mapping, Optional, TextIO


COLOR_TERMS = re.compile(r'^screen|^xterm|^vt100|^rxvt|color|ansi|cygwin|linux',
                         re.IGNORECASE)


class CapabilityProbe:
    """Environment/stream capability checks for colored output."""

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        platform_name: Optional[str] = None,
        release: Optional[str] = None,
    ):
        self.environ = environ if environ is not None else os.environ
        self.platform_name = platform_name if platform_name is not None else sys.platform
        self.release = release if release is not None else platform.release()

    def has_color(self) -> bool:
        """True when the terminal is expected to render ANSI styles."""
        if self.environ.get('NO_COLOR') is not None:
            return False
        if self.platform_name == 'win32' and self._windows_major() >= 10:
            return True
        term = self.environ.get('TERM', '')
        return bool(term and COLOR_TERMS.search(term))

    def is_interactive(self, stream: TextIO) -> bool:
        isatty = getattr(stream, 'isatty', None)
        if isatty is None:
            return False
        try:
            return bool(isatty())
        except ValueError:
            # closed stream
            return False

    def can_style(self, stream: TextIO) -> bool:
        return self.has_color() and self.is_interactive(stream)

    def _windows_major(self) -> int:
        match = re.match(r'\d+', self.release or '')
        return int(match.group()) if match else 0
