"""
Nesting depth and scope-name bookkeeping.

IndentationTracker turns a nesting level into a width in spaces
(level * unit). ScopeStack remembers the first word of every enter()
message so the matching leave() line can be labelled automatically.
"""

from typing import List


DEFAULT_UNIT = 2


class IndentationTracker:
    """Nesting level with a fixed number of spaces per level.

    Decreasing at level 0 is a silent no-op; the level never goes negative.
    """

    def __init__(self, unit: int = DEFAULT_UNIT):
        if unit < 1:
            raise ValueError(f"Indentation unit must be >= 1, got {unit}")
        self.unit = unit
        self.level = 0

    def increase(self) -> None:
        self.level += 1

    def decrease(self) -> None:
        if self.level > 0:
            self.level -= 1

    @property
    def width(self) -> int:
        """Current indentation width in spaces."""
        return self.level * self.unit

    def current_width(self) -> int:
        return self.width


class ScopeStack:
    """LIFO stack of scope names pushed by enter() and popped by leave()."""

    def __init__(self):
        self._names: List[str] = []

    def push(self, name: str) -> None:
        self._names.append(name)

    def pop(self) -> str:
        """Pop the most recent name, or '' when nothing was entered."""
        if not self._names:
            return ''
        return self._names.pop()

    def __len__(self) -> int:
        return len(self._names)


def scope_name(message: str) -> str:
    """First whitespace-delimited token of message, or message itself."""
    parts = message.split(None, 1)
    return parts[0] if parts else message


def join_name(name: str, message: str) -> str:
    """Join a scope name and a leave message with one space.

    Either side may be empty; the result is never None.
    """
    if name:
        return f"{name} {message}" if message else name
    return message or ''
