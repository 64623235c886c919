"""
Message record and the deferred message queue.

Messages are stamped with the indentation width that was active when they
were enqueued, never the width at drain time. The queue is append-only;
``drain()`` hands back everything pending in insertion order and leaves the
queue empty, so a second drain yields nothing.
"""

from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterator, List

from .levels import Severity


@dataclass(frozen=True)
class Message:
    """A pending trace line.

    Attributes:
        text: Fully formatted text, possibly spanning several lines
        width: Indentation width (spaces) at enqueue time
        severity: Destination/style selector
    """
    text: str
    width: int = 0
    severity: Severity = Severity.INFO


class MessageQueue:
    """FIFO of pending messages with O(1) append and a single-pass drain."""

    def __init__(self):
        self._items: Deque[Message] = deque()

    def append(self, message: Message) -> None:
        self._items.append(message)

    def drain(self) -> List[Message]:
        """Remove and return all pending messages, oldest first."""
        items = list(self._items)
        self._items.clear()
        return items

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[Message]:
        return iter(tuple(self._items))
