"""
Message severity levels.

Every queued message carries exactly one severity. The severity picks the
destination stream at drain time and, when color is available, the style:

    INFO     -> stdout  (white)
    WARNING  -> stderr  (yellow)
    ERROR    -> stderr  (red)

Aliases accepted in channel specs and config files are resolved by
``Severity.from_name()``.
"""

from enum import Enum


class Severity(Enum):
    """Classification of a trace message."""
    INFO = 1
    WARNING = 2
    ERROR = 3

    @classmethod
    def from_name(cls, name: str) -> "Severity":
        """Look up a severity by name or alias (case-insensitive).

        Raises:
            ValueError: if the name is not a known severity.
        """
        key = name.strip().lower()
        try:
            return _ALIASES[key]
        except KeyError:
            raise ValueError(f"Unknown severity: {name!r}") from None


_ALIASES = {
    'info': Severity.INFO,
    'log': Severity.INFO,
    'warn': Severity.WARNING,
    'warning': Severity.WARNING,
    'error': Severity.ERROR,
}
