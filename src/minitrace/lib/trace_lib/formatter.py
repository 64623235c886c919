"""
printf-style message formatting.

format_message() takes the same argument shape as every trace call: a
template followed by substitution values. Supported directives:

    %s      str(value)
    %d %i   integer (NaN when the value is not numeric)
    %f      float   (NaN when the value is not numeric)
    %j      JSON
    %o %O   repr(value)
    %%      a literal percent sign

Directives without a matching argument are left untouched; arguments
without a matching directive are appended, separated by spaces. When the
first argument is not a string, every argument is rendered and joined.
Formatting never raises.
"""

import json
import re
from typing import Any, Callable, Dict


_DIRECTIVE = re.compile(r'%[sdifjoO%]')


def _safe_str(value: Any) -> str:
    try:
        return str(value)
    except Exception:
        return object.__repr__(value)


def _safe_repr(value: Any) -> str:
    try:
        return repr(value)
    except Exception:
        return object.__repr__(value)


def inspect_value(value: Any) -> str:
    """Render a trailing (unsubstituted) argument."""
    if isinstance(value, str):
        return value
    if isinstance(value, BaseException):
        detail = _safe_str(value)
        name = type(value).__name__
        return f"{name}: {detail}" if detail else name
    return _safe_repr(value)


def _as_str(value: Any) -> str:
    if isinstance(value, (str, BaseException)):
        return inspect_value(value)
    return _safe_str(value)


def _as_int(value: Any) -> str:
    try:
        return str(int(value))
    except Exception:
        pass
    try:
        return str(int(float(value)))
    except Exception:
        return 'NaN'


def _as_float(value: Any) -> str:
    try:
        return str(float(value))
    except Exception:
        return 'NaN'


def _as_json(value: Any) -> str:
    try:
        return json.dumps(value)
    except ValueError:
        return '[Circular]'
    except (TypeError, RecursionError):
        pass
    # Unserializable values become str(); non-string keys still fail here
    try:
        return json.dumps(value, default=_safe_str)
    except ValueError:
        return '[Circular]'
    except (TypeError, RecursionError):
        return _safe_str(value)


_CONVERTERS: Dict[str, Callable[[Any], str]] = {
    's': _as_str,
    'd': _as_int,
    'i': _as_int,
    'f': _as_float,
    'j': _as_json,
    'o': _safe_repr,
    'O': _safe_repr,
}


def format_message(*args: Any) -> str:
    """Format trace arguments into a single string.

    Examples::

        format_message("%d! = %d", 3, 6)      # '3! = 6'
        format_message("x", 1, "y")           # 'x 1 y'
        format_message("%s and %s", "a")      # 'a and %s'
    """
    if not args:
        return ''
    template, rest = args[0], args[1:]
    if not isinstance(template, str):
        return ' '.join(inspect_value(a) for a in args)

    consumed = 0

    def substitute(match):
        nonlocal consumed
        directive = match.group()[1]
        if directive == '%':
            return '%'
        if consumed >= len(rest):
            return match.group()
        value = rest[consumed]
        consumed += 1
        return _CONVERTERS[directive](value)

    text = _DIRECTIVE.sub(substitute, template) if rest else template
    extra = rest[consumed:]
    if extra:
        text = ' '.join([text] + [inspect_value(a) for a in extra])
    return text
