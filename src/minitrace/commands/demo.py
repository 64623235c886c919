"""minitrace demo — recursive factorial walkthrough.

Computes i! for i in range(COUNT) through a recursive factorial that
traces every level with enter()/leave(). When the starting value equals
--throw-at, the base case warns, records a caught error, warns again and
raises; the exception unwinds through every open scope (each leave()
still runs) and is recorded by the driver.

Everything is queued while the demo runs and printed when the CLI shuts
the trace down, after the "Testing ..." banner that is printed directly.
"""

import argparse

from minitrace import output as tr


class DemoError(RuntimeError):
    """Raised on purpose by the factorial base case."""


def register(subparsers, parents):
    """Register the 'demo' subcommand."""
    p = subparsers.add_parser(
        "demo",
        parents=parents,
        help="Trace a recursive factorial computation",
        description=(
            "Compute 0! .. (COUNT-1)! with nested enter/leave tracing.\n"
            "The queued trace is printed when the command finishes."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("count", nargs="?", type=int, default=5,
                   help="Number of factorials to compute (default: 5)")
    p.add_argument("--throw-at", type=int, default=4, metavar="N",
                   help="Raise from the base case of N! (default: 4, -1 disables)")
    p.add_argument("--decorated", action="store_true", default=False,
                   help="Trace with the @trace decorator instead of enter/leave")
    p.set_defaults(func=run)


def factorial(value, first, throw_at=4):
    """Recursive factorial with explicit enter/leave tracing."""
    result = None
    tr.enter("factorial value=%d", value)
    try:
        if value > 1:
            tr.log("calculating (%d-1)!", value)
            result = factorial(value - 1, first, throw_at) * value
        else:
            if first == throw_at:
                tr.warn("throwing...")
                try:
                    raise DemoError("throwing...")
                except DemoError as e:
                    tr.error(e)
                tr.warn("throwing again...")
                raise DemoError("throwing...")
            tr.log("returning 1")
            result = 1
    finally:
        tr.leave("result=%d", result)
    return result


@tr.trace
def traced_factorial(value, first, throw_at=4):
    """Recursive factorial traced by the decorator."""
    if value > 1:
        return traced_factorial(value - 1, first, throw_at) * value
    if first == throw_at:
        tr.warn("throwing...")
        raise DemoError("throwing...")
    return 1


def run_demo(count=5, throw_at=4, decorated=False):
    """Queue the demo trace on the process-wide manager."""
    compute = traced_factorial if decorated else factorial
    try:
        with tr.scope("main"):
            for i in range(count):
                tr.log("%d! = %d", i, compute(i, i, throw_at))
    except DemoError as e:
        tr.error(e)


def run(args):
    """Execute the demo command."""
    print(f"Testing minitrace ({args.variant or 'console'})")
    run_demo(args.count, args.throw_at, args.decorated)
    return 0
