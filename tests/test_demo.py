"""Tests for minitrace.commands.demo — the factorial walkthrough."""

import pytest

from minitrace.commands.demo import DemoError, factorial, run_demo
from minitrace.lib.trace_lib import HEADER


def body(buf):
    got = buf.getvalue().splitlines()
    assert got[0] == HEADER
    return got[1:]


class TestFactorial:
    """Explicit enter/leave tracing."""

    def test_trace_layout(self, global_trace, out_buf):
        assert factorial(2, 2) == 2
        global_trace.flush()
        assert body(out_buf) == [
            "> factorial value=2",
            "  calculating (2-1)!",
            "  > factorial value=1",
            "    returning 1",
            "  < factorial result=1",
            "< factorial result=2",
        ]

    def test_leave_runs_when_raising(self, global_trace, out_buf, err_buf):
        with pytest.raises(DemoError):
            factorial(1, 4, throw_at=4)
        global_trace.flush()
        assert body(out_buf) == [
            "> factorial value=1",
            "< factorial result=NaN",
        ]
        assert err_buf.getvalue().splitlines() == [
            "  throwing...",
            "  DemoError: throwing...",
            "  throwing again...",
        ]
        assert global_trace.level == 0


class TestRunDemo:
    """The full driver."""

    def test_without_error(self, global_trace, out_buf, err_buf):
        run_demo(3, throw_at=9)
        global_trace.flush()
        assert body(out_buf) == [
            "> main",
            "  > factorial value=0",
            "    returning 1",
            "  < factorial result=1",
            "  0! = 1",
            "  > factorial value=1",
            "    returning 1",
            "  < factorial result=1",
            "  1! = 1",
            "  > factorial value=2",
            "    calculating (2-1)!",
            "    > factorial value=1",
            "      returning 1",
            "    < factorial result=1",
            "  < factorial result=2",
            "  2! = 2",
            "< main",
        ]
        assert err_buf.getvalue() == ""

    def test_error_unwinds_every_scope(self, global_trace, out_buf, err_buf):
        run_demo(5)
        global_trace.flush()
        out = body(out_buf)
        assert "  3! = 6" in out
        assert not any("4! =" in line for line in out)
        assert out[-5:] == [
            "        < factorial result=NaN",
            "      < factorial result=NaN",
            "    < factorial result=NaN",
            "  < factorial result=NaN",
            "< main",
        ]
        assert err_buf.getvalue().splitlines() == [
            "          throwing...",
            "          DemoError: throwing...",
            "          throwing again...",
            "DemoError: throwing...",
        ]
        assert global_trace.level == 0

    def test_decorated(self, global_trace, out_buf, err_buf):
        run_demo(3, throw_at=9, decorated=True)
        global_trace.flush()
        out = body(out_buf)
        name = "minitrace.commands.demo.traced_factorial"
        assert out[0] == "> main"
        assert f"  > {name} 2, 2, 9" in out
        assert f"  < {name} returned: 2" in out
        assert out[-1] == "< main"

    def test_decorated_error(self, global_trace, out_buf, err_buf):
        run_demo(2, throw_at=1, decorated=True)
        global_trace.flush()
        err = err_buf.getvalue().splitlines()
        assert err[0] == "    throwing..."
        assert err[-1] == "DemoError: throwing..."
        assert global_trace.level == 0
