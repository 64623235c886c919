"""Shared test fixtures for minitrace test suite."""

import io
import os
from unittest.mock import patch

import pytest

from minitrace.lib.trace_lib import CapabilityProbe, TraceManager
from minitrace.lib.trace_lib import manager as _manager_mod


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: starts a fresh interpreter (deselect with -m 'not slow')")


class TTYBuffer(io.StringIO):
    """StringIO that claims to be an interactive terminal."""

    def isatty(self):
        return True


# ---------------------------------------------------------------------------
# Stream fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def out_buf():
    """Buffer standing in for stdout."""
    return io.StringIO()


@pytest.fixture
def err_buf():
    """Buffer standing in for stderr."""
    return io.StringIO()


@pytest.fixture
def tty_out():
    return TTYBuffer()


@pytest.fixture
def tty_err():
    return TTYBuffer()


# ---------------------------------------------------------------------------
# Probe fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def color_probe():
    """Probe for an xterm on Linux with NO_COLOR unset."""
    return CapabilityProbe(environ={"TERM": "xterm-256color"},
                           platform_name="linux", release="6.1.0")


@pytest.fixture
def mono_probe():
    """Probe for a dumb terminal."""
    return CapabilityProbe(environ={"TERM": "dumb"},
                           platform_name="linux", release="6.1.0")


# ---------------------------------------------------------------------------
# Manager fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def tr(out_buf, err_buf):
    """A deferred TraceManager writing to buffers, no exit hook."""
    return TraceManager(stdout=out_buf, stderr=err_buf)


@pytest.fixture
def reset_trace():
    """Save and restore the process-wide TraceManager singleton.

    Managers created during the test have their exit hooks dropped so
    nothing prints when the test session ends.
    """
    old = _manager_mod._manager
    _manager_mod._manager = None
    yield
    current = _manager_mod._manager
    if current is not None and current is not old:
        current.unregister_exit_hook()
    _manager_mod._manager = old


@pytest.fixture
def global_trace(reset_trace, out_buf, err_buf):
    """Install a buffered TraceManager as the process-wide singleton."""
    _manager_mod._manager = TraceManager(stdout=out_buf, stderr=err_buf)
    return _manager_mod._manager


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def tmp_config_home(tmp_path):
    """Provide a temporary home directory for ~/.minitrace/config.json."""
    home = tmp_path / "home"
    home.mkdir()
    with patch.dict(os.environ, {"HOME": str(home), "USERPROFILE": str(home)}):
        with patch("pathlib.Path.home", return_value=home):
            yield home


@pytest.fixture
def tmp_project(tmp_path):
    """Provide an empty project directory outside the config home."""
    project = tmp_path / "project"
    project.mkdir()
    return project
