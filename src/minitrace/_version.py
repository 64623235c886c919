"""
minitrace version constants.

MAJOR/MINOR/PATCH/PHASE are bumped by hand. __version__ additionally
records where a build came from, after the first underscore:

    MAJOR.MINOR.PATCH[-PHASE]_BRANCH_BUILD-YYYYMMDD-COMMITHASH
    0.3.0-beta_main_7-20261018-5e1f0a2c

setup.py pins PIP_VERSION, the PEP 440 rendering of the same release.
"""

MAJOR = 0
MINOR = 3
PATCH = 0
PHASE = "beta"  # None, "alpha", "beta" or an "rcN" tag

__version__ = "0.3.0-beta_main_7-20261018-5e1f0a2c"
__app_name__ = "minitrace"

# PEP 440 pre-release segments; "rcN" passes through unchanged
_PEP440_PHASES = {"alpha": "a0", "beta": "b0"}


def get_version():
    """Full build string, shown by `minitrace --version`."""
    return __version__


def get_base_version():
    """Release part only, e.g. '0.3.0-beta'."""
    release, sep, _build = __version__.partition("_")
    if sep:
        return release
    return f"{MAJOR}.{MINOR}.{PATCH}" + (f"-{PHASE}" if PHASE else "")


def get_pip_version():
    """Installable version for setuptools.

    Builds from main map to the bare pre-release ('0.3.0b0'); any other
    branch becomes a dev release numbered by its build ('0.3.0b0.dev7').
    """
    version = f"{MAJOR}.{MINOR}.{PATCH}"
    if PHASE:
        version += _PEP440_PHASES.get(PHASE, PHASE)

    parts = __version__.split("_")
    if len(parts) < 2 or parts[1] == "main":
        return version

    build = parts[2].split("-")[0] if len(parts) > 2 else "0"
    return f"{version}.dev{build or 0}"


VERSION = get_version()
BASE_VERSION = get_base_version()
PIP_VERSION = get_pip_version()
