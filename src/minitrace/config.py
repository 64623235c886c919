"""Configuration management for minitrace.

Three-layer config resolution (highest priority wins):
  1. CLI flags: explicit on the command line
  2. Project config: .minitrace.json in the working directory or a parent
  3. Global config: ~/.minitrace/config.json (or the file given by --config)

Recognised keys:
  variant      console | log | color | immediate
  indent_size  spaces per nesting level
  color        true/false, ANSI styling when the terminal supports it
  deferred     true/false, queue until exit instead of printing at once
  show         list of channel specs, e.g. ["warn:stdout"]
"""

import json
import os
from pathlib import Path

from minitrace.lib.trace_lib.channels import build_routes
from minitrace.lib.trace_lib.indentation import DEFAULT_UNIT
from minitrace.variants import DEFAULT_VARIANT, get_variant


CONFIG_KEYS = ["variant", "indent_size", "color", "deferred", "show"]

PROJECT_CONFIG_NAME = ".minitrace.json"


# ---------------------------------------------------------------------------
# Config file locations
# ---------------------------------------------------------------------------
def get_global_config_dir():
    """Return the global config directory (~/.minitrace/)."""
    return Path.home() / ".minitrace"


def get_global_config_path():
    """Return path to the global config file."""
    return get_global_config_dir() / "config.json"


def find_project_config(start_dir=None):
    """Walk up from start_dir looking for .minitrace.json.

    Returns the path if found, None otherwise.
    """
    current = Path(start_dir or os.getcwd()).resolve()
    for _ in range(20):  # safety limit
        candidate = current / PROJECT_CONFIG_NAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


# ---------------------------------------------------------------------------
# Config loading
# ---------------------------------------------------------------------------
def load_json(path):
    """Load a JSON object from path, returning empty dict on error."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (FileNotFoundError, IsADirectoryError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def load_global_config(path=None):
    """Load the global config file (or an explicit --config file)."""
    return load_json(path or get_global_config_path())


def load_project_config(start_dir=None):
    """Load the nearest .minitrace.json walking upward from start_dir."""
    path = find_project_config(start_dir)
    if path:
        return load_json(path), path
    return {}, None


# ---------------------------------------------------------------------------
# Config resolution
# ---------------------------------------------------------------------------
def resolve_config(args, keys=None, start_dir=None):
    """Resolve config values using three-layer precedence.

    For each key in `keys`, checks (in order):
      1. CLI args (from argparse namespace)
      2. Project .minitrace.json
      3. Global ~/.minitrace/config.json (or args.config)

    Returns a dict with resolved values (None when no layer sets a key).
    """
    if keys is None:
        keys = CONFIG_KEYS

    project_cfg, _ = load_project_config(start_dir)
    global_cfg = load_global_config(getattr(args, "config", None))

    resolved = {}
    for key in keys:
        # Normalize key: argparse uses underscores, JSON may use either
        arg_key = key.replace("-", "_")
        alt_json_key = arg_key.replace("_", "-")

        # Layer 1: CLI (an empty --show list counts as unset)
        cli_val = getattr(args, arg_key, None)
        if cli_val is not None and cli_val != []:
            resolved[arg_key] = cli_val
            continue

        # Layer 2: Project config
        proj_val = project_cfg.get(arg_key, project_cfg.get(alt_json_key))
        if proj_val is not None:
            resolved[arg_key] = proj_val
            continue

        # Layer 3: Global config
        resolved[arg_key] = global_cfg.get(arg_key, global_cfg.get(alt_json_key))

    return resolved


_TRUE_STRINGS = {"true", "yes", "on", "1"}
_FALSE_STRINGS = {"false", "no", "off", "0"}


def _as_bool(key, value):
    """Coerce a config value to bool, accepting the common string forms.

    Raises:
        ValueError: if the value is not a recognisable boolean.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    elif isinstance(value, int) and value in (0, 1):
        return bool(value)
    raise ValueError(f"Invalid boolean for {key!r}: {value!r}")


def settings_from_config(resolved):
    """Turn resolved config values into TraceManager keyword arguments.

    The selected variant supplies defaults; explicit values override it.
    Channel specs from the variant are applied before explicit ones.

    Raises:
        ValueError: on an unknown variant, a non-boolean color/deferred,
            a bad indent size or a bad channel spec.
    """
    variant = get_variant(resolved.get("variant") or DEFAULT_VARIANT)

    color = resolved.get("color")
    deferred = resolved.get("deferred")
    indent_size = resolved.get("indent_size")
    show = resolved.get("show") or []
    if isinstance(show, str):
        show = [show]

    return {
        "indent_size": int(indent_size) if indent_size is not None else DEFAULT_UNIT,
        "colorize": _as_bool("color", variant["color"] if color is None else color),
        "deferred": _as_bool("deferred", variant["deferred"] if deferred is None else deferred),
        "routes": build_routes(variant["show"] + list(show)),
    }


# ---------------------------------------------------------------------------
# Config writing
# ---------------------------------------------------------------------------
def save_project_config(data, directory=None):
    """Write .minitrace.json to directory (default: cwd)."""
    target = Path(directory or os.getcwd()) / PROJECT_CONFIG_NAME
    with open(target, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
        f.write("\n")
    return target


def save_global_config(data):
    """Write the global config file."""
    config_dir = get_global_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    config_path = get_global_config_path()
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
        f.write("\n")
    return config_path
