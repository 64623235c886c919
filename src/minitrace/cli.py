"""Main CLI entry point for minitrace.

Implements a Docker-style two-pass argument parser:
  1. First pass: extract global flags (--variant, --no-color, --show, ...)
  2. Second pass: dispatch to the subcommand

Global flags can appear before OR after the subcommand:
  minitrace --variant color demo      # works
  minitrace demo 6 --variant color    # also works

The process-wide TraceManager is built from the resolved configuration
before dispatch and closed (flushed) after the command returns, so the
queued trace is printed as part of an orderly shutdown.

Subcommands self-register via register(subparsers, parents) convention.
"""

import argparse
import sys

from minitrace._version import BASE_VERSION, VERSION


# ---------------------------------------------------------------------------
# Global flags (Docker-style: can precede the subcommand)
# ---------------------------------------------------------------------------
GLOBAL_FLAGS = {
    "--variant": {"metavar": "NAME", "default": None,
                  "help": "Output preset: console, log, color, immediate"},
    "--color": {"dest": "color", "action": "store_const", "const": True,
                "default": None, "help": "Color output when the terminal supports it"},
    "--no-color": {"dest": "color", "action": "store_const", "const": False,
                   "help": "Disable colored output"},
    "--immediate": {"dest": "deferred", "action": "store_const", "const": False,
                    "default": None, "help": "Print messages at call time"},
    "--indent-size": {"type": int, "metavar": "N", "default": None,
                      "help": "Spaces per nesting level (default: 2)"},
    "--show": {"nargs": "?", "action": "append", "metavar": "SEVERITY:DEST",
               "help": "Route a severity to stdout/stderr (bare --show lists channels)"},
    "--config": {"metavar": "PATH", "default": None,
                 "help": "Path to config file (default: ~/.minitrace/config.json)"},
}


def _add_global_flags(parser):
    for flag, kwargs in GLOBAL_FLAGS.items():
        parser.add_argument(flag, **kwargs)


def _extract_global_flags(argv):
    """Two-pass parse: pull global flags from anywhere in argv.

    Returns (global_namespace, remaining_argv).
    """
    global_parser = argparse.ArgumentParser(add_help=False)
    _add_global_flags(global_parser)
    global_args, remaining = global_parser.parse_known_args(argv)
    return global_args, remaining


# ---------------------------------------------------------------------------
# Subcommand discovery and registration
# ---------------------------------------------------------------------------
def _discover_commands():
    """Import and return all command modules.

    Each module in minitrace.commands must export:
      register(subparsers, parents) — add itself to the subparser
      run(args) — execute the command
    """
    from minitrace.commands import demo, variants
    return [demo, variants]


def _build_parser(commands):
    """Build the main argparse parser with subcommand dispatch."""
    parser = argparse.ArgumentParser(
        prog="minitrace",
        description="minitrace: deferred console tracing",
        epilog=(
            "Run 'minitrace <command> --help' for details on a specific command.\n"
            "\n"
            "Global flags (--variant, --no-color, --show, ...) can appear\n"
            "before or after the subcommand."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"minitrace {BASE_VERSION} ({VERSION})",
    )

    # Add global flags to main parser too (for --help display)
    _add_global_flags(parser)

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )

    # Let each command register itself
    for cmd_module in commands:
        cmd_module.register(subparsers, parents=[])

    return parser


def _init_trace(global_args):
    """Build the process-wide TraceManager from CLI flags and config files."""
    from minitrace.config import resolve_config, settings_from_config
    from minitrace.lib.trace_lib import init_trace

    global_args.show = [s for s in (global_args.show or []) if s is not None]
    resolved = resolve_config(global_args)
    return init_trace(**settings_from_config(resolved))


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def main(argv=None):
    """Main entry point for minitrace CLI.

    Args:
        argv: Command-line arguments. None means sys.argv[1:].

    Returns:
        Exit code (0 = success, 2 = bad configuration).
    """
    if argv is None:
        argv = sys.argv[1:]

    # Pass 1: extract global flags from anywhere in the arg list
    global_args, remaining = _extract_global_flags(argv)

    # Handle bare --show (list channels and exit)
    if global_args.show and None in global_args.show:
        from minitrace.lib.trace_lib import format_channel_list
        print(format_channel_list())
        return 0

    # Pass 2: parse subcommand args
    commands = _discover_commands()
    parser = _build_parser(commands)

    # If no args at all, print help
    if not remaining:
        parser.print_help()
        return 0

    args = parser.parse_args(remaining)

    # If subcommand selected but no handler, print help
    if not hasattr(args, "func"):
        parser.print_help()
        return 0

    try:
        tr = _init_trace(global_args)
    except (TypeError, ValueError) as e:
        print(f"minitrace: error: {e}", file=sys.stderr)
        return 2

    # Merge global args into the namespace for convenience
    for key, value in vars(global_args).items():
        if key not in vars(args) or getattr(args, key) is None:
            setattr(args, key, value)

    # Dispatch; the trace is printed however the command ends
    try:
        return args.func(args) or 0
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1
    finally:
        tr.close()


if __name__ == "__main__":
    sys.exit(main())
