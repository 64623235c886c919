"""
Severity channel routing.

Each severity is a channel with a destination stream. The defaults follow
the usual console convention: informational output on stdout, warnings and
errors on stderr.

Channel spec syntax (compact, positional):
    SEVERITY:DEST

    Examples:
        warn:stdout         # Warnings to stdout
        error:stderr        # Errors to stderr (the default)
        info                # Default destination for info

SEVERITY accepts aliases: info|log, warn|warning, error.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Optional

from .levels import Severity


KNOWN_DESTINATIONS = {'stdout', 'stderr'}

DEFAULT_ROUTES: Dict[Severity, str] = {
    Severity.INFO: 'stdout',
    Severity.WARNING: 'stderr',
    Severity.ERROR: 'stderr',
}

CHANNEL_DESCRIPTIONS = {
    Severity.INFO:    'log(), indent(), enter()/leave() and the drain header',
    Severity.WARNING: 'warn()',
    Severity.ERROR:   'error() and exceptions seen by @trace',
}


@dataclass
class ChannelConfig:
    """Destination of one severity channel."""
    name: Severity
    destination: str


def parse_channel_spec(spec: str) -> ChannelConfig:
    """Parse a channel spec string into a ChannelConfig.

    Args:
        spec: Channel spec string like "warn:stdout" or "error"

    Returns:
        ChannelConfig with parsed values

    Raises:
        ValueError: on an unknown severity or destination
    """
    name, _, dest = spec.partition(':')
    severity = Severity.from_name(name)
    dest = dest.strip().lower() or DEFAULT_ROUTES[severity]
    if dest not in KNOWN_DESTINATIONS:
        raise ValueError(
            f"Unknown destination {dest!r} in channel spec {spec!r} "
            f"(expected one of: {', '.join(sorted(KNOWN_DESTINATIONS))})")
    return ChannelConfig(name=severity, destination=dest)


def build_routes(specs: Optional[Iterable[str]] = None) -> Dict[Severity, str]:
    """Apply channel specs on top of DEFAULT_ROUTES. Later specs win."""
    routes = dict(DEFAULT_ROUTES)
    for spec in specs or ():
        cfg = parse_channel_spec(spec)
        routes[cfg.name] = cfg.destination
    return routes


def format_channel_list(routes: Optional[Dict[Severity, str]] = None) -> str:
    """Format the severity channels and their destinations for display."""
    routes = routes or DEFAULT_ROUTES
    lines = ["Available channels:"]
    width = max(len(s.name) for s in Severity)
    for severity in Severity:
        desc = CHANNEL_DESCRIPTIONS.get(severity, '')
        dest = routes.get(severity, DEFAULT_ROUTES[severity])
        lines.append(f"  {severity.name.lower():<{width}}  -> {dest:<6}  {desc}")
    return "\n".join(lines)
