"""Named output presets for minitrace.

Each variant is a bundle of manager settings. Explicit settings (CLI flags,
config files) are layered on top of the chosen variant by
minitrace.config.settings_from_config().

Usage:
    from minitrace.variants import VARIANTS, get_variant, format_variant_list
"""

DEFAULT_VARIANT = 'console'

VARIANTS = {
    'console': {'deferred': True, 'color': False, 'show': []},
    'log': {'deferred': True, 'color': False,
            'show': ['warn:stdout', 'error:stdout']},
    'color': {'deferred': True, 'color': True, 'show': []},
    'immediate': {'deferred': False, 'color': True, 'show': []},
}

VARIANT_DESCRIPTIONS = {
    'console':   'Deferred; info to stdout, warnings/errors to stderr',
    'log':       'Deferred; everything to stdout',
    'color':     'Deferred; severity-routed with ANSI colors when supported',
    'immediate': 'Print at call time, warnings/errors colored when supported',
}


def get_variant(name):
    """Return a copy of the named variant's settings.

    Raises:
        ValueError: if the variant is unknown.
    """
    try:
        variant = VARIANTS[name]
    except KeyError:
        raise ValueError(
            f"Unknown variant {name!r} "
            f"(expected one of: {', '.join(sorted(VARIANTS))})") from None
    return {**variant, 'show': list(variant['show'])}


def format_variant_list():
    """Format variants for the `minitrace variants` listing."""
    lines = ["Available variants:"]
    max_name = max(len(name) for name in VARIANTS)
    for name in sorted(VARIANTS):
        desc = VARIANT_DESCRIPTIONS.get(name, '')
        default = " (default)" if name == DEFAULT_VARIANT else ""
        lines.append(f"  {name:<{max_name}}  {desc}{default}")
    return "\n".join(lines)
