"""minitrace variants — list the output presets."""

from minitrace.variants import format_variant_list


def register(subparsers, parents):
    """Register the 'variants' subcommand."""
    p = subparsers.add_parser(
        "variants",
        parents=parents,
        help="List output presets usable with --variant",
    )
    p.set_defaults(func=run)


def run(args):
    print(format_variant_list())
    return 0
