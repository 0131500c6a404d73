"""colourset — harmonious five-colour sets for window-manager and CSS themes.

Usage: uv run colourset <renderer> [--hue H] [--shade S] [-n N] [options]

A colourset is five colours of one hue (background, topshadow, bottomshadow,
foreground, foreground_inactive). From a base hue and shade, -n extra
coloursets are generated that neither repeat nor clash with the base or
with each other.

Renderers are auto-discovered from colourset/renderers/.
Each renderer module's docstring is its documentation.
Run `colourset help <renderer>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, colourset looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
  COLOURSET_HUE, COLOURSET_SHADE, COLOURSET_COUNT, COLOURSET_SEED and
  COLOURSET_MAX_TRIES provide defaults for the matching flags.
"""

import argparse
import sys

import numpy as np

from colourset import registry
from colourset.core import generator
from colourset.core.env import Settings, load_env, load_settings
from colourset.core.types import ColoursetError, ConfigError, Palette


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples:\n'
        '  colourset list --hue 60 --shade 1 -n 3\n'
        '  colourset css --hue 200 -n 2 -o theme.css\n'
        '  colourset fill --hue 360 --shade 2 -n 2 -t theme.in -o theme.rc\n'
        '  colourset swatch --hue 30 -n 4 --seed 7 -o swatch.png\n'
        '  colourset json --hue 120 -n 3 --hues 240,,0 --shades 1,0,4\n'
        '  colourset check --hue 360 --shade 2 --against 65:1\n'
        '  colourset help fill\n'
        '\n'
        'Hue 360 means grey (no hue). Shade 1 is darkest, 4 lightest; any other\n'
        'shade (or none) is picked at random.\n'
    )
    parser = argparse.ArgumentParser(
        prog='colourset',
        description='Generate harmonious coloursets from a hue and a shade.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='renderer', help='Output format')

    # Auto-register each renderer as a subcommand using module docstring
    for name in registry.names():
        p = sub.add_parser(name, help=registry.summary(name))
        p.add_argument('--hue', type=int, default=None, help='Base hue 0-360 (360 = grey, default 0)')
        p.add_argument('--shade', type=int, default=None, help='Base shade 1-4 (default random)')
        p.add_argument('-n', '--count', type=int, default=None, help='Number of alternative coloursets')
        p.add_argument('--hues', default=None, metavar='LIST', help='Pinned hue per alternative, e.g. 10,,50')
        p.add_argument('--shades', default=None, metavar='LIST', help='Pinned shade per alternative, e.g. 1,0,3')
        p.add_argument('-s', '--seed', type=int, default=None, help='Seed the random generator')
        p.add_argument(
            '-m',
            '--max-tries',
            type=int,
            default=None,
            metavar='N',
            help='Give up after N rejected candidates (default: never)',
        )
        p.add_argument('-t', '--template', help='Template file for the fill renderer')
        p.add_argument('-o', '--output', help='Write output to this file instead of stdout')
        p.add_argument(
            '-a',
            '--against',
            action='append',
            metavar='HUE:SHADE',
            help='Colourset to compare the base with (check renderer, repeatable)',
        )

    # `help` subcommand — prints full module docstring for a renderer
    help_parser = sub.add_parser('help', help='Print full docs for a renderer')
    help_parser.add_argument('command', nargs='?', help='Renderer name')

    return parser


def _print_help(command: str | None) -> None:
    """Print full module docstring for a renderer."""
    if command is None:
        print('Available renderers:\n')
        for name in registry.names():
            print(f'  {name:<12} {registry.summary(name)}')
        print('\nRun: colourset help <renderer> for full docs.')
        return

    if command not in registry.discover():
        print(f'Unknown renderer: {command}', file=sys.stderr)
        print(f'Available: {", ".join(registry.names())}', file=sys.stderr)
        sys.exit(1)

    doc = registry.module_doc(command)
    if not doc:
        print(f'(No module docs for {command!r})')
        return
    print(doc)


def parse_int_list(text: str | None, what: str) -> list[int | None]:
    """Parse '10,,50' into [10, None, 50]. Empty items stay unset."""
    if not text:
        return []
    result: list[int | None] = []
    for item in text.split(','):
        item = item.strip()
        if not item:
            result.append(None)
            continue
        try:
            result.append(int(item))
        except ValueError:
            raise ConfigError(f'--{what}: {item!r} is not an integer') from None
    return result


def _merge(args: argparse.Namespace, settings: Settings) -> Settings:
    """Command-line flags override environment settings."""
    return Settings(
        hue=args.hue if args.hue is not None else settings.hue,
        shade=args.shade if args.shade is not None else settings.shade,
        count=args.count if args.count is not None else settings.count,
        seed=args.seed if args.seed is not None else settings.seed,
        max_tries=args.max_tries if args.max_tries is not None else settings.max_tries,
    )


def build_palette(args: argparse.Namespace, settings: Settings) -> Palette:
    """Create the base colourset and its alternatives."""
    rng = generator.seed(settings.seed)
    base = generator.create(settings.hue, settings.shade, rng=rng)
    alternatives = generator.generate_set(
        base,
        settings.count,
        hues=parse_int_list(args.hues, 'hues'),
        shades=parse_int_list(args.shades, 'shades'),
        rng=rng,
        max_tries=settings.max_tries,
    )
    return Palette(base=base, alternatives=alternatives, seed=settings.seed, rng=rng)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else — OS env vars always win
    env_path = load_env(env_file=getattr(args, 'env_file', None))
    if env_path:
        print(f'colourset: loaded {env_path}', file=sys.stderr)

    if not args.renderer:
        parser.print_help()
        sys.exit(1)

    if args.renderer == 'help':
        _print_help(getattr(args, 'command', None))
        return

    try:
        settings = _merge(args, load_settings())
        if settings.seed is None:
            # Pick and report a seed so any palette can be reproduced
            settings.seed = int(np.random.default_rng().integers(2**31))
            print(f'colourset: seed {settings.seed}', file=sys.stderr)
        palette = build_palette(args, settings)
        output = registry.get(args.renderer).execute(palette, args)
    except ColoursetError as e:
        print(f'colourset: {e}', file=sys.stderr)
        sys.exit(1)

    if args.renderer == 'swatch':
        print(output, end='', file=sys.stderr)  # swatch writes its own file
    elif args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(output)
    else:
        print(output, end='' if output.endswith('\n') else '\n')


if __name__ == '__main__':
    main()
