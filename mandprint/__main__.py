"""mandprint — Will this colour print the way it looks on screen?

Usage: mandprint <command> [colours...] [options]

Commands are auto-discovered from mandprint/commands/.
Each command module's docstring is its documentation.
Run `mandprint help <command>` for full module docs.

Colours can be given as:
  #rrggbb or #rgb    hex
  r,g,b              0-255 ints, e.g. 0,73,36
  r,g,b              normalised floats when any part has a decimal point,
                     e.g. 0.5,0.25,1.0 (values outside 0-1 are allowed)

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, mandprint looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.

  MANDPRINT_LOG_LEVEL   DEBUG shows per-colour diagnostics (default WARNING)
  MANDPRINT_OUTPUT      text or json (default text)
"""

import argparse
import importlib
import logging
import sys

from mandprint import registry
from mandprint.core.classify import CLASSIFIERS
from mandprint.core.env import load_env, settings
from mandprint.core.ordering import ChannelOrder
from mandprint.core.palette import hex_to_rgb
from mandprint.core.report import format_json, format_text
from mandprint.core.types import Hue, Report


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'mandprint.commands.{name}')


def _short_help(name: str, default: str) -> str:
    doc = (_load_command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else default


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()
    orders = [o.value for o in ChannelOrder]

    epilog = (
        'Examples:\n'
        "  mandprint check '#004924' 0,73,36 0.5,0.5,1.2\n"
        '  mandprint nearest 1,1,1 --json\n'
        "  mandprint batch '#004924' '#010101' --mode near\n"
        '  mandprint palette --order gbr\n'
        '  mandprint lattice --order rgb --printable-only --png ./tmp/cube.png\n'
        '  mandprint help lattice\n'
    )
    parser = argparse.ArgumentParser(
        prog='mandprint',
        description='Printability checks and palette browsing for MandArt colours.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    # Global --env-file option before subcommand
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    # Auto-register each command as a subcommand using module docstring
    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_help(name, cmd.help))
        if cmd.takes_colors:
            p.add_argument('colors', nargs='+', metavar='COLOUR', help='Colours to check')
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        p.add_argument(
            '-m',
            '--mode',
            choices=sorted(CLASSIFIERS),
            default='exact',
            help='Classifier for batch (default: exact)',
        )
        p.add_argument(
            '-o',
            '--order',
            choices=orders,
            default='rgb',
            help='Channel priority for palette/lattice (default: rgb)',
        )
        p.add_argument(
            '-P',
            '--printable-only',
            action='store_true',
            help='Lattice: replace non-printable colours with white',
        )
        p.add_argument('--png', metavar='PATH', help='Lattice: save the cube as a swatch sheet PNG')

    # `help` subcommand — prints full module docstring for a command
    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<10} {_short_help(name, cmd.help)}')
        print('\nRun: mandprint help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_command_module(topic).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {topic!r})')
        return
    print(doc)


def _parse_color(text: str) -> tuple[float, ...]:
    """Parse a command-line colour into normalised components."""
    text = text.strip()
    if text.startswith('#'):
        rgb = hex_to_rgb(text)
        if rgb is None:
            raise ValueError(f'invalid hex colour: {text!r}')
        return tuple(c / 255.0 for c in rgb)

    parts = [p.strip() for p in text.split(',')]
    if len(parts) not in (3, 4):
        raise ValueError(f'expected #rrggbb or r,g,b: {text!r}')

    if any('.' in p or 'e' in p.lower() for p in parts):
        try:
            return tuple(float(p) for p in parts)
        except ValueError:
            raise ValueError(f'invalid colour components: {text!r}') from None

    try:
        ints = [int(p) for p in parts]
    except ValueError:
        raise ValueError(f'invalid colour components: {text!r}') from None
    if not all(0 <= c <= 255 for c in ints[:3]):
        raise ValueError(f'channel values must be 0-255: {text!r}')
    return tuple(c / 255.0 for c in ints[:3])


def _load_hues(texts: list[str]) -> list[Hue]:
    """Number colours from 1 as the editor's colour list does."""
    return [Hue(num=i, color=_parse_color(t), label=t) for i, t in enumerate(texts, start=1)]


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Load .env before anything else — OS env vars always win
    env_path = load_env(env_file=getattr(args, 'env_file', None))
    config = settings()
    logging.basicConfig(level=config.log_level, format='%(levelname)s %(name)s: %(message)s')
    if env_path:
        print(f'mandprint: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(getattr(args, 'topic', None))
        return

    try:
        hues = _load_hues(getattr(args, 'colors', None) or [])
    except ValueError as exc:
        print(f'Error: {exc}', file=sys.stderr)
        sys.exit(1)

    report = Report(command=args.command)
    cmd = registry.get(args.command)
    cmd.execute(hues, report, args)

    if args.json or config.output == 'json':
        print(format_json(report))
    else:
        print(format_text(report))


if __name__ == '__main__':
    main()
