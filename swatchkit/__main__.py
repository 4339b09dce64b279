"""swatchkit — Dominant-colour palettes and WCAG contrast from the command line.

Usage: swatchkit <command> [options]

Commands are auto-discovered from swatchkit/commands/.
Each command module's docstring is its documentation.
Run `swatchkit help <command>` for full module docs.

Settings:
  CLI flags win. Otherwise SWATCHKIT_MAX_SAMPLES, SWATCHKIT_COLORS,
  SWATCHKIT_ITERATIONS and SWATCHKIT_SEED are read from the environment.
  If a variable is not set, swatchkit looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to point at a .env file explicitly.
"""

import argparse
import importlib
import logging
import sys

from swatchkit import registry
from swatchkit.core.config import load_env, load_settings
from swatchkit.core.report import format_json, format_text
from swatchkit.core.types import Report

# Options that fall back to Settings when not given on the command line
_SETTING_OPTIONS = ('max_samples', 'colors', 'iterations', 'seed')


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'swatchkit.commands.{name}')


def _short_help(name: str, fallback: str) -> str:
    doc = (_load_command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        '  swatchkit extract photo.jpg --colors 8\n'
        '  swatchkit extract photo.jpg --seed 1 --name "Sunset" --out-dir ./palettes\n'
        '  swatchkit contrast "#1E293B" "#F8FAFC"\n'
        '  swatchkit contrast "rgb(255, 255, 255)" 2563EB --json\n'
        '  swatchkit sample photo.png --max-samples 1000\n'
        '  swatchkit help extract\n'
    )
    parser = argparse.ArgumentParser(
        prog='swatchkit',
        description='Dominant-colour palettes and WCAG contrast checks.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging on stderr')
    sub = parser.add_subparsers(dest='command', help='Command to run')

    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_help(name, cmd.help))
        cmd.configure(p)
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')

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
        print('\nRun: swatchkit help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_command_module(topic).__doc__ or '').strip()
    print(doc if doc else f'(No module docs for {topic!r})')


def _apply_settings(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    settings = load_settings()
    for name in _SETTING_OPTIONS:
        if hasattr(args, name) and getattr(args, name) is None:
            setattr(args, name, getattr(settings, name))

    for name in ('max_samples', 'iterations'):
        value = getattr(args, name, None)
        if value is not None and value < 1:
            parser.error(f'--{name.replace("_", "-")} must be >= 1, got {value}')


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )

    # OS env vars always win over .env values
    env_path = load_env(env_file=args.env_file)
    if env_path:
        print(f'swatchkit: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(args.topic)
        return

    _apply_settings(args, parser)

    report = Report()
    registry.get(args.command).execute(report, args)

    if args.json:
        print(format_json(report))
    elif report.sections:
        print(format_text(report))

    if not report.ok:
        for message in report.errors:
            print(f'Error: {message}', file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
