"""termpal: Terminal colour palettes from images, checked against WCAG contrast.

Usage: termpal <command> [image | inputs] [options]

Commands are auto-discovered from termpal/commands/.
Each command module's docstring is its documentation.
Run `termpal help <command>` for full module docs.

Configuration:
  Extraction defaults come from TERMPAL_* environment variables
  (see termpal.core.config) and are overridden by command-line flags.
  If a variable is not set, termpal looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import json
import sys

from termpal import registry
from termpal.core.config import POLICIES, ExtractionParams
from termpal.core.env import load_env
from termpal.core.image import DecodeError, load_pixels
from termpal.core.report import format_json, format_text
from termpal.core.types import Report


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'termpal.commands.{name}')


def _short_doc(name: str, fallback: str) -> str:
    doc = (_load_command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _add_extraction_options(p: argparse.ArgumentParser) -> None:
    p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
    p.add_argument('-q', '--quant-step', type=int, default=None, metavar='N', help='Quantisation step per channel')
    p.add_argument('-c', '--max-colours', type=int, default=None, metavar='N', help='Diverse candidate cap (1-30)')
    p.add_argument(
        '--min-hue-distance', type=float, default=None, metavar='DEG', help='Minimum hue separation in degrees'
    )
    p.add_argument('--min-contrast', type=float, default=None, metavar='R', help='Minimum WCAG ratio (default 4.5)')
    p.add_argument('--resize', type=int, default=None, metavar='PX', help='Square cover-fit size before sampling')
    p.add_argument('-p', '--policy', choices=POLICIES, default=None, help='Contrast repair policy')
    p.add_argument(
        '--fail-under-contrast',
        type=float,
        default=None,
        metavar='R',
        help='Exit 1 if the foreground/background ratio is below R (CI gating)',
    )


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        '  termpal extract sunset.png\n'
        '  termpal extract moody.jpg --name "Dark Ocean" --json\n'
        '  termpal extract moody.jpg --fail-under-contrast=7\n'
        '  termpal census sunset.png --top 20\n'
        '  termpal all sunset.png --policy hsl\n'
        "  termpal contrast '#cccccc' '#dddddd'\n"
        '  termpal flatten theme.json > fixed.json\n'
        '  termpal help extract\n'
        '\n'
        'Environment (set in .env or environment):\n'
        '  TERMPAL_QUANT_STEP, TERMPAL_MAX_COLOURS, TERMPAL_MIN_HUE_DISTANCE,\n'
        '  TERMPAL_MIN_CONTRAST, TERMPAL_RESIZE, TERMPAL_CONTRAST_POLICY\n'
    )
    parser = argparse.ArgumentParser(
        prog='termpal',
        description='Terminal colour palettes from images, checked against WCAG contrast.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_doc(name, cmd.help))
        if cmd.needs_image:
            p.add_argument('image', help='Path to an image (PNG, JPEG, WebP, ...)')
        cmd.add_arguments(p)
        _add_extraction_options(p)

    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<10} {_short_doc(name, cmd.help)}')
        print('\nRun: termpal help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_command_module(topic).__doc__ or '').strip()
    print(doc if doc else f'(No module docs for {topic!r})')


def _build_params(args: argparse.Namespace) -> ExtractionParams:
    """Environment first, then command-line flags."""
    return ExtractionParams.from_env().override(
        quant_step=args.quant_step,
        max_colours=args.max_colours,
        min_hue_distance=args.min_hue_distance,
        min_contrast=args.min_contrast,
        resize=args.resize,
        contrast_policy=args.policy,
    )


def _check_fail_under_contrast(report: Report, threshold: float) -> bool:
    """Return True if the extracted foreground/background ratio is below threshold."""
    extract = report.sections.get('extract')
    if extract is None:
        return False
    ratio = extract['contrast']
    if ratio < threshold:
        print(f'\nFAIL: foreground/background contrast {ratio}:1 is below {threshold}:1')
        return True
    return False


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Load .env before reading TERMPAL_*; OS env vars always win
    env_path = load_env(env_file=args.env_file)
    if env_path:
        print(f'termpal: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(args.topic)
        return

    cmd = registry.get(args.command)
    try:
        args.params = _build_params(args)
        report = Report()
        pixels = None
        if cmd.needs_image:
            pixels = load_pixels(args.image, size=args.params.resize)
            report.source = args.image
            report.width, report.height = pixels.width, pixels.height
        cmd.execute(pixels, report, args)
    except (DecodeError, ValueError, OSError) as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)

    # Output
    if args.command == 'flatten':
        print(json.dumps(report.sections['flatten']['document'], indent=2))
    elif args.json:
        print(format_json(report))
    else:
        print(format_text(report))

    # CI gate runs after output so the report is visible on failure
    if args.fail_under_contrast is not None and _check_fail_under_contrast(report, args.fail_under_contrast):
        sys.exit(1)


if __name__ == '__main__':
    main()
