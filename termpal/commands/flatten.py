"""Collapse {"dark": X, "light": Y} colour values in a JSON theme.

Reads a theme document, replaces every dark/light pair inside its `theme`
section with the --prefer side, and prints the rewritten document to
stdout. Adaptive themes (defs with both light_bg and dark_bg) are printed
unchanged. The input file is never modified.

Example:
    termpal flatten ~/.config/opencode/themes/dark-ocean.json > fixed.json
    termpal flatten theme.json --prefer light
"""

import json
import sys

from termpal.core.theme_tree import flatten_theme
from termpal.core.types import Command, Report

command = Command(
    name='flatten',
    help='Collapse dark/light colour pairs in a JSON theme file.',
    needs_image=False,
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('theme', help='Path to a JSON theme file')
    parser.add_argument('--prefer', choices=('dark', 'light'), default='dark', help='Side to keep (default: dark)')


@command.run
def run(pixels, report: Report, args) -> None:
    with open(args.theme, encoding='utf-8') as f:
        doc = json.load(f)
    flattened, changed = flatten_theme(doc, prefer=args.prefer)
    status = 'flattened' if changed else 'unchanged'
    print(f'termpal: {args.theme}: {status}', file=sys.stderr)
    report.add('flatten', {'changed': changed, 'document': flattened})
