"""Extract a 20-colour terminal palette from an image.

Samples the image (cover-fit to --resize pixels square), quantises it,
picks the background/foreground from the full colour histogram and fills
the 16 ANSI slots from a hue-diverse subset. Foreground and white are
corrected to --min-contrast (WCAG, default 4.5); bright white to 3.0.

Reports the palette in external field order (background ... brightWhite),
the contrast checks, and the theme names for terminal (Title Case) and
JSON (kebab-case) theme files.

Example:
    termpal extract sunset.png
    termpal extract moody.jpg --name "Dark Ocean" --json
    termpal extract moody.jpg --policy hsl --fail-under-contrast 4.5
"""

import os

from termpal.core.contrast import get_contrast_ratio
from termpal.core.extract import extract_palette
from termpal.core.names import to_kebab_case, to_title_case
from termpal.core.types import Command, PixelBuffer, Report

command = Command(
    name='extract',
    help='Extract a WCAG-checked 20-colour terminal palette from an image.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('-n', '--name', help='Theme name (default: image file name)')


def _theme_name(args) -> str:
    if getattr(args, 'name', None):
        return args.name
    return os.path.splitext(os.path.basename(args.image))[0]


@command.run
def run(pixels: PixelBuffer, report: Report, args) -> None:
    params = args.params
    palette = extract_palette(pixels, params)
    colours = palette.as_dict()

    checks = []
    for pair, fg, minimum in (
        ('foreground/background', palette.foreground, params.min_contrast),
        ('white/background', palette.white, params.min_contrast),
        ('brightWhite/background', palette.bright_white, params.bright_white_contrast),
    ):
        ratio = get_contrast_ratio(fg, palette.background)
        passed = ratio >= minimum
        report.record_check(passed)
        checks.append({'pair': pair, 'ratio': round(ratio, 2), 'min': minimum, 'pass': passed})

    name = _theme_name(args)
    report.add(
        'extract',
        {
            'theme_names': {'terminal': to_title_case(name), 'json': to_kebab_case(name)},
            'palette': colours,
            'checks': checks,
            'contrast': round(get_contrast_ratio(palette.foreground, palette.background), 2),
        },
    )
