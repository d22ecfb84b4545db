"""Check (and repair) the WCAG contrast of a foreground/background pair.

Prints the contrast ratio, whether it meets AA (4.5:1) and AAA (7:1), and
the nearest compliant foreground for --min-ratio under the chosen policy:

  channel  step R, G and B together by 10 (default)
  hsl      step lightness by 5%, then reduce saturation

No image is needed.

Example:
    termpal contrast '#cccccc' '#dddddd'
    termpal contrast '#ff8888' '#ffffff' --min-ratio 3 --policy hsl --json
"""

from termpal.core.colour import hex_to_rgb, rgb_to_hex
from termpal.core.contrast import get_contrast_ratio, get_policy, meets_contrast_standard
from termpal.core.types import Command, Report

command = Command(
    name='contrast',
    help='WCAG contrast ratio of a colour pair, with an accessible fix.',
    needs_image=False,
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('foreground', help='Foreground colour, #rrggbb')
    parser.add_argument('background', help='Background colour, #rrggbb')
    parser.add_argument('-m', '--min-ratio', type=float, default=None, help='Target ratio (default: --min-contrast)')


@command.run
def run(pixels, report: Report, args) -> None:
    params = args.params
    # normalise to lowercase #rrggbb; raises ValueError on bad input
    fg = rgb_to_hex(*hex_to_rgb(args.foreground))
    bg = rgb_to_hex(*hex_to_rgb(args.background))
    min_ratio = args.min_ratio if args.min_ratio is not None else params.min_contrast

    adjusted = get_policy(params.contrast_policy)(fg, bg, min_ratio)
    ratio = get_contrast_ratio(fg, bg)
    report.record_check(ratio >= min_ratio)
    report.add(
        'contrast',
        {
            'foreground': fg,
            'background': bg,
            'ratio': round(ratio, 2),
            'aa': meets_contrast_standard(fg, bg, 'AA'),
            'aaa': meets_contrast_standard(fg, bg, 'AAA'),
            'min_ratio': min_ratio,
            'policy': params.contrast_policy,
            'adjusted': adjusted,
            'adjusted_ratio': round(get_contrast_ratio(adjusted, bg), 2),
        },
    )
