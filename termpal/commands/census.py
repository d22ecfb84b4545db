"""Quantised colour census: the most frequent colours and their features.

Quantises every sampled pixel to --quant-step per channel and lists the
top buckets by pixel count, with luminance, saturation, vibrancy, hue and
the composite score used for diversity selection.

Example:
    termpal census sunset.png --top 20
"""

from termpal.core.quantize import quantize
from termpal.core.report import sample_to_dict
from termpal.core.scoring import analyse
from termpal.core.types import Command, PixelBuffer, Report

command = Command(
    name='census',
    help='List the most frequent quantised colours with their scores.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('-t', '--top', type=int, default=10, help='Number of colours to list (default: 10)')


@command.run
def run(pixels: PixelBuffer, report: Report, args) -> None:
    params = args.params
    samples = analyse(quantize(pixels, params.quant_step), params.weights)
    top = sorted(samples, key=lambda s: -s.count)[: getattr(args, 'top', 10)]
    report.add(
        'census',
        {
            'buckets': len(samples),
            'pixels': pixels.width * pixels.height,
            'colours': [sample_to_dict(s) for s in top],
        },
    )
