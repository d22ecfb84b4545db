"""Hue-diverse candidate colours, in selection order.

Shows the colours the ANSI slot search chooses from: score-ranked, each
separated from every earlier pick by more than --min-hue-distance degrees
of hue or 40 levels of luminance, capped at --max-colours.

Example:
    termpal diverse sunset.png --max-colours 12
"""

from termpal.core.quantize import quantize
from termpal.core.report import sample_to_dict
from termpal.core.scoring import analyse
from termpal.core.selection import select_diverse
from termpal.core.types import Command, PixelBuffer, Report

command = Command(
    name='diverse',
    help='List the hue/luminance-diverse candidates used for ANSI slots.',
)


@command.run
def run(pixels: PixelBuffer, report: Report, args) -> None:
    params = args.params
    samples = analyse(quantize(pixels, params.quant_step), params.weights)
    picked = select_diverse(samples, params.max_colours, params.min_hue_distance)
    report.add('diverse', {'colours': [sample_to_dict(s) for s in picked]})
