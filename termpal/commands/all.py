"""Run every image command, combine into a single report.

Runs: census, diverse, extract.
Skips: contrast and flatten (they take colours/theme files, not an image).

Example:
    termpal all sunset.png
    termpal all sunset.png --json
"""

from termpal.core.types import Command, PixelBuffer, Report

command = Command(
    name='all',
    help='Run every image command (census, diverse, extract) into one report.',
)


@command.run
def run(pixels: PixelBuffer, report: Report, args) -> None:
    from termpal.registry import all_commands

    for name, cmd in sorted(all_commands().items()):
        if name == 'all' or not cmd.needs_image:
            continue
        cmd.execute(pixels, report, args)
