"""End-to-end palette extraction.

pixel buffer -> histogram -> scored samples -> diverse subset
  -> {background, foreground} -> 20-slot palette -> contrast corrected

Pure: the same buffer and params always give the same Palette.
"""

from __future__ import annotations

from dataclasses import dataclass

from termpal.core.colour import rgb_to_hex
from termpal.core.config import ExtractionParams
from termpal.core.contrast import get_policy
from termpal.core.quantize import BufferLike, quantize
from termpal.core.scoring import analyse
from termpal.core.selection import choose_background, choose_foreground, select_diverse
from termpal.core.slots import build_palette
from termpal.core.types import ColourSample, Palette

# Used when the buffer holds no pixels at all
DEFAULT_BACKGROUND = '#181818'
DEFAULT_FOREGROUND = '#ffffff'


@dataclass(frozen=True)
class Extraction:
    """Every intermediate stage, for reporting and inspection."""

    samples: tuple[ColourSample, ...]
    diverse: tuple[ColourSample, ...]
    background: ColourSample | None
    palette: Palette


def run_pipeline(buffer: BufferLike, params: ExtractionParams | None = None) -> Extraction:
    params = (params or ExtractionParams()).validate()
    adjust = get_policy(params.contrast_policy)

    histogram = quantize(buffer, params.quant_step)
    samples = analyse(histogram, params.weights)
    diverse = select_diverse(samples, params.max_colours, params.min_hue_distance)
    background = choose_background(samples)

    if background is None:
        bg_hex, fg_hex = DEFAULT_BACKGROUND, DEFAULT_FOREGROUND
    else:
        bg_hex = background.hex
        fg_hex = rgb_to_hex(*choose_foreground(samples, background))

    palette = build_palette(
        bg_hex,
        fg_hex,
        diverse,
        min_contrast=params.min_contrast,
        bright_white_contrast=params.bright_white_contrast,
        adjust=adjust,
    )
    return Extraction(samples=tuple(samples), diverse=tuple(diverse), background=background, palette=palette)


def extract_palette(buffer: BufferLike, params: ExtractionParams | None = None) -> Palette:
    """Extract a 20-colour terminal palette from an RGB pixel buffer."""
    return run_pipeline(buffer, params).palette


def default_palette(params: ExtractionParams | None = None) -> Palette:
    """The palette returned for an empty buffer."""
    return extract_palette(b'', params)
