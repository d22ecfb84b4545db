"""Colour scorer: photometric features and composite desirability.

score = log(count + 1) * w_freq + vibrancy * w_vib + saturation * w_sat

Frequency is logarithmic so a few dominant colours cannot drown out a
rare but vivid accent.
"""

from __future__ import annotations

import math
from collections.abc import Mapping

from termpal.core import colour
from termpal.core.colour import RGB
from termpal.core.config import ScoreWeights
from termpal.core.types import ColourSample


def score(count: int, vibrancy: float, saturation: float, weights: ScoreWeights | None = None) -> float:
    w = weights or ScoreWeights()
    return math.log(count + 1) * w.frequency + vibrancy * w.vibrancy + saturation * w.saturation


def make_sample(rgb: RGB, count: int, weights: ScoreWeights | None = None) -> ColourSample:
    """Build a scored ColourSample for one histogram bucket."""
    sat = colour.saturation(rgb)
    vib = colour.vibrancy(rgb)
    return ColourSample(
        rgb=rgb,
        count=count,
        luminance=colour.luminance(rgb),
        saturation=sat,
        vibrancy=vib,
        hue=colour.hue(rgb) if sat > 0 else 0.0,
        score=score(count, vib, sat, weights),
    )


def analyse(histogram: Mapping[RGB, int], weights: ScoreWeights | None = None) -> list[ColourSample]:
    """Score every histogram bucket, preserving histogram order."""
    return [make_sample(rgb, count, weights) for rgb, count in histogram.items()]
