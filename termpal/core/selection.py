"""Diversity selection and background/foreground choice.

select_diverse() works on the scored samples and feeds the ANSI slot
search. choose_background()/choose_foreground() rank the *full* sample
set, since legibility depends on what actually dominates the image, not
on a hue-diversified subset.
"""

from __future__ import annotations

from collections.abc import Sequence

from termpal.core.colour import RGB, hue_distance
from termpal.core.types import ColourSample

# Colours closer in hue than min_hue_distance still qualify if their
# luminance differs by more than this (a colour and its shadow)
LUMINANCE_SEPARATION = 40.0

# Foreground candidates must differ from the background by more than this
FOREGROUND_LUMINANCE_GAP = 100.0

DARK_THRESHOLD = 128.0

WHITE: RGB = (255, 255, 255)
BLACK: RGB = (0, 0, 0)


def _is_distinct(candidate: ColourSample, accepted: Sequence[ColourSample], min_hue_distance: float) -> bool:
    for other in accepted:
        if hue_distance(candidate.hue, other.hue) > min_hue_distance:
            continue
        if abs(candidate.luminance - other.luminance) > LUMINANCE_SEPARATION:
            continue
        return False
    return True


def select_diverse(samples: Sequence[ColourSample], max_count: int, min_hue_distance: float) -> list[ColourSample]:
    """Greedy, score-ordered pick of hue/luminance separated colours.

    sorted() is stable, so equal scores keep their input order.
    """
    ranked = sorted(samples, key=lambda s: -s.score)
    accepted: list[ColourSample] = []
    for candidate in ranked:
        if len(accepted) >= max_count:
            break
        if _is_distinct(candidate, accepted, min_hue_distance):
            accepted.append(candidate)
    return accepted


def background_score(sample: ColourSample) -> float:
    return sample.count * 10 - sample.saturation * 500 - abs(sample.luminance - 128) * 2


def choose_background(samples: Sequence[ColourSample]) -> ColourSample | None:
    """Most common, least saturated colour. None if there are no samples."""
    if not samples:
        return None
    # max() returns the first of equal maxima
    return max(samples, key=background_score)


def is_dark(sample: ColourSample) -> bool:
    return sample.luminance < DARK_THRESHOLD


def choose_foreground(samples: Sequence[ColourSample], background: ColourSample) -> RGB:
    """Best legible text colour for `background`, as an RGB triple.

    Falls back to pure white on dark backgrounds and pure black on light
    ones when nothing clears the luminance gap.
    """
    dark = is_dark(background)
    sign = 1 if dark else -1
    pool = [s for s in samples if abs(s.luminance - background.luminance) > FOREGROUND_LUMINANCE_GAP]
    if not pool:
        return WHITE if dark else BLACK
    best = max(pool, key=lambda s: s.count * 5 - s.saturation * 200 + sign * s.luminance)
    return best.rgb
