"""WCAG 2.1 contrast engine.

relative_luminance / get_contrast_ratio follow
https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio

Two repair policies share the same contract: return `foreground` untouched
when it already meets `min_ratio`, otherwise move it away from the
background (lighter on dark backgrounds, darker on light ones) until the
ratio is met, falling back to pure white/black.

  channel  step R, G and B by 10 per iteration (default, used by extraction)
  hsl      step HSL lightness by 5%, then shed saturation in 10% steps
"""

from __future__ import annotations

import colorsys
from collections.abc import Callable

from termpal.core import colour
from termpal.core.colour import hex_to_rgb, rgb_to_hex

LEVELS = {'AA': 4.5, 'AAA': 7.0}

CHANNEL_STEP = 10
CHANNEL_ITERATIONS = 25
LIGHTNESS_STEP = 0.05
SATURATION_STEP = 0.1
# hsl policy lightness bounds; saturation is shed once one is reached
LIGHTNESS_MIN = 0.05
LIGHTNESS_MAX = 0.95

WHITE = '#ffffff'
BLACK = '#000000'


def _linearise(c: int) -> float:
    s = c / 255.0
    return s / 12.92 if s <= 0.03928 else ((s + 0.055) / 1.055) ** 2.4


def relative_luminance(hex_str: str) -> float:
    r, g, b = hex_to_rgb(hex_str)
    return 0.2126 * _linearise(r) + 0.7152 * _linearise(g) + 0.0722 * _linearise(b)


def get_contrast_ratio(colour1: str, colour2: str) -> float:
    """Contrast ratio in [1, 21]. Symmetric in its arguments."""
    l1 = relative_luminance(colour1)
    l2 = relative_luminance(colour2)
    return (max(l1, l2) + 0.05) / (min(l1, l2) + 0.05)


def meets_contrast_standard(foreground: str, background: str, level: str = 'AA') -> bool:
    if level not in LEVELS:
        raise ValueError(f'Unknown WCAG level {level!r}; expected one of {", ".join(LEVELS)}')
    return get_contrast_ratio(foreground, background) >= LEVELS[level]


def _should_lighten(background: str) -> bool:
    return relative_luminance(background) < 0.5


def adjust_for_contrast(foreground: str, background: str, min_ratio: float = 4.5) -> str:
    """Channel-stepping repair. Returns lowercase hex."""
    if get_contrast_ratio(foreground, background) >= min_ratio:
        return foreground

    lighten = _should_lighten(background)
    step = CHANNEL_STEP if lighten else -CHANNEL_STEP
    limit = 255 if lighten else 0
    r, g, b = hex_to_rgb(foreground)

    for _ in range(CHANNEL_ITERATIONS):
        candidate = rgb_to_hex(r, g, b)
        if get_contrast_ratio(candidate, background) >= min_ratio:
            return candidate
        if r == g == b == limit:
            break
        r, g, b = (max(0, min(255, c + step)) for c in (r, g, b))

    return WHITE if lighten else BLACK


def _hls_to_hex(h: float, lightness: float, s: float) -> str:
    r, g, b = colorsys.hls_to_rgb(h, lightness, s)
    return rgb_to_hex(*(colour.round_half_up(c * 255) for c in (r, g, b)))


def adjust_for_contrast_hsl(foreground: str, background: str, min_ratio: float = 4.5) -> str:
    """Hue-preserving repair in HSL space. Returns lowercase hex."""
    if get_contrast_ratio(foreground, background) >= min_ratio:
        return foreground

    lighten = _should_lighten(background)
    r, g, b = hex_to_rgb(foreground)
    h, lightness, s = colorsys.rgb_to_hls(r / 255.0, g / 255.0, b / 255.0)

    while True:
        if lighten:
            lightness = max(lightness, min(LIGHTNESS_MAX, lightness + LIGHTNESS_STEP))
            saturated = lightness >= LIGHTNESS_MAX
        else:
            lightness = min(lightness, max(LIGHTNESS_MIN, lightness - LIGHTNESS_STEP))
            saturated = lightness <= LIGHTNESS_MIN
        candidate = _hls_to_hex(h, lightness, s)
        if get_contrast_ratio(candidate, background) >= min_ratio:
            return candidate
        if saturated:
            break

    while s > 0.0:
        s = max(0.0, s - SATURATION_STEP)
        candidate = _hls_to_hex(h, lightness, s)
        if get_contrast_ratio(candidate, background) >= min_ratio:
            return candidate

    return WHITE if lighten else BLACK


ContrastPolicy = Callable[[str, str, float], str]

CONTRAST_POLICIES: dict[str, ContrastPolicy] = {
    'channel': adjust_for_contrast,
    'hsl': adjust_for_contrast_hsl,
}


def get_policy(name: str) -> ContrastPolicy:
    if name not in CONTRAST_POLICIES:
        raise KeyError(f'Unknown contrast policy: {name}. Available: {", ".join(sorted(CONTRAST_POLICIES))}')
    return CONTRAST_POLICIES[name]


def get_saturation(hex_str: str) -> float:
    return colour.saturation(hex_to_rgb(hex_str))


def get_vibrancy(hex_str: str) -> float:
    return colour.vibrancy(hex_to_rgb(hex_str))
