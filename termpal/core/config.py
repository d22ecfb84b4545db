"""Tunable extraction parameters.

Defaults can be overridden from the environment (after .env loading, see
termpal.core.env) and then by CLI flags:

  TERMPAL_QUANT_STEP        quantisation step per channel (default 24)
  TERMPAL_MAX_COLOURS       diversity cap, 1..30 (default 24)
  TERMPAL_MIN_HUE_DISTANCE  minimum hue separation in degrees (default 15)
  TERMPAL_MIN_CONTRAST      minimum WCAG ratio for foreground/white (default 4.5)
  TERMPAL_RESIZE            square cover-fit size before sampling (default 150)
  TERMPAL_CONTRAST_POLICY   'channel' or 'hsl' (default channel)
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field, replace

MAX_DIVERSE_COLOURS = 30
POLICIES = ('channel', 'hsl')


@dataclass(frozen=True)
class ScoreWeights:
    """Weights for the composite colour score."""

    frequency: float = 0.3
    vibrancy: float = 40.0
    saturation: float = 30.0


@dataclass(frozen=True)
class ExtractionParams:
    quant_step: int = 24
    max_colours: int = 24
    min_hue_distance: float = 15.0
    min_contrast: float = 4.5
    bright_white_contrast: float = 3.0
    resize: int = 150
    contrast_policy: str = 'channel'
    weights: ScoreWeights = field(default_factory=ScoreWeights)

    def validate(self) -> ExtractionParams:
        """Raise ValueError on out-of-range values; return self for chaining."""
        if self.quant_step < 1:
            raise ValueError(f'quant_step must be >= 1, got {self.quant_step}')
        if not 1 <= self.max_colours <= MAX_DIVERSE_COLOURS:
            raise ValueError(f'max_colours must be in 1..{MAX_DIVERSE_COLOURS}, got {self.max_colours}')
        if not 0 <= self.min_hue_distance <= 180:
            raise ValueError(f'min_hue_distance must be in 0..180, got {self.min_hue_distance}')
        if not 1.0 <= self.min_contrast <= 21.0:
            raise ValueError(f'min_contrast must be in 1..21, got {self.min_contrast}')
        if not 1.0 <= self.bright_white_contrast <= 21.0:
            raise ValueError(f'bright_white_contrast must be in 1..21, got {self.bright_white_contrast}')
        if self.resize < 1:
            raise ValueError(f'resize must be >= 1, got {self.resize}')
        if self.contrast_policy not in POLICIES:
            raise ValueError(f'contrast_policy must be one of {", ".join(POLICIES)}, got {self.contrast_policy!r}')
        return self

    def override(self, **changes: object) -> ExtractionParams:
        """Copy with the non-None changes applied, validated."""
        changes = {k: v for k, v in changes.items() if v is not None}
        return replace(self, **changes).validate()  # type: ignore[arg-type]

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ExtractionParams:
        """Read TERMPAL_* overrides. Malformed numbers raise ValueError."""
        env = os.environ if environ is None else environ
        return cls().override(
            quant_step=_get(env, 'TERMPAL_QUANT_STEP', int),
            max_colours=_get(env, 'TERMPAL_MAX_COLOURS', int),
            min_hue_distance=_get(env, 'TERMPAL_MIN_HUE_DISTANCE', float),
            min_contrast=_get(env, 'TERMPAL_MIN_CONTRAST', float),
            resize=_get(env, 'TERMPAL_RESIZE', int),
            contrast_policy=_get(env, 'TERMPAL_CONTRAST_POLICY', str),
        )


def _get(env: Mapping[str, str], key: str, cast: type) -> object | None:
    raw = env.get(key)
    if raw is None or raw.strip() == '':
        return None
    try:
        return cast(raw.strip())
    except ValueError:
        raise ValueError(f'{key}={raw!r} is not a valid {cast.__name__}') from None
