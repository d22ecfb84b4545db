"""Shared types for termpal: PixelBuffer, ColourSample, Palette, Command, Report."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, fields
from typing import Any

from termpal.core.colour import RGB, is_hex, rgb_to_hex


@dataclass(frozen=True)
class PixelBuffer:
    """Interleaved 8-bit RGB samples, row-major, no alpha."""

    width: int
    height: int
    data: bytes

    def __post_init__(self) -> None:
        if len(self.data) != self.width * self.height * 3:
            raise ValueError(f'PixelBuffer expects {self.width}x{self.height}x3 bytes, got {len(self.data)}')


@dataclass(frozen=True)
class ColourSample:
    """One quantised colour bucket with its photometric features."""

    rgb: RGB
    count: int
    luminance: float  # 0.299R + 0.587G + 0.114B, [0, 255]
    saturation: float  # [0, 1]
    vibrancy: float  # saturation * value, [0, 1]
    hue: float  # degrees [0, 360), 0 when achromatic
    score: float = 0.0

    @property
    def hex(self) -> str:
        return rgb_to_hex(*self.rgb)


# Python attribute -> external field name, in canonical slot order
PALETTE_FIELDS: dict[str, str] = {
    'background': 'background',
    'foreground': 'foreground',
    'cursor': 'cursor',
    'selection': 'selection',
    'black': 'black',
    'red': 'red',
    'green': 'green',
    'yellow': 'yellow',
    'blue': 'blue',
    'magenta': 'magenta',
    'cyan': 'cyan',
    'white': 'white',
    'bright_black': 'brightBlack',
    'bright_red': 'brightRed',
    'bright_green': 'brightGreen',
    'bright_yellow': 'brightYellow',
    'bright_blue': 'brightBlue',
    'bright_magenta': 'brightMagenta',
    'bright_cyan': 'brightCyan',
    'bright_white': 'brightWhite',
}


@dataclass(frozen=True)
class Palette:
    """A 20-slot terminal palette. Every value is a lowercase '#rrggbb'."""

    background: str
    foreground: str
    cursor: str
    selection: str
    black: str
    red: str
    green: str
    yellow: str
    blue: str
    magenta: str
    cyan: str
    white: str
    bright_black: str
    bright_red: str
    bright_green: str
    bright_yellow: str
    bright_blue: str
    bright_magenta: str
    bright_cyan: str
    bright_white: str

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not is_hex(value):
                raise ValueError(f'Palette.{f.name} is not a lowercase #rrggbb colour: {value!r}')

    def as_dict(self) -> dict[str, str]:
        """External camelCase mapping, in canonical slot order."""
        return {ext: getattr(self, attr) for attr, ext in PALETTE_FIELDS.items()}

    @classmethod
    def from_dict(cls, data: Mapping[str, str]) -> Palette:
        """Build from the camelCase mapping produced by as_dict()."""
        missing = [ext for ext in PALETTE_FIELDS.values() if ext not in data]
        if missing:
            raise ValueError(f'Palette mapping is missing: {", ".join(missing)}')
        # non-strings are left for __post_init__ to reject
        return cls(**{attr: _lower(data[ext]) for attr, ext in PALETTE_FIELDS.items()})


def _lower(value: object) -> object:
    return value.lower() if isinstance(value, str) else value


class Command:
    """A self-registering CLI command.

    Usage in a command module:

        command = Command(name='census', help='Most frequent quantised colours')

        @command.arguments
        def arguments(parser):
            parser.add_argument('--top', type=int, default=10)

        @command.run
        def run(pixels, report, args):
            ...

    Commands with needs_image=True get the decoded PixelBuffer as `pixels`;
    the others get None and read their inputs from `args`.
    """

    def __init__(self, name: str, help: str = '', needs_image: bool = True):
        self.name = name
        self.help = help
        self.needs_image = needs_image
        self._run_fn: Callable | None = None
        self._arguments_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def arguments(self, fn: Callable) -> Callable:
        """Decorator to register extra argparse arguments for this command."""
        self._arguments_fn = fn
        return fn

    def add_arguments(self, parser: Any) -> None:
        if self._arguments_fn is not None:
            self._arguments_fn(parser)

    def execute(self, pixels: PixelBuffer | None, report: Report, args: Any) -> None:
        """Execute the command's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(pixels, report, args)


@dataclass
class Report:
    """Accumulates results from commands for text/JSON output."""

    source: str = ''
    width: int = 0
    height: int = 0
    sections: dict[str, dict[str, Any]] = field(default_factory=dict)
    pass_count: int = 0
    fail_count: int = 0

    def add(self, command_name: str, data: dict[str, Any]) -> None:
        """Add (or extend) a command's results."""
        self.sections.setdefault(command_name, {}).update(data)

    def record_check(self, passed: bool) -> None:
        if passed:
            self.pass_count += 1
        else:
            self.fail_count += 1
