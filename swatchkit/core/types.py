"""Shared types for swatchkit: Color, PaletteEntry, Badge, Report, Command."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass(frozen=True)
class Color:
    """An 8-bit sRGB colour. Every channel is an int in [0, 255]."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ('r', 'g', 'b'):
            value = getattr(self, name)
            # bool is an int subclass but never a channel value
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f'Channel {name} must be an int, got {value!r}')
            if not 0 <= value <= 255:
                raise ValueError(f'Channel {name} out of range [0, 255]: {value}')

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> Color:
        """Build a Color from any 3-item sequence, rounding half up and clamping."""
        if len(values) != 3:
            raise ValueError(f'Expected 3 channels, got {len(values)}')
        channels = [max(0, min(255, math.floor(float(v) + 0.5))) for v in values]
        return cls(*channels)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def hex(self) -> str:
        from swatchkit.core.codec import encode

        return encode(self)


# A sampled pixel only carries channel values once it leaves the sampler.
Pixel = Color
PixelSet = list[Color]


class PixelSource(Protocol):
    """Random-access pixel reader over a decoded image.

    PIL.Image.Image satisfies this. getpixel may return RGB or RGBA tuples;
    RGB is treated as fully opaque.
    """

    width: int
    height: int

    def getpixel(self, xy: tuple[int, int]) -> Sequence[int]: ...


@dataclass(frozen=True)
class PaletteEntry:
    """One dominant colour and the number of sampled pixels it represents."""

    color: Color
    count: int

    @property
    def hex(self) -> str:
        return self.color.hex

    def to_dict(self, total: int | None = None) -> dict[str, Any]:
        data: dict[str, Any] = {
            'hex': self.hex,
            'r': self.color.r,
            'g': self.color.g,
            'b': self.color.b,
            'count': self.count,
        }
        if total:
            data['pct'] = round(self.count / total * 100.0, 1)
        return data


@dataclass(frozen=True)
class Badge:
    """A WCAG pass/fail check at a fixed contrast threshold."""

    label: str
    threshold: float
    passed: bool


@dataclass
class ContrastResult:
    foreground: Color
    background: Color
    ratio: float
    badges: list[Badge] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            'foreground': self.foreground.hex,
            'background': self.background.hex,
            'ratio': self.ratio,
            'badges': [{'label': b.label, 'threshold': b.threshold, 'pass': b.passed} for b in self.badges],
        }


@dataclass
class Report:
    """Accumulates command results for text/JSON output."""

    source: str = ''
    width: int = 0
    height: int = 0
    sections: dict[str, dict[str, Any]] = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)

    def add(self, command_name: str, data: dict[str, Any]) -> None:
        """Add (or merge into) the results for a command."""
        self.sections.setdefault(command_name, {}).update(data)

    def set_image(self, source: str, width: int, height: int) -> None:
        self.source = source
        self.width = width
        self.height = height

    def fail(self, message: str) -> None:
        self.errors.append(message)

    @property
    def ok(self) -> bool:
        return not self.errors


class Command:
    """A self-registering CLI command.

    Usage in a command module:

        command = Command(name='contrast', help='WCAG contrast between two colours')

        @command.arguments
        def add_arguments(parser):
            parser.add_argument('foreground')

        @command.run
        def run(report, args):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None
        self._args_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def arguments(self, fn: Callable) -> Callable:
        """Decorator to register the argparse setup function."""
        self._args_fn = fn
        return fn

    def configure(self, parser: Any) -> None:
        if self._args_fn is not None:
            self._args_fn(parser)

    def execute(self, report: Report, args: Any) -> None:
        """Execute the command's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(report, args)
