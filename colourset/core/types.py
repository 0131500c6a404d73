"""Shared types for colourset: HSV, Colourset, Palette, Renderer and errors."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, NamedTuple

import numpy as np

from colourset.core.convert import hsv_to_rgb, rgb_to_hex, rgb_to_xcolor

# Closed set of colour roles, in table order
ROLES: tuple[str, ...] = (
    'background',
    'topshadow',
    'bottomshadow',
    'foreground',
    'foreground_inactive',
)

GREY = 360  # hue sentinel: no hue at all


class ColoursetError(Exception):
    """Base class for every error raised by colourset."""


class UnknownRoleError(ColoursetError, KeyError):
    """A colour was requested for a role name outside ROLES."""

    def __init__(self, role: str):
        super().__init__(role)
        self.role = role

    def __str__(self) -> str:
        return f'Unknown colour role: {self.role!r}. Available: {", ".join(ROLES)}'


class TemplateError(ColoursetError):
    """A template tag could not be resolved."""


class SearchExhausted(ColoursetError):
    """A capped rejection-sampling search ran out of attempts."""

    def __init__(self, what: str, attempts: int):
        super().__init__(f'{what}: no acceptable colourset after {attempts} attempts')
        self.attempts = attempts


class ConfigError(ColoursetError):
    """A configuration value could not be parsed."""


class HSV(NamedTuple):
    """Hue in degrees (0-360), saturation and value in [0, 1]."""

    h: float
    s: float
    v: float


@dataclass(frozen=True)
class Colourset:
    """Five colours of one hue, built from (hue, shade) by the colour table.

    Equality compares (hue, shade) only: two coloursets with the same inputs
    are colour-identical.
    """

    hue: int
    shade: int
    colours: Mapping[str, HSV] = field(compare=False, repr=False)

    def equals(self, other: Colourset) -> bool:
        return self.hue == other.hue and self.shade == other.shade

    @property
    def is_grey(self) -> bool:
        return self.hue == GREY

    def colour(self, role: str) -> HSV:
        """Return the HSV triple for a role. Raises UnknownRoleError."""
        if role not in ROLES:
            raise UnknownRoleError(role)
        return self.colours[role]

    def as_rgb(self, role: str) -> tuple[int, int, int]:
        return hsv_to_rgb(self.colour(role))

    def as_hex_string(self, role: str) -> str:
        """Colour as a hex string such as #99FF00."""
        return rgb_to_hex(self.as_rgb(role))

    def as_rgb_string(self, role: str) -> str:
        """Colour as an X colour string such as rgb:99/FF/00."""
        return rgb_to_xcolor(self.as_rgb(role))


@dataclass
class Palette:
    """A base colourset plus its generated alternatives."""

    base: Colourset
    alternatives: list[Colourset] = field(default_factory=list)
    seed: int | None = None
    # generator the palette was drawn from; renderers that create more coloursets reuse it
    rng: np.random.Generator | None = field(default=None, repr=False, compare=False)

    @property
    def members(self) -> list[Colourset]:
        """Base first, then alternatives (index matches csN template tags)."""
        return [self.base, *self.alternatives]


class Renderer:
    """A self-registering palette output format.

    Usage in a renderer module:

        renderer = Renderer(name='css', help='CSS custom properties')

        @renderer.run
        def run(palette, args):
            return '...'
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def execute(self, palette: Palette, args: Any) -> str:
        """Execute the renderer's run function and return its text output."""
        if self._run_fn is None:
            raise RuntimeError(f'Renderer {self.name} has no run function')
        return self._run_fn(palette, args)
