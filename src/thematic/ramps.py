# src/thematic/ramps.py

"""
Colors and color ramps.

A color ramp is an ordered sequence of colors that can be resized to exactly
``n`` entries and reversed in place. Styling only ever calls
:meth:`ColorRamp.resize`, :meth:`ColorRamp.reverse` and :meth:`ColorRamp.colors`.

Examples
--------
>>> from thematic.ramps import GradientColorRamp
>>> ramp = GradientColorRamp("#000000", "#ffffff")
>>> ramp.resize(3)
>>> [c.hex for c in ramp.colors()]
['#000000', '#808080', '#ffffff']
>>> ramp.reverse()
>>> [c.hex for c in ramp.colors()]
['#ffffff', '#808080', '#000000']
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union
import numpy as np

__all__ = [
    "Color",
    "ColorLike",
    "BLACK",
    "WHITE",
    "ColorRamp",
    "CustomColorRamp",
    "GradientColorRamp",
    "RandomColorRamp",
    "blue_ramp",
    "red_ramp",
    "gray_ramp",
    "jet_ramp",
]


@dataclass(frozen=True)
class Color:
    """
    An opaque RGB color with 0-255 channels.

    Examples
    --------
    >>> Color.parse("#f80").hex
    '#ff8800'
    >>> Color.parse((0, 128, 255))
    Color(r=0, g=128, b=255)
    """
    r: int
    g: int
    b: int

    def __post_init__(self):
        for ch in (self.r, self.g, self.b):
            if not isinstance(ch, (int, np.integer)) or isinstance(ch, bool) or not 0 <= ch <= 255:
                raise ValueError(f"Color channels must be ints in [0, 255], got {(self.r, self.g, self.b)}")

    @property
    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def to_tuple(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @classmethod
    def from_hex(cls, text: str) -> "Color":
        s = text.strip().lstrip("#")
        if len(s) == 3:
            s = "".join(ch * 2 for ch in s)
        if len(s) != 6:
            raise ValueError(f"Not a hex color: {text!r}")
        try:
            return cls(int(s[0:2], 16), int(s[2:4], 16), int(s[4:6], 16))
        except ValueError:
            raise ValueError(f"Not a hex color: {text!r}") from None

    @classmethod
    def parse(cls, value: "ColorLike") -> "Color":
        if isinstance(value, Color):
            return value
        if isinstance(value, str):
            return cls.from_hex(value)
        if isinstance(value, (tuple, list)) and len(value) == 3:
            return cls(*(int(v) for v in value))
        raise ValueError(f"Cannot interpret {value!r} as a color")


ColorLike = Union[Color, str, Tuple[int, int, int]]

BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)


# ---------------------------------------------------------------------
# Ramp interface
# ---------------------------------------------------------------------
class ColorRamp:
    """
    Base class for color ramps.

    Subclasses implement :meth:`_compute` returning ``n`` colors in their
    natural (unreversed) order; :meth:`resize` stores that sequence and
    :meth:`reverse` flips whatever is currently stored.
    """

    def __init__(self):
        self._colors: List[Color] = []

    def _compute(self, n: int) -> List[Color]:
        raise NotImplementedError

    def resize(self, n: int) -> None:
        if n < 1:
            raise ValueError(f"A color ramp needs at least one class, got {n}")
        self._colors = list(self._compute(int(n)))

    def reverse(self) -> None:
        self._colors.reverse()

    def colors(self) -> List[Color]:
        return list(self._colors)

    def __len__(self) -> int:
        return len(self._colors)


class CustomColorRamp(ColorRamp):
    """
    Linear RGB interpolation through a list of anchor colors.

    Resizing to ``len(anchors)`` returns the anchors unchanged; resizing to 1
    returns the first anchor.
    """

    def __init__(self, anchors: Sequence[ColorLike]):
        super().__init__()
        anchors = [Color.parse(a) for a in anchors]
        if not anchors:
            raise ValueError("CustomColorRamp needs at least one anchor color")
        self.anchors: List[Color] = anchors
        self._colors = list(anchors)

    def _compute(self, n: int) -> List[Color]:
        if len(self.anchors) == 1:
            return [self.anchors[0]] * n
        rgb = np.array([a.to_tuple() for a in self.anchors], dtype=float)
        xp = np.linspace(0.0, 1.0, len(self.anchors))
        x = np.linspace(0.0, 1.0, n)
        channels = [np.interp(x, xp, rgb[:, k]) for k in range(3)]
        out = np.clip(np.rint(np.stack(channels, axis=1)), 0, 255).astype(int)
        return [Color(int(r), int(g), int(b)) for r, g, b in out]


class GradientColorRamp(CustomColorRamp):
    """Two- or three-stop gradient (``start -> [mid ->] end``)."""

    def __init__(self, start: ColorLike, end: ColorLike, mid: Optional[ColorLike] = None):
        stops = [start, end] if mid is None else [start, mid, end]
        super().__init__(stops)


class RandomColorRamp(ColorRamp):
    """
    Random colors, reproducible for a given seed.

    Every :meth:`resize` restarts the generator, so resizing twice to the same
    size yields the same colors.
    """

    def __init__(self, seed: Optional[int] = None):
        super().__init__()
        self.seed = seed

    def _compute(self, n: int) -> List[Color]:
        rng = np.random.default_rng(self.seed)
        vals = rng.integers(0, 256, size=(n, 3))
        return [Color(int(r), int(g), int(b)) for r, g, b in vals]


# Presets
def blue_ramp() -> GradientColorRamp:
    return GradientColorRamp("#deebf7", "#08306b")

def red_ramp() -> GradientColorRamp:
    return GradientColorRamp("#fee0d2", "#67000d")

def gray_ramp() -> GradientColorRamp:
    return GradientColorRamp("#f0f0f0", "#252525")

def jet_ramp() -> CustomColorRamp:
    return CustomColorRamp(["#00007f", "#0000ff", "#00ffff", "#ffff00", "#ff0000", "#7f0000"])
