# src/thematic/config.py

"""
Style configuration for ramp-based symbology.

:class:`StyleConfig` is an immutable snapshot held by a
:class:`~thematic.symbology.SymbologyAssignor`; the assignor's setters swap in
a new snapshot rather than mutating the old one.

Examples
--------
>>> from thematic.config import StyleConfig
>>> cfg = StyleConfig(stroke_weight=-1, point_size=8)
>>> cfg.draws_stroke
False
>>> cfg.stroke_color.hex
'#000000'
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .ramps import BLACK, Color

__all__ = [
    "StyleConfig",
    "DEFAULT_STYLE",
]


@dataclass(frozen=True)
class StyleConfig:
    """
    Stroke and marker parameters shared by every styling call.

    Parameters
    ----------
    stroke_weight : float, default=1.0
        Outline width for polygons (and points, see below). A negative value
        means "no stroke".
    stroke_color : Color or str or tuple, default=black
        Outline color; anything :meth:`Color.parse` accepts.
    point_size : int, default=15
        Diameter of the circular point marker.
    include_stroke_for_points : bool, default=False
        Outline point markers too (still subject to ``stroke_weight >= 0``).

    Notes
    -----
    Line symbology ignores every field here; lines take their color from the
    ramp and keep the default width.
    """

    stroke_weight: float = 1.0
    stroke_color: Color = field(default=BLACK)
    point_size: int = 15
    include_stroke_for_points: bool = False

    def __post_init__(self):
        object.__setattr__(self, "stroke_color", Color.parse(self.stroke_color))
        if self.point_size < 1:
            raise ValueError("point_size must be ≥ 1")

    @property
    def draws_stroke(self) -> bool:
        return self.stroke_weight >= 0


DEFAULT_STYLE = StyleConfig()
