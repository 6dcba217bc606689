# src/thematic/symbology.py

"""
Ramp-based symbology: one ramp color per rule.

The ramp is resized to the number of rules, optionally reversed, and zipped
with the rules in order. What the color becomes depends on the geometry kind:

polygon
    fill color, plus the configured outline unless ``stroke_weight < 0``;
line
    stroke color (the configured outline is not used);
point
    circle marker filled with the color, ``point_size`` across, outlined only
    when ``include_stroke_for_points`` and ``stroke_weight >= 0``.

Examples
--------
>>> from thematic.forms.predicates import TRUE
>>> from thematic.rules import Rule
>>> from thematic.ramps import GradientColorRamp
>>> from thematic.symbology import SymbologyAssignor
>>> rules = [Rule(TRUE, "a"), Rule(TRUE, "b")]
>>> res = SymbologyAssignor().polygon_style(rules, GradientColorRamp("#ffffff", "#ff0000"))
>>> res.styled, rules[1].style.fill.color.hex
(2, '#ff0000')
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import List, Optional, Sequence, Union
import logging

from .config import DEFAULT_STYLE, StyleConfig
from .errors import StylingError
from .ramps import Color, ColorLike, ColorRamp
from .rules import Rule

__all__ = [
    "Fill",
    "Stroke",
    "Mark",
    "PolygonStyle",
    "LineStyle",
    "PointStyle",
    "Style",
    "StylingResult",
    "SymbologyAssignor",
    "POLYGON",
    "LINE",
    "POINT",
]

logger = logging.getLogger(__name__)

POLYGON = "polygon"
LINE = "line"
POINT = "point"
_KINDS = (POLYGON, LINE, POINT)


# =========================
# Style descriptors
# =========================

@dataclass(frozen=True)
class Fill:
    color: Color


@dataclass(frozen=True)
class Stroke:
    color: Color
    weight: float = 1.0


@dataclass(frozen=True)
class Mark:
    fill: Fill
    stroke: Optional[Stroke] = None
    shape: str = "circle"


@dataclass(frozen=True)
class PolygonStyle:
    fill: Fill
    stroke: Optional[Stroke] = None

    @property
    def color(self) -> Color:
        return self.fill.color


@dataclass(frozen=True)
class LineStyle:
    stroke: Stroke

    @property
    def color(self) -> Color:
        return self.stroke.color


@dataclass(frozen=True)
class PointStyle:
    mark: Mark
    size: float = 15

    @property
    def color(self) -> Color:
        return self.mark.fill.color


Style = Union[PolygonStyle, LineStyle, PointStyle]


@dataclass
class StylingResult:
    """
    Outcome of one styling call.

    ``styled`` counts the rules that received a style. On failure those rules
    keep their new style and ``error`` says what broke.
    """
    kind: str
    styled: int = 0
    error: Optional[StylingError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


# =========================
# Assignor
# =========================

class SymbologyAssignor:
    """
    Attaches ramp colors to rules.

    Parameters
    ----------
    config : StyleConfig, optional
        Stroke and marker parameters; :data:`~thematic.config.DEFAULT_STYLE`
        when omitted. The setters below replace it for later calls.
    """

    def __init__(self, config: Optional[StyleConfig] = None):
        self.config = config if config is not None else DEFAULT_STYLE

    # ------------- configuration -------------

    def set_stroke_weight(self, weight: float) -> None:
        self.config = replace(self.config, stroke_weight=weight)

    def set_stroke_color(self, color: Optional[ColorLike]) -> None:
        if color is not None:
            self.config = replace(self.config, stroke_color=color)

    def set_point_size(self, size: int) -> None:
        self.config = replace(self.config, point_size=size)

    def set_include_stroke_for_points(self, include: bool) -> None:
        self.config = replace(self.config, include_stroke_for_points=bool(include))

    # ------------- style factories -------------

    def _outline(self) -> Optional[Stroke]:
        cfg = self.config
        return Stroke(cfg.stroke_color, float(cfg.stroke_weight)) if cfg.draws_stroke else None

    def _polygon(self, color: Color) -> PolygonStyle:
        return PolygonStyle(Fill(color), self._outline())

    def _line(self, color: Color) -> LineStyle:
        return LineStyle(Stroke(color))

    def _point(self, color: Color) -> PointStyle:
        stroke = self._outline() if self.config.include_stroke_for_points else None
        return PointStyle(Mark(Fill(color), stroke), self.config.point_size)

    # ------------- entry points -------------

    def apply_style(
        self,
        rules: Sequence[Rule],
        ramp: ColorRamp,
        reverse: bool = False,
        kind: str = POLYGON,
    ) -> StylingResult:
        """
        Style `rules` in place from `ramp`.

        Raises
        ------
        ValueError
            If `kind` is not ``"polygon"``, ``"line"`` or ``"point"``; nothing
            is touched in that case.
        """
        if kind not in _KINDS:
            raise ValueError(f"Unknown symbolizer kind {kind!r}; expected one of {_KINDS}")
        make = {POLYGON: self._polygon, LINE: self._line, POINT: self._point}[kind]
        result = StylingResult(kind)
        if not rules:
            return result
        try:
            ramp.resize(len(rules))
            if reverse:
                ramp.reverse()
            colors: List = ramp.colors()
            if len(colors) < len(rules):
                logger.debug("%s style: ramp gave %d colors for %d rules", kind, len(colors), len(rules))
            for rule, color in zip(rules, colors):
                rule.style = make(Color.parse(color))
                result.styled += 1
        except Exception as exc:
            err = StylingError(f"Failed to build {kind} symbolizer: {exc}")
            err.__cause__ = exc
            logger.info("%s (%d of %d rules styled)", err, result.styled, len(rules), exc_info=exc)
            result.error = err
        return result

    def polygon_style(self, rules: Sequence[Rule], ramp: ColorRamp, reverse: bool = False) -> StylingResult:
        return self.apply_style(rules, ramp, reverse, POLYGON)

    def line_style(self, rules: Sequence[Rule], ramp: ColorRamp, reverse: bool = False) -> StylingResult:
        return self.apply_style(rules, ramp, reverse, LINE)

    def point_style(self, rules: Sequence[Rule], ramp: ColorRamp, reverse: bool = False) -> StylingResult:
        return self.apply_style(rules, ramp, reverse, POINT)
