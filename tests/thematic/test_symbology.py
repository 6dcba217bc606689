import logging

import pytest

from thematic.config import StyleConfig
from thematic.errors import StylingError
from thematic.forms import TRUE
from thematic.ramps import BLACK, WHITE, Color, ColorRamp, GradientColorRamp
from thematic.rules import Rule
from thematic.symbology import (
    Fill, LineStyle, Mark, PointStyle, PolygonStyle, Stroke, SymbologyAssignor,
)


def _rules(n):
    return [Rule(TRUE, f"r{i}") for i in range(n)]


class _FixedRamp(ColorRamp):
    """Returns the same colors regardless of the requested size."""

    def __init__(self, colors):
        super().__init__()
        self.fixed = list(colors)
        self.calls = []

    def _compute(self, n):
        self.calls.append(n)
        return list(self.fixed)

    def reverse(self):
        self.calls.append("reverse")
        super().reverse()


class _BrokenRamp(ColorRamp):
    def _compute(self, n):
        raise RuntimeError("ramp exploded")


# -----------------------
# Per-kind styles
# -----------------------

def test_polygon_fill_and_outline():
    rules = _rules(3)
    res = SymbologyAssignor().polygon_style(rules, GradientColorRamp(BLACK, WHITE))
    assert res.ok and res.styled == 3 and res.kind == "polygon"
    assert [r.style.fill.color.hex for r in rules] == ["#000000", "#808080", "#ffffff"]
    assert all(r.style.stroke == Stroke(BLACK, 1.0) for r in rules)

def test_polygon_without_stroke():
    rules = _rules(2)
    SymbologyAssignor(StyleConfig(stroke_weight=-1)).polygon_style(rules, GradientColorRamp(BLACK, WHITE))
    assert all(isinstance(r.style, PolygonStyle) and r.style.stroke is None for r in rules)

def test_line_uses_ramp_color_and_ignores_outline_config():
    rules = _rules(2)
    cfg = StyleConfig(stroke_weight=5, stroke_color="#ff0000")
    SymbologyAssignor(cfg).line_style(rules, GradientColorRamp(BLACK, WHITE))
    assert rules[0].style == LineStyle(Stroke(BLACK, 1.0))
    assert rules[1].style == LineStyle(Stroke(WHITE, 1.0))

def test_point_defaults_have_no_outline():
    rules = _rules(2)
    SymbologyAssignor().point_style(rules, GradientColorRamp(BLACK, WHITE))
    assert rules[0].style == PointStyle(Mark(Fill(BLACK), None, "circle"), 15)

def test_point_outline_when_requested():
    sa = SymbologyAssignor()
    sa.set_include_stroke_for_points(True)
    sa.set_point_size(8)
    sa.set_stroke_color("#00ff00")
    sa.set_stroke_weight(2)
    rules = _rules(1)
    sa.point_style(rules, GradientColorRamp(BLACK, WHITE))
    assert rules[0].style.mark.stroke == Stroke(Color(0, 255, 0), 2.0)
    assert rules[0].style.size == 8

def test_point_outline_suppressed_by_negative_weight():
    sa = SymbologyAssignor(StyleConfig(stroke_weight=-1, include_stroke_for_points=True))
    rules = _rules(1)
    sa.point_style(rules, GradientColorRamp(BLACK, WHITE))
    assert rules[0].style.mark.stroke is None

def test_set_stroke_color_none_is_ignored():
    sa = SymbologyAssignor(StyleConfig(stroke_color="#ff0000"))
    sa.set_stroke_color(None)
    assert sa.config.stroke_color == Color(255, 0, 0)

def test_setters_do_not_touch_shared_default():
    sa = SymbologyAssignor()
    sa.set_point_size(3)
    assert SymbologyAssignor().config.point_size == 15


# -----------------------
# Ramp handling
# -----------------------

def test_reverse_assigns_colors_in_reverse():
    fwd, rev = _rules(4), _rules(4)
    sa = SymbologyAssignor()
    sa.polygon_style(fwd, GradientColorRamp(BLACK, WHITE))
    sa.polygon_style(rev, GradientColorRamp(BLACK, WHITE), reverse=True)
    assert [r.style.color for r in rev] == [r.style.color for r in fwd][::-1]

def test_distinct_colors_per_rule():
    rules = _rules(5)
    SymbologyAssignor().polygon_style(rules, GradientColorRamp("#deebf7", "#08306b"))
    assert len({r.style.color for r in rules}) == 5

def test_short_ramp_styles_a_prefix():
    rules = _rules(4)
    ramp = _FixedRamp([BLACK, WHITE])
    res = SymbologyAssignor().polygon_style(rules, ramp)
    assert res.ok and res.styled == 2
    assert rules[2].style is None and rules[3].style is None
    assert ramp.calls == [4]

def test_resize_then_reverse_order():
    ramp = _FixedRamp([BLACK, WHITE])
    SymbologyAssignor().polygon_style(_rules(2), ramp, reverse=True)
    assert ramp.calls == [2, "reverse"]

def test_bad_color_keeps_partial_styles(caplog):
    rules = _rules(3)
    ramp = _FixedRamp([BLACK, "not-a-color", WHITE])
    with caplog.at_level(logging.INFO, logger="thematic"):
        res = SymbologyAssignor().line_style(rules, ramp)
    assert not res.ok
    assert isinstance(res.error, StylingError)
    assert isinstance(res.error.__cause__, ValueError)
    assert res.styled == 1
    assert rules[0].style is not None
    assert rules[1].style is None and rules[2].style is None
    assert "Failed to build line symbolizer" in caplog.text

def test_ramp_failure_styles_nothing():
    rules = _rules(2)
    res = SymbologyAssignor().point_style(rules, _BrokenRamp())
    assert res.styled == 0
    assert "ramp exploded" in str(res.error)
    assert all(r.style is None for r in rules)

def test_empty_rules_never_touch_ramp():
    ramp = _FixedRamp([BLACK])
    res = SymbologyAssignor().polygon_style([], ramp)
    assert res.ok and res.styled == 0
    assert ramp.calls == []

def test_unknown_kind_raises():
    rules = _rules(1)
    with pytest.raises(ValueError):
        SymbologyAssignor().apply_style(rules, GradientColorRamp(BLACK, WHITE), kind="raster")
    assert rules[0].style is None
