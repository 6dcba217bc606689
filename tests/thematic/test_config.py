import dataclasses
import doctest

import pytest

from thematic.config import DEFAULT_STYLE, StyleConfig
from thematic.ramps import BLACK, Color


def test_defaults():
    assert DEFAULT_STYLE.stroke_weight == 1.0
    assert DEFAULT_STYLE.stroke_color == BLACK
    assert DEFAULT_STYLE.point_size == 15
    assert DEFAULT_STYLE.include_stroke_for_points is False
    assert DEFAULT_STYLE.draws_stroke

def test_stroke_color_is_parsed():
    assert StyleConfig(stroke_color="#ff0000").stroke_color == Color(255, 0, 0)
    assert StyleConfig(stroke_color=(0, 0, 255)).stroke_color == Color(0, 0, 255)

def test_negative_weight_disables_stroke():
    assert not StyleConfig(stroke_weight=-1).draws_stroke
    assert StyleConfig(stroke_weight=0).draws_stroke

@pytest.mark.parametrize("size", [0, -3])
def test_point_size_must_be_positive(size):
    with pytest.raises(ValueError):
        StyleConfig(point_size=size)

def test_bad_color_rejected():
    with pytest.raises(ValueError):
        StyleConfig(stroke_color="nope")

def test_config_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_STYLE.point_size = 3

def test_module_docstring_examples_run():
    import thematic.config as config
    assert config.__doc__ and "StyleConfig" in config.__doc__
    results = doctest.testmod(config)
    assert results.attempted > 0 and results.failed == 0
