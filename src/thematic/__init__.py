"""
thematic: classification rules and ramp symbology for thematic maps.

    - Rule synthesis      (grouping, ranged, explicit, synthesis, classify)
    - Symbology           (ramps, config, symbology)
    - Predicate layer     (forms)
    - Output helpers      (reporting, logging_utils)
"""

from .errors import (
    ThematicError,
    ClassificationError,
    EngineFailure,
    PredicateConstructionError,
    IntervalCountExceeded,
    StylingError,
)
from .grouping import RangedGrouping, ExplicitGrouping, Grouping
from .rules import Rule
from .normalize import normalize_attribute, is_integral_type
from .ranged import open_ranged_rules, closed_ranged_rules
from .explicit import explicit_rules
from .classify import ClassifierRegistry, default_registry
from .synthesis import RuleSynthesizer, Synthesis
from .ramps import (
    Color,
    ColorRamp,
    CustomColorRamp,
    GradientColorRamp,
    RandomColorRamp,
    blue_ramp,
    red_ramp,
    gray_ramp,
    jet_ramp,
)
from .config import StyleConfig, DEFAULT_STYLE
from .symbology import SymbologyAssignor, StylingResult, PolygonStyle, LineStyle, PointStyle

__all__ = [
    "ThematicError",
    "ClassificationError",
    "EngineFailure",
    "PredicateConstructionError",
    "IntervalCountExceeded",
    "StylingError",
    "RangedGrouping",
    "ExplicitGrouping",
    "Grouping",
    "Rule",
    "normalize_attribute",
    "is_integral_type",
    "open_ranged_rules",
    "closed_ranged_rules",
    "explicit_rules",
    "ClassifierRegistry",
    "default_registry",
    "RuleSynthesizer",
    "Synthesis",
    "Color",
    "ColorRamp",
    "CustomColorRamp",
    "GradientColorRamp",
    "RandomColorRamp",
    "blue_ramp",
    "red_ramp",
    "gray_ramp",
    "jet_ramp",
    "StyleConfig",
    "DEFAULT_STYLE",
    "SymbologyAssignor",
    "StylingResult",
    "PolygonStyle",
    "LineStyle",
    "PointStyle",
]
