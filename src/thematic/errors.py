# src/thematic/errors.py

"""
Exception types for rule synthesis and styling.

Builders raise these; :class:`~thematic.synthesis.RuleSynthesizer` and
:class:`~thematic.symbology.SymbologyAssignor` catch them and hand them back
inside their result objects instead of letting them escape.
"""

from __future__ import annotations
from typing import Optional

__all__ = [
    "ThematicError",
    "ClassificationError",
    "EngineFailure",
    "PredicateConstructionError",
    "IntervalCountExceeded",
    "StylingError",
]


class ThematicError(Exception):
    """Base class for every error raised by this package."""


class ClassificationError(ThematicError):
    """A classification request produced no rules."""

    def __init__(self, message: str, *, method: Optional[str] = None):
        super().__init__(message)
        self.method = method


class EngineFailure(ClassificationError):
    """The classifier was missing, raised, or returned something that is not a grouping."""


class PredicateConstructionError(ClassificationError):
    """A literal or predicate could not be built from a grouping bin."""


class IntervalCountExceeded(ClassificationError):
    """Unique-interval synthesis produced more rules than the caller allows."""

    def __init__(self, count: int, max_intervals: int, *, method: Optional[str] = None):
        super().__init__(f"Intervals: {count} (max {max_intervals})", method=method)
        self.count = count
        self.max_intervals = max_intervals


class StylingError(ThematicError):
    """The color ramp or a style descriptor failed part-way through styling."""
