# src/thematic/rules.py

"""
The rule record produced by the builders.

Examples
--------
>>> from thematic.forms.predicates import GT
>>> from thematic.rules import Rule
>>> Rule(GT("pop", 10), "> 10").to_cql()
'pop > 10'
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING
import pandas as pd

from .forms.predicates import Predicate
from .forms.cql import to_cql

if TYPE_CHECKING:
    from .symbology import Style

__all__ = ["Rule"]


@dataclass
class Rule:
    """
    A selection rule: which records, how to label them, how to draw them.

    ``title`` is display text only; it is never used for matching and is not
    guaranteed to be unique. ``style`` stays ``None`` until a
    :class:`~thematic.symbology.SymbologyAssignor` fills it in.
    """
    predicate: Predicate
    title: str
    style: Optional["Style"] = None

    def mask(self, df: pd.DataFrame) -> pd.Series:
        return self.predicate.mask(df)

    def to_cql(self) -> str:
        return to_cql(self.predicate)

    def __repr__(self) -> str:
        return f"Rule({self.title!r}: {self.predicate!r})"
