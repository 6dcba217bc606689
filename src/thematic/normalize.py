# src/thematic/normalize.py

"""
Attribute access for range comparisons.

Some attribute stores keep integers as text. Compared as text they sort
lexicographically (``"10" < "9"``), so when the caller asks for it, every
reference to an integral attribute is wrapped in a numeric parse.

Examples
--------
>>> import numpy as np
>>> from thematic.normalize import normalize_attribute
>>> normalize_attribute("pop", np.int64, normalize=True)
parseDouble(pop)
>>> normalize_attribute("pop", np.float64, normalize=True)
pop
>>> normalize_attribute("pop", int, normalize=False)
pop
"""

from __future__ import annotations
from typing import Any
import pandas as pd

from .errors import PredicateConstructionError
from .forms.utils import Expr, ColumnTerm, ParseDouble

__all__ = ["is_integral_type", "attribute_term", "normalize_attribute"]


def is_integral_type(declared_type: Any) -> bool:
    """
    True for integer kinds: Python ``int``, numpy integer dtypes (any width,
    signed or not) and pandas nullable integers (``"Int64"``...).

    ``None`` and anything pandas does not recognize as a dtype count as not
    integral. Booleans are not integral here.
    """
    if declared_type is None:
        return False
    try:
        return bool(pd.api.types.is_integer_dtype(declared_type))
    except TypeError:
        return False


def attribute_term(attribute: str) -> ColumnTerm:
    """Column reference for `attribute`; a name that is not a non-empty ``str`` fails."""
    try:
        return ColumnTerm(attribute)
    except ValueError as exc:
        raise PredicateConstructionError(f"Cannot use {attribute!r} as an attribute name") from exc


def normalize_attribute(attribute: str, declared_type: Any, normalize: bool) -> Expr:
    att = attribute_term(attribute)
    if normalize and is_integral_type(declared_type):
        return ParseDouble(att)
    return att
