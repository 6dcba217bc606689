# src/thematic/forms/predicates.py

"""
DataFrame-agnostic predicates C(df) -> boolean masks.

- Composable boolean logic: AND (&), OR (|)
- Attribute/value comparisons via vectorized expressions
- n-ary helpers :func:`any_of` / :func:`all_of` for building disjunctions and
  conjunctions from sequences without going through text

Examples
--------
>>> import pandas as pd
>>> from thematic.forms.predicates import GT, LE, EQ, any_of
>>> from thematic.forms.utils import lit
>>> df = pd.DataFrame({"pop": [5, 15, 25], "kind": ["A", "B", "C"]})
>>> (GT("pop", 10) & LE("pop", 20)).mask(df).tolist()
[False, True, False]
>>> any_of([EQ("kind", lit("A")), EQ("kind", lit("C"))]).mask(df).tolist()
[True, False, True]
"""

from __future__ import annotations
from dataclasses import dataclass
from functools import reduce
from typing import Callable, Iterable, Any, Union
import operator
import numpy as np
import pandas as pd

from .utils import Expr, to_expr

__all__ = [
    "Predicate",
    "AndPred",
    "OrPred",
    "TruePred",
    "TRUE",
    "Compare",
    "LE",
    "GE",
    "LT",
    "GT",
    "EQ",
    "any_of",
    "all_of",
    "OP_SYMBOLS",
]

OP_SYMBOLS = {
    operator.le: "<=",
    operator.ge: ">=",
    operator.lt: "<",
    operator.gt: ">",
    operator.eq: "=",
}


# =========================
# Internal helpers
# =========================

def _as_bool_series(arr: Any, index: pd.Index) -> pd.Series:
    """
    Normalize any array-like to a boolean Series aligned to a given index.

    Missing values (NaN, ``pd.NA``) count as False.

    Examples
    --------
    >>> import pandas as pd
    >>> from thematic.forms.predicates import _as_bool_series
    >>> _as_bool_series([1, 0, 2], pd.RangeIndex(3)).tolist()
    [True, False, True]
    """
    if isinstance(arr, pd.Series):
        if arr.dtype != bool:
            arr = arr.fillna(False).astype(bool)
        return arr.reindex(index, fill_value=False)
    return pd.Series(np.asarray(arr, dtype=bool), index=index)


# =========================
# Base predicate + combinators
# =========================

class Predicate:
    """
    Base class for predicates producing boolean masks.

    Predicates are composable with bitwise operators:
    - `&` (AND) yields :class:`AndPred`
    - `|` (OR) yields :class:`OrPred`

    Methods
    -------
    mask(df) : pd.Series
        Return a boolean Series aligned to `df.index`.
    """
    name: str = "Predicate"

    def mask(self, df: pd.DataFrame) -> pd.Series:
        """Return a boolean Series aligned to `df.index`. Subclasses must implement."""
        raise NotImplementedError

    def __and__(self, other: "Predicate") -> "Predicate":
        """Logical AND of two predicates."""
        return AndPred(self, other)

    def __or__(self, other: "Predicate") -> "Predicate":
        """Logical OR of two predicates."""
        return OrPred(self, other)

    def __repr__(self) -> str:
        return getattr(self, "name", self.__class__.__name__)


@dataclass(eq=True)
class AndPred(Predicate):
    """
    Logical conjunction (AND) of two predicates.

    Examples
    --------
    >>> import pandas as pd
    >>> from thematic.forms.predicates import AndPred, GE, LE
    >>> df = pd.DataFrame({"x": [0, 5, 10]})
    >>> AndPred(GE("x", 1), LE("x", 9)).mask(df).tolist()
    [False, True, False]
    """
    a: Predicate
    b: Predicate
    name: str = "C_and"

    def mask(self, df: pd.DataFrame) -> pd.Series:
        return _as_bool_series(self.a.mask(df) & self.b.mask(df), df.index)

    def __repr__(self) -> str:
        return f"({self.a!r} AND {self.b!r})"


@dataclass(eq=True)
class OrPred(Predicate):
    """
    Logical disjunction (OR) of two predicates.

    Examples
    --------
    >>> import pandas as pd
    >>> from thematic.forms.predicates import OrPred, LT, GT
    >>> df = pd.DataFrame({"x": [0, 5, 10]})
    >>> OrPred(LT("x", 1), GT("x", 9)).mask(df).tolist()
    [True, False, True]
    """
    a: Predicate
    b: Predicate
    name: str = "C_or"

    def mask(self, df: pd.DataFrame) -> pd.Series:
        return _as_bool_series(self.a.mask(df) | self.b.mask(df), df.index)

    def __repr__(self) -> str:
        return f"({self.a!r} OR {self.b!r})"


@dataclass(eq=True)
class TruePred(Predicate):
    """Predicate accepting every row."""
    name: str = "TRUE"

    def mask(self, df: pd.DataFrame) -> pd.Series:
        return pd.Series(True, index=df.index, dtype=bool)

    def __repr__(self) -> str:
        return "TRUE"


TRUE = TruePred()


# =========================
# Vectorized comparison predicates
# =========================

@dataclass(eq=True)
class Compare(Predicate):
    """
    Vectorized comparison: ``left OP right`` evaluated per row.

    Parameters
    ----------
    left, right : Expr or float or int or str
        Expressions, numbers, or column names. Strings are parsed via
        :func:`~thematic.forms.utils.to_expr`, so string *values* must be wrapped
        with :func:`~thematic.forms.utils.lit`.
    op : Callable[[Any, Any], Any]
        One of the comparison functions of the :mod:`operator` module.

    Examples
    --------
    >>> import operator, pandas as pd
    >>> from thematic.forms.predicates import Compare
    >>> df = pd.DataFrame({"a": [1, 2, 3], "b": [2, 1, 3]})
    >>> Compare("a", "b", operator.le).mask(df).tolist()
    [True, False, True]
    """
    left: Union[Expr, float, int, str]
    right: Union[Expr, float, int, str]
    op: Callable[[Any, Any], Any]
    name: str = "Compare"

    def __post_init__(self):
        self.left = to_expr(self.left)
        self.right = to_expr(self.right)
        if self.op not in OP_SYMBOLS:
            raise ValueError(f"Unsupported comparator: {self.op!r}")

    @property
    def symbol(self) -> str:
        return OP_SYMBOLS[self.op]

    def mask(self, df: pd.DataFrame) -> pd.Series:
        l = self.left.eval(df)
        r = self.right.eval(df)
        out = self.op(l, r)
        return _as_bool_series(out, df.index)

    def __repr__(self) -> str:
        return f"({self.left!r} {self.symbol} {self.right!r})"


# Convenience constructors

def LE(left, right) -> Compare:
    """``left <= right``"""
    return Compare(left, right, operator.le, name="LE")


def GE(left, right) -> Compare:
    """``left >= right``"""
    return Compare(left, right, operator.ge, name="GE")


def LT(left, right) -> Compare:
    """``left < right``"""
    return Compare(left, right, operator.lt, name="LT")


def GT(left, right) -> Compare:
    """``left > right``"""
    return Compare(left, right, operator.gt, name="GT")


def EQ(left, right) -> Compare:
    """``left == right``"""
    return Compare(left, right, operator.eq, name="EQ")


# =========================
# n-ary helpers
# =========================

def any_of(preds: Iterable[Predicate]) -> Predicate:
    """
    Left-folded disjunction of `preds`; a single predicate is returned as-is.

    Raises
    ------
    ValueError
        If `preds` is empty.
    """
    preds = list(preds)
    if not preds:
        raise ValueError("any_of() needs at least one predicate")
    return reduce(OrPred, preds)


def all_of(preds: Iterable[Predicate]) -> Predicate:
    """Left-folded conjunction of `preds`; see :func:`any_of`."""
    preds = list(preds)
    if not preds:
        raise ValueError("all_of() needs at least one predicate")
    return reduce(AndPred, preds)
