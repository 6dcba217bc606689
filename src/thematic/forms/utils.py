# src/thematic/forms/utils.py

"""
Expression utilities for attribute access over pandas DataFrames.

Each `Expr` represents a column-wise value that can be evaluated on a
`pandas.DataFrame` to yield a `Series` aligned to `df.index`. Classification
rules only ever need three kinds of leaves:

- attribute access (:class:`ColumnTerm`),
- literal values, numeric (:class:`Const`) or arbitrary scalars (:class:`Literal`),
- the numeric-parse wrapper (:class:`ParseDouble`) that turns an attribute's
  textual representation into floats before it is compared.

Examples
--------
>>> import pandas as pd
>>> from thematic.forms.utils import to_expr, parse_double, lit
>>> df = pd.DataFrame({"code": ["10", "9", "x"]})
>>> parse_double("code").eval(df).tolist()
[10.0, 9.0, nan]
>>> lit("9").eval(df).tolist()
['9', '9', '9']
"""

from __future__ import annotations
from numbers import Real
from typing import Any, Union
import math
import numpy as np
import pandas as pd

__all__ = [
    "Expr",
    "Const",
    "Literal",
    "ColumnTerm",
    "ParseDouble",
    "to_expr",
    "col",
    "lit",
    "parse_double",
    "format_value",
]

SeriesLike = Union[pd.Series, float, int, np.ndarray]


# ---------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------
def _is_real(x: Any) -> bool:
    return isinstance(x, Real) and not isinstance(x, (bool, np.bool_))


def format_value(value: Any) -> str:
    """
    Display text for a literal value, as used in rule titles.

    Integer-valued numbers drop their fractional part, other reals use the
    shortest round-tripping form, everything else uses ``str``.

    Examples
    --------
    >>> from thematic.forms.utils import format_value
    >>> format_value(10.0), format_value(2.5), format_value("A")
    ('10', '2.5', 'A')
    """
    if _is_real(value):
        v = float(value)
        if v.is_integer():
            return str(int(v))
        return repr(v)
    return str(value)


# ---------------------------------------------------------------------
# Expression base interface
# ---------------------------------------------------------------------
class Expr:
    """
    Abstract base for expressions that evaluate to a Series on a DataFrame.

    Subclasses implement :meth:`eval(df)`.
    """

    def eval(self, df: pd.DataFrame) -> pd.Series:
        """Evaluate on a DataFrame. Must be implemented by subclasses."""
        raise NotImplementedError


# ---------------------------------------------------------------------
# Concrete expression classes
# ---------------------------------------------------------------------
class Const(Expr):
    """
    Constant numeric expression.

    Parameters
    ----------
    value : real number
        Must be finite or infinite, never NaN.

    Raises
    ------
    TypeError
        If `value` is not a real number.
    ValueError
        If `value` is NaN.

    Examples
    --------
    >>> import pandas as pd
    >>> from thematic.forms.utils import Const
    >>> Const(3).eval(pd.DataFrame(index=[0, 1])).tolist()
    [3.0, 3.0]
    """
    def __init__(self, value: Real):
        if not _is_real(value):
            raise TypeError(f"Const expects a real number, got {type(value).__name__}")
        if math.isnan(float(value)):
            raise ValueError("Const cannot hold NaN")
        self.value = value

    def eval(self, df: pd.DataFrame) -> pd.Series:
        return pd.Series(float(self.value), index=df.index, dtype=float)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Const) and float(other.value) == float(self.value)

    def __hash__(self) -> int:
        return hash(("Const", float(self.value)))

    def __repr__(self) -> str:
        return format_value(self.value)


class Literal(Expr):
    """
    Scalar literal of any hashable type (strings, category codes, dates...).

    Parameters
    ----------
    value : hashable scalar
        ``None``, NaN, and containers are rejected.

    Examples
    --------
    >>> import pandas as pd
    >>> from thematic.forms.utils import Literal
    >>> Literal("it's").eval(pd.DataFrame(index=[0, 1])).tolist()
    ["it's", "it's"]
    """
    def __init__(self, value: Any):
        if value is None:
            raise ValueError("Literal cannot hold None")
        if isinstance(value, (list, tuple, set, frozenset, dict, np.ndarray, pd.Series)):
            raise TypeError(f"Literal expects a scalar, got {type(value).__name__}")
        try:
            hash(value)
        except TypeError:
            raise TypeError(f"Literal expects a hashable value, got {type(value).__name__}") from None
        if _is_real(value) and math.isnan(float(value)):
            raise ValueError("Literal cannot hold NaN")
        self.value = value

    def eval(self, df: pd.DataFrame) -> pd.Series:
        return pd.Series([self.value] * len(df.index), index=df.index, dtype=object)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Literal) and type(other.value) is type(self.value) and other.value == self.value

    def __hash__(self) -> int:
        return hash(("Literal", self.value))

    def __repr__(self) -> str:
        return repr(self.value)


class ColumnTerm(Expr):
    """
    Expression referencing a DataFrame column by name.

    Raises
    ------
    KeyError
        If the column is not present.

    Examples
    --------
    >>> import pandas as pd
    >>> from thematic.forms.utils import ColumnTerm
    >>> ColumnTerm("a").eval(pd.DataFrame({"a": [1, 2, 3]})).tolist()
    [1, 2, 3]
    """
    def __init__(self, col: str):
        if not isinstance(col, str) or not col:
            raise ValueError("ColumnTerm needs a non-empty column name")
        self.col = col

    def eval(self, df: pd.DataFrame) -> pd.Series:
        if self.col not in df.columns:
            raise KeyError(f"Required column '{self.col}' not found in DataFrame.")
        return df[self.col]

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ColumnTerm) and other.col == self.col

    def __hash__(self) -> int:
        return hash(("ColumnTerm", self.col))

    def __repr__(self):
        return self.col


class ParseDouble(Expr):
    """
    Parse the textual representation of `arg` into floats.

    Values that do not parse become NaN, so they fall outside every range
    comparison.

    Examples
    --------
    >>> import pandas as pd
    >>> from thematic.forms.utils import ParseDouble, ColumnTerm
    >>> df = pd.DataFrame({"n": ["1", "20", "3"]})
    >>> ParseDouble(ColumnTerm("n")).eval(df).tolist()
    [1.0, 20.0, 3.0]
    """
    def __init__(self, arg: Expr):
        self.arg = arg

    def eval(self, df: pd.DataFrame) -> pd.Series:
        s = self.arg.eval(df)
        text = s.astype(str)
        return pd.to_numeric(text, errors="coerce").astype(float)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ParseDouble) and other.arg == self.arg

    def __hash__(self) -> int:
        return hash(("ParseDouble", self.arg))

    def __repr__(self) -> str:
        return f"parseDouble({self.arg!r})"


# ---------------------------------------------------------------------
# Safe conversion
# ---------------------------------------------------------------------
def to_expr(x: Union[Expr, float, int, str]) -> Expr:
    """
    Convert scalars or column names into `Expr` objects.

    Strings are column names here; use :func:`lit` for string literals.

    Examples
    --------
    >>> from thematic.forms.utils import to_expr
    >>> to_expr("x"), to_expr(5)
    (x, 5)
    """
    if isinstance(x, Expr):
        return x
    if _is_real(x):
        return Const(x)
    if isinstance(x, str):
        return ColumnTerm(x)
    raise TypeError(f"Cannot convert {type(x)} to Expr")


def col(name: str) -> ColumnTerm:
    """Attribute access by name."""
    return ColumnTerm(name)


def lit(value: Any) -> Expr:
    """
    Literal for `value`: :class:`Const` for real numbers, :class:`Literal` otherwise.

    Raises
    ------
    TypeError, ValueError
        If `value` cannot be represented as a literal.
    """
    if _is_real(value):
        return Const(value)
    return Literal(value)


def parse_double(x: Union[Expr, str]) -> ParseDouble:
    return ParseDouble(to_expr(x))
