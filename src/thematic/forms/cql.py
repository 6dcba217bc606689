# src/thematic/forms/cql.py

"""
CQL formatting helpers (output only, nothing here parses text).

Use:
    from thematic.forms.cql import to_cql
    print(to_cql(rule.predicate))   # pop > 10 AND pop <= 20
"""

from __future__ import annotations
import re
from typing import Union

from .utils import Expr, Const, Literal, ColumnTerm, ParseDouble, format_value
from .predicates import Predicate, AndPred, OrPred, TruePred, Compare

__all__ = [
    "format_expr",
    "format_pred",
    "to_cql",
]

_PLAIN_IDENT = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_RESERVED = {"AND", "OR", "NOT", "LIKE", "IS", "NULL", "BETWEEN", "IN", "INCLUDE", "EXCLUDE", "TRUE", "FALSE"}


# -------- Expr --------
def _ident(name: str) -> str:
    if _PLAIN_IDENT.match(name) and name.upper() not in _RESERVED:
        return name
    return '"' + name.replace('"', '""') + '"'


def _quote(text: str) -> str:
    return "'" + text.replace("'", "''") + "'"


def format_expr(e: Expr) -> str:
    if isinstance(e, ColumnTerm):
        return _ident(e.col)
    if isinstance(e, Const):
        return format_value(e.value)
    if isinstance(e, Literal):
        v = e.value
        if isinstance(v, bool):
            return "TRUE" if v else "FALSE"
        if isinstance(v, str):
            return _quote(v)
        return _quote(format_value(v))
    if isinstance(e, ParseDouble):
        return f"parseDouble({format_expr(e.arg)})"
    raise TypeError(f"No CQL form for {type(e).__name__}")


# -------- Predicate --------
def _flatten(pred: Predicate, kind: type) -> list:
    parts = [];  stack = [pred]
    while stack:
        q = stack.pop()
        if isinstance(q, kind): stack.extend([q.b, q.a])
        else: parts.append(q)
    return parts


def format_pred(pred: Predicate) -> str:
    if isinstance(pred, TruePred):
        return "INCLUDE"
    if isinstance(pred, Compare):
        return f"{format_expr(pred.left)} {pred.symbol} {format_expr(pred.right)}"
    if isinstance(pred, AndPred):
        return " AND ".join(_wrap(p) for p in _flatten(pred, AndPred))
    if isinstance(pred, OrPred):
        return " OR ".join(_wrap(p) for p in _flatten(pred, OrPred))
    raise TypeError(f"No CQL form for {type(pred).__name__}")


def _wrap(p: Predicate) -> str:
    s = format_pred(p)
    return f"({s})" if isinstance(p, (AndPred, OrPred)) else s


def to_cql(obj: Union[Predicate, Expr]) -> str:
    """
    Render a predicate (or bare expression) as CQL text.

    Examples
    --------
    >>> from thematic.forms.predicates import EQ, GT, LE
    >>> from thematic.forms.utils import lit
    >>> to_cql(EQ("name", lit("O'Hara")) | EQ("name", lit("A OR B")))
    "name = 'O''Hara' OR name = 'A OR B'"
    >>> to_cql(GT("pop", 10) & LE("pop", 20.5))
    'pop > 10 AND pop <= 20.5'
    """
    if isinstance(obj, Expr):
        return format_expr(obj)
    return format_pred(obj)
