# src/thematic/ranged.py

"""
Rules from ranged (numeric) groupings.

Two modes:

open
    The first bin is unbounded below and the last bin unbounded above; middle
    bins are ``(min, max]``.
closed
    Every bin is bounded. Bin 0 is ``[min, max]``, later bins ``(min, max]``,
    and a bin whose ``max`` repeats the previous bin's ``max`` is dropped.

In both modes a middle bin with ``min == max`` becomes an equality test.

Examples
--------
>>> from thematic.grouping import RangedGrouping
>>> from thematic.ranged import open_ranged_rules, closed_ranged_rules
>>> g = RangedGrouping([(0, 10), (10, 20), (20, 30)])
>>> [r.title for r in open_ranged_rules(g, "pop")]
['<= 10', '> 10 AND <= 20', '> 20']
>>> [r.title for r in closed_ranged_rules(g, "pop")]
['>= 0 AND <= 10', '> 10 AND <= 20', '> 20 AND <= 30']
"""

from __future__ import annotations
from typing import Any, List, Optional
import logging

from .errors import PredicateConstructionError
from .forms.predicates import EQ, GE, GT, LE, TRUE
from .forms.utils import Const, Expr, format_value
from .grouping import RangedGrouping
from .normalize import normalize_attribute
from .rules import Rule

__all__ = [
    "open_ranged_rules",
    "closed_ranged_rules",
    "ALL_TITLE",
]

logger = logging.getLogger(__name__)

ALL_TITLE = "ALL"


def _bound(value: Any, i: int) -> Const:
    try:
        return Const(value)
    except (TypeError, ValueError) as exc:
        raise PredicateConstructionError(f"Bin {i}: cannot use {value!r} as a range bound ({exc})") from exc


def _equal_rule(att: Expr, value: Any, i: int) -> Rule:
    return Rule(EQ(att, _bound(value, i)), format_value(value))


def _between_rule(att: Expr, lo: Any, hi: Any, i: int, *, inclusive_low: bool) -> Rule:
    lower = GE(att, _bound(lo, i)) if inclusive_low else GT(att, _bound(lo, i))
    upper = LE(att, _bound(hi, i))
    op = ">=" if inclusive_low else ">"
    return Rule(lower & upper, f"{op} {format_value(lo)} AND <= {format_value(hi)}")


def open_ranged_rules(
    groups: RangedGrouping,
    attribute: str,
    declared_type: Optional[Any] = None,
    normalize: bool = False,
) -> List[Rule]:
    """
    Open-mode rules, one per bin.

    Parameters
    ----------
    groups : RangedGrouping
        Ascending bins.
    attribute : str
        Column the rules test.
    declared_type : dtype-like, optional
        Declared type of `attribute`; see :func:`~thematic.normalize.normalize_attribute`.
    normalize : bool, default False
        Parse integral attributes as numbers before comparing.

    Returns
    -------
    list of Rule
        Empty for an empty grouping. A single bin yields a single rule that
        matches every record. The last bin is always ``> min`` even when it is
        degenerate, so values above the last break stay covered.

    Raises
    ------
    PredicateConstructionError
        If `attribute` is not a non-empty string, or a bound is not a real
        number or is NaN. No partial list is returned.
    """
    att = normalize_attribute(attribute, declared_type, normalize)
    n = len(groups)
    if n == 0:
        return []
    if n == 1:
        # still validate the bounds so a malformed bin is reported
        _bound(groups.min(0), 0)
        _bound(groups.max(0), 0)
        return [Rule(TRUE, ALL_TITLE)]

    rules: List[Rule] = []
    # First class
    hi0 = groups.max(0)
    rules.append(Rule(LE(att, _bound(hi0, 0)), f"<= {format_value(hi0)}"))
    for i in range(1, n - 1):
        lo, hi = groups.bins[i]
        if lo == hi:
            rules.append(_equal_rule(att, lo, i))
        else:
            rules.append(_between_rule(att, lo, hi, i, inclusive_low=False))
    # Last class
    lo_last = groups.min(n - 1)
    rules.append(Rule(GT(att, _bound(lo_last, n - 1)), f"> {format_value(lo_last)}"))
    return rules


def closed_ranged_rules(
    groups: RangedGrouping,
    attribute: str,
    declared_type: Optional[Any] = None,
    normalize: bool = False,
) -> List[Rule]:
    """
    Closed-mode rules; bins with a repeated upper boundary are skipped.

    Together the rules cover ``[min(0), max(N-1)]`` without overlap as long as
    the bins are contiguous.

    Raises
    ------
    PredicateConstructionError
        If `attribute` is not a non-empty string, or a bound is not a real
        number or is NaN. No partial list is returned.
    """
    att = normalize_attribute(attribute, declared_type, normalize)
    rules: List[Rule] = []
    for i, (lo, hi) in enumerate(groups.bins):
        if i > 0 and hi == groups.max(i - 1):
            logger.debug("closed ranged rules: skipping bin %d, upper bound %r repeats", i, hi)
            continue
        if lo == hi:
            rules.append(_equal_rule(att, lo, i))
        else:
            rules.append(_between_rule(att, lo, hi, i, inclusive_low=(i == 0)))
    return rules
