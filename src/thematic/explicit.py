# src/thematic/explicit.py

"""
Rules from explicit (categorical) groupings.

Each bin becomes ``attr = v1 OR attr = v2 OR ...``. The predicate tree is
built directly from the values, so quotes, ``OR`` or any other text inside a
value never changes the meaning of the rule.

Examples
--------
>>> from thematic.grouping import ExplicitGrouping
>>> from thematic.explicit import explicit_rules
>>> rules = explicit_rules(ExplicitGrouping([["A", "B"], ["C"]]), "zone")
>>> [r.title for r in rules]
['A OR B', 'C']
>>> rules[0].to_cql()
"zone = 'A' OR zone = 'B'"
"""

from __future__ import annotations
from typing import List

from .errors import PredicateConstructionError
from .forms.predicates import EQ, any_of
from .forms.utils import format_value, lit
from .grouping import ExplicitGrouping
from .normalize import attribute_term
from .rules import Rule

__all__ = ["explicit_rules"]


def explicit_rules(groups: ExplicitGrouping, attribute: str) -> List[Rule]:
    """
    One rule per bin, in bin order; terms follow the bin's value order.

    Raises
    ------
    PredicateConstructionError
        If `attribute` is not a non-empty string, or a value cannot be a
        literal (``None``, NaN, unhashable or a container). No partial list
        is returned.
    """
    att = attribute_term(attribute)
    rules: List[Rule] = []
    for i, values in enumerate(groups.bins):
        terms = []
        for v in values:
            try:
                terms.append(EQ(att, lit(v)))
            except (TypeError, ValueError) as exc:
                raise PredicateConstructionError(f"Bin {i}: cannot use {v!r} as a value ({exc})") from exc
        title = " OR ".join(format_value(v) for v in values)
        rules.append(Rule(any_of(terms), title))
    return rules
