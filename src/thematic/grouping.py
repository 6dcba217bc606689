# src/thematic/grouping.py

"""
Classifier output consumed by the rule builders.

A grouping is one of two kinds, told apart by the class attribute ``kind``:

- :class:`RangedGrouping` (``"ranged"``): ordered numeric bins ``(min, max)``;
- :class:`ExplicitGrouping` (``"explicit"``): ordered bins of categorical values.

Examples
--------
>>> from thematic.grouping import RangedGrouping, ExplicitGrouping
>>> g = RangedGrouping.from_breaks([0, 10, 20])
>>> g.bins
((0, 10), (10, 20))
>>> ExplicitGrouping([["A", "B", "A"], ["C"]]).bins
(('A', 'B'), ('C',))
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, ClassVar, Iterable, Sequence, Tuple, Union

__all__ = [
    "RangedGrouping",
    "ExplicitGrouping",
    "Grouping",
    "GROUPING_KINDS",
]


@dataclass(frozen=True)
class RangedGrouping:
    """
    Ordered numeric bins, ascending by ``min``.

    Adjacent bins may share a boundary, and a bin may be degenerate
    (``min == max``).

    Raises
    ------
    ValueError
        If a bin is not a pair or has ``min > max``.
    """
    bins: Tuple[Tuple[Any, Any], ...]
    kind: ClassVar[str] = "ranged"

    def __post_init__(self):
        out = []
        for i, b in enumerate(self.bins):
            try:
                lo, hi = b
            except (TypeError, ValueError):
                raise ValueError(f"Bin {i} is not a (min, max) pair: {b!r}") from None
            if lo > hi:
                raise ValueError(f"Bin {i} has min > max: ({lo!r}, {hi!r})")
            out.append((lo, hi))
        object.__setattr__(self, "bins", tuple(out))

    @classmethod
    def from_breaks(cls, breaks: Sequence[Any]) -> "RangedGrouping":
        """Bins between consecutive breaks ``[b0, b1, ..., bn]``."""
        breaks = list(breaks)
        return cls(tuple(zip(breaks[:-1], breaks[1:])))

    def __len__(self) -> int:
        return len(self.bins)

    def min(self, i: int) -> Any:
        return self.bins[i][0]

    def max(self, i: int) -> Any:
        return self.bins[i][1]


@dataclass(frozen=True)
class ExplicitGrouping:
    """
    Ordered bins of categorical values.

    Values inside a bin are de-duplicated keeping first-seen order. Passing a
    ``set`` is allowed; its iteration order then decides the order of terms.

    Raises
    ------
    ValueError
        If a bin is empty.
    """
    bins: Tuple[Tuple[Any, ...], ...]
    kind: ClassVar[str] = "explicit"

    def __post_init__(self):
        out = []
        for i, values in enumerate(self.bins):
            if isinstance(values, (str, bytes)):
                values = (values,)
            vals = tuple(dict.fromkeys(values))
            if not vals:
                raise ValueError(f"Bin {i} of an explicit grouping is empty")
            out.append(vals)
        object.__setattr__(self, "bins", tuple(out))

    def __len__(self) -> int:
        return len(self.bins)

    def values(self, i: int) -> Tuple[Any, ...]:
        return self.bins[i]


Grouping = Union[RangedGrouping, ExplicitGrouping]
GROUPING_KINDS = (RangedGrouping.kind, ExplicitGrouping.kind)
