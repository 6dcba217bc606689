# src/thematic/classify.py

"""
Registry of classifiers.

The statistics behind quantile, equal-interval, Jenks, equal-area and
unique-interval classification live outside this package. A classifier is any
callable ``fn(dataset, attribute, class_count) -> Grouping`` registered under a
method name; :class:`~thematic.synthesis.RuleSynthesizer` looks it up by name.

Examples
--------
>>> import pandas as pd
>>> from thematic.classify import ClassifierRegistry
>>> from thematic.grouping import RangedGrouping
>>> registry = ClassifierRegistry()
>>> @registry.register("Halves")
... def halves(df, attribute, class_count):
...     s = df[attribute]
...     return RangedGrouping.from_breaks([float(s.min()), float(s.median()), float(s.max())])
>>> registry.classify(pd.DataFrame({"x": [0, 5, 10]}), "x", 2, "halves").bins
((0.0, 5.0), (5.0, 10.0))
"""

from __future__ import annotations
from typing import Any, Callable, Dict, List, Optional
import logging
import pandas as pd

from .grouping import Grouping

__all__ = [
    "Classifier",
    "ClassifierRegistry",
    "default_registry",
    "QUANTILE",
    "EQUAL_INTERVAL",
    "UNIQUE_INTERVAL",
    "JENKS",
    "EQUAL_AREA",
]

logger = logging.getLogger(__name__)

Classifier = Callable[[pd.DataFrame, str, int], Grouping]

QUANTILE = "Quantile"
EQUAL_INTERVAL = "EqualInterval"
UNIQUE_INTERVAL = "UniqueInterval"
JENKS = "Jenks"
EQUAL_AREA = "EqualArea"


class ClassifierRegistry:
    """Case-insensitive map from method name to classifier."""

    def __init__(self):
        self._classifiers: Dict[str, Classifier] = {}

    @staticmethod
    def _key(name: str) -> str:
        return name.strip().lower()

    def register(self, name: str, fn: Optional[Classifier] = None):
        """
        Register `fn` under `name`, replacing any previous entry.

        Without `fn`, returns a decorator.
        """
        def _add(f: Classifier) -> Classifier:
            if not callable(f):
                raise TypeError(f"Classifier for {name!r} is not callable")
            self._classifiers[self._key(name)] = f
            logger.debug("registered classifier %r", name)
            return f
        if fn is None:
            return _add
        return _add(fn)

    def unregister(self, name: str) -> None:
        self._classifiers.pop(self._key(name), None)

    def get(self, name: str) -> Classifier:
        try:
            return self._classifiers[self._key(name)]
        except KeyError:
            raise KeyError(f"No classifier registered for {name!r}") from None

    def names(self) -> List[str]:
        return sorted(self._classifiers)

    def __contains__(self, name: str) -> bool:
        return self._key(name) in self._classifiers

    def classify(self, dataset: Any, attribute: str, class_count: int, method: str) -> Grouping:
        return self.get(method)(dataset, attribute, class_count)


default_registry = ClassifierRegistry()
