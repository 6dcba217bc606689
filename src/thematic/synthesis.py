# src/thematic/synthesis.py

"""
Classification entry points: classifier output in, rule list out.

:class:`RuleSynthesizer` runs a registered classifier, routes its grouping to
the matching rule builder, and returns a :class:`Synthesis`. Nothing raises past
it: a failed request comes back with ``rules is None`` and the error attached,
while an empty grouping comes back ``ok`` with an empty list.

Examples
--------
>>> import pandas as pd
>>> from thematic.classify import ClassifierRegistry
>>> from thematic.grouping import RangedGrouping
>>> from thematic.synthesis import RuleSynthesizer
>>> reg = ClassifierRegistry()
>>> _ = reg.register("Quantile", lambda df, att, k: RangedGrouping([(0, 5), (5, 9)]))
>>> res = RuleSynthesizer(reg).quantile(pd.DataFrame({"v": [0, 5, 9]}), "v", 2)
>>> res.ok, [r.title for r in res.rules]
(True, ['>= 0 AND <= 5', '> 5 AND <= 9'])
>>> RuleSynthesizer(reg).jenks(pd.DataFrame({"v": [0]}), "v", 2).error
EngineFailure("Jenks classification failed: No classifier registered for 'Jenks'")
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional
import logging
import pandas as pd

from .classify import (
    ClassifierRegistry,
    default_registry,
    QUANTILE,
    EQUAL_INTERVAL,
    UNIQUE_INTERVAL,
    JENKS,
    EQUAL_AREA,
)
from .errors import (
    ClassificationError, EngineFailure, IntervalCountExceeded, PredicateConstructionError,
)
from .explicit import explicit_rules
from .grouping import ExplicitGrouping, RangedGrouping
from .ranged import closed_ranged_rules, open_ranged_rules
from .rules import Rule

__all__ = [
    "Synthesis",
    "RuleSynthesizer",
]

logger = logging.getLogger(__name__)


@dataclass
class Synthesis:
    """
    Outcome of one classification request.

    Exactly one of ``rules`` / ``error`` is set.
    """
    method: str
    rules: Optional[List[Rule]] = None
    error: Optional[ClassificationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> List[Rule]:
        """Return the rules, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.rules

    def __len__(self) -> int:
        return len(self.rules) if self.rules is not None else 0


def _infer_type(dataset: Any, attribute: str) -> Optional[Any]:
    if not isinstance(dataset, pd.DataFrame):
        return None
    try:
        found = attribute in dataset.columns
    except TypeError:
        # unhashable label; the rule builders report it
        return None
    return getattr(dataset[attribute], "dtype", None) if found else None


class RuleSynthesizer:
    """
    Builds rule lists from classifier output.

    Parameters
    ----------
    registry : ClassifierRegistry, optional
        Where classifiers are looked up; defaults to
        :data:`~thematic.classify.default_registry`.
    """

    def __init__(self, registry: Optional[ClassifierRegistry] = None):
        self.registry = registry if registry is not None else default_registry
        self._builders: Dict[str, Callable[..., List[Rule]]] = {
            RangedGrouping.kind: self._ranged,
            ExplicitGrouping.kind: self._explicit,
        }

    # ------------- builders by grouping kind -------------

    @staticmethod
    def _ranged(groups, attribute, declared_type, open, normalize) -> List[Rule]:
        build = open_ranged_rules if open else closed_ranged_rules
        return build(groups, attribute, declared_type, normalize)

    @staticmethod
    def _explicit(groups, attribute, declared_type, open, normalize) -> List[Rule]:
        return explicit_rules(groups, attribute)

    # ------------- generic entry point -------------

    def synthesize(
        self,
        dataset: Any,
        attribute: str,
        declared_type: Optional[Any] = None,
        class_count: int = 5,
        open: bool = False,
        normalize: bool = False,
        method: str = QUANTILE,
    ) -> Synthesis:
        """
        Classify `attribute` of `dataset` with `method` and build rules.

        Parameters
        ----------
        dataset : pandas.DataFrame or any object the classifier accepts
        attribute : str
        declared_type : dtype-like, optional
            Inferred from ``dataset[attribute].dtype`` when omitted.
        class_count : int
        open : bool, default False
            Open or closed mode for ranged groupings; ignored for explicit ones.
        normalize : bool, default False
            Parse integral attributes as numbers; ignored for explicit groupings.
        method : str
            Registered classifier name.
        """
        if declared_type is None:
            declared_type = _infer_type(dataset, attribute)
        try:
            groups = self.registry.classify(dataset, attribute, class_count, method)
        except Exception as exc:
            reason = exc.args[0] if exc.args else repr(exc)
            err = EngineFailure(f"{method} classification failed: {reason}", method=method)
            return self._failed(method, err, exc)

        build = self._builders.get(getattr(groups, "kind", None))
        if build is None:
            err = EngineFailure(
                f"{method} classification returned an unsupported result: {type(groups).__name__}",
                method=method,
            )
            return self._failed(method, err, None)

        try:
            rules = build(groups, attribute, declared_type, open, normalize)
        except ClassificationError as exc:
            exc.method = method
            return self._failed(method, exc, None)
        except Exception as exc:
            err = PredicateConstructionError(f"{method} rules could not be built: {exc}", method=method)
            return self._failed(method, err, exc)

        logger.debug("%s classification of %r: %d bins -> %d rules", method, attribute, len(groups), len(rules))
        return Synthesis(method, rules=rules)

    @staticmethod
    def _failed(method: str, err: ClassificationError, cause: Optional[BaseException]) -> Synthesis:
        if cause is not None:
            err.__cause__ = cause
        logger.info("Failed to build %s classification: %s", method, err, exc_info=err)
        return Synthesis(method, error=err)

    # ------------- named entry points -------------

    def quantile(self, dataset, attribute, class_count, declared_type=None, open=False, normalize=False) -> Synthesis:
        return self.synthesize(dataset, attribute, declared_type, class_count, open, normalize, QUANTILE)

    def equal_interval(self, dataset, attribute, class_count, declared_type=None, open=False, normalize=False) -> Synthesis:
        return self.synthesize(dataset, attribute, declared_type, class_count, open, normalize, EQUAL_INTERVAL)

    def jenks(self, dataset, attribute, class_count, declared_type=None, open=False, normalize=False) -> Synthesis:
        return self.synthesize(dataset, attribute, declared_type, class_count, open, normalize, JENKS)

    def equal_area(self, dataset, attribute, class_count, declared_type=None, open=False, normalize=False) -> Synthesis:
        return self.synthesize(dataset, attribute, declared_type, class_count, open, normalize, EQUAL_AREA)

    def unique_interval(
        self,
        dataset: Any,
        attribute: str,
        declared_type: Optional[Any] = None,
        max_intervals: int = 0,
        normalize: bool = False,
    ) -> Synthesis:
        """
        One class per distinct value, closed mode.

        The classifier is asked for ``len(dataset)`` classes. With
        ``max_intervals > 0``, a result with more rules than that fails with
        :class:`~thematic.errors.IntervalCountExceeded`.
        """
        try:
            class_count = len(dataset)
        except TypeError as exc:
            err = EngineFailure(
                f"{UNIQUE_INTERVAL} classification failed: cannot count the records of {type(dataset).__name__}",
                method=UNIQUE_INTERVAL,
            )
            return self._failed(UNIQUE_INTERVAL, err, exc)
        res = self.synthesize(dataset, attribute, declared_type, class_count, False, normalize, UNIQUE_INTERVAL)
        if res.ok and max_intervals > 0 and len(res.rules) > max_intervals:
            err = IntervalCountExceeded(len(res.rules), max_intervals, method=UNIQUE_INTERVAL)
            logger.info("Unique interval classification of %r: %s", attribute, err)
            return Synthesis(UNIQUE_INTERVAL, error=err)
        return res
