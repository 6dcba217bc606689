import os, sys
import numpy as np
import pandas as pd
import pytest

# Ensure `src/` is importable
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from thematic.classify import ClassifierRegistry
from thematic.grouping import RangedGrouping, ExplicitGrouping


@pytest.fixture
def df_pop():
    # numeric attribute with boundary hits, outliers and a missing value
    return pd.DataFrame({
        "pop": [-5.0, 0.0, 10.0, 15.0, 20.0, 25.0, 30.0, 100.0, np.nan],
        "zone": ["A", "B", "C", "A", "B", "C", "D", "A", "B"],
    })


@pytest.fixture
def df_unique():
    # five distinct values over seven records
    return pd.DataFrame({"code": [1, 2, 2, 3, 4, 5, 5]})


@pytest.fixture
def registry():
    reg = ClassifierRegistry()
    calls = []
    reg.calls = calls

    @reg.register("Quantile")
    def _quantile(df, attribute, class_count):
        calls.append(("Quantile", attribute, class_count))
        return RangedGrouping([(0, 10), (10, 20), (20, 30)])

    @reg.register("UniqueInterval")
    def _unique(df, attribute, class_count):
        calls.append(("UniqueInterval", attribute, class_count))
        vals = sorted(df[attribute].dropna().unique().tolist())
        return RangedGrouping([(v, v) for v in vals])

    @reg.register("Categories")
    def _categories(df, attribute, class_count):
        return ExplicitGrouping([["A", "B"], ["C"], ["D"]])

    return reg
