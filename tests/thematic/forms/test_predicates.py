import operator

import numpy as np
import pandas as pd
import pytest

from thematic.forms import (
    Predicate, AndPred, OrPred, TRUE, Compare, LE, GE, LT, GT, EQ,
    any_of, all_of, lit, to_expr,
)

# -----------------------
# Fixtures
# -----------------------

@pytest.fixture
def df_basic():
    return pd.DataFrame({
        "x": [0.0, 5.0, 10.0, np.nan],
        "kind": ["A", "B", "C", "A"],
    })


# -----------------------
# Comparisons
# -----------------------

def test_compare_ops(df_basic):
    assert LE("x", 5).mask(df_basic).tolist() == [True, True, False, False]
    assert GE("x", 5).mask(df_basic).tolist() == [False, True, True, False]
    assert LT("x", 5).mask(df_basic).tolist() == [True, False, False, False]
    assert GT("x", 5).mask(df_basic).tolist() == [False, False, True, False]
    assert EQ("x", 5).mask(df_basic).tolist() == [False, True, False, False]

def test_eq_on_strings(df_basic):
    assert EQ("kind", lit("A")).mask(df_basic).tolist() == [True, False, False, True]

def test_missing_values_never_match(df_basic):
    m = GT("x", -1).mask(df_basic)
    assert m.dtype == bool
    assert m.tolist() == [True, True, True, False]

def test_nullable_integers():
    df = pd.DataFrame({"n": pd.array([1, None, 3], dtype="Int64")})
    assert GT("n", 0).mask(df).tolist() == [True, False, True]

def test_unsupported_comparator():
    with pytest.raises(ValueError):
        Compare("x", 1, operator.add)

def test_compare_structural_equality():
    assert EQ("kind", lit("A")) == EQ("kind", lit("A"))
    assert EQ("kind", lit("A")) != EQ("kind", lit("B"))
    assert LE("x", 1) != GE("x", 1)


# -----------------------
# Combinators
# -----------------------

def test_and_or(df_basic):
    band = GT("x", 0) & LE("x", 10)
    assert isinstance(band, AndPred)
    assert band.mask(df_basic).tolist() == [False, True, True, False]
    either = LT("x", 1) | GT("x", 9)
    assert isinstance(either, OrPred)
    assert either.mask(df_basic).tolist() == [True, False, True, False]

def test_true_accepts_everything(df_basic):
    assert TRUE.mask(df_basic).tolist() == [True] * 4
    assert repr(TRUE) == "TRUE"

def test_any_of_and_all_of(df_basic):
    single = EQ("kind", lit("A"))
    assert any_of([single]) is single
    p = any_of(EQ("kind", lit(v)) for v in ["A", "C"])
    assert p == OrPred(EQ("kind", lit("A")), EQ("kind", lit("C")))
    assert p.mask(df_basic).tolist() == [True, False, True, True]
    q = all_of([GE("x", 0), LE("x", 5)])
    assert q.mask(df_basic).tolist() == [True, True, False, False]

def test_any_of_three_folds_left():
    a, b, c = (EQ("k", lit(v)) for v in "abc")
    assert any_of([a, b, c]) == OrPred(OrPred(a, b), c)

def test_empty_reductions_raise():
    with pytest.raises(ValueError):
        any_of([])
    with pytest.raises(ValueError):
        all_of([])

def test_base_predicate_is_abstract(df_basic):
    with pytest.raises(NotImplementedError):
        Predicate().mask(df_basic)

def test_repr_smoke():
    assert repr(GT("x", 10) & LE("x", 20)) == "((x > 10) AND (x <= 20))"
