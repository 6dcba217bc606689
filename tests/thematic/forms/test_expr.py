import numpy as np
import pandas as pd
import pytest

from thematic.forms import (
    Const, Literal, ColumnTerm, ParseDouble, to_expr, col, lit, parse_double, format_value,
)

# -----------------------
# Fixtures
# -----------------------

@pytest.fixture
def df_text():
    return pd.DataFrame({
        "code": ["10", "9", "x", "100"],
        "n": [1, 20, 3, 4],
        "cat": ["a", "b", "c", "d"],
    })


# -----------------------
# Leaves
# -----------------------

def test_const_broadcasts_as_float(df_text):
    assert Const(3).eval(df_text).tolist() == [3.0, 3.0, 3.0, 3.0]

@pytest.mark.parametrize("bad, exc", [
    ("a", TypeError),
    (True, TypeError),
    (float("nan"), ValueError),
])
def test_const_rejects_non_numbers(bad, exc):
    with pytest.raises(exc):
        Const(bad)

def test_literal_keeps_value(df_text):
    out = Literal("it's").eval(df_text)
    assert out.tolist() == ["it's"] * 4
    assert out.index.equals(df_text.index)

@pytest.mark.parametrize("bad, exc", [
    (None, ValueError),
    ([1, 2], TypeError),
    ({"a": 1}, TypeError),
    (float("nan"), ValueError),
])
def test_literal_rejects_non_scalars(bad, exc):
    with pytest.raises(exc):
        Literal(bad)

def test_column_term_missing_column(df_text):
    with pytest.raises(KeyError):
        ColumnTerm("nope").eval(df_text)

def test_parse_double_text_and_ints(df_text):
    out = ParseDouble(ColumnTerm("code")).eval(df_text)
    assert out.dtype == float
    assert out.iloc[0] == 10.0 and out.iloc[1] == 9.0 and out.iloc[3] == 100.0
    assert np.isnan(out.iloc[2])
    assert parse_double("n").eval(df_text).tolist() == [1.0, 20.0, 3.0, 4.0]


# -----------------------
# Conversion helpers
# -----------------------

def test_to_expr_and_lit():
    assert isinstance(to_expr("x"), ColumnTerm)
    assert isinstance(to_expr(5), Const)
    assert isinstance(lit(5), Const)
    assert isinstance(lit(np.int64(5)), Const)
    assert isinstance(lit("5"), Literal)
    assert col("x") == ColumnTerm("x")
    with pytest.raises(TypeError):
        to_expr(object())

def test_structural_equality():
    assert Const(10) == Const(10.0)
    assert Literal("A") == Literal("A")
    assert Literal("1") != Literal(1)
    assert ParseDouble(ColumnTerm("a")) == parse_double("a")

@pytest.mark.parametrize("value, text", [
    (10.0, "10"),
    (np.int64(3), "3"),
    (2.5, "2.5"),
    ("A", "A"),
    (True, "True"),
])
def test_format_value(value, text):
    assert format_value(value) == text
