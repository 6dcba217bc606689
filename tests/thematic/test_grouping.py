import pytest

from thematic.grouping import RangedGrouping, ExplicitGrouping, GROUPING_KINDS


def test_kinds():
    assert RangedGrouping.kind == "ranged"
    assert ExplicitGrouping.kind == "explicit"
    assert GROUPING_KINDS == ("ranged", "explicit")

def test_ranged_from_breaks():
    g = RangedGrouping.from_breaks([0, 10, 20, 35])
    assert g.bins == ((0, 10), (10, 20), (20, 35))
    assert len(g) == 3
    assert g.min(2) == 20 and g.max(2) == 35

def test_ranged_accepts_lists_and_degenerate_bins():
    g = RangedGrouping([[0, 10], [10, 10]])
    assert g.bins == ((0, 10), (10, 10))

def test_ranged_rejects_inverted_bins():
    with pytest.raises(ValueError):
        RangedGrouping([(0, 10), (20, 15)])

def test_ranged_rejects_non_pairs():
    with pytest.raises(ValueError):
        RangedGrouping([(0, 10, 20)])
    with pytest.raises(ValueError):
        RangedGrouping([5])

def test_empty_groupings():
    assert len(RangedGrouping(())) == 0
    assert len(ExplicitGrouping(())) == 0

def test_explicit_dedupes_in_order():
    g = ExplicitGrouping([["B", "A", "B"], ("C",)])
    assert g.bins == (("B", "A"), ("C",))
    assert g.values(0) == ("B", "A")

def test_explicit_single_string_is_one_value():
    assert ExplicitGrouping(["AB"]).bins == (("AB",),)

def test_explicit_rejects_empty_bin():
    with pytest.raises(ValueError):
        ExplicitGrouping([["A"], []])
