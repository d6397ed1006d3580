"""Tests for the edgegraph error hierarchy."""

from edgegraph.domain.errors import EdgeGraphError, InvalidWeightError, RepInvariantError


def test_str_includes_cause():
    error = EdgeGraphError("outer", cause=KeyError("inner"))
    assert str(error) == "outer: 'inner'"


def test_str_without_cause():
    assert str(EdgeGraphError("plain")) == "plain"


def test_invalid_weight_error_is_value_error():
    error = InvalidWeightError("bad weight", weight=-1)

    assert isinstance(error, EdgeGraphError)
    assert isinstance(error, ValueError)
    assert error.args == ("bad weight",)


def test_rep_invariant_error_is_assertion_error():
    error = RepInvariantError("broken", vertex_count=1, edge_count=1, min_vertices=2)

    assert isinstance(error, EdgeGraphError)
    assert isinstance(error, AssertionError)
    assert error.min_vertices == 2
