"""Tests for the Edge value type."""

import dataclasses

import pytest

from edgegraph.domain.errors import InvalidWeightError
from edgegraph.domain.models import Edge, validate_weight


class TestEdge:
    def test_fields_and_pair(self):
        edge = Edge("A", "B", 3)

        assert edge.source == "A"
        assert edge.target == "B"
        assert edge.weight == 3
        assert edge.pair == ("A", "B")

    def test_is_immutable(self):
        edge = Edge("A", "B", 3)

        with pytest.raises(dataclasses.FrozenInstanceError):
            edge.weight = 4

    def test_with_weight_returns_new_edge(self):
        edge = Edge("A", "B", 3)
        heavier = edge.with_weight(8)

        assert heavier == Edge("A", "B", 8)
        assert edge.weight == 3

    def test_equality_is_by_value(self):
        assert Edge("A", "B", 1) == Edge("A", "B", 1)
        assert Edge("A", "B", 1) != Edge("B", "A", 1)
        assert len({Edge("A", "B", 1), Edge("A", "B", 1)}) == 1

    @pytest.mark.parametrize("weight", [0, -2])
    def test_non_positive_weight_rejected(self, weight):
        with pytest.raises(InvalidWeightError):
            Edge("A", "B", weight)

    def test_str(self):
        assert str(Edge("A", "B", 3)) == "A -> B (3)"


class TestValidateWeight:
    def test_accepts_zero_by_default(self):
        assert validate_weight(0) == 0

    def test_error_message_names_type(self):
        with pytest.raises(InvalidWeightError, match="float"):
            validate_weight(2.0)

    def test_error_message_names_minimum(self):
        with pytest.raises(InvalidWeightError, match=">= 1"):
            validate_weight(0, minimum=1)
