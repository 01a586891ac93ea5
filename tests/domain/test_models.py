"""Tests for the unit graph models."""

import dataclasses

import pytest

from archguard.domain.models import (
    EvaluationResult,
    Origin,
    SourceLocation,
    Unit,
    UnitGraph,
    Violation,
)


class TestUnit:
    """Tests for Unit."""

    def test_namespace_is_module_name(self, make_unit):
        assert make_unit("app.web.views").namespace == "app.web.views"

    def test_stub_has_no_source(self):
        stub = Unit.stub("yaml")
        assert stub.has_source is False
        assert stub.origin is Origin.UNRESOLVED
        assert stub.is_external is True

    def test_unit_is_immutable(self, make_unit):
        unit = make_unit("app.web")
        with pytest.raises(dataclasses.FrozenInstanceError):
            unit.name = "other"  # type: ignore[misc]


class TestUnitGraph:
    """Tests for UnitGraph."""

    def test_iterates_in_name_order(self, make_unit):
        graph = UnitGraph(units=(make_unit("b"), make_unit("a.z"), make_unit("a")))
        assert [u.name for u in graph] == ["a", "a.z", "b"]

    def test_get_known_unit(self, make_unit):
        unit = make_unit("app.web", "app.core")
        graph = UnitGraph(units=(unit,))
        assert graph.get("app.web") is unit
        assert "app.web" in graph
        assert len(graph) == 1

    def test_get_unknown_returns_stub(self):
        graph = UnitGraph()
        stub = graph.get("requests")
        assert stub.name == "requests"
        assert stub.has_source is False

    def test_duplicate_names_rejected(self, make_unit):
        with pytest.raises(ValueError, match="Duplicate unit"):
            UnitGraph(units=(make_unit("app"), make_unit("app")))

    def test_references_flattened(self, make_unit):
        graph = UnitGraph(units=(make_unit("a", "x", "y"), make_unit("b", "z")))
        assert [r.target for r in graph.references] == ["x", "y", "z"]


class TestViolation:
    """Tests for Violation and EvaluationResult."""

    def test_message_names_both_units_and_location(self):
        violation = Violation(
            source_unit="app.core.util",
            target_unit="app.web.views",
            location=SourceLocation("app/core/util.py", 12),
            rule_description="rule",
        )
        assert violation.message == (
            "module app.core.util imports app.web.views in (app/core/util.py:12)"
        )

    def test_result_passed_when_empty(self):
        assert EvaluationResult(rule_description="rule").passed is True
