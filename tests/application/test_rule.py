"""Tests for Rule and the checking pass."""

import types

import pytest

from archguard.application.rule import check
from archguard.domain.exceptions import ArchitectureViolationError
from archguard.domain.models import Origin

BASE = "org.springframework.data"


class TestScenarios:
    """End-to-end policy scenarios on the Spring Data module table."""

    def test_core_accessing_web_is_one_violation(self, modules, make_unit, make_graph):
        rule = modules.core.allow_external().as_rule()
        graph = make_graph(
            make_unit(f"{BASE}.util.TypeInformation", f"{BASE}.web.PagedModel"),
            make_unit(f"{BASE}.web.PagedModel"),
        )

        violations = list(rule.check(graph))

        assert len(violations) == 1
        violation = violations[0]
        assert violation.source_unit == f"{BASE}.util.TypeInformation"
        assert violation.target_unit == f"{BASE}.web.PagedModel"
        assert violation.location.line == 1
        assert "TypeInformation" in violation.message
        assert "PagedModel" in violation.message
        assert violation.rule_description == rule.description

    def test_web_policy(self, modules, make_unit, make_graph):
        rule = (
            modules.web.allow(modules.repository)
            .allow(modules.mapping)
            .allow(modules.application)
            .allow(modules.core)
            .allow_external()
            .as_rule()
        )
        to_mapping = make_graph(
            make_unit(f"{BASE}.web.Resolver", f"{BASE}.mapping.PropertyPath"),
            make_unit(f"{BASE}.mapping.PropertyPath"),
        )
        to_foo = make_graph(
            make_unit(f"{BASE}.web.Resolver", f"{BASE}.foo.Bar"),
            make_unit(f"{BASE}.foo.Bar"),
        )

        assert list(rule.check(to_mapping)) == []
        assert len(list(rule.check(to_foo))) == 1


class TestProperties:
    """Invariants that must hold for any policy."""

    def test_allowed_module_never_violates(self, modules, make_unit, make_graph):
        rule = modules.mapping.allow(modules.application).as_rule()
        graph = make_graph(
            make_unit("x.mapping.A", "x.domain.B", "x.support.C", "x.geo.D"),
            make_unit("x.domain.B"),
            make_unit("x.support.C"),
            make_unit("x.geo.D"),
        )
        assert list(rule.check(graph)) == []

    def test_same_module_never_violates(self, modules, make_unit, make_graph):
        rule = modules.core.as_rule()
        graph = make_graph(
            make_unit("x.util.A", "x.annotation.B", "x.util.C"),
            make_unit("x.annotation.B"),
            make_unit("x.util.C"),
        )
        assert list(rule.check(graph)) == []

    def test_external_requires_allow_external(self, modules, make_unit, make_graph):
        graph = make_graph(
            make_unit("x.util.A", "collections.abc", "requests"),
            make_unit("requests", origin=Origin.PACKAGED),
        )
        without = modules.core.as_rule()
        with_external = modules.core.allow_external().as_rule()

        assert [v.target_unit for v in without.check(graph)] == [
            "collections.abc",
            "requests",
        ]
        assert list(with_external.check(graph)) == []

    def test_checking_twice_gives_same_result(self, modules, make_unit, make_graph):
        rule = modules.application.allow(modules.core).as_rule()
        graph = make_graph(
            make_unit("x.domain.A", "x.web.B", "x.util.C", "x.mapping.D"),
            make_unit("x.web.B"),
            make_unit("x.util.C"),
            make_unit("x.mapping.D"),
        )
        assert rule.evaluate(graph) == rule.evaluate(graph)
        assert len(rule.evaluate(graph).violations) == 2

    def test_allow_order_is_irrelevant(self, modules, make_unit, make_graph):
        bc = modules.web.allow(modules.mapping).allow(modules.core).as_rule()
        cb = modules.web.allow(modules.core).allow(modules.mapping).as_rule()
        graph = make_graph(
            make_unit("x.web.A", "x.mapping.B", "x.util.C", "x.domain.D", "json"),
            make_unit("x.mapping.B"),
            make_unit("x.util.C"),
            make_unit("x.domain.D"),
        )
        assert set(bc.check(graph)) == {
            v.__class__(v.source_unit, v.target_unit, v.location, bc.description)
            for v in cb.check(graph)
        }
        assert {v.target_unit for v in bc.check(graph)} == {"x.domain.D", "json"}

    def test_target_in_several_allowed_modules_is_allowed(
        self, modules, make_unit, make_graph
    ):
        # x.web.util belongs to both Web and Core
        rule = modules.application.allow(modules.core).as_rule()
        graph = make_graph(make_unit("x.domain.A", "x.web.util"), make_unit("x.web.util"))
        assert list(rule.check(graph)) == []


class TestChecking:
    """Tests for check mechanics."""

    def test_check_is_lazy(self, modules, make_unit, make_graph):
        graph = make_graph(make_unit("x.util.A", "x.web.B"))
        result = check(modules.core.as_rule(), graph)
        assert isinstance(result, types.GeneratorType)

    def test_units_outside_membership_are_ignored(self, modules, make_unit, make_graph):
        graph = make_graph(make_unit("x.web.A", "x.foo.B"), make_unit("x.foo.B"))
        assert list(modules.core.as_rule().check(graph)) == []

    def test_accepts_plain_iterable_of_units(self, modules, make_unit):
        units = [make_unit("x.util.A", "x.web.B"), make_unit("x.web.B")]
        assert len(list(modules.core.as_rule().check(units))) == 1

    def test_unknown_target_treated_as_stub(self, modules, make_unit, make_graph):
        graph = make_graph(make_unit("x.util.A", "x.web.Missing"))
        rule = modules.core.allow_external().as_rule()
        # No source for the target, so it is external
        assert list(rule.check(graph)) == []

    def test_evaluate_sorts_violations(self, modules, make_unit, make_graph):
        graph = make_graph(
            make_unit("x.util.B", "x.web.Z", "x.web.Y"),
            make_unit("x.util.A", "x.web.Z"),
            make_unit("x.web.Y"),
            make_unit("x.web.Z"),
        )
        result = modules.core.as_rule().evaluate(graph)
        assert [(v.source_unit, v.location.line) for v in result.violations] == [
            ("x.util.A", 1),
            ("x.util.B", 1),
            ("x.util.B", 2),
        ]

    def test_assert_applies_passes_silently(self, modules, make_unit, make_graph):
        graph = make_graph(make_unit("x.util.A", "x.util.B"), make_unit("x.util.B"))
        modules.core.as_rule().assert_applies(graph)

    def test_assert_applies_reports_all_violations(self, modules, make_unit, make_graph):
        graph = make_graph(
            make_unit("x.util.A", "x.web.B", "x.mapping.C"),
            make_unit("x.web.B"),
            make_unit("x.mapping.C"),
        )
        rule = modules.core.as_rule()
        with pytest.raises(ArchitectureViolationError) as excinfo:
            rule.assert_applies(graph)

        error = excinfo.value
        assert isinstance(error, AssertionError)
        assert len(error.violations) == 2
        assert "was violated (2 times)" in str(error)
        assert "module x.util.A imports x.web.B in (x/util/A.py:1)" in str(error)
