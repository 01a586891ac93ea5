"""Shared pytest fixtures for archguard tests."""

from dataclasses import dataclass

import pytest

from archguard.application.module import Module, define_module
from archguard.domain.models import (
    Origin,
    Reference,
    SourceFile,
    SourceLocation,
    Unit,
    UnitGraph,
)


def make_unit(
    name: str,
    *targets: str,
    has_source: bool = True,
    origin: Origin = Origin.PROJECT,
) -> Unit:
    """Create a unit importing `targets`, one per line starting at line 1."""
    path = name.replace(".", "/") + ".py"
    references = tuple(
        Reference(source=name, target=target, location=SourceLocation(path, line))
        for line, target in enumerate(targets, 1)
    )
    source = SourceFile(path=path, uri=f"file:///project/{path}") if has_source else None
    return Unit(name=name, source=source, origin=origin, references=references)


def make_graph(*units: Unit) -> UnitGraph:
    return UnitGraph(units=units)


@dataclass(frozen=True)
class SpringDataModules:
    """Module table of the Spring Data Commons architecture."""

    web: Module
    repository: Module
    auditing: Module
    conversion: Module
    mapping: Module
    application: Module
    core: Module


@pytest.fixture
def modules() -> SpringDataModules:
    """Create the seven Spring Data modules without any allowed targets."""
    return SpringDataModules(
        web=define_module("Web", "..web.."),
        repository=define_module("Repositories", "..repository..", "..querydsl.."),
        auditing=define_module("Auditing", "..auditing.."),
        conversion=define_module("Conversion", "..convert.."),
        mapping=define_module("Mapping", "..mapping.."),
        application=define_module(
            "Application",
            "..domain..",
            "..crossstore..",
            "..geo..",
            "..history..",
            "..support..",
        ),
        core=define_module(
            "Core",
            "..util..",
            "..annotation..",
            "..authentication..",
            "..transaction..",
            "..projection..",
        ),
    )


@pytest.fixture(name="make_unit")
def make_unit_fixture():
    """Factory fixture for units (see make_unit)."""
    return make_unit


@pytest.fixture(name="make_graph")
def make_graph_fixture():
    """Factory fixture for unit graphs."""
    return make_graph
