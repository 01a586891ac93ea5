"""Shared fixtures for architecture tests."""

import os
from pathlib import Path

import pytest
from pytestarch import (
    EvaluableArchitecture,
    LayeredArchitecture,
    get_evaluable_architecture,
)

from archguard.domain.models import UnitGraph
from archguard.infrastructure.analysis import PythonSourceAnalyzer

SRC_DIR = Path(__file__).resolve().parent.parent.parent / "src"


@pytest.fixture(scope="session")
def evaluable() -> EvaluableArchitecture:
    """Build evaluable architecture from src/archguard."""
    src_dir = os.fspath(SRC_DIR)
    project_path = os.path.join(src_dir, "archguard")
    return get_evaluable_architecture(src_dir, project_path)


@pytest.fixture(scope="session")
def layers() -> LayeredArchitecture:
    """Define the four layers.

    PyTestArch resolves module names relative to the source root,
    so modules appear as 'src.archguard.domain', etc.
    """
    return (
        LayeredArchitecture()
        .layer("domain")
        .containing_modules(["src.archguard.domain"])
        .layer("application")
        .containing_modules(["src.archguard.application"])
        .layer("infrastructure")
        .containing_modules(["src.archguard.infrastructure", "src.archguard.schemas"])
        .layer("cli")
        .containing_modules(["src.archguard.cli"])
    )


@pytest.fixture(scope="session")
def own_graph() -> UnitGraph:
    """archguard's own sources, analysed by archguard."""
    return PythonSourceAnalyzer(SRC_DIR).analyze()
