"""
Static analyser for Python source trees.

Pure AST-based: files are parsed, never imported or executed. Every .py file
becomes a unit, every import statement a reference.
"""

import ast
import logging
from dataclasses import dataclass
from pathlib import Path

from archguard.domain.exceptions import AnalysisError
from archguard.domain.interfaces import CodeAnalyzerInterface
from archguard.domain.models import (
    Origin,
    Reference,
    SourceFile,
    SourceLocation,
    Unit,
    UnitGraph,
)
from archguard.infrastructure.analysis.origin import classify_external, is_installed_path

logger = logging.getLogger(__name__)

TEST_DIRS = frozenset({"tests", "test"})
SKIPPED_DIRS = frozenset({"__pycache__", "node_modules"})


def is_test_file(relative: Path) -> bool:
    """Test modules: tests/ or test/ directories, test_*.py, *_test.py, conftest.py."""
    if any(part in TEST_DIRS for part in relative.parts[:-1]):
        return True
    stem = relative.stem
    return stem.startswith("test_") or stem.endswith("_test") or stem == "conftest"


def module_name_for(relative: Path) -> str | None:
    """Dotted module name for a path relative to the import root, or None."""
    parts = list(relative.with_suffix("").parts)
    if parts and parts[-1] == "__init__":
        parts.pop()
    if not parts or not all(part.isidentifier() for part in parts):
        return None
    return ".".join(parts)


@dataclass(frozen=True)
class _ImportSite:
    """Candidate targets of one imported name, most specific first."""

    candidates: tuple[str, ...]
    line: int


class _ImportCollector(ast.NodeVisitor):
    """Collects import statements anywhere in a module, including function bodies."""

    def __init__(self, module: str, is_package: bool, include_type_checking: bool):
        self.module = module
        self.package = module if is_package else module.rpartition(".")[0]
        self.include_type_checking = include_type_checking
        self.sites: list[_ImportSite] = []

    def visit_Import(self, node: ast.Import) -> None:
        for alias in node.names:
            self.sites.append(_ImportSite(candidates=(alias.name,), line=node.lineno))

    def visit_ImportFrom(self, node: ast.ImportFrom) -> None:
        base = self._resolve_base(node)
        if base is None:
            return
        for alias in node.names:
            if alias.name == "*":
                candidates: tuple[str, ...] = (base,)
            else:
                candidates = (f"{base}.{alias.name}", base)
            self.sites.append(_ImportSite(candidates=candidates, line=node.lineno))

    def visit_If(self, node: ast.If) -> None:
        if not self.include_type_checking and _is_type_checking_guard(node.test):
            for child in node.orelse:
                self.visit(child)
            return
        self.generic_visit(node)

    def _resolve_base(self, node: ast.ImportFrom) -> str | None:
        if node.level == 0:
            return node.module or ""
        package_parts = self.package.split(".") if self.package else []
        drop = node.level - 1
        if drop >= len(package_parts):
            logger.warning(
                "%s:%d: relative import beyond top-level package, skipped",
                self.module,
                node.lineno,
            )
            return None
        anchor = package_parts[: len(package_parts) - drop]
        if node.module:
            anchor.append(node.module)
        return ".".join(anchor)


def _is_type_checking_guard(test: ast.expr) -> bool:
    if isinstance(test, ast.Name):
        return test.id == "TYPE_CHECKING"
    if isinstance(test, ast.Attribute):
        return test.attr == "TYPE_CHECKING"
    return False


class PythonSourceAnalyzer(CodeAnalyzerInterface):
    """
    Builds a unit graph from a directory of Python sources.

    `root` is the import root (e.g. `src/`). If `root` is itself a package
    (contains `__init__.py`) its parent is used so unit names stay qualified.

    Import targets outside the tree become stub units without source. Project
    files that live inside an installed location are classified PACKAGED and
    so count as external.
    """

    def __init__(
        self,
        root: str | Path,
        include_tests: bool = False,
        include_type_checking: bool = True,
    ):
        """
        Args:
            root: Directory to analyse
            include_tests: Also analyse test modules
            include_type_checking: Count imports under `if TYPE_CHECKING:`
        """
        root_path = Path(root).resolve()
        if not root_path.is_dir():
            raise AnalysisError(f"Source root is not a directory: {root}", str(root))
        self._import_root = root_path.parent if (root_path / "__init__.py").exists() else root_path
        self._scan_root = root_path
        self._include_tests = include_tests
        self._include_type_checking = include_type_checking

    @property
    def import_root(self) -> Path:
        return self._import_root

    def analyze(self) -> UnitGraph:
        classify_external.cache_clear()
        files = self._discover()
        origin = Origin.PACKAGED if is_installed_path(self._import_root) else Origin.PROJECT

        units: list[Unit] = []
        targets: set[str] = set()
        for name, path in sorted(files.items()):
            references = self._references_for(name, path, files)
            targets.update(ref.target for ref in references)
            relative = path.relative_to(self._import_root).as_posix()
            units.append(
                Unit(
                    name=name,
                    source=SourceFile(path=relative, uri=path.as_uri()),
                    origin=origin,
                    references=references,
                )
            )

        project_tops = {name.partition(".")[0] for name in files}
        stubs = [
            Unit.stub(target, self._classify_missing(target, project_tops))
            for target in sorted(targets - files.keys())
        ]
        logger.info(
            "Analysed %d module(s) under %s: %d reference(s), %d unit(s) outside the tree",
            len(units),
            self._scan_root,
            sum(len(u.references) for u in units),
            len(stubs),
        )
        return UnitGraph(units=tuple(units + stubs))

    def _discover(self) -> dict[str, Path]:
        files: dict[str, Path] = {}
        for path in sorted(self._scan_root.rglob("*.py")):
            relative = path.relative_to(self._import_root)
            if any(
                part in SKIPPED_DIRS or part.startswith(".") for part in relative.parts[:-1]
            ):
                continue
            if not self._include_tests and is_test_file(relative):
                logger.debug("Skipping test module %s", relative)
                continue
            name = module_name_for(relative)
            if name is None:
                logger.debug("Skipping non-importable file %s", relative)
                continue
            files[name] = path
        return files

    def _references_for(
        self, name: str, path: Path, known: dict[str, Path]
    ) -> tuple[Reference, ...]:
        tree = self._parse(path)
        collector = _ImportCollector(
            module=name,
            is_package=path.name == "__init__.py",
            include_type_checking=self._include_type_checking,
        )
        collector.visit(tree)

        location_path = path.relative_to(self._import_root).as_posix()
        seen: set[tuple[str, int]] = set()
        references: list[Reference] = []
        for site in collector.sites:
            target = next((c for c in site.candidates if c in known), site.candidates[-1])
            if target == name or (target, site.line) in seen:
                continue
            seen.add((target, site.line))
            references.append(
                Reference(
                    source=name,
                    target=target,
                    location=SourceLocation(path=location_path, line=site.line),
                )
            )
        logger.debug("Parsed %s: %d reference(s)", location_path, len(references))
        return tuple(references)

    def _parse(self, path: Path) -> ast.Module:
        # Bytes, so the parser honours a BOM or a coding declaration
        try:
            source = path.read_bytes()
        except OSError as e:
            raise AnalysisError(f"Cannot read {path}: {e}", str(path)) from e
        try:
            return ast.parse(source, filename=str(path))
        except SyntaxError as e:
            raise AnalysisError(f"Syntax error in {path}: {e}", str(path)) from e

    @staticmethod
    def _classify_missing(target: str, project_tops: set[str]) -> Origin:
        if target.partition(".")[0] in project_tops:
            return Origin.UNRESOLVED
        return classify_external(target)
