"""
Origin classification for code outside the analysed tree.

Locates top-level modules with PathFinder, which searches sys.path without
importing anything.
"""

import sys
from functools import lru_cache
from importlib.machinery import PathFinder
from pathlib import PurePath

from archguard.domain.models import Origin

INSTALLED_DIRS = frozenset({"site-packages", "dist-packages"})
ARCHIVE_SUFFIXES = (".zip", ".egg", ".whl")


def is_installed_path(path: PurePath) -> bool:
    """True for files inside an installed distribution or an archive."""
    return any(
        part in INSTALLED_DIRS or part.endswith(ARCHIVE_SUFFIXES) for part in path.parts
    )


@lru_cache(maxsize=1024)
def classify_external(name: str) -> Origin:
    """
    Classify a module name that is not part of the analysed tree.

    Results are cached and reflect sys.path at lookup time;
    PythonSourceAnalyzer.analyze clears the cache before each run.

    Args:
        name: Dotted module name as imported

    Returns:
        STDLIB for standard library modules, PACKAGED for modules found
        elsewhere on sys.path, UNRESOLVED otherwise
    """
    top = name.partition(".")[0]
    if top in sys.stdlib_module_names or top in sys.builtin_module_names:
        return Origin.STDLIB
    try:
        spec = PathFinder.find_spec(top)
    except (ImportError, ValueError):
        return Origin.UNRESOLVED
    if spec is None:
        return Origin.UNRESOLVED
    return Origin.PACKAGED
