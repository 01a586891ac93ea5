"""
ArchitecturePolicy: a table of module definitions compiled into rules.

The table maps each module name to its package patterns and the names of the
modules it may depend on. Every problem in the table is reported as a
ConfigurationError when the policy is built, before anything is checked.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import reduce
from typing import Any

from archguard.application.module import Module, define_module
from archguard.application.rule import Rule
from archguard.domain.exceptions import ConfigurationError


@dataclass(frozen=True)
class ModuleSpec:
    """One row of the policy table."""

    name: str
    packages: tuple[str, ...]
    allow: tuple[str, ...] = ()
    allow_external: bool = False

    def __post_init__(self) -> None:
        for key in ("packages", "allow"):
            value = getattr(self, key)
            if isinstance(value, str):
                raise ConfigurationError(
                    f"Module '{self.name}': '{key}' must be a list of names, not a string"
                )
            object.__setattr__(self, key, tuple(value))


@dataclass(frozen=True)
class ArchitecturePolicy:
    """Ordered module definitions; rules come out in the same order."""

    modules: tuple[ModuleSpec, ...]
    name: str = "architecture"
    _defined: Mapping[str, Module] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.modules:
            raise ConfigurationError(f"Policy '{self.name}' declares no modules")

        defined: dict[str, Module] = {}
        for spec in self.modules:
            if spec.name in defined:
                raise ConfigurationError(f"Module '{spec.name}' is declared twice")
            defined[spec.name] = define_module(spec.name, *spec.packages)

        for spec in self.modules:
            unknown = [target for target in spec.allow if target not in defined]
            if unknown:
                raise ConfigurationError(
                    f"Module '{spec.name}' allows unknown module(s): {', '.join(unknown)}"
                )
        object.__setattr__(self, "_defined", defined)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ArchitecturePolicy":
        """
        Build a policy from a parsed policy document.

        Raises:
            ConfigurationError: If the document is malformed or the table
                is inconsistent
        """
        try:
            specs = tuple(
                ModuleSpec(
                    name=entry["name"],
                    packages=entry["packages"],
                    allow=entry.get("allow", ()),
                    allow_external=bool(entry.get("allow_external", False)),
                )
                for entry in data["modules"]
            )
        except KeyError as e:
            raise ConfigurationError(f"Policy document is missing key {e}") from e
        except TypeError as e:
            raise ConfigurationError(f"Malformed policy document: {e}") from e
        return cls(modules=specs, name=data.get("name", "architecture"))

    @property
    def module_names(self) -> tuple[str, ...]:
        return tuple(spec.name for spec in self.modules)

    def module(self, name: str) -> Module:
        """
        Return the fully built module (all allows applied).

        Raises:
            KeyError: If no module has this name
        """
        spec = next((s for s in self.modules if s.name == name), None)
        if spec is None:
            raise KeyError(f"Module '{name}' not found in policy '{self.name}'")
        return self._build(spec)

    def build_modules(self) -> dict[str, Module]:
        return {spec.name: self._build(spec) for spec in self.modules}

    def rules(self) -> dict[str, Rule]:
        """One rule per module, keyed by module name, in declaration order."""
        return {name: module.as_rule() for name, module in self.build_modules().items()}

    def _build(self, spec: ModuleSpec) -> Module:
        module = reduce(
            lambda acc, target: acc.allow(self._defined[target]),
            spec.allow,
            self._defined[spec.name],
        )
        return module.allow_external() if spec.allow_external else module
