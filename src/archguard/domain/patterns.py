"""
Package identifier patterns.

A pattern describes a set of dotted names:

    ..web..          any name with a 'web' segment (app.web, app.web.views, web)
    app.service..    app.service and everything below it
    ..*Repository    any name whose last segment ends with 'Repository'
    app.[api|web]..  app.api or app.web and everything below them

'..' spans any number of segments (including none), '*' spans characters
within one segment and '[a|b]' picks one alternative.
"""

import re
from dataclasses import dataclass, field

from archguard.domain.exceptions import ConfigurationError

_ALLOWED = re.compile(r"^[\w.*|\[\]]+$")

# Any run of whole segments, anchored on the side that touches a literal part
_LEADING_ANY = r"(?:[^.]+\.)*"
_TRAILING_ANY = r"(?:\.[^.]+)*"
_INNER_ANY = r"\.(?:[^.]+\.)*"


def _part_to_regex(part: str, pattern: str) -> str:
    """Translate one '..'-free part (may contain single dots) to a regex."""
    out: list[str] = []
    i = 0
    while i < len(part):
        char = part[i]
        if char == "*":
            out.append(r"[^.]*")
        elif char == "[":
            end = part.find("]", i)
            if end == -1:
                raise ConfigurationError(f"Unbalanced '[' in package pattern '{pattern}'")
            options = part[i + 1 : end].split("|")
            if not all(options) or any("." in o or "[" in o for o in options):
                raise ConfigurationError(
                    f"Invalid alternation in package pattern '{pattern}'"
                )
            out.append("(?:" + "|".join(_part_to_regex(o, pattern) for o in options) + ")")
            i = end
        elif char in "]|":
            raise ConfigurationError(f"Unexpected '{char}' in package pattern '{pattern}'")
        else:
            out.append(re.escape(char))
        i += 1
    return "".join(out)


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """
    Compile a package pattern to an anchored regular expression.

    Raises:
        ConfigurationError: If the pattern is empty or malformed
    """
    if not pattern or not pattern.strip():
        raise ConfigurationError("Package pattern must not be empty")
    if not _ALLOWED.match(pattern):
        raise ConfigurationError(f"Illegal characters in package pattern '{pattern}'")
    if "..." in pattern:
        raise ConfigurationError(f"Package pattern '{pattern}' contains '...'")

    parts = pattern.split("..")
    if pattern == "..":
        return re.compile(r"^.*$")

    pieces: list[str] = []
    last = len(parts) - 1
    for i, part in enumerate(parts):
        if part.startswith(".") or part.endswith("."):
            raise ConfigurationError(f"Stray '.' in package pattern '{pattern}'")
        if part:
            pieces.append(_part_to_regex(part, pattern))
        elif 0 < i < last:
            raise ConfigurationError(f"Empty segment in package pattern '{pattern}'")
        if i == last:
            break
        if i == 0 and not part:
            pieces.append(_LEADING_ANY)
        elif i + 1 == last and not parts[last]:
            pieces.append(_TRAILING_ANY)
        else:
            pieces.append(_INNER_ANY)

    return re.compile("^" + "".join(pieces) + "$")


@dataclass(frozen=True)
class PackagePattern:
    """A compiled package identifier."""

    pattern: str
    _regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_regex", compile_pattern(self.pattern))

    def matches(self, name: str) -> bool:
        return self._regex.match(name) is not None

    def __str__(self) -> str:
        return self.pattern
