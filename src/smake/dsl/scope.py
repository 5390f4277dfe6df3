"""
Variable scopes and reference substitution for the smake DSL.

Two scopes exist while a makefile is parsed: the global scope, which lives
for the whole parse, and the local scope of the section currently open,
which is cleared at every section header. ``$(NAME)`` references in command
lines are resolved against them when the line is parsed.
"""

import re
from typing import Dict, Iterator, Optional

from ..core.errors import ErrorKind, MakeError

REFERENCE_PATTERN = re.compile(r"\$\(([A-Za-z0-9]+)\)")


class Scope:
    """Mapping of uppercase variable names to string values."""

    def __init__(self, variables: Optional[Dict[str, str]] = None):
        self._variables: Dict[str, str] = {}
        self.update(variables or {})

    def declare(self, name: str, value: str) -> None:
        self._variables[name.upper()] = value

    def update(self, variables: Dict[str, str]) -> None:
        for name, value in variables.items():
            self.declare(name, value)

    def lookup(self, name: str) -> str:
        """Return the value of ``name``, or an empty string when undeclared."""
        return self._variables.get(name.upper(), "")

    def as_dict(self) -> Dict[str, str]:
        return dict(self._variables)

    def __contains__(self, name: str) -> bool:
        return name.upper() in self._variables

    def __iter__(self) -> Iterator[str]:
        return iter(self._variables)

    def __len__(self) -> int:
        return len(self._variables)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._variables!r})"


class GlobalScope(Scope):
    """Variables declared outside any section, seeded with ``DIR``."""

    def __init__(self, working_directory: str, variables: Optional[Dict[str, str]] = None):
        super().__init__()
        self.declare("DIR", working_directory)
        self.update(variables or {})


class LocalScope(Scope):
    """Variables declared inside the section currently being parsed."""

    def clear(self) -> None:
        self._variables.clear()


def substitute(
    line: str,
    line_number: int,
    local_scope: Scope,
    global_scope: Scope,
) -> str:
    """Replace every ``$(NAME)`` reference in ``line`` with its value.

    The local scope is consulted first; the global scope is used when the
    local value is missing or empty. Values are inserted literally and are
    not scanned again for references.

    Args:
        line: Command text to resolve
        line_number: Line number used in error reports
        local_scope: Variables of the current section
        global_scope: Top-level variables

    Returns:
        The line with all references resolved

    Raises:
        MakeError: UNRESOLVED_VARIABLE if a reference has no non-empty value
    """
    references = [match.group(0) for match in REFERENCE_PATTERN.finditer(line)]

    for reference in dict.fromkeys(references):
        name = reference[2:-1].upper()

        value = local_scope.lookup(name) or global_scope.lookup(name)
        if not value:
            raise MakeError(
                ErrorKind.UNRESOLVED_VARIABLE, line=line_number, variable=name
            )

        line = line.replace(reference, value)

    return line
