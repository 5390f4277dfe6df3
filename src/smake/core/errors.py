"""
Error types for smake.

Every failure the parser, executor or CLI can raise is a ``MakeError`` tagged
with an ``ErrorKind``. The contextual fields (line number, variable, section)
are kept on the error itself so callers can inspect them; the human readable
message is only built when the error is rendered.
"""

from enum import Enum
from typing import Optional, Sequence, Tuple


class ErrorKind(str, Enum):
    """Kinds of errors raised while loading or running a makefile."""

    CONFIG_NOT_FOUND = "config_not_found"
    READ_FAILURE = "read_failure"
    MALFORMED_DECLARATION = "malformed_declaration"
    EMPTY_VARIABLE_VALUE = "empty_variable_value"
    MALFORMED_SECTION_HEADER = "malformed_section_header"
    COMMAND_OUTSIDE_SECTION = "command_outside_section"
    UNRESOLVED_VARIABLE = "unresolved_variable"
    UNKNOWN_OR_EMPTY_SECTION = "unknown_or_empty_section"
    CYCLIC_INVOCATION = "cyclic_invocation"


class MakeError(Exception):
    """Raised when a makefile cannot be parsed or a section cannot be run."""

    def __init__(
        self,
        kind: ErrorKind,
        *,
        line: Optional[int] = None,
        variable: Optional[str] = None,
        section: Optional[str] = None,
        path: Optional[str] = None,
        chain: Sequence[str] = (),
        detail: Optional[str] = None,
    ):
        self.kind = kind
        self.line = line
        self.variable = variable
        self.section = section
        self.path = path
        self.chain: Tuple[str, ...] = tuple(chain)
        self.detail = detail
        super().__init__(self.render())

    def render(self) -> str:
        """Build the message shown to the user."""
        kind = self.kind
        if kind is ErrorKind.CONFIG_NOT_FOUND:
            return f"File {self.path} does not exist"
        if kind is ErrorKind.READ_FAILURE:
            return f"Could not read {self.path}: {self.detail}"
        if kind is ErrorKind.MALFORMED_DECLARATION:
            return f"Invalid variable declaration{self._where()}: {self.detail}"
        if kind is ErrorKind.EMPTY_VARIABLE_VALUE:
            return f"Invalid value for variable {self.variable}{self._where()}"
        if kind is ErrorKind.MALFORMED_SECTION_HEADER:
            return f"Invalid section declaration{self._where()}: {self.detail}"
        if kind is ErrorKind.COMMAND_OUTSIDE_SECTION:
            return f"Command not in a section{self._where()}"
        if kind is ErrorKind.UNRESOLVED_VARIABLE:
            return f"Undeclared/uninitialized variable {self.variable}{self._where()}"
        if kind is ErrorKind.UNKNOWN_OR_EMPTY_SECTION:
            return f"Invalid section name or no commands in the section: {self.section}"
        if kind is ErrorKind.CYCLIC_INVOCATION:
            loop = " -> ".join(self.chain + (self.section,))
            return f"Section {self.section} invokes itself: {loop}"
        return kind.value

    def _where(self) -> str:
        return f" on line {self.line}" if self.line is not None else ""

    def __str__(self) -> str:
        return self.render()
