# src/smake/dsl/parser.py

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union

from ..core.errors import ErrorKind, MakeError
from .lexer import MakefileLexer
from .scope import GlobalScope, LocalScope, substitute
from .tokens import Line, LineKind

# ==================== Constants ====================
logger = logging.getLogger("smake.dsl.parser")

GLOBAL_SECTION = "GLOBAL"


@dataclass
class MakeConfig:
    """Result of parsing a makefile."""

    path: str
    variables: Dict[str, str] = field(default_factory=dict)
    sections: Dict[str, List[str]] = field(default_factory=dict)


class MakefileParser:
    """Parser for smake makefiles.

    Walks the classified lines once, tracking which section is open and the
    variables visible in it, and collects the resolved commands per section.
    """

    def __init__(self, working_directory: str, defines: Optional[Dict[str, str]] = None):
        self.working_directory = working_directory
        self.defines = dict(defines or {})
        self.lexer = MakefileLexer()

    def parse(self, script_text: str, path: str = "<string>") -> MakeConfig:
        """Parse makefile text.

        Args:
            script_text: Full makefile contents
            path: Where the text came from, recorded on the result

        Returns:
            The global variables and the resolved sections

        Raises:
            MakeError: On the first invalid line
        """
        global_scope = GlobalScope(self.working_directory, self.defines)
        local_scope = LocalScope()
        sections: Dict[str, List[str]] = {}
        current_section: Optional[str] = None

        for line in self.lexer.tokenize(script_text):
            if line.kind is LineKind.DECLARATION:
                self._declare(line, current_section, local_scope, global_scope)

            elif line.kind is LineKind.SECTION:
                local_scope.clear()
                if line.name == GLOBAL_SECTION:
                    current_section = None
                else:
                    current_section = line.name
                    sections.setdefault(current_section, [])
                logger.debug(f"Line {line.number}: entering section {line.name}")

            elif line.kind is LineKind.COMMAND:
                if current_section is None:
                    raise MakeError(ErrorKind.COMMAND_OUTSIDE_SECTION, line=line.number)
                command = substitute(line.text, line.number, local_scope, global_scope)
                sections[current_section].append(command)

        logger.debug(
            f"Parsed {path}: {len(sections)} section(s), {len(global_scope)} global variable(s)"
        )
        return MakeConfig(path=path, variables=global_scope.as_dict(), sections=sections)

    def parse_file(self, file_path: Union[str, Path]) -> MakeConfig:
        """Parse a makefile from the given path.

        Args:
            file_path: Path to the makefile

        Returns:
            Parsed configuration

        Raises:
            MakeError: CONFIG_NOT_FOUND, READ_FAILURE or any parse error
        """
        path = Path(file_path)
        if not path.is_file():
            raise MakeError(ErrorKind.CONFIG_NOT_FOUND, path=str(path))

        logger.debug(f"Reading makefile: {path}")
        try:
            with open(path, "r", encoding="utf-8", newline="") as f:
                script_text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise MakeError(ErrorKind.READ_FAILURE, path=str(path), detail=str(e)) from e

        return self.parse(script_text, path=str(path))

    @staticmethod
    def _declare(
        line: Line,
        current_section: Optional[str],
        local_scope: LocalScope,
        global_scope: GlobalScope,
    ) -> None:
        if not line.value:
            raise MakeError(
                ErrorKind.EMPTY_VARIABLE_VALUE, line=line.number, variable=line.name
            )

        if current_section is None:
            global_scope.declare(line.name, line.value)
            logger.debug(f"Line {line.number}: global {line.name} = {line.value}")
        else:
            local_scope.declare(line.name, line.value)
            logger.debug(
                f"Line {line.number}: local {line.name} = {line.value} in {current_section}"
            )


def parse_makefile(
    path: Union[str, Path],
    working_directory: Optional[str] = None,
    defines: Optional[Dict[str, str]] = None,
) -> MakeConfig:
    """Parse the makefile at ``path``; ``DIR`` defaults to the current directory."""
    if working_directory is None:
        working_directory = os.getcwd()
    return MakefileParser(working_directory, defines).parse_file(path)


def parse_define(text: str) -> tuple:
    """Split a ``NAME=VALUE`` define given on the command line.

    Raises:
        MakeError: MALFORMED_DECLARATION or EMPTY_VARIABLE_VALUE
    """
    line = MakefileLexer().classify(text, 0)
    if line.kind is not LineKind.DECLARATION:
        raise MakeError(ErrorKind.MALFORMED_DECLARATION, detail=text)
    if not line.value:
        raise MakeError(ErrorKind.EMPTY_VARIABLE_VALUE, variable=line.name)
    return line.name, line.value


def parse_section_name(text: str) -> str:
    """Normalise a section name given on the command line.

    Raises:
        MakeError: MALFORMED_SECTION_HEADER if ``text`` could not be a header
    """
    line = MakefileLexer().classify(f"{text.strip()}:", 0)
    if line.kind is not LineKind.SECTION:
        raise MakeError(ErrorKind.MALFORMED_SECTION_HEADER, detail=text)
    return line.name
