"""
smake - run named sections of shell commands from a makefile-like file.

This package provides the makefile parser, the section executor and the
command-line interface built on top of them.
"""

__version__ = "0.1.0"

from .core.errors import ErrorKind, MakeError
from .core.executor import SectionExecutor, execute_section
from .core.runner import CommandResult, CommandRunner
from .dsl.parser import MakeConfig, MakefileParser, parse_makefile

__all__ = [
    "CommandResult",
    "CommandRunner",
    "ErrorKind",
    "MakeConfig",
    "MakeError",
    "MakefileParser",
    "SectionExecutor",
    "execute_section",
    "parse_makefile",
]
