"""smake DSL Module

This module provides the lexer, variable scopes and parser for smake
makefiles, which declare variables and named sections of shell commands.
"""

from .parser import MakeConfig, MakefileParser, parse_makefile

__all__ = ["MakeConfig", "MakefileParser", "parse_makefile"]
