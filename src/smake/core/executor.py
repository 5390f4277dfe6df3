"""
Section execution for smake.

A section runs its commands in declaration order. A command whose uppercased
text names another section runs that section in full before the next
command; anything else is handed to the command runner. Failing commands are
reported and execution carries on.
"""

import logging
from typing import Dict, List, Mapping, Optional, Union

from ..dsl.parser import MakeConfig
from ..utils.ui_utils import Reporter
from .errors import ErrorKind, MakeError
from .runner import CommandResult, CommandRunner

logger = logging.getLogger(__name__)


def _sections_of(config: Union[MakeConfig, Mapping[str, List[str]]]) -> Mapping[str, List[str]]:
    if isinstance(config, MakeConfig):
        return config.sections
    if isinstance(config, Mapping):
        return config
    raise TypeError(f"Expected MakeConfig or a section mapping, got {type(config).__name__}")


class SectionExecutor:
    """Runs sections depth first, refusing to re-enter a running section."""

    def __init__(
        self,
        config: Union[MakeConfig, Mapping[str, List[str]]],
        runner=None,
        reporter: Optional[Reporter] = None,
    ):
        self.sections = _sections_of(config)
        self.runner = runner or CommandRunner()
        self.reporter = reporter or Reporter()
        self._chain: List[str] = []

    def execute(self, section: str) -> List[CommandResult]:
        """Run every command of ``section``.

        Args:
            section: Section name, matched case-insensitively

        Returns:
            Results of the shell commands run, nested sections included

        Raises:
            MakeError: UNKNOWN_OR_EMPTY_SECTION if the section is not declared,
                CYCLIC_INVOCATION if it is already running
        """
        name = section.upper()
        if name not in self.sections:
            raise MakeError(ErrorKind.UNKNOWN_OR_EMPTY_SECTION, section=name)
        if name in self._chain:
            raise MakeError(ErrorKind.CYCLIC_INVOCATION, section=name, chain=self._chain)

        logger.debug(f"Entering section {name}")
        self._chain.append(name)
        results: List[CommandResult] = []
        try:
            for command in self.sections[name]:
                if command.upper() in self.sections:
                    results.extend(self.execute(command))
                else:
                    results.append(self._dispatch(command, name))
        finally:
            self._chain.pop()

        return results

    def _dispatch(self, command: str, section: str) -> CommandResult:
        result = self.runner.run(command)
        result.section = section

        self.reporter.headline(command)
        if not result.success:
            logger.warning(f"Command failed in {section}: {command}")
            self.reporter.error(result.output)
        elif result.output:
            self.reporter.info(result.output)

        return result


def validate_section(config: Union[MakeConfig, Mapping[str, List[str]]], section: str) -> str:
    """Check that ``section`` exists and has at least one command.

    Returns:
        The uppercased section name

    Raises:
        MakeError: UNKNOWN_OR_EMPTY_SECTION
    """
    name = section.upper()
    if not _sections_of(config).get(name):
        raise MakeError(ErrorKind.UNKNOWN_OR_EMPTY_SECTION, section=name)
    return name


def execute_section(
    section: str,
    sections: Dict[str, List[str]],
    runner=None,
    reporter: Optional[Reporter] = None,
) -> List[CommandResult]:
    """Run ``section`` from ``sections`` with a fresh executor."""
    return SectionExecutor(sections, runner=runner, reporter=reporter).execute(section)
