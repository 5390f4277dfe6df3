"""
Command runners for smake.

A runner takes one literal command line, runs it through the platform shell
and hands back the combined stdout/stderr text together with a success flag.
"""

import logging
import os
import subprocess
from dataclasses import dataclass
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """Outcome of a single command line"""
    command: str
    output: str = ""
    success: bool = True
    returncode: Optional[int] = None
    section: Optional[str] = None


class CommandRunner:
    """Runs command lines in a shell and waits for them to finish."""

    def __init__(
        self,
        cwd: Optional[str] = None,
        env: Optional[Dict[str, str]] = None,
        shell_executable: Optional[str] = None,
    ):
        self.cwd = cwd
        self.env = dict(env or {})
        self.shell_executable = shell_executable

    def run(self, command: str) -> CommandResult:
        """Run ``command`` and capture its combined output.

        Args:
            command: Literal shell command line

        Returns:
            CommandResult with success set when the exit code is 0
        """
        logger.debug(f"Running: {command}")
        try:
            completed = subprocess.run(
                command,
                shell=True,
                executable=self.shell_executable,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                cwd=self.cwd,
                env={**os.environ, **self.env},
                check=False,
            )
        except OSError as exc:
            logger.debug(f"Could not start '{command}': {exc}")
            return CommandResult(command=command, output=str(exc), success=False)

        output = completed.stdout.decode("utf-8", errors="replace")
        logger.debug(f"Exit code {completed.returncode}: {command}")
        return CommandResult(
            command=command,
            output=output,
            success=completed.returncode == 0,
            returncode=completed.returncode,
        )


class DryRunRunner:
    """Runner that records commands instead of executing them."""

    def __init__(self):
        self.commands: List[str] = []

    def run(self, command: str) -> CommandResult:
        self.commands.append(command)
        return CommandResult(command=command, returncode=0)
