#!/usr/bin/env python3
"""
smake CLI

A command-line interface for smake: it loads a makefile, checks that the
requested section exists and has commands, and runs it. Sections named as
commands inside another section are run in place.
"""

import os
import sys
import logging
from pathlib import Path
from typing import Dict, Optional, Tuple

import click
from click.core import ParameterSource
from dotenv import dotenv_values

from . import __version__
from .core.errors import MakeError
from .core.executor import SectionExecutor, validate_section
from .core.runner import CommandRunner, DryRunRunner
from .dsl.parser import MakefileParser, parse_define, parse_section_name
from .utils.ui_utils import Reporter, get_console

# Constants
DEFAULT_MAKEFILE = "makefile"
DEFAULT_SECTION = "ALL"
DEFAULT_ENV_FILE = ".env"

# CLI Configuration
CLI_CONFIG = {
    "messages": {
        "finished": "Make finished",
        "dry_run_finished": "Dry run finished",
    },
    "env": {
        "makefile": "SMAKE_FILE",
        "section": "SMAKE_SECTION",
    },
    "exit_codes": {
        "error": 1,
        "interrupted": 130,
    },
}


# ==================== Logging Setup ====================
def setup_logging(level=logging.WARNING, stream=None) -> logging.Logger:
    """Set up the smake logger for a CLI run.

    Handlers from a previous run are replaced so records always go to the
    stderr of the current invocation.
    """
    smake_logger = logging.getLogger("smake")
    for handler in list(smake_logger.handlers):
        smake_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter("smake: [%(levelname)s] %(name)s: %(message)s"))
    smake_logger.addHandler(handler)
    smake_logger.setLevel(level)
    smake_logger.propagate = False

    return smake_logger


# ==================== Helpers ====================
def collect_defines(defines: Tuple[str, ...]) -> Dict[str, str]:
    """Turn repeated ``-D NAME=VALUE`` options into a mapping."""
    values = {}
    for define in defines:
        name, value = parse_define(define)
        values[name] = value
    return values


def resolve_section(ctx: click.Context, section: Optional[str], section_option: Optional[str]) -> str:
    """Pick the section to run from the argument, then -s/SMAKE_SECTION.

    A positional section always beats SMAKE_SECTION. Passing both the
    argument and -s on the command line with different names is an error.
    """
    if section and section_option:
        typed = ctx.get_parameter_source("section_option") is ParameterSource.COMMANDLINE
        if typed and section.strip().upper() != section_option.strip().upper():
            raise click.UsageError(
                f"Conflicting sections: argument {section!r} and -s {section_option!r}"
            )
    return section or section_option or DEFAULT_SECTION


def load_environment(env_file: Optional[str], working_directory: str) -> Dict[str, str]:
    """Read variables for the command environment from a dotenv file.

    Without an explicit file, ``.env`` in the working directory is used when
    it exists.
    """
    if env_file is None:
        default = Path(working_directory) / DEFAULT_ENV_FILE
        if not default.is_file():
            return {}
        env_file = str(default)

    return {key: value for key, value in dotenv_values(env_file).items() if value is not None}


# ==================== Command ====================
@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("section", required=False)
@click.option(
    "-f",
    "--file",
    "makefile",
    default=DEFAULT_MAKEFILE,
    show_default=True,
    envvar=CLI_CONFIG["env"]["makefile"],
    help="The makefile to execute.",
)
@click.option(
    "-s",
    "--section",
    "section_option",
    envvar=CLI_CONFIG["env"]["section"],
    help=f"Section of the makefile to run (default: {DEFAULT_SECTION}).",
)
@click.option(
    "-D",
    "--define",
    "defines",
    multiple=True,
    metavar="NAME=VALUE",
    help="Declare a global variable before the makefile is read.",
)
@click.option(
    "-e",
    "--env",
    "env_file",
    type=click.Path(exists=True, dir_okay=False),
    help="Dotenv file with environment variables for the commands.",
)
@click.option("-l", "--list", "list_sections", is_flag=True, help="List sections and exit.")
@click.option("-n", "--dry-run", is_flag=True, help="Show commands without running them.")
@click.option("-v", "--verbose", count=True, help="Enable debug logging.")
@click.version_option(__version__, prog_name="smake")
@click.pass_context
def cli(ctx, section, makefile, section_option, defines, env_file, list_sections, dry_run, verbose):
    """Run SECTION of a makefile, expanding commands that name other sections."""
    section = resolve_section(ctx, section, section_option)
    logger = setup_logging(logging.DEBUG if verbose else logging.WARNING)
    reporter = Reporter(get_console(soft_wrap=True))
    working_directory = os.getcwd()

    try:
        parser = MakefileParser(working_directory, collect_defines(defines))
        config = parser.parse_file(Path(working_directory) / makefile)

        if list_sections:
            reporter.sections(config.sections)
            return

        requested = parse_section_name(section)
        requested = validate_section(config, requested)

        if dry_run:
            runner = DryRunRunner()
        else:
            runner = CommandRunner(
                cwd=working_directory,
                env=load_environment(env_file, working_directory),
            )

        logger.debug(f"Running section {requested} from {config.path}")
        SectionExecutor(config, runner=runner, reporter=reporter).execute(requested)

    except MakeError as e:
        logger.debug(f"Aborting: {e.kind.value}")
        reporter.fatal(e)
        sys.exit(CLI_CONFIG["exit_codes"]["error"])
    except KeyboardInterrupt:
        reporter.error("Operation cancelled by user")
        sys.exit(CLI_CONFIG["exit_codes"]["interrupted"])

    key = "dry_run_finished" if dry_run else "finished"
    reporter.success(CLI_CONFIG["messages"][key])
