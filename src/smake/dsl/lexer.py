"""smake DSL Lexer

This module contains the line classifier for smake makefiles. Every raw line
is trimmed and matched against the line patterns in a fixed priority order;
the first pattern that matches decides the kind of the line.
"""

import re
from typing import List
import logging

from .tokens import LineKind, Line

logger = logging.getLogger("smake.dsl.lexer")


class MakefileLexer:
    """Lexer for smake makefiles.

    The lexer turns source text into a list of classified lines for the parser.
    """

    # Line patterns, checked in this order after the line has been trimmed
    LINE_PATTERNS = {
        "COMMENT": r"^ *#.*$",
        "DECLARATION": r"^([A-Za-z0-9]+) *= *(.*)$",
        "SECTION": r"^([A-Za-z0-9]+): *$",
    }

    def __init__(self):
        """Initialize a new MakefileLexer."""
        self.lines: List[Line] = []

        # Compile line patterns for efficiency, preserving priority order
        self.patterns = [
            (LineKind[kind], re.compile(pattern))
            for kind, pattern in self.LINE_PATTERNS.items()
        ]

    def tokenize(self, source: str) -> List[Line]:
        """Classify every line of the source text.

        Args:
            source: The makefile text

        Returns:
            List of classified lines, numbered from 1
        """
        # Only "\n" ends a line; other Unicode line breaks stay inside the command
        raw_lines = source.split("\n")
        if raw_lines[-1] == "":
            raw_lines.pop()

        self.lines = [
            self.classify(raw[:-1] if raw.endswith("\r") else raw, number)
            for number, raw in enumerate(raw_lines, start=1)
        ]
        return self.lines

    def classify(self, raw: str, number: int) -> Line:
        """Classify a single line.

        Args:
            raw: The line as read from the file
            number: 1-based line number

        Returns:
            The classified line. Declaration and section names are uppercased.
        """
        text = raw.strip()

        for kind, pattern in self.patterns:
            match = pattern.match(text)
            if not match:
                continue

            if kind is LineKind.DECLARATION:
                return Line(
                    kind,
                    number,
                    text,
                    name=match.group(1).upper(),
                    value=match.group(2),
                )
            if kind is LineKind.SECTION:
                return Line(kind, number, text, name=match.group(1).upper())
            return Line(kind, number, text)

        # Non-blank line that matched none of the patterns above
        if text:
            return Line(LineKind.COMMAND, number, text)

        return Line(LineKind.BLANK, number, text)
