"""smake DSL Line Kinds and Definitions

This module contains the line kinds and the line class produced by the lexer
and consumed by the parser.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Optional


class LineKind(Enum):
    """Kinds of makefile lines, in classification priority order"""

    COMMENT = "COMMENT"
    DECLARATION = "DECLARATION"
    SECTION = "SECTION"
    COMMAND = "COMMAND"
    BLANK = "BLANK"


@dataclass
class Line:
    """Classified line representation"""

    kind: LineKind
    number: int
    text: str
    name: Optional[str] = None  # declaration or section name, uppercased
    value: Optional[str] = None  # declaration value
