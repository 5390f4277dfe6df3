#!/usr/bin/env python3
"""
smake CLI Wrapper Script

This script provides a direct way to run the smake CLI from a source
checkout, without installing the package.
"""

import sys
from pathlib import Path

# Add the src directory to the Python path if needed
src_dir = Path(__file__).parent.absolute() / "src"
if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))

# Import the CLI function and run it
from smake.cli import cli

if __name__ == "__main__":
    cli(prog_name="smake")
