"""
smake CLI Entry Point

This module provides the main entry point for the smake CLI.
"""

from .cli import cli

def main():
    """Main entry point for the smake CLI."""
    cli(prog_name="smake")

if __name__ == "__main__":
    main()
