"""Core runtime for smake: errors, command runners and section execution."""
