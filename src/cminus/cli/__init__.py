"""
C- Scanner Command-Line Interface
=================================

This package provides the command-line driver for the C- scanner:

- **cmscan**: print the token stream of a C- source file

The tool is implemented as a Click-based CLI application.
"""

__all__ = ["cmscan"]
