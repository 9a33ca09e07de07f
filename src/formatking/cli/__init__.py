"""
Format King CLI module.

This module provides the command-line interface for Format King.
"""

from formatking.cli.main import cli, main

__all__ = ["cli", "main"]
