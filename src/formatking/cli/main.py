"""
Main CLI entry point for Format King.

This module provides the main CLI group and global options.
"""

import sys
from pathlib import Path
from typing import Optional

import click

from formatking.cli.formatting import console, print_error
from formatking.cli.utils import setup_logging


# Version info
__version__ = "0.3.0"


# Global context object for passing config between commands
class CLIContext:
    """Context object for CLI commands."""

    def __init__(self):
        self.config_path: Optional[Path] = None
        self.verbose: int = 0
        self.quiet: bool = False
        self.log_file: Optional[Path] = None


pass_context = click.make_pass_decorator(CLIContext, ensure=True)


@click.group()
@click.option(
    "--config",
    type=click.Path(exists=True, path_type=Path),
    help="Path to config file (default: formatking.yml)",
)
@click.option(
    "--verbose", "-v",
    count=True,
    help="Enable verbose logging (can be repeated: -vv)",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    help="Suppress non-error output",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Also write log records to this file",
)
@click.version_option(version=__version__, prog_name="Format King")
@click.pass_context
def cli(ctx, config: Optional[Path], verbose: int, quiet: bool, log_file: Optional[Path]):
    """
    Format King - tabular text detective

    Reads pasted tables in whatever shape they arrive (CSV/TSV, ASCII or
    Unicode box tables, Markdown, JSON arrays, fixed-width columns),
    detects the format, and shows, sorts, filters or exports the rows.

    \b
    Typical workflow:
      1. formatking detect data.txt          # What is this?
      2. formatking show data.txt --sort 1   # Look at it
      3. formatking export data.txt --format csv

    \b
    Input is read from stdin when no file (or "-") is given:
      pbpaste | formatking show

    \b
    For help on a specific command:
      formatking <command> --help
    """
    # Initialize context
    cli_ctx = ctx.ensure_object(CLIContext)
    cli_ctx.config_path = config
    cli_ctx.verbose = verbose
    cli_ctx.quiet = quiet
    cli_ctx.log_file = log_file

    # Set up logging
    setup_logging(verbose=verbose, quiet=quiet, log_file=log_file)


# Import and register commands
# This must happen at module level so commands are available when cli() is called
from formatking.cli.detect import detect  # noqa: E402
from formatking.cli.export import export  # noqa: E402
from formatking.cli.init import init  # noqa: E402
from formatking.cli.show import show  # noqa: E402

cli.add_command(init)
cli.add_command(detect)
cli.add_command(show)
cli.add_command(export)


def main():
    """Main entry point for the CLI."""
    try:
        # Run CLI
        cli()
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(130)
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        if "--verbose" in sys.argv or "-v" in sys.argv:
            raise
        sys.exit(1)


if __name__ == "__main__":
    main()
