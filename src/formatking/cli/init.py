"""
Configuration initialization command.

This command writes a default formatking.yml to a directory.
"""

from pathlib import Path

import click
from rich.markup import escape

from formatking.cli.formatting import console, print_error, print_info, print_success
from formatking.cli.main import pass_context
from formatking.core.config import DEFAULT_CONFIG_FILENAME, create_default_config


@click.command()
@click.argument(
    "directory",
    type=click.Path(file_okay=False, path_type=Path),
    default=".",
)
@click.option(
    "--force",
    is_flag=True,
    help="Overwrite an existing config file",
)
@pass_context
def init(ctx, directory: Path, force: bool):
    """Write a default formatking.yml.

    \b
    Examples:
      formatking init             # In the current directory
      formatking init ~/tables    # In another directory
    """
    config_path = directory / DEFAULT_CONFIG_FILENAME

    if config_path.exists() and not force:
        print_error(f"{config_path} already exists (use --force to overwrite)")
        raise click.Abort()

    try:
        config = create_default_config(config_path)
    except OSError as e:
        print_error(f"Failed to write config: {e}")
        raise click.Abort()

    print_success(f"Created {config_path}")
    if not ctx.quiet:
        print_info("Edit it to change detection thresholds, parsing defaults and export settings")
        console.print(f"  [cyan]delimiter:[/cyan] {escape(config.parsing.delimiter)}")
        console.print(
            f"  [cyan]output:[/cyan] {escape(str(config.output.directory))} ({config.output.format.value})"
        )
