"""
Detect command.

This command reports which format the input was recognized as and the
tables found in it, without printing the rows.
"""

from typing import IO, Optional

import click
from rich.table import Table
from rich.text import Text

from formatking.cli.formatting import console, format_number, print_summary_panel
from formatking.cli.main import pass_context
from formatking.cli.utils import (
    abort_with_error,
    describe_delimiter,
    load_cli_config,
    parse_input,
    read_input,
)
from formatking.utils.exceptions import FormatKingException


@click.command()
@click.argument("input_file", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--delimiter", "-d",
    help="Delimiter for delimited text: auto, comma, semicolon, tab, pipe or a single character",
)
@click.option(
    "--no-header",
    is_flag=True,
    help="Treat the first row of delimited text as data",
)
@pass_context
def detect(ctx, input_file: IO[str], delimiter: Optional[str], no_header: bool):
    """Detect the format of tabular text.

    \b
    Examples:
      formatking detect data.txt
      pbpaste | formatking detect
    """
    config = load_cli_config(ctx)

    try:
        table_set = parse_input(read_input(input_file), config, delimiter=delimiter, no_header=no_header)
    except FormatKingException as e:
        abort_with_error(e)

    print_summary_panel(
        "Detected",
        {
            "Format": table_set.source_format.value,
            "Delimiter": describe_delimiter(table_set.delimiter),
            "Tables": format_number(len(table_set)),
            "Rows": format_number(table_set.total_rows),
        },
    )

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right")
    table.add_column("Name")
    table.add_column("Rows", justify="right", style="green")
    table.add_column("Columns", justify="right")
    for i, parsed in enumerate(table_set):
        table.add_row(
            str(i),
            Text(parsed.name),
            format_number(parsed.row_count),
            str(parsed.column_count),
        )
    console.print(table)
