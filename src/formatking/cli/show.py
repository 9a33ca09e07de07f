"""
Show command.

This command detects the format of the input and prints the selected
table to the terminal.
"""

from typing import IO, Optional

import click

from formatking.cli.formatting import (
    console,
    format_number,
    print_data_table,
    print_warning,
)
from formatking.cli.main import pass_context
from formatking.cli.utils import (
    INPUT_FORMATS,
    abort_with_error,
    build_view,
    load_cli_config,
    parse_input,
    read_input,
)
from formatking.reconcile import ALL_TABLES_NAME
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
@click.option(
    "--as", "input_format",
    type=click.Choice(INPUT_FORMATS, case_sensitive=False),
    default="auto",
    show_default=True,
    help="Skip detection and parse as this format",
)
@click.option(
    "--table", "-t", "table_index",
    type=int,
    help="Table to show (0-based, -1 for all tables; default: all tables for multi-table input)",
)
@click.option(
    "--sort", "-s",
    help="Sort by column (header name or 0-based index)",
)
@click.option(
    "--descending",
    is_flag=True,
    help="Sort descending (with --sort)",
)
@click.option(
    "--filter", "-f", "filter_term",
    help="Only show rows containing this text (case-insensitive)",
)
@click.option(
    "--limit", "-n",
    type=click.IntRange(min=0),
    help="Maximum number of rows to print",
)
@pass_context
def show(
    ctx,
    input_file: IO[str],
    delimiter: Optional[str],
    no_header: bool,
    input_format: str,
    table_index: Optional[int],
    sort: Optional[str],
    descending: bool,
    filter_term: Optional[str],
    limit: Optional[int],
):
    """Show tabular text as a table.

    \b
    Examples:
      # Auto-detect and show
      formatking show data.txt

      # Paste from the clipboard, sort by the "Age" column
      pbpaste | formatking show --sort Age --descending

      # Second table only, rows mentioning "alice"
      formatking show report.txt --table 1 --filter alice
    """
    config = load_cli_config(ctx)

    if descending and sort is None:
        print_warning("--descending has no effect without --sort")

    try:
        table_set = parse_input(
            read_input(input_file),
            config,
            delimiter=delimiter,
            no_header=no_header,
            input_format=input_format.lower(),
        )
        state = build_view(
            table_set,
            table_index=table_index,
            sort=sort,
            descending=descending,
            filter_term=filter_term,
        )
    except FormatKingException as e:
        abort_with_error(e)

    title = ALL_TABLES_NAME if state.is_all_tables else table_set[state.view_index].name
    print_data_table(
        state.headers,
        state.filtered_data,
        title=title,
        sort_column=state.sort_column,
        sort_direction=state.sort_direction.value,
        highlight=state.search_term,
        limit=limit,
    )

    if not ctx.quiet:
        shown = len(state.filtered_data)
        total = len(state.data)
        summary = f"{format_number(shown)} rows" if shown == total else (
            f"{format_number(shown)} of {format_number(total)} rows"
        )
        console.print(
            f"[dim]{table_set.source_format.value} | {len(table_set)} table(s) | {summary}[/dim]"
        )
