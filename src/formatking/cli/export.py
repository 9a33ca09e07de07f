"""
Export command.

This command writes the selected view of the input to CSV, JSON or
styled HTML files.
"""

from pathlib import Path
from typing import IO, Optional

import click
from rich.markup import escape

from formatking.cli.formatting import (
    console,
    format_number,
    print_error,
    print_header,
    print_success,
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
from formatking.core.config import ExportFormat
from formatking.export import get_exporter
from formatking.export.base import DEFAULT_EXPORT_NAME
from formatking.utils.exceptions import FormatKingException


@click.command()
@click.argument("input_file", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--format",
    "formats",
    multiple=True,
    type=click.Choice([fmt.value for fmt in ExportFormat], case_sensitive=False),
    help="Export format(s) - can specify multiple (default: from config)",
)
@click.option(
    "--output", "-o",
    "output_path",
    type=click.Path(path_type=Path),
    help="Output file path (single format only; auto-generates if not specified)",
)
@click.option(
    "--output-dir",
    type=click.Path(path_type=Path),
    help="Output directory (default: from config)",
)
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
    help="Table to export (0-based, -1 for all tables; default: all tables for multi-table input)",
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
    help="Only export rows containing this text (case-insensitive)",
)
@pass_context
def export(
    ctx,
    input_file: IO[str],
    formats: tuple,
    output_path: Optional[Path],
    output_dir: Optional[Path],
    delimiter: Optional[str],
    no_header: bool,
    input_format: str,
    table_index: Optional[int],
    sort: Optional[str],
    descending: bool,
    filter_term: Optional[str],
):
    """Export tabular text to CSV, JSON or HTML.

    HTML output keeps inline styles so it can be pasted into word
    processors; multi-table input is written as separately titled tables.

    \b
    Examples:
      # Convert a Markdown table to CSV
      formatking export table.md --format csv

      # Export to multiple formats
      formatking export report.txt --format csv --format json --format html

      # Filtered, sorted JSON to a chosen file
      formatking export data.txt --format json --filter alice --sort Age -o alice.json
    """
    config = load_cli_config(ctx)

    if descending and sort is None:
        print_warning("--descending has no effect without --sort")

    if not ctx.quiet:
        print_header("Format King Export", "Export to CSV, JSON or HTML")

    # Default to the configured format if none specified
    if not formats:
        formats = (config.output.format.value,)
    if output_dir is None:
        output_dir = config.output.directory

    if output_path and len(formats) > 1:
        print_error("--output can only be used with a single --format")
        raise click.Abort()

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

    # Name exports after the input file; stdin gets the default name
    input_name = getattr(input_file, "name", "-")
    stem = Path(input_name).stem if input_name not in ("-", "<stdin>") else DEFAULT_EXPORT_NAME

    exported_files = []

    for fmt in formats:
        fmt = fmt.lower()
        if output_path:
            exporter = get_exporter(fmt, output_dir=output_path.parent)
            out_name = output_path.name
        else:
            exporter = get_exporter(fmt, output_dir=output_dir)
            out_name = stem

        try:
            out_file = exporter.export_state(state, out_name, table_set=table_set)
        except FormatKingException as e:
            print_error(f"Failed to export to {fmt}: {e}")
            if ctx.verbose:
                raise
            continue

        exported_files.append(out_file)
        if not ctx.quiet:
            print_success(f"Exported to {out_file}")

    if not exported_files:
        print_error("No files were exported")
        raise click.Abort()

    if not ctx.quiet:
        console.print()
        console.print(
            f"  Exported {format_number(len(state.filtered_data))} rows to {len(exported_files)} file(s)"
        )
        for f in exported_files:
            console.print(f"  • [cyan]{escape(str(f))}[/cyan]")
