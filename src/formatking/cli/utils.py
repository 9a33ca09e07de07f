"""
Shared CLI utilities.

This module provides common utilities used across CLI commands.
"""

import logging
from pathlib import Path
from typing import IO, List, NoReturn, Optional

import click

from formatking.cli.formatting import print_error
from formatking.core.config import DEFAULT_CONFIG_FILENAME, FormatKingConfig
from formatking.core.config import load_config as load_config_file
from formatking.core.models import SourceFormat, TableSet
from formatking.parsers import DelimitedTextParser, classify_and_parse, get_parser, resolve_delimiter
from formatking.parsers.patterns import DELIMITER_NAMES
from formatking.utils.exceptions import ConfigurationError, FormatKingException, NoTableFoundError
from formatking.utils.logging import CLI_FORMAT
from formatking.utils.logging import setup_logging as configure_logging
from formatking.view import DocumentState, apply_filter, load_table_set, select_view, sort_by

AUTO_FORMAT = "auto"
INPUT_FORMATS = [AUTO_FORMAT] + [fmt.value for fmt in SourceFormat]

logger = logging.getLogger(__name__)


def load_config(config_path: Optional[Path] = None) -> FormatKingConfig:
    """Load configuration from file or use defaults.

    Args:
        config_path: Path to config file (YAML). If None, looks for formatking.yml

    Returns:
        Loaded and validated FormatKingConfig

    Raises:
        click.ClickException: If config is invalid
    """
    if config_path is None:
        config_path = Path(DEFAULT_CONFIG_FILENAME)
        if not config_path.exists():
            # Use defaults
            return FormatKingConfig()

    try:
        return load_config_file(config_path)
    except FileNotFoundError:
        raise click.ClickException(f"Config file not found: {config_path}")
    except ConfigurationError as e:
        print_error(f"Invalid configuration: {e}")
        raise click.ClickException("Configuration validation failed")


def setup_logging(
    verbose: int = 0,
    quiet: bool = False,
    default_level: str = "WARNING",
    log_file: Optional[Path] = None,
) -> None:
    """Set up logging based on verbosity level.

    Args:
        verbose: Verbosity level (0=default_level, 1=INFO, 2+=DEBUG)
        quiet: If True, suppress all non-error output
        default_level: Level used without -v or -q
        log_file: Optional file that receives the same records
    """
    if quiet:
        level = "ERROR"
    elif verbose == 0:
        level = default_level
    elif verbose == 1:
        level = "INFO"
    else:
        level = "DEBUG"

    configure_logging(level=level, log_file=log_file, format_string=CLI_FORMAT)


def load_cli_config(cli_ctx) -> FormatKingConfig:
    """Load the configuration for a command and apply its log level."""
    config = load_config(cli_ctx.config_path)
    setup_logging(
        cli_ctx.verbose,
        cli_ctx.quiet,
        default_level=config.log_level,
        log_file=cli_ctx.log_file,
    )
    return config


def abort_with_error(error: FormatKingException) -> NoReturn:
    """Report a library error and abort the command."""
    logger.debug("Command failed: %s", error.to_dict())
    print_error(str(error))
    raise click.Abort()


def read_input(stream: IO[str]) -> str:
    """Read all text from an opened input file or stdin."""
    text = stream.read()
    logger.debug("Read %d characters from %s", len(text), getattr(stream, "name", "input"))
    return text


def parse_input(
    text: str,
    config: FormatKingConfig,
    delimiter: Optional[str] = None,
    no_header: bool = False,
    input_format: str = AUTO_FORMAT,
) -> TableSet:
    """Parse text with auto-detection or a forced format.

    Command line options override the configured parsing defaults.

    Raises:
        FormatKingException: If the text cannot be parsed
    """
    delimiter = delimiter or config.parsing.delimiter
    first_row_header = config.parsing.first_row_header and not no_header

    if input_format == AUTO_FORMAT:
        return classify_and_parse(
            text, delimiter=delimiter, first_row_header=first_row_header, config=config
        )

    source_format = SourceFormat(input_format)
    text = text.strip()
    resolved = None
    if source_format == SourceFormat.DELIMITED:
        resolved = resolve_delimiter(
            delimiter, text, sample_lines=config.detection.delimiter_sample_lines
        )
        parser = DelimitedTextParser(
            config.detection, delimiter=resolved, first_row_header=first_row_header
        )
    else:
        parser = get_parser(input_format, config.detection)

    tables = parser.parse(text) if text else []
    if not tables:
        raise NoTableFoundError(format=input_format)
    return TableSet(tables=tables, source_format=source_format, delimiter=resolved)


def resolve_sort_column(headers: List[str], column: str) -> int:
    """Resolve a --sort value (header name or 0-based index) to an index.

    Header names win over indexes, so a ``2024`` column sorts by name.

    Raises:
        click.BadParameter: If no column matches
    """
    if column in headers:
        return headers.index(column)

    lowered = [h.lower() for h in headers]
    if column.lower() in lowered:
        return lowered.index(column.lower())

    try:
        index = int(column)
    except ValueError:
        index = None
    if index is not None and index >= 0:
        return index

    raise click.BadParameter(
        f"No column named '{column}'. Columns: {', '.join(headers)}",
        param_hint="--sort",
    )


def build_view(
    table_set: TableSet,
    table_index: Optional[int] = None,
    sort: Optional[str] = None,
    descending: bool = False,
    filter_term: Optional[str] = None,
) -> DocumentState:
    """Select, filter and sort a view as the show/export options ask.

    Raises:
        ViewSelectionError: If the table index or sort column is out of range
    """
    if table_index is None:
        state = load_table_set(table_set)
    else:
        state = select_view(table_set, table_index)

    if filter_term:
        state = apply_filter(state, filter_term)

    if sort is not None:
        state = sort_by(state, resolve_sort_column(state.headers, sort))
        if descending:
            state = sort_by(state, state.sort_column)

    return state


def describe_delimiter(delimiter: Optional[str]) -> str:
    """Human-readable name of a delimiter character."""
    if delimiter is None:
        return "-"
    for name, char in DELIMITER_NAMES.items():
        if char == delimiter:
            return name
    return repr(delimiter)
