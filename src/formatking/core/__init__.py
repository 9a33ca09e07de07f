"""
Core functionality for Format King.

This package contains the table models and configuration shared by the
parsers, the reconciler, the view operations and the exporters.
"""

from .config import (
    DEFAULT_CONFIG_FILENAME,
    DetectionConfig,
    ExportFormat,
    FormatKingConfig,
    OutputConfig,
    ParsingConfig,
    create_default_config,
    load_config,
    load_config_from_dict,
    merge_configs,
    save_config,
)
from .models import SourceFormat, Table, TableSet, column_name

__all__ = [
    # Models
    "Table",
    "TableSet",
    "SourceFormat",
    "column_name",
    # Configuration
    "FormatKingConfig",
    "DetectionConfig",
    "ParsingConfig",
    "OutputConfig",
    "ExportFormat",
    "DEFAULT_CONFIG_FILENAME",
    # Config utilities
    "load_config",
    "load_config_from_dict",
    "create_default_config",
    "save_config",
    "merge_configs",
]
