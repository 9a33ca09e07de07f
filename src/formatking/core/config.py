"""
Configuration management for Format King.

This module provides configuration models and utilities for loading
and validating configuration from YAML files, environment variables,
and programmatic sources.
"""

import os
import re
from enum import Enum
from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from formatking.utils.exceptions import ConfigurationError

DEFAULT_CONFIG_FILENAME = "formatking.yml"


class ExportFormat(str, Enum):
    """Export format options."""

    CSV = "csv"
    JSON = "json"
    HTML = "html"


class DetectionConfig(BaseModel):
    """Heuristic thresholds used by the format detectors.

    The defaults reproduce the behaviour the detectors were tuned with;
    all of them may be adjusted for unusual inputs.
    """

    space_fraction_threshold: float = Field(
        default=0.8,
        gt=0.0,
        le=1.0,
        description="Fraction of content lines that must hold a space for a column to count as a gap",
    )
    min_gap_width: int = Field(
        default=2, ge=1, description="Minimum run of gap columns that forms a column boundary"
    )
    fixed_width_min_lines: int = Field(
        default=3, ge=2, description="Minimum non-blank lines for fixed-width detection"
    )
    fixed_width_min_line_length: int = Field(
        default=5, ge=1, description="Minimum longest-line length for fixed-width detection"
    )
    delimiter_sample_lines: int = Field(
        default=5, ge=1, description="Non-empty lines sampled by the delimiter detector"
    )
    title_lookahead: int = Field(
        default=3, ge=1, description="Lines scanned after a candidate box-table title for a border"
    )

    model_config = ConfigDict(extra="forbid")


class ParsingConfig(BaseModel):
    """Configuration for the delimited-text fallback."""

    delimiter: str = Field(
        default="auto", description="Delimiter: auto, comma, semicolon, tab, pipe or one character"
    )
    first_row_header: bool = Field(
        default=True, description="Treat the first delimited row as the header row"
    )

    model_config = ConfigDict(extra="forbid")

    @field_validator("delimiter")
    @classmethod
    def validate_delimiter(cls, v: str) -> str:
        """Reject delimiter specs that can never resolve to one character."""
        from formatking.parsers.patterns import DELIMITER_NAMES

        if v.lower() == "auto" or v.lower() in DELIMITER_NAMES or v == "\\t" or len(v) == 1:
            return v
        raise ValueError("delimiter must be 'auto', a delimiter name, or a single character")


class OutputConfig(BaseModel):
    """Configuration for export settings."""

    directory: Path = Field(default=Path("exports"), description="Output directory for exports")
    format: ExportFormat = Field(default=ExportFormat.CSV, description="Default export format")

    model_config = ConfigDict(extra="allow")

    @field_validator("directory")
    @classmethod
    def validate_directory(cls, v: Path) -> Path:
        """Convert to Path."""
        return Path(v)

    @field_validator("format", mode="before")
    @classmethod
    def normalize_format(cls, v: Any) -> Any:
        """Accept format names in any case."""
        if isinstance(v, str):
            return v.lower()
        return v


class FormatKingConfig(BaseModel):
    """Main configuration for Format King."""

    log_level: str = Field(default="WARNING", description="Default logging level")

    detection: DetectionConfig = Field(
        default_factory=DetectionConfig, description="Detector thresholds"
    )
    parsing: ParsingConfig = Field(default_factory=ParsingConfig, description="Parsing settings")
    output: OutputConfig = Field(default_factory=OutputConfig, description="Output settings")

    model_config = ConfigDict(
        extra="allow",
        validate_assignment=True,
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {sorted(valid_levels)}")
        return v.upper()


def load_config(config_path: Path) -> FormatKingConfig:
    """Load configuration from a YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated FormatKingConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigurationError: If config is invalid

    Example:
        >>> config = load_config(Path("formatking.yml"))
        >>> print(config.detection.space_fraction_threshold)
        0.8
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        try:
            raw_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML: {e}", path=str(config_path)) from e

    if not isinstance(raw_config, dict):
        raise ConfigurationError("Configuration must be a mapping", path=str(config_path))

    try:
        return load_config_from_dict(raw_config)
    except ValueError as e:
        raise ConfigurationError(f"Invalid configuration: {e}", path=str(config_path)) from e


def load_config_from_dict(config_dict: Dict[str, Any]) -> FormatKingConfig:
    """Load configuration from a dictionary.

    Args:
        config_dict: Configuration dictionary

    Returns:
        Validated FormatKingConfig instance

    Example:
        >>> config = load_config_from_dict({"parsing": {"delimiter": "tab"}})
    """
    expanded_config = _expand_env_vars(config_dict)

    return FormatKingConfig(**expanded_config)


def create_default_config(output_path: Path) -> FormatKingConfig:
    """Create a default configuration and optionally save it.

    Args:
        output_path: Path to save the default configuration

    Returns:
        Default FormatKingConfig instance
    """
    config = FormatKingConfig()

    if output_path:
        save_config(config, output_path)

    return config


def save_config(config: FormatKingConfig, output_path: Path) -> None:
    """Save configuration to a YAML file.

    Args:
        config: FormatKingConfig instance to save
        output_path: Path to save the configuration
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    config_dict = config.model_dump(exclude_none=True)

    # Manually convert enums and Path objects to strings
    def convert_special_types(obj: Any) -> Any:
        if isinstance(obj, dict):
            return {k: convert_special_types(v) for k, v in obj.items()}
        elif isinstance(obj, list):
            return [convert_special_types(item) for item in obj]
        elif isinstance(obj, Enum):
            return obj.value
        elif isinstance(obj, Path):
            return str(obj)
        else:
            return obj

    config_dict = convert_special_types(config_dict)

    with open(output_path, "w", encoding="utf-8") as f:
        yaml.dump(
            config_dict,
            f,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )


def _expand_env_vars(config: Any) -> Any:
    """Recursively expand environment variables in config.

    Supports ${VAR_NAME} and ${VAR_NAME:-default} syntax.

    Args:
        config: Configuration object (dict, list, or str)

    Returns:
        Configuration with environment variables expanded
    """
    if isinstance(config, dict):
        return {k: _expand_env_vars(v) for k, v in config.items()}
    elif isinstance(config, list):
        return [_expand_env_vars(item) for item in config]
    elif isinstance(config, str):

        def replace_env_var(match: Any) -> str:
            var_expr = match.group(1)

            # Default value syntax: VAR:-default
            if ":-" in var_expr:
                var_name, default = var_expr.split(":-", 1)
                return str(os.getenv(var_name.strip(), default.strip()))
            var_name = var_expr.strip()
            value = os.getenv(var_name)
            if value is None:
                # Keep original if env var not found
                return str(match.group(0))
            return str(value)

        return re.sub(r"\$\{([^}]+)\}", replace_env_var, config)
    else:
        return config


def merge_configs(base: FormatKingConfig, override: Dict[str, Any]) -> FormatKingConfig:
    """Merge override configuration into base configuration.

    Args:
        base: Base FormatKingConfig instance
        override: Dictionary with override values

    Returns:
        New FormatKingConfig with merged values

    Example:
        >>> base = FormatKingConfig()
        >>> merged = merge_configs(base, {"parsing": {"first_row_header": False}})
    """
    merged = _deep_merge(base.model_dump(), override)

    return FormatKingConfig(**merged)


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Deep merge two dictionaries."""
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result
