"""
Configuration management for CUE sheet tooling.

Provides centralized configuration for file parsing, output formatting and
logging.
"""

import os
from dataclasses import dataclass, field

from .serializer import TAB


@dataclass
class ParserConfig:
    """Configuration for reading CUE files."""

    max_file_size_bytes: int = 10 * 1024 * 1024
    encoding: str | None = None


@dataclass
class FormatConfig:
    """Configuration for formatted CUE output."""

    indent: str = TAB
    track_spacing: bool = True


@dataclass
class LoggingConfig:
    """Configuration for log output."""

    level: str = "WARNING"
    format: str = "console"


@dataclass
class CueSheetConfig:
    """Main configuration for CUE sheet tooling."""

    parser: ParserConfig = field(default_factory=ParserConfig)
    output: FormatConfig = field(default_factory=FormatConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> "CueSheetConfig":
        """Create configuration from environment variables.

        Environment variables follow the pattern:
        CUE_SHEET_<SETTING>

        Examples:
        - CUE_SHEET_MAX_FILE_SIZE_BYTES=1048576
        - CUE_SHEET_INDENT=4  (four spaces; "tab" for a tab)
        - CUE_SHEET_TRACK_SPACING=false
        - CUE_SHEET_LOG_FORMAT=json
        """
        config = cls()

        # Parser configuration
        if val := os.getenv("CUE_SHEET_MAX_FILE_SIZE_BYTES"):
            config.parser.max_file_size_bytes = int(val)
        if val := os.getenv("CUE_SHEET_ENCODING"):
            config.parser.encoding = val

        # Output configuration
        if val := os.getenv("CUE_SHEET_INDENT"):
            config.output.indent = TAB if val.lower() == "tab" else " " * int(val)
        if val := os.getenv("CUE_SHEET_TRACK_SPACING"):
            config.output.track_spacing = val.lower() in ("true", "1", "yes")

        # Logging configuration
        config.logging.level = os.getenv("CUE_SHEET_LOG_LEVEL", config.logging.level).upper()
        config.logging.format = os.getenv("CUE_SHEET_LOG_FORMAT", config.logging.format).lower()

        return config

    def validate(self) -> list[str]:
        """Validate configuration values.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.parser.max_file_size_bytes <= 0:
            errors.append("max_file_size_bytes must be positive")

        if not self.output.indent or self.output.indent.strip():
            errors.append("indent must be non-empty whitespace")

        if self.logging.level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"Unknown log level: {self.logging.level}")

        if self.logging.format not in ("console", "json"):
            errors.append(f"Unknown log format: {self.logging.format}")

        return errors
