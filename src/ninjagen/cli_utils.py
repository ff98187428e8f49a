"""CLI utility functions for ninjagen.

This module provides common utilities used by the CLI:
- Project description selection (built-in name or INI file)
- Error handling and formatting

Standard output carries the generated graph only, so every message here
goes to standard error.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from ninjagen.build.errors import ConfigurationError, UnsupportedExtensionError
from ninjagen.config import ProjectConfig

DEFAULT_CONFIG = "base"

EXIT_CONFIGURATION_ERROR = 1
EXIT_UNSUPPORTED_EXTENSION = 2
EXIT_USAGE_ERROR = 64
EXIT_INTERRUPTED = 130


class ProjectSelector:
    """Resolves which project description to generate."""

    @staticmethod
    def load(name: Optional[str] = None, config_file: Optional[Path] = None) -> ProjectConfig:
        """Load the project description selected on the command line.

        Args:
            name: Built-in configuration name
            config_file: Path to an INI project description

        Returns:
            Parsed ProjectConfig

        Raises:
            ProjectConfigError: If the description cannot be found or parsed
            ValueError: If both a name and a file are given
        """
        if name and config_file:
            raise ValueError("Give either a configuration name or --config, not both")
        if config_file:
            return ProjectConfig.from_file(config_file)
        return ProjectConfig.builtin(name or DEFAULT_CONFIG)


class ErrorFormatter:
    """Formats and displays error messages with ANSI color codes."""

    # ANSI color codes
    RED = "\033[1;31m"
    YELLOW = "\033[1;33m"
    RESET = "\033[0m"

    @staticmethod
    def print_error(title: str, message: str) -> None:
        """Print formatted error message.

        Args:
            title: Error title (e.g., "Configuration error")
            message: Error message details
        """
        print(f"{ErrorFormatter.RED}✗ {title}{ErrorFormatter.RESET}", file=sys.stderr)
        print(message, file=sys.stderr)

    @staticmethod
    def print_warning(message: str) -> None:
        """Print formatted warning message."""
        print(f"{ErrorFormatter.YELLOW}✗ {message}{ErrorFormatter.RESET}", file=sys.stderr)

    @staticmethod
    def handle_configuration_error(error: ConfigurationError) -> None:
        """Report bad input data and exit."""
        ErrorFormatter.print_error("Configuration error", str(error))
        sys.exit(EXIT_CONFIGURATION_ERROR)

    @staticmethod
    def handle_unsupported_extension(error: UnsupportedExtensionError) -> None:
        """Report an unsupported source file type and exit."""
        ErrorFormatter.print_error("Unsupported source file", str(error))
        print("Supported: .c, .cpp, .cc, .proto, .yy, .ll", file=sys.stderr)
        sys.exit(EXIT_UNSUPPORTED_EXTENSION)

    @staticmethod
    def handle_usage_error(error: ValueError) -> None:
        """Report conflicting command-line arguments and exit."""
        ErrorFormatter.print_error("Invalid arguments", str(error))
        sys.exit(EXIT_USAGE_ERROR)

    @staticmethod
    def handle_keyboard_interrupt() -> None:
        """Handle KeyboardInterrupt with standard formatting."""
        ErrorFormatter.print_warning("Generation interrupted")
        sys.exit(EXIT_INTERRUPTED)


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr; debug level when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )
