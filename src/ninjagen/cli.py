"""
Command-line interface for ninjagen.

This module provides the `ninjagen` CLI tool, which writes a ninja build
graph for a project description to standard output.
"""

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ninjagen import __version__
from ninjagen.build.assembler import GraphAssembler
from ninjagen.build.errors import ConfigurationError, UnsupportedExtensionError
from ninjagen.cli_utils import ErrorFormatter, ProjectSelector, configure_logging
from ninjagen.config import ProjectConfig


@dataclass
class GenerateArgs:
    """Arguments for graph generation."""

    name: Optional[str] = None
    config_file: Optional[Path] = None
    verbose: bool = False


def generate_command(args: GenerateArgs) -> None:
    """Generate the build graph and write it to stdout.

    Examples:
        ninjagen                       # Built-in 'base' configuration
        ninjagen dexdump               # Built-in 'dexdump' configuration
        ninjagen -c project.ini        # Project description file
        ninjagen -v > build.ninja.in   # Log progress to stderr
    """
    configure_logging(args.verbose)

    try:
        project = ProjectSelector.load(args.name, args.config_file)
        text = GraphAssembler(project).render()
    except UnsupportedExtensionError as e:
        ErrorFormatter.handle_unsupported_extension(e)
    except ConfigurationError as e:
        ErrorFormatter.handle_configuration_error(e)
    except ValueError as e:
        ErrorFormatter.handle_usage_error(e)
    except KeyboardInterrupt:
        ErrorFormatter.handle_keyboard_interrupt()
    else:
        sys.stdout.write(text)
        sys.stdout.flush()


def list_command() -> None:
    """Print the names of the built-in configurations."""
    for name in ProjectConfig.builtin_names():
        print(name)


def main() -> None:
    """ninjagen - generate ninja build graphs for subsets of large native trees."""
    parser = argparse.ArgumentParser(
        prog="ninjagen",
        description="Generate a ninja build graph and write it to stdout",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"ninjagen {__version__}",
    )
    parser.add_argument(
        "name",
        nargs="?",
        default=None,
        help="Built-in configuration (default: base)",
    )
    parser.add_argument(
        "-c",
        "--config",
        dest="config_file",
        type=Path,
        default=None,
        help="Read the project description from an INI file",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List built-in configurations and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log progress to stderr",
    )

    parsed_args = parser.parse_args()

    if parsed_args.list:
        list_command()
        sys.exit(0)

    generate_command(
        GenerateArgs(
            name=parsed_args.name,
            config_file=parsed_args.config_file,
            verbose=parsed_args.verbose,
        )
    )
    sys.exit(0)


if __name__ == "__main__":
    main()
