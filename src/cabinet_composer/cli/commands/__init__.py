"""CLI command implementations for the cabinet-composer application.

This package contains subcommands for the CLI, including:
- validate: Validate a layout file
"""

from cabinet_composer.cli.commands.validate import validate_command

__all__ = ["validate_command"]
