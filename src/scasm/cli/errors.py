"""
CLI Error Handling
==================

Provides consistent error handling and exit codes for the command-line tool.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click

from scasm.errors import AssemblerError, ScasmError


class ExitCode(IntEnum):
    """Standard exit codes for the CLI."""
    SUCCESS = 0
    BUILD_ERROR = 1      # Assembly error
    INVALID_ARGS = 2     # Invalid arguments or missing files
    INTERNAL_ERROR = 3   # Unexpected internal error


def format_assembly_error(error: AssemblerError) -> str:
    """
    Format an assembly error as ``<file>:<line_no>: <reason>``.

    Without a location only ``<line_no>: <reason>`` is returned.
    """
    if error.location is not None:
        return f"{error.location.filename}:{error}"
    return str(error)


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Exception handler for the CLI.

    Formats the error message, optionally prints a traceback for
    internal errors in verbose mode, and exits with the matching code.

    Raises:
        SystemExit: Always
    """
    if isinstance(error, AssemblerError):
        click.echo(f"Error: {format_assembly_error(error)}", err=True)
        sys.exit(ExitCode.BUILD_ERROR)

    elif isinstance(error, ScasmError):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.BUILD_ERROR)

    elif isinstance(error, (FileNotFoundError, PermissionError, IsADirectoryError)):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    elif isinstance(error, OSError):
        click.echo(f"Error writing output file: {error}", err=True)
        sys.exit(ExitCode.BUILD_ERROR)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
