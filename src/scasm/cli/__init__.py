"""
SCASM Command-Line Interface
============================

- **scasm**: the assembler (``scasm.cli.scasm:main``)

The tool is a Click application with built-in help and consistent
exit codes (see ``scasm.cli.errors.ExitCode``).
"""

__all__ = ["scasm"]
