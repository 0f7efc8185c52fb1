"""
scasm - Assembler Command-Line Interface
========================================

This module implements the command-line interface for the assembler.

Usage Examples
--------------
Basic assembly (writes prog.bin next to prog.asm):
    $ scasm prog.asm

With output file:
    $ scasm prog.asm -o image.bin

Reject non-numeric constants instead of encoding them as zero:
    $ scasm --strict prog.asm

Verbose mode (per-line trace):
    $ scasm -v prog.asm

Behaviour
---------
- On an assembly error the message ``Error: <file>:<line>: <reason>`` is
  printed, any existing output file is removed so a stale image cannot be
  loaded by mistake, and the exit code is 1.
- A source that assembles to zero bytes prints a warning and writes nothing.
"""

import logging
from pathlib import Path
from typing import Optional

import click

from scasm import __version__
from scasm.assembler import Assembler
from scasm.cli.errors import handle_cli_exception
from scasm.config import AssemblerConfig


logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def derive_output_path(input_file: Path, suffix: str = ".bin") -> Path:
    """
    Derive the output filename from the input filename.

    The input suffix is replaced (or added if there is none). When that
    would name the input file itself, the suffix is appended instead.

        prog.asm -> prog.bin
        prog     -> prog.bin
        prog.bin -> prog.bin.bin
    """
    output = input_file.with_suffix(suffix)
    if output == input_file:
        output = input_file.with_name(input_file.name + suffix)
    return output


def remove_stale_output(output_file: Path) -> None:
    """Delete a previous output file so it is not run after a failed build."""
    try:
        output_file.unlink()
        logger.debug(f"Removed stale output {output_file}")
    except FileNotFoundError:
        pass


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output binary file (default: input with .bin suffix)",
)
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Reject constants that are not valid numbers. "
         "Default: off, or SCASM_STRICT from the environment.",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="scasm")
def main(
    input_file: Path,
    output: Optional[Path],
    strict: Optional[bool],
    verbose: bool,
) -> None:
    """
    Assemble source code into a 256 byte memory image.

    INPUT_FILE is the assembly source file to assemble.

    \b
    Examples:
        scasm prog.asm              # Outputs prog.bin
        scasm prog.asm -o out.bin   # Specify output file
    """
    setup_logging(verbose)

    config = AssemblerConfig.from_env()

    output_file = output if output is not None else derive_output_path(
        input_file, config.output_suffix
    )

    asm = Assembler(config, strict=strict)

    try:
        logger.debug(f"Assembling {input_file}...")
        code = asm.assemble_file(input_file)
    except Exception as e:
        remove_stale_output(output_file)
        handle_cli_exception(e, verbose=verbose)

    if not code:
        click.echo("Warning: no output generated from input file")
        return

    try:
        asm.write_binary(output_file)
    except Exception as e:
        handle_cli_exception(e, verbose=verbose)

    if verbose:
        click.echo(f"Wrote {len(code)} bytes to {output_file}")


if __name__ == "__main__":
    main()
