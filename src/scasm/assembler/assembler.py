"""
Assembler - Main Interface
==========================

This module provides the Assembler class, which reads a source file or
string line by line, feeds each line to the LineEncoder and collects the
result in a 256 byte OutputImage.

Assembly is a single pass. The first error stops it; the partial image is
discarded and the error propagates with the filename attached.

Example Usage
-------------
>>> from scasm.assembler import Assembler
>>>
>>> asm = Assembler()
>>> asm.assemble_string('''
...     LD r1, r2
...     JMP 10h     ; back to the start
...     CLF
... ''')
b'\\x06@\\x10`'
>>> asm.write_binary("prog.bin")

Command-Line Usage
------------------
    $ scasm prog.asm              # writes prog.bin
    $ scasm prog.asm -o out.bin
"""

import dataclasses
import logging
from pathlib import Path
from typing import Iterable, Optional

from scasm.assembler.encoder import LineEncoder
from scasm.assembler.image import OutputImage
from scasm.config import AssemblerConfig
from scasm.errors import AssemblerError


logger = logging.getLogger(__name__)


class Assembler:
    """
    Single-pass assembler for the 4-register 8-bit CPU.

    Attributes:
        config: Settings for this assembler (strict constants, capacity)
    """

    def __init__(self, config: Optional[AssemblerConfig] = None,
                 strict: Optional[bool] = None):
        """
        Initialize the assembler.

        Args:
            config: Assembler settings; defaults to AssemblerConfig()
            strict: Overrides config.strict_constants when given; the
                caller's config is left untouched
        """
        config = config if config is not None else AssemblerConfig()
        if strict is not None:
            config = dataclasses.replace(config, strict_constants=strict)
        self.config = config

        self._image = OutputImage(self.config.capacity)
        self._source_file: Optional[Path] = None

    # =========================================================================
    # Assembly Methods
    # =========================================================================

    def assemble_lines(self, lines: Iterable[str], filename: str = "<input>") -> bytes:
        """
        Assemble a sequence of source lines.

        Line numbers start at 1 and count every line, blank ones included.

        Args:
            lines: Source lines, with or without line terminators
            filename: Name used in error locations

        Returns:
            The assembled image (possibly empty)

        Raises:
            AssemblerError: On the first invalid line; the image is cleared
        """
        self._image.reset()
        encoder = LineEncoder(self._image, strict=self.config.strict_constants)

        line_no = 0
        try:
            for line_no, line in enumerate(lines, start=1):
                data = encoder.encode(line, line_no)
                if data:
                    self._image.write(data, line_no)
        except AssemblerError as e:
            self._image.reset()
            e.with_location(filename, line.rstrip("\r\n"))
            logger.debug(f"{filename}: assembly failed at line {e.line_no}")
            raise

        logger.info(f"{filename}: {line_no} line(s), {self._image.cursor} byte(s)")
        return self._image.get_code()

    def assemble_string(self, source: str, filename: str = "<input>") -> bytes:
        """
        Assemble source code from a string.

        Args:
            source: Assembly source code; only line feeds end a line
            filename: Virtual filename for error messages

        Returns:
            The assembled image
        """
        lines = source.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        return self.assemble_lines(lines, filename)

    def assemble_file(self, filepath: str | Path) -> bytes:
        """
        Assemble source code from a file.

        Args:
            filepath: Path to the assembly source file

        Returns:
            The assembled image

        Raises:
            AssemblerError: If assembly fails
            FileNotFoundError: If the source file does not exist
        """
        filepath = Path(filepath)
        self._source_file = filepath

        # latin-1 decodes any byte; only "\n" ends a line.
        with filepath.open("r", encoding="latin-1", newline="\n") as f:
            return self.assemble_lines(f, str(filepath))

    # =========================================================================
    # Output Methods
    # =========================================================================

    def get_code(self) -> bytes:
        """Return the image from the last successful assembly."""
        return self._image.get_code()

    def get_size(self) -> int:
        """Return the number of bytes assembled."""
        return self._image.cursor

    def get_source_file(self) -> Optional[Path]:
        return self._source_file

    def write_binary(self, filepath: str | Path) -> int:
        """
        Write the image verbatim (no header, no padding).

        Args:
            filepath: Output file path

        Returns:
            Number of bytes written
        """
        code = self.get_code()
        Path(filepath).write_bytes(code)
        logger.info(f"Wrote {len(code)} bytes to {filepath}")
        return len(code)


# =============================================================================
# Convenience Functions
# =============================================================================

def assemble(source: str, strict: bool = False) -> bytes:
    """Assemble a source string and return the image."""
    return Assembler(strict=strict).assemble_string(source)


def assemble_file(filepath: str | Path, strict: bool = False) -> bytes:
    """Assemble a source file and return the image."""
    return Assembler(strict=strict).assemble_file(filepath)
