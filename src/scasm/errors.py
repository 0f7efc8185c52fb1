"""
SCASM Error Hierarchy
=====================

This module defines the exception hierarchy for the assembler. All
exceptions inherit from ScasmError, allowing callers to catch every
assembler-related error with a single except clause if desired.

Exception Hierarchy
-------------------
ScasmError (base)
└── AssemblerError (attributable to one source line)
    ├── RegisterError - register operand is not r0-r3
    ├── OperandSizeError - constant outside -128..255
    ├── ConstantSyntaxError - constant is not a number (strict mode only)
    ├── OutputSizeError - image would exceed the 256 byte capacity
    ├── DirectiveError - bad operands for the PAD directive
    ├── OperandError - missing operand for an instruction
    └── MnemonicError - unknown instruction mnemonic

Message Format
--------------
Every assembler error renders as ``<line_no>: <reason>``, where reason
is one of the fixed strings defined on each class. The filename is kept
separately in ``location`` so the command-line tool can prefix it:

    Error: prog.asm:3: Invalid register
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class ScasmError(Exception):
    """
    Base exception for all assembler errors.

        try:
            assembler.assemble_file("program.asm")
        except ScasmError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a line in a source file for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
    """
    filename: str
    line: int

    def __str__(self) -> str:
        """Format as 'filename:line' for error messages."""
        return f"{self.filename}:{self.line}"


# =============================================================================
# Assembler Exceptions
# =============================================================================

class AssemblerError(ScasmError):
    """
    Base exception for errors raised while encoding a source line.

    Subclasses fix the ``reason`` string; the line number is supplied
    by whoever detects the problem. The source driver attaches the
    filename afterwards through ``with_location``.

    Attributes:
        reason: The fixed error description
        line_no: Source line number (1-indexed), 0 if unknown
        location: Filename and line, once known
        source_line: The offending source text, once known
    """

    reason: str = "Assembly error"

    def __init__(
        self,
        line_no: int = 0,
        reason: Optional[str] = None,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        if reason is not None:
            self.reason = reason
        self.line_no = line_no
        self.location = location
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        return f"{self.line_no}: {self.reason}"

    def with_location(self, filename: str, source_line: Optional[str] = None) -> "AssemblerError":
        """Attach the source filename (and optionally the line text) and return self."""
        self.location = SourceLocation(filename, self.line_no)
        self.source_line = source_line
        return self


class RegisterError(AssemblerError):
    """
    A register operand is not one of r0, r1, r2, r3.

    Register names are case sensitive, so ``R1`` is rejected too.
    """
    reason = "Invalid register"


class OperandSizeError(AssemblerError):
    """
    A constant does not fit in one byte.

    Accepted values are -128 to 255 so that both signed and unsigned
    readings of a byte can be written.
    """
    reason = "Invalid operand size (constant must fit in one byte)"


class ConstantSyntaxError(AssemblerError):
    """A constant token is not a valid numeric literal (strict mode)."""
    reason = "Invalid constant"


class OutputSizeError(AssemblerError):
    """
    The assembled image would exceed the machine's addressable memory.

    The reason string embeds the capacity, so it is built per instance.
    """

    def __init__(self, line_no: int = 0, capacity: int = 256, **kwargs):
        self.capacity = capacity
        super().__init__(
            line_no,
            f"Resulting file too large - output file size limit: {capacity} bytes",
            **kwargs,
        )


class DirectiveError(AssemblerError):
    """The PAD directive was given without its byte count."""
    reason = "Invalid combination of operands for directive"


class OperandError(AssemblerError):
    """An instruction is missing one of its operands."""
    reason = "Invalid combination of operands"


class MnemonicError(AssemblerError):
    """The first token on the line is neither PAD nor a known mnemonic."""
    reason = "Invalid instruction mnemonic"
