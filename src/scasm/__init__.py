"""
SCASM - Simple CPU Assembler
============================

A single-pass assembler for a small 8-bit CPU with four registers
(r0-r3), one-byte opcodes and 256 bytes of program memory. It turns
mnemonic source text into the raw memory image the machine loads.

Main Components
---------------
- **assembler**: instruction table, line encoder, output image, driver
- **cli**: the ``scasm`` command-line tool
- **config**: assembler settings and environment overrides
- **errors**: exception hierarchy

Quick Start
-----------
Assemble a program:
    >>> from scasm import Assembler
    >>> asm = Assembler()
    >>> code = asm.assemble_file("prog.asm")
    >>> asm.write_binary("prog.bin")

Or use the command-line tool:
    $ scasm prog.asm
"""

__version__ = "1.0.0"

from scasm.assembler import Assembler, assemble, assemble_file
from scasm.config import AssemblerConfig, OUTPUT_CAPACITY
from scasm.errors import (
    ScasmError,
    SourceLocation,
    AssemblerError,
    RegisterError,
    OperandSizeError,
    ConstantSyntaxError,
    OutputSizeError,
    DirectiveError,
    OperandError,
    MnemonicError,
)

__all__ = [
    "__version__",
    # Assembler
    "Assembler",
    "assemble",
    "assemble_file",
    # Configuration
    "AssemblerConfig",
    "OUTPUT_CAPACITY",
    # Exception hierarchy
    "ScasmError",
    "SourceLocation",
    "AssemblerError",
    "RegisterError",
    "OperandSizeError",
    "ConstantSyntaxError",
    "OutputSizeError",
    "DirectiveError",
    "OperandError",
    "MnemonicError",
]
