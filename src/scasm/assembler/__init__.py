"""
Assembler for the 4-register 8-bit CPU
======================================

This package converts assembly source into a raw binary image of at most
256 bytes, the whole addressable memory of the target machine.

Main Components
---------------
- **Assembler**: Reads source line by line and drives the encoder
- **LineEncoder**: Encodes one line into 0, 1, 2 (or PAD K) bytes
- **OutputImage**: Fixed-capacity buffer that rejects oversized writes
- **opcodes**: Instruction table (mnemonic -> opcode base, operand shape)
- **registers**: RA/RB field injection
- **constants**: K operand parsing (decimal, ...b binary, ...h hex)

Source Syntax
-------------
    ; comment to end of line
    LD   r1, r2        ; two registers
    DATA r0, -1        ; register and constant
    JMP  10h           ; constant
    CLF                ; no operand
    PAD  4             ; four zero bytes

Mnemonics are case insensitive; register names must be lower case.
"""

from scasm.assembler.assembler import Assembler, assemble, assemble_file
from scasm.assembler.constants import parse_constant
from scasm.assembler.encoder import LineEncoder, TokenStream
from scasm.assembler.image import OutputImage
from scasm.assembler.opcodes import (
    INSTRUCTION_TABLE,
    MNEMONICS,
    PAD_DIRECTIVE,
    InstructionInfo,
    OperandShape,
    lookup,
)
from scasm.assembler.registers import inject_ra, inject_rb

__all__ = [
    # Main class and functions
    "Assembler",
    "assemble",
    "assemble_file",
    # Encoder
    "LineEncoder",
    "TokenStream",
    "OutputImage",
    # Instruction table
    "INSTRUCTION_TABLE",
    "MNEMONICS",
    "PAD_DIRECTIVE",
    "InstructionInfo",
    "OperandShape",
    "lookup",
    # Operands
    "parse_constant",
    "inject_ra",
    "inject_rb",
]
