"""
Instruction Set Definition
==========================

This module defines the instruction set of the target 8-bit CPU: a machine
with four general purpose registers (r0-r3), one-byte opcodes and 256 bytes
of addressable memory.

Operand Shapes
--------------
Each instruction takes one of five operand combinations:

1. **RA_RB**: two registers, encoded in the opcode byte
   - 1 byte: RA in bits 2-3, RB in bits 0-1
   - Example: ADD r1, r2 -> $86

2. **RB**: one register in bits 0-1
   - 1 byte
   - Example: JMPR r3 -> $33

3. **RB_K**: one register plus a constant byte
   - 2 bytes: opcode with RB, then K
   - Example: DATA r1, 10h -> $21 $10

4. **K**: a constant byte only
   - 2 bytes: opcode, then K
   - Example: JMP 10h -> $40 $10

5. **NONE**: no operand
   - 1 byte
   - Example: CLF -> $60

Conditional Jumps
-----------------
The jump family shares base $50 and sets one bit per flag tested:
C = $08, A = $04, E = $02, Z = $01. JCAEZ therefore encodes as $5F.

Directives
----------
PAD K is the only directive; it zero-fills K bytes and is handled by the
line encoder without consulting this table.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


# =============================================================================
# Operand Shape Enumeration
# =============================================================================

class OperandShape(Enum):
    """
    Operand combinations an instruction can require.

    The shape determines which tokens follow the mnemonic and how many
    bytes the instruction occupies.
    """
    RA_RB = auto()  # Two registers (ADD r1, r2)
    RB = auto()     # One register (JMPR r1)
    RB_K = auto()   # Register and constant (DATA r1, 5)
    K = auto()      # Constant (JMP 10h)
    NONE = auto()   # No operand (CLF)

    @property
    def size(self) -> int:
        """Encoded instruction size in bytes."""
        return 2 if self in (OperandShape.RB_K, OperandShape.K) else 1


# =============================================================================
# Instruction Information
# =============================================================================

@dataclass(frozen=True)
class InstructionInfo:
    """
    Information about one instruction.

    Attributes:
        mnemonic: Upper-case instruction name
        opcode: Opcode base byte before register fields are merged in
        shape: Operand combination the instruction requires
    """
    mnemonic: str
    opcode: int
    shape: OperandShape

    @property
    def size(self) -> int:
        return self.shape.size

    def __repr__(self) -> str:
        return f"InstructionInfo({self.mnemonic}, opcode=${self.opcode:02X}, shape={self.shape.name})"


PAD_DIRECTIVE = "PAD"


def _table(*entries: tuple[str, int, OperandShape]) -> dict[str, InstructionInfo]:
    return {name: InstructionInfo(name, opcode, shape) for name, opcode, shape in entries}


# =============================================================================
# Instruction Table
# =============================================================================
# Key: upper-case mnemonic
# Value: InstructionInfo(mnemonic, opcode base, operand shape)
# =============================================================================

INSTRUCTION_TABLE: dict[str, InstructionInfo] = _table(
    # Arithmetic and logic
    ("ADD", 0x80, OperandShape.RA_RB),
    ("SHR", 0x90, OperandShape.RA_RB),
    ("SHL", 0xA0, OperandShape.RA_RB),
    ("NOT", 0xB0, OperandShape.RA_RB),
    ("AND", 0xC0, OperandShape.RA_RB),
    ("OR", 0xD0, OperandShape.RA_RB),
    ("XOR", 0xE0, OperandShape.RA_RB),
    ("CMP", 0xF0, OperandShape.RA_RB),

    # Load and store
    ("LD", 0x00, OperandShape.RA_RB),
    ("ST", 0x10, OperandShape.RA_RB),

    # Data
    ("DATA", 0x20, OperandShape.RB_K),

    # Branches
    ("JMPR", 0x30, OperandShape.RB),
    ("JMP", 0x40, OperandShape.K),
    ("JC", 0x58, OperandShape.K),
    ("JA", 0x54, OperandShape.K),
    ("JE", 0x52, OperandShape.K),
    ("JZ", 0x51, OperandShape.K),
    ("JCA", 0x5C, OperandShape.K),
    ("JCE", 0x5A, OperandShape.K),
    ("JCZ", 0x59, OperandShape.K),
    ("JAE", 0x56, OperandShape.K),
    ("JAZ", 0x55, OperandShape.K),
    ("JEZ", 0x53, OperandShape.K),
    ("JCAE", 0x5E, OperandShape.K),
    ("JCAZ", 0x5D, OperandShape.K),
    ("JCEZ", 0x5B, OperandShape.K),
    ("JAEZ", 0x57, OperandShape.K),
    ("JCAEZ", 0x5F, OperandShape.K),

    # Clear flags
    ("CLF", 0x60, OperandShape.NONE),

    # I/O
    ("IND", 0x70, OperandShape.RB),
    ("INA", 0x74, OperandShape.RB),
    ("OUTD", 0x78, OperandShape.RB),
    ("OUTA", 0x7C, OperandShape.RB),
)

MNEMONICS: frozenset[str] = frozenset(INSTRUCTION_TABLE)


# =============================================================================
# Lookup Functions
# =============================================================================

def lookup(mnemonic: str) -> Optional[InstructionInfo]:
    """
    Look up an instruction by mnemonic.

    Args:
        mnemonic: The instruction mnemonic (any case)

    Returns:
        InstructionInfo if found, None otherwise
    """
    return INSTRUCTION_TABLE.get(mnemonic.upper())


def is_directive(mnemonic: str) -> bool:
    """Check if a token is the PAD directive."""
    return mnemonic.upper() == PAD_DIRECTIVE
