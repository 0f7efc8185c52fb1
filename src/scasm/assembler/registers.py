"""
Register operand encoding.

The CPU has four registers. Two-register instructions put RA in bits 2-3
of the opcode byte and RB in bits 0-1; single-register instructions use
the RB position only. Fields are OR'd into the opcode, so the base and
any previously injected field are left untouched.
"""

from scasm.errors import RegisterError


REGISTERS = ("r0", "r1", "r2", "r3")

# Register name -> 2-bit field value
REGISTER_FIELDS: dict[str, int] = {name: index for index, name in enumerate(REGISTERS)}

RA_SHIFT = 2
RB_SHIFT = 0


def register_field(token: str, line_no: int = 0) -> int:
    """
    Return the 2-bit field for a register token.

    Raises:
        RegisterError: If the token is not exactly r0-r3 (lower case)
    """
    try:
        return REGISTER_FIELDS[token]
    except KeyError:
        raise RegisterError(line_no) from None


def inject_ra(token: str, opcode: int, line_no: int = 0) -> int:
    """OR the RA field for ``token`` into bits 2-3 of ``opcode``."""
    return opcode | (register_field(token, line_no) << RA_SHIFT)


def inject_rb(token: str, opcode: int, line_no: int = 0) -> int:
    """OR the RB field for ``token`` into bits 0-1 of ``opcode``."""
    return opcode | (register_field(token, line_no) << RB_SHIFT)
