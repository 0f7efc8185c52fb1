"""
Constant Operand Parsing
========================

Parses the K operand of DATA, the jump family and PAD into one byte.

Number Formats
--------------

| Format      | Form           | Example | Value |
|-------------|----------------|---------|-------|
| Decimal     | (none)         | 123     | 123   |
| Hexadecimal | h suffix       | 7Fh     | 127   |
| Hexadecimal | 0x prefix      | 0x7F    | 127   |
| Binary      | b suffix       | 1010b   | 10    |
| Octal       | leading 0      | 017     | 15    |

A leading ``+`` or ``-`` is accepted in every format. The suffix check
only looks at the last character, so ``0x1b`` is read as binary ``0x1``.

Conversion follows C ``strtol``: digits are consumed while they are
valid for the base and anything after them is ignored. A token with no
leading digits converts to 0. Strict mode turns both cases into a
ConstantSyntaxError instead.

Range
-----
Values from -128 to 255 fit in a byte (signed or unsigned reading).
Negative values are stored in two's complement: -1 -> $FF.
"""

from typing import Optional
import string

from scasm.errors import ConstantSyntaxError, OperandSizeError


K_MIN = -128
K_MAX = 255

# Last character -> base
SUFFIX_BASES = {
    "b": 2,
    "h": 16,
}

_DIGITS = string.digits + string.ascii_lowercase


def _scan_integer(text: str, base: int) -> tuple[int, bool]:
    """
    Convert ``text`` the way strtol(text, NULL, base) does.

    ``base`` 0 selects hexadecimal for a ``0x`` prefix, octal for a
    leading ``0`` and decimal otherwise.

    Returns:
        (value, complete) where complete is True when the whole text
        was a well-formed number
    """
    pos = 0
    while pos < len(text) and text[pos] in string.whitespace:
        pos += 1

    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1

    # A 0x prefix only counts when a hex digit follows it
    if (base in (0, 16) and text[pos:pos + 2].lower() == "0x"
            and pos + 2 < len(text) and text[pos + 2] in string.hexdigits):
        pos += 2
        base = 16
    elif base == 0:
        base = 8 if text[pos:pos + 1] == "0" else 10

    value = 0
    digits = 0
    while pos < len(text):
        digit = _DIGITS.find(text[pos].lower())
        if digit < 0 or digit >= base:
            break
        value = value * base + digit
        digits += 1
        pos += 1

    return sign * value, digits > 0 and pos == len(text)


def convert_constant(token: str) -> tuple[int, bool]:
    """
    Convert a constant token to an integer without range checking.

    Returns:
        (value, complete) as for _scan_integer
    """
    base: Optional[int] = SUFFIX_BASES.get(token[-1:])
    if base is not None:
        return _scan_integer(token[:-1], base)
    return _scan_integer(token, 0)


def parse_constant(token: str, line_no: int = 0, strict: bool = False) -> int:
    """
    Parse a constant token into the byte it encodes.

    Args:
        token: The operand text (e.g. "10h", "-5", "1010b")
        line_no: Source line for error messages
        strict: Reject tokens that are not entirely a numeric literal

    Returns:
        The stored byte (0-255)

    Raises:
        OperandSizeError: If the value is outside -128..255
        ConstantSyntaxError: In strict mode, if the token is not a number
    """
    value, complete = convert_constant(token)

    if strict and not complete:
        raise ConstantSyntaxError(line_no)

    if value < K_MIN or value > K_MAX:
        raise OperandSizeError(line_no)

    return value & 0xFF
