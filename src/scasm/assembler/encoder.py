"""
Line Encoder
============

Translates one line of source into the bytes it contributes to the image.

Each line goes through these steps:

1. Strip the comment (everything from the first ``;``)
2. Take the first whitespace-delimited token; a blank line encodes to b""
3. Upper-case it
4. ``PAD K``: return K zero bytes if they fit
5. Check that the image has room for an opcode byte
6. Look the mnemonic up in the instruction table
7. Start from the opcode base
8. Consume operands according to the operand shape:
   - RA_RB: two registers, separated by spaces, tabs or commas
   - RB:    one register (spaces and tabs only)
   - RB_K:  register, then a constant after checking room for byte two
   - K:     a constant after checking room for byte two
   - NONE:  nothing
9. Return the encoded bytes

The encoder never moves the image cursor. It only reads the cursor for
capacity checks and leaves the write to the caller, which advances by the
length of the returned bytes. Tokens left over after the operands are
ignored.

Example
-------
>>> encoder = LineEncoder(OutputImage())
>>> encoder.encode("  LD r1, r2   ; load", 1)
b'\\x06'
>>> encoder.encode("JMP 10h", 2)
b'@\\x10'
"""

import logging
from typing import Optional

from scasm.assembler.constants import parse_constant
from scasm.assembler.image import OutputImage
from scasm.assembler.opcodes import OperandShape, is_directive, lookup
from scasm.assembler.registers import inject_ra, inject_rb
from scasm.errors import DirectiveError, MnemonicError, OperandError


logger = logging.getLogger(__name__)


COMMENT_CHAR = ";"

# Delimiters for the mnemonic, single register, jump constant and PAD count
WHITESPACE = " \t\r\n"

# Delimiters for register pairs and the operands of DATA
OPERAND_DELIMITERS = " ,\t\r\n"


class TokenStream:
    """
    Splits a line into tokens, one call at a time.

    Each call may use a different delimiter set. Leading delimiters are
    skipped, the token runs to the next delimiter, and that delimiter is
    consumed with the token.
    """

    def __init__(self, text: str):
        self._text = text
        self._pos = 0

    def next(self, delimiters: str = WHITESPACE) -> Optional[str]:
        """Return the next token, or None when the line is exhausted."""
        text = self._text
        pos = self._pos

        while pos < len(text) and text[pos] in delimiters:
            pos += 1
        if pos >= len(text):
            self._pos = pos
            return None

        start = pos
        while pos < len(text) and text[pos] not in delimiters:
            pos += 1

        self._pos = pos + 1
        return text[start:pos]


def strip_comment(line: str) -> str:
    """Return the line up to (not including) the first comment character."""
    return line.partition(COMMENT_CHAR)[0]


class LineEncoder:
    """
    Encodes source lines against an output image.

    Usage:
        encoder = LineEncoder(image)
        data = encoder.encode(line, line_no)
        image.write(data, line_no)

    Attributes:
        image: The image whose cursor and capacity bound each line
        strict: Reject constants that are not valid numeric literals
    """

    def __init__(self, image: OutputImage, strict: bool = False):
        self.image = image
        self.strict = strict

    def encode(self, line: str, line_no: int) -> bytes:
        """
        Encode a single source line.

        Args:
            line: Source text, with or without trailing newline
            line_no: 1-based line number for error messages

        Returns:
            The bytes this line adds at the image cursor

        Raises:
            AssemblerError: On the first problem found in the line
        """
        tokens = TokenStream(strip_comment(line))

        mnemonic = tokens.next(WHITESPACE)
        if mnemonic is None:
            return b""
        mnemonic = mnemonic.upper()

        if is_directive(mnemonic):
            return self._encode_pad(tokens, line_no)

        cursor = self.image.cursor
        self.image.require(cursor, line_no)

        info = lookup(mnemonic)
        if info is None:
            raise MnemonicError(line_no)

        opcode = info.opcode
        shape = info.shape

        if shape is OperandShape.RA_RB:
            opcode = inject_ra(self._operand(tokens, OPERAND_DELIMITERS, line_no), opcode, line_no)
            opcode = inject_rb(self._operand(tokens, OPERAND_DELIMITERS, line_no), opcode, line_no)
            data = bytes([opcode])

        elif shape is OperandShape.RB:
            opcode = inject_rb(self._operand(tokens, WHITESPACE, line_no), opcode, line_no)
            data = bytes([opcode])

        elif shape is OperandShape.RB_K:
            opcode = inject_rb(self._operand(tokens, OPERAND_DELIMITERS, line_no), opcode, line_no)
            self.image.require(cursor + 1, line_no)
            k = self._constant(tokens, OPERAND_DELIMITERS, line_no)
            data = bytes([opcode, k])

        elif shape is OperandShape.K:
            self.image.require(cursor + 1, line_no)
            k = self._constant(tokens, WHITESPACE, line_no)
            data = bytes([opcode, k])

        else:
            data = bytes([opcode])

        logger.debug(f"{line_no}: {mnemonic} -> {data.hex(' ')}")
        return data

    def _encode_pad(self, tokens: TokenStream, line_no: int) -> bytes:
        """Encode ``PAD K`` as K zero bytes."""
        token = tokens.next(WHITESPACE)
        if token is None:
            raise DirectiveError(line_no)

        # The count is the stored byte, so PAD -1 reserves 255 bytes
        count = parse_constant(token, line_no, self.strict)
        self.image.require_span(count, line_no)

        logger.debug(f"{line_no}: PAD {count}")
        return bytes(count)

    def _operand(self, tokens: TokenStream, delimiters: str, line_no: int) -> str:
        token = tokens.next(delimiters)
        if token is None:
            raise OperandError(line_no)
        return token

    def _constant(self, tokens: TokenStream, delimiters: str, line_no: int) -> int:
        return parse_constant(self._operand(tokens, delimiters, line_no), line_no, self.strict)
