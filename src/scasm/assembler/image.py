"""
Bounds-Checked Output Image
===========================

The target machine has 256 bytes of memory, so the assembled program can
never be larger than that. OutputImage holds the bytes written so far and
refuses any write that would run past the capacity. A refused write leaves
the image unchanged.

Usage:
    image = OutputImage()
    image.require(image.cursor, line_no)      # room for one more byte?
    image.write(bytes([0x40, 0x10]), line_no)
    code = image.get_code()
"""

import logging

from scasm.config import OUTPUT_CAPACITY
from scasm.errors import OutputSizeError


logger = logging.getLogger(__name__)


class OutputImage:
    """
    Fixed-capacity byte buffer with a write cursor.

    The cursor only moves forward and never exceeds ``capacity``.

    Attributes:
        capacity: Maximum number of bytes the image can hold
    """

    def __init__(self, capacity: int = OUTPUT_CAPACITY):
        self.capacity = capacity
        self._code = bytearray()

    @property
    def cursor(self) -> int:
        """Offset of the next byte to be written."""
        return len(self._code)

    @property
    def remaining(self) -> int:
        """Bytes still free before the capacity is reached."""
        return self.capacity - self.cursor

    def __len__(self) -> int:
        return self.cursor

    # =========================================================================
    # Capacity Checks
    # =========================================================================

    def require(self, position: int, line_no: int = 0) -> None:
        """
        Check that a byte can be stored at ``position``.

        Raises:
            OutputSizeError: If position is at or beyond the capacity
        """
        if position >= self.capacity:
            raise OutputSizeError(line_no, self.capacity)

    def require_span(self, length: int, line_no: int = 0) -> None:
        """
        Check that ``length`` bytes fit starting at the cursor.

        A zero-length span always fits, even in a full image.

        Raises:
            OutputSizeError: If cursor + length exceeds the capacity
        """
        if self.cursor + length > self.capacity:
            raise OutputSizeError(line_no, self.capacity)

    # =========================================================================
    # Writing
    # =========================================================================

    def write(self, data: bytes, line_no: int = 0) -> int:
        """
        Append ``data`` at the cursor and advance past it.

        Either all of ``data`` is written or nothing is.

        Returns:
            Number of bytes written

        Raises:
            OutputSizeError: If data does not fit
        """
        self.require_span(len(data), line_no)
        self._code.extend(data)
        logger.debug(f"line {line_no}: wrote {len(data)} byte(s), cursor now {self.cursor}")
        return len(data)

    def get_code(self) -> bytes:
        """Return the image truncated to the cursor."""
        return bytes(self._code)

    def reset(self) -> None:
        """Discard everything written so far."""
        self._code.clear()
