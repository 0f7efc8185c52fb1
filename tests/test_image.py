# =============================================================================
# test_image.py - Output Image Tests
# =============================================================================
# Tests for the fixed-capacity output buffer and its bounds checks.
# =============================================================================

import pytest

from scasm.assembler.image import OutputImage
from scasm.errors import OutputSizeError


def full_image(size: int = 256) -> OutputImage:
    """Helper returning an image with ``size`` zero bytes written."""
    image = OutputImage()
    image.write(bytes(size))
    return image


class TestOutputImage:
    """Basic writing behaviour."""

    def test_new_image_is_empty(self):
        image = OutputImage()
        assert image.capacity == 256
        assert image.cursor == 0
        assert image.remaining == 256
        assert image.get_code() == b""

    def test_write_advances_cursor(self):
        image = OutputImage()
        assert image.write(b"\x40\x10") == 2
        assert image.write(b"\x60") == 1
        assert image.cursor == 3
        assert len(image) == 3
        assert image.get_code() == b"\x40\x10\x60"

    def test_write_empty(self):
        image = full_image()
        assert image.write(b"") == 0
        assert image.cursor == 256

    def test_reset(self):
        image = full_image(10)
        image.reset()
        assert image.cursor == 0
        assert image.get_code() == b""

    def test_custom_capacity(self):
        image = OutputImage(capacity=4)
        image.write(b"\x01\x02\x03\x04")
        with pytest.raises(OutputSizeError) as exc_info:
            image.write(b"\x05")
        assert "limit: 4 bytes" in str(exc_info.value)


class TestBounds:
    """Every write is checked before anything is stored."""

    def test_fill_exactly(self):
        image = full_image(256)
        assert image.remaining == 0

    def test_write_past_capacity_is_atomic(self):
        image = full_image(255)
        with pytest.raises(OutputSizeError):
            image.write(b"\x01\x02", line_no=9)
        assert image.cursor == 255
        assert image.get_code() == bytes(255)

    def test_require_position(self):
        image = OutputImage()
        image.require(255)
        with pytest.raises(OutputSizeError):
            image.require(256)

    def test_require_span(self):
        image = full_image(250)
        image.require_span(6)
        with pytest.raises(OutputSizeError):
            image.require_span(7)

    def test_zero_span_fits_full_image(self):
        full_image().require_span(0)

    def test_error_message(self):
        with pytest.raises(OutputSizeError) as exc_info:
            full_image().require(256, line_no=42)
        assert str(exc_info.value) == \
            "42: Resulting file too large - output file size limit: 256 bytes"
        assert exc_info.value.capacity == 256
