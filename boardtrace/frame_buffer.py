"""Pixel buffers of 32-bit 0xAARRGGBB values."""

from __future__ import annotations


class FrameBuffer:
    """A width-by-height grid of 32-bit pixels stored row by row."""

    pixel_byte_size = 4

    def __init__(self, width: int = 0, height: int = 0) -> None:
        self._width = 0
        self._height = 0
        self._pixels: list[int] | None = None
        if width or height:
            self.resize(width, height)
            self.clear()

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def buffer_size(self) -> int:
        """Size of the pixel storage in bytes."""
        return self._width * self._height * self.pixel_byte_size

    def resize(self, width: int, height: int) -> None:
        """Allocate a fresh buffer of the given size; its contents are zero."""
        if width <= 0 or height <= 0:
            raise ValueError(f"frame buffer size must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._pixels = [0] * (width * height)

    def _storage(self) -> list[int]:
        if self._pixels is None:
            raise RuntimeError("frame buffer has no storage; call resize() first")
        return self._pixels

    def _row(self, y: int) -> int:
        return y

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"pixel ({x}, {y}) outside {self._width}x{self._height} buffer")
        return self._row(y) * self._width + x

    def clear(self, gray: int = 0) -> None:
        """Fill every byte of every pixel with the gray value."""
        if not 0 <= gray <= 0xFF:
            raise ValueError(f"gray value must be in 0..255, got {gray}")
        pixels = self._storage()
        pixels[:] = [gray * 0x01010101] * len(pixels)

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Store a raw 32-bit pixel value."""
        if not 0 <= color <= 0xFFFFFFFF:
            raise ValueError(f"pixel value must fit in 32 bits, got {color}")
        self._storage()[self._offset(x, y)] = color

    def set_rgb(self, x: int, y: int, r: int, g: int, b: int) -> None:
        """Store a pixel from 8-bit red, green and blue channels."""
        for channel in (r, g, b):
            if not 0 <= channel <= 0xFF:
                raise ValueError(f"colour channel must be in 0..255, got {channel}")
        self.set_pixel(x, y, (r << 16) + (g << 8) + b)

    def get_pixel(self, x: int, y: int) -> int:
        return self._storage()[self._offset(x, y)]

    def to_bytes(self) -> bytes:
        """Return the storage as little-endian 32-bit pixels in memory order."""
        return b"".join(pixel.to_bytes(4, "little") for pixel in self._storage())


class BMPFormatFrameBuffer(FrameBuffer):
    """A frame buffer stored bottom-up, addressed with the origin at the top left."""

    def _row(self, y: int) -> int:
        return self._height - 1 - y


class WindowFrameBuffer(FrameBuffer):
    """The buffer handed to the display, filled by copying another buffer."""

    def flash(self, frame_buffer: FrameBuffer) -> None:
        """Copy the raw storage of another buffer into this one."""
        source = frame_buffer._storage()
        target = self._storage()
        if len(source) < len(target):
            raise ValueError("source frame buffer is smaller than the target")
        target[:] = source[: len(target)]