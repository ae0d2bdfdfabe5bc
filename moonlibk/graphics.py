"""A double-buffered framebuffer with simple drawing primitives."""

from __future__ import annotations

import enum
from array import array
from collections.abc import MutableSequence

__all__ = ["ImageType", "Framebuffer"]

_PIXEL_BYTES = 4


class ImageType(enum.IntEnum):
    """Pixel layouts accepted by draw_image."""

    RGB = 0


class Framebuffer:
    """A screen of 32-bit pixels drawn through a back buffer.

    ``screen`` stands for the visible framebuffer memory; drawing goes to
    ``back`` and becomes visible on ``swap_buffers``.
    """

    def __init__(self, width: int, height: int, pitch: int, bpp: int = 32) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be positive")
        if pitch % _PIXEL_BYTES or pitch // _PIXEL_BYTES < width:
            raise ValueError("pitch must be a multiple of 4 covering the whole row")
        self.width = width
        self.height = height
        self.pitch = pitch
        self.bpp = bpp
        self.screen = self.create_buffer()
        self.back = self.create_buffer()

    @property
    def stride(self) -> int:
        """Pixels per row, padding included."""
        return self.pitch // _PIXEL_BYTES

    def create_buffer(self) -> array:
        """Return a new, cleared buffer the size of the screen."""
        return array("I", bytes(self.height * self.pitch))

    def buffer_pixel(self, x: int, y: int, color: int) -> None:
        """Write *color* at (*x*, *y*) in the back buffer."""
        if not (0 <= x < self.stride and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is off screen")
        self.back[y * self.stride + x] = color & 0xFFFFFFFF

    def swap_buffers(self, custom_buffer: MutableSequence[int] | None = None) -> None:
        """Copy the back buffer, or *custom_buffer*, onto the screen."""
        source = self.back if custom_buffer is None else custom_buffer
        if len(source) < len(self.screen):
            raise ValueError("buffer is smaller than the screen")
        self.screen[:] = array("I", (value & 0xFFFFFFFF for value in source[:len(self.screen)]))

    def flush_back_buffer(self, custom_buffer: MutableSequence[int] | None = None) -> None:
        """Clear the back buffer, or *custom_buffer*, to zero in place."""
        target = self.back if custom_buffer is None else custom_buffer
        target[:] = type(target)([0]) * len(target) if isinstance(target, list) \
            else array("I", bytes(len(target) * _PIXEL_BYTES))

    def draw_image(self, x: int, y: int, width: int, height: int,
                   image: bytes, img_type: ImageType = ImageType.RGB) -> None:
        """Draw a packed RGB image with its top-left corner at (*x*, *y*)."""
        if img_type != ImageType.RGB:
            return
        data = bytes(image)
        if len(data) < width * height * 3:
            raise ValueError("image data is shorter than width * height * 3 bytes")
        pixels = iter(range(0, width * height * 3, 3))
        for row in range(y, y + height):
            for col in range(x, x + width):
                j = next(pixels)
                self.buffer_pixel(col, row, data[j] << 16 | data[j + 1] << 8 | data[j + 2])
        self.swap_buffers()

    def fill_rect(self, x1: int, y1: int, x2: int, y2: int, color: int) -> None:
        """Fill the pixels with x1 <= x < x2 and y1 <= y < y2 with *color*."""
        for row in range(y1, y2):
            for col in range(x1, x2):
                self.buffer_pixel(col, row, color)
        self.swap_buffers()

    def pixel(self, x: int, y: int) -> int:
        """Return the visible colour at (*x*, *y*)."""
        if not (0 <= x < self.stride and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is off screen")
        return self.screen[y * self.stride + x]