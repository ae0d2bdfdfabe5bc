"""A fixed-size bitmap, as used for page-frame allocation."""

from __future__ import annotations

import logging

__all__ = [
    "Bitmap",
    "BITMAP_USED",
    "BITMAP_FREE",
    "BLOCK_SIZE",
    "PAGE_SIZE",
    "page_to_bit",
    "bit_to_page",
]

BLOCK_SIZE = 8
BITMAP_USED = 1
BITMAP_FREE = 0
PAGE_SIZE = 0x1000

_log = logging.getLogger(__name__)


def page_to_bit(page: int) -> int:
    """Return the bitmap index of the page at address *page*."""
    return page // PAGE_SIZE


def bit_to_page(bit: int) -> int:
    """Return the address of the page tracked by bitmap index *bit*."""
    return bit * PAGE_SIZE


class Bitmap:
    """A bitmap of *size* bits, all initially free (0)."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self.pool = bytearray((size + BLOCK_SIZE - 1) // BLOCK_SIZE)

    def __len__(self) -> int:
        return self.size

    def _locate(self, bit: int) -> tuple[int, int]:
        if not 0 <= bit < self.size:
            raise IndexError(f"bit {bit} out of range for bitmap of {self.size} bits")
        return divmod(bit, BLOCK_SIZE)

    def set(self, bit: int) -> None:
        """Mark *bit* as used."""
        index, offset = self._locate(bit)
        self.pool[index] |= 1 << offset

    def clear(self, bit: int) -> None:
        """Mark *bit* as free."""
        index, offset = self._locate(bit)
        self.pool[index] &= ~(1 << offset) & 0xFF

    def get(self, bit: int) -> int:
        """Return 1 if *bit* is used, 0 if it is free."""
        index, offset = self._locate(bit)
        return (self.pool[index] >> offset) & 1

    def purge(self) -> None:
        """Mark every bit as free."""
        for bit in range(self.size):
            self.clear(bit)

    def fill(self) -> None:
        """Mark every bit as used."""
        for bit in range(self.size):
            self.set(bit)

    def __iter__(self):
        return (self.get(bit) for bit in range(self.size))

    def dump(self) -> str:
        """Log every bit in order and return them as a string of 0s and 1s."""
        bits = "".join(str(value) for value in self)
        _log.debug("%s", bits)
        return bits