"""Small bit, alignment and range helpers shared by the kernel code."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

__all__ = [
    "BASE_2",
    "BASE_8",
    "BASE_10",
    "BASE_16",
    "Range",
    "check_bit",
    "lower_32",
    "align",
]

BASE_2 = 2
BASE_8 = 8
BASE_10 = 10
BASE_16 = 16


@dataclass(frozen=True)
class Range:
    """A span of *limit* consecutive values starting at *base*."""

    base: int
    limit: int

    def __post_init__(self) -> None:
        if self.limit < 0:
            raise ValueError("limit must not be negative")

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.base, self.base + self.limit))

    def __len__(self) -> int:
        return self.limit

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.base <= value < self.base + self.limit


def check_bit(value: int, bit_index: int) -> int:
    """Return bit *bit_index* of *value* as 0 or 1."""
    if bit_index < 0:
        raise ValueError("bit_index must not be negative")
    return (value >> bit_index) & 1


def lower_32(value: int) -> int:
    """Return the lower 32 bits of *value*."""
    return value & 0xFFFFFFFF


def align(size: int, alignment: int) -> int:
    """Round *size* up to a multiple of the power-of-two *alignment*."""
    if alignment <= 0 or alignment & (alignment - 1):
        raise ValueError("alignment must be a positive power of two")
    return (size + alignment - 1) & ~(alignment - 1)