"""String and memory comparison helpers used by the kernel library."""

from __future__ import annotations

__all__ = ["memcmp", "strcmp", "strncmp", "strrev", "isdigit"]


def _terminated(text: str) -> str:
    """Return *text* up to, but not including, its first NUL character."""
    return text.split("\0", 1)[0]


def memcmp(src: bytes | bytearray | memoryview, dst: bytes | bytearray | memoryview,
           n: int) -> int:
    """Compare the first *n* bytes of *src* and *dst*.

    Returns 1 if *src* holds the smaller byte at the first difference,
    -1 if it holds the greater one, and 0 if the ranges are equal.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    left = bytes(src)
    right = bytes(dst)
    if n > len(left) or n > len(right):
        raise IndexError("comparison runs past the end of a buffer")
    for a, b in zip(left[:n], right[:n]):
        if a < b:
            return 1
        if a > b:
            return -1
    return 0


def strcmp(str1: str, str2: str) -> int:
    """Compare two strings.

    Returns 0 if they are equal, -1 if one is a proper prefix of the
    other (their lengths differ), and 1 if they differ at some character.
    """
    first = _terminated(str1)
    second = _terminated(str2)
    for a, b in zip(first, second):
        if a != b:
            return 1
    if len(first) != len(second):
        return -1
    return 0


def strncmp(str1: str, str2: str, n: int) -> int:
    """Compare at most *n* characters; 0 if they match, -1 otherwise.

    Positions past the end of a string compare as NUL characters.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    first = _terminated(str1)[:n].ljust(n, "\0")
    second = _terminated(str2)[:n].ljust(n, "\0")
    return 0 if first == second else -1


def strrev(text: str) -> str:
    """Return *text* with its characters in reverse order."""
    return _terminated(text)[::-1]


def isdigit(c: int | str) -> bool:
    """Tell whether *c*, a character or character code, is an ASCII digit."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        c = ord(c)
    return ord("0") <= c <= ord("9")