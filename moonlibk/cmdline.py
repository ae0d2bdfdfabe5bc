"""Search for a tag in a comma-separated boot command line."""

from __future__ import annotations

__all__ = ["find_tag"]


def find_tag(tag: str | None, cmdline: str | None) -> bool:
    """Tell whether *tag* appears in the comma-separated *cmdline*.

    The scan follows the boot-time parser exactly: a segment before a
    comma matches when it is a prefix of *tag*; the final segment matches
    when it starts with *tag*.  The character right after a comma is
    always taken into the next segment, even if it is another comma.
    """
    if not tag or not cmdline:
        return False if tag is None or cmdline is None else _scan(tag, cmdline)
    return _scan(tag, cmdline)


def _scan(tag: str, cmdline: str) -> bool:
    # Each comma consumes an extra character, so the scan may run past the
    # end of the line; those positions read as NUL.
    chars = iter(cmdline + "\0" * (cmdline.count(",") + 1))
    segment: list[str] = []
    for _ in range(len(cmdline)):
        char = next(chars)
        if char == ",":
            if tag.startswith("".join(segment)):
                return True
            segment.clear()
            char = next(chars)
        segment.append(char)

    last = ("".join(segment) + "\0" * len(tag))[:len(tag)]
    return last == tag