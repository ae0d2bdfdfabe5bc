# moonlibk

A small library of helpers of the kind a hobby kernel keeps in its support
code, usable from ordinary Python:

- `moonlibk.printf`: a compact printf engine (`sprintf`, `snprintf`,
  `vsnprintf`, `fctprintf`). It handles the conversions
  `d i u x X o b c s p f F e E g G` and `%%`, the flags `0 - + space #`,
  a width and a precision (either may be `*`) and the length modifiers
  `hh h l ll t j z`. Integer arguments are truncated to the width of the
  C type the length modifier selects.
- `moonlibk.numfmt`: the number formatters behind it (`format_integer`,
  `format_fixed`, `format_exponential`, with the `Flags` enum). Conversion
  buffers hold at most 32 characters, so very wide zero padding is cut.
- `moonlibk.kstring`: `memcmp`, `strcmp`, `strncmp`, `strrev` and `isdigit`
  with the kernel's own return conventions: `memcmp` returns 1 when the
  first buffer holds the smaller byte, `strcmp` returns -1 when the lengths
  differ and 1 when a character differs, `strncmp` returns 0 or -1.
- `moonlibk.cmdline`: `find_tag` looks up a tag in a comma-separated boot
  command line.
- `moonlibk.bitmap`: a `Bitmap` of bits with `set`, `clear`, `get`, `purge`,
  `fill` and `dump` (which logs the bits and returns them as a string),
  plus `page_to_bit` / `bit_to_page` for 4 KiB pages.
- `moonlibk.linked_list`: a singly linked `Node` with `append`, `set_next`
  and iteration over the nodes from it onwards.
- `moonlibk.common`: `check_bit`, `lower_32`, `align` (power-of-two
  alignment) and an iterable `Range` of `base` and `limit`.
- `moonlibk.stivale2`: parsers for stivale2 boot-protocol structures
  (`parse_tag_header`, `parse_memmap`, `parse_framebuffer`,
  `parse_modules`, `parse_smp`, `parse_struct`) returning `MmapEntry`,
  `Module`, `FramebufferInfo` and `SmpInfo` records; memory-map types are
  given as `MmapType` where known.
- `moonlibk.graphics`: an in-memory double-buffered `Framebuffer` with
  `buffer_pixel`, `swap_buffers`, `flush_back_buffer`, `draw_image`
  (packed RGB, `ImageType.RGB`), `fill_rect` and `pixel` to read back the
  visible colour.

## Install

    pip install .

## Examples

    from moonlibk.printf import sprintf, snprintf
    from moonlibk.bitmap import Bitmap

    sprintf("%08x|%-5d|%s", 0xBEEF, 42, "moon")   # '0000beef|42   |moon'
    snprintf(4, "%d", 123456)                      # ('123', 6)

    bits = Bitmap(16)
    bits.set(3)
    bits.get(3)                                    # 1

## What it does not do

This is a library only: it has no command-line tool. The framebuffer is an
array in memory and is never shown on a real display, and the stivale2
parsers decode bytes they are given rather than reading anything from
firmware or a bootloader.

## Tests

    pip install .[test]
    pytest