"""Decoding of the boot protocol structures a stivale2 loader hands over.

Every parser takes the raw little-endian bytes of one packed structure,
starting with its tag header where it has one.
"""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass

__all__ = [
    "MmapType",
    "MmapEntry",
    "Module",
    "FramebufferInfo",
    "SmpInfo",
    "parse_tag_header",
    "parse_memmap",
    "parse_framebuffer",
    "parse_modules",
    "parse_smp",
    "parse_struct",
]

# Header tags: kernel to bootloader.
HEADER_TAG_ANY_VIDEO_ID = 0xC75C9FA92A44C4DB
HEADER_TAG_FRAMEBUFFER_ID = 0x3ECC1BC43D0F7971
HEADER_TAG_FB_MTRR_ID = 0x4C7BB07731282E00
HEADER_TAG_TERMINAL_ID = 0xA85D499B1823BE72
HEADER_TAG_SMP_ID = 0x1AB015085F3273DF
HEADER_TAG_5LV_PAGING_ID = 0x932F477032007E8F
HEADER_TAG_UNMAP_NULL_ID = 0x92919432B16FE7E7

TERM_CB_DEC = 10
TERM_CB_BELL = 20

# Struct tags: bootloader to kernel.
STRUCT_TAG_PMRS_ID = 0x5DF266A64047B6BD
STRUCT_TAG_CMDLINE_ID = 0xE5E76A1B4597A781
STRUCT_TAG_MEMMAP_ID = 0x2187F79E8612DE07
STRUCT_TAG_FRAMEBUFFER_ID = 0x506461D2950408FA
STRUCT_TAG_EDID_ID = 0x968609D7AF96B845
STRUCT_TAG_TEXTMODE_ID = 0x38D74C23E0DCA893
STRUCT_TAG_FB_MTRR_ID = 0x6BC1A78EBE871172
STRUCT_TAG_TERMINAL_ID = 0xC2B3F4C3233B0974
STRUCT_TAG_MODULES_ID = 0x4B6FE466AADE04CE
STRUCT_TAG_RSDP_ID = 0x9E1786930A375E78
STRUCT_TAG_EPOCH_ID = 0x566A7BED888E1407
STRUCT_TAG_FIRMWARE_ID = 0x359D837855E3858C
STRUCT_TAG_EFI_SYSTEM_TABLE_ID = 0x4BC5EC15845B558E
STRUCT_TAG_KERNEL_FILE_ID = 0xE599D90C2975584A
STRUCT_TAG_KERNEL_SLIDE_ID = 0xEE80847D01506C57
STRUCT_TAG_SMBIOS_ID = 0x274BD246C62BF7D1
STRUCT_TAG_SMP_ID = 0x34D1D96339647025
STRUCT_TAG_PXE_SERVER_INFO = 0x29D1E96239247032
STRUCT_TAG_MMIO32_UART = 0xB813F9B8DBC78797
STRUCT_TAG_DTB = 0xABB29BD49A2833FA
STRUCT_TAG_VMAP = 0xB0ED257DB18CB58F

PMR_EXECUTABLE = 1 << 0
PMR_WRITABLE = 1 << 1
PMR_READABLE = 1 << 2

FBUF_MMODEL_RGB = 1
FIRMWARE_BIOS = 1 << 0

BOOTLOADER_BRAND_SIZE = 64
BOOTLOADER_VERSION_SIZE = 64
MODULE_STRING_SIZE = 128

_TAG = struct.Struct("<QQ")
_COUNT = struct.Struct("<Q")
_MMAP_ENTRY = struct.Struct("<QQII")
_FRAMEBUFFER = struct.Struct("<QHHHHB6B")
_MODULE = struct.Struct(f"<QQ{MODULE_STRING_SIZE}s")
_SMP_HEAD = struct.Struct("<QIIQ")
_SMP_INFO = struct.Struct("<IIQQQ")
_STRUCT = struct.Struct(f"<{BOOTLOADER_BRAND_SIZE}s{BOOTLOADER_VERSION_SIZE}sQ")


class MmapType(enum.IntEnum):
    """Kinds of region in the memory map."""

    USABLE = 1
    RESERVED = 2
    ACPI_RECLAIMABLE = 3
    ACPI_NVS = 4
    BAD_MEMORY = 5
    BOOTLOADER_RECLAIMABLE = 0x1000
    KERNEL_AND_MODULES = 0x1001
    FRAMEBUFFER = 0x1002


@dataclass(frozen=True)
class MmapEntry:
    """One region of physical memory; *type* is an MmapType when known."""

    base: int
    length: int
    type: MmapType | int


@dataclass(frozen=True)
class Module:
    """A module loaded next to the kernel."""

    begin: int
    end: int
    string: str


@dataclass(frozen=True)
class FramebufferInfo:
    """The framebuffer the bootloader set up."""

    addr: int
    width: int
    height: int
    pitch: int
    bpp: int
    memory_model: int
    red_mask_size: int
    red_mask_shift: int
    green_mask_size: int
    green_mask_shift: int
    blue_mask_size: int
    blue_mask_shift: int


@dataclass(frozen=True)
class SmpInfo:
    """Start-up information for one processor."""

    processor_id: int
    lapic_id: int
    target_stack: int
    goto_address: int
    extra_argument: int


def _unpack(layout: struct.Struct, data: bytes, offset: int) -> tuple:
    if offset < 0 or len(data) < offset + layout.size:
        raise ValueError(
            f"need {layout.size} bytes at offset {offset}, have {max(len(data) - offset, 0)}"
        )
    return layout.unpack_from(data, offset)


def _c_string(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("latin-1")


def _expect_tag(data: bytes, identifier: int) -> None:
    found, _ = parse_tag_header(data, 0)
    if found != identifier:
        raise ValueError(f"expected tag {identifier:#018x}, found {found:#018x}")


def parse_tag_header(data: bytes, offset: int = 0) -> tuple[int, int]:
    """Return the (identifier, next) pair of the tag at *offset*."""
    return _unpack(_TAG, bytes(data), offset)


def parse_memmap(data: bytes) -> list[MmapEntry]:
    """Decode a memory-map tag into its entries."""
    data = bytes(data)
    _expect_tag(data, STRUCT_TAG_MEMMAP_ID)
    (count,) = _unpack(_COUNT, data, _TAG.size)
    start = _TAG.size + _COUNT.size
    entries = []
    for index in range(count):
        base, length, kind, _ = _unpack(_MMAP_ENTRY, data, start + index * _MMAP_ENTRY.size)
        try:
            kind = MmapType(kind)
        except ValueError:
            pass
        entries.append(MmapEntry(base, length, kind))
    return entries


def parse_framebuffer(data: bytes) -> FramebufferInfo:
    """Decode a framebuffer tag."""
    data = bytes(data)
    _expect_tag(data, STRUCT_TAG_FRAMEBUFFER_ID)
    return FramebufferInfo(*_unpack(_FRAMEBUFFER, data, _TAG.size))


def parse_modules(data: bytes) -> list[Module]:
    """Decode a modules tag into its modules."""
    data = bytes(data)
    _expect_tag(data, STRUCT_TAG_MODULES_ID)
    (count,) = _unpack(_COUNT, data, _TAG.size)
    start = _TAG.size + _COUNT.size
    modules = []
    for index in range(count):
        begin, end, raw = _unpack(_MODULE, data, start + index * _MODULE.size)
        modules.append(Module(begin, end, _c_string(raw)))
    return modules


def parse_smp(data: bytes) -> tuple[int, int, list[SmpInfo]]:
    """Decode an SMP tag into (flags, bsp_lapic_id, processors)."""
    data = bytes(data)
    _expect_tag(data, STRUCT_TAG_SMP_ID)
    flags, bsp_lapic_id, _, count = _unpack(_SMP_HEAD, data, _TAG.size)
    start = _TAG.size + _SMP_HEAD.size
    cpus = [
        SmpInfo(*_unpack(_SMP_INFO, data, start + index * _SMP_INFO.size))
        for index in range(count)
    ]
    return flags, bsp_lapic_id, cpus


def parse_struct(data: bytes) -> tuple[str, str, int]:
    """Decode the top-level structure into (brand, version, tags address)."""
    brand, version, tags = _unpack(_STRUCT, bytes(data), 0)
    return _c_string(brand), _c_string(version), tags