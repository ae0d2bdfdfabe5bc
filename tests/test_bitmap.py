import pytest

from moonlibk.bitmap import (
    BITMAP_FREE,
    BITMAP_USED,
    PAGE_SIZE,
    Bitmap,
    bit_to_page,
    page_to_bit,
)


def test_new_bitmap_is_free():
    bmp = Bitmap(20)
    assert all(bmp.get(bit) == BITMAP_FREE for bit in range(20))
    assert len(bmp) == 20


def test_pool_size_rounds_up_to_bytes():
    assert len(Bitmap(9).pool) == 2
    assert len(Bitmap(8).pool) == 1


def test_set_and_get():
    bmp = Bitmap(16)
    bmp.set(10)
    assert bmp.get(10) == BITMAP_USED
    assert bmp.get(9) == BITMAP_FREE
    assert bmp.get(11) == BITMAP_FREE


def test_set_bit_layout_in_pool():
    bmp = Bitmap(16)
    bmp.set(0)
    bmp.set(9)
    assert bmp.pool == bytearray([0b00000001, 0b00000010])


def test_clear():
    bmp = Bitmap(16)
    bmp.set(3)
    bmp.clear(3)
    assert bmp.get(3) == BITMAP_FREE


def test_fill_and_purge():
    bmp = Bitmap(13)
    bmp.fill()
    assert list(bmp) == [BITMAP_USED] * 13
    bmp.purge()
    assert list(bmp) == [BITMAP_FREE] * 13


def test_dump_reflects_bits():
    bmp = Bitmap(4)
    bmp.set(1)
    bmp.set(3)
    assert bmp.dump() == "0101"


def test_out_of_range_raises():
    bmp = Bitmap(8)
    with pytest.raises(IndexError):
        bmp.set(8)
    with pytest.raises(IndexError):
        bmp.get(-1)


def test_negative_size_raises():
    with pytest.raises(ValueError):
        Bitmap(-1)


@pytest.mark.parametrize("bit", [0, 1, 7, 255, 4096])
def test_page_bit_round_trip(bit):
    assert page_to_bit(bit_to_page(bit)) == bit


def test_page_to_bit_truncates_within_page():
    assert page_to_bit(PAGE_SIZE + 5) == 1
    assert bit_to_page(1) == PAGE_SIZE