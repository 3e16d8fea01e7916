import pytest
from hypothesis import given
from hypothesis import strategies as st

from klib.bitmap import Bitmap
from klib.printf import hex_dump


def test_new_bitmap_is_all_false():
    b = Bitmap(40)
    assert len(b) == 40
    assert b.count(0, 40, False) == 40
    assert b.none(0, 40)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Bitmap(-1)


def test_set_and_test():
    b = Bitmap(10)
    b.set(3, True)
    assert b.test(3) is True
    assert b.test(2) is False
    b.set(3, False)
    assert b.test(3) is False


def test_mark_reset_flip():
    b = Bitmap(8)
    b.mark(5)
    assert b.test(5)
    b.flip(5)
    assert not b.test(5)
    b.flip(5)
    assert b.test(5)
    b.reset(5)
    assert not b.test(5)


@pytest.mark.parametrize("idx", [-1, 10, 11])
def test_index_out_of_range(idx):
    b = Bitmap(10)
    with pytest.raises(IndexError):
        b.test(idx)
    with pytest.raises(IndexError):
        b.mark(idx)


def test_set_multiple_and_count():
    b = Bitmap(20)
    b.set_multiple(4, 6, True)
    assert b.count(0, 20, True) == 6
    assert b.all(4, 6)
    assert not b.all(3, 6)
    assert b.any(0, 5)
    assert b.none(10, 10)


def test_set_all():
    b = Bitmap(37)
    b.set_all(True)
    assert b.all(0, 37)
    b.set_all(False)
    assert b.none(0, 37)


def test_range_errors():
    b = Bitmap(10)
    with pytest.raises(IndexError):
        b.set_multiple(5, 6, True)
    with pytest.raises(IndexError):
        b.count(11, 0, True)
    with pytest.raises(ValueError):
        b.contains(0, -1, True)


def test_empty_range_contains_nothing():
    b = Bitmap(10)
    assert b.contains(10, 0, False) is False
    assert b.all(3, 0) is True


def test_scan_finds_first_group():
    b = Bitmap(16)
    b.set_multiple(0, 3, True)
    b.mark(5)
    assert b.scan(0, 2, False) == 3
    assert b.scan(0, 3, False) == 6
    assert b.scan(0, 3, True) == 0
    assert b.scan(1, 3, True) is None


def test_scan_zero_count_returns_start():
    b = Bitmap(8)
    assert b.scan(6, 0, True) == 6


def test_scan_larger_than_bitmap():
    b = Bitmap(4)
    assert b.scan(0, 5, False) is None


def test_scan_start_out_of_range():
    with pytest.raises(IndexError):
        Bitmap(4).scan(5, 1, False)


def test_scan_and_flip():
    b = Bitmap(8)
    assert b.scan_and_flip(0, 3, False) == 0
    assert b.all(0, 3)
    assert b.scan_and_flip(0, 3, False) == 3
    assert b.scan_and_flip(0, 3, False) is None
    assert b.count(0, 8, True) == 6


def test_file_size_whole_words():
    assert Bitmap(0).file_size() == 0
    assert Bitmap(1).file_size() == 4
    assert Bitmap(32).file_size() == Bitmap(1).file_size()
    assert Bitmap(33).file_size() == 2 * Bitmap(1).file_size()


def test_to_bytes_is_little_endian():
    b = Bitmap(16)
    b.mark(0)
    b.mark(9)
    data = b.to_bytes()
    assert data[0] == 1
    assert data[1] == 2
    assert len(data) == b.file_size()


def test_from_bytes_masks_unused_bits():
    b = Bitmap.from_bytes(3, b"\xff\xff\xff\xff")
    assert b.count(0, 3, True) == 3
    assert b.to_bytes() == b"\x07\x00\x00\x00"


def test_from_bytes_too_short():
    with pytest.raises(ValueError):
        Bitmap.from_bytes(33, b"\x00" * 4)


def test_dump_matches_hex_dump():
    b = Bitmap(32)
    b.mark(0)
    out = b.dump()
    assert out == hex_dump(0, b.to_bytes(), False)
    assert out.startswith("00000000  01 ")


@given(st.lists(st.booleans(), max_size=100))
def test_round_trip_through_bytes(values):
    b = Bitmap(len(values))
    for idx, value in enumerate(values):
        b.set(idx, value)
    restored = Bitmap.from_bytes(len(values), b.to_bytes())
    assert [restored.test(i) for i in range(len(values))] == values
    assert restored.count(0, len(values), True) == sum(values)


@given(st.lists(st.booleans(), min_size=1, max_size=60), st.integers(0, 5))
def test_scan_result_is_a_matching_run(values, cnt):
    b = Bitmap(len(values))
    for idx, value in enumerate(values):
        b.set(idx, value)
    idx = b.scan(0, cnt, False)
    if idx is None:
        assert all(True in values[i : i + cnt] for i in range(len(values) - cnt + 1))
    else:
        assert b.none(idx, cnt)
        assert all(True in values[i : i + cnt] for i in range(idx))