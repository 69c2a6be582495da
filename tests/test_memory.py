import pytest

from ftkit import memory


def test_allocate_is_zero_filled():
    buf = memory.allocate(5)
    assert buf == bytearray(5)
    assert len(buf) == 5


def test_allocate_negative_raises():
    with pytest.raises(ValueError):
        memory.allocate(-1)


def test_zero_clears_prefix_only():
    buf = bytearray(b"abcdef")
    result = memory.zero(buf, 3)
    assert result is buf
    assert buf == bytearray(b"\x00\x00\x00def")


def test_zero_too_long_raises():
    with pytest.raises(ValueError):
        memory.zero(bytearray(2), 3)


def test_fill_uses_low_byte():
    buf = bytearray(b"xxxx")
    memory.fill(buf, 256 + ord("z"), 3)
    assert buf == bytearray(b"zzzx")


def test_fill_zero_count_leaves_buffer():
    buf = bytearray(b"abc")
    memory.fill(buf, ord("q"), 0)
    assert buf == bytearray(b"abc")


def test_copy_copies_count_bytes():
    dest = bytearray(b"......")
    result = memory.copy(dest, b"hello", 4)
    assert result is dest
    assert dest == bytearray(b"hell..")


def test_copy_source_too_short_raises():
    with pytest.raises(ValueError):
        memory.copy(bytearray(10), b"ab", 3)


def test_copy_until_stops_after_stop_byte():
    dest = bytearray(b"________")
    end = memory.copy_until(dest, b"key=value", ord("="), 8)
    assert end == len("key=")
    assert dest[:end] == bytearray(b"key=")
    assert dest[end:] == bytearray(b"____")


def test_copy_until_without_stop_copies_all_and_returns_none():
    dest = bytearray(5)
    assert memory.copy_until(dest, b"abcde", ord("z"), 5) is None
    assert dest == bytearray(b"abcde")


def test_find_byte_found_and_missing():
    data = b"find me"
    assert memory.find_byte(data, ord("m"), len(data)) == data.index(b"m")
    assert memory.find_byte(data, ord("m"), 3) is None


def test_find_byte_masks_value():
    data = b"abc"
    assert memory.find_byte(data, 256 + ord("c"), 3) == 2


def test_compare_equal_and_different():
    assert memory.compare(b"abc", b"abc", 3) == 0
    assert memory.compare(b"abc", b"abd", 3) == ord("c") - ord("d")
    assert memory.compare(b"abc", b"abd", 2) == 0


def test_compare_is_antisymmetric():
    a, b = b"\x01\xff", b"\x01\x10"
    assert memory.compare(a, b, 2) == -memory.compare(b, a, 2)
    assert memory.compare(a, b, 2) > 0


def test_move_forward_overlap():
    buf = bytearray(b"abcdef")
    memory.move(buf, 2, 0, 4)
    assert buf == bytearray(b"ababcd")


def test_move_backward_overlap():
    buf = bytearray(b"abcdef")
    memory.move(buf, 0, 2, 4)
    assert buf == bytearray(b"cdefef")


def test_move_out_of_range_raises():
    with pytest.raises(ValueError):
        memory.move(bytearray(4), 2, 0, 3)