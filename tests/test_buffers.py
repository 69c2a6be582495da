import pytest

from ftkit.buffers import StringBuffer, duplicate


def test_new_buffer_is_empty():
    buf = StringBuffer(5)
    assert str(buf) == ""
    assert len(buf) == 0
    assert buf.capacity == 5


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        StringBuffer(-1)


def test_copy_sets_contents():
    buf = StringBuffer(10)
    buf.copy("hello")
    assert str(buf) == "hello"
    assert len(buf) == 5


def test_copy_replaces_longer_contents():
    buf = StringBuffer(10)
    buf.copy("abcdefgh")
    buf.copy("xy")
    assert str(buf) == "xy"


def test_copy_too_long_raises():
    buf = StringBuffer(3)
    with pytest.raises(ValueError):
        buf.copy("abcd")


def test_copy_fills_capacity_exactly():
    buf = StringBuffer(4)
    buf.copy("abcd")
    assert str(buf) == "abcd"


def test_cat_appends():
    first, second = "foo", "barbaz"
    buf = StringBuffer(20).copy(first)
    buf.cat(second)
    assert str(buf) == first + second


def test_cat_overflow_raises_and_keeps_contents():
    buf = StringBuffer(5).copy("abc")
    with pytest.raises(ValueError):
        buf.cat("def")
    assert str(buf) == "abc"


def test_ncat_limits_count():
    first, second = "ab", "cdefg"
    buf = StringBuffer(10).copy(first)
    buf.ncat(second, 2)
    assert str(buf) == first + second[:2]


def test_ncat_count_larger_than_text():
    first, second = "ab", "cd"
    buf = StringBuffer(10).copy(first)
    buf.ncat(second, 100)
    assert str(buf) == first + second


def test_ncat_negative_raises():
    with pytest.raises(ValueError):
        StringBuffer(4).ncat("a", -1)


def test_lcat_truncates_and_reports_full_length():
    first, second = "abc", "defghij"
    buf = StringBuffer(10).copy(first)
    result = buf.lcat(second, 6)
    assert result == len(first) + len(second)
    assert str(buf) == first + second[:2]
    assert len(buf) == 5


def test_lcat_with_room_appends_everything():
    first, second = "abc", "de"
    buf = StringBuffer(10).copy(first)
    result = buf.lcat(second, 11)
    assert result == len(first) + len(second)
    assert str(buf) == first + second


def test_lcat_size_not_beyond_current_length():
    first, second = "abcdef", "xyz"
    buf = StringBuffer(10).copy(first)
    result = buf.lcat(second, 4)
    assert result == 4 + len(second)
    assert str(buf) == first


def test_lcat_size_beyond_buffer_raises():
    with pytest.raises(ValueError):
        StringBuffer(3).lcat("a", 5)


def test_ncopy_shorter_text_terminates():
    buf = StringBuffer(10).copy("abcdef")
    buf.ncopy("xy", 4)
    assert str(buf) == "xy"


def test_ncopy_without_room_for_terminator_keeps_tail():
    original, replacement = "abcdef", "xyz"
    buf = StringBuffer(10).copy(original)
    buf.ncopy(replacement, 3)
    assert str(buf) == replacement + original[3:]


def test_ncopy_count_too_large_raises():
    with pytest.raises(ValueError):
        StringBuffer(2).ncopy("ab", 4)


def test_clear_empties_string():
    buf = StringBuffer(8).copy("content")
    buf.clear()
    assert str(buf) == ""
    assert len(buf) == 0
    assert buf.capacity == 8


def test_duplicate_round_trip():
    text = "copy me"
    dup = duplicate(text)
    assert str(dup) == text
    assert dup.capacity == len(text)


def test_duplicate_is_independent():
    text = "abc"
    first = duplicate(text)
    second = duplicate(str(first))
    first.clear()
    assert str(second) == text
    assert str(first) == ""


def test_text_is_cut_at_nul():
    buf = StringBuffer(10).copy("ab\0cd")
    assert str(buf) == "ab"