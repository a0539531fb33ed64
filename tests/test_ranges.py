import pytest

from core.errors import RangeNotSatisfiableError
from core.ranges import ByteInterval, ensure_satisfiable, parse_range


def test_parse_both_bounds():
    assert parse_range("bytes=0-499", 1000) == ByteInterval(0, 499)


def test_parse_open_end():
    assert parse_range("bytes=500-", 1000) == ByteInterval(500, 999)


def test_parse_suffix_form_falls_back_to_default_start():
    # "last N bytes" is not interpreted; the missing start defaults to 0
    assert parse_range("bytes=-999", 1000) == ByteInterval(0, 999)
    assert parse_range("bytes=-500", 1000) == ByteInterval(0, 500)


@pytest.mark.parametrize("header", ["garbage", "", "bytes=", "bytes=-", "=", "bytes=abc-xyz"])
def test_parse_malformed_uses_defaults(header):
    assert parse_range(header, 1000) == ByteInterval(0, 999)


def test_parse_malformed_token_only_affects_its_bound():
    assert parse_range("bytes=10-oops", 1000) == ByteInterval(10, 999)
    assert parse_range("bytes=oops-20", 1000) == ByteInterval(0, 20)


def test_parse_rejects_signed_and_non_ascii_digits():
    assert parse_range("bytes=+5-10", 1000) == ByteInterval(0, 10)
    assert parse_range("bytes=٥-10", 1000) == ByteInterval(0, 10)


def test_parse_ignores_extra_tokens():
    assert parse_range("bytes=1-2-3", 1000) == ByteInterval(1, 2)


def test_parse_does_not_validate_bounds():
    assert parse_range("bytes=900-100", 1000) == ByteInterval(900, 100)
    assert parse_range("bytes=5000-6000", 1000) == ByteInterval(5000, 6000)


def test_interval_length():
    assert ByteInterval(100, 199).length == 100
    assert ByteInterval(5, 5).length == 1
    assert ByteInterval(10, 3).length == 0
    assert ByteInterval(10, 3).is_empty
    assert ByteInterval.whole(1000) == ByteInterval(0, 999)


def test_ensure_satisfiable_passes_valid_interval():
    interval = ByteInterval(0, 499)
    assert ensure_satisfiable(interval, 1000) is interval


def test_ensure_satisfiable_clamps_end():
    assert ensure_satisfiable(ByteInterval(900, 5000), 1000) == ByteInterval(900, 999)


@pytest.mark.parametrize(
    "interval, size",
    [
        (ByteInterval(500, 100), 1000),
        (ByteInterval(1000, 1200), 1000),
        (ByteInterval(0, 0), 0),
    ],
)
def test_ensure_satisfiable_rejects(interval, size):
    with pytest.raises(RangeNotSatisfiableError) as exc_info:
        ensure_satisfiable(interval, size)
    assert exc_info.value.resource_size == size
    assert exc_info.value.context["start"] == interval.start
