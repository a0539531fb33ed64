"""Byte-range parsing for `Range: bytes=<start>-<end>` request headers."""

from __future__ import annotations

from dataclasses import dataclass

from core.errors import RangeNotSatisfiableError


@dataclass(frozen=True)
class ByteInterval:
    """Contiguous run of bytes, inclusive on both ends.

    Construction does not validate the bounds; an inverted interval
    (``start > end``) is representable and simply has zero length.
    """

    start: int
    end: int

    @property
    def length(self) -> int:
        """Number of bytes covered, never negative."""
        return max(0, self.end - self.start + 1)

    @property
    def is_empty(self) -> bool:
        return self.start > self.end

    @classmethod
    def whole(cls, resource_size: int) -> ByteInterval:
        """Interval spanning an entire resource of ``resource_size`` bytes."""
        return cls(0, resource_size - 1)


def _parse_bound(token: str) -> int | None:
    token = token.strip()
    if not (token.isascii() and token.isdigit()):
        return None
    return int(token)


def parse_range(range_header: str, resource_size: int) -> ByteInterval:
    """Parse a raw ``Range`` header value into a byte interval.

    Only the ``bytes=<start>-<end>`` form and its one-sided omissions are
    recognised. A missing or malformed bound falls back to ``0`` for the start
    and ``resource_size - 1`` for the end; nothing is ever rejected here.

    Suffix ranges are not special: ``bytes=-500`` has no start token, so it
    yields ``start=0, end=500`` rather than the last 500 bytes.

    Args:
        range_header: Value of the ``Range`` request header.
        resource_size: Total size of the resource in bytes.

    Returns:
        The requested interval, unvalidated against ``resource_size``.
    """
    _, sep, spec = range_header.partition("=")
    if not sep:
        spec = ""

    tokens = spec.split("-")
    start = 0
    end = resource_size - 1

    first = _parse_bound(tokens[0])
    if first is not None:
        start = first

    if len(tokens) > 1:
        second = _parse_bound(tokens[1])
        if second is not None:
            end = second

    return ByteInterval(start, end)


def ensure_satisfiable(interval: ByteInterval, resource_size: int) -> ByteInterval:
    """Check a parsed interval against the resource before streaming it.

    An end bound past the last byte is clamped to ``resource_size - 1``.

    Raises:
        RangeNotSatisfiableError: If the interval is inverted or starts at
            or beyond the end of the resource.
    """
    if interval.is_empty or interval.start >= resource_size:
        raise RangeNotSatisfiableError(
            f"Range {interval.start}-{interval.end} not satisfiable "
            f"for {resource_size} bytes",
            resource_size=resource_size,
            context={"start": interval.start, "end": interval.end},
        )
    if interval.end >= resource_size:
        return ByteInterval(interval.start, resource_size - 1)
    return interval
